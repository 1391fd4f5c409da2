"""Tests for leasematch.services.store: RecordStore against in-memory SQLite."""
import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from leasematch.models.owner_preferences import OwnerPreferences
from leasematch.models.property import Property
from leasematch.models.tenant import TenantProfile
from leasematch.scoring.errors import NotFound, StoreError
from leasematch.services.store import RecordStore


@pytest.fixture
def store():
    return RecordStore()


class TestReads:

    def test_fetch_one_returns_dict(self, store, make_tenant):
        tenant_id = make_tenant(first_name='Sophie')

        tenant = store.fetch_one(TenantProfile, tenant_id)

        assert isinstance(tenant, dict)
        assert tenant['id'] == tenant_id
        assert tenant['first_name'] == 'Sophie'
        assert tenant['score'] is None

    def test_fetch_one_missing(self, store):
        with pytest.raises(NotFound) as exc_info:
            store.fetch_one(TenantProfile, 'nope')
        assert exc_info.value.collection == 'tenant_profiles'
        assert exc_info.value.http_status == 404

    def test_fetch_first_lowest_id(self, store, make_owner):
        make_owner(owner_id='first')
        make_owner(owner_id='second')

        assert store.fetch_first(OwnerPreferences)['owner_id'] == 'first'

    def test_fetch_first_empty(self, store):
        with pytest.raises(NotFound):
            store.fetch_first(OwnerPreferences)

    def test_list_records_ordering(self, store, make_tenant):
        make_tenant(first_name='Low', score=10)
        make_tenant(first_name='High', score=90)

        names = [t['first_name'] for t in store.list_records(TenantProfile, order_by=TenantProfile.score.desc())]

        assert names == ['High', 'Low']

    def test_list_records_multiple_order_by(self, store, make_tenant):
        make_tenant(first_name='B', score=50)
        make_tenant(first_name='A', score=50)

        rows = store.list_records(
            TenantProfile, order_by=[TenantProfile.score.desc(), TenantProfile.first_name],
        )

        assert [t['first_name'] for t in rows] == ['A', 'B']


class TestWrites:

    def test_insert_generates_id_and_defaults(self, store):
        tenant = store.insert(TenantProfile, {
            'first_name': 'Emma', 'last_name': 'Rodriguez', 'email': 'emma@example.com',
        })

        assert tenant['id']
        assert tenant['tenant_document_id_valid'] is False
        assert tenant['tenant_document_income_valid'] is False
        assert tenant['pets'] == []

    def test_insert_integrity_error_is_store_error(self, store):
        with pytest.raises(StoreError) as exc_info:
            store.insert(TenantProfile, {'first_name': 'No', 'last_name': 'Email', 'email': None})
        assert exc_info.value.kind == 'store_error'

    def test_upsert_inserts_then_updates(self, store):
        store.upsert(OwnerPreferences, 'owner_id', {'owner_id': 'o-1', 'lease_type': 'Furnished'})
        updated = store.upsert(OwnerPreferences, 'owner_id', {'owner_id': 'o-1', 'lease_type': 'Unfurnished'})

        assert updated['lease_type'] == 'Unfurnished'
        assert len(store.list_records(OwnerPreferences)) == 1

    def test_update_fields_all_together(self, store, make_tenant, db_session):
        tenant_id = make_tenant()

        store.update_fields(TenantProfile, tenant_id, {'score': 66, 'pros': '- p', 'cons': '- c'})

        tenant = store.fetch_one(TenantProfile, tenant_id)
        assert (tenant['score'], tenant['pros'], tenant['cons']) == (66, '- p', '- c')

    def test_update_fields_missing_record(self, store):
        with pytest.raises(StoreError) as exc_info:
            store.update_fields(TenantProfile, 'gone', {'score': 50})
        assert 'gone' in exc_info.value.message

    def test_update_fields_rejected_by_constraint_changes_nothing(self, store, make_tenant):
        tenant_id = make_tenant(score=20, pros='- keep', cons='- keep')

        with pytest.raises(StoreError):
            store.update_fields(TenantProfile, tenant_id, {'score': 500, 'pros': '- new', 'cons': '- new'})

        tenant = store.fetch_one(TenantProfile, tenant_id)
        assert (tenant['score'], tenant['pros'], tenant['cons']) == (20, '- keep', '- keep')

    def test_update_fields_database_error_rolls_back(self):
        session = MagicMock()
        session.query.return_value.filter.return_value.update.side_effect = OperationalError('UPDATE', {}, Exception('db down'))
        store = RecordStore(session_factory=lambda: session)

        with pytest.raises(StoreError) as exc_info:
            store.update_fields(TenantProfile, 't-1', {'score': 1})

        session.rollback.assert_called_once()
        session.close.assert_called_once()
        assert 'db down' in exc_info.value.detail

    def test_delete(self, store):
        prop = store.insert(Property, {'subject': 'Studio Lyon'})

        store.delete(Property, prop['id'])

        with pytest.raises(NotFound):
            store.fetch_one(Property, prop['id'])

    def test_delete_missing(self, store):
        with pytest.raises(NotFound):
            store.delete(Property, 12345)

    def test_delete_all_returns_count(self, store):
        store.insert(Property, {'subject': 'a'})
        store.insert(Property, {'subject': 'b'})

        assert store.delete_all(Property) == 2
        assert store.list_records(Property) == []
