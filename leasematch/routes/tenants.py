"""
Tenant routes: application submission, listing, detail, scheduling link.
"""
import logging
from datetime import datetime, timezone

from flask import Blueprint, jsonify, request
from sqlalchemy import nulls_last

from leasematch.models.tenant import TenantProfile
from leasematch.scoring.parser import split_bullets
from leasematch.services.scheduling import send_scheduling_link
from leasematch.services.store import RecordStore

logger = logging.getLogger('routes.tenants')

bp = Blueprint('tenants', __name__)

REQUIRED_FIELDS = ('first_name', 'last_name', 'email')

# Columns an applicant may fill in; workflow, document flags and scoring
# outputs are set elsewhere.
APPLICATION_FIELDS = (
    'first_name', 'last_name', 'email', 'phone', 'date_of_birth',
    'profession', 'employment_type', 'company_name', 'monthly_income',
    'income_interview', 'income_documents', 'guarantor_type', 'guarantor_income',
    'smoking_status', 'pets', 'lifestyle_description', 'guest_frequency',
    'noise_tolerance', 'languages', 'reason_for_moving', 'communication_preference',
)

_LIST_FIELDS = ('pets', 'languages')
_NUMERIC_FIELDS = ('monthly_income', 'guarantor_income')


def _with_bullets(tenant):
    tenant['pros_list'] = split_bullets(tenant.get('pros'))
    tenant['cons_list'] = split_bullets(tenant.get('cons'))
    return tenant


@bp.route('/api/tenants', methods=['POST'])
def submit_application():
    """Create a tenant profile from an application form."""
    data = request.get_json(silent=True) or {}

    missing = [f for f in REQUIRED_FIELDS if not str(data.get(f) or '').strip()]
    if missing:
        return jsonify({'error': f"Missing required fields: {', '.join(missing)}"}), 400
    for name in _LIST_FIELDS:
        if name in data and not isinstance(data[name], list):
            return jsonify({'error': f"'{name}' must be a list"}), 400
    for name in _NUMERIC_FIELDS:
        value = data.get(name)
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            return jsonify({'error': f"'{name}' must be a number"}), 400

    fields = {k: data[k] for k in APPLICATION_FIELDS if k in data}
    fields.update(
        application_status='pending',
        application_date=datetime.now(timezone.utc),
        previous_rental_document=True,
        previous_rental_paying=True,
    )
    tenant = RecordStore().insert(TenantProfile, fields)
    logger.info("Application received: tenant %s", tenant['id'])
    return jsonify(tenant), 201


@bp.route('/api/tenants')
def list_tenants():
    """All tenants, best score first, unscored last."""
    tenants = RecordStore().list_records(
        TenantProfile,
        order_by=[nulls_last(TenantProfile.score.desc()), TenantProfile.created_at.desc()],
    )
    return jsonify([_with_bullets(t) for t in tenants])


@bp.route('/api/tenants/<tenant_id>')
def get_tenant(tenant_id):
    return jsonify(_with_bullets(RecordStore().fetch_one(TenantProfile, tenant_id)))


@bp.route('/api/tenants/<tenant_id>/scheduling-link', methods=['POST'])
def scheduling_link(tenant_id):
    """Ask the automation webhook to send a visit booking link, then record it."""
    store = RecordStore()
    tenant = store.fetch_one(TenantProfile, tenant_id)
    send_scheduling_link(tenant)

    sent_at = datetime.now(timezone.utc)
    store.update_fields(TenantProfile, tenant_id, {
        'scheduling_link_sent': True,
        'scheduling_link_sent_date': sent_at,
    })
    return jsonify({'success': True, 'scheduling_link_sent_date': sent_at.isoformat()})
