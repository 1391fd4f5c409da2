"""Shared test fixtures."""
import pytest
from unittest.mock import patch, MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from leasematch.database import Base


class FakeRedis:
    """Minimal in-memory Redis fake for circuit breaker state."""

    def __init__(self):
        self.get_store = {}
        self.hash_store = {}

    def get(self, key):
        return self.get_store.get(key)

    def set(self, key, value):
        self.get_store[key] = str(value)

    def incr(self, key):
        val = int(self.get_store.get(key, 0)) + 1
        self.get_store[key] = str(val)
        return val

    def delete(self, *keys):
        for k in keys:
            self.get_store.pop(k, None)
            self.hash_store.pop(k, None)

    def hset(self, key, field, value):
        self.hash_store.setdefault(key, {})[field] = str(value)

    def hincrby(self, key, field, amount):
        h = self.hash_store.setdefault(key, {})
        h[field] = str(int(h.get(field, 0)) + amount)

    def hgetall(self, key):
        return dict(self.hash_store.get(key, {}))

    def pipeline(self):
        return FakePipeline(self)


class FakePipeline:
    """Fake Redis pipeline that applies queued ops on execute()."""

    def __init__(self, redis):
        self._redis = redis
        self._ops = []

    def __getattr__(self, name):
        def _queue(*args):
            self._ops.append((name, args))
            return self
        return _queue

    def execute(self):
        for name, args in self._ops:
            getattr(self._redis, name)(*args)
        self._ops = []


@pytest.fixture
def db_engine():
    """In-memory SQLite engine with schema created."""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    import leasematch.models.tenant
    import leasematch.models.owner_preferences
    import leasematch.models.property
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """SQLAlchemy session bound to in-memory SQLite. Rolls back after each test."""
    Session = sessionmaker(bind=db_engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def patch_get_session(db_session):
    """Route all get_session() calls to the test session.

    close() is disabled so RecordStore's finally blocks don't invalidate
    the shared test session.
    """
    _real_close = db_session.close
    db_session.close = lambda: None
    with patch('leasematch.database.get_session', return_value=db_session):
        yield db_session
    db_session.close = _real_close


@pytest.fixture
def fake_redis():
    """In-memory Redis fake with dict-backed storage."""
    return FakeRedis()


@pytest.fixture
def app(fake_redis):
    """Flask test app, circuit breakers backed by the Redis fake."""
    with patch('leasematch.extensions.redis_client', fake_redis):
        from leasematch import create_app
        app = create_app()
    app.config['TESTING'] = True
    yield app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def settings():
    """Scoring settings with a dummy key and the default knobs."""
    from leasematch.config import ScoringSettings
    return ScoringSettings(api_key='sk-test')


def _mock_chat_response(content):
    """Build a MagicMock that looks like an openai ChatCompletion response."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def mock_openai():
    """OpenAI client double; set the answer with mock_openai.reply('...')."""
    client = MagicMock()

    def _reply(content):
        client.chat.completions.create.return_value = _mock_chat_response(content)
    client.reply = _reply
    return client


@pytest.fixture
def make_tenant(db_session):
    """Factory fixture: inserts a TenantProfile and returns its id."""
    from leasematch.models.tenant import TenantProfile

    def _make(**overrides):
        fields = dict(
            first_name='Marie',
            last_name='Dubois',
            email='marie.dubois@email.com',
            profession='Software Engineer',
            employment_type='CDI',
            monthly_income=4200.0,
            smoking_status='Non-smoker',
            pets=[],
            languages=['French', 'English'],
            application_status='pending',
            tenant_document_id_valid=True,
            tenant_document_income_valid=True,
        )
        fields.update(overrides)
        tenant = TenantProfile(**fields)
        db_session.add(tenant)
        db_session.commit()
        return tenant.id
    return _make


@pytest.fixture
def make_owner(db_session):
    """Factory fixture: inserts an OwnerPreferences row and returns its id."""
    from leasematch.models.owner_preferences import OwnerPreferences

    def _make(**overrides):
        fields = dict(
            owner_id='demo-owner-1',
            priorities=['Financial stability', 'Quiet lifestyle'],
            tenant_category='Young professional',
            min_financial_requirement='3x rent',
            acceptances=['Cats'],
            dealbreakers=['Smoking indoors'],
        )
        fields.update(overrides)
        owner = OwnerPreferences(**fields)
        db_session.add(owner)
        db_session.commit()
        return owner.id
    return _make
