"""
Circuit breakers for outbound services (OpenAI, Apify), state kept in Redis.

  - CLOSED    → calls pass through
  - OPEN      → too many consecutive failures, calls fail fast with CircuitOpenError
  - HALF_OPEN → reset_timeout elapsed, the next call is let through as a probe

A breaker never retries: a failed call is reported to the caller as-is.
If Redis is unreachable the breaker stays out of the way (fail-open).
"""
import logging
import time

from redis.exceptions import RedisError

logger = logging.getLogger('services.circuit_breaker')

CLOSED = 'closed'
OPEN = 'open'
HALF_OPEN = 'half_open'


class CircuitOpenError(Exception):
    """Raised instead of calling a service whose breaker is open."""

    def __init__(self, name, retry_after=None):
        self.name = name
        self.retry_after = retry_after
        super().__init__(f"Circuit breaker '{name}' is OPEN: service unavailable")


class CircuitBreaker:
    PREFIX = 'cb'

    def __init__(self, name, redis_client, failure_threshold=3, reset_timeout=300):
        self.name = name
        self.redis = redis_client
        self.failure_threshold = failure_threshold
        self.reset_timeout = reset_timeout

    def _key(self, suffix):
        return f'{self.PREFIX}:{self.name}:{suffix}'

    # ── State ─────────────────────────────────────────────────────────

    def _seconds_since_failure(self):
        last = self.redis.get(self._key('last_failure'))
        if not last:
            return None
        return time.time() - float(last)

    @property
    def state(self):
        try:
            current = self.redis.get(self._key('state')) or CLOSED
            if current == OPEN:
                elapsed = self._seconds_since_failure()
                if elapsed is not None and elapsed > self.reset_timeout:
                    self.redis.set(self._key('state'), HALF_OPEN)
                    return HALF_OPEN
            return current
        except RedisError:
            return CLOSED

    @property
    def failure_count(self):
        try:
            return int(self.redis.get(self._key('failures')) or 0)
        except RedisError:
            return 0

    # ── Calls ─────────────────────────────────────────────────────────

    def call(self, func, *args, **kwargs):
        """Run func(*args, **kwargs) unless the circuit is open."""
        if self.state == OPEN:
            retry_after = None
            try:
                elapsed = self._seconds_since_failure()
                if elapsed is not None:
                    retry_after = max(0, self.reset_timeout - elapsed)
            except RedisError:
                pass
            raise CircuitOpenError(self.name, retry_after=retry_after)

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            self._on_failure(e)
            raise
        self._on_success()
        return result

    def _on_success(self):
        try:
            pipe = self.redis.pipeline()
            pipe.set(self._key('state'), CLOSED)
            pipe.set(self._key('failures'), 0)
            pipe.hincrby(self._key('health'), 'success', 1)
            pipe.hset(self._key('health'), 'last_success', str(time.time()))
            pipe.execute()
        except RedisError:
            logger.debug("Redis unavailable, '%s' success not recorded", self.name)

    def _on_failure(self, error):
        try:
            count = self.redis.incr(self._key('failures'))
            now = str(time.time())
            self.redis.set(self._key('last_failure'), now)

            pipe = self.redis.pipeline()
            pipe.hincrby(self._key('health'), 'failure', 1)
            pipe.hset(self._key('health'), 'last_failure', now)
            pipe.hset(self._key('health'), 'last_error', str(error)[:200])
            pipe.execute()

            if count >= self.failure_threshold:
                self.redis.set(self._key('state'), OPEN)
                logger.warning("Circuit '%s' OPENED after %d failures: %s", self.name, count, error,
                               extra={'breaker': self.name})
            else:
                logger.info("Circuit '%s' failure %d/%d: %s", self.name, count, self.failure_threshold, error)
        except RedisError:
            logger.debug("Redis unavailable, '%s' failure not recorded", self.name)

    def reset(self):
        """Force the breaker back to CLOSED."""
        try:
            pipe = self.redis.pipeline()
            pipe.set(self._key('state'), CLOSED)
            pipe.set(self._key('failures'), 0)
            pipe.delete(self._key('last_failure'))
            pipe.execute()
            logger.info("Circuit '%s' manually reset to CLOSED", self.name)
        except RedisError as e:
            logger.error("Failed to reset circuit '%s': %s", self.name, e)

    def get_health(self):
        """Health snapshot for GET /api/health."""
        health = {
            'name': self.name,
            'state': 'unknown',
            'failure_count': 0,
            'failure_threshold': self.failure_threshold,
            'reset_timeout': self.reset_timeout,
            'total_success': 0,
            'total_failure': 0,
            'last_error': '',
        }
        try:
            data = self.redis.hgetall(self._key('health'))
        except RedisError:
            return health
        health.update(
            state=self.state,
            failure_count=self.failure_count,
            total_success=int(data.get('success', 0)),
            total_failure=int(data.get('failure', 0)),
            last_error=data.get('last_error', ''),
        )
        return health


# ── Registry ──────────────────────────────────────────────────────────────

_registry = {}


def get_breaker(name, redis_client=None, **kwargs):
    """Named breaker singleton; created on first use."""
    if name not in _registry:
        if redis_client is None:
            from leasematch.extensions import redis_client as rc
            redis_client = rc
        _registry[name] = CircuitBreaker(name, redis_client, **kwargs)
    return _registry[name]


def get_all_breakers():
    return dict(_registry)


def init_breakers(redis_client):
    """Register the breakers for every external service the app calls."""
    breakers = {
        'openai': CircuitBreaker('openai', redis_client, failure_threshold=5, reset_timeout=60),
        'apify': CircuitBreaker('apify', redis_client, failure_threshold=3, reset_timeout=300),
    }
    _registry.update(breakers)
    return breakers
