"""
Tenant ↔ owner compatibility scoring pipeline.

    fetch tenant + owner prefs → build prompt → chat completion
        → parse → validate → persist score/pros/cons

Strictly linear. The first failing step aborts the run and nothing is
written, so a stored score is always a validated 0–100 integer and
score/pros/cons only ever change together. No caching, locking or retries:
two concurrent runs for the same tenant resolve as last-write-wins.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from leasematch.models.owner_preferences import OwnerPreferences
from leasematch.models.tenant import TenantProfile
from leasematch.scoring import parser, validator
from leasematch.scoring.errors import ScoringError
from leasematch.scoring.prompt import PromptBuilder

logger = logging.getLogger('scoring.pipeline')


@dataclass
class ScoringOutcome:
    """Success (score/pros/cons set) or failure (error set). Never both."""
    tenant_id: str
    score: Optional[int] = None
    pros: Optional[str] = None
    cons: Optional[str] = None
    raw_response: Optional[str] = None
    error: Optional[ScoringError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if not self.ok:
            return self.error.to_dict()
        return {'success': True, 'score': self.score, 'pros': self.pros, 'cons': self.cons}


class ScoringPipeline:

    def __init__(self, store, prompt_builder: PromptBuilder, scoring_client):
        self.store = store
        self.prompt_builder = prompt_builder
        self.scoring_client = scoring_client

    # ── Steps ────────────────────────────────────────────────────────────

    def fetch_inputs(self, tenant_id):
        """Tenant by id, then the single owner-preference row. NotFound on either."""
        tenant = self.store.fetch_one(TenantProfile, tenant_id)
        owner = self.store.fetch_first(OwnerPreferences)
        return tenant, owner

    def persist(self, tenant_id, score: int, pros: str, cons: str):
        self.store.update_fields(TenantProfile, tenant_id, {'score': score, 'pros': pros, 'cons': cons})

    def reset(self, tenant_id):
        """Clear a previous result: score, pros and cons go back to null in one update."""
        self.store.update_fields(TenantProfile, tenant_id, {'score': None, 'pros': None, 'cons': None})
        logger.info("Tenant %s: scoring reset", tenant_id, extra={'tenant_id': tenant_id})

    # ── Orchestration ────────────────────────────────────────────────────

    def run(self, tenant_id) -> ScoringOutcome:
        """Score one tenant. Failures come back on the outcome, not as exceptions."""
        raw = None
        try:
            tenant, owner = self.fetch_inputs(tenant_id)
            prompt = self.prompt_builder.build(tenant, owner)
            logger.debug("Tenant %s: prompt\n%s", tenant_id, prompt)

            raw = self.scoring_client.complete(prompt)
            parsed = parser.parse(raw)
            score = validator.validate(parsed, raw)

            self.persist(tenant_id, score, parsed.pros, parsed.cons)
        except ScoringError as e:
            logger.warning("Tenant %s: scoring failed (%s): %s", tenant_id, e.kind, e.message,
                           extra={'tenant_id': tenant_id, 'error_kind': e.kind})
            return ScoringOutcome(tenant_id=tenant_id, raw_response=raw, error=e)

        logger.info("Tenant %s: score=%d", tenant_id, score, extra={'tenant_id': tenant_id})
        logger.debug("Tenant %s: pros=%r cons=%r", tenant_id, parsed.pros, parsed.cons)
        return ScoringOutcome(
            tenant_id=tenant_id,
            score=score,
            pros=parsed.pros,
            cons=parsed.cons,
            raw_response=raw,
        )


def build_pipeline(settings=None, store=None, scoring_client=None):
    """Wire the production pipeline: DB-backed store, env settings, OpenAI behind its breaker."""
    from leasematch.config import ScoringSettings
    from leasematch.services.circuit_breaker import get_breaker
    from leasematch.services.openai_client import ScoringClient
    from leasematch.services.store import RecordStore

    settings = settings or ScoringSettings.from_env()
    if scoring_client is None:
        from leasematch.extensions import openai_client
        scoring_client = ScoringClient(settings, client=openai_client, breaker=get_breaker('openai'))

    return ScoringPipeline(
        store=store or RecordStore(),
        prompt_builder=PromptBuilder(settings),
        scoring_client=scoring_client,
    )
