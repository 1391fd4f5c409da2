"""
Centralized configuration: all env vars, constants, scoring settings.
"""
import os
from dataclasses import dataclass
from typing import Optional


# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = os.getenv('LOG_FORMAT', 'text')

# ── Redis (circuit breaker state) ────────────────────────────────────────────
REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')

# ── PostgreSQL ────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///local.db')

# ── OpenAI ────────────────────────────────────────────────────────────────────
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
OPENAI_SCORING_MODEL = os.getenv('OPENAI_SCORING_MODEL')
OPENAI_LISTING_SEARCH_MODEL = os.getenv('OPENAI_LISTING_SEARCH_MODEL', 'gpt-4o-search-preview')

# ── Apify (classifieds listing scraper) ───────────────────────────────────────
APIFY_API_TOKEN = os.getenv('APIFY_API_TOKEN')
APIFY_LISTING_ACTOR_ID = os.getenv('APIFY_LISTING_ACTOR_ID', 'fidBLTpxnz3Owo6Zm')

# ── Scheduling link webhook ──────────────────────────────────────────────────
SCHEDULING_WEBHOOK_URL = os.getenv('SCHEDULING_WEBHOOK_URL')

# ── Owner (single owner per deployment) ──────────────────────────────────────
OWNER_ID = os.getenv('OWNER_ID', 'demo-owner-1')

# ── CORS for the scorer endpoints ────────────────────────────────────────────
CORS_ALLOWED_ORIGIN = os.getenv('CORS_ALLOWED_ORIGIN', '*')

# ── Tenant application status values ─────────────────────────────────────────
APPLICATION_STATUSES = [
    'pending',
    'reviewing',
    'approved',
    'rejected',
]


@dataclass(frozen=True)
class ScoringSettings:
    """
    Everything the scoring client and prompt builder need, built once and
    handed to them at construction time.
    """
    api_key: Optional[str]
    model: str = 'gpt-3.5-turbo'
    temperature: float = 0.2
    max_tokens: int = 200
    income_high: int = 5000
    income_high_score: int = 90
    income_top: int = 8000
    bullets: int = 3

    @classmethod
    def from_env(cls, api_key=None, config=None):
        """Merge scoring_config.yaml (or its fallback) with env overrides."""
        if config is None:
            from leasematch.scoring.config_loader import load_scoring_config
            config = load_scoring_config()

        model_cfg = config.get('model', {})
        income_cfg = config.get('income_rule', {})
        return cls(
            api_key=api_key if api_key is not None else OPENAI_API_KEY,
            model=OPENAI_SCORING_MODEL or model_cfg.get('name', cls.model),
            temperature=float(model_cfg.get('temperature', cls.temperature)),
            max_tokens=int(model_cfg.get('max_tokens', cls.max_tokens)),
            income_high=int(income_cfg.get('high_threshold', cls.income_high)),
            income_high_score=int(income_cfg.get('high_score', cls.income_high_score)),
            income_top=int(income_cfg.get('top_threshold', cls.income_top)),
            bullets=int(config.get('bullets_per_list', cls.bullets)),
        )
