"""
Scoring knobs: model parameters and prompt thresholds (YAML with hardcoded fallback).
"""
import logging
import os

import yaml

logger = logging.getLogger('scoring.config')

_scoring_config = None


def _default_config():
    """Hardcoded fallback if YAML is missing."""
    return {
        'version': 'default',
        'model': {
            'name': 'gpt-3.5-turbo',
            'temperature': 0.2,
            'max_tokens': 200,
        },
        'income_rule': {
            'high_threshold': 5000,
            'high_score': 90,
            'top_threshold': 8000,
        },
        'bullets_per_list': 3,
    }


def load_scoring_config():
    """Load scoring config from YAML, with in-memory cache and hardcoded fallback."""
    global _scoring_config
    if _scoring_config is not None:
        return _scoring_config

    config_path = os.path.join(os.path.dirname(__file__), 'scoring_config.yaml')
    try:
        with open(config_path, 'r') as f:
            _scoring_config = yaml.safe_load(f) or _default_config()
        logger.info("Config loaded from YAML (version=%s)", _scoring_config.get('version', '?'))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("YAML config not found (%s), using defaults", e)
        _scoring_config = _default_config()

    return _scoring_config
