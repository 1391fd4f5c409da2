"""Tests for scoring_config.yaml loading and ScoringSettings."""
import dataclasses
import pytest
from unittest.mock import patch

import yaml

from leasematch.config import ScoringSettings
from leasematch.scoring import config_loader


@pytest.fixture(autouse=True)
def _clear_cache():
    config_loader._scoring_config = None
    yield
    config_loader._scoring_config = None


class TestLoadScoringConfig:

    def test_loads_packaged_yaml(self):
        config = config_loader.load_scoring_config()
        assert config['model']['temperature'] == 0.2
        assert config['model']['max_tokens'] == 200
        assert config['income_rule']['high_threshold'] == 5000
        assert config['bullets_per_list'] == 3
        assert config['version'] != 'default'

    def test_cached(self):
        first = config_loader.load_scoring_config()
        assert config_loader.load_scoring_config() is first

    def test_missing_file_falls_back_to_defaults(self):
        with patch('leasematch.scoring.config_loader.open', side_effect=FileNotFoundError('gone'), create=True):
            config = config_loader.load_scoring_config()
        assert config == config_loader._default_config()

    def test_malformed_yaml_falls_back_to_defaults(self):
        with patch('leasematch.scoring.config_loader.yaml.safe_load', side_effect=yaml.YAMLError('bad')):
            config = config_loader.load_scoring_config()
        assert config['version'] == 'default'


class TestScoringSettings:

    def test_defaults(self):
        settings = ScoringSettings(api_key='k')
        assert settings.temperature == 0.2
        assert settings.max_tokens == 200
        assert settings.bullets == 3
        assert (settings.income_high, settings.income_high_score, settings.income_top) == (5000, 90, 8000)

    def test_frozen(self):
        settings = ScoringSettings(api_key='k')
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api_key = 'other'

    def test_from_env_reads_config(self, monkeypatch):
        monkeypatch.setattr('leasematch.config.OPENAI_SCORING_MODEL', None)
        config = {
            'model': {'name': 'gpt-4o-mini', 'temperature': 0.0, 'max_tokens': 150},
            'income_rule': {'high_threshold': 4000, 'high_score': 85, 'top_threshold': 7000},
            'bullets_per_list': 2,
        }

        settings = ScoringSettings.from_env(api_key='sk-x', config=config)

        assert settings.api_key == 'sk-x'
        assert settings.model == 'gpt-4o-mini'
        assert settings.temperature == 0.0
        assert settings.max_tokens == 150
        assert settings.income_high == 4000
        assert settings.income_high_score == 85
        assert settings.income_top == 7000
        assert settings.bullets == 2

    def test_model_env_override(self, monkeypatch):
        monkeypatch.setattr('leasematch.config.OPENAI_SCORING_MODEL', 'gpt-4.1')
        settings = ScoringSettings.from_env(api_key='k', config={'model': {'name': 'gpt-3.5-turbo'}})
        assert settings.model == 'gpt-4.1'

    def test_api_key_from_environment_constant(self, monkeypatch):
        monkeypatch.setattr('leasematch.config.OPENAI_API_KEY', 'sk-env')
        assert ScoringSettings.from_env(config={}).api_key == 'sk-env'

    def test_empty_config_uses_class_defaults(self, monkeypatch):
        monkeypatch.setattr('leasematch.config.OPENAI_SCORING_MODEL', None)
        settings = ScoringSettings.from_env(api_key='k', config={})
        assert settings == ScoringSettings(api_key='k')
