"""Tests for configuration loading."""

import pytest

from config.config import NLUConfig, QnaMode, ServiceCredentials, load_credentials
from config.constants import TRAINER_API_BASE_URL
from utils.errors import ConfigurationError, NLUError


class TestLoadCredentials:
    """Tests for credentials from the environment."""

    def _set_all(self, env):
        env.setenv("BOTFUEL_APP_TOKEN", "token")
        env.setenv("BOTFUEL_APP_ID", "id")
        env.setenv("BOTFUEL_APP_KEY", "key")

    def test_loads_required_values(self, clean_env):
        self._set_all(clean_env)

        credentials = load_credentials()

        assert credentials.app_token == "token"
        assert credentials.app_id == "id"
        assert credentials.app_key == "key"
        assert credentials.trainer_api_url == TRAINER_API_BASE_URL + "/"

    @pytest.mark.parametrize("missing", ["BOTFUEL_APP_TOKEN", "BOTFUEL_APP_ID", "BOTFUEL_APP_KEY"])
    def test_missing_credential_raises(self, clean_env, missing):
        self._set_all(clean_env)
        clean_env.delenv(missing)

        with pytest.raises(ConfigurationError, match=missing):
            load_credentials()

    def test_configuration_error_is_nlu_error(self, clean_env):
        with pytest.raises(NLUError):
            load_credentials()

    def test_trainer_url_override_is_normalized(self, clean_env):
        self._set_all(clean_env)
        clean_env.setenv("BOTFUEL_TRAINER_API_URL", "http://localhost:9000/trainer")

        credentials = load_credentials()

        assert credentials.trainer_api_url == "http://localhost:9000/trainer/"

    def test_trailing_slash_not_doubled(self):
        credentials = ServiceCredentials("t", "i", "k", trainer_api_url="http://x/api/")
        assert credentials.trainer_api_url == "http://x/api/"

    def test_auth_headers(self):
        credentials = ServiceCredentials("t", "i", "k")
        assert credentials.auth_headers() == {"App-Id": "i", "App-Key": "k"}

    @pytest.mark.parametrize("missing", ["app_token", "app_id", "app_key"])
    def test_empty_secret_raises(self, missing):
        values = {"app_token": "t", "app_id": "i", "app_key": "k", missing: ""}

        with pytest.raises(ConfigurationError, match=missing):
            ServiceCredentials(**values)


class TestNLUConfig:
    """Tests for NLUConfig."""

    def test_defaults(self):
        config = NLUConfig()

        assert config.qna is None
        assert config.spellchecking is None
        assert config.multi_intent is False
        assert config.locale == "en"

    @pytest.mark.parametrize("value,expected", [
        ("before", QnaMode.BEFORE),
        ("after", QnaMode.AFTER),
        ("AFTER", QnaMode.AFTER),
        (QnaMode.BEFORE, QnaMode.BEFORE),
        (None, None),
    ])
    def test_qna_mode_coercion(self, value, expected):
        assert NLUConfig(qna=value).qna is expected

    def test_unknown_qna_mode_raises(self):
        with pytest.raises(ConfigurationError):
            NLUConfig(qna="sometimes")

    def test_config_is_immutable(self):
        config = NLUConfig()
        with pytest.raises(AttributeError):
            config.multi_intent = True
