"""Tests for settings validation."""
import pytest
from pydantic import ValidationError
from core.config import Settings
from services.assistant_registry import get_assistant_profile
from core.errors import InvalidInputError


class TestSettings:
    """Settings load without credentials and reject bad values."""

    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.API_PREFIX == "/api"
        assert config.ALLTIUS_CHAT_URL == "https://app.alltius.ai/api/platform/v1/chat"
        assert config.HTTP_TIMEOUT_SECONDS > 0

    def test_log_level_is_normalised(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")

    def test_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, HTTP_TIMEOUT_SECONDS=0)

    def test_model_config(self):
        assert Settings.model_config["env_file"] == ".env"
        assert Settings.model_config["case_sensitive"] is True

    def test_unknown_keys_are_ignored(self):
        config = Settings(_env_file=None, VITE_ALLTIUS_API_KEY="frontend-only")

        assert not hasattr(config, "VITE_ALLTIUS_API_KEY")


class TestAssistantProfiles:
    """Version names map to assistants and Airtable tables."""

    def test_rfp_profile(self, configured):
        profile = get_assistant_profile("versionRFP")

        assert profile.assistant_id == configured.RFP_ASSISTANT_ID
        assert (profile.element_field, profile.response_field) == ("rfp_element", "rfp_response")
        assert profile.question_field is None

    def test_cyber_profile(self, configured):
        profile = get_assistant_profile("versionCyber")

        assert profile.airtable_table_name == configured.CYBER_AIRTABLE_TABLE_NAME
        assert profile.question_field == "cyber_question"

    def test_unknown_version(self):
        with pytest.raises(InvalidInputError):
            get_assistant_profile("versionLegal")
