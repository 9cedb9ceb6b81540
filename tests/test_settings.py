"""Tests for matchkey.core.settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from matchkey.core.settings import Settings, get_settings


class TestDefaults:
    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DEFAULT_COUNTRY_CODE", raising=False)
        monkeypatch.delenv("HASH_ADDRESS_FIELDS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_country_code == "1"
        assert settings.hash_address_fields is False
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_COUNTRY_CODE", "91")
        monkeypatch.setenv("HASH_ADDRESS_FIELDS", "1")

        settings = Settings(_env_file=None)

        assert settings.default_country_code == "91"
        assert settings.hash_address_fields is True

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestCountryCodeValidation:
    @pytest.mark.parametrize(("raw", "expected"), [("1", "1"), ("+44", "44"), (" 353 ", "353")])
    def test_accepted_codes(self, raw: str, expected: str) -> None:
        assert Settings(DEFAULT_COUNTRY_CODE=raw, _env_file=None).default_country_code == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1234", "٤٤"])
    def test_malformed_codes_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Settings(DEFAULT_COUNTRY_CODE=raw, _env_file=None)

    def test_unassigned_code_rejected(self) -> None:
        # +999 is reserved and not assigned to any region
        with pytest.raises(ValidationError):
            Settings(DEFAULT_COUNTRY_CODE="999", _env_file=None)
