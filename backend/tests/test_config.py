"""Tests for settings parsing."""

from warranty_intake.config import Settings


class TestAllowedOrigins:
    def test_comma_separated(self, monkeypatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

        assert Settings(_env_file=None).allowed_origins == ["https://a.example", "https://b.example"]

    def test_json_array(self, monkeypatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.example"]')

        assert Settings(_env_file=None).allowed_origins == ["https://a.example"]

    def test_empty(self, monkeypatch) -> None:
        monkeypatch.setenv("ALLOWED_ORIGINS", "")

        assert Settings(_env_file=None).allowed_origins == []

    def test_default_includes_storefront(self, monkeypatch) -> None:
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

        origins = Settings(_env_file=None).allowed_origins
        assert "https://boatmateparts.com" in origins
        assert "http://127.0.0.1:5500" in origins


def test_claim_counter_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CLAIM_NUMBER_SEED", raising=False)

    settings = Settings(_env_file=None)

    assert settings.claim_counter_name == "global"
    assert settings.claim_number_seed == 100000
