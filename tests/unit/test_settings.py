import pytest
from pydantic import ValidationError

from visadocs.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_job_poll_interval(self) -> None:
        s = Settings()
        assert s.job_poll_interval_seconds == 5

    def test_default_storage_backend(self) -> None:
        s = Settings()
        assert s.storage_backend == "local"

    def test_default_extraction_provider(self) -> None:
        s = Settings()
        assert s.extraction_provider == "openai"

    def test_default_extraction_temperature(self) -> None:
        s = Settings()
        assert s.extraction_temperature == 0.0


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_db_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "5433")
        s = Settings()
        assert s.db_port == 5433

    def test_loads_s3_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "s3")
        monkeypatch.setenv("S3_BUCKET_NAME", "visa-docs")
        s = Settings()
        assert s.storage_backend == "s3"
        assert s.s3_bucket_name == "visa-docs"

    def test_loads_extraction_model(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_OPENAI_MODEL_NAME", "gpt-4o")
        s = Settings()
        assert s.extraction_openai_model_name == "gpt-4o"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()
