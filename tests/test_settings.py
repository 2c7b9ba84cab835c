"""Tests for src/config/settings.py — Settings and expose_error_details."""

from src.config.settings import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.catalog_base_url == "https://swapi.py4e.com/api"
        assert s.catalog_timeout == 10.0
        assert s.record_store_backend == "dynamodb"
        assert s.records_table == ""
        assert s.aws_region == "us-east-2"
        assert s.stage == "dev"
        assert s.log_level == "INFO"

    def test_env_override(self, override_settings):
        override_settings(
            RECORDS_TABLE="personajes-prod",
            AWS_REGION="eu-west-1",
            RECORD_STORE_BACKEND="memory",
            CATALOG_TIMEOUT="2.5",
        )
        s = get_settings()
        assert s.records_table == "personajes-prod"
        assert s.aws_region == "eu-west-1"
        assert s.record_store_backend == "memory"
        assert s.catalog_timeout == 2.5

    def test_cached(self, override_settings):
        override_settings()
        assert get_settings() is get_settings()


class TestExposeErrorDetails:

    def test_development(self):
        assert Settings(_env_file=None, environment="development").expose_error_details

    def test_test(self):
        assert Settings(_env_file=None, environment="test").expose_error_details

    def test_production(self):
        assert not Settings(_env_file=None, environment="production").expose_error_details

    def test_production_case_insensitive(self, override_settings):
        override_settings(ENVIRONMENT="Production")
        assert not get_settings().expose_error_details
