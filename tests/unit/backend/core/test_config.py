"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (YAML configs, environment).
Failure scenarios use tmp_path to create controlled filesystems.
No mocking: the config loader is the system under test.
"""

import pytest

from tenantcrm.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_database_url,
    get_server_base_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from tenantcrm.backend.core.config_schema import (
    ApplicationSchema,
    ClientSchema,
    DatabaseSchema,
    TenancySchema,
)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_raises_when_no_marker_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()

    def test_validate_exits_when_marker_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit):
            validate_project_root()


class TestLoadYamlConfig:

    def test_loads_application_yaml_as_dict(self):
        data = load_yaml_config("application.yaml")
        assert data["name"] == "TenantCRM"

    def test_raises_for_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_config("nope.yaml")

    def test_returns_empty_dict_for_empty_yaml(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        settings_dir = tmp_path / "config" / "settings"
        settings_dir.mkdir(parents=True)
        (settings_dir / "empty.yaml").write_text("")
        monkeypatch.chdir(tmp_path)

        assert load_yaml_config("empty.yaml") == {}


class TestAppConfig:

    def test_sections_are_typed(self):
        config = AppConfig()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.database, DatabaseSchema)
        assert isinstance(config.tenancy, TenancySchema)
        assert isinstance(config.client, ClientSchema)

    def test_tenancy_defaults(self):
        tenancy = AppConfig().tenancy

        assert tenancy.default_tenant == "demo"
        assert tenancy.header_name == "X-Tenant-Id"

    def test_pagination_bounds(self):
        pagination = AppConfig().application.pagination

        assert 0 < pagination.default_limit <= pagination.max_limit

    def test_timeouts_hold_only_the_database_deadline(self):
        timeouts = AppConfig().application.timeouts

        assert set(timeouts.model_dump()) == {"database"}
        assert timeouts.database > 0

    def test_invite_token_lifetime(self):
        assert AppConfig().security.jwt.invite_token_expire_minutes == 4320

    def test_rejects_yaml_with_missing_required_fields(self, tmp_path, monkeypatch):
        (tmp_path / ".project_root").touch()
        settings_dir = tmp_path / "config" / "settings"
        settings_dir.mkdir(parents=True)
        (settings_dir / "application.yaml").write_text("name: 'Incomplete'")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="Invalid configuration"):
            AppConfig()

    def test_rejects_yaml_with_unknown_fields(self):
        from pydantic import ValidationError as PydanticValidationError

        data = load_yaml_config("application.yaml")
        data["unknown_field"] = "oops"
        with pytest.raises(PydanticValidationError, match="Extra inputs are not permitted"):
            ApplicationSchema(**data)


class TestSettings:

    def test_reads_secret_from_environment(self):
        settings = get_settings()

        assert isinstance(settings, Settings)
        assert settings.jwt_secret

    def test_caching_returns_same_instance(self):
        assert get_settings() is get_settings()
        assert get_app_config() is get_app_config()


class TestUrls:

    def test_sqlite_url_uses_aiosqlite(self):
        url = get_database_url()

        assert url.startswith("sqlite+aiosqlite:///")
        assert url.endswith(".db")

    def test_sync_sqlite_url(self):
        assert get_database_url(async_driver=False).startswith("sqlite:///")

    def test_server_base_url_and_timeout(self):
        url, timeout = get_server_base_url()

        assert url == "http://127.0.0.1:4000"
        assert timeout == 25.0
