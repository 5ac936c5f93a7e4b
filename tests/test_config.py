from pathlib import Path
from unittest.mock import patch

import pytest

from apibook.config import ENV_VARS, load_settings
from apibook.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    with patch("apibook.config.load_dotenv"):
        yield


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.base_url == ""
        assert settings.timeout == 30.0
        assert settings.retry_count == 3
        assert settings.template_path is None

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "apibook.yaml"
        path.write_text(
            "base_url: https://wiki.example.com/rest/api\n"
            "space_key: DOCS\n"
            "parent_id: 12345\n"
            "template_path: templates/book.html\n"
            "retry_count: 5\n",
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.base_url == "https://wiki.example.com/rest/api"
        assert settings.space_key == "DOCS"
        assert settings.parent_id == "12345"
        assert settings.template_path == Path("templates/book.html")
        assert settings.retry_count == 5

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "apibook.yaml"
        path.write_text("space_key: DOCS\nparent_id: '1'\n", encoding="utf-8")
        monkeypatch.setenv("SPACE_KEY", "OOAPD")
        monkeypatch.setenv("HTTP_TIMEOUT", "5")
        settings = load_settings(path)
        assert settings.space_key == "OOAPD"
        assert settings.parent_id == "1"
        assert settings.timeout == 5.0

    def test_empty_env_is_ignored(self, monkeypatch):
        monkeypatch.setenv("BASE_URL", "")
        assert load_settings().base_url == ""

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path).space_key == ""

    def test_loads_dotenv(self):
        with patch("apibook.config.load_dotenv") as mock_load:
            load_settings()
        mock_load.assert_called_once()


class TestLoadSettingsErrors:
    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [invalid\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid YAML"):
            load_settings(path)

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("RETRY_COUNT", "many")
        with pytest.raises(ConfigError, match="invalid settings"):
            load_settings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read"):
            load_settings(tmp_path / "nope.yaml")
