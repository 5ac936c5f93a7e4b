"""Settings for the wiki publisher and the command handler.

Values come from, in increasing precedence: field defaults, an optional
YAML settings file, and environment variables (a `.env` file in the
working directory is loaded first).
"""

import os
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

from apibook.errors import ConfigError

ENV_VARS = {
    "base_url": "BASE_URL",
    "basic_auth": "BASIC_AUTH",
    "username": "USERNAME",
    "password": "PASSWORD",
    "parent_id": "PARENT_ID",
    "space_key": "SPACE_KEY",
    "page_title": "PAGE_TITLE",
    "template_path": "TEMPLATE_PATH",
    "timeout": "HTTP_TIMEOUT",
    "retry_count": "RETRY_COUNT",
}


class Settings(BaseModel):
    """Resolved configuration."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    base_url: str = ""  # Confluence REST root, e.g. https://wiki.example.com/rest/api
    basic_auth: str = ""  # pre-encoded base64("user:password")
    username: str = ""
    password: str = ""
    parent_id: str = ""
    space_key: str = ""
    page_title: str = ""  # empty: use the collection name
    template_path: Path | None = None
    timeout: float = 30.0
    retry_count: int = 3


def load_settings(file_path: Path | None = None) -> Settings:
    """Build Settings from an optional YAML file plus the environment."""
    load_dotenv(find_dotenv(usecwd=True))

    values: dict = {}
    if file_path is not None:
        values.update(_read_yaml(file_path))

    for field, var in ENV_VARS.items():
        if os.getenv(var):
            values[field] = os.environ[var]

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}") from e


def _read_yaml(file_path: Path) -> dict:
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read settings file {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"settings file {file_path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"settings file {file_path} must contain a mapping")
    return data
