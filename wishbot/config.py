"""Application configuration read from a YAML file and WISHBOT_* variables."""

from __future__ import annotations

import copy
import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

ENV_PREFIX = "WISHBOT"
DEV_POSTGRES_HOST = "localhost:5432"


@dataclass
class App:
    environment: str = ""


@dataclass
class Postgres:
    host: str = ""
    database: str = ""
    user_name: str = ""
    password: str = ""
    ssl_mode: str = ""


@dataclass
class Api:
    port: str = ""


@dataclass
class Telegram:
    token: str = ""
    admin: str = ""


@dataclass
class Migrations:
    migrate: bool = False


@dataclass
class Config:
    app: App = field(default_factory=App)
    postgres: Postgres = field(default_factory=Postgres)
    api: Api = field(default_factory=Api)
    telegram: Telegram = field(default_factory=Telegram)
    migrations: Migrations = field(default_factory=Migrations)


# (section attribute, section type, name in the dump, ((key, attribute, name in the dump), ...))
_LAYOUT = (
    ("app", App, "app", (("environment", "environment", "environment"),)),
    (
        "postgres",
        Postgres,
        "postgres",
        (
            ("host", "host", "host"),
            ("database", "database", "database"),
            ("username", "user_name", "userName"),
            ("password", "password", "password"),
            ("sslmode", "ssl_mode", "sslMode"),
        ),
    ),
    ("api", Api, "api", (("port", "port", "port"),)),
    (
        "telegram",
        Telegram,
        "token",
        (("token", "token", "token"), ("admin", "admin", "admin")),
    ),
    ("migrations", Migrations, "migrations", (("migrate", "migrate", "migrate"),)),
)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_configs = Config()


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    raise ValueError(f"cannot parse {value!r} as a boolean")


def _convert(value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        return _parse_bool(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"expected a scalar value, got {value!r}")
    return str(value)


def _lower_keys(data: Mapping[Any, Any]) -> dict[str, Any]:
    return {
        str(key).lower(): _lower_keys(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


def _build(raw: Mapping[str, Any], environ: Mapping[str, str]) -> Config:
    sections: dict[str, Any] = {}
    for section, section_type, _tag, keys in _LAYOUT:
        block = raw.get(section) or {}
        if not isinstance(block, Mapping):
            raise ValueError(f"configuration section {section!r} must be a mapping")
        defaults = {f.name: f.default for f in dataclasses.fields(section_type)}
        values: dict[str, Any] = {}
        for key, attr, _name in keys:
            value = environ.get(f"{ENV_PREFIX}_{section}_{key}".upper()) or block.get(key)
            if value is not None:
                values[attr] = _convert(value, defaults[attr])
        sections[section] = section_type(**values)
    return Config(**sections)


def _yaml_view(config: Config) -> dict[str, dict[str, Any]]:
    return {
        tag: {name: getattr(getattr(config, section), attr) for _key, attr, name in keys}
        for section, _type, tag, keys in _LAYOUT
    }


def load_configs(config_path: str | os.PathLike[str] | None) -> Config:
    """Load the configuration from a file (if given) and the environment.

    The result becomes the process-wide configuration and a copy of it is returned.
    """
    global _configs
    raw: dict[str, Any] = {}
    if config_path:
        with Path(config_path).open(encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, Mapping):
            raise ValueError(f"configuration file {config_path} must hold a mapping")
        raw = _lower_keys(loaded)
        print("Using config file:", os.fspath(config_path))

    config = _build(raw, os.environ)

    dump = yaml.safe_dump(_yaml_view(config), sort_keys=False, allow_unicode=True)
    if config.app.environment == "dev":
        config.postgres.host = DEV_POSTGRES_HOST
        print("Effective configuration:")
        print(dump)

    _configs = config
    return copy.deepcopy(config)


def get_configs() -> Config:
    """Return a copy of the loaded configuration."""
    return copy.deepcopy(_configs)