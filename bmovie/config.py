"""Application configuration loaded from a JSON file."""

import json
from dataclasses import dataclass, fields
from typing import Optional

DEFAULT_ENV = "local"
DEFAULT_CONFIG_PATH = "./config-local.json"


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded."""


@dataclass
class ServerConfig:
    host: str = ""
    port: str = ""
    read_timeout: int = 0
    write_timeout: int = 0


@dataclass
class DatabaseConfig:
    dsn: str = ""
    max_idle_conn: int = 0
    max_open_conn: int = 0
    conn_max_lifetime: int = 0


@dataclass
class MysqlConfig:
    master: Optional[DatabaseConfig] = None
    slave: Optional[DatabaseConfig] = None


@dataclass
class LoggerConfig:
    file_path: str = ""
    file_name: str = ""
    formatter: str = ""
    stdout: bool = False
    report_caller: bool = False


@dataclass
class DatadogConfig:
    host: str = ""
    port: str = ""
    namespace: str = ""
    is_enabled: bool = False


@dataclass
class NewRelicConfig:
    app_name: str = ""
    app_key: str = ""
    is_enabled: bool = False


@dataclass
class OmdbConfig:
    host: str = ""
    key: str = ""


@dataclass
class EnvConfig:
    env: str = DEFAULT_ENV
    http_server: Optional[ServerConfig] = None
    grpc_server: Optional[ServerConfig] = None
    grpc_gateway: Optional[ServerConfig] = None
    mysql: Optional[MysqlConfig] = None
    logger: Optional[LoggerConfig] = None
    datadog: Optional[DatadogConfig] = None
    new_relic: Optional[NewRelicConfig] = None
    omdb: Optional[OmdbConfig] = None


def _lookup(obj, key):
    if key in obj:
        return obj[key]
    lowered = key.lower()
    for name, value in obj.items():
        if name.lower() == lowered:
            return value
    return None


def _scalar(obj, key, kind, path):
    value = _lookup(obj, key)
    if value is None:
        return kind()
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ConfigError(
            f"cannot unmarshal {type(value).__name__} into field {path}.{key} "
            f"of type {kind.__name__}"
        )
    return value


def _section(obj, key, path):
    value = _lookup(obj, key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ConfigError(
            f"cannot unmarshal {type(value).__name__} into object field {path}.{key}"
        )
    return value


def _flat(cls, obj, key, path):
    raw = _section(obj, key, path)
    if raw is None:
        return None
    where = f"{path}.{key}"
    return cls(**{f.name: _scalar(raw, f.name, f.type, where) for f in fields(cls)})


def _mysql(obj, path):
    raw = _section(obj, "mysql", path)
    if raw is None:
        return None
    where = f"{path}.mysql"
    return MysqlConfig(
        master=_flat(DatabaseConfig, raw, "master", where),
        slave=_flat(DatabaseConfig, raw, "slave", where),
    )


def parse_config(data, env=DEFAULT_ENV):
    """Build an EnvConfig from JSON text (str or bytes)."""
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed to load config json: {exc}") from exc
    if raw is None:
        return EnvConfig(env=env)
    if not isinstance(raw, dict):
        raise ConfigError(
            f"failed to load config json: cannot unmarshal {type(raw).__name__} into config"
        )
    root = "config"
    try:
        return EnvConfig(
            env=env,
            http_server=_flat(ServerConfig, raw, "http_server", root),
            grpc_server=_flat(ServerConfig, raw, "grpc_server", root),
            grpc_gateway=_flat(ServerConfig, raw, "grpc_gateway", root),
            mysql=_mysql(raw, root),
            logger=_flat(LoggerConfig, raw, "logger", root),
            datadog=_flat(DatadogConfig, raw, "datadog", root),
            new_relic=_flat(NewRelicConfig, raw, "new_relic", root),
            omdb=_flat(OmdbConfig, raw, "omdb", root),
        )
    except ConfigError as exc:
        raise ConfigError(f"failed to load config json: {exc}") from exc


def load_config(path=DEFAULT_CONFIG_PATH, env=DEFAULT_ENV):
    """Read and parse the JSON configuration file at path."""
    if not path:
        raise ConfigError("failed to load config json: invalid config file path")
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise ConfigError(f"failed to load config json: {exc}") from exc
    return parse_config(data, env)