"""Runtime configuration for json-manager.

Resolution order for the storage root:

1. Explicit ``data_dir`` argument (CLI ``--data-dir``)
2. ``MCP_JSON_DATA_DIR`` environment variable
3. ``~/.mcp-json-server/data``
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

SERVER_NAME = "json-manager"
SERVER_VERSION = "1.0.0"

DATA_DIR_ENV = "MCP_JSON_DATA_DIR"
LOG_LEVEL_ENV = "MCP_JSON_LOG_LEVEL"
LOG_DIR_ENV = "MCP_JSON_LOG_DIR"


def default_data_dir() -> Path:
    return Path.home() / ".mcp-json-server" / "data"


def _env_value(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key, "").strip()
    return value or None


@dataclass(frozen=True)
class Configuration:
    data_dir: Path
    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        data_dir: Optional[Union[str, Path]] = None,
        log_level: Optional[str] = None,
    ) -> "Configuration":
        """Build a configuration from explicit overrides and the environment."""
        if environ is None:
            environ = os.environ

        if data_dir is not None and str(data_dir).strip():
            resolved = Path(data_dir).expanduser()
        else:
            env_dir = _env_value(environ, DATA_DIR_ENV)
            resolved = Path(env_dir).expanduser() if env_dir else default_data_dir()

        env_log_dir = _env_value(environ, LOG_DIR_ENV)
        return cls(
            data_dir=resolved,
            log_level=(log_level or _env_value(environ, LOG_LEVEL_ENV) or "INFO").upper(),
            log_dir=Path(env_log_dir).expanduser() if env_log_dir else None,
        )
