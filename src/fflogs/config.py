import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fflogs.errors import FFLogsConfigError

_CONFIG_FILENAME = "fflogs.toml"
_API_KEY_ENV = "FFLOGS_API_KEY"

DEFAULT_BASE_URL = "https://www.fflogs.com:443/v1/"


@dataclass(frozen=True)
class FFLogsConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")


def _read_key_file(config_dir: Path, raw_path: str) -> str:
    key_path = Path(raw_path).expanduser()
    if not key_path.is_absolute():
        key_path = config_dir / key_path
    if not key_path.exists():
        raise FFLogsConfigError(f"API key file not found: {key_path}")
    lines = key_path.read_text().splitlines()
    if not lines or not lines[0].strip():
        raise FFLogsConfigError(f"API key file is empty: {key_path}")
    return lines[0].strip()


def _resolve_api_key(config_dir: Path, section: dict[str, Any]) -> str:
    """Resolve the API key: FFLOGS_API_KEY env var -> api_key -> api_key_file -> error."""
    env_key = os.environ.get(_API_KEY_ENV)
    if env_key:
        return env_key

    if "api_key" in section:
        return str(section["api_key"])

    if "api_key_file" in section:
        return _read_key_file(config_dir, str(section["api_key_file"]))

    raise FFLogsConfigError(f"[fflogs]: missing required field 'api_key' (or 'api_key_file', or set {_API_KEY_ENV})")


def load_config(config_dir: Path) -> FFLogsConfig:
    """Load FF Logs configuration from fflogs.toml in *config_dir*.

    When the file is absent, the API key may still come from FFLOGS_API_KEY.
    """
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        env_key = os.environ.get(_API_KEY_ENV)
        if env_key:
            return FFLogsConfig(api_key=env_key)
        raise FFLogsConfigError(f"{_CONFIG_FILENAME} not found in {config_dir}")

    with toml_path.open("rb") as f:
        data = tomllib.load(f)

    section = data.get("fflogs")
    if section is None:
        raise FFLogsConfigError(f"No [fflogs] section in {_CONFIG_FILENAME}")

    api_key = _resolve_api_key(config_dir, section)
    base_url = str(section.get("base_url", DEFAULT_BASE_URL))
    return FFLogsConfig(api_key=api_key, base_url=base_url)
