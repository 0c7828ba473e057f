# ABOUTME: Loads the Bookshelf database configuration from an INI file.
# ABOUTME: Supplies local and remote endpoints, credentials, and the local host address.

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from bookshelf.errors import ConfigError

ENV_CONFIG_PATH = "BOOKSHELF_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".bookshelf" / "config.ini"

SECTION = "db"
_REQUIRED_KEYS = ("url.local", "url.remote", "user")


@dataclass
class DatabaseConfig:
    """Connection settings for the catalog database.

    For the SQLite backend the endpoints are database file paths and the
    credentials are not used.
    """

    local_url: str
    remote_url: str
    user: str
    local_password: str = ""
    remote_password: str = ""
    local_address: str | None = None


def default_config_path() -> Path:
    """Return the config path, honoring the BOOKSHELF_CONFIG override."""
    override = os.environ.get(ENV_CONFIG_PATH)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> DatabaseConfig:
    """Read a DatabaseConfig from an INI file with a ``[db]`` section.

    Example file::

        [db]
        url.local = ~/books/library.db
        url.remote = /mnt/nas/books/library.db
        user = reader
        local_address = 192.168.1.175

    Raises:
        ConfigError: If the file is missing, unparsable, or lacks required keys.
    """
    config_path = path or default_config_path()
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(config_path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc

    if not parser.has_section(SECTION):
        raise ConfigError(f"{config_path} has no [{SECTION}] section")
    section = parser[SECTION]

    missing = [key for key in _REQUIRED_KEYS if not section.get(key)]
    if missing:
        raise ConfigError(f"{config_path} is missing: {', '.join(missing)}")

    return DatabaseConfig(
        local_url=section["url.local"],
        remote_url=section["url.remote"],
        user=section["user"],
        local_password=section.get("password.local", ""),
        remote_password=section.get("password.remote", ""),
        local_address=section.get("local_address") or None,
    )
