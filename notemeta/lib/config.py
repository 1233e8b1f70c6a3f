"""
notemeta/lib/config.py - Configuration Management

Loads notemeta configuration from .notemeta/config.toml, searched upward
from the current working directory. The file is optional: every value has a
default and can be overridden through an environment variable.

Usage:
	from notemeta.lib.config import get_config_value, get_bool

	level = get_config_value("logging", "level", "NOTEMETA_LOG_LEVEL", "INFO")
	day_first = get_bool("dates", "day_first", "NOTEMETA_DAY_FIRST", False)

Example config.toml:
	[logging]
	level = "DEBUG"

	[dates]
	day_first = true

	[importer]
	encoding = "utf-8"
	records_dir = "data/records"

Design:
- Lookup order: ENV > config.toml > default
- Config is cached (loaded once per process)
- A missing .notemeta/ directory is not an error for value lookups
"""
import os
import tomllib
from pathlib import Path
from typing import Any, Dict
from functools import lru_cache

CONFIG_DIR = ".notemeta"
CONFIG_FILE = "config.toml"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@lru_cache(maxsize=1)
def _find_project_root() -> Path:
	"""
	Find project root by looking for a .notemeta/ directory.

	Searches upward from current working directory.

	Returns:
		Path: Absolute path to project root

	Raises:
		FileNotFoundError: If .notemeta/ not found in any parent directory
	"""
	current = Path.cwd().resolve()

	for candidate in (current, *current.parents):
		if (candidate / CONFIG_DIR).is_dir():
			return candidate

	raise FileNotFoundError(
		f"Could not find {CONFIG_DIR}/ directory in {current} or any parent."
	)


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
	"""
	Load configuration from .notemeta/config.toml.

	Returns:
		Dict: Configuration dictionary

	Raises:
		FileNotFoundError: If .notemeta/ or config.toml not found
		tomllib.TOMLDecodeError: If config.toml is invalid
	"""
	root = _find_project_root()
	config_path = root / CONFIG_DIR / CONFIG_FILE

	if not config_path.exists():
		raise FileNotFoundError(f"Config file not found: {config_path}")

	with open(config_path, "rb") as f:
		return tomllib.load(f)


def clear_cache() -> None:
	"""Forget the cached project root and config (e.g. after chdir)."""
	_find_project_root.cache_clear()
	get_config.cache_clear()


def get_config_value(section: str, key: str, env_var: str | None = None, default: Any = None) -> Any:
	"""
	Get configuration value with fallback chain: ENV > config.toml > default.

	Args:
		section: Config section (e.g., "dates", "importer")
		key: Config key within section (e.g., "day_first")
		env_var: Optional environment variable name to check as override
		default: Default value if not found in ENV or config

	Returns:
		Configuration value from first available source

	Example:
		>>> get_config_value("importer", "encoding", "NOTEMETA_ENCODING", "utf-8")
		'utf-8'
	"""
	if env_var:
		env_value = os.getenv(env_var)
		if env_value is not None:
			return env_value

	try:
		config = get_config()
	except FileNotFoundError:
		return default

	return config.get(section, {}).get(key, default)


def get_bool(section: str, key: str, env_var: str | None = None, default: bool = False) -> bool:
	"""
	Boolean variant of get_config_value().

	TOML booleans are taken as-is; strings (from ENV) accept
	1/0, true/false, yes/no, on/off.

	Raises:
		ValueError: If the value cannot be read as a boolean
	"""
	value = get_config_value(section, key, env_var, default)
	if isinstance(value, bool):
		return value

	text = str(value).strip().lower()
	if text in _TRUE:
		return True
	if text in _FALSE:
		return False
	raise ValueError(f"Invalid boolean for [{section}] {key}: {value!r}")


def get_records_dir() -> Path:
	"""Directory where imported index entries are written."""
	return Path(get_config_value("importer", "records_dir", "NOTEMETA_RECORDS_DIR", "data/records"))
