#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import datetime
import hashlib
import json

# PIP3 modules
try:
	import yaml
except Exception:
	yaml = None

# local repo modules
from .errors import ConfigError

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png"})

#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		root: Directory whose images are renamed.
		dry_run: Only print planned work.
		start_date: First date of the name sequence; None means today.
		hash_algorithm: hashlib algorithm used for content checks.
		include_extensions: Extensions taken into the batch.
		exclude_hidden: Skip dotfiles when True.
		verbose: Verbose logging.
		config_path: Optional user config path.
	"""
	root: Path = field(default_factory=Path.cwd)
	dry_run: bool = True
	start_date: datetime.date | None = None
	hash_algorithm: str = "sha256"
	include_extensions: frozenset[str] = IMAGE_EXTENSIONS
	exclude_hidden: bool = True
	verbose: bool = False
	config_path: Path | None = None

	#============================================
	def normalized_root(self) -> Path:
		"""
		Normalize the working directory.

		Returns:
			Normalized Path.
		"""
		root: Path = self.root.expanduser().resolve()
		return root

	#============================================
	def resolved_start_date(self) -> datetime.date:
		"""
		Return the configured start date, reading the clock only when unset.
		"""
		if self.start_date is None:
			return datetime.date.today()
		return self.start_date


#============================================
def parse_date(value: str | datetime.date) -> datetime.date:
	"""
	Parse a YYYY-MM-DD or YYYYMMDD date.

	Args:
		value: Date text from CLI or config.

	Returns:
		datetime.date instance.
	"""
	if isinstance(value, datetime.datetime):
		return value.date()
	if isinstance(value, datetime.date):
		return value
	text = str(value).strip()
	for fmt in ("%Y-%m-%d", "%Y%m%d"):
		try:
			return datetime.datetime.strptime(text, fmt).date()
		except ValueError:
			continue
	raise ValueError(f"Unrecognized date: {value!r} (expected YYYY-MM-DD)")


#============================================
def check_hash_algorithm(name: str) -> str:
	"""
	Validate a hashlib algorithm name.

	Args:
		name: Algorithm name such as sha256.

	Returns:
		Lowercase algorithm name.
	"""
	cleaned = name.strip().lower()
	if cleaned not in hashlib.algorithms_available:
		raise ValueError(f"Unknown hash algorithm: {name}")
	# shake_* digests have no fixed length
	if hashlib.new(cleaned).digest_size == 0:
		raise ValueError(f"Variable-length hash algorithm not supported: {name}")
	return cleaned


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.

	Raises:
		ConfigError: The file does not parse to a mapping.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"} and yaml:
		with config_path.open("r", encoding="utf-8") as handle:
			try:
				loaded = yaml.safe_load(handle)
			except yaml.YAMLError as error:
				raise ConfigError(f"{config_path}: {error}") from error
	else:
		with config_path.open("r", encoding="utf-8") as handle:
			try:
				loaded = json.load(handle)
			except ValueError as error:
				raise ConfigError(f"{config_path}: {error}") from error
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ConfigError(f"{config_path}: expected a mapping at top level")
	return loaded


#============================================


def apply_user_config(config: AppConfig, user_cfg: dict) -> AppConfig:
	"""
	Merge recognized keys from a user config into config.

	Args:
		config: Configuration to update in place.
		user_cfg: Values from load_user_config.

	Returns:
		The same config object.

	Raises:
		ConfigError: A date or hash algorithm value is invalid.
	"""
	try:
		if user_cfg.get("start_date"):
			config.start_date = parse_date(user_cfg["start_date"])
		if user_cfg.get("hash_algorithm"):
			config.hash_algorithm = check_hash_algorithm(str(user_cfg["hash_algorithm"]))
	except ValueError as error:
		raise ConfigError(f"{config.config_path or 'config'}: {error}") from error
	if "exclude_hidden" in user_cfg:
		config.exclude_hidden = bool(user_cfg.get("exclude_hidden"))
	if "dry_run" in user_cfg:
		config.dry_run = bool(user_cfg.get("dry_run"))
	if "verbose" in user_cfg:
		config.verbose = bool(user_cfg.get("verbose"))
	return config
