#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import json

# PIP3 modules
import yaml

# local repo modules
from .errors import InvalidArgumentError, InvalidPathError
from .registry import is_empty_path

#============================================


def _default_folders() -> dict[str, Path]:
	return {}


#============================================


@dataclass(slots=True)
class SaverConfig:
	"""
	Runtime configuration settings.

	Attributes:
		folders: Folder alias to directory mapping.
		safenames: Sanitize destination names when True.
		overwrite: Use put (replace) instead of add (rename on collision).
		verbose: Verbose logging.
		config_path: Optional user config path.
	"""
	folders: dict[str, Path] = field(default_factory=_default_folders)
	safenames: bool = False
	overwrite: bool = False
	verbose: bool = False
	config_path: Path | None = None

	#============================================
	def update_from(self, user_cfg: dict) -> None:
		"""
		Merge values loaded from a user config file.

		Args:
			user_cfg: Dictionary from load_user_config().
		"""
		if not isinstance(user_cfg, dict):
			raise InvalidArgumentError("config must be a mapping")
		folders = user_cfg.get("folders") or {}
		if not isinstance(folders, dict):
			raise InvalidArgumentError("'folders' must be a mapping of alias to path")
		for alias, directory in folders.items():
			if is_empty_path(directory):
				raise InvalidPathError(f"empty directory path for folder {alias!r}")
			self.folders[str(alias)] = Path(str(directory)).expanduser()
		if "safenames" in user_cfg:
			self.safenames = bool(user_cfg.get("safenames"))
		if "overwrite" in user_cfg:
			self.overwrite = bool(user_cfg.get("overwrite"))


#============================================
def parse_folder_args(pairs: list[str] | None) -> dict[str, Path]:
	"""
	Parse "alias=path" folder pairs.

	Args:
		pairs: Pairs from CLI.

	Returns:
		Mapping of alias to path.
	"""
	folders: dict[str, Path] = {}
	for pair in pairs or []:
		alias, sep, directory = pair.partition("=")
		alias = alias.strip()
		directory = directory.strip()
		if not sep or not alias or not directory:
			raise InvalidArgumentError(f"folder must look like ALIAS=PATH, got {pair!r}")
		folders[alias] = Path(directory).expanduser()
	return folders


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
	else:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = json.load(handle)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise InvalidArgumentError(f"config {config_path} must hold a mapping at the top level")
	return loaded
