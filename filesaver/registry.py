#!/usr/bin/env python3
"""
Folder alias registry.
"""

# Standard Library
import logging
from pathlib import Path

# local repo modules
from .errors import InvalidArgumentError, InvalidPathError, UnknownFolderError
from .filesystem import LocalFileSystem

logger = logging.getLogger(__name__)

#============================================


def is_empty_path(directory) -> bool:
	"""
	True for None, blank strings and Path(""), which pathlib turns into ".".
	"""
	if directory is None:
		return True
	if isinstance(directory, str):
		return not directory.strip()
	return Path(directory) == Path("")


#============================================


class FolderRegistry:
	"""
	Maps folder aliases to absolute directories that exist on disk.
	"""

	#============================================
	def __init__(self, folders: dict | None = None, filesystem=None) -> None:
		self.filesystem = filesystem or LocalFileSystem()
		self._folders: dict[str, Path] = {}
		for alias, directory in (folders or {}).items():
			self.register(alias, directory)

	#============================================
	def register(self, alias: str, directory) -> Path:
		"""
		Register an alias, creating its directory when missing.

		Re-registering an alias replaces the previous path.

		Args:
			alias: Logical folder name.
			directory: Directory path, relative paths are made absolute.

		Returns:
			Absolute directory path stored for the alias.
		"""
		if not alias or not isinstance(alias, str):
			raise InvalidArgumentError("folder alias must be a non-empty string")
		if is_empty_path(directory):
			raise InvalidPathError(f"empty directory path for folder {alias!r}")
		path = Path(directory).expanduser().absolute()
		if not self.filesystem.exists(path):
			try:
				self.filesystem.make_dirs(path)
			except OSError as exc:
				raise InvalidPathError(f"cannot create folder {path}: {exc}") from exc
			logger.info(f"created folder {path}")
		self._folders[alias] = path
		logger.info(f"registered folder {alias} -> {path}")
		return path

	#============================================
	def resolve(self, alias: str) -> Path:
		"""
		Look up the directory for an alias.

		Args:
			alias: Logical folder name.

		Returns:
			Absolute directory path.
		"""
		try:
			return self._folders[alias]
		except KeyError:
			raise UnknownFolderError(alias) from None

	#============================================
	def aliases(self) -> list[str]:
		return list(self._folders)

	def __contains__(self, alias: object) -> bool:
		return alias in self._folders

	def __len__(self) -> int:
		return len(self._folders)
