#!/usr/bin/env python3
"""
FileSaver: move files into aliased folders.

Example:
	saver = FileSaver(folders={"images": "./images"}, safenames=True)
	saved = saver.add("images", "/tmp/upload.jpg", "photo.jpg")
	print(saved.filename, saved.filepath)
"""

from __future__ import annotations

# Standard Library
import logging
from dataclasses import dataclass
from pathlib import Path

# local repo modules
from .config import SaverConfig
from .errors import InvalidArgumentError, MoveError
from .filesystem import LocalFileSystem
from .registry import FolderRegistry
from .resolver import resolve_available_path
from .sanitizer import sanitize_filename

logger = logging.getLogger(__name__)

#============================================


@dataclass(slots=True, frozen=True)
class DepositRequest:
	"""
	One put or add call.
	"""

	alias: str
	source: Path
	dest_name: str
	overwrite: bool


@dataclass(slots=True, frozen=True)
class ResolvedTarget:
	"""
	Concrete destination for a deposit.
	"""

	filepath: Path
	filename: str


@dataclass(slots=True, frozen=True)
class SavedFile:
	"""
	Result of a successful put or add.

	Attributes:
		filename: Final file name inside the folder.
		filepath: Final absolute path.
	"""

	filename: str
	filepath: Path


#============================================


def _is_filled(value) -> bool:
	if isinstance(value, Path):
		return bool(str(value))
	return isinstance(value, str) and bool(value)


#============================================


def _is_alias(value) -> bool:
	return isinstance(value, str) and bool(value)


#============================================


class FileSaver:
	"""
	Deposits files into registered folders.

	put() replaces an existing file of the same name; add() never does and
	picks "name_N.ext" instead. The check in add() is not atomic: another
	writer can take the chosen name before the move happens.
	"""

	#============================================
	def __init__(
		self,
		folders: dict | None = None,
		safenames: bool = False,
		filesystem=None,
	) -> None:
		self.filesystem = filesystem or LocalFileSystem()
		self.safenames = safenames
		self.registry = FolderRegistry(folders, filesystem=self.filesystem)

	#============================================
	@classmethod
	def from_config(cls, config: SaverConfig, filesystem=None) -> FileSaver:
		"""
		Build a saver from runtime configuration.

		Args:
			config: Loaded configuration.
			filesystem: Optional filesystem override.

		Returns:
			FileSaver instance.
		"""
		return cls(
			folders=config.folders,
			safenames=config.safenames,
			filesystem=filesystem,
		)

	#============================================
	def folder(self, alias: str, directory) -> Path:
		"""
		Register a folder alias, creating the directory when missing.

		Args:
			alias: Logical folder name.
			directory: Directory path.

		Returns:
			Absolute directory path.
		"""
		return self.registry.register(alias, directory)

	add_folder = folder

	#============================================
	def put(self, alias: str, source, dest_name: str | None = None) -> SavedFile:
		"""
		Move a file into a folder, overwriting any file with the same name.

		Args:
			alias: Registered folder alias.
			source: Path of the file to move.
			dest_name: Destination filename; defaults to the source name.

		Returns:
			SavedFile with final name and path.
		"""
		request = self._build_request(alias, source, dest_name, overwrite=True)
		return self._deposit(request)

	#============================================
	def add(self, alias: str, source, dest_name: str | None = None) -> SavedFile:
		"""
		Move a file into a folder without overwriting anything.

		When the name is taken a numeric suffix is appended, for example
		"photo.jpg" becomes "photo_1.jpg".

		Args:
			alias: Registered folder alias.
			source: Path of the file to move.
			dest_name: Destination filename; defaults to the source name.

		Returns:
			SavedFile with final name and path.
		"""
		request = self._build_request(alias, source, dest_name, overwrite=False)
		return self._deposit(request)

	#============================================
	def _build_request(
		self, alias: str, source, dest_name: str | None, overwrite: bool
	) -> DepositRequest:
		if not _is_alias(alias) or not _is_filled(source):
			raise InvalidArgumentError("folder or origin not valid")
		source_path = Path(source)
		if not self.filesystem.is_file(source_path):
			raise InvalidArgumentError(f"origin is not an existing file: {source_path}")
		if not dest_name:
			dest_name = source_path.name
		return DepositRequest(
			alias=alias,
			source=source_path,
			dest_name=str(dest_name),
			overwrite=overwrite,
		)

	#============================================
	def _resolve_target(self, request: DepositRequest) -> ResolvedTarget:
		directory = self.registry.resolve(request.alias)
		# only the last segment is kept so names cannot leave the folder
		filename = Path(request.dest_name).name
		if filename in ("", ".", ".."):
			raise InvalidArgumentError(f"invalid destination name: {request.dest_name!r}")
		if self.safenames:
			filename = sanitize_filename(filename)
		filepath = directory / filename
		if not request.overwrite:
			filepath = resolve_available_path(filepath, self.filesystem)
		return ResolvedTarget(filepath=filepath, filename=filepath.name)

	#============================================
	def _deposit(self, request: DepositRequest) -> SavedFile:
		target = self._resolve_target(request)
		try:
			self.filesystem.rename(request.source, target.filepath)
		except OSError as exc:
			raise MoveError(
				f"cannot move {request.source} to {target.filepath}: {exc}"
			) from exc
		mode = "put" if request.overwrite else "add"
		logger.info(f"{mode} {request.source} -> {target.filepath}")
		return SavedFile(filename=target.filename, filepath=target.filepath)
