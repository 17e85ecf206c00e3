#!/usr/bin/env python3
"""
Local filesystem operations used by the registry and saver.
"""

# Standard Library
import os
from pathlib import Path

#============================================


class LocalFileSystem:
	"""
	Thin wrapper over the local disk.

	Any object with the same methods can stand in for it.
	"""

	#============================================
	def exists(self, path: Path) -> bool:
		# dangling symlinks count as taken
		return os.path.lexists(path)

	#============================================
	def is_file(self, path: Path) -> bool:
		return Path(path).is_file()

	#============================================
	def make_dirs(self, path: Path) -> None:
		"""
		Create a directory and its parents; no-op when present.
		"""
		Path(path).mkdir(parents=True, exist_ok=True)

	#============================================
	def rename(self, source: Path, target: Path) -> None:
		"""
		Move source to target, replacing any file already at target.

		Args:
			source: Existing file.
			target: Destination path inside an existing directory.
		"""
		os.replace(source, target)
