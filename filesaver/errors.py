#!/usr/bin/env python3
"""
Error kinds raised by filesaver.
"""


class FilesaverError(Exception):
	"""
	Base class for all filesaver errors.
	"""


class InvalidArgumentError(FilesaverError, ValueError):
	"""
	Bad call shape: empty alias or source, or a source that does not exist.
	"""


class InvalidPathError(FilesaverError, ValueError):
	"""
	Folder path is empty or could not be created.
	"""


class UnknownFolderError(FilesaverError, KeyError):
	"""
	Folder alias is not registered.
	"""

	def __init__(self, alias: str) -> None:
		super().__init__(alias)
		self.alias = alias

	def __str__(self) -> str:
		return f"unknown folder alias: {self.alias!r}"


class MoveError(FilesaverError, OSError):
	"""
	Underlying rename failed.
	"""
