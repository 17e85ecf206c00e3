"""
filesaver
=========

Deposit files into named destination folders with optional safe names
and collision-free renaming.
"""

from .errors import (
	FilesaverError,
	InvalidArgumentError,
	InvalidPathError,
	MoveError,
	UnknownFolderError,
)
from .saver import FileSaver, SavedFile

__version__ = "1.0.0"

__all__ = [
	"FileSaver",
	"FilesaverError",
	"InvalidArgumentError",
	"InvalidPathError",
	"MoveError",
	"SavedFile",
	"UnknownFolderError",
	"__version__",
	"config",
	"registry",
	"resolver",
	"sanitizer",
]
