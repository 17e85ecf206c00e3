#!/usr/bin/env python3
"""
Find a free destination path by appending a numeric suffix.
"""

# Standard Library
import logging
import os
from pathlib import Path

# local repo modules
from .filesystem import LocalFileSystem

logger = logging.getLogger(__name__)

#============================================


def split_name(path: Path) -> tuple[Path, str, str]:
	"""
	Split a path into directory, stem and extension.

	Only the last dot counts, so "a.tar.gz" is ("a.tar", ".gz").
	A name without a dot has an empty extension.

	Args:
		path: File path.

	Returns:
		Tuple of (directory, stem, extension).
	"""
	path = Path(path)
	stem, ext = os.path.splitext(path.name)
	return (path.parent, stem, ext)


#============================================


def resolve_available_path(candidate: Path, filesystem=None) -> Path:
	"""
	Return the first path that does not exist yet.

	The candidate itself is tried first, then "stem_1.ext", "stem_2.ext"
	and so on. A stem that already ends in "_<digits>" gets a fresh
	counter appended, so "photo_1.jpg" becomes "photo_1_1.jpg".

	The answer is only true at the moment of return; nothing reserves it.

	Args:
		candidate: Desired destination path.
		filesystem: Object providing exists(); defaults to local disk.

	Returns:
		Free destination path.
	"""
	fs = filesystem or LocalFileSystem()
	candidate = Path(candidate)
	if not fs.exists(candidate):
		return candidate
	directory, stem, ext = split_name(candidate)
	counter = 1
	while True:
		probe = directory / f"{stem}_{counter}{ext}"
		logger.debug(f"collision probe {probe}")
		if not fs.exists(probe):
			logger.warning(f"{candidate.name} exists; using {probe.name}")
			return probe
		counter += 1
