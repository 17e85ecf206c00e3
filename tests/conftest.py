"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]

# import filesaver from this checkout, not from site-packages
if str(REPO_ROOT) not in sys.path:
	sys.path.insert(0, str(REPO_ROOT))

from filesaver.filesystem import LocalFileSystem  # noqa: E402


class FailingRenameFS(LocalFileSystem):
	"""
	Test-only filesystem whose rename always fails.
	"""

	def __init__(self, error: OSError) -> None:
		self.error = error
		self.rename_calls: list[tuple[Path, Path]] = []

	def rename(self, source: Path, target: Path) -> None:
		self.rename_calls.append((Path(source), Path(target)))
		raise self.error


class RecordingFS(LocalFileSystem):
	"""
	Test-only filesystem that counts directory creation.
	"""

	def __init__(self) -> None:
		self.made_dirs: list[Path] = []

	def make_dirs(self, path: Path) -> None:
		self.made_dirs.append(Path(path))
		super().make_dirs(path)
