#!/usr/bin/env python3
"""
Repo-root runner for filesaver.

Examples:
	python run_filesaver.py -f images=./images -a images -i /tmp/photo.jpg
	python run_filesaver.py -c folders.yml -a books -i book.pdf -n "My Book.pdf" -s
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from filesaver.cli import main as cli_main

	sys.exit(cli_main())


if __name__ == "__main__":
	main()
