#!/usr/bin/env python3
"""
Command line interface for filesaver.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# PIP3 modules
import yaml

# local repo modules
from .config import SaverConfig, load_user_config, parse_folder_args
from .errors import FilesaverError
from .saver import FileSaver

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Move files into named folders without clobbering them."
	)
	parser.add_argument(
		"-a",
		"--alias",
		dest="alias",
		required=True,
		help="Folder alias to deposit into (required).",
	)
	parser.add_argument(
		"-i",
		"--input",
		dest="inputs",
		nargs="+",
		required=True,
		help="Files to move (required).",
	)
	parser.add_argument(
		"-n",
		"--name",
		dest="name",
		help="Destination filename (single input only).",
	)
	parser.add_argument(
		"-f",
		"--folder",
		dest="folders",
		action="append",
		help="Register a folder as ALIAS=PATH (repeatable).",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"-s",
		"--safenames",
		dest="safenames",
		action="store_true",
		help="Sanitize destination filenames.",
	)
	parser.add_argument(
		"-o",
		"--overwrite",
		dest="overwrite",
		action="store_true",
		help="Replace existing files instead of adding a numeric suffix.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.set_defaults(safenames=False, overwrite=False)
	args = parser.parse_args(argv)
	if args.name and len(args.inputs) > 1:
		parser.error("--name needs exactly one --input file")
	return args


#============================================


def build_config(args: argparse.Namespace) -> SaverConfig:
	"""
	Build runtime config from args and file.
	"""
	config = SaverConfig()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
		config.update_from(load_user_config(config.config_path))
	config.folders.update(parse_folder_args(args.folders))
	if args.safenames:
		config.safenames = True
	if args.overwrite:
		config.overwrite = True
	config.verbose = args.verbose
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def run(config: SaverConfig, alias: str, inputs: list[str], name: str | None = None) -> int:
	"""
	Deposit each input file and report the result.

	Returns:
		Process exit status.
	"""
	try:
		saver = FileSaver.from_config(config)
	except FilesaverError as exc:
		print(f"{_color('[ERROR]', '31')} {exc}", file=sys.stderr)
		return 1
	status = 0
	for source in inputs:
		try:
			if config.overwrite:
				saved = saver.put(alias, source, name)
			else:
				saved = saver.add(alias, source, name)
		except FilesaverError as exc:
			print(f"{_color('[ERROR]', '31')} {source}: {exc}", file=sys.stderr)
			status = 1
			continue
		print(f"{_color('[SAVED]', '32')} {source} -> {saved.filepath}")
	return status


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	try:
		config = build_config(args)
	except (FilesaverError, OSError, ValueError, yaml.YAMLError) as exc:
		print(f"{_color('[ERROR]', '31')} {exc}", file=sys.stderr)
		return 1
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	return run(config, args.alias, args.inputs, args.name)


#============================================


if __name__ == "__main__":
	sys.exit(main())
