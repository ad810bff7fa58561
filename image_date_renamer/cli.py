#!/usr/bin/env python3
"""
Command line interface for image-date-renamer.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from .config import AppConfig, apply_user_config, check_hash_algorithm, load_user_config, parse_date
from .errors import RenameError
from .organizer import Organizer

FILESYSTEM_ERROR_EXIT = 4

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Rename .jpg/.jpeg/.png files in a folder to YYYYMMDD_nn names."
	)
	parser.add_argument(
		"-p",
		"--path",
		dest="path",
		required=True,
		help="Folder holding the images (required).",
	)
	mode_group = parser.add_mutually_exclusive_group()
	mode_group.add_argument(
		"-a",
		"--apply",
		dest="apply",
		action="store_true",
		help="Perform the renames.",
	)
	mode_group.add_argument(
		"-d",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Only print planned renames (default).",
	)
	parser.add_argument(
		"-D",
		"--date",
		dest="start_date",
		type=parse_date,
		help="First date of the sequence as YYYY-MM-DD (default today).",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"--hash-algorithm",
		dest="hash_algorithm",
		type=check_hash_algorithm,
		help="hashlib algorithm for content checks (default sha256).",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.set_defaults(apply=False, dry_run=False)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and file.
	"""
	config = AppConfig()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
		apply_user_config(config, load_user_config(config.config_path))
	config.root = Path(args.path).expanduser()
	if args.apply:
		config.dry_run = False
	elif args.dry_run:
		config.dry_run = True
	if args.start_date:
		config.start_date = args.start_date
	if args.hash_algorithm:
		config.hash_algorithm = args.hash_algorithm
	if args.verbose:
		config.verbose = True
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def run(argv: list[str] | None = None) -> int:
	"""
	Run the renamer and return the process exit code.
	"""
	args = parse_args(argv)
	try:
		config = build_config(args)
		if config.verbose:
			logging.basicConfig(level=logging.INFO)
		else:
			logging.basicConfig(level=logging.WARNING)
		result = Organizer(config=config).run()
	except RenameError as error:
		print(f"{_color('[ABORT]', '31')} {error}")
		return error.exit_code
	except OSError as error:
		logging.error(f"filesystem error: {error}")
		print(f"{_color('[ABORT]', '31')} {error}")
		return FILESYSTEM_ERROR_EXIT
	return result.exit_code


#============================================


def main() -> None:
	"""
	Entry point for the CLI.
	"""
	sys.exit(run())


#============================================


if __name__ == "__main__":
	main()
