#!/usr/bin/env python3
"""
Repo-root runner for image_date_renamer.

Examples:
	python run_image_rename.py --path ~/Pictures/trip
	python run_image_rename.py --path ~/Pictures/trip --date 2020-06-14 --apply
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

	from image_date_renamer.cli import main as cli_main

	cli_main()


if __name__ == "__main__":
	main()
