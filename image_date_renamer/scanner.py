#!/usr/bin/env python3
"""
Directory scanner for image batches.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from pathlib import Path

# local repo modules
from .config import AppConfig

#============================================


@dataclass(frozen=True, slots=True)
class FileEntry:
	"""
	One file on disk, as seen by a single scan.
	"""

	path: Path

	@property
	def directory(self) -> Path:
		return self.path.parent

	@property
	def stem(self) -> str:
		return self.path.stem

	@property
	def extension(self) -> str:
		return self.path.suffix


#============================================


def iter_files(config: AppConfig) -> list[FileEntry]:
	"""
	List batch files in the configured directory.

	Args:
		config: Application configuration.

	Returns:
		FileEntry list sorted by file name.
	"""
	root = config.normalized_root()
	if not root.is_dir():
		raise NotADirectoryError(f"Not a directory: {root}")
	entries: list[FileEntry] = []
	for path in sorted(root.iterdir(), key=lambda p: p.name):
		if not path.is_file():
			continue
		if config.exclude_hidden and path.name.startswith("."):
			continue
		ext = path.suffix.lower().lstrip(".")
		if ext not in config.include_extensions:
			continue
		entries.append(FileEntry(path=path))
	return entries
