#!/usr/bin/env python3
"""
Errors raised by the rename pipeline.
"""

from __future__ import annotations

# Standard Library
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .integrity import IntegrityReport

#============================================


class RenameError(Exception):
	"""Base error for the project."""

	exit_code = 1


class DuplicateContentError(RenameError):
	"""
	Two or more input files share the same content hash.
	"""

	exit_code = 1

	def __init__(self, pairs: list[tuple[Path, Path]]) -> None:
		self.pairs = pairs
		super().__init__(f"{len(pairs)} duplicate file pair(s) found; nothing renamed.")


class LengthMismatchError(RenameError):
	exit_code = 3

	def __init__(self, file_count: int, name_count: int) -> None:
		self.file_count = file_count
		self.name_count = name_count
		super().__init__(f"{file_count} files but {name_count} target names.")


class ContentIntegrityError(RenameError):
	"""
	File content after the rename does not match the content before it.
	"""

	exit_code = 2

	def __init__(self, report: IntegrityReport) -> None:
		self.report = report
		super().__init__(
			f"content check failed: {len(report.unknown)} unknown, "
			f"{len(report.missing)} missing, {len(report.duplicates)} duplicate."
		)


class TargetOccupiedError(RenameError):
	"""
	A final name is held by an entry outside the batch; nothing renamed.
	"""

	exit_code = 5

	def __init__(self, paths: list[Path]) -> None:
		self.paths = paths
		super().__init__(f"{len(paths)} target name(s) already taken by other entries; nothing renamed.")


class ConfigError(RenameError):
	"""Invalid user config file or value."""

	exit_code = 6
