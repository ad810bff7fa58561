#!/usr/bin/env python3
"""
Core organizer: scan -> hash check -> stage -> finalize -> verify.
"""

# Standard Library
import logging
from dataclasses import dataclass, field
from pathlib import Path
import sys

# local repo modules
from .config import AppConfig
from .errors import ContentIntegrityError, DuplicateContentError, TargetOccupiedError
from .integrity import check_content_preserved, check_no_duplicates
from .renamer import find_blocked_targets, finalize_files, plan_targets, stage_files
from .scanner import iter_files
from .sequencer import generate_names

logger = logging.getLogger(__name__)

#============================================


@dataclass(slots=True)
class RunResult:
	"""
	Summary of one run.

	Attributes:
		status: "empty", "dry_run" or "renamed".
		changes: (source, target) pairs, planned or applied.
		exit_code: Process exit code for the run.
	"""

	status: str
	changes: list[tuple[Path, Path]] = field(default_factory=list)
	exit_code: int = 0


#============================================


class Organizer:
	"""
	Orchestrates the checked two-phase rename of one directory.
	"""

	#============================================
	def _color(self, text: str, code: str) -> str:
		if sys.stdout.isatty():
			return f"\033[{code}m{text}\033[0m"
		return text

	#============================================
	def _info(self, message: str) -> None:
		print(f"{self._color('[INFO]', '34')} {message}")

	#============================================
	def _error(self, message: str) -> None:
		print(f"{self._color('[ERROR]', '31')} {message}")

	#============================================
	def __init__(self, config: AppConfig) -> None:
		self.config = config

	#============================================
	def run(self) -> RunResult:
		"""
		Rename every image in the configured directory.

		Returns:
			RunResult for the run.

		Raises:
			DuplicateContentError: Input files share content; nothing renamed.
			LengthMismatchError: Name count differs from file count.
			TargetOccupiedError: A final name is held by an entry outside the batch.
			ContentIntegrityError: Content changed during the rename.
		"""
		algorithm = self.config.hash_algorithm
		root = self.config.normalized_root()
		self._info(f"Start: {root}")
		files = iter_files(self.config)
		if not files:
			self._info("No image files found.")
			return RunResult(status="empty")
		self._info(f"Found {len(files)} image files.")

		before = check_no_duplicates(files, algorithm)
		if not before.ok:
			for first, second in before.duplicates:
				self._error(f"Duplicate content: {first} == {second}")
			raise DuplicateContentError(before.duplicates)

		start_date = self.config.resolved_start_date()
		names = generate_names(len(files), start_date)

		changes = plan_targets(files, names)
		blocked = find_blocked_targets(changes)
		if blocked:
			for path in blocked:
				self._error(f"Target name taken by another entry: {path}")
			raise TargetOccupiedError(blocked)

		if self.config.dry_run:
			for source, target in changes:
				print(f"{self._color('[DRY RUN]', '33')} {source.name} -> {target.name}")
			self._info("End (dry run, nothing renamed).")
			return RunResult(status="dry_run", changes=changes)

		originals = [entry.path for entry in files]
		staged = stage_files(files)
		logger.info(f"staged {len(staged.files)} files, next placeholder {staged.next_counter}")
		final = finalize_files(staged.files, names)
		changes = list(zip(originals, [entry.path for entry in final]))
		for source, target in changes:
			print(f"{self._color('[APPLY]', '32')} {source.name} -> {target.name}")

		after_files = iter_files(self.config)
		self._info(f"Found {len(after_files)} image files after rename.")
		report = check_content_preserved(before.hashes, after_files, algorithm)
		if not report.ok:
			for path in report.unknown:
				self._error(f"Content changed: {path}")
			for digest in report.missing:
				self._error(f"Content lost: {before.hashes[digest]} ({digest})")
			for first, second in report.duplicates:
				self._error(f"Duplicate content after rename: {first} == {second}")
			raise ContentIntegrityError(report)
		self._info("End.")
		return RunResult(status="renamed", changes=changes)
