#!/usr/bin/env python3
"""
Two-phase collision-free rename.

Files first move to numeric placeholder names (1.jpg, 2.png, ...) and only
then to their final names. After staging, no final name can still be held by
an unprocessed source file.
"""

from __future__ import annotations

# Standard Library
import logging
from dataclasses import dataclass
from pathlib import Path

# local repo modules
from .errors import LengthMismatchError
from .scanner import FileEntry

logger = logging.getLogger(__name__)

EXTENSION_ALIASES = {".jpeg": ".jpg"}

#============================================


def is_occupied(path: Path) -> bool:
	"""
	True when any directory entry sits at path, dangling symlinks included.
	"""
	return path.exists() or path.is_symlink()


#============================================


def normalize_extension(extension: str) -> str:
	"""
	Lowercase an extension and fold .jpeg into .jpg.

	Args:
		extension: Suffix including the leading dot.

	Returns:
		Normalized suffix.
	"""
	lowered = extension.lower()
	return EXTENSION_ALIASES.get(lowered, lowered)


#============================================


def next_free_path(directory: Path, extension: str, counter: int) -> tuple[Path, int]:
	"""
	Find the first unused numeric name at or above counter.

	Args:
		directory: Folder to look in.
		extension: Normalized suffix.
		counter: First number to try.

	Returns:
		Tuple of (free path, number used).
	"""
	candidate = directory / f"{counter}{extension}"
	while is_occupied(candidate):
		counter += 1
		candidate = directory / f"{counter}{extension}"
	return (candidate, counter)


#============================================


@dataclass(slots=True)
class StageResult:
	"""
	Outcome of the staging phase.

	Attributes:
		files: Staged entries, in the same order as the input.
		next_counter: First placeholder number not yet handed out.
	"""

	files: list[FileEntry]
	next_counter: int


#============================================


def stage_files(files: list[FileEntry], counter: int = 1) -> StageResult:
	"""
	Move every file to a fresh numeric placeholder name.

	The counter carries over from one file to the next and is never reset,
	so a number freed by an earlier file is not reused while later originals
	may still hold it.

	Args:
		files: Files in enumeration order.
		counter: First placeholder number.

	Returns:
		StageResult with the staged entries and the next counter value.
	"""
	staged: list[FileEntry] = []
	for entry in files:
		ext = normalize_extension(entry.extension)
		dest, counter = next_free_path(entry.directory, ext, counter)
		entry.path.rename(dest)
		logger.info(f"[STAGE] {entry.path.name} -> {dest.name}")
		staged.append(FileEntry(path=dest))
		counter += 1
	return StageResult(files=staged, next_counter=counter)


#============================================


def plan_targets(files: list[FileEntry], names: list[str]) -> list[tuple[Path, Path]]:
	"""
	Pair each file with its final path without touching disk.

	Args:
		files: Files in enumeration order.
		names: Target base names, one per file.

	Returns:
		List of (source, target) paths.
	"""
	if len(files) != len(names):
		raise LengthMismatchError(len(files), len(names))
	pairs: list[tuple[Path, Path]] = []
	for entry, name in zip(files, names):
		target = entry.directory / f"{name}{normalize_extension(entry.extension)}"
		pairs.append((entry.path, target))
	return pairs


#============================================


def finalize_files(files: list[FileEntry], names: list[str]) -> list[FileEntry]:
	"""
	Rename staged files to their final names.

	No existence check is made here: staging left only numeric names behind
	and the final names are distinct from each other.

	Args:
		files: Staged files.
		names: Target base names, positionally paired with files.

	Returns:
		Entries for the renamed files, in input order.
	"""
	final: list[FileEntry] = []
	for source, target in plan_targets(files, names):
		source.rename(target)
		logger.info(f"[FINAL] {source.name} -> {target.name}")
		final.append(FileEntry(path=target))
	return final


#============================================


def find_blocked_targets(pairs: list[tuple[Path, Path]]) -> list[Path]:
	"""
	List final paths already held by entries outside the batch.

	A target that is itself one of the batch sources is not blocked, since
	staging moves it away first.

	Args:
		pairs: (source, target) paths from plan_targets.

	Returns:
		Blocked target paths, in plan order.
	"""
	sources = [source for source, _target in pairs]
	source_set = set(sources)
	blocked: list[Path] = []
	for _source, target in pairs:
		if target in source_set or not is_occupied(target):
			continue
		# case-insensitive filesystems report a batch file under another case
		if target.exists() and any(target.samefile(source) for source in sources):
			continue
		blocked.append(target)
	return blocked
