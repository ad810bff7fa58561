#!/usr/bin/env python3
"""
Content hashing checks run before and after the rename.
"""

from __future__ import annotations

# Standard Library
import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path

# local repo modules
from .scanner import FileEntry

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536

#============================================


def hash_file(path: Path, algorithm: str = "sha256") -> str:
	"""
	Hash the full contents of a file.

	Args:
		path: File to read.
		algorithm: hashlib algorithm name.

	Returns:
		Hex digest string.
	"""
	digest = hashlib.new(algorithm)
	with path.open("rb") as handle:
		for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
			digest.update(chunk)
	return digest.hexdigest()


#============================================


@dataclass(slots=True)
class HashIndex:
	"""
	Lookup from content hash to the first file seen with it.

	Attributes:
		hashes: Digest to first-seen path.
		duplicates: (first, later) path pairs sharing a digest.
	"""

	hashes: dict[str, Path] = field(default_factory=dict)
	duplicates: list[tuple[Path, Path]] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.duplicates


#============================================


def build_hash_index(files: list[FileEntry], algorithm: str = "sha256") -> HashIndex:
	index = HashIndex()
	for entry in files:
		digest = hash_file(entry.path, algorithm)
		first = index.hashes.get(digest)
		if first is not None:
			index.duplicates.append((first, entry.path))
			continue
		index.hashes[digest] = entry.path
	return index


#============================================


def check_no_duplicates(files: list[FileEntry], algorithm: str = "sha256") -> HashIndex:
	"""
	Hash every input file and collect duplicate pairs.

	Args:
		files: Files to check.
		algorithm: hashlib algorithm name.

	Returns:
		HashIndex; ok is False when any content repeats.
	"""
	index = build_hash_index(files, algorithm)
	for first, second in index.duplicates:
		logger.warning(f"duplicate content: {first} == {second}")
	return index


#============================================


@dataclass(slots=True)
class IntegrityReport:
	"""
	Result of the post-rename content check.

	Attributes:
		unknown: Files whose hash did not exist before the rename.
		missing: Hashes present before the rename and gone after it.
		duplicates: Path pairs sharing a hash after the rename.
	"""

	unknown: list[Path] = field(default_factory=list)
	missing: list[str] = field(default_factory=list)
	duplicates: list[tuple[Path, Path]] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not (self.unknown or self.missing or self.duplicates)


#============================================


def check_content_preserved(
	before_hashes: set[str] | dict[str, Path],
	after_files: list[FileEntry],
	algorithm: str = "sha256",
) -> IntegrityReport:
	"""
	Compare post-rename content with the pre-rename hash set.

	Args:
		before_hashes: Digests recorded before any rename.
		after_files: Files found after the rename.
		algorithm: hashlib algorithm name.

	Returns:
		IntegrityReport; ok is False on any drift.
	"""
	before = set(before_hashes)
	index = build_hash_index(after_files, algorithm)
	report = IntegrityReport(duplicates=list(index.duplicates))
	for digest, path in index.hashes.items():
		if digest not in before:
			report.unknown.append(path)
			logger.error(f"content changed: {path}")
	report.missing = sorted(before.difference(index.hashes))
	for digest in report.missing:
		logger.error(f"content lost: {digest}")
	return report
