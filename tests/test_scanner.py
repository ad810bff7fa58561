#!/usr/bin/env python3
"""
Tests for directory enumeration.
"""

from pathlib import Path

import pytest

from image_date_renamer.config import AppConfig
from image_date_renamer.scanner import FileEntry, iter_files


def test_only_images_case_insensitive(tmp_path: Path):
	for name in ["b.JPG", "a.png", "c.Jpeg", "notes.txt", "anim.gif", ".hidden.jpg"]:
		(tmp_path / name).write_bytes(name.encode())
	(tmp_path / "sub").mkdir()
	(tmp_path / "sub" / "deep.jpg").write_bytes(b"deep")
	(tmp_path / "folder.jpg").mkdir()
	files = iter_files(AppConfig(root=tmp_path))
	assert [entry.path.name for entry in files] == ["a.png", "b.JPG", "c.Jpeg"]


def test_hidden_files_kept_when_configured(tmp_path: Path):
	(tmp_path / ".x.png").write_bytes(b"x")
	files = iter_files(AppConfig(root=tmp_path, exclude_hidden=False))
	assert [entry.path.name for entry in files] == [".x.png"]


def test_missing_directory_raises(tmp_path: Path):
	with pytest.raises(NotADirectoryError):
		iter_files(AppConfig(root=tmp_path / "nope"))


def test_file_entry_parts(tmp_path: Path):
	entry = FileEntry(tmp_path / "IMG_1.JPEG")
	assert entry.directory == tmp_path
	assert entry.stem == "IMG_1"
	assert entry.extension == ".JPEG"
