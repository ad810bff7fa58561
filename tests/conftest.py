"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from PIL import Image


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


def write_image(path: Path, color: tuple[int, int, int]) -> Path:
	"""
	Write a small solid-color image; the format follows the suffix.

	JPEG output carries a comment with the color so that nearby colors never
	compress to identical bytes.
	"""
	image = Image.new("RGB", (16, 16), color=color)
	if path.suffix.lower() in {".jpg", ".jpeg"}:
		image.save(path, format="JPEG", comment=f"color {color}")
	else:
		image.save(path, format="PNG")
	return path


def color_for(index: int) -> tuple[int, int, int]:
	return ((index * 37) % 256, (index * 91) % 256, (index * 13 + 7) % 256)


@pytest.fixture
def image_dir(tmp_path: Path):
	"""
	Factory that fills tmp_path with distinct images named as given.
	"""

	def _make(names: list[str]) -> Path:
		for idx, name in enumerate(names):
			write_image(tmp_path / name, color_for(idx))
		return tmp_path

	return _make
