#!/usr/bin/env python3
"""
Tests for CLI flags and exit codes.
"""

import datetime
from pathlib import Path

import pytest

from image_date_renamer.cli import build_config, parse_args, run

from conftest import write_image


def test_defaults_to_dry_run(tmp_path: Path):
	cfg = build_config(parse_args(["-p", str(tmp_path)]))
	assert cfg.dry_run is True
	assert cfg.start_date is None
	assert cfg.hash_algorithm == "sha256"


def test_apply_and_date_flags(tmp_path: Path):
	cfg = build_config(parse_args(["-p", str(tmp_path), "-a", "-D", "2020-06-14", "--hash-algorithm", "md5"]))
	assert cfg.dry_run is False
	assert cfg.start_date == datetime.date(2020, 6, 14)
	assert cfg.hash_algorithm == "md5"


def test_apply_and_dry_run_conflict(tmp_path: Path):
	with pytest.raises(SystemExit):
		parse_args(["-p", str(tmp_path), "-a", "-d"])


def test_bad_date_rejected(tmp_path: Path):
	with pytest.raises(SystemExit):
		parse_args(["-p", str(tmp_path), "-D", "tomorrow"])


def test_cli_flags_override_config_file(tmp_path: Path):
	cfg_path = tmp_path / "cfg.yaml"
	cfg_path.write_text("start_date: 2019-01-01\ndry_run: false\n", encoding="utf-8")
	cfg = build_config(parse_args(["-p", str(tmp_path), "-c", str(cfg_path), "-D", "2020-06-14"]))
	assert cfg.start_date == datetime.date(2020, 6, 14)
	assert cfg.dry_run is False


def test_exit_zero_on_empty(tmp_path: Path, capsys):
	assert run(["-p", str(tmp_path), "-a"]) == 0
	assert "No image files found" in capsys.readouterr().out


def test_exit_zero_on_success(tmp_path: Path):
	write_image(tmp_path / "a.png", (1, 2, 3))
	write_image(tmp_path / "b.JPEG", (200, 2, 3))
	assert run(["-p", str(tmp_path), "-a", "-D", "2020-06-14"]) == 0
	assert sorted(p.name for p in tmp_path.iterdir()) == ["20200614_01.png", "20200614_02.jpg"]


def test_exit_nonzero_on_duplicates(tmp_path: Path, capsys):
	write_image(tmp_path / "a.png", (1, 2, 3))
	write_image(tmp_path / "b.png", (1, 2, 3))
	assert run(["-p", str(tmp_path), "-a"]) == 1
	out = capsys.readouterr().out
	assert "a.png" in out and "b.png" in out
	assert sorted(p.name for p in tmp_path.iterdir()) == ["a.png", "b.png"]


def test_exit_code_for_missing_directory(tmp_path: Path):
	assert run(["-p", str(tmp_path / "missing"), "-a"]) == 4


def test_variable_length_hash_flag_rejected(tmp_path: Path):
	with pytest.raises(SystemExit):
		parse_args(["-p", str(tmp_path), "--hash-algorithm", "shake_128"])


@pytest.mark.parametrize(
	"name, text",
	[
		("cfg.yaml", "start_date: not a date\n"),
		("cfg.yaml", "hash_algorithm: shake_256\n"),
		("cfg.yaml", "start_date: [2020\n"),
		("cfg.json", "{broken"),
	],
)
def test_bad_config_file_aborts_with_config_code(tmp_path: Path, capsys, name: str, text: str):
	cfg_path = tmp_path / name
	cfg_path.write_text(text, encoding="utf-8")
	assert run(["-p", str(tmp_path), "-a", "-c", str(cfg_path)]) == 6
	assert "[ABORT]" in capsys.readouterr().out


def test_occupied_target_leaves_directory_untouched(tmp_path: Path):
	write_image(tmp_path / "a.png", (1, 2, 3))
	(tmp_path / "20200614_01.png").mkdir()
	assert run(["-p", str(tmp_path), "-a", "-D", "2020-06-14"]) == 5
	assert sorted(p.name for p in tmp_path.iterdir()) == ["20200614_01.png", "a.png"]
