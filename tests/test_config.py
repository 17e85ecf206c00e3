#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest

from filesaver.config import SaverConfig, load_user_config, parse_folder_args
from filesaver.errors import InvalidArgumentError, InvalidPathError


def test_load_yaml(tmp_path: Path):
	cfg_path = tmp_path / "filesaver.yml"
	cfg_path.write_text("folders:\n  images: ./images\nsafenames: true\n", encoding="utf-8")
	loaded = load_user_config(cfg_path)
	assert loaded == {"folders": {"images": "./images"}, "safenames": True}


def test_load_json(tmp_path: Path):
	cfg_path = tmp_path / "filesaver.json"
	cfg_path.write_text('{"overwrite": true}', encoding="utf-8")
	assert load_user_config(cfg_path) == {"overwrite": True}


def test_missing_config_is_empty(tmp_path: Path):
	assert load_user_config(tmp_path / "absent.yml") == {}
	assert load_user_config(None) == {}


def test_update_from():
	config = SaverConfig()
	config.update_from({"folders": {"books": "~/books"}, "safenames": 1})
	assert config.folders["books"] == Path("~/books").expanduser()
	assert config.safenames is True
	assert config.overwrite is False


def test_update_from_rejects_bad_folders():
	with pytest.raises(InvalidArgumentError):
		SaverConfig().update_from({"folders": ["images"]})


def test_parse_folder_args():
	assert parse_folder_args(["images=./img", " docs = /tmp/docs "]) == {
		"images": Path("./img"),
		"docs": Path("/tmp/docs"),
	}
	assert parse_folder_args(None) == {}
	with pytest.raises(InvalidArgumentError):
		parse_folder_args(["images"])
	with pytest.raises(InvalidArgumentError):
		parse_folder_args(["=./img"])


@pytest.mark.parametrize("directory", [None, ""])
def test_update_from_rejects_blank_folder(directory):
	config = SaverConfig()
	with pytest.raises(InvalidPathError):
		config.update_from({"folders": {"images": directory}})
	assert config.folders == {}


def test_yaml_folder_without_value(tmp_path: Path):
	cfg_path = tmp_path / "filesaver.yml"
	cfg_path.write_text("folders:\n  images:\n", encoding="utf-8")
	with pytest.raises(InvalidPathError):
		SaverConfig().update_from(load_user_config(cfg_path))


@pytest.mark.parametrize(
	"name, content",
	[("list.yml", "- images\n- docs\n"), ("scalar.json", "42"), ("list.json", '["images"]')],
)
def test_non_mapping_config_rejected(tmp_path: Path, name: str, content: str):
	cfg_path = tmp_path / name
	cfg_path.write_text(content, encoding="utf-8")
	with pytest.raises(InvalidArgumentError):
		load_user_config(cfg_path)


def test_empty_yaml_is_empty(tmp_path: Path):
	cfg_path = tmp_path / "empty.yml"
	cfg_path.write_text("", encoding="utf-8")
	assert load_user_config(cfg_path) == {}
