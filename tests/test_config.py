"""Tests for the save defaults configuration layer."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from blitline import AzureLocation, S3Location
from blitline.core import (
    ConfigError,
    builder_from_config,
    destination_from_config,
    load_project_config,
)


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_project_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_project_config(tmp_path / "missing.json")


def test_load_project_config_reads_json(tmp_path):
    path = _write_config(tmp_path, {"saves": {"quality": 75}})
    config = load_project_config(path)
    assert config == {"saves": {"quality": 75}}
    assert builder_from_config("thumb", config).quality == 75


def test_load_project_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{\"saves\": {\"quality\": 75,}", encoding="utf-8")
    with pytest.raises(ConfigError, match="not valid JSON") as excinfo:
        load_project_config(path)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_load_project_config_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON object"):
        load_project_config(path)


def test_builder_from_config_applies_defaults():
    config = {
        "saves": {
            "quality": 80,
            "saveMetadata": True,
            "exif": {"Artist": "studio"},
            "params": {"cb": "http://x"},
        }
    }
    saved = builder_from_config("thumb", config).to_blitline_container()
    assert saved.to_dict() == {
        "image_identifier": "thumb",
        "quality": 80,
        "save_metadata": True,
        "set_exif": {"Artist": "studio"},
        "cb": "http://x",
    }


def test_builder_from_config_without_saves_section():
    saved = builder_from_config("thumb", {}).to_blitline_container()
    assert saved.to_dict() == {"image_identifier": "thumb"}


@pytest.mark.parametrize(
    "saves",
    [
        {"quality": "high"},
        {"quality": True},
        {"saveMetadata": "yes"},
        {"exif": ["Artist"]},
    ],
)
def test_builder_from_config_rejects_bad_types(saves):
    with pytest.raises(ConfigError):
        builder_from_config("thumb", {"saves": saves})


def test_destination_from_config():
    assert destination_from_config({}) is None
    assert destination_from_config({"saves": {"s3": {"bucket": "b", "key": "k"}}}) == S3Location("b", "k")
    azure = {"saves": {"azure": {"accountName": "acct", "sharedAccessSignature": "sig"}}}
    assert destination_from_config(azure) == AzureLocation("acct", "sig")


def test_destination_from_config_rejects_both():
    config = {
        "saves": {
            "s3": {"bucket": "b", "key": "k"},
            "azure": {"accountName": "acct", "sharedAccessSignature": "sig"},
        }
    }
    with pytest.raises(ConfigError, match="not both"):
        destination_from_config(config)


def test_destination_from_config_missing_key():
    with pytest.raises(ConfigError, match="bucket"):
        destination_from_config({"saves": {"s3": {"key": "k"}}})
