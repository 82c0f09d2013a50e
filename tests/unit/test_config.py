"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

import json

import pytest

from field25519 import FieldError, config


def test_defaults(tmp_path):
    cfg = config.load(str(tmp_path / "data"))
    assert (tmp_path / "data" / config.CONFIG_NAME).is_file()
    assert cfg.get("format") == config.HEX
    assert cfg.get("loglevel") == "INFO"
    assert cfg.get("missing") is None
    assert cfg.get("format", "deeper") is None


def test_save(tmp_path):
    cfg = config.FieldConfig(str(tmp_path))
    cfg.set("format", config.INT)
    cfg.set("nested", {"a": {"b": 1}})
    cfg.save()
    assert json.loads((tmp_path / config.CONFIG_NAME).read_text())["format"] == "int"

    cfg = config.FieldConfig(str(tmp_path))
    assert cfg.get("format") == config.INT
    assert cfg.get("nested", "a", "b") == 1


def test_normalize(tmp_path):
    path = tmp_path / config.CONFIG_NAME
    path.write_text(json.dumps({"format": "octal", "loglevel": "loud"}))
    cfg = config.FieldConfig(str(tmp_path))
    assert cfg.get("format") == config.HEX
    assert cfg.get("loglevel") == "INFO"

    # Values of the wrong JSON type are replaced as well.
    for bad in (None, [], {}):
        path.write_text(json.dumps({"format": bad, "loglevel": bad}))
        cfg = config.FieldConfig(str(tmp_path))
        assert cfg.get("format") == config.HEX
        assert cfg.get("loglevel") == "INFO"


def test_bad_datadir(tmp_path):
    path = tmp_path / "file"
    path.write_text("")
    with pytest.raises(FieldError):
        config.FieldConfig(str(path))
