"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

import json

import pytest

from field25519 import FieldError, cli, config
from field25519.field import P


TWO = "02" + "00" * 31
THREE = "03" + "00" * 31
HALF = "f7" + "ff" * 30 + "3f"
PHEX = P.to_bytes(32, byteorder="little").hex()


def test_run(prepareLogger):
    assert cli.run("inverse", [TWO]) == HALF
    assert cli.run("add", [TWO, THREE]) == "05" + "00" * 31
    assert cli.run("mul", [TWO, THREE], fmt=config.INT) == "6"
    assert cli.run("sub", [TWO, THREE], fmt=config.INT) == str(P - 1)
    assert cli.run("pack", [PHEX]) == "00" * 32
    limbs = cli.run("unpack", [TWO]).split()
    assert limbs == ["0x0002"] + ["0x0000"] * 15

    with pytest.raises(FieldError):
        cli.run("add", [TWO])
    with pytest.raises(FieldError):
        cli.run("pack", [PHEX], strict=True)


def test_main(tmp_path, capsys):
    datadir = str(tmp_path)
    assert cli.main(["--datadir", datadir, "inverse", TWO]) == 0
    assert capsys.readouterr().out.strip() == HALF

    assert cli.main(["--datadir", datadir, "--format", "int", "mul", TWO, THREE]) == 0
    assert capsys.readouterr().out.strip() == "6"

    # The configured format applies when no flag is given.
    (tmp_path / config.CONFIG_NAME).write_text(json.dumps({"format": "int"}))
    assert cli.main(["--datadir", datadir, "add", TWO, THREE]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_main_errors(tmp_path, capsys):
    datadir = str(tmp_path)
    assert cli.main(["--datadir", datadir, "--strict", "pack", PHEX]) == 1
    assert cli.main(["--datadir", datadir, "pack", "abc"]) == 1
    assert cli.main(["--datadir", datadir, "--loglevel", "loud", "pack", TWO]) == 1
    assert capsys.readouterr().out == ""

    with pytest.raises(SystemExit):
        cli.main(["--datadir", datadir, "divide", TWO])


def test_logfile(tmp_path, capsys):
    logfile = tmp_path / "cli.log"
    args = ["--datadir", str(tmp_path), "--logfile", str(logfile)]
    assert cli.main(args + ["--loglevel", "debug", "pack", TWO]) == 0
    assert "pack on 1 operand(s)" in logfile.read_text()

    # Failures log the traceback at debug level.
    assert cli.main(args + ["--loglevel", "debug", "--strict", "pack", PHEX]) == 1
    text = logfile.read_text()
    assert "unpackStrict: value is not reduced" in text
    assert "Traceback (most recent call last)" in text


def test_null_settings(tmp_path, capsys):
    # Settings of the wrong type fall back to defaults instead of failing.
    (tmp_path / config.CONFIG_NAME).write_text(
        json.dumps({"format": None, "loglevel": None})
    )
    assert cli.main(["--datadir", str(tmp_path), "pack", "00" * 32]) == 0
    assert capsys.readouterr().out.strip() == "00" * 32
