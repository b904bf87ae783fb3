import json
import logging
import sys

import pytest

from BrightStars.catalog_imports import main


@pytest.fixture
def config_file(tmp_path, bsc5_file, bsc4s_file, alphabet_file):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "bsc5_file": str(bsc5_file),
                "bsc4s_file": str(bsc4s_file),
                "alphabet_file": str(alphabet_file),
            }
        )
    )
    return path


@pytest.mark.smoke
def test_details(monkeypatch, capsys, config_file):
    monkeypatch.setattr(sys, "argv", ["brightstars", "-c", str(config_file), "-d", "3"])
    main()
    details = json.loads(capsys.readouterr().out)
    assert details["spectral_class"] == "A0Va"
    assert details["radial_velocity"] == -14


@pytest.mark.smoke
def test_names_file(monkeypatch, capsys, tmp_path, config_file):
    names = tmp_path / "names.dat"
    names.write_text("HD 172167 = Vega\n", encoding="utf-8")
    monkeypatch.setattr(
        sys, "argv", ["brightstars", "-c", str(config_file), "-n", str(names)]
    )
    main()
    assert capsys.readouterr().out == ""


@pytest.mark.smoke
def test_unknown_star(monkeypatch, capsys, config_file):
    monkeypatch.setattr(sys, "argv", ["brightstars", "-c", str(config_file), "-d", "0"])
    main()
    assert capsys.readouterr().out == ""


@pytest.mark.smoke
def test_logconf_level_kept(monkeypatch, tmp_path, config_file):
    logconf = tmp_path / "logconf.json"
    logconf.write_text(
        '{version: 1, disable_existing_loggers: false, root: {level: "WARNING"},}'
    )
    monkeypatch.setattr(
        sys,
        "argv",
        ["brightstars", "-c", str(config_file), "--logconf", str(logconf)],
    )
    main()
    assert logging.getLogger().level == logging.WARNING
