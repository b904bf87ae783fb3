import logging

import pytest

from catalog_test_utils import BSC4S_LINES, BSC5_LINES, write_catalog


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() and the logging config tests reconfigure the root logger"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def bsc5_file(tmp_path):
    return write_catalog(tmp_path / "bsc5.dat", BSC5_LINES)


@pytest.fixture
def bsc4s_file(tmp_path):
    return write_catalog(tmp_path / "bsc4s.dat", BSC4S_LINES)


@pytest.fixture
def alphabet_file(tmp_path):
    path = tmp_path / "Alphabet.dat"
    path.write_text("Alp = α\nBet = β\n\nGam = γ\n", encoding="utf-8")
    return path


@pytest.fixture
def name_dictionary():
    return {"HD 172167": "Vega", "Alp CMa": "Sirius", "SAO 100000": "Supplement One"}
