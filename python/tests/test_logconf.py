import logging
from io import StringIO

import pytest

from BrightStars import logconf


@pytest.mark.unit
def test_read_config_json5():
    config = """
    // comments and trailing commas are fine
    {
        "version": 1,
        "disable_existing_loggers": false,
        "loggers": {
            "BrightStars.Test": {"level": "WARNING"},
        },
    }
    """
    logconf.read_config(StringIO(config))
    assert logging.getLogger("BrightStars.Test").level == logging.WARNING


@pytest.mark.unit
def test_shipped_config_applies():
    assert logconf.apply_log_config() == logconf.default_log_conf


@pytest.mark.unit
def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        logconf.apply_log_config(tmp_path / "file_does_not_exist")
