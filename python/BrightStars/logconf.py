#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Applies the logging configuration file.

The file is a logging.config.dictConfig dictionary written as json5,
so it may carry comments and trailing commas.
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional, TextIO

import json5

from BrightStars import utils

default_log_conf = utils.brightstars_dir / "python" / "brightstars_logconf.json"


def read_config(file: TextIO):
    """
    Read logging configuration from the specified file handle and apply it.
    """
    config = json5.load(file)
    logging.config.dictConfig(config)


def apply_log_config(log_conf: Optional[Path] = None) -> Path:
    log_conf = Path(log_conf or default_log_conf)
    if not log_conf.exists():
        raise FileNotFoundError(f"Logging configuration {log_conf} does not exist.")
    with open(log_conf, "r") as f:
        read_config(f)
    return log_conf
