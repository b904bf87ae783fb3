#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module handles non-volatile config options
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from BrightStars import utils

logger = logging.getLogger("BrightStars.Config")


class Config:
    def __init__(
        self,
        config_file_path: Optional[Path] = None,
        default_file_path: Optional[Path] = None,
    ):
        """
        load all settings from config file
        """
        # Set up session config items
        # These are transient
        self._session_config_dict = {}
        self.config_file_path = Path(
            config_file_path or Path(utils.data_dir, "config.json")
        )
        self.default_file_path = Path(
            default_file_path or Path(utils.package_dir, "default_config.json")
        )
        self.load_config()

    def load_config(self):
        """
        Loads all config from disk useful if another
        process has changed config
        """
        if not os.path.exists(self.config_file_path):
            self._config_dict = {}
        else:
            with open(self.config_file_path, "r") as config_file:
                logger.info("Loading config from %s", self.config_file_path)
                self._config_dict = json.load(config_file)

        # open default default_config
        with open(self.default_file_path, "r") as config_file:
            self._default_config_dict = json.load(config_file)

    def dump_config(self):
        """
        Write config to config file
        """
        utils.create_path(self.config_file_path.parent)
        with open(self.config_file_path, "w") as config_file:
            json.dump(self._config_dict, config_file, indent=4)

    def set_option(self, option, value):
        if option.startswith("session."):
            self._session_config_dict[option] = value
        else:
            self._config_dict[option] = value
            self.dump_config()

    def get_option(self, option, default: Any = None):
        if option.startswith("session."):
            return self._session_config_dict.get(option, default)
        return self._config_dict.get(
            option, self._default_config_dict.get(option, default)
        )

    def get_path(self, option) -> Optional[Path]:
        """Catalog file option resolved against astro_data"""
        value = self.get_option(option)
        if value is None:
            return None
        return utils.astro_data_path(value)

    def __str__(self):
        return str(self._config_dict)
