# 12.10.26

import logging
from typing import Optional


# Internal utilities
from .config_json import config_manager


class Logger:
    def __init__(self, log_file: Optional[str] = None, debug: Optional[bool] = None):
        if debug is None:
            debug = config_manager.config.get_bool("DEFAULT", "debug")
        if log_file is None:
            log_file = config_manager.config.get("DEFAULT", "log_file") or None

        self.level = logging.DEBUG if debug else logging.INFO
        self.log_file = log_file
        self._setup_logging()

    def _setup_logging(self):
        handlers = [logging.StreamHandler()]
        if self.log_file:
            handlers.append(logging.FileHandler(self.log_file, encoding="utf-8"))

        logging.basicConfig(
            level=self.level,
            format="%(asctime)s [%(levelname)s] %(message)s",
            handlers=handlers,
            force=True
        )
