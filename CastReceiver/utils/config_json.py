# 12.10.26

import os
import json
import copy
import logging
from typing import Any, Dict, List, Optional


# Variable
logger = logging.getLogger(__name__)
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "DEFAULT": {
        "debug": False,
        "log_file": "",
    },
    "MANIFEST": {
        "rewrite_manifest": True,
        "manifest_suffixes": ["master.m3u8", "main.m3u8"],
    },
    "TRACKS": {
        "apply_annotations": True,
    },
    "LOAD": {
        "force_dash_content_type": True,
        "dash_content_type": "application/dash+xml",
    },
}


class ConfigSection:
    def __init__(self, data: Dict[str, Dict[str, Any]]):
        self._data = data

    def get(self, section: str, key: Optional[str] = None, default: Any = None) -> Any:
        values = self._data.get(section)
        if key is None:
            return values if values is not None else default
        if not isinstance(values, dict):
            return default
        return values.get(key, default)

    def get_bool(self, section: str, key: str) -> bool:
        value = self.get(section, key, False)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def get_list(self, section: str, key: str) -> List[Any]:
        value = self.get(section, key, [])
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return list(value or [])

    def __getitem__(self, section: str) -> Dict[str, Any]:
        return self._data[section]

    def __setitem__(self, section: str, value: Dict[str, Any]) -> None:
        self._data[section] = value


class ConfigManager:
    def __init__(self, file_path: Optional[str] = None):
        self.file_path = file_path or self._find_config_file()
        self.config = ConfigSection(self._load())

    def _find_config_file(self) -> Optional[str]:
        """Look for config.json in the working directory, then beside the package"""
        candidates = [
            os.path.join(os.getcwd(), CONFIG_FILENAME),
            os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), CONFIG_FILENAME),
        ]
        for path in candidates:
            if os.path.isfile(path):
                return path
        return None

    def _load(self) -> Dict[str, Dict[str, Any]]:
        data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.file_path:
            return data

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Unable to read {self.file_path}, using defaults: {e}")
            return data

        for section, values in user_config.items():
            if isinstance(values, dict) and isinstance(data.get(section), dict):
                data[section].update(values)
            else:
                data[section] = values
        return data

    def get(self, section: str, key: Optional[str] = None, default: Any = None) -> Any:
        return self.config.get(section, key, default)

    def get_bool(self, section: str, key: str) -> bool:
        return self.config.get_bool(section, key)

    def get_list(self, section: str, key: str) -> List[Any]:
        return self.config.get_list(section, key)


config_manager = ConfigManager()
