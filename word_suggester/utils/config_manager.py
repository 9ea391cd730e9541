# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 10,  # ranker capacity for both query paths
    "max_distance": 2,  # spell correction threshold
    "max_word_length": 100,
    "max_words": 1000,  # upper bound for the interactive word prompt
    "log_level": "INFO",
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for key, val in raw.items():
            if key not in self.data:
                logger.warning("unknown config option %r", key)
                continue
            try:
                self.data[key] = type(self.data[key])(val)
            except (TypeError, ValueError):
                logger.warning("bad value for %r: %r, keeping %r", key, val, self.data[key])

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = type(self.data[key])(val)
