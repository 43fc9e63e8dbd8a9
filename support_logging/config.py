"""YAML service configuration merged over built-in defaults."""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CONFIG_PATH"
STORAGE_BACKENDS = ("memory", "file")


class Config:
    """Service settings: a YAML file deep-merged over DEFAULTS.

    A missing file means defaults; unparsable YAML is logged and ignored.
    Values that are present but unusable (a non-positive read ceiling, an
    unknown storage backend) raise ValueError at load time rather than
    surfacing on the first request.
    """

    DEFAULTS = {
        "server": {"host": "0.0.0.0", "port": 48061, "debug": False},
        "read": {"max_limit": 100},
        "storage": {"backend": "memory", "path": "./data/logs.ndjson"},
        "logging": {"level": "INFO"},
    }

    def __init__(self, config_path=None):
        self._config = copy.deepcopy(self.DEFAULTS)
        self.path = config_path

        if config_path is not None:
            overrides = self._load(config_path)
            if overrides:
                self._config = self._deep_merge(self._config, overrides)
        self._check()

    @classmethod
    def from_env(cls):
        """Load from $CONFIG_PATH, falling back to ./config.yaml."""
        return cls(os.environ.get(CONFIG_PATH_ENV, "config.yaml"))

    @staticmethod
    def _load(config_path):
        try:
            with open(config_path, "r") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.debug("No config file at %s, using defaults", config_path)
            return None
        except yaml.YAMLError:
            logger.warning("Invalid YAML in %s, using defaults", config_path)
            return None
        return loaded if isinstance(loaded, dict) else None

    def _check(self):
        max_limit = self._config["read"]["max_limit"]
        if isinstance(max_limit, bool) or not isinstance(max_limit, int) or max_limit < 1:
            raise ValueError(f"read.max_limit must be a positive integer, got {max_limit!r}")
        backend = self._config["storage"]["backend"]
        if backend not in STORAGE_BACKENDS:
            raise ValueError(f"storage.backend must be one of {STORAGE_BACKENDS}, got {backend!r}")

    @staticmethod
    def _deep_merge(base, override):
        """Recursively merge override dict into base dict."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    @property
    def log_level(self) -> int:
        """The configured logging level, INFO when the name is unknown."""
        return getattr(logging, str(self._config["logging"]["level"]).upper(), logging.INFO)

    def get(self, key, default=None):
        return self._config.get(key, default)

    def __getitem__(self, key):
        return self._config[key]

    def __contains__(self, key):
        return key in self._config
