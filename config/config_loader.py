import os

import yaml

_MISSING = object()


class ConfigLoader:
    def __init__(self, config_file="settings.yaml"):
        self.config_file = config_file
        self.config = {}
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}
        if not isinstance(self.config, dict):
            raise ValueError(f"Configuration file {config_file} must contain a mapping at the top level.")

    @classmethod
    def from_string(cls, text):
        loader = cls(config_file=None)
        loader.config = yaml.safe_load(text) or {}
        if not isinstance(loader.config, dict):
            raise ValueError("Configuration text must contain a mapping at the top level.")
        return loader

    def get(self, *keys, default=_MISSING):
        """
        Return the value stored under the nested ``keys`` path.

        If the path does not exist:
          - raise KeyError when no default is given
          - return the default otherwise (``None``, ``0`` and ``False`` included)
        """
        ref = self.config
        for key in keys:
            if isinstance(ref, dict) and key in ref:
                ref = ref[key]
            else:
                if default is not _MISSING:
                    return default
                raise KeyError(f"Configuration key {' -> '.join(keys)} not found and no default provided.")
        return ref
