# application/config.py
import json
import os

DEFAULT_CONFIG_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "config.json"
)


class Config:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if not cls._instance:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_file=DEFAULT_CONFIG_FILE):
        if not hasattr(self, "_initialized"):  # Prevent re-initialization
            with open(config_file, "r") as f:
                self.data = json.load(f)
            self._initialized = True

    def get(self, *keys, default=None):
        """
        Access nested configuration values.
        Example: config.get('pool', 'strict_release')
        """
        value = self.data
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# Create a single, globally accessible instance
config = Config()
