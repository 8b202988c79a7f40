"""
Configuration loader for the meme API.

Looks for config.yaml in this order:
1. Environment variable CONFIG_PATH
2. ./config.yaml (local development)
3. /etc/meme-api/config.yaml (Docker)
4. Falls back to default config
"""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SUBREDDITS = [
    "memes",
    "dankmemes",
    "funny",
    "antimeme",
    "wholesomememes",
    "me_irl",
]


class Config:
    def __init__(self, config_path: str = None):
        # Determine config path in order of priority
        if config_path:
            self.config_path = Path(config_path)
        elif os.getenv("CONFIG_PATH"):
            self.config_path = Path(os.getenv("CONFIG_PATH"))
        elif Path("./config.yaml").exists():
            self.config_path = Path("./config.yaml")
        elif Path("/etc/meme-api/config.yaml").exists():
            self.config_path = Path("/etc/meme-api/config.yaml")
        else:
            # No config found, will use defaults
            self.config_path = None

        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """
        Load configuration from the YAML file.

        Returns default config if file not found or unreadable.
        """
        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
                    print(f"✓ Loaded config from: {self.config_path}")
                    return config_data
            except (OSError, yaml.YAMLError) as e:
                print(f"✗ Error loading config from {self.config_path}: {e}")
        else:
            print("⚠ Config file not found, using defaults (reddit.com, port 8080)")
            if self.config_path:
                print(f"  Tried: {self.config_path}")

        return {
            "server": {"host": "0.0.0.0", "port": 8080, "max_amount": 255},
            "reddit": {
                "base_url": "https://www.reddit.com",
                "user_agent": "meme-api/1.0",
                "listing_limit": 100,
                "timeout_seconds": 10,
            },
            "cache": {
                "ttl_seconds": 3600,
                "max_entries": 10,
                "prewarm_on_startup": True,
            },
            "subreddits": list(DEFAULT_SUBREDDITS),
            "logging": {"level": "INFO"},
        }

    def _section(self, name: str) -> dict[str, Any]:
        return self._config.get(name) or {}

    @property
    def server_host(self) -> str:
        return self._section("server").get("host", "0.0.0.0")

    @property
    def server_port(self) -> int:
        return self._section("server").get("port", 8080)

    @property
    def max_amount(self) -> int:
        """Upper bound for the ``amount`` query parameter (default 255)."""
        return self._section("server").get("max_amount", 255)

    @property
    def reddit_base_url(self) -> str:
        env_url = os.getenv("REDDIT_BASE_URL")
        if env_url:
            return env_url
        return self._section("reddit").get("base_url", "https://www.reddit.com")

    @property
    def reddit_user_agent(self) -> str:
        return self._section("reddit").get("user_agent", "meme-api/1.0")

    @property
    def listing_limit(self) -> int:
        """Posts requested per listing; 100 is the largest page Reddit serves."""
        return self._section("reddit").get("listing_limit", 100)

    @property
    def upstream_timeout(self) -> float:
        return self._section("reddit").get("timeout_seconds", 10)

    @property
    def cache_ttl(self) -> int:
        return self._section("cache").get("ttl_seconds", 3600)

    @property
    def cache_max_entries(self) -> int:
        return self._section("cache").get("max_entries", 10)

    @property
    def prewarm_on_startup(self) -> bool:
        return self._section("cache").get("prewarm_on_startup", True)

    @property
    def default_subreddits(self) -> list[str]:
        """
        Fixed pool used by ``GET /``.

        Blank names are dropped; an empty or malformed list falls back to
        the built-in pool.
        """
        subreddits = self._config.get("subreddits")
        if not isinstance(subreddits, list):
            return list(DEFAULT_SUBREDDITS)
        names = [str(name).strip() for name in subreddits if str(name).strip()]
        return names or list(DEFAULT_SUBREDDITS)

    @property
    def log_level(self) -> str:
        env_level = os.getenv("LOG_LEVEL")
        if env_level:
            return env_level.upper()
        return str(self._section("logging").get("level", "INFO")).upper()


# Global config singleton used across the API
config = Config()
