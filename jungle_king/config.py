"""
Server configuration, read from JUNGLE_KING_* environment variables
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

ENV_PREFIX = "JUNGLE_KING_"


def _env(name: str, default: str, environ: Optional[dict] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_PREFIX + name, default)


@dataclass
class ServerConfig:
    """Settings for the HTTP server"""
    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "info"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    # Oldest finished games are dropped once this many are held in memory
    max_games: int = 1000

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> 'ServerConfig':
        """Build a config, falling back to the defaults above"""
        defaults = cls()
        origins = _env("CORS_ORIGINS", ",".join(defaults.cors_origins), environ)
        try:
            config = cls(
                host=_env("HOST", defaults.host, environ),
                port=int(_env("PORT", str(defaults.port), environ)),
                log_level=_env("LOG_LEVEL", defaults.log_level, environ).lower(),
                cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
                max_games=int(_env("MAX_GAMES", str(defaults.max_games), environ)),
            )
        except ValueError as e:
            raise ValueError(f"Invalid {ENV_PREFIX}* setting: {e}") from e

        if config.max_games < 1:
            raise ValueError(f"Invalid {ENV_PREFIX}MAX_GAMES: must be at least 1, got {config.max_games}")
        return config
