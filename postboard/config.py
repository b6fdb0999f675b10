"""
Postboard Configuration Module

Handles loading, validation, and management of configuration settings.
"""

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

# Use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class DatabaseConfig:
    """Database settings."""
    path: str = "postboard.db"


@dataclass
class WebConfig:
    """HTTP server settings."""
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False


@dataclass
class CryptoConfig:
    """Password hashing settings."""
    argon2_time_cost: int = 3
    argon2_memory_kb: int = 65536  # 64MB
    argon2_parallelism: int = 1


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    file: str = ""  # empty: console only
    max_size_mb: int = 10
    backup_count: int = 3


@dataclass
class Config:
    """Main configuration container."""
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    web: WebConfig = field(default_factory=WebConfig)
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.database.path:
            errors.append("database.path cannot be empty")

        if not self.web.host:
            errors.append("web.host cannot be empty")
        if not 0 < self.web.port < 65536:
            errors.append("web.port must be between 1 and 65535")

        # argon2 library minimums
        if self.crypto.argon2_time_cost < 1:
            errors.append("crypto.argon2_time_cost must be at least 1")
        if self.crypto.argon2_parallelism < 1:
            errors.append("crypto.argon2_parallelism must be at least 1")
        if self.crypto.argon2_memory_kb < 8 * self.crypto.argon2_parallelism:
            errors.append("crypto.argon2_memory_kb must be at least 8 * argon2_parallelism")

        if self.logging.level.upper() not in LOG_LEVELS:
            errors.append(f"logging.level must be one of: {LOG_LEVELS}")
        if self.logging.max_size_mb < 1:
            errors.append("logging.max_size_mb must be at least 1")

        return errors

    def save(self, path: Path):
        """Save configuration to TOML file."""
        import toml  # For writing

        with open(path, "w") as f:
            toml.dump(self._to_dict(), f)

    def dumps(self) -> str:
        """Render configuration as TOML text."""
        import toml

        return toml.dumps(self._to_dict())

    def _to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)


def load_config(path: Path) -> Config:
    """Load configuration from TOML file."""
    config = Config()

    if not path.exists():
        return config

    with open(path, "rb") as f:
        data = tomllib.load(f)

    # Map TOML sections to config dataclasses
    if "database" in data:
        config.database = DatabaseConfig(**data["database"])

    if "web" in data:
        config.web = WebConfig(**data["web"])

    if "crypto" in data:
        config.crypto = CryptoConfig(**data["crypto"])

    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def create_default_config(path: Path):
    """Create a default configuration file."""
    config = Config()
    config.save(path)
