"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    cors_origins: str = "*"

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "tally"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="tally.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def get_schema_path() -> Path:
    """Get the path to the bundled schema file.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "schema.sql"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Args:
        config_path: Optional path to a TOML file. Defaults to ~/.config/tally.toml.

    Returns:
        Config object with loaded or default values.
    """
    config_path = config_path or get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config, config_path)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", defaults.db_filename)

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    server_config = data.get("server", {})
    server_host = server_config.get("host", defaults.server_host)
    server_port = int(server_config.get("port", defaults.server_port))
    cors_origins = server_config.get("cors_origins", defaults.cors_origins)

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        server_host=server_host,
        server_port=server_port,
        cors_origins=cors_origins,
    )


def _write_config(config: Config, config_path: Path) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
        config_path: Destination TOML file.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "server": {
            "host": config.server_host,
            "port": config.server_port,
            "cors_origins": config.cors_origins,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
