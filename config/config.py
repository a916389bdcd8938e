import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any
from dotenv import load_dotenv

from pkg.zstd.constant import ZSTD_LEVEL_MAP


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    # Largest accepted request body, in bytes
    max_payload_bytes: int = 10 * 1024 * 1024


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_console: bool = True
    colorize: bool = True
    service_name: str = "vexination-api"


@dataclass
class MinIOConfig:
    """MinIO configuration."""

    endpoint: str = "localhost:9000"
    access_key: str = "admin"
    secret_key: str = "password"
    secure: bool = False
    region: str = ""
    bucket: str = "vexination"
    create_bucket: bool = True


@dataclass
class CompressionConfig:
    """Compression configuration."""

    level: int = 1


@dataclass
class Config:
    """Main configuration container.

    This is the root config object that contains all sub-configurations.
    """

    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    minio: MinIOConfig = field(default_factory=MinIOConfig)
    compression: CompressionConfig = field(default_factory=CompressionConfig)


class ConfigLoader:
    """Viper-style configuration loader.

    Loads configuration from:
    1. YAML files (lowest priority)
    2. .env files
    3. Environment variables (highest priority)
    """

    def __init__(self):
        self.config_name = "config"
        self.config_paths = [".", "config", "/etc/vexination"]
        self.env_prefix = "VEXINATION"
        self.auto_env = True
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Returns:
            Config object with all settings
        """
        self._load_yaml()
        self._load_env_files()
        config = self._build_config()
        self._validate(config)
        return config

    def _load_yaml(self) -> None:
        """Load the first YAML configuration file found."""
        for path in self.config_paths:
            for ext in ["yaml", "yml"]:
                file_path = Path(path) / f"{self.config_name}.{ext}"
                if file_path.exists():
                    with open(file_path, "r", encoding="utf-8") as f:
                        self._raw_config = yaml.safe_load(f) or {}
                    return

    def _load_env_files(self) -> None:
        """Load .env files."""
        for env_file in [".env", ".env.local"]:
            for path in self.config_paths:
                env_path = Path(path) / env_file
                if env_path.exists():
                    load_dotenv(env_path, override=True)

    def _get_env(self, key: str, default: Any = None) -> Any:
        """Get value from environment variable.

        Converts nested key to env var:
        - "minio.endpoint" -> "VEXINATION_MINIO_ENDPOINT"
        """
        if not self.auto_env:
            return default

        env_key = key.replace(".", "_").upper()
        if self.env_prefix:
            env_key = f"{self.env_prefix}_{env_key}"

        return os.getenv(env_key, default)

    def _get_value(self, key: str, default: Any = None) -> Any:
        """Get value with priority: env > yaml > default."""
        env_value = self._get_env(key)
        if env_value is not None:
            default_type = type(default)
            if default_type == bool:
                return env_value.lower() in ("true", "1", "yes")
            elif default_type == int:
                try:
                    return int(env_value)
                except ValueError:
                    return default
            else:
                return env_value

        keys = key.split(".")
        value = self._raw_config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        return value if value is not None else default

    def _build_config(self) -> Config:
        """Build Config object from loaded values."""
        defaults = Config()
        return Config(
            server=ServerConfig(
                host=self._get_value("server.host", defaults.server.host),
                port=self._get_value("server.port", defaults.server.port),
                max_payload_bytes=self._get_value(
                    "server.max_payload_bytes", defaults.server.max_payload_bytes
                ),
            ),
            logging=LoggingConfig(
                level=self._get_value("logging.level", defaults.logging.level),
                enable_console=self._get_value(
                    "logging.enable_console", defaults.logging.enable_console
                ),
                colorize=self._get_value("logging.colorize", defaults.logging.colorize),
                service_name=self._get_value(
                    "logging.service_name", defaults.logging.service_name
                ),
            ),
            minio=MinIOConfig(
                endpoint=self._get_value("minio.endpoint", defaults.minio.endpoint),
                access_key=self._get_value("minio.access_key", defaults.minio.access_key),
                secret_key=self._get_value("minio.secret_key", defaults.minio.secret_key),
                secure=self._get_value("minio.secure", defaults.minio.secure),
                region=self._get_value("minio.region", defaults.minio.region),
                bucket=self._get_value("minio.bucket", defaults.minio.bucket),
                create_bucket=self._get_value(
                    "minio.create_bucket", defaults.minio.create_bucket
                ),
            ),
            compression=CompressionConfig(
                level=self._get_value("compression.level", defaults.compression.level),
            ),
        )

    def _validate(self, config: Config) -> None:
        """Validate configuration."""
        errors = []

        if not 0 < config.server.port < 65536:
            errors.append("server.port must be between 1 and 65535")

        if config.server.max_payload_bytes <= 0:
            errors.append("server.max_payload_bytes must be positive")

        if not config.minio.endpoint:
            errors.append("minio.endpoint is required")

        if not config.minio.bucket:
            errors.append("minio.bucket is required")

        if config.compression.level not in ZSTD_LEVEL_MAP:
            errors.append("compression.level must be 0-3")

        if errors:
            raise ValueError(
                f"Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def load_config() -> Config:
    """Load configuration.

    Returns:
        Config object
    """
    return ConfigLoader().read_config()
