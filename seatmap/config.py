"""
config.py - Seatmap configuration v1.0

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

__all__ = [
    'LayoutLimits',
    'APIConfig',
    'LoggingConfig',
    'SeatmapConfig',
    'load_config',
    'get_config',
]

logger = logging.getLogger(__name__)


@dataclass
class LayoutLimits:
    """Seat-count bounds enforced by the builder and the layout validator."""

    min_seats: int = 1
    max_seats: int = 200

    def __post_init__(self):
        self.check()

    def check(self) -> None:
        """Raise ValueError unless 0 <= min_seats <= max_seats."""
        if self.min_seats < 0:
            raise ValueError(f"min_seats must be >= 0, got {self.min_seats}")
        if self.max_seats < self.min_seats:
            raise ValueError(
                f"max_seats ({self.max_seats}) must be >= min_seats ({self.min_seats})"
            )

    @classmethod
    def from_env(cls) -> "LayoutLimits":
        return cls(
            min_seats=int(os.getenv("SEATMAP_MIN_SEATS", "1")),
            max_seats=int(os.getenv("SEATMAP_MAX_SEATS", "200")),
        )


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    enable_docs: bool = True
    docs_url: str = "/docs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("SEATMAP_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("SEATMAP_API_HOST", "0.0.0.0"),
            port=int(os.getenv("SEATMAP_API_PORT", "8000")),
            enable_docs=os.getenv("SEATMAP_API_ENABLE_DOCS", "true").lower() == "true",
            docs_url=os.getenv("SEATMAP_API_DOCS_URL", "/docs"),
            cors_origins=cors.split(",") if cors else ["*"],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("SEATMAP_LOG_LEVEL", "INFO"),
            format=os.getenv("SEATMAP_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("SEATMAP_LOG_FILE"),
            json_logs=os.getenv("SEATMAP_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class SeatmapConfig:
    """Root configuration for the seat layout service."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    limits: LayoutLimits = field(default_factory=LayoutLimits)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "SeatmapConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("SEATMAP_ENVIRONMENT", "development"),
            debug=os.getenv("SEATMAP_DEBUG", "false").lower() == "true",
            limits=LayoutLimits.from_env(),
            api=APIConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "SeatmapConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "SeatmapConfig":
        """Create config from dictionary; file values override the environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("limits", "api", "logging"):
            if section in data:
                target = getattr(config, section)
                for key, value in data[section].items():
                    if hasattr(target, key):
                        setattr(target, key, value)

        config.limits.check()
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "limits": {
                "min_seats": self.limits.min_seats,
                "max_seats": self.limits.max_seats,
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[SeatmapConfig] = None


def load_config(filepath: str = None) -> SeatmapConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        SeatmapConfig instance
    """
    global _config

    if filepath:
        _config = SeatmapConfig.from_file(filepath)
    else:
        default_paths = [
            "./seatmap.json",
            "./config/seatmap.json",
            os.path.expanduser("~/.seatmap/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = SeatmapConfig.from_file(path)
                return _config

        _config = SeatmapConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> SeatmapConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
