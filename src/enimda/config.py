"""
ENIMDA Configuration
====================

This module handles configuration loading for the border detection
service and scripts. The core library never imports it.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    ENIMDA_FRAMES     -> detection.frames
    ENIMDA_SIZE       -> detection.size
    ENIMDA_COLUMNS    -> detection.columns
    ENIMDA_DEPTH      -> detection.depth
    ENIMDA_THRESHOLD  -> detection.threshold
    ENIMDA_DEEP       -> detection.deep
    ENIMDA_PORT       -> server.port
    ENIMDA_LOG_LEVEL  -> logging.level
    PORT              -> server.port (Cloud Run)

Example:
    from enimda.config import settings
    
    print(settings.detection.depth)
    print(settings.server.port)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class DetectionConfig(BaseModel):
    """Default detection parameters."""
    
    frames: Optional[int] = Field(
        default=None,
        ge=0,
        description="Frame sample limit for animations (None = every frame)",
    )
    size: Optional[int] = Field(
        default=None,
        ge=0,
        description="Max working dimension in pixels (None = no resize)",
    )
    columns: Optional[int] = Field(
        default=None,
        ge=0,
        description="Column sample limit per edge (None = every column)",
    )
    depth: float = Field(
        default=0.25,
        ge=0,
        le=1.0,
        description="Fraction of the image height searched per edge",
    )
    threshold: float = Field(
        default=0.5,
        gt=0,
        le=1.0,
        description="Entropy ratio below which a row is treated as a border",
    )
    deep: bool = Field(
        default=True,
        description="Iteratively refine each border",
    )
    frame_density: Optional[float] = Field(
        default=None,
        ge=0,
        le=1.0,
        description="Explicit strata density for frame sampling",
    )
    column_density: Optional[float] = Field(
        default=None,
        ge=0,
        le=1.0,
        description="Explicit strata density for column sampling",
    )


class ServerConfig(BaseModel):
    """Server configuration."""
    
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")
    max_upload_bytes: int = Field(
        default=32 * 1024 * 1024,
        ge=1,
        description="Largest accepted request body in bytes",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for ENIMDA.
    
    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """
    
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.
    
    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values
        
    Args:
        config_path: Path to config.yaml. If None, searches common locations.
        
    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break
    
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")
    
    _apply_env_overrides(config_data)
    
    return Settings.model_validate(config_data)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""
    
    # Detection settings
    if env_frames := os.environ.get("ENIMDA_FRAMES"):
        config_data.setdefault("detection", {})["frames"] = int(env_frames)
    if env_size := os.environ.get("ENIMDA_SIZE"):
        config_data.setdefault("detection", {})["size"] = int(env_size)
    if env_columns := os.environ.get("ENIMDA_COLUMNS"):
        config_data.setdefault("detection", {})["columns"] = int(env_columns)
    if env_depth := os.environ.get("ENIMDA_DEPTH"):
        config_data.setdefault("detection", {})["depth"] = float(env_depth)
    if env_threshold := os.environ.get("ENIMDA_THRESHOLD"):
        config_data.setdefault("detection", {})["threshold"] = float(env_threshold)
    if env_deep := os.environ.get("ENIMDA_DEEP"):
        config_data.setdefault("detection", {})["deep"] = _parse_bool(env_deep)
    
    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("ENIMDA_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    
    # Logging settings
    if env_log := os.environ.get("ENIMDA_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    
    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
