"""
Configuration Management for Ropes Applications

Dataclass-based configuration with per-environment defaults and environment
variable overrides.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

@dataclass
class TransportConfig:
    """JSON transport configuration"""
    base_url: str = ""
    timeout: Optional[float] = None  # None disables the deadline
    headers: Dict[str, str] = field(default_factory=dict)
    json_root: Optional[str] = None  # read fixtures from disk instead of HTTP

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

@dataclass
class RopesConfig:
    """Complete Ropes configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    transport: TransportConfig = field(default_factory=TransportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'RopesConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RopesConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for key, value in config_dict.get("transport", {}).items():
            if hasattr(config.transport, key):
                setattr(config.transport, key, value)

        for key, value in config_dict.get("logging", {}).items():
            if hasattr(config.logging, key):
                setattr(config.logging, key, value)

        return config

    @classmethod
    def from_environment(cls) -> 'RopesConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('ROPES_ENV', 'development')
        config = cls.for_environment(Environment(env_name))

        if os.getenv('ROPES_DEBUG'):
            config.debug = os.getenv('ROPES_DEBUG').lower() == 'true'

        if os.getenv('ROPES_BASE_URL'):
            config.transport.base_url = os.getenv('ROPES_BASE_URL')

        if os.getenv('ROPES_TIMEOUT'):
            config.transport.timeout = float(os.getenv('ROPES_TIMEOUT'))

        if os.getenv('ROPES_JSON_ROOT'):
            config.transport.json_root = os.getenv('ROPES_JSON_ROOT')

        if os.getenv('ROPES_LOG_LEVEL'):
            config.logging.level = os.getenv('ROPES_LOG_LEVEL').upper()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "transport": {
                "base_url": self.transport.base_url,
                "timeout": self.transport.timeout,
                "headers": dict(self.transport.headers),
                "json_root": self.transport.json_root,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }


def configure_logging(config: LoggingConfig) -> None:
    """Apply a LoggingConfig to the root logger."""
    logging.basicConfig(level=getattr(logging, config.level.upper(), logging.INFO), format=config.format)


# Global configuration management
_current_config: Optional[RopesConfig] = None

def set_config(config: RopesConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config

def get_config() -> RopesConfig:
    """Get the current global configuration, reading the environment on first use"""
    global _current_config
    if _current_config is None:
        _current_config = RopesConfig.from_environment()
    return _current_config
