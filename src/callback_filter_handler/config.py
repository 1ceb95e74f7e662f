import os
from dataclasses import dataclass
from typing import Optional

from .levels import Level, to_level


@dataclass
class FilterHandlerConfig:
    """Configuration for callback filter handlers"""

    level: str = "DEBUG"
    bubble: bool = True

    def __post_init__(self):
        # Fail early on unknown level names
        self.level = to_level(self.level).name

    @property
    def min_level(self) -> Level:
        return Level[self.level]

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def from_env(cls) -> "FilterHandlerConfig":
        """Create configuration from environment variables"""
        return cls(
            level=os.getenv("CALLBACK_FILTER_LEVEL", "DEBUG"),
            bubble=cls._parse_bool_env("CALLBACK_FILTER_BUBBLE", "true"),
        )


_default_config: Optional[FilterHandlerConfig] = None


def get_default_config() -> FilterHandlerConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = FilterHandlerConfig.from_env()
    return _default_config


def set_default_config(config: Optional[FilterHandlerConfig]) -> None:
    """Set the default configuration instance, None reloads it from the environment"""
    global _default_config
    _default_config = config
