from dataclasses import dataclass
from .constant import *


@dataclass
class ZstdConfig:
    """Zstd codec configuration.

    Attributes:
        level: Abstract compression level (0-3) used when none is given
    """

    level: int = DEFAULT_LEVEL

    def __post_init__(self):
        """Validate configuration."""
        if self.level not in ZSTD_LEVEL_MAP:
            raise ValueError(ERROR_INVALID_LEVEL.format(level=self.level))

    @property
    def native_level(self) -> int:
        """Native zstd level for the configured abstract level."""
        return ZSTD_LEVEL_MAP[self.level]


__all__ = ["ZstdConfig"]
