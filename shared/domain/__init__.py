"""Domain models and entities."""

from shared.domain.models import (
    HashConfig,
    BatchConfigEntry,
    HashEngineStats,
    ConfigRunResult,
    CacheArtifact,
)
from shared.domain.status import RunStatus
from shared.domain.consts import (
    Nsec3Hash,
    HashDisplay,
    CacheFile,
    ReporterName,
    SizeUnits,
)
from shared.domain.presets import COMMON_CONFIGS

__all__ = [
    "HashConfig",
    "BatchConfigEntry",
    "HashEngineStats",
    "ConfigRunResult",
    "CacheArtifact",
    "RunStatus",
    "Nsec3Hash",
    "HashDisplay",
    "CacheFile",
    "ReporterName",
    "SizeUnits",
    "COMMON_CONFIGS",
]
