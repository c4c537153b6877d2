"""Domain models for hash configurations, cache artifacts and run results."""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict
from shared.domain.consts import Nsec3Hash
from shared.domain.status import RunStatus
from shared.hashing.nsec3 import parse_salt


@dataclass(frozen=True)
class HashConfig:
    """Identifies one precomputation run."""
    domain: str
    salt: str  # original hex text, empty = no salt
    iterations: int

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise ValueError(f"iterations ({self.iterations}) must be >= 0")
        if len(self.salt_bytes) > Nsec3Hash.MAX_SALT_BYTES:
            raise ValueError(
                f"salt is {len(self.salt_bytes)} bytes, "
                f"at most {Nsec3Hash.MAX_SALT_BYTES} allowed"
            )

    @cached_property
    def salt_bytes(self) -> bytes:
        """Raw salt bytes decoded from the hex text."""
        return parse_salt(self.salt)

    @property
    def salt_display(self) -> str:
        """Salt as shown to humans ("none" when empty)."""
        return self.salt or "none"


@dataclass(frozen=True)
class BatchConfigEntry:
    """Named (salt, iterations) preset for batch generation."""
    name: str
    salt: str
    iterations: int

    def to_hash_config(self, domain: str) -> HashConfig:
        """Bind this preset to a domain."""
        return HashConfig(domain=domain, salt=self.salt, iterations=self.iterations)


@dataclass
class HashEngineStats:
    """Statistics of one Parallel Hash Engine run."""
    candidates_processed: int = 0
    unique_hashes: int = 0
    collisions: int = 0
    elapsed_seconds: float = 0.0

    @property
    def hashes_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.candidates_processed / self.elapsed_seconds


@dataclass
class ConfigRunResult:
    """Outcome of running the pipeline for one configuration."""
    domain: str
    salt: str
    iterations: int
    status: RunStatus
    name: Optional[str] = None
    output_path: Optional[str] = None
    file_size: int = 0
    hash_count: int = 0
    elapsed_seconds: float = 0.0
    error_message: Optional[str] = None

    def succeeded(self) -> bool:
        """Check if the cache file was written."""
        return self.status == RunStatus.SUCCEEDED


class CacheArtifact(BaseModel):
    """Persisted reverse lookup table plus the configuration that produced it."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "domain": "example.com",
                "salt": "DEADBEEF",
                "iterations": 5,
                "wordlist_size": 1,
                "hashes": {"aaaabbbbccccddddeeeeffffgggghhhh": "www.example.com"},
            }
        }
    )

    domain: str = Field(..., description="Zone apex the candidates were hashed under")
    salt: str = Field("", description="Original salt hex text (empty = no salt)")
    iterations: int = Field(0, ge=0, description="Extra hash rounds beyond the first")
    wordlist_size: int = Field(0, ge=0, description="Non-empty candidate lines loaded")
    hashes: Dict[str, str] = Field(default_factory=dict, description="hash -> fqdn")

    @field_validator("hashes")
    @classmethod
    def validate_hash_keys(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Every key must be a 32-char lower-case base-32 NSEC3 hash."""
        for key in value:
            if not Nsec3Hash.PATTERN.match(key):
                raise ValueError(f"Invalid NSEC3 hash key: {key!r}")
        return value

    @classmethod
    def from_run(cls, config: HashConfig, wordlist_size: int, hashes: Dict[str, str]) -> "CacheArtifact":
        """Build an artifact from a finished engine run."""
        return cls(
            domain=config.domain,
            salt=config.salt,
            iterations=config.iterations,
            wordlist_size=wordlist_size,
            hashes=hashes,
        )
