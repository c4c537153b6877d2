"""Common NSEC3 (salt, iterations) configurations seen in the wild."""

from typing import List
from shared.domain.models import BatchConfigEntry

# Ordered; batch generation runs them in this sequence
COMMON_CONFIGS: List[BatchConfigEntry] = [
    BatchConfigEntry("No salt, no iterations (30% of NSEC3 domains)", "", 0),
    BatchConfigEntry("Google Cloud DNS", "DEADBEEF", 5),
    BatchConfigEntry("AWS Route53", "CAFEBABE", 10),
    BatchConfigEntry("Cloudflare minimal", "00", 0),
    BatchConfigEntry("Light security", "AABBCCDD", 3),
    BatchConfigEntry("Medium security", "12345678", 5),
    BatchConfigEntry("High security", "FEDCBA98", 10),
    BatchConfigEntry("Very high security", "FFFFFFFF", 15),
]
