"""Generator business logic services."""

from generator.services.config_runner import generate_for_config
from generator.services.batch_orchestrator import BatchOrchestrator

__all__ = [
    "generate_for_config",
    "BatchOrchestrator",
]
