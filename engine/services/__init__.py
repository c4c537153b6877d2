"""Hashing engine services."""

from engine.services.hash_engine import Nsec3HashEngine

__all__ = ["Nsec3HashEngine"]
