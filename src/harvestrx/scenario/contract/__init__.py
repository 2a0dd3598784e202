"""Scenario contract models (Pydantic schemas, validators)."""

from .models import Scenario

__all__ = ["Scenario"]
