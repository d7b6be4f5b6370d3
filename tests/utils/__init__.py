"""Test utilities and helpers."""

from tests.utils.factories import (
    NOW,
    TODAY,
    create_recommendation,
    create_trip,
)

__all__ = [
    "TODAY",
    "NOW",
    "create_trip",
    "create_recommendation",
]
