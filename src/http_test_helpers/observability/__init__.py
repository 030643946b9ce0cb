"""Observability helpers for the HTTP test helpers."""

from .logging import get_logger

__all__ = ["get_logger"]
