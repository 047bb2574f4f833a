"""Shared helpers for the Lox front end."""

from .logger import get_logger

__all__ = ["get_logger"]
