"""Utility helpers."""

from .env import setup_logging, log_level_from_env

__all__ = ['setup_logging', 'log_level_from_env']
