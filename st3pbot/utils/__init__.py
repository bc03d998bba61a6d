"""Utility functions for st3pbot."""

from .validation import print_validation_errors, validate_engine_config

__all__ = ['print_validation_errors', 'validate_engine_config']
