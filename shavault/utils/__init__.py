# Utilities
"""
Shared helpers:
- Logging setup - logger.py
"""

from .logger import setup_logging

__all__ = ['setup_logging']
