"""
Test application for HTTP integration tests.

Reuses the main application so tests and production share one setup.
"""

from src.main import app

__all__ = ['app']
