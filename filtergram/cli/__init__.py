"""
Command line interface for FilterGram
"""

from .main import main

__all__ = ["main"]
