"""
CLI module for room302-template.

Provides the interactive entry point installed as the ``room302-template``
console script.
"""

from .commands import main

__all__ = ["main"]
