"""
HighlightKit CLI Package
=========================
Command-line interface for HighlightKit.
"""

from .main import app, main_entry

__all__ = [
    'app',
    'main_entry',
]
