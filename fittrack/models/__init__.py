"""
Database Models

Feature models live in their features/ modules and register
themselves on this Base when imported.
"""

from fittrack.models.base import Base

__all__ = ["Base"]
