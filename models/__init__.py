"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, migrate

from .settings import Settings

__all__ = [
    'db',
    'migrate',
    'Settings',
]
