"""
Clients Subpackage - Backend service clients

Contains:
- BaseClient: common interface with availability check
"""

from .base import BaseClient

__all__ = [
    'BaseClient',
]
