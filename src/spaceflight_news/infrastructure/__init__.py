"""
Infrastructure Layer - External integrations.

Contains:
- sources: HTTP clients for upstream APIs
"""

from .sources import SPACEFLIGHT_NEWS_API_BASE, SpaceflightNewsClient

__all__ = ["SPACEFLIGHT_NEWS_API_BASE", "SpaceflightNewsClient"]
