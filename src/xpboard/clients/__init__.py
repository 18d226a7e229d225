# src/xpboard/clients/__init__.py

"""Clients for upstream services."""

from .friends_api import FriendsAPIClient

__all__ = ["FriendsAPIClient"]
