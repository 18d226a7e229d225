# src/xpboard/middleware/__init__.py

"""Middleware components for XPBoard API."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
