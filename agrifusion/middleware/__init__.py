"""Middleware package for the application."""

from agrifusion.middleware.request_id import RequestIdMiddleware

__all__ = ["RequestIdMiddleware"]
