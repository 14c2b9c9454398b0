"""
Shared helpers for API routes.
"""
from agrifusion.api.utils.error_handling import error_response

__all__ = ["error_response"]
