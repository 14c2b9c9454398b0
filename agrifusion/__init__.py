"""
AgriFusion backend.

Farming advice, market trends and buyer timing served over HTTP.
"""
__version__ = "1.0.0"
