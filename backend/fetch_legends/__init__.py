"""
Application package for the Fetch Legends backend.

It exposes subpackages for API routers, core utilities, the challenge
validator, world models, service layer abstractions, and repositories.
"""

__version__ = "0.1.0"
