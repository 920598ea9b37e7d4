"""
API layer for the registration backend.

Exposes the greeting at / and user registration at /register.
"""

from .registration_controller import router as registration_router

__all__ = ["registration_router"]
