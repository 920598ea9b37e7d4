"""
User Registration Backend - root package.

This package contains the FastAPI app entry point (main.py), the /register
route, the user domain model and store contract, bcrypt password hashing,
and the MongoDB store.
"""
