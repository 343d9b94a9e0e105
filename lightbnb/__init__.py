"""
LightBnB data access layer.
Parameterized queries for users, reservations and property listings over an async SQLAlchemy store.
"""

__version__ = "1.0.0"
