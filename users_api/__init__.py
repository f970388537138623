"""
Users API
=========

HTTP CRUD service for the User resource, backed by MongoDB.
"""

__version__ = "1.0.0"
