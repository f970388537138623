"""
Application Layer
=================

Service contract and request DTOs.

Contains:
- Services: the abstract UserService the controller depends on
- DTOs: Pydantic models for request bodies
"""
