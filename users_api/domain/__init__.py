"""
Domain Layer
============

Core user model, field names and error types.
This layer has no dependencies on the web framework.

Contains:
- Models: the User entity with per-field presence
- Constants: storage field names
- Exceptions: errors raised by the service layer
"""
