"""
Infrastructure Layer
====================

MongoDB connection handling and the MongoDB-backed user service.
"""
