"""
Boundary layer for external system integrations.

Handles all interactions with external systems (database, S3 image bucket).
Provides adapters and clients for infrastructure dependencies.
"""
