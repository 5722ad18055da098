"""
API package.

FastAPI application factory, routers and dependency wiring.
"""
