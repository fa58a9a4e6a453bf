"""
API package - HTTP boundary.
Routers, middleware, exception handlers and request dependencies.
"""
