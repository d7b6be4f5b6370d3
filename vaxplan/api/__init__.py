"""
HTTP layer: router, exception handlers and middleware.
"""
