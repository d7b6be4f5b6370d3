from vaxplan.api.middleware.logging_middleware import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
