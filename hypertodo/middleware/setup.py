"""
Middleware setup and configuration.
"""
from hypertodo.monitoring import MetricsMiddleware


def setup_middleware(app):
    """Set up all middleware for the application."""
    # Request IDs and metrics for every request
    app.add_middleware(MetricsMiddleware)
