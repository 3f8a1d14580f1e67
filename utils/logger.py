"""
Logging Setup

Centralized logging for the Flask application and the service layer, with
request tracking.
"""

import logging
import sys
from flask import request, has_request_context


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Timestamped log format on stdout
    - The same handler for the ``services`` logger namespace
    - Request and response logging
    - DEBUG level in debug mode, INFO otherwise

    Args:
        app: Flask application instance
    """
    handler = logging.StreamHandler(sys.stdout)

    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    level = logging.DEBUG if app.debug else logging.INFO

    app.logger.addHandler(handler)
    app.logger.setLevel(level)
    app.logger.propagate = False

    # Services log through logging.getLogger(__name__)
    services_logger = logging.getLogger('services')
    services_logger.handlers.clear()
    services_logger.addHandler(handler)
    services_logger.setLevel(level)

    @app.before_request
    def log_request_info():
        """Log incoming request details."""
        if has_request_context():
            app.logger.info(
                f"Request: {request.method} {request.path} "
                f"from {request.remote_addr}"
            )

    @app.after_request
    def log_response_info(response):
        """Log response status."""
        if has_request_context():
            app.logger.info(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    app.logger.info(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app
