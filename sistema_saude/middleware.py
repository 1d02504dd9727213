"""
Request logging and security headers
"""
import logging

from flask import request

logger = logging.getLogger(__name__)


def setup_middleware(app):
    """Register request hooks"""

    @app.before_request
    def log_request():
        if not app.debug and not app.testing:
            logger.info(f"{request.method} {request.path} - {request.remote_addr}")

    @app.after_request
    def set_security_headers(response):
        if not app.debug:
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            if request.is_secure:
                response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response
