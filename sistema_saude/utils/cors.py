"""
CORS Configuration
Centralized CORS settings for the application
"""
from flask_cors import CORS

# Browser client is served from a different origin
CORS_CONFIG = {
    "origins": "*",
    "methods": ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    "allow_headers": [
        "Content-Type",
        "Authorization",
    ],
}


def init_cors(app):
    """
    Initialize CORS for the Flask application
    """
    CORS(app,
         resources={r"/api/*": {"origins": CORS_CONFIG["origins"]}},
         methods=CORS_CONFIG["methods"],
         allow_headers=CORS_CONFIG["allow_headers"])

    app.logger.info("CORS enabled for all origins")
