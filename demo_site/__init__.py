"""
Flask application factory for the demo site.

The demo site serves the practice pages the example browser tests drive:
form authentication and dynamically loaded content. Running it locally
keeps the example suite independent of any public test site.
"""

import logging

from flask import Flask, jsonify

from config import get_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the demo site.

    Args:
        config_name: Configuration environment name.
                     If None, uses HARNESS_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating demo site with config: %s", config_class.__name__)

    # Register blueprints
    from demo_site.routes.views import views_bp

    app.register_blueprint(views_bp)

    @app.route("/health")
    def health_check():
        """Health check used by the live server helper."""
        return jsonify({"status": "healthy"}), 200

    return app
