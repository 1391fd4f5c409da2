"""
Flask application factory.

Creates and configures the app, registers all blueprints.
"""
import logging

from flask import Flask, jsonify

logger = logging.getLogger('leasematch')


def create_app():
    """Create and configure the Flask application."""
    from leasematch.logging_config import configure_logging

    app = Flask(__name__)
    configure_logging(app)

    # Every failure kind carries its own HTTP status and JSON body
    from leasematch.scoring.errors import ScoringError

    @app.errorhandler(ScoringError)
    def handle_scoring_error(error):
        logger.warning("%s: %s", error.kind, error.message)
        return jsonify(error.to_dict()), error.http_status

    # Register blueprints
    from leasematch.routes.scorer import bp as scorer_bp
    from leasematch.routes.tenants import bp as tenants_bp
    from leasematch.routes.owner import bp as owner_bp
    from leasematch.routes.properties import bp as properties_bp
    from leasematch.routes.health import bp as health_bp

    app.register_blueprint(scorer_bp)
    app.register_blueprint(tenants_bp)
    app.register_blueprint(owner_bp)
    app.register_blueprint(properties_bp)
    app.register_blueprint(health_bp)

    # Circuit breakers for external API services
    from leasematch.extensions import redis_client
    from leasematch.services.circuit_breaker import init_breakers
    init_breakers(redis_client)

    # Import models so Base.metadata knows about them.
    # Schema is managed by Alembic, no create_all() call.
    import importlib
    importlib.import_module('leasematch.models.tenant')
    importlib.import_module('leasematch.models.owner_preferences')
    importlib.import_module('leasematch.models.property')

    return app
