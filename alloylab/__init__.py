"""Flask application factory."""
from flask import Flask
from config import config

from .extensions import csrf


def create_app(config_name='default'):
    """Create and configure the Flask application.

    Parameters
    ----------
    config_name : str
        Configuration name: 'development', 'production', 'testing'

    Returns
    -------
    Flask
        Configured Flask application instance
    """
    app = Flask(__name__)
    config_obj = config[config_name]
    app.config.from_object(config_obj)
    app.json.sort_keys = False

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from .api import api_bp

    csrf.exempt(api_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    # Warm the reference snapshot so comparisons never pay for it per request
    from .services.comparison_service import reference_snapshot
    reference_snapshot()
    app.logger.info('Alloy design engine ready (%s)', config_name)

    return app
