from flask import Flask
from config import config
import os

from shortlinks.logging_config import initialize_logging, register_request_logging
from shortlinks.store import ShortURLStore
from shortlinks.sweeper import start_sweeper


def create_app(config_name=None, clock=None, rng=None):
    """Application factory pattern.

    ``clock`` and ``rng`` are handed to the store; tests pass a fixed clock
    and a seeded ``random.Random``.
    """

    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    initialize_logging(app.config['LOG_LEVEL'])

    store = ShortURLStore(
        clock=clock,
        rng=rng,
        code_length=app.config['SHORT_CODE_LENGTH'],
        max_attempts=app.config['MAX_ALLOCATION_ATTEMPTS'],
        min_custom_length=app.config['CUSTOM_CODE_MIN_LENGTH'],
        max_custom_length=app.config['CUSTOM_CODE_MAX_LENGTH'],
        reserved_codes=app.config['RESERVED_SHORTCODES'],
    )
    app.extensions['shortlinks'] = store

    # Register blueprints
    from shortlinks.routes import main_bp, shorturls_bp, api_bp
    from shortlinks.routes.errors import register_error_handlers

    app.register_blueprint(shorturls_bp)
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(main_bp)

    register_error_handlers(app)
    register_request_logging(app)

    if app.config['SWEEP_ENABLED']:
        app.extensions['shortlinks_sweeper'] = start_sweeper(
            store, app.config['SWEEP_INTERVAL_SECONDS']
        )

    return app
