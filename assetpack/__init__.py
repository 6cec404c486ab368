from typing import Optional

from flask import Flask

from assetpack.core.config import get_config


def create_app(config_name: Optional[str] = None, packager=None, renderer=None):
    """Application factory pattern."""
    import os
    import logging
    from logging.handlers import RotatingFileHandler

    if config_name is None:
        config_name = os.getenv("APP_CONFIG", "production")

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))

    # Setup logging to files
    if not app.debug and not app.testing:
        logs_dir = os.path.abspath(app.config['LOG_DIR'])
        os.makedirs(logs_dir, exist_ok=True)

        # Main application log
        file_handler = RotatingFileHandler(
            os.path.join(logs_dir, 'assetpack.log'),
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        # Error log
        error_handler = RotatingFileHandler(
            os.path.join(logs_dir, 'errors.log'),
            maxBytes=10240000,
            backupCount=5
        )
        error_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        error_handler.setLevel(logging.ERROR)
        app.logger.addHandler(error_handler)

        # Set log level from config
        log_level = app.config.get('LOG_LEVEL', 'INFO')
        app.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

        app.logger.info(f'Assetpack startup - Config: {config_name}')

    # Register error handlers
    from assetpack.core.errors import register_error_handlers
    register_error_handlers(app)

    # Register CLI commands
    from assetpack.core.cli import register_cli_commands
    register_cli_commands(app)

    # Initialize asset helpers
    from assetpack.core.helpers import init_asset_helpers
    init_asset_helpers(app, packager=packager, renderer=renderer)

    return app
