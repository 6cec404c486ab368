"""Application configuration."""
import os
import secrets


def _env_flag(name, default):
    """Read an on/off style environment variable, keeping special values."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower()


def _env_enabled(name, default):
    """Read a boolean environment variable; on/true/yes/1 count as enabled."""
    return _env_flag(name, default) in ('on', 'true', 'yes', '1')


class BaseConfig:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')

    # Asset packaging
    # "on" packages everywhere except debug mode, "always" ignores debug, "off" never packages.
    PACKAGE_ASSETS = _env_flag('PACKAGE_ASSETS', 'on')
    # "on" embeds images as Data-URIs with an MHTML fallback, "datauri" skips MHTML.
    EMBED_ASSETS = _env_flag('EMBED_ASSETS', None) or _env_flag('EMBED_IMAGES', 'off')
    # Lets "?debug_assets=true" switch packaging off for a single request.
    ALLOW_DEBUGGING = _env_enabled('ALLOW_DEBUGGING', 'true')
    PACKAGE_PATH = os.environ.get('PACKAGE_PATH', 'assets')

    ASSET_PACKAGES = {
        'application': {
            'css': [
                'css/reset.css',
                'css/app.css',
            ],
            'js': [
                'js/vendor/jquery.js',
                'js/app.js',
            ],
        },
    }


class DevelopmentConfig(BaseConfig):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    TEMPLATES_AUTO_RELOAD = True


class ProductionConfig(BaseConfig):
    """Production configuration."""
    DEBUG = False
    TESTING = False


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = 'testing'
    PACKAGE_ASSETS = 'always'
    EMBED_ASSETS = 'on'
    ALLOW_DEBUGGING = True
    ASSET_PACKAGES = {
        'app': {
            'css': ['css/reset.css', 'css/app.css'],
            'js': ['js/app.js'],
        },
        'admin': {
            'css': ['css/admin.css'],
            'js': ['js/admin/models.js', 'js/admin/views.js'],
        },
    }


config_by_name = {
    "production": ProductionConfig,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
}


def get_config(config_name=None):
    """Get configuration based on environment."""
    if config_name is None:
        config_name = os.environ.get('APP_CONFIG', 'production')

    return config_by_name.get(config_name, ProductionConfig)
