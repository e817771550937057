import os

from core.configuration.configuration import artwork_folder_name, frontend_build_dir, working_dir


def _database_uri():
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return (
        f"mysql+pymysql://{os.getenv('MARIADB_USER', 'default_user')}:"
        f"{os.getenv('MARIADB_PASSWORD', 'default_password')}@"
        f"{os.getenv('MARIADB_HOSTNAME', 'localhost')}:"
        f"{os.getenv('MARIADB_PORT', '3306')}/"
        f"{os.getenv('MARIADB_DATABASE', 'videogames')}"
    )


def _engine_options():
    if os.getenv("MARIADB_SSL", "false").lower() in ("1", "true", "yes"):
        # TLS on, server certificate not verified
        return {"connect_args": {"ssl": {"check_hostname": False}}, "pool_pre_ping": True}
    return {"pool_pre_ping": True}


class ConfigManager:
    def __init__(self, app):
        self.app = app

    def load_config(self, config_name="development"):
        if config_name == "testing":
            self.app.config.from_object(TestingConfig)
        elif config_name == "production":
            self.app.config.from_object(ProductionConfig)
        else:
            self.app.config.from_object(DevelopmentConfig)


class Config:
    ENV_NAME = "base"
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_test_key_1234567890abcdefghijklmnopqrstu")
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.getenv("FLASK_APP_PORT", "3001"))
    CORS_ALLOWED_ORIGIN = os.getenv("CORS_ALLOWED_ORIGIN", "http://localhost:3000")
    ARTWORK_FOLDER = os.path.join(working_dir(), artwork_folder_name())
    FRONTEND_BUILD_DIR = frontend_build_dir()
    SERVE_FRONTEND = False
    SLOW_REQUEST_MS = 1000
    LOG_FILE = os.getenv("LOG_FILE", "app.log")


class DevelopmentConfig(Config):
    ENV_NAME = "development"
    DEBUG = True


class TestingConfig(Config):
    ENV_NAME = "testing"
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite://")
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_FILE = None


class ProductionConfig(Config):
    ENV_NAME = "production"
    DEBUG = False
    SERVE_FRONTEND = True
