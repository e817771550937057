import os

from dotenv import load_dotenv
from flask import Flask, request
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from core.configuration.configuration import get_app_version
from core.managers.config_manager import ConfigManager
from core.managers.error_handler_manager import ErrorHandlerManager
from core.managers.logging_manager import LoggingManager
from core.managers.module_manager import ModuleManager

# Load environment variables
load_dotenv()

# Create the instances
db = SQLAlchemy()
migrate = Migrate()


def create_app(config_name=None):
    app = Flask(__name__)

    # Load configuration according to environment
    config_manager = ConfigManager(app)
    config_manager.load_config(config_name=config_name or os.getenv("FLASK_ENV", "development"))

    # Initialize SQLAlchemy and Migrate with the app
    db.init_app(app)
    migrate.init_app(app, db)

    # Keep model field order in JSON responses
    app.json.sort_keys = False

    # Register modules
    module_manager = ModuleManager(app)
    module_manager.register_modules()

    # Set up logging
    logging_manager = LoggingManager(app)
    logging_manager.setup_logging()

    # Initialize error handler manager
    error_handler_manager = ErrorHandlerManager(app)
    error_handler_manager.register_error_handlers()

    @app.after_request
    def apply_cors(response):
        origin = app.config.get("CORS_ALLOWED_ORIGIN")
        if origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE"
            response.headers["Access-Control-Allow-Credentials"] = "true"
            if request.method == "OPTIONS":
                requested = request.headers.get("Access-Control-Request-Headers")
                if requested:
                    response.headers["Access-Control-Allow-Headers"] = requested
            response.vary.add("Origin")
        return response

    app.logger.info("Video Game Archive %s started (%s)", get_app_version(), app.config.get("ENV_NAME"))

    return app
