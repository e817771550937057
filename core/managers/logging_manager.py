import logging
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingManager:
    def __init__(self, app):
        self.app = app

    def setup_logging(self):
        formatter = logging.Formatter(LOG_FORMAT)
        level = logging.DEBUG if self.app.debug else logging.INFO

        handlers = []

        log_file = self.app.config.get("LOG_FILE")
        if log_file:
            file_handler = RotatingFileHandler(log_file, maxBytes=10240, backupCount=10)
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.INFO)
            handlers.append(file_handler)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(level)
        handlers.append(stream_handler)

        # Module loggers (app.modules.*, core.*) propagate to the root logger
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            if getattr(handler, "_video_game_archive", False):
                root_logger.removeHandler(handler)
        for handler in handlers:
            handler._video_game_archive = True
            root_logger.addHandler(handler)
        root_logger.setLevel(level)

        self.app.logger.setLevel(level)
