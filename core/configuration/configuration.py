import os

from dotenv import load_dotenv

load_dotenv()


def get_app_version():
    return os.getenv("APP_VERSION", "1.0.0")


def is_production():
    return os.getenv("FLASK_ENV", "development") == "production"


def working_dir():
    return os.getenv("WORKING_DIR", "")


def artwork_folder_name():
    return os.getenv("ARTWORK_FOLDER", "game images")


def frontend_build_dir():
    build_dir = os.getenv("FRONTEND_BUILD_DIR", os.path.join("frontend", "build"))
    if os.path.isabs(build_dir):
        return build_dir
    return os.path.join(working_dir(), build_dir)


def api_base_url():
    return os.getenv("CATALOG_API_URL", "http://localhost:3001").rstrip("/")


def asset_base_url():
    explicit = os.getenv("CATALOG_ASSET_BASE")
    if explicit:
        return explicit.rstrip("/")
    return f"{api_base_url()}/game-images"


def debounce_seconds():
    try:
        return float(os.getenv("CATALOG_DEBOUNCE_SECONDS", "0.5"))
    except ValueError:
        return 0.5


def request_timeout():
    try:
        return float(os.getenv("CATALOG_REQUEST_TIMEOUT", "10"))
    except ValueError:
        return 10.0
