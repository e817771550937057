import os


def get_host_for_locust_testing():
    return os.getenv("LOCUST_HOST", f"http://localhost:{os.getenv('FLASK_APP_PORT', '3001')}")
