import pytest

from app import create_app, db


@pytest.fixture(scope="session")
def test_app():
    """Create the app once and keep a single app context active for the whole session."""
    test_app = create_app("testing")

    with test_app.app_context():
        db.drop_all()
        db.create_all()
        yield test_app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="module")
def test_client(test_app):
    db.session.remove()
    db.drop_all()
    db.create_all()
    yield test_app.test_client()
    db.session.remove()
    db.drop_all()
    db.create_all()


@pytest.fixture(scope="function")
def clean_database(test_app):
    db.session.remove()
    db.drop_all()
    db.create_all()
    yield
    db.session.remove()
    db.drop_all()
    db.create_all()
