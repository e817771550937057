from datetime import date
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from app import db
from app.modules.videogame.exceptions import CatalogStoreError, VideoGameNotFound
from app.modules.videogame.models import VideoGame
from app.modules.videogame.repositories import FILTER_FIELDS, VideoGameRepository, like_pattern
from app.modules.videogame.seeders import VideoGameSeeder
from app.modules.videogame.services import VideoGameService, normalize_criteria


@pytest.fixture(scope="module")
def repo():
    return VideoGameRepository()


@pytest.fixture(scope="function")
def populated_db(test_client, clean_database):
    """
    Small catalog used to exercise the filters.
    """
    games = [
        VideoGame(
            title="Super Mario Bros",
            developer="Nintendo EAD",
            publisher="Nintendo",
            genre="Platformer",
            platform="NES",
            release_date=date(1985, 9, 13),
            artwork_url="super-mario-bros.png",
        ),
        VideoGame(
            title="Sonic",
            developer="Sonic Team",
            publisher="Sega",
            genre="Platformer",
            platform="Mega Drive",
            release_date=date(1991, 6, 23),
            artwork_url="http://example.com/sonic.png",
        ),
        VideoGame(
            title="Halo: Combat Evolved",
            developer="Bungie",
            publisher="Microsoft",
            genre="Shooter",
            platform="Xbox",
            release_date=date(2001, 11, 15),
            artwork_url=None,
        ),
        VideoGame(
            title="100% Orange Juice",
            developer="Orange_Juice",
            publisher="Fruitbat Factory",
            genre="Board game",
            platform="PC",
            release_date=date(2014, 5, 14),
            artwork_url="orange-juice.png",
        ),
    ]
    db.session.add_all(games)
    db.session.commit()

    yield


def _titles(results):
    return [r.title for r in results]


def test_normalize_criteria_drops_blank_and_unknown_fields():
    criteria = normalize_criteria({"title": "mario", "developer": "   ", "genre": "", "year": "1985"})
    assert criteria == {"title": "mario"}


def test_normalize_criteria_handles_missing_params():
    assert normalize_criteria(None) == {}
    assert normalize_criteria({}) == {}


def test_like_pattern_escapes_wildcards():
    assert like_pattern("mario") == "%mario%"
    assert like_pattern("100%") == "%100!%%"
    assert like_pattern("a_b") == "%a!_b%"
    assert like_pattern("wow!") == "%wow!!%"


def test_filter_fields_are_the_searchable_columns():
    assert FILTER_FIELDS == ("title", "developer", "publisher", "genre", "platform")


def test_repo_filter_by_title_is_case_insensitive(repo, populated_db):
    assert _titles(repo.filter({"title": "mario"})) == ["Super Mario Bros"]
    assert _titles(repo.filter({"title": "MARIO"})) == ["Super Mario Bros"]


def test_repo_filter_without_criteria_returns_full_catalog(repo, populated_db):
    assert len(repo.filter()) == 4
    assert len(repo.filter({})) == 4


def test_repo_filter_is_conjunctive(repo, populated_db):
    results = repo.filter({"genre": "platformer", "publisher": "sega"})
    assert _titles(results) == ["Sonic"]

    results = repo.filter({"genre": "platformer", "publisher": "microsoft"})
    assert results == []


def test_repo_filter_ignores_whitespace_only_values(repo, populated_db):
    results = repo.filter({"title": "   ", "platform": "xbox"})
    assert _titles(results) == ["Halo: Combat Evolved"]


def test_repo_filter_matches_wildcards_literally(repo, populated_db):
    assert _titles(repo.filter({"title": "100%"})) == ["100% Orange Juice"]
    assert _titles(repo.filter({"developer": "e_j"})) == ["100% Orange Juice"]
    # "_" is not a single-character wildcard
    assert repo.filter({"title": "S_nic"}) == []
    assert _titles(repo.filter({"title": "%"})) == ["100% Orange Juice"]


def test_repo_every_result_matches_every_supplied_field(repo, populated_db):
    criteria = {"title": "o", "genre": "platform"}
    results = repo.filter(criteria)
    assert results
    for game in results:
        for field, value in criteria.items():
            assert value.lower() in getattr(game, field).lower()


def test_repo_artwork_url(repo, populated_db):
    sonic = repo.find_by_title("Sonic")
    assert repo.artwork_url(sonic.id) == ("http://example.com/sonic.png",)
    assert repo.artwork_url(99999) is None


def test_service_get_unknown_id_raises_not_found(test_client, clean_database):
    service = VideoGameService()
    with pytest.raises(VideoGameNotFound) as excinfo:
        service.get(99999)
    assert excinfo.value.game_id == 99999


def test_service_get_artwork_url(populated_db):
    service = VideoGameService()
    halo = service.repository.find_by_title("Halo: Combat Evolved")
    assert service.get_artwork_url(halo.id) is None

    with pytest.raises(VideoGameNotFound):
        service.get_artwork_url(99999)


def test_service_search_wraps_store_errors(test_client):
    service = VideoGameService()

    def failing_filter(criteria):
        raise OperationalError("SELECT * FROM videogames", {}, Exception("connection lost"))

    service.repository = SimpleNamespace(
        filter=failing_filter,
        session=SimpleNamespace(rollback=lambda: None),
    )

    with pytest.raises(CatalogStoreError):
        service.search({"title": "mario"})


def test_service_search_passes_normalized_criteria():
    service = VideoGameService()
    received = {}

    def fake_filter(criteria):
        received.update(criteria)
        return []

    service.repository = SimpleNamespace(filter=fake_filter)

    assert service.search({"title": "zelda", "platform": " "}) == []
    assert received == {"title": "zelda"}


def test_to_dict_serializes_release_date(test_client):
    game = VideoGame(id=7, title="Sonic", release_date=date(1991, 6, 23), artwork_url="sonic.png")
    data = game.to_dict()
    assert data["id"] == 7
    assert data["release_date"] == "1991-06-23"
    assert data["artwork_url"] == "sonic.png"
    assert set(data) == {"id", "title", "developer", "publisher", "genre", "platform", "release_date", "artwork_url"}


def test_seeder_is_idempotent(test_client, clean_database):
    service = VideoGameService()
    VideoGameSeeder().run()
    first = service.count()
    VideoGameSeeder().run()
    assert service.count() == first
    assert first > 0
