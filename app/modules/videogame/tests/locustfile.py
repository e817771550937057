import random

from locust import HttpUser, TaskSet, task

from core.environment.host import get_host_for_locust_testing

SEARCH_TERMS = ["mario", "zelda", "sonic", "halo", "final", "a"]


class VideoGameBehavior(TaskSet):
    def on_start(self):
        self.client.get("/videogames")

    @task(3)
    def search_by_title(self):
        term = random.choice(SEARCH_TERMS)
        response = self.client.get("/videogames", params={"title": term}, name="/videogames?title")
        if response.status_code != 200:
            print(f"Title search failed: {response.status_code}")

    @task(2)
    def combined_search(self):
        response = self.client.get(
            "/videogames",
            params={"genre": "platformer", "publisher": "nintendo"},
            name="/videogames?genre&publisher",
        )
        if response.status_code != 200:
            print(f"Combined search failed: {response.status_code}")

    @task(1)
    def artwork_lookup(self):
        with self.client.get("/videogames/1/artwork", name="/videogames/[id]/artwork", catch_response=True) as r:
            if r.status_code in (200, 404):
                r.success()
            else:
                r.failure(f"Artwork lookup failed: {r.status_code}")


class VideoGameUser(HttpUser):
    tasks = [VideoGameBehavior]
    min_wait = 3000
    max_wait = 7000
    host = get_host_for_locust_testing()
