from datetime import date

from app.modules.videogame.models import VideoGame
from core.seeders.BaseSeeder import BaseSeeder

CATALOG = [
    {
        "title": "Super Mario Bros",
        "developer": "Nintendo EAD",
        "publisher": "Nintendo",
        "genre": "Platformer",
        "platform": "NES",
        "release_date": date(1985, 9, 13),
        "artwork_url": "super-mario-bros.png",
    },
    {
        "title": "Sonic the Hedgehog",
        "developer": "Sonic Team",
        "publisher": "Sega",
        "genre": "Platformer",
        "platform": "Mega Drive",
        "release_date": date(1991, 6, 23),
        "artwork_url": "sonic-the-hedgehog.png",
    },
    {
        "title": "The Legend of Zelda: Ocarina of Time",
        "developer": "Nintendo EAD",
        "publisher": "Nintendo",
        "genre": "Action-adventure",
        "platform": "Nintendo 64",
        "release_date": date(1998, 11, 21),
        "artwork_url": "ocarina-of-time.png",
    },
    {
        "title": "Final Fantasy VII",
        "developer": "Square",
        "publisher": "Sony Computer Entertainment",
        "genre": "Role-playing",
        "platform": "PlayStation",
        "release_date": date(1997, 1, 31),
        "artwork_url": "final-fantasy-vii.png",
    },
    {
        "title": "Half-Life",
        "developer": "Valve",
        "publisher": "Sierra Studios",
        "genre": "First-person shooter",
        "platform": "PC",
        "release_date": date(1998, 11, 19),
        "artwork_url": "half-life.png",
    },
    {
        "title": "Halo: Combat Evolved",
        "developer": "Bungie",
        "publisher": "Microsoft Game Studios",
        "genre": "First-person shooter",
        "platform": "Xbox",
        "release_date": date(2001, 11, 15),
        "artwork_url": "halo-combat-evolved.png",
    },
    {
        "title": "Super Mario 64",
        "developer": "Nintendo EAD",
        "publisher": "Nintendo",
        "genre": "Platformer",
        "platform": "Nintendo 64",
        "release_date": date(1996, 6, 23),
        "artwork_url": "super-mario-64.png",
    },
]


class VideoGameSeeder(BaseSeeder):

    priority = 1

    def run(self):
        existing = {title for (title,) in self.db.session.query(VideoGame.title).all()}
        payload = [VideoGame(**entry) for entry in CATALOG if entry["title"] not in existing]
        self.seed(payload)
