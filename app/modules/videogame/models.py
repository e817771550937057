from app import db


class VideoGame(db.Model):
    __tablename__ = "videogames"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False, index=True)
    developer = db.Column(db.String(255), index=True)
    publisher = db.Column(db.String(255), index=True)
    genre = db.Column(db.String(120), index=True)
    platform = db.Column(db.String(120), index=True)
    release_date = db.Column(db.Date)
    artwork_url = db.Column(db.String(512))

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "developer": self.developer,
            "publisher": self.publisher,
            "genre": self.genre,
            "platform": self.platform,
            "release_date": self.release_date.isoformat() if self.release_date else None,
            "artwork_url": self.artwork_url,
        }

    def __repr__(self):
        return f"VideoGame<{self.id}:{self.title}>"
