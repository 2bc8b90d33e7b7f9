from datetime import datetime, timezone
from janseva.extensions import db


def local_time_now():
    return datetime.now(timezone.utc).astimezone()


class BaseModel(db.Model):
    __abstract__ = True

    # Autoincrement ids double as creation order for tie-breaking.
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=local_time_now, index=True)
    updated_at = db.Column(db.DateTime, default=local_time_now, onupdate=local_time_now, index=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)
