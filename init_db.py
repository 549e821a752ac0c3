# init_db.py

from app.db.session import Base, engine
from app.db.models import kanban  # noqa: F401
from app.config import settings


def init():
    print(f"Connecting to database {engine.url.render_as_string(hide_password=True)}...")

    print("Creating tables (if not exist)...")
    Base.metadata.create_all(bind=engine)

    print(f"Done ({settings.ENV}).")


if __name__ == "__main__":
    init()
