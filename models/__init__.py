from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase

from core.store import RecordStore
from settings import DATABASE_ECHO, DATABASE_URL


def make_engine(url: str = DATABASE_URL, **kwargs):
    if url.startswith("sqlite"):
        # handlers run in the threadpool, the connection is shared across threads
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=DATABASE_ECHO, **kwargs)


engine = make_engine()


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_store_for_test(store: RecordStore):
    def inner():
        return store

    return inner


class Base(DeclarativeBase):
    pass


# define all model for create_all
from models.City import City  # NOQA
