# thelook/db.py

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str) -> Engine:
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
        if database_url in IN_MEMORY_URLS:
            # every session must see the same in-memory database
            kwargs["poolclass"] = StaticPool

    return create_engine(
        database_url,
        echo=False,
        connect_args=connect_args,
        **kwargs,
    )


def init_db(engine: Engine) -> None:
    # importing models registers the tables on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# Dependency: one session per request, on the engine built at startup
def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
