import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from repositories import StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str, timeout: float | None = None) -> Engine:
    db_url = make_url(url)
    kwargs: dict[str, Any] = {'pool_pre_ping': True}
    connect_args: dict[str, Any] = {}

    if db_url.get_backend_name() == 'sqlite':
        connect_args['check_same_thread'] = False
        if timeout is not None:
            connect_args['timeout'] = timeout
        # An in-memory database only lives as long as its connection, share a single one
        if db_url.database in (None, '', ':memory:'):
            kwargs['poolclass'] = StaticPool
    elif timeout is not None:
        connect_args['connect_timeout'] = max(1, math.ceil(timeout))

    return create_engine(db_url, connect_args=connect_args, **kwargs)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)


class SqlBaseRepository:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(engine, expire_on_commit=False)

    @contextmanager
    def session(self, *, write: bool = False) -> Iterator[Session]:
        try:
            if write:
                with self.session_factory.begin() as session:
                    yield session
            else:
                with self.session_factory() as session:
                    yield session
        except SQLAlchemyError as err:
            logger.exception('Database operation failed')
            raise StorageError(str(err)) from err
