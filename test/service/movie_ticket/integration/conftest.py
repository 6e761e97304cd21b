from collections.abc import AsyncGenerator

import pytest

from src.platform.database.orm_db_setting import (
    Database,
    create_db_and_tables,
    dispose_engine,
    drop_db_and_tables,
)
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Empty schema on the test SQLite file, bound to this test's event loop"""
    await drop_db_and_tables()
    await create_db_and_tables()
    yield Database()
    await dispose_engine()


@pytest.fixture
def uow(database: Database) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory=database.session)
