import os
from collections.abc import Generator

import pytest

from app.config.settings import Settings
from app.database.connection import MongoConnection
from app.database.exceptions import PersistenceError
from app.database.repositories.report_repository import ReportRepository


def _test_settings() -> Settings:
    os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
    return Settings(
        mongodb_database="csv_insights_test",
        mongodb_collection="analysisReports",
        mongodb_timeout_ms=2000,
    )


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def mongo_connection(test_settings: Settings) -> Generator[MongoConnection, None, None]:
    connection = MongoConnection(test_settings)
    try:
        connection.connect()
    except PersistenceError as e:
        pytest.skip(f"MongoDB test instance not available: {e}. Set MONGODB_URI.")
    try:
        yield connection
    finally:
        connection.close()


@pytest.fixture
def report_repo(
    mongo_connection: MongoConnection, test_settings: Settings
) -> Generator[ReportRepository, None, None]:
    repo = ReportRepository(mongo_connection, test_settings.mongodb_collection)
    yield repo
    repo.collection().delete_many({"userId": {"$regex": "^it-"}})
