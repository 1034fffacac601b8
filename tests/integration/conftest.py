import os
import random
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from visadocs.config.settings import Settings
from visadocs.database.connection import apply_schema, close_pool, get_connection, init_pool
from visadocs.database.repositories.documents_repository import DocumentsRepository
from visadocs.database.repositories.job_repository import JobRepository
from visadocs.services.upload_gateway import UploadGateway
from visadocs.storage.local_adapter import LocalBlobStorage


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "visadocs_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    init_pool(test_settings)
    try:
        apply_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def user_id(integration_pool: None) -> Generator[int, None, None]:
    """A random owner id; every row it owns is deleted after the test."""
    owner_id = random.randint(10**9, 2 * 10**9)
    yield owner_id
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM deadlines WHERE user_id = %s", (owner_id,))
            cur.execute("DELETE FROM documents WHERE user_id = %s", (owner_id,))
        conn.commit()


@pytest.fixture
def local_storage(tmp_path: Path) -> LocalBlobStorage:
    return LocalBlobStorage(tmp_path)


@pytest.fixture
def gateway(local_storage: LocalBlobStorage) -> UploadGateway:
    return UploadGateway(local_storage, DocumentsRepository(), JobRepository())


@pytest.fixture
def uploaded_document(
    gateway: UploadGateway,
    local_storage: LocalBlobStorage,
    tmp_path: Path,
    user_id: int,
) -> int:
    """Upload a small PDF and register it as an I-94; returns the document id."""
    target = gateway.request_upload_target(user_id)
    (tmp_path / target.file_id).write_bytes(b"%PDF-1.4 test")
    return gateway.register_document(user_id, "I-94", "i94.pdf", target.file_id)
