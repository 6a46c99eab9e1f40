"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dirlist.config import Settings
from dirlist.main import app
from dirlist.services import FilesystemService, ListingService, MetadataService
from tests.fixtures.files import write_file


@pytest.fixture
def test_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def sample_dir(test_data_dir):
    """b.txt (10 bytes), a.txt (5 bytes), .hidden (1 byte)."""
    directory = test_data_dir / "sample"
    directory.mkdir()
    write_file(directory / "b.txt", 10)
    write_file(directory / "a.txt", 5)
    write_file(directory / ".hidden", 1)
    return directory


@pytest.fixture
def abc_dir(test_data_dir):
    """Three one-byte files named a, b and c."""
    directory = test_data_dir / "abc"
    directory.mkdir()
    for name in ("c", "a", "b"):
        write_file(directory / name, 1)
    return directory


@pytest.fixture
def mixed_dir(test_data_dir):
    """Files and subdirectories with distinct sizes and mtimes."""
    directory = test_data_dir / "mixed"
    directory.mkdir()
    base = 1_700_000_000
    write_file(directory / "report.PDF", 300, mtime=base + 30)
    write_file(directory / "notes.md", 20, mtime=base + 10)
    write_file(directory / "data.csv", 4000, mtime=base + 20)
    (directory / "archive").mkdir()
    (directory / "src").mkdir()
    write_file(directory / "src" / "inner.py", 999)
    os.utime(directory / "archive", (base + 5, base + 5))
    os.utime(directory / "src", (base + 40, base + 40))
    return directory


@pytest.fixture
def settings():
    """Fresh settings instance."""
    return Settings()


@pytest.fixture
def fs_service(settings):
    """Filesystem service on the loop's default executor."""
    return FilesystemService(settings=settings)


@pytest.fixture
def listing_service(fs_service):
    """Listing service."""
    return ListingService(fs_service)


@pytest.fixture
def metadata_service(fs_service):
    """Metadata service."""
    return MetadataService(fs_service)


@pytest.fixture
def client():
    """Test client with the application lifespan running."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
