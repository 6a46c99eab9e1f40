"""Tests for the directory HTTP API."""

import sys

import pytest

from dirlist.main import app
from dirlist.routers.directory import get_listing_service
from tests.fixtures.files import write_raw_name

LIST_URL = "/api/v1/directory/list"
METADATA_URL = "/api/v1/directory/metadata"


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["api"] == "/api/v1/directory"


def test_health(client):
    """Test health endpoint reports the scan pool from the lifespan."""
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["scan_pool"] == "ready"


def test_api_info(client):
    """Test API information endpoint."""
    response = client.get("/api/v1/directory")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Directory Listing API"
    assert "GET /api/v1/directory/list" in body["endpoints"]


def test_list_directory(client, sample_dir):
    """Test a listing is wrapped in the success envelope with camelCase fields."""
    response = client.get(LIST_URL, params={
        "path": str(sample_dir),
        "sortBy": "size",
        "sortOrder": "asc",
        "page": 1,
        "limit": 10,
    })

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True

    data = body["data"]
    assert data["path"] == str(sample_dir)
    assert [item["name"] for item in data["items"]] == ["a.txt", "b.txt"]
    assert data["pagination"] == {
        "page": 1,
        "limit": 10,
        "total": 2,
        "totalPages": 1,
        "hasNext": False,
        "hasPrevious": False,
    }
    assert data["metadata"]["totalFiles"] == 2
    assert data["metadata"]["totalDirectories"] == 0
    assert data["metadata"]["totalSize"] == 15
    assert data["metadata"]["scannedAt"].endswith("Z")

    item = data["items"][0]
    assert item["type"] == "file"
    assert item["extension"] == ".txt"
    assert item["isHidden"] is False
    assert set(item["permissions"]) == {"readable", "writable", "executable", "owner", "group", "mode"}
    assert "createdDate" in item and "modifiedDate" in item


def test_list_include_hidden(client, sample_dir):
    """Test includeHidden query flag."""
    response = client.get(LIST_URL, params={"path": str(sample_dir), "includeHidden": "true"})
    assert response.status_code == 200
    assert response.json()["data"]["pagination"]["total"] == 3


@pytest.mark.skipif(sys.platform != "linux", reason="only Linux accepts non-UTF-8 file names")
def test_list_skips_undecodable_names(client, sample_dir):
    """Test a non-UTF-8 file name is left out instead of failing the response."""
    write_raw_name(sample_dir, b"bad\xff.txt")

    response = client.get(LIST_URL, params={"path": str(sample_dir)})

    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["name"] for item in data["items"]] == ["a.txt", "b.txt"]
    assert data["pagination"]["total"] == 2


def test_list_pagination(client, abc_dir):
    """Test page 2 with page size 1."""
    response = client.get(LIST_URL, params={"path": str(abc_dir), "page": 2, "limit": 1})
    data = response.json()["data"]
    assert [item["name"] for item in data["items"]] == ["b"]
    assert data["pagination"]["totalPages"] == 3
    assert data["pagination"]["hasNext"] is True
    assert data["pagination"]["hasPrevious"] is True


@pytest.mark.parametrize("params", [
    {"page": 1},
    {"path": ""},
    {"path": "/tmp", "limit": 0},
    {"path": "/tmp", "limit": 1001},
    {"path": "/tmp", "page": 0},
    {"path": "/tmp", "sortBy": "owner"},
    {"path": "/tmp", "sortOrder": "sideways"},
    {"path": "/tmp", "includeHidden": "maybe"},
    {"path": "a" * 4097},
])
def test_list_validation_errors(client, params):
    """Test invalid parameters are rejected with the validation shape."""
    response = client.get(LIST_URL, params=params)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert isinstance(body["details"], list) and body["details"]


def test_list_missing_path(client, test_data_dir):
    """Test a missing directory is a 404 with the error envelope."""
    response = client.get(LIST_URL, params={"path": str(test_data_dir / "missing")})
    assert response.status_code == 404
    body = response.json()
    assert body["error"]["message"] == "Path does not exist or is not readable"
    assert body["timestamp"].endswith("Z")


def test_list_traversal(client):
    """Test traversal is forbidden."""
    response = client.get(LIST_URL, params={"path": "../../etc"})
    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Path traversal not allowed"


def test_list_restricted(client):
    """Test restricted paths are forbidden without detail."""
    response = client.get(LIST_URL, params={"path": "/etc/passwd"})
    assert response.status_code == 403
    assert response.json()["error"] == {"message": "Access to this path is restricted"}


def test_list_file_is_bad_request(client, sample_dir):
    """Test listing a file is a 400."""
    response = client.get(LIST_URL, params={"path": str(sample_dir / "a.txt")})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Path is not a directory"


def test_metadata(client, sample_dir):
    """Test metadata envelope."""
    response = client.get(METADATA_URL, params={"path": str(sample_dir)})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["exists"] is True
    assert data["isDirectory"] is True
    assert data["totalItems"] == 3
    assert data["totalSize"] == 16
    assert set(data["permissions"]) == {"readable", "writable", "executable"}


def test_metadata_missing_path(client, test_data_dir):
    """Test the metadata probe soft-succeeds for missing paths."""
    response = client.get(METADATA_URL, params={"path": str(test_data_dir / "missing")})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["exists"] is False
    assert data["totalItems"] == 0
    assert data["lastModified"] == ""


def test_metadata_traversal(client):
    """Test the metadata probe still rejects traversal."""
    response = client.get(METADATA_URL, params={"path": "x/../../y"})
    assert response.status_code == 403


def test_unhandled_error(client, sample_dir):
    """Test unexpected failures become a 500 envelope."""
    class Broken:
        async def list_directory(self, path, query):
            raise RuntimeError("disk on fire")

    app.dependency_overrides[get_listing_service] = lambda: Broken()

    response = client.get(LIST_URL, params={"path": str(sample_dir)})

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["message"] == "disk on fire"
    assert "RuntimeError" in body["error"]["stack"]
    assert "timestamp" in body
