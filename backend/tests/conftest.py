import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from markdown_blocks.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_in_memory_stores(tmp_path, monkeypatch):
    # Ensure deterministic tests across runs.
    from markdown_blocks.services import input_layer

    # Use a temp data dir for persisted uploads in tests
    monkeypatch.setenv("MARKDOWN_BLOCKS_DATA_DIR", str(tmp_path))

    input_layer._upload_store.clear()
    yield
    input_layer._upload_store.clear()
