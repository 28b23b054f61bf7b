"""
Pytest fixtures and test configuration for json-manager tests.
"""

import json
import logging
from pathlib import Path

import pytest

from json_manager.logging_config import LOGGER_NAME
from json_manager.mcp.dispatcher import Dispatcher
from json_manager.service import JsonDataService
from json_manager.storage import CollectionRepository


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real home directory and logger state."""
    monkeypatch.delenv("MCP_JSON_DATA_DIR", raising=False)
    monkeypatch.delenv("MCP_JSON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MCP_JSON_LOG_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Storage root that does not exist yet."""
    return tmp_path / "data"


@pytest.fixture
def repository(data_dir) -> CollectionRepository:
    return CollectionRepository(data_dir)


@pytest.fixture
def service(repository) -> JsonDataService:
    return JsonDataService(repository)


@pytest.fixture
def dispatcher(service) -> Dispatcher:
    return Dispatcher(service)


@pytest.fixture
def write_collection(data_dir):
    """Write raw records straight to a collection file."""

    def _write(filename, records):
        data_dir.mkdir(parents=True, exist_ok=True)
        path = data_dir / filename
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
