"""Pytest configuration and fixtures."""

from typing import Any

import pytest
from loguru import logger

from metamatch import MatchConfig, MetadataMatcher, StaticAnnotationModel
from tests.fakes import sample_graph


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep METAMATCH_* variables from the outer environment out of tests."""
    for name in (
        "METAMATCH_CONFIG",
        "METAMATCH_METADATA_TYPE",
        "METAMATCH_RESERVED_PREFIXES",
        "METAMATCH_MAX_DEPTH",
        "METAMATCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> MatchConfig:
    """Provide a default configuration."""
    return MatchConfig()


@pytest.fixture
def matcher(config: MatchConfig) -> MetadataMatcher:
    """Provide a matcher over the reflective model."""
    return MetadataMatcher(config=config)


@pytest.fixture
def graph() -> dict[str, Any]:
    """Provide the sample annotation graph as a mapping."""
    return sample_graph()


@pytest.fixture
def static_model(graph: dict[str, Any]) -> StaticAnnotationModel:
    """Provide a StaticAnnotationModel built from the sample graph."""
    return StaticAnnotationModel.from_mapping(graph)


@pytest.fixture
def log_messages():
    """Capture loguru records at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
