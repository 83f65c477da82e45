"""
Shared pytest fixtures for keyqueue tests.

This module provides common fixtures including:
- Redis mocks for the Redis-backed repository
- In-memory repository and QueueModule instances
- Configuration built from a controlled environment
"""

import os
import sys
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from keyqueue.modules.config import ConfigModule, reset_config
from keyqueue.modules.queue import MemoryQueueRepository, QueueModule


@pytest.fixture
def mock_redis():
    """Create a mock async Redis client with list commands."""
    redis = AsyncMock()
    redis.rpush = AsyncMock(return_value=1)
    redis.lpop = AsyncMock(return_value=None)
    redis.aclose = AsyncMock()
    return redis


@pytest.fixture
def memory_repo():
    """Fresh in-memory repository."""
    return MemoryQueueRepository()


@pytest.fixture
def queue_module(memory_repo):
    """QueueModule over the in-memory repository with a short retry interval."""
    return QueueModule(memory_repo, retry_interval=0.01)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove keyqueue environment variables so defaults apply."""
    for name in (
        "API_HOST",
        "API_PORT",
        "LOG_LEVEL",
        "DEBUG",
        "QUEUE_BACKEND",
        "QUEUE_RETRY_INTERVAL",
        "REDIS_HOST",
        "REDIS_PORT",
        "REDIS_DB",
        "REDIS_PASSWORD",
        "REDIS_KEY_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


@pytest.fixture
def test_config(clean_env):
    """Configuration with a fast retry interval for HTTP tests."""
    clean_env.setenv("QUEUE_RETRY_INTERVAL", "0.01")
    return ConfigModule()
