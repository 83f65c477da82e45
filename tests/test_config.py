"""Tests for environment configuration."""

import pytest

from keyqueue.modules.config import ConfigModule, get_config, reset_config


def test_defaults(clean_env):
    config = ConfigModule()

    assert config.get("host") == "0.0.0.0"
    assert config.get("port") == 8080
    assert config.get("log_level") == "INFO"
    assert config.get("debug") is False
    assert config.get("backend") == "memory"
    assert config.get("retry_interval") == 1.0
    assert config.get("redis_host") == "localhost"
    assert config.get("redis_port") == 6379
    assert config.get("redis_password") is None
    assert config.get("redis_key_prefix") == "queue:values:"


def test_env_overrides(clean_env):
    clean_env.setenv("API_PORT", "9000")
    clean_env.setenv("QUEUE_BACKEND", "REDIS")
    clean_env.setenv("QUEUE_RETRY_INTERVAL", "0.5")
    clean_env.setenv("DEBUG", "true")

    config = ConfigModule()

    assert config.get("port") == 9000
    assert config.get("backend") == "redis"
    assert config.get("retry_interval") == 0.5
    assert config.get("debug") is True


def test_redis_port_k8s_format(clean_env):
    clean_env.setenv("REDIS_PORT", "tcp://10.0.0.7:6380")

    assert ConfigModule().get("redis_port") == 6380


def test_unknown_backend_rejected(clean_env):
    clean_env.setenv("QUEUE_BACKEND", "kafka")

    with pytest.raises(ValueError, match="QUEUE_BACKEND"):
        ConfigModule()


@pytest.mark.parametrize("interval", ["0", "-1"])
def test_non_positive_retry_interval_rejected(clean_env, interval):
    clean_env.setenv("QUEUE_RETRY_INTERVAL", interval)

    with pytest.raises(ValueError, match="QUEUE_RETRY_INTERVAL"):
        ConfigModule()


def test_set_and_get_all(clean_env):
    config = ConfigModule()
    config.set("port", 1234)

    snapshot = config.get_all()
    snapshot["port"] = 1

    assert config.get("port") == 1234
    assert config.get("nope", "fallback") == "fallback"


def test_schema_lists_required_keys():
    schema = ConfigModule.get_config_schema()

    assert set(schema["required"]) == {"host", "port", "log_level", "backend", "retry_interval"}
    assert "redis_password" in schema["optional"]


def test_get_config_singleton(clean_env):
    first = get_config()
    assert get_config() is first

    reset_config()
    assert get_config() is not first
