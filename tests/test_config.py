import logging
from prc_keygen.config import Settings, load_settings


def test_defaults(monkeypatch):
    for var in ("PRC_PUBLIC_KEYS_FILENAME", "PRC_REGISTRY_PROVIDER", "PRC_LOG_LEVEL", "PRC_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    assert load_settings() == Settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PRC_PUBLIC_KEYS_FILENAME", "keys/pub.cxx")
    monkeypatch.setenv("PRC_REGISTRY_PROVIDER", "memory")
    monkeypatch.setenv("PRC_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.public_keys_filename == "keys/pub.cxx"
    assert s.log_level == logging.DEBUG
    assert s.registry_config() == {"provider": "memory", "source_path": "keys/pub.cxx"}
