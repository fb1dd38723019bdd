from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging, os


@dataclass
class Settings:
    public_keys_filename: Optional[str] = None
    registry_provider: Optional[str] = None
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    def registry_config(self, source_path: Optional[str] = None) -> dict:
        return {
            "provider": self.registry_provider,
            "source_path": source_path or self.public_keys_filename,
        }


def load_settings() -> Settings:
    level_name = os.getenv("PRC_LOG_LEVEL", "INFO").upper()
    return Settings(
        public_keys_filename=os.getenv("PRC_PUBLIC_KEYS_FILENAME") or None,
        registry_provider=os.getenv("PRC_REGISTRY_PROVIDER") or None,
        log_level=getattr(logging, level_name, logging.INFO),
        log_file=os.getenv("PRC_LOG_FILE") or None,
    )
