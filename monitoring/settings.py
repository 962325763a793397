"""Monitoring settings hydrated from the environment.

Environment variables
---------------------
MONITORING_METRICS_PREFIX : string prepended to every metric name created by a
                            factory built with ``from_env`` (default: empty).
MONITORING_SETTINGS_LOG   : when truthy, log the resolved settings once at INFO.
"""
from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TRUTHY_SET: set[str] = {"1", "true", "yes", "on"}

_LOGGED = False
_LOG_LOCK = threading.Lock()


def is_truthy(value: str | None) -> bool:
    if not value:
        return False
    return value.strip().lower() in TRUTHY_SET


@dataclass(slots=True, frozen=True)
class MetricsSettings:
    prefix: str = ""

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> MetricsSettings:
        e = env if env is not None else os.environ
        settings = cls(prefix=e.get("MONITORING_METRICS_PREFIX", "").strip())
        if is_truthy(e.get("MONITORING_SETTINGS_LOG")):
            settings.log_once()
        return settings

    def log_once(self) -> None:
        global _LOGGED  # noqa: PLW0603
        with _LOG_LOCK:
            if _LOGGED:
                return
            _LOGGED = True
        logger.info("monitoring settings resolved: prefix=%r", self.prefix)


__all__ = ["MetricsSettings", "TRUTHY_SET", "is_truthy"]
