"""Environment driven settings for kernel backend selection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

LOGGER = logging.getLogger(__name__)

BACKEND_ENV = "DENSEMATRIX_BACKEND"
STRICT_ENV = "DENSEMATRIX_STRICT"
KNOWN_BACKENDS = ("auto", "numpy", "python")


def parse_bool_env(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def normalise_backend(preference: str | None) -> str:
    preference = (preference or "auto").strip().lower()
    if preference in {"accelerated", "native"}:
        return "auto"
    if preference in {"pure", "purepy", "stub"}:
        return "python"
    if preference not in KNOWN_BACKENDS:
        LOGGER.warning("Unknown matrix backend preference %r; using 'auto'", preference)
        return "auto"
    return preference


@dataclass(frozen=True)
class BackendSettings:
    backend: str = "auto"
    strict: bool | None = None

    @property
    def strict_enabled(self) -> bool:
        # Strict defaults on only when NumPy was requested explicitly.
        if self.strict is not None:
            return self.strict
        return self.backend == "numpy"


def load_settings(environ: Mapping[str, str] | None = None) -> BackendSettings:
    env = os.environ if environ is None else environ
    backend = normalise_backend(env.get(BACKEND_ENV, "auto"))
    strict = parse_bool_env(env.get(STRICT_ENV, "auto"))
    return BackendSettings(backend=backend, strict=strict)


__all__ = [
    "BACKEND_ENV",
    "BackendSettings",
    "KNOWN_BACKENDS",
    "STRICT_ENV",
    "load_settings",
    "normalise_backend",
    "parse_bool_env",
]
