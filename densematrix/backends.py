"""Kernel backend selection and guarded dispatch.

The pure-Python kernels in ``_python_backend`` define the semantics of every
operator.  When NumPy is selected, :func:`backend_call` tries the accelerated
kernel first and falls back to the pure-Python one whenever the accelerated
kernel declines (returns ``None``) or fails outside strict mode.
"""

from __future__ import annotations

import importlib
import logging
import types
from typing import Any, Tuple

from . import _python_backend
from .config import BackendSettings, load_settings, normalise_backend

LOGGER = logging.getLogger(__name__)

_ACCEL_MODULES = {"numpy": "densematrix.numpy_backend"}

_ACCEL_BACKEND: types.ModuleType | None = None
_BACKEND_NAME = "python"
_STRICT_BACKEND = False


def _load_accelerated(name: str) -> types.ModuleType | None:
    module_name = _ACCEL_MODULES.get(name)
    if module_name is None:
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        LOGGER.warning("Matrix backend %s could not be imported", name)
        return None
    if not module.is_available():
        return None
    return module


def _select_backend(preference: str) -> Tuple[str, types.ModuleType | None]:
    preference = normalise_backend(preference)
    if preference == "python":
        return "python", None
    module = _load_accelerated("numpy")
    if module is not None:
        return "numpy", module
    return "python", None


def configure(backend: str | None = None, strict: bool | None = None) -> str:
    """Select the kernel backend; unspecified values come from the environment.

    Returns the name of the backend now in use.
    """

    global _ACCEL_BACKEND, _BACKEND_NAME, _STRICT_BACKEND
    env = load_settings()
    settings = BackendSettings(
        backend=normalise_backend(backend) if backend is not None else env.backend,
        strict=strict if strict is not None else env.strict,
    )
    _BACKEND_NAME, _ACCEL_BACKEND = _select_backend(settings.backend)
    _STRICT_BACKEND = settings.strict_enabled
    LOGGER.info("Using %s matrix backend (strict=%s)", _BACKEND_NAME, _STRICT_BACKEND)
    return _BACKEND_NAME


def active_backend() -> str:
    return _BACKEND_NAME


def is_strict() -> bool:
    return _STRICT_BACKEND


def _accelerated_call(name: str, *args: Any) -> Any:
    if _ACCEL_BACKEND is None:
        return None
    func = getattr(_ACCEL_BACKEND, name, None)
    if func is None:
        return None
    try:
        return func(*args)
    except Exception:
        if _STRICT_BACKEND:
            raise
        LOGGER.debug("%s backend failed on %s; falling back to pure Python", _BACKEND_NAME, name, exc_info=True)
        return None


def backend_call(name: str, *args: Any) -> Any:
    """Run kernel ``name`` on nested-list operands and return nested lists."""

    result = _accelerated_call(name, *args)
    if result is not None:
        return result
    return getattr(_python_backend, name)(*args)


configure()


__all__ = ["active_backend", "backend_call", "configure", "is_strict"]
