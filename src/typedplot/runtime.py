"""Boundary between typedplot and the plotting runtime it drives.

Everything else in the package talks to a :class:`ForeignRuntime`, so tests can
swap the real interpreter for a recording fake.
"""

from __future__ import annotations

import importlib
import logging
import signal
import threading
from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

LOGGER = logging.getLogger(__name__)

PLOTTING_MODULE = "matplotlib"


class ForeignRuntime(ABC):
    """Interface for the embedded plotting runtime."""

    @abstractmethod
    def ensure_ready(self) -> None:
        """Initialize the runtime on first use; later calls do nothing."""

    @abstractmethod
    def import_module(self, name: str) -> Any:
        """Return the module object registered under ``name``."""

    @abstractmethod
    def get_attr(self, target: Any, name: str) -> Any:
        """Read attribute ``name`` (dotted names allowed) from ``target``."""

    @abstractmethod
    def call(
        self,
        target: Any,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        """Invoke ``target.name(*args, **kwargs)`` and return the raw result."""


def _resolve_attr(target: Any, name: str) -> Any:
    value = target
    for part in name.split("."):
        value = getattr(value, part)
    return value


class PythonRuntime(ForeignRuntime):
    def __init__(self) -> None:
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def ensure_ready(self) -> None:
        if self._ready:
            return

        in_main_thread = threading.current_thread() is threading.main_thread()
        previous_handler = signal.getsignal(signal.SIGINT) if in_main_thread else None
        importlib.import_module(PLOTTING_MODULE)
        self._ready = True
        LOGGER.debug("Plotting runtime initialized (%s)", PLOTTING_MODULE)

        # Some backends install their own SIGINT handler on import.
        if in_main_thread and previous_handler is not None:
            if signal.getsignal(signal.SIGINT) is not previous_handler:
                signal.signal(signal.SIGINT, previous_handler)
                LOGGER.debug("Restored host SIGINT handler after runtime init")

    def import_module(self, name: str) -> Any:
        return importlib.import_module(name)

    def get_attr(self, target: Any, name: str) -> Any:
        return _resolve_attr(target, name)

    def call(
        self,
        target: Any,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        func = _resolve_attr(target, name)
        return func(*args, **dict(kwargs or {}))
