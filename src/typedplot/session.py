"""Lazily created pyplot handle, owned by an explicit session object.

A :class:`PlotSession` keeps at most one :class:`ModuleHandle`. The first
plotting call creates it with the library's default backend;
:meth:`PlotSession.set_backend` always builds a fresh handle and replaces the
cached one. Sessions are not thread-safe: drive them from the thread that owns
the plotting runtime.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from typedplot.options import Backend, BackendOption, to_foreign_value
from typedplot.runtime import PLOTTING_MODULE, ForeignRuntime, PythonRuntime

LOGGER = logging.getLogger(__name__)

PYPLOT_MODULE = f"{PLOTTING_MODULE}.pyplot"


class ModuleHandle:
    def __init__(self, runtime: ForeignRuntime, module: Any, backend: BackendOption) -> None:
        self.runtime = runtime
        self.module = module
        self.backend = backend

    def call(
        self,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.runtime.call(self.module, name, args, kwargs or {})

    def get(self, name: str) -> Any:
        return self.runtime.get_attr(self.module, name)

    def __repr__(self) -> str:
        return f"ModuleHandle(backend={self.backend!r})"


class PlotSession:
    def __init__(self, runtime: ForeignRuntime | None = None) -> None:
        self.runtime = runtime if runtime is not None else PythonRuntime()
        self._handle: ModuleHandle | None = None

    @property
    def handle(self) -> ModuleHandle | None:
        return self._handle

    def _create_handle(self, backend: BackendOption) -> ModuleHandle:
        self.runtime.ensure_ready()
        backend_token = to_foreign_value(backend)
        if backend_token is not None:
            library = self.runtime.import_module(PLOTTING_MODULE)
            self.runtime.call(library, "use", (backend_token,))
            LOGGER.debug("Switched plotting backend to %s", backend_token)
        module = self.runtime.import_module(PYPLOT_MODULE)
        return ModuleHandle(self.runtime, module, backend)

    def get_or_create_default(self) -> ModuleHandle:
        if self._handle is None:
            self._handle = self._create_handle(Backend.DEFAULT)
            LOGGER.debug("Created default pyplot handle")
        return self._handle

    def set_backend(self, backend: BackendOption) -> ModuleHandle:
        self._handle = self._create_handle(backend)
        return self._handle

    def reset(self) -> None:
        self._handle = None


_DEFAULT_SESSION: PlotSession | None = None


def default_session() -> PlotSession:
    """Return the process-wide session used when no session is passed."""
    global _DEFAULT_SESSION
    if _DEFAULT_SESSION is None:
        _DEFAULT_SESSION = PlotSession()
    return _DEFAULT_SESSION


def set_backend(backend: BackendOption, *, session: PlotSession | None = None) -> ModuleHandle:
    return (session or default_session()).set_backend(backend)
