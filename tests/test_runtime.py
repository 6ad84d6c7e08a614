from __future__ import annotations

import signal
from types import SimpleNamespace
from typing import Any

import pytest

from typedplot import runtime as runtime_module
from typedplot.runtime import PythonRuntime


def test_python_runtime_initializes_once_and_restores_sigint(monkeypatch: pytest.MonkeyPatch) -> None:
    def host_handler(signum: int, frame: Any) -> None:
        return None

    def runtime_handler(signum: int, frame: Any) -> None:
        return None

    imported: list[str] = []

    def fake_import(name: str) -> Any:
        imported.append(name)
        signal.signal(signal.SIGINT, runtime_handler)
        return SimpleNamespace(__name__=name)

    monkeypatch.setattr(runtime_module, "importlib", SimpleNamespace(import_module=fake_import))
    previous = signal.getsignal(signal.SIGINT)
    signal.signal(signal.SIGINT, host_handler)
    try:
        rt = PythonRuntime()
        assert rt.ready is False
        rt.ensure_ready()
        rt.ensure_ready()
        assert rt.ready is True
        assert imported == ["matplotlib"]
        assert signal.getsignal(signal.SIGINT) is host_handler
    finally:
        signal.signal(signal.SIGINT, previous)


def test_python_runtime_propagates_import_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_import(name: str) -> Any:
        raise ImportError(f"No module named '{name}'")

    monkeypatch.setattr(runtime_module, "importlib", SimpleNamespace(import_module=failing_import))
    rt = PythonRuntime()
    with pytest.raises(ImportError, match="matplotlib"):
        rt.ensure_ready()
    assert rt.ready is False


def test_python_runtime_call_and_get_attr_walk_dotted_names() -> None:
    used: list[str] = []
    target = SimpleNamespace(
        style=SimpleNamespace(available=["classic"], use=used.append),
        add=lambda a, b=0: a + b,
    )
    rt = PythonRuntime()

    assert rt.get_attr(target, "style.available") == ["classic"]
    assert rt.call(target, "add", (1,), {"b": 2}) == 3
    assert rt.call(target, "add", [5]) == 5
    rt.call(target, "style.use", ("dark",))
    assert used == ["dark"]


def test_python_runtime_imports_real_modules() -> None:
    rt = PythonRuntime()
    io_module = rt.import_module("io")
    buffer = rt.call(io_module, "BytesIO")
    buffer.write(b"abc")
    assert rt.call(buffer, "getvalue") == b"abc"
