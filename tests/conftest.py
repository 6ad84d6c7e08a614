from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import pytest

from typedplot.runtime import ForeignRuntime
from typedplot.session import PlotSession

FAKE_IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


@dataclass
class FakeCall:
    target: Any
    name: str
    args: tuple
    kwargs: dict


class FakeStyle:
    def __init__(self) -> None:
        self.available = ["classic", "dark"]
        self.used: list[str] = []

    def use(self, name: str) -> None:
        self.used.append(name)


class FakeAxes3D:
    def scatter(self, *args: Any, **kwargs: Any) -> None:
        return None


class FakeMatplotlib:
    def __init__(self) -> None:
        self.backends: list[str] = []

    def use(self, backend: str) -> None:
        self.backends.append(backend)


class FakePyplot:
    """Stands in for matplotlib.pyplot; unknown functions accept anything."""

    def __init__(self) -> None:
        self.style = FakeStyle()
        self.image_bytes = FAKE_IMAGE_BYTES
        self.axes_3d = FakeAxes3D()

    def savefig(self, target: Any, **kwargs: Any) -> None:
        if hasattr(target, "write"):
            target.write(self.image_bytes)

    def subplot(self, *args: Any, **kwargs: Any) -> FakeAxes3D:
        return self.axes_3d

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return lambda *args, **kwargs: None


def _resolve(target: Any, name: str) -> Any:
    value = target
    for part in name.split("."):
        value = getattr(value, part)
    return value


class FakeRuntime(ForeignRuntime):
    def __init__(self) -> None:
        self.init_count = 0
        self.imports: list[str] = []
        self.calls: list[FakeCall] = []
        self.matplotlib = FakeMatplotlib()
        self.pyplot = FakePyplot()

    def ensure_ready(self) -> None:
        if self.init_count == 0:
            self.init_count += 1

    def import_module(self, name: str) -> Any:
        self.imports.append(name)
        modules = {
            "matplotlib": self.matplotlib,
            "matplotlib.pyplot": self.pyplot,
            "io": io,
        }
        return modules[name]

    def get_attr(self, target: Any, name: str) -> Any:
        return _resolve(target, name)

    def call(
        self,
        target: Any,
        name: str,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> Any:
        call = FakeCall(target=target, name=name, args=tuple(args), kwargs=dict(kwargs or {}))
        self.calls.append(call)
        return _resolve(target, name)(*call.args, **call.kwargs)

    def pyplot_calls(self, name: str) -> list[FakeCall]:
        return [call for call in self.calls if call.target is self.pyplot and call.name == name]

    def single_call(self, name: str) -> FakeCall:
        matches = self.pyplot_calls(name)
        assert len(matches) == 1, f"expected one pyplot.{name} call, got {len(matches)}"
        return matches[0]


@pytest.fixture()
def fake_runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture()
def session(fake_runtime: FakeRuntime) -> PlotSession:
    return PlotSession(runtime=fake_runtime)
