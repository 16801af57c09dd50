"""Level-based message routing shared by the rich and headless presenters."""

from __future__ import annotations

from typing import Mapping, Protocol

from lr_ui.tui.system.protocols import Presenter


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...

    def emit_panel(self, title: str, fields: Mapping[str, str]) -> None: ...


class PresenterBase(Presenter):
    """Maps presenter calls onto a sink; subclasses only choose the sink."""

    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def cancelled(self, message: str) -> None:
        """The user backed out; not an error, nothing was submitted."""
        self._sink.emit("cancelled", message)

    def summary(self, title: str, fields: Mapping[str, str]) -> None:
        """A titled block of label/value lines, e.g. a finished job."""
        self._sink.emit_panel(title, {label: str(value) for label, value in fields.items()})
