"""Logger – ConsolePatch, funnels ad-hoc print/logging calls into a Logger.

Patching is a process-wide side effect: once applied, every ``print()`` and
every module-level ``logging.debug/info/warning/error`` call in the process
ends up in the logger instead of its usual destination. Other helpers on
the patched objects (``logging.basicConfig``, ``logging.exception``, ...)
are left alone. ``print(..., file=fh)`` aimed at anything other than
``sys.stdout``/``sys.stderr`` still writes to *fh*.

Typical usage::

    patch = ConsolePatch(get_logger("console"))
    patch.apply()
    ...
    patch.restore()

Tests pass their own *targets* so nothing global is touched::

    fake = types.SimpleNamespace(print=print)
    ConsolePatch(logger, targets=[(fake, "print", LogLevel.DEBUG)]).apply()
"""
from __future__ import annotations

import builtins
import logging
import sys
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from clientlog.records import LogLevel

if TYPE_CHECKING:
    from clientlog.logger.logger import Logger

logger = logging.getLogger(__name__)

type PatchTarget = tuple[object, str, LogLevel]

DEFAULT_TARGETS: tuple[PatchTarget, ...] = (
    (builtins, "print", LogLevel.DEBUG),
    (logging, "debug", LogLevel.DEBUG),
    (logging, "info", LogLevel.INFO),
    (logging, "warning", LogLevel.WARN),
    (logging, "error", LogLevel.ERROR),
)


def _writes_to_file(file: Any) -> bool:
    """``print(..., file=fh)`` aimed at anything but the console streams."""
    return file is not None and file is not sys.stdout and file is not sys.stderr


def _format_print(*args: Any, sep: str | None = " ", **_: Any) -> str:
    return (" " if sep is None else sep).join(str(a) for a in args)


def _format_logging(msg: Any = "", *args: Any, **_: Any) -> str:
    text = str(msg)
    if args:
        try:
            text = text % args
        except (TypeError, ValueError):
            text = " ".join([text, *(str(a) for a in args)])
    return text


class ConsolePatch:
    """Replace print-like functions with forwarders into *target_logger*."""

    def __init__(
        self,
        target_logger: "Logger",
        targets: Iterable[PatchTarget] = DEFAULT_TARGETS,
    ) -> None:
        self._logger = target_logger
        self._targets = tuple(targets)
        self._originals: list[tuple[object, str, Any]] = []
        self._forwarding = False

    @property
    def applied(self) -> bool:
        return bool(self._originals)

    def apply(self) -> None:
        """Install the forwarders. Calling it twice has no further effect."""
        if self.applied:
            return
        for owner, attr, level in self._targets:
            original = getattr(owner, attr)
            self._originals.append((owner, attr, original))
            setattr(owner, attr, self._forwarder(attr, level, original))
        logger.debug("console_patch.applied targets=%d", len(self._originals))

    def restore(self) -> None:
        """Put the original functions back."""
        while self._originals:
            owner, attr, original = self._originals.pop()
            setattr(owner, attr, original)
        logger.debug("console_patch.restored")

    def _forwarder(self, attr: str, level: LogLevel, original: Callable[..., Any]) -> Callable[..., Any]:
        is_print = attr == "print"
        fmt = _format_print if is_print else _format_logging
        target = self._logger

        def forward(*args: Any, **kwargs: Any) -> Any:
            # output produced while a record is being forwarded (a transport
            # printing, say) goes to the original instead of looping back
            if self._forwarding or (is_print and _writes_to_file(kwargs.get("file"))):
                return original(*args, **kwargs)
            self._forwarding = True
            try:
                target.log(level, fmt(*args, **kwargs))
            finally:
                self._forwarding = False
            return None

        forward.__name__ = attr
        forward.__qualname__ = f"ConsolePatch.{attr}"
        return forward


__all__ = ["ConsolePatch", "DEFAULT_TARGETS", "PatchTarget"]
