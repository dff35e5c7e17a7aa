"""Binding frames for the evaluator.

A ScopeStack is an ordered list of frames, each mapping a name to the
*unevaluated* Expression it was defined as. Lookups scan innermost to
outermost and the first hit wins. The bottom (global) frame is created with
the stack and can never be popped.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from rcalc.errors import ScopeError
from rcalc.types.expression import Expression

logger = logging.getLogger("rcalc.scope")


class ScopeStack:
    """Stack of name -> Expression frames with innermost-first lookup."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[dict[str, Expression]] = [{}]

    def define(self, name: str, expr: Expression) -> None:
        """Bind `name` in the innermost frame, replacing any binding there."""
        self.frames[-1][name] = expr

    def find(self, name: str) -> Optional[int]:
        """Index of the innermost frame binding `name`, or None."""
        for index in range(len(self.frames) - 1, -1, -1):
            if name in self.frames[index]:
                return index
        return None

    def lookup(self, name: str) -> Optional[Expression]:
        """Return the expression bound to `name`, or None when unbound."""
        index = self.find(name)
        if index is None:
            return None
        return self.frames[index][name]

    def push(self) -> None:
        self.frames.append({})
        logger.debug("pushed scope frame (depth %d)", len(self.frames))

    def pop(self) -> dict[str, Expression]:
        """Remove and return the innermost frame.

        Raises ScopeError when only the global frame is left.
        """
        if len(self.frames) == 1:
            raise ScopeError("Cannot pop the global scope frame")
        frame = self.frames.pop()
        logger.debug("popped scope frame (depth %d)", len(self.frames))
        return frame

    @contextmanager
    def scope(self) -> Iterator[ScopeStack]:
        """Push a frame for the duration of a `with` block."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def visible(self) -> Mapping[str, Expression]:
        """Read-only view of every visible binding, shadowing applied."""
        merged: dict[str, Expression] = {}
        for frame in self.frames:
            merged.update(frame)
        return MappingProxyType(merged)

    def __len__(self) -> int:
        return len(self.frames)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_frame(self, frame: dict[str, Expression], buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame, with an indicator when outer frames exist."""
        with StringIO() as buffer:
            self._write_frame(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<ScopeStack: ")
            for index, frame in enumerate(reversed(self.frames)):
                if index:
                    buffer.write(" -> ")
                self._write_frame(frame, buffer)
            buffer.write(">")
            return buffer.getvalue()
