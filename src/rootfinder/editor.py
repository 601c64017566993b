"""Editor state consulted during root discovery: buffers and options."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, fields
from pathlib import Path

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Buffers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Buffer:
    """An editor buffer.

    Parameters
    ----------
    number : int
        Buffer identifier, unique within a :class:`BufferList`.
    name : str
        File name associated with the buffer.  Empty for unnamed buffers;
        may point at a file that does not exist yet.
    """

    number: int
    name: str = ""


class BufferList:
    """Registry mapping buffer numbers to :class:`Buffer` objects."""

    def __init__(self) -> None:
        self._buffers: dict[int, Buffer] = {}
        self._next_number = 1

    def add(self, name: str | os.PathLike[str] = "") -> Buffer:
        """Register a new buffer for *name* and return it."""
        buffer = Buffer(number=self._next_number, name=os.fspath(name))
        self._buffers[buffer.number] = buffer
        self._next_number += 1
        logger.debug("Added buffer %d (%r)", buffer.number, buffer.name)
        return buffer

    def get(self, number: int) -> Buffer | None:
        return self._buffers.get(number)

    def path(self, number: int) -> Path | None:
        """Canonical absolute path of the buffer's file, or None for unknown/unnamed buffers."""
        buffer = self.get(number)
        if buffer is None:
            logger.debug("Unknown buffer %d", number)
            return None
        if not buffer.name:
            return None
        return Path(buffer.name).expanduser().resolve()

    def directory(self, number: int) -> Path | None:
        """Directory containing the buffer's file."""
        path = self.path(number)
        return None if path is None else path.parent

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self) -> Iterator[Buffer]:
        return iter(self._buffers.values())

    def __contains__(self, number: object) -> bool:
        return number in self._buffers


def search_path(path: str | os.PathLike[str]) -> Path:
    """Return the directory an upward search should start from.

    *path* itself when it is an existing directory, otherwise its parent.
    """
    path = Path(path).expanduser().resolve()
    return path if path.is_dir() else path.parent


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass
class EditorOptions:
    """Editor settings that affect file lookups.

    Parameters
    ----------
    suffixesadd : tuple of str
        Suffixes tried after the plain name when looking up a file,
        e.g. ``(".py",)``.
    """

    suffixesadd: tuple[str, ...] = field(default_factory=tuple)

    @contextmanager
    def override(self, **values) -> Iterator[EditorOptions]:
        """Temporarily set options, restoring the previous values on exit.

        Raises
        ------
        AttributeError
            If a keyword does not name an option.
        """
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise AttributeError(f"Unknown editor options: {sorted(unknown)}")

        saved = {name: getattr(self, name) for name in values}
        for name, value in values.items():
            setattr(self, name, value)
        try:
            yield self
        finally:
            for name, value in saved.items():
                setattr(self, name, value)


default_buffers = BufferList()
default_options = EditorOptions()
