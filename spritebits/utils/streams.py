"""Stream helpers mapping paths (or ``-``) to open files."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

from ..core.errors import ResourceError

logger = logging.getLogger(__name__)

STANDARD_STREAM = "-"


@contextmanager
def open_input(path: str) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``path``; ``-`` means standard input."""

    if path == STANDARD_STREAM:
        logger.debug("Reading image from standard input")
        yield sys.stdin.buffer
        return

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ResourceError(path, reason=exc.strerror or str(exc)) from exc
    logger.debug("Opened input %s", path)
    with handle:
        yield handle


@contextmanager
def open_output(path: str) -> Iterator[TextIO]:
    """Yield a text stream for ``path``; ``-`` means standard output.

    A file that fails while being written is removed so that no partial
    output survives a failed run.
    """

    if path == STANDARD_STREAM:
        try:
            yield sys.stdout
            sys.stdout.flush()
        except OSError as exc:
            raise ResourceError("<stdout>", reason=exc.strerror or str(exc)) from exc
        return

    target = Path(path)
    try:
        handle = target.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise ResourceError(path, reason=exc.strerror or str(exc)) from exc

    try:
        with handle:
            yield handle
    except OSError as exc:
        _cleanup_file(target)
        raise ResourceError(path, reason=exc.strerror or str(exc)) from exc
    except BaseException:
        _cleanup_file(target)
        raise
    logger.debug("Closed output %s", path)


def read_bytes(path: str | Path) -> bytes:
    """Return the raw contents of ``path``."""

    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise ResourceError(path, reason=exc.strerror or str(exc)) from exc


def _cleanup_file(path: Path) -> None:
    """Remove a partially written output if it exists."""

    try:
        if path.exists():
            path.unlink()
    except OSError:
        logger.debug("Cleanup failed for %s", path)
