"""Plain-text (P3) PPM serialization of a canvas."""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Iterable, Union

from .color import MAX_CHANNEL

if TYPE_CHECKING:
    from .canvas import Canvas

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
# Lines must stay under 70 characters; a token that would reach this column
# starts a new line instead.
SOFT_LINE_LIMIT = 69


def header(width: int, height: int) -> str:
    return f"{PPM_MAGIC}\n{width} {height}\n{MAX_CHANNEL}\n"


def wrap_tokens(tokens: Iterable[str], width: int) -> str:
    """Join color tokens with spaces, breaking lines between whole tokens.

    ``tokens`` are row-major, ``width`` per canvas row. A row short enough to
    sit on one line always starts a new line. Longer rows flow into the running
    line and wrap only at the soft limit, so the column counter carries across
    their row boundaries.
    """
    tokens = list(tokens)
    if width <= 0:
        return ""
    parts: list[str] = []
    counter = 0
    for start in range(0, len(tokens), width):
        row = tokens[start:start + width]
        if counter != 0 and len(" ".join(row)) + 1 < SOFT_LINE_LIMIT:
            parts.append("\n")
            counter = 0
        for token in row:
            length = len(token)
            if counter != 0 and counter + length + 1 >= SOFT_LINE_LIMIT:
                parts.append("\n")
                counter = 0
            if counter != 0:
                parts.append(" ")
            counter += length + 1
            parts.append(token)
    return "".join(parts)


class Ppm:
    """Serialized P3 image text."""

    def __init__(self, text: str) -> None:
        self._text = text

    @classmethod
    def from_canvas(cls, canvas: Canvas) -> Ppm:
        tokens = (f"{r} {g} {b}" for r, g, b in canvas.to_rgb8().tolist())
        text = header(canvas.width, canvas.height) + wrap_tokens(tokens, canvas.width)
        if not text.endswith("\n"):
            text += "\n"
        logger.debug("Serialized %dx%d canvas to %d characters", canvas.width, canvas.height, len(text))
        return cls(text)

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ppm):
            return NotImplemented
        return self._text == other._text

    def lines(self) -> list[str]:
        return self._text.splitlines()

    def to_bytes(self) -> bytes:
        return self._text.encode("ascii")

    def write_to_file(self, path: Union[str, os.PathLike]) -> None:
        """Create or overwrite ``path`` with the image. OSError propagates."""
        with open(path, "wb") as handle:
            handle.write(self.to_bytes())
        logger.info("Wrote %s", os.fspath(path))
