"""Reading text files and writing binary PPM images."""

from __future__ import annotations

import os
from typing import Union

from .errors import FileHelperException, InvalidArgumentException

PathLike = Union[str, "os.PathLike[str]"]

_PPM_COMMENT = "# SAG Engine"


def read_file(filename: PathLike) -> str:
    """Return the whole content of a text file."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as err:
        raise FileHelperException("Failed to open file!") from err


def write_portable_pixmap(output_file_name: PathLike, data, width: int, height: int) -> None:
    """Write RGB pixel data (3 bytes per pixel) as a binary P6 image."""
    if width < 0 or height < 0:
        raise InvalidArgumentException("Image dimensions must not be negative.")
    pixels = bytes(data)
    size = width * height * 3
    if len(pixels) < size:
        raise InvalidArgumentException(
            f"Expected at least {size} bytes of pixel data, got {len(pixels)}."
        )
    header = f"P6\n{_PPM_COMMENT}\n{width} {height}\n{0xFF}\n".encode("ascii")
    with open(output_file_name, "wb") as out:
        out.write(header)
        out.write(pixels[:size])