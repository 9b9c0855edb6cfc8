"""Reading fractions from text streams one token at a time."""

from __future__ import annotations

from typing import TextIO

from ratiofloat.rational import BigFloat


def read_big_float(stream: TextIO) -> BigFloat:
    """Read the next ``n`` or ``n/d`` token from ``stream``.

    Carriage returns and tabs are ignored. A token ends after a space, at a
    newline (which is consumed) or at the end of the stream.
    """
    chars: list[str] = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char in "\r\t":
            continue
        if char == "\n":
            if chars:
                break
            continue
        chars.append(char)
        if char == " ":
            break
    token = "".join(chars)
    if token.count("/") > 1:
        raise ValueError("Multiple slashes in input")
    return BigFloat.parse(token)