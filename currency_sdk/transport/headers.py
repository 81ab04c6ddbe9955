"""Parsing of raw HTTP response header blocks."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r?\n")


def parse_raw_headers(raw: str | bytes) -> dict[str, str]:
    """Turn a raw header block into an ordered ``name -> value`` mapping.

    The status line is skipped and lines without a colon are ignored. Repeated
    names keep their first position but the last value wins, so legitimately
    repeatable headers such as ``Set-Cookie`` lose all but one occurrence.
    """

    if isinstance(raw, bytes):
        raw = raw.decode("iso-8859-1")
    headers: dict[str, str] = {}
    for line in _LINE_BREAK.split(raw)[1:]:
        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            continue
        headers[name] = value.strip()
    return headers
