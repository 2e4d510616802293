from __future__ import annotations

import re

_IDENT_RE = re.compile(r"[^A-Za-z0-9_]")


def _indent_body(lines: list[str], spaces: int) -> list[str]:
    prefix = " " * spaces
    return [f"{prefix}{line}" if line else line for line in lines]


def _sanitize_identifier(name: str) -> str:
    sanitized = _IDENT_RE.sub("_", name)
    if not sanitized:
        sanitized = "_"
    if sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    return sanitized


def _distinct_name(preferred: str, used: set[str]) -> str:
    candidate = _sanitize_identifier(preferred)
    if candidate not in used:
        used.add(candidate)
        return candidate
    n = 2
    while True:
        next_candidate = f"{candidate}_{n}"
        if next_candidate not in used:
            used.add(next_candidate)
            return next_candidate
        n += 1
