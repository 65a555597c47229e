from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def json_pointer(tokens: Iterable[Union[str, int]]) -> str:
    """Build a JSON pointer ("" for the document root) from path tokens."""
    return "".join(f"/{json_pointer_escape(str(token))}" for token in tokens)


def join_pointer(base: str, token: Union[str, int]) -> str:
    return f"{base}/{json_pointer_escape(str(token))}"


def lookup_source(source_map: Optional[SourceMap], yaml_path: Optional[str]) -> SourceLocation:
    """Find the recorded position of ``yaml_path``.

    Falls back to the closest recorded ancestor, so a pointer to a value that
    is not present in the document (e.g. a missing property) resolves to the
    object that should contain it.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    candidate = yaml_path
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                yaml_path=yaml_path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(yaml_path=yaml_path)
        candidate = candidate.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    """Render a location as ``path:line:column``."""
    if not loc:
        return ""

    path = str(loc.file_path) if loc.file_path is not None else ""
    if loc.line is not None and loc.column is not None:
        return f"{path}:{loc.line}:{loc.column}"
    if loc.line is not None:
        return f"{path}:{loc.line}"
    return path
