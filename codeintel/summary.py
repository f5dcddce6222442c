"""Compress the file index and conventions into a short context digest."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .constants import DEFAULT_EXPORT_NAME, EXPORT_LIST_LIMIT, MAX_DIRECTORIES, MAX_SUFFIXES
from .models import Conventions, FileIndex, Number


def generate_summary(index: FileIndex, conventions: Conventions) -> Optional[str]:
    """Return the summary text, or None when nothing has been indexed.

    The output stays a handful of lines however large the index grows:
    directory and suffix sections are cut to the first entries in document
    order and export names are only listed for small projects.
    """
    file_count = len(index.files)
    if file_count == 0:
        return None

    lines: List[str] = [f"Indexed files: {file_count}"]

    naming = conventions.export_naming
    if naming.dominant:
        lines.append(f"Export naming: {naming.dominant} ({_format_value(naming.percentage)}%)")

    directories = [
        (path, info.purpose, info.files) for path, info in conventions.directories.items()
    ]
    lines.extend(_section("Key directories:", directories, MAX_DIRECTORIES))

    suffixes = [
        (pattern, info.purpose, info.count) for pattern, info in conventions.suffixes.items()
    ]
    lines.extend(_section("File patterns:", suffixes, MAX_SUFFIXES))

    exports = list(_named_exports(index))
    if exports:
        lines.append("")
        lines.append(f"Total exports: {len(exports)}")
        if len(exports) <= EXPORT_LIST_LIMIT:
            lines.append(f"Exports: {', '.join(exports)}")

    return "\n".join(lines)


def _section(
    title: str,
    entries: List[Tuple[str, Optional[str], Optional[Number]]],
    limit: int,
) -> List[str]:
    if not entries:
        return []
    lines = ["", title]
    for key, purpose, count in entries[:limit]:
        lines.append(f"  {key}: {_format_value(purpose)} ({_format_value(count)} files)")
    return lines


def _named_exports(index: FileIndex) -> Iterable[str]:
    for record in index.files.values():
        for name in record.exports:
            if name != DEFAULT_EXPORT_NAME:
                yield name


def _format_value(value: object) -> str:
    if value is None:
        return "unknown"
    # JSON producers print 85.0 as 85; keep that spelling.
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["generate_summary"]
