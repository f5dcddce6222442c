"""Data models for intel documents and hook invocations."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

Number = Union[int, float]
Scalar = Union[str, int, float]


@dataclass
class InvocationPayload:
    """The JSON document the assistant sends on stdin when a session starts."""

    source: Optional[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InvocationPayload":
        source = data.get("source")
        return cls(source=source if isinstance(source, str) else None)


@dataclass
class FileRecord:
    """Exported symbol names for one indexed file."""

    exports: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "FileRecord":
        if not isinstance(data, dict):
            return cls()
        return cls(exports=_as_export_list(data.get("exports")))


@dataclass
class FileIndex:
    """Files known to the external indexer, in the order it wrote them."""

    files: Dict[str, FileRecord] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.files)

    @classmethod
    def from_dict(cls, data: Any) -> "FileIndex":
        raw_files = _as_dict(_as_dict(data).get("files"))
        return cls(files={str(path): FileRecord.from_dict(raw) for path, raw in raw_files.items()})


@dataclass
class NamingStyle:
    dominant: Optional[str] = None
    # Printed exactly as the conventions document spells it.
    percentage: Optional[Scalar] = None


@dataclass
class DirectoryInfo:
    purpose: Optional[str] = None
    files: Optional[Number] = None


@dataclass
class SuffixInfo:
    purpose: Optional[str] = None
    count: Optional[Number] = None


@dataclass
class Conventions:
    """Derived naming, directory and suffix statistics for the project."""

    export_naming: NamingStyle = field(default_factory=NamingStyle)
    directories: Dict[str, DirectoryInfo] = field(default_factory=dict)
    suffixes: Dict[str, SuffixInfo] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Conventions":
        """Build conventions from a decoded document, defaulting absent fields."""
        root = _as_dict(data)

        exports_naming = _as_dict(_as_dict(root.get("naming")).get("exports"))
        dominant = exports_naming.get("dominant")
        naming = NamingStyle(
            dominant=_as_str(dominant) if dominant else None,
            percentage=_as_scalar(exports_naming.get("percentage")),
        )

        directories: Dict[str, DirectoryInfo] = {}
        for path, raw in _as_dict(root.get("directories")).items():
            info = _as_dict(raw)
            directories[str(path)] = DirectoryInfo(
                purpose=_as_str(info.get("purpose")),
                files=_as_number(info.get("files")),
            )

        suffixes: Dict[str, SuffixInfo] = {}
        for pattern, raw in _as_dict(root.get("suffixes")).items():
            info = _as_dict(raw)
            suffixes[str(pattern)] = SuffixInfo(
                purpose=_as_str(info.get("purpose")),
                count=_as_number(info.get("count")),
            )

        return cls(export_naming=naming, directories=directories, suffixes=suffixes)


@dataclass
class IntelBundle:
    """Index plus conventions as loaded for one invocation."""

    index: FileIndex
    conventions: Conventions


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value) if isinstance(value, (str, int, float)) and value != "" else None


def _as_number(value: Any) -> Optional[Number]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value) if "." in value else int(value)
        except ValueError:
            return None
    return None


def _as_scalar(value: Any) -> Optional[Scalar]:
    if isinstance(value, bool):
        return str(value).lower()
    return value if isinstance(value, (str, int, float)) else None


def _as_export_list(value: Any) -> List[str]:
    """Return every export entry as text; a non-list ``exports`` counts as none."""
    if value is None or isinstance(value, (str, dict)) or not isinstance(value, Sequence):
        return []
    names: List[str] = []
    for item in value:
        if isinstance(item, str):
            names.append(item)
        elif isinstance(item, float) and item.is_integer():
            names.append(str(int(item)))
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            names.append(str(item))
        else:
            names.append(json.dumps(item))
    return names


__all__ = [
    "Conventions",
    "DirectoryInfo",
    "FileIndex",
    "FileRecord",
    "IntelBundle",
    "InvocationPayload",
    "NamingStyle",
    "SuffixInfo",
]
