"""
Request contracts.

A RequestDescriptor is the fully resolved description of one outbound call:
method, path, body encoding, ordered form fields and deadline. Descriptors are
built fresh by the endpoint catalog for every call and handed to the
RequestExecutor, which is the only place that turns them into HTTP traffic.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union


class BodyEncoding(str, Enum):
    JSON = "json"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class UploadFile:
    """A CSV (or other) file sent as the binary part of a multipart upload."""

    filename: str
    content: bytes
    content_type: str = "text/csv"

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "UploadFile":
        path = Path(path)
        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or "text/csv"
        return cls(filename=path.name, content=path.read_bytes(), content_type=content_type)


FieldValue = Union[str, UploadFile]


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    encoding: BodyEncoding
    deadline_seconds: float
    fields: Tuple[Tuple[str, FieldValue], ...] = field(default_factory=tuple)
    binary_result: bool = False

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.fields)

    def multipart_parts(self) -> list:
        """
        Render fields as httpx ``files`` entries, preserving declared order.

        Scalars are sent as ``(None, value)`` parts so they carry no filename;
        passing them through ``data=`` would move them ahead of the file.
        """
        parts = []
        for name, value in self.fields:
            if isinstance(value, UploadFile):
                parts.append((name, (value.filename, value.content, value.content_type)))
            else:
                parts.append((name, (None, value.encode("utf-8"))))
        return parts
