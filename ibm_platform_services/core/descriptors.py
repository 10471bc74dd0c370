"""Static request-shape metadata for service operations.

Every REST endpoint is described once, at import time, by an
``OperationDescriptor``. Façade methods never assemble URLs or bodies by
hand; they hand the descriptor and the caller's parameters to
``RequestBuilder``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

JSON = "application/json"
OCTET_STREAM = "application/octet-stream"
MULTIPART_FORM_DATA = "multipart/form-data"

_PLACEHOLDER = re.compile(r"{([A-Za-z0-9_]+)}")


@dataclass(frozen=True)
class Field:
    """Maps a caller parameter onto a wire name (query key, body key, header)."""

    wire_name: str
    param_name: str

    @classmethod
    def same(cls, name: str) -> "Field":
        return cls(name, name)


def fields(*names: str) -> Tuple[Field, ...]:
    """Shorthand for fields whose wire and parameter names are identical."""
    return tuple(Field.same(name) for name in names)


@dataclass(frozen=True)
class FormField:
    """A multipart part built from a content parameter.

    ``content_type_param`` and ``filename_param`` name optional parameters
    that supply the part's media type and file name.
    """

    wire_name: str
    param_name: str
    content_type_param: Optional[str] = None
    filename_param: Optional[str] = None
    default_content_type: str = OCTET_STREAM


@dataclass(frozen=True)
class OperationDescriptor:
    """Immutable description of one REST endpoint."""

    operation_id: str
    method: str
    path: str
    required: Tuple[str, ...] = ()
    path_params: Tuple[Field, ...] = ()
    query: Tuple[Field, ...] = ()
    body: Tuple[Field, ...] = ()
    form: Tuple[FormField, ...] = ()
    headers: Tuple[Field, ...] = ()
    accept: Optional[str] = JSON
    content_type: Optional[str] = None

    def __post_init__(self):
        if self.body and self.form:
            raise ValueError(f"{self.operation_id}: an operation has either a JSON body or form parts")

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path))

    @property
    def is_multipart(self) -> bool:
        return bool(self.form)

    @property
    def content_params(self) -> Tuple[str, ...]:
        """Parameters holding upload content, passed through by reference."""
        return tuple(f.param_name for f in self.form)


@dataclass(frozen=True)
class FormPart:
    """One part of a multipart/form-data payload."""

    data: Any
    content_type: str
    filename: Optional[str] = None


def operation(
    operation_id: str,
    method: str,
    path: str,
    *,
    required: Tuple[str, ...] = (),
    path_params: Optional[Tuple[Field, ...]] = None,
    query: Tuple[Field, ...] = (),
    body: Tuple[Field, ...] = (),
    form: Tuple[FormField, ...] = (),
    headers: Tuple[Field, ...] = (),
    accept: Optional[str] = JSON,
    content_type: Optional[str] = None,
) -> OperationDescriptor:
    """Build an OperationDescriptor with conventional defaults.

    Path parameters default to one same-named field per placeholder, and the
    request content type is inferred from the presence of a body or form.
    """
    if path_params is None:
        path_params = fields(*_PLACEHOLDER.findall(path))
    if content_type is None:
        if form:
            content_type = MULTIPART_FORM_DATA
        elif body:
            content_type = JSON
    return OperationDescriptor(
        operation_id=operation_id,
        method=method.upper(),
        path=path,
        required=tuple(required),
        path_params=tuple(path_params),
        query=tuple(query),
        body=tuple(body),
        form=tuple(form),
        headers=tuple(headers),
        accept=accept,
        content_type=content_type,
    )
