"""Turns an operation descriptor plus caller parameters into a request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from requests.structures import CaseInsensitiveDict

from ..common import get_sdk_headers
from .descriptors import Field, FormPart, OperationDescriptor
from .exceptions import TemplateError
from .validators import is_unset

HEADERS_PARAM = "headers"

SdkHeadersFunc = Callable[[str, str, str], Mapping[str, str]]


@dataclass
class RequestDescriptor:
    """A fully resolved, transport-ready request.

    ``url`` is relative to the service URL; the transport prefixes it.
    """

    operation_id: str
    method: str
    url: str
    params: Dict[str, Any]
    headers: CaseInsensitiveDict
    json: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, FormPart]] = None


def expand_path(op: OperationDescriptor, params: Mapping[str, Any]) -> str:
    """Substitute every ``{placeholder}`` in the operation path.

    Values are URL-escaped, including ``/``.

    Raises:
        TemplateError: If a placeholder has no declared mapping or no value
    """
    mapping = {f.wire_name: f.param_name for f in op.path_params}
    values = {}
    for placeholder in op.placeholders:
        param_name = mapping.get(placeholder)
        if param_name is None or is_unset(params.get(param_name)):
            raise TemplateError(op.path, placeholder)
        values[placeholder] = quote(str(params[param_name]), safe="")
    return op.path.format(**values) if values else op.path


def collect(mappings: Tuple[Field, ...], params: Mapping[str, Any]) -> Dict[str, Any]:
    """Map set parameters onto their wire names, skipping unset ones."""
    return {
        f.wire_name: params[f.param_name]
        for f in mappings
        if not is_unset(params.get(f.param_name))
    }


def header_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestBuilder:
    """Builds RequestDescriptors for one service.

    Header precedence, lowest to highest: service default headers, SDK
    identification headers, headers derived from the operation (media types
    and parameter-backed headers such as ``If-Match``), caller headers.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        default_headers: Optional[Mapping[str, str]] = None,
        sdk_headers: Optional[SdkHeadersFunc] = get_sdk_headers,
    ):
        self.service_name = service_name
        self.service_version = service_version
        self.default_headers = dict(default_headers or {})
        self.sdk_headers = sdk_headers

    def build(self, op: OperationDescriptor, params: Optional[Mapping[str, Any]] = None) -> RequestDescriptor:
        params = params or {}
        json_body = collect(op.body, params) if op.body else None
        files = self._form_parts(op, params) if op.is_multipart else None
        return RequestDescriptor(
            operation_id=op.operation_id,
            method=op.method,
            url=expand_path(op, params),
            params=collect(op.query, params),
            headers=self.build_headers(op, params),
            json=json_body,
            files=files,
        )

    def build_headers(self, op: OperationDescriptor, params: Mapping[str, Any]) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(self.default_headers)
        if self.sdk_headers is not None:
            headers.update(self.sdk_headers(self.service_name, self.service_version, op.operation_id))
        if op.accept:
            headers["Accept"] = op.accept
        if op.content_type:
            headers["Content-Type"] = op.content_type
        for name, value in collect(op.headers, params).items():
            headers[name] = header_value(value)

        # Caller headers win; a None value removes the header entirely.
        for name, value in (params.get(HEADERS_PARAM) or {}).items():
            if value is None:
                headers.pop(name, None)
            else:
                headers[name] = header_value(value)
        return headers

    @staticmethod
    def _form_parts(op: OperationDescriptor, params: Mapping[str, Any]) -> Dict[str, FormPart]:
        parts = {}
        for form_field in op.form:
            data = params.get(form_field.param_name)
            if is_unset(data):
                continue
            content_type = None
            if form_field.content_type_param:
                content_type = params.get(form_field.content_type_param)
            filename = None
            if form_field.filename_param:
                filename = params.get(form_field.filename_param)
            parts[form_field.wire_name] = FormPart(
                data=data,
                content_type=content_type or form_field.default_content_type,
                filename=filename or form_field.wire_name,
            )
        return parts
