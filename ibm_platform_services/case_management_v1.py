"""Case Management API v1: support cases, comments, watchlists and attachments.

Usage:
    with CaseManagementV1.new_instance() as cases:
        case = cases.get_case(case_number="CS0000001").result().get_result()
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from .core.descriptors import OCTET_STREAM, FormField, fields, operation
from .core.service import ServiceFacade

_CASE = "/case-management/v1/cases/{case_number}"
_UTILITIES = "/case-management/utilities/v1"

GET_CASES = operation(
    "get_cases", "GET", "/case-management/v1/cases",
    query=fields("offset", "limit", "search", "sort", "status", "fields"),
)
CREATE_CASE = operation(
    "create_case", "POST", "/case-management/v1/cases",
    body=fields(
        "type", "subject", "description", "severity", "eu", "offering",
        "resources", "watchlist", "invoice_number", "sla_credit_request",
    ),
)
GET_CASE = operation("get_case", "GET", _CASE, required=("case_number",), query=fields("fields"))
UPDATE_CASE_STATUS = operation(
    "update_case_status", "PUT", f"{_CASE}/status",
    required=("case_number", "action"),
    body=fields("action", "comment", "resolution_code"),
)
ADD_COMMENT = operation(
    "add_comment", "PUT", f"{_CASE}/comments",
    required=("case_number", "comment"),
    body=fields("comment"),
)
ADD_WATCHLIST = operation(
    "add_watchlist", "PUT", f"{_CASE}/watchlist",
    required=("case_number",),
    body=fields("watchlist"),
)
REMOVE_WATCHLIST = operation(
    "remove_watchlist", "DELETE", f"{_CASE}/watchlist",
    required=("case_number",),
    body=fields("watchlist"),
)
ADD_RESOURCE = operation(
    "add_resource", "PUT", f"{_CASE}/resources",
    required=("case_number",),
    body=fields("crn", "name", "type", "id", "note"),
)
UPLOAD_FILE = operation(
    "upload_file", "PUT", f"{_CASE}/attachments",
    required=("case_number", "file"),
    form=(FormField("file", "file", content_type_param="file_content_type", filename_param="filename"),),
)
DOWNLOAD_FILE = operation(
    "download_file", "GET", f"{_CASE}/attachments/{{file_id}}",
    required=("case_number", "file_id"),
    accept=OCTET_STREAM,
)
DELETE_FILE = operation(
    "delete_file", "DELETE", f"{_CASE}/attachments/{{file_id}}",
    required=("case_number", "file_id"),
)
GET_EU_SUPPORT = operation("get_eu_support", "GET", f"{_UTILITIES}/eu-support")
GET_TECHNICAL_OFFERINGS = operation("get_technical_offerings", "GET", f"{_UTILITIES}/offerings/technical")
GET_RESOLUTION_CODES = operation("get_resolution_codes", "GET", f"{_UTILITIES}/constants/resolution-codes")
GET_STATUSES = operation("get_statuses", "GET", f"{_UTILITIES}/constants/statuses")

Params = Optional[Mapping[str, Any]]


class CaseManagementV1(ServiceFacade):
    """Manage IBM Cloud support cases."""

    DEFAULT_SERVICE_URL = "https://support-center.cloud.ibm.com"
    DEFAULT_SERVICE_NAME = "case_management"
    SERVICE_VERSION = "v1"

    def get_cases(self, params: Params = None, **kwargs) -> Future:
        """Get cases in the account that the user can access.

        Args:
            offset: Number of cases to skip
            limit: Number of cases per page
            search: String to search in case number, subject, description, comments
            sort: Sort field, prefix with ``-`` for descending
            status: List of statuses to filter by
            fields: List of case fields to return
        """
        return self._call(GET_CASES, params, kwargs)

    def create_case(self, params: Params = None, **kwargs) -> Future:
        """Create a support case.

        Args:
            type: technical, account_and_access, billing_and_invoice or sales
            subject: Short case title
            description: Issue details
            severity: 1 (most severe) to 4
            eu: EU support payload, e.g. ``{"supported": True, "data_center": 38}``
            offering: Offering payload, required for technical cases
            resources: List of resource payloads (crn, name, type, id, note)
            watchlist: Users to add to the watchlist
            invoice_number: Invoice number for billing cases
            sla_credit_request: Whether this is an SLA credit request
        """
        return self._call(CREATE_CASE, params, kwargs)

    def get_case(self, params: Params = None, **kwargs) -> Future:
        """Get a case by ``case_number``, optionally restricted to ``fields``."""
        return self._call(GET_CASE, params, kwargs)

    def update_case_status(self, params: Params = None, **kwargs) -> Future:
        """Resolve, unresolve or accept a case.

        Args:
            case_number: Case number (required)
            action: resolve, unresolve or accept (required)
            comment: Comment explaining the status change
            resolution_code: Resolution code, used when resolving
        """
        return self._call(UPDATE_CASE_STATUS, params, kwargs)

    def add_comment(self, params: Params = None, **kwargs) -> Future:
        return self._call(ADD_COMMENT, params, kwargs)

    def add_watchlist(self, params: Params = None, **kwargs) -> Future:
        """Add users (``{"realm": ..., "user_id": ...}``) to the case watchlist."""
        return self._call(ADD_WATCHLIST, params, kwargs)

    def remove_watchlist(self, params: Params = None, **kwargs) -> Future:
        return self._call(REMOVE_WATCHLIST, params, kwargs)

    def add_resource(self, params: Params = None, **kwargs) -> Future:
        """Attach a resource to a case, identified by ``crn`` or by ``type`` and ``id``."""
        return self._call(ADD_RESOURCE, params, kwargs)

    def upload_file(self, params: Params = None, **kwargs) -> Future:
        """Upload an attachment to a case.

        Args:
            case_number: Case number (required)
            file: File content, bytes or a file-like object (required)
            file_content_type: Media type of the file, default
                application/octet-stream
            filename: File name reported to the service
        """
        return self._call(UPLOAD_FILE, params, kwargs)

    def download_file(self, params: Params = None, **kwargs) -> Future:
        """Download an attachment; the result is the raw file bytes."""
        return self._call(DOWNLOAD_FILE, params, kwargs)

    def delete_file(self, params: Params = None, **kwargs) -> Future:
        return self._call(DELETE_FILE, params, kwargs)

    def get_eu_support(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_EU_SUPPORT, params, kwargs)

    def get_technical_offerings(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_TECHNICAL_OFFERINGS, params, kwargs)

    def get_resolution_codes(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_RESOLUTION_CODES, params, kwargs)

    def get_statuses(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_STATUSES, params, kwargs)
