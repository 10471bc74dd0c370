"""IAM Identity Services API v1: management of service IDs and API keys.

Every operation accepts its parameters either as a mapping or as keyword
arguments (keywords win) and returns a ``concurrent.futures.Future`` that
resolves to a ``DetailedResponse``. Pass ``headers={...}`` to add or
override request headers.

Usage:
    with IamIdentityV1.new_instance() as iam:
        details = iam.get_api_key(id="ApiKey-1234").result().get_result()
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from .core.descriptors import Field, fields, operation
from .core.service import ServiceFacade

LIST_API_KEYS = operation(
    "list_api_keys", "GET", "/v1/apikeys",
    query=fields("account_id", "iam_id", "pagesize", "pagetoken"),
)
CREATE_API_KEY = operation(
    "create_api_key", "POST", "/v1/apikeys",
    required=("name", "iam_id"),
    body=fields("name", "iam_id", "description", "account_id", "apikey"),
    headers=(Field("Entity-Lock", "entity_lock"),),
)
GET_API_KEY_DETAILS = operation(
    "get_api_key_details", "GET", "/v1/apikeys/details",
    headers=(Field("IAM-ApiKey", "iam_api_key"),),
)
GET_API_KEY = operation("get_api_key", "GET", "/v1/apikeys/{id}", required=("id",))
UPDATE_API_KEY = operation(
    "update_api_key", "PUT", "/v1/apikeys/{id}",
    required=("id", "if_match"),
    body=fields("name", "description"),
    headers=(Field("If-Match", "if_match"),),
)
DELETE_API_KEY = operation("delete_api_key", "DELETE", "/v1/apikeys/{id}", required=("id",), accept=None)
LOCK_API_KEY = operation("lock_api_key", "POST", "/v1/apikeys/{id}/lock", required=("id",), accept=None)
UNLOCK_API_KEY = operation("unlock_api_key", "DELETE", "/v1/apikeys/{id}/lock", required=("id",), accept=None)

LIST_SERVICE_IDS = operation(
    "list_service_ids", "GET", "/v1/serviceids",
    query=fields("account_id", "name", "pagesize", "pagetoken", "sort", "order"),
)
CREATE_SERVICE_ID = operation(
    "create_service_id", "POST", "/v1/serviceids",
    required=("account_id", "name"),
    body=fields("account_id", "name", "description", "unique_instance_crns", "apikey"),
    headers=(Field("Entity-Lock", "entity_lock"),),
)
GET_SERVICE_ID = operation("get_service_id", "GET", "/v1/serviceids/{id}", required=("id",))
UPDATE_SERVICE_ID = operation(
    "update_service_id", "PUT", "/v1/serviceids/{id}",
    required=("id", "if_match"),
    body=fields("name", "description", "unique_instance_crns"),
    headers=(Field("If-Match", "if_match"),),
)
DELETE_SERVICE_ID = operation("delete_service_id", "DELETE", "/v1/serviceids/{id}", required=("id",), accept=None)
LOCK_SERVICE_ID = operation("lock_service_id", "POST", "/v1/serviceids/{id}/lock", required=("id",))
UNLOCK_SERVICE_ID = operation("unlock_service_id", "DELETE", "/v1/serviceids/{id}/lock", required=("id",))

Params = Optional[Mapping[str, Any]]


class IamIdentityV1(ServiceFacade):
    """The IAM Identity Service API allows for the management of identities (service IDs, API keys)."""

    DEFAULT_SERVICE_URL = "https://iam.test.cloud.ibm.com"
    DEFAULT_SERVICE_NAME = "iam_identity_services"
    SERVICE_VERSION = "v1"

    # ─────────────────────────────────────────────────────────────────────────
    # API keys
    # ─────────────────────────────────────────────────────────────────────────
    def list_api_keys(self, params: Params = None, **kwargs) -> Future:
        """Get API keys for a given service or user IAM ID and account ID.

        Args:
            account_id: Account ID of the API key(s) to query
            iam_id: IAM ID of the API key(s); a user IAM ID must match the
                Authorization token
            pagesize: Size of a single page (1 to 100, default 20)
            pagetoken: Prev or next page token from a previous query
        """
        return self._call(LIST_API_KEYS, params, kwargs)

    def create_api_key(self, params: Params = None, **kwargs) -> Future:
        """Create an API key for a user ID or service ID.

        Args:
            name: Name of the API key (required, not checked for uniqueness)
            iam_id: The iam_id that this API key authenticates (required)
            description: Optional description
            account_id: The account ID of the API key
            apikey: Optional passthrough value for the API key; not validated
            entity_lock: Lock the API key for further write operations
                (sent as the ``Entity-Lock`` header)
        """
        return self._call(CREATE_API_KEY, params, kwargs)

    def get_api_key_details(self, params: Params = None, **kwargs) -> Future:
        """Get details of an API key by its value, passed as ``iam_api_key``."""
        return self._call(GET_API_KEY_DETAILS, params, kwargs)

    def get_api_key(self, params: Params = None, **kwargs) -> Future:
        """Get details of an API key by its ``id``."""
        return self._call(GET_API_KEY, params, kwargs)

    def update_api_key(self, params: Params = None, **kwargs) -> Future:
        """Update properties of an API key.

        Only supplied properties change. An empty string clears the
        description; leaving a property out (or None) keeps its value.

        Args:
            id: Unique ID of the API key (required)
            if_match: Version to update, as read from the ETag; ``*`` updates
                any version (required, sent as ``If-Match``)
            name: New name; must not be empty if given
            description: New description; ``""`` clears it
        """
        return self._call(UPDATE_API_KEY, params, kwargs)

    def delete_api_key(self, params: Params = None, **kwargs) -> Future:
        """Delete an API key. Existing tokens stay valid until they expire."""
        return self._call(DELETE_API_KEY, params, kwargs)

    def lock_api_key(self, params: Params = None, **kwargs) -> Future:
        return self._call(LOCK_API_KEY, params, kwargs)

    def unlock_api_key(self, params: Params = None, **kwargs) -> Future:
        return self._call(UNLOCK_API_KEY, params, kwargs)

    # ─────────────────────────────────────────────────────────────────────────
    # Service IDs
    # ─────────────────────────────────────────────────────────────────────────
    def list_service_ids(self, params: Params = None, **kwargs) -> Future:
        """List service IDs.

        Args:
            account_id: Account of the service IDs (required unless paging)
            name: Name of the service IDs to query
            pagesize: Size of a single page (1 to 100, default 20)
            pagetoken: Prev or next page token from a previous query
            sort: One of name, description, createdAt, modifiedAt
            order: asc (default) or desc
        """
        return self._call(LIST_SERVICE_IDS, params, kwargs)

    def create_service_id(self, params: Params = None, **kwargs) -> Future:
        """Create a service ID for an IBM Cloud account.

        Args:
            account_id: Account the service ID belongs to (required)
            name: Name of the service ID (required)
            description: Optional description
            unique_instance_crns: CRNs of the services connected to the service ID
            apikey: Body of an API key to create together with the service ID
            entity_lock: Lock the service ID for further write operations
        """
        return self._call(CREATE_SERVICE_ID, params, kwargs)

    def get_service_id(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_SERVICE_ID, params, kwargs)

    def update_service_id(self, params: Params = None, **kwargs) -> Future:
        """Update properties of a service ID.

        ``id`` and ``if_match`` are required. An empty description clears it
        and an empty ``unique_instance_crns`` list clears all CRNs.
        """
        return self._call(UPDATE_SERVICE_ID, params, kwargs)

    def delete_service_id(self, params: Params = None, **kwargs) -> Future:
        """Delete a service ID and all API keys associated with it.

        A 409 conflict means some API keys could not be deleted yet; the
        request may be retried.
        """
        return self._call(DELETE_SERVICE_ID, params, kwargs)

    def lock_service_id(self, params: Params = None, **kwargs) -> Future:
        return self._call(LOCK_SERVICE_ID, params, kwargs)

    def unlock_service_id(self, params: Params = None, **kwargs) -> Future:
        return self._call(UNLOCK_SERVICE_ID, params, kwargs)
