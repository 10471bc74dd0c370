"""Resource Manager API v2: resource groups and quota definitions.

Usage:
    with ResourceManagerV2.new_instance() as manager:
        groups = manager.list_resource_groups(account_id="abc").result().get_result()
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from .core.descriptors import fields, operation
from .core.service import ServiceFacade

_ACCOUNT_QUOTA = "/quota_definitions/accounts/{account_id}/resource_types/{resource_type}"

GET_ACCOUNT_QUOTA_LIST = operation(
    "get_account_quota_list", "GET", "/quota_definitions/accounts/{account_id}",
    required=("account_id",),
)
GET_RESOURCE_QUOTA = operation(
    "get_resource_quota", "GET", _ACCOUNT_QUOTA, required=("account_id", "resource_type"),
)
UPDATE_RESOURCE_QUOTA = operation(
    "update_resource_quota", "PUT", _ACCOUNT_QUOTA, required=("account_id", "resource_type"),
)
DELETE_RESOURCE_QUOTA = operation(
    "delete_resource_quota", "DELETE", _ACCOUNT_QUOTA, required=("account_id", "resource_type"),
)
CREATE_DEFAULT_RESOURCE_QUOTA = operation(
    "create_default_resource_quota", "POST", "/quota_definitions/resource_types/{resource_type}",
    required=("resource_type",),
)
CREATE_SCHEMA = operation(
    "create_schema", "POST", "/quota_definitions/resource_types/{resource_type}/schemas",
    required=("resource_type",),
)
GET_SCHEMA = operation(
    "get_schema", "GET", "/quota_definitions/resource_types/{resource_type}/schemas",
    required=("resource_type",),
)
LIST_QUOTA_DEFINITIONS = operation("list_quota_definitions", "GET", "/quota_definitions")
GET_QUOTA_DEFINITION = operation("get_quota_definition", "GET", "/quota_definitions/{id}", required=("id",))

LIST_RESOURCE_GROUPS = operation(
    "list_resource_groups", "GET", "/resource_groups",
    query=fields("account_id", "date"),
)
CREATE_RESOURCE_GROUP = operation(
    "create_resource_group", "POST", "/resource_groups",
    body=fields("name", "account_id"),
)
GET_RESOURCE_GROUP = operation("get_resource_group", "GET", "/resource_groups/{id}", required=("id",))
UPDATE_RESOURCE_GROUP = operation(
    "update_resource_group", "PATCH", "/resource_groups/{id}",
    required=("id",),
    body=fields("name", "state"),
)
DELETE_RESOURCE_GROUP = operation(
    "delete_resource_group", "DELETE", "/resource_groups/{id}", required=("id",), accept=None,
)

Params = Optional[Mapping[str, Any]]


class ResourceManagerV2(ServiceFacade):
    """Manage resource groups and resource quotas in an account."""

    DEFAULT_SERVICE_URL = "https://resource-controller.cloud.ibm.com/v2"
    DEFAULT_SERVICE_NAME = "resource_manager"
    SERVICE_VERSION = "v2"

    # ─────────────────────────────────────────────────────────────────────────
    # Quotas
    # ─────────────────────────────────────────────────────────────────────────
    def get_account_quota_list(self, params: Params = None, **kwargs) -> Future:
        """List the quotas of every resource type for ``account_id``."""
        return self._call(GET_ACCOUNT_QUOTA_LIST, params, kwargs)

    def get_resource_quota(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_RESOURCE_QUOTA, params, kwargs)

    def update_resource_quota(self, params: Params = None, **kwargs) -> Future:
        return self._call(UPDATE_RESOURCE_QUOTA, params, kwargs)

    def delete_resource_quota(self, params: Params = None, **kwargs) -> Future:
        return self._call(DELETE_RESOURCE_QUOTA, params, kwargs)

    def create_default_resource_quota(self, params: Params = None, **kwargs) -> Future:
        """Create the default quota for ``resource_type``."""
        return self._call(CREATE_DEFAULT_RESOURCE_QUOTA, params, kwargs)

    def create_schema(self, params: Params = None, **kwargs) -> Future:
        return self._call(CREATE_SCHEMA, params, kwargs)

    def get_schema(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_SCHEMA, params, kwargs)

    def list_quota_definitions(self, params: Params = None, **kwargs) -> Future:
        return self._call(LIST_QUOTA_DEFINITIONS, params, kwargs)

    def get_quota_definition(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_QUOTA_DEFINITION, params, kwargs)

    # ─────────────────────────────────────────────────────────────────────────
    # Resource groups
    # ─────────────────────────────────────────────────────────────────────────
    def list_resource_groups(self, params: Params = None, **kwargs) -> Future:
        """List resource groups.

        Args:
            account_id: Account to list groups for; defaults to the account
                of the caller's token
            date: Billing month (YYYY-MM) to report groups for
        """
        return self._call(LIST_RESOURCE_GROUPS, params, kwargs)

    def create_resource_group(self, params: Params = None, **kwargs) -> Future:
        """Create a resource group from ``name`` and ``account_id``."""
        return self._call(CREATE_RESOURCE_GROUP, params, kwargs)

    def get_resource_group(self, params: Params = None, **kwargs) -> Future:
        return self._call(GET_RESOURCE_GROUP, params, kwargs)

    def update_resource_group(self, params: Params = None, **kwargs) -> Future:
        """Rename a resource group or change its ``state``."""
        return self._call(UPDATE_RESOURCE_GROUP, params, kwargs)

    def delete_resource_group(self, params: Params = None, **kwargs) -> Future:
        """Delete a resource group; it must not contain any resources."""
        return self._call(DELETE_RESOURCE_GROUP, params, kwargs)
