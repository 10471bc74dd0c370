"""Required-parameter validation for service operations."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from .exceptions import MissingParametersError


def is_unset(value: Any) -> bool:
    """Return True when a parameter value means "not supplied".

    Only ``None`` counts as unset; empty strings and empty lists are
    meaningful values (an empty description clears the field).
    """
    return value is None


def get_missing_params(params: Optional[Mapping[str, Any]], required: Sequence[str]) -> List[str]:
    """Return the required parameter names that are absent or unset.

    Args:
        params: Caller parameters (may be None)
        required: Required parameter names in declaration order

    Returns:
        Missing names in the order they appear in ``required``; an empty
        list when every required parameter is present
    """
    params = params or {}
    return [name for name in required if is_unset(params.get(name))]


def validate_required(params: Optional[Mapping[str, Any]], required: Sequence[str]) -> None:
    """Raise MissingParametersError listing every missing required parameter.

    Raises:
        MissingParametersError: If any required parameter is missing
    """
    missing = get_missing_params(params, required)
    if missing:
        raise MissingParametersError(missing)
