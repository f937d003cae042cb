from .authorization import (
    ROUTE_ROLES,
    PUBLIC_ENDPOINTS,
    authorize_request,
    init_authorization,
    current_claims,
    current_actor,
)

from .request_helpers import json_body

__all__ = [
    # Authorization
    "ROUTE_ROLES",
    "PUBLIC_ENDPOINTS",
    "authorize_request",
    "init_authorization",
    "current_claims",
    "current_actor",
    # Requests
    "json_body",
]
