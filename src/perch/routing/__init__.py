"""Routing — resource route names resolved to URL paths.

Resolvers are created once per resource and are immutable afterwards.
"""

from perch.routing.actions import (
    HTTP_METHODS,
    IDENTIFIER_ACTIONS,
    Action,
    method_for_action,
    parse_action,
)
from perch.routing.resolver import RouteResolver, create_resolver
from perch.routing.route import Endpoint, RouteInfo

__all__ = [
    "HTTP_METHODS",
    "IDENTIFIER_ACTIONS",
    "Action",
    "Endpoint",
    "RouteInfo",
    "RouteResolver",
    "create_resolver",
    "method_for_action",
    "parse_action",
]
