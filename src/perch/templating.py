"""Kida template integration.

Exposes resolvers as template globals so templates can build URLs by
route name::

    env = Environment(autoescape=True)
    add_route_globals(env, {"photo_url": create_resolver("photos")})

    {{ photo_url("photos.show", photo) }}   -> /photos/42
    {{ route_method("destroy") }}            -> DELETE

Requires ``pip install perch[templates]``.
"""

from collections.abc import Mapping

from kida import Environment

from perch.errors import ConfigurationError
from perch.routing.actions import method_for_action
from perch.routing.resolver import RouteResolver

METHOD_GLOBAL = "route_method"


def add_route_globals(env: Environment, resolvers: Mapping[str, RouteResolver]) -> Environment:
    """Register each resolver as a global under its mapping key.

    Also registers ``route_method`` bound to ``method_for_action``.
    Raises ``ConfigurationError`` if a key is not a valid identifier or
    would shadow ``route_method``.
    """
    for name in resolvers:
        if not name.isidentifier():
            msg = f"Template global name {name!r} is not a valid identifier."
            raise ConfigurationError(msg)
        if name == METHOD_GLOBAL:
            msg = f"Template global name {name!r} is reserved."
            raise ConfigurationError(msg)

    for name, resolver in resolvers.items():
        env.add_global(name, resolver)
    env.add_global(METHOD_GLOBAL, method_for_action)
    return env
