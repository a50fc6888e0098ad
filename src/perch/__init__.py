"""Perch — resource route names to URLs.

Resolves Laravel-style resourceful route names (``photos.show``) into
concrete URL paths, so client code can reference routes by name instead
of hardcoding path strings.

Basic usage::

    from perch import create_resolver, method_for_action

    route = create_resolver("photos", prefix="/users/{user}")
    route("photos.show", {"user": 7, "photo": 42})   # "/users/7/photos/42"
    method_for_action("update")                      # "PUT"

Template globals (``pip install perch[templates]``)::

    from perch.templating import add_route_globals
    add_route_globals(env, {"photo_url": route})
"""

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ConfigurationError",
    "Endpoint",
    "InvalidAction",
    "InvalidResource",
    "MissingIdentifierParam",
    "MissingPrefixParam",
    "PerchError",
    "ResolverConfig",
    "RouteError",
    "RouteInfo",
    "RouteResolver",
    "create_resolver",
    "method_for_action",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Action": "perch.routing.actions",
    "method_for_action": "perch.routing.actions",
    "RouteResolver": "perch.routing.resolver",
    "create_resolver": "perch.routing.resolver",
    "Endpoint": "perch.routing.route",
    "RouteInfo": "perch.routing.route",
    "ResolverConfig": "perch.config",
    "ConfigurationError": "perch.errors",
    "InvalidAction": "perch.errors",
    "InvalidResource": "perch.errors",
    "MissingIdentifierParam": "perch.errors",
    "MissingPrefixParam": "perch.errors",
    "PerchError": "perch.errors",
    "RouteError": "perch.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
