"""Resource route resolver.

Turns ``"<resource>.<action>"`` names into URL paths following the
conventional resourceful layout::

    photos.index   -> GET    /photos
    photos.create  -> GET    /photos/create
    photos.store   -> POST   /photos
    photos.show    -> GET    /photos/{photo}
    photos.edit    -> GET    /photos/{photo}/edit
    photos.update  -> PUT    /photos/{photo}
    photos.destroy -> DELETE /photos/{photo}

A resolver holds only its frozen configuration, so it can be shared
freely across threads.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from perch.config import ResolverConfig
from perch.errors import InvalidResource, MissingIdentifierParam
from perch.routing.actions import (
    IDENTIFIER_ACTIONS,
    Action,
    method_for_action,
    parse_action,
)
from perch.routing.route import Endpoint, RouteInfo, TemplateSegment
from perch.routing.template import parse_template, placeholders, substitute
from perch.urls import (
    build_query_string,
    encode_component,
    join_url,
    singularize,
    trim_slashes,
)

logger = logging.getLogger("perch.routing")

# Checked after the resource's own identifier key
FALLBACK_ID_KEY = "id"


@dataclass(frozen=True, slots=True)
class RouteResolver:
    """Resolves route names for a single resource.

    Usage::

        route = RouteResolver("photos", ResolverConfig(prefix="/users/{user}"))
        route("photos.show", {"user": 7, "photo": 42})
        # "/users/7/photos/42"

    Prefer ``create_resolver()``, which also accepts keyword options.
    """

    resource: str
    config: ResolverConfig = field(default_factory=ResolverConfig)
    param_key: str = field(init=False)
    _prefix: tuple[TemplateSegment, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        key = self.config.resource_param
        if key is None:
            key = singularize(self.resource)
        object.__setattr__(self, "param_key", key)
        object.__setattr__(self, "_prefix", parse_template(self.config.prefix))

    def __call__(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Resolve *name* to a URL.

        Parameters consumed by the prefix or the identifier become path
        segments; the rest are appended as a query string.

        Raises ``InvalidResource``, ``InvalidAction``, ``MissingPrefixParam``
        or ``MissingIdentifierParam``.
        """
        _, url = self._resolve(name, params)
        return url

    def endpoint(self, name: str, params: Mapping[str, Any] | None = None) -> Endpoint:
        """Resolve *name* to its HTTP method and URL."""
        action, url = self._resolve(name, params)
        return Endpoint(method=method_for_action(action), url=url)

    def routes(self) -> tuple[RouteInfo, ...]:
        """Return the route table for this resource, paths left as patterns.

        Each row lists the parameters its URL needs: prefix placeholders
        first, then the identifier key for identifier-bound actions.
        """
        prefix_params = placeholders(self._prefix)
        return tuple(
            RouteInfo(
                name=f"{self.resource}.{action.value}",
                method=method_for_action(action),
                path=self._pattern(action),
                params=(
                    prefix_params + (self.param_key,)
                    if action in IDENTIFIER_ACTIONS and self.param_key not in prefix_params
                    else prefix_params
                ),
            )
            for action in Action
        )

    def _resolve(self, name: str, params: Mapping[str, Any] | None) -> tuple[Action, str]:
        if params is None:
            params = {}

        res, _, action_name = name.partition(".")
        if res != self.resource:
            raise InvalidResource(self.resource, res)
        action = parse_action(action_name)

        prefix, used = substitute(self._prefix, params)
        relative, used = self._relative_path(action, params, used)
        url = join_url(self.config.base_url, prefix, self._root, relative)

        if self.config.trailing_slash and not url.endswith("/"):
            url += "/"

        query = build_query_string(params, used)
        if query:
            url = f"{url}?{query}"
        return action, url

    @property
    def _root(self) -> str:
        return f"/{trim_slashes(self.resource)}"

    def _relative_path(
        self,
        action: Action,
        params: Mapping[str, Any],
        used: frozenset[str],
    ) -> tuple[str, frozenset[str]]:
        """Return the path below the resource root and the updated used keys."""
        match action:
            case Action.INDEX | Action.STORE:
                return "", used
            case Action.CREATE:
                return "/create", used
            case Action.SHOW | Action.UPDATE | Action.DESTROY:
                key = self._identifier_key(action, params)
                return f"/{encode_component(params[key])}", used | {key}
            case Action.EDIT:
                key = self._identifier_key(action, params)
                return f"/{encode_component(params[key])}/edit", used | {key}

    def _identifier_key(self, action: Action, params: Mapping[str, Any]) -> str:
        # The resource's own key wins over "id" when both are present
        candidates = tuple(dict.fromkeys((self.param_key, FALLBACK_ID_KEY)))
        for key in candidates:
            if key in params:
                return key
        raise MissingIdentifierParam(candidates, action.value)

    def _pattern(self, action: Action) -> str:
        placeholder = "{" + self.param_key + "}"
        match action:
            case Action.INDEX | Action.STORE:
                relative = ""
            case Action.CREATE:
                relative = "/create"
            case Action.SHOW | Action.UPDATE | Action.DESTROY:
                relative = f"/{placeholder}"
            case Action.EDIT:
                relative = f"/{placeholder}/edit"
        prefix = "".join(seg.value for seg in self._prefix)
        path = join_url(self.config.base_url, prefix, self._root, relative)
        if self.config.trailing_slash and not path.endswith("/"):
            path += "/"
        return path


def create_resolver(
    resource: str,
    config: ResolverConfig | None = None,
    **options: Any,
) -> RouteResolver:
    """Create a route resolver for *resource*.

    Options are the ``ResolverConfig`` fields, given either as a config
    object, as keywords, or both (keywords win)::

        route = create_resolver("photos", prefix="/users/{user}", trailing_slash=True)
        route("photos.edit", {"user": 7, "id": 42, "tab": "meta"})
        # "/users/7/photos/42/edit/?tab=meta"

    Never raises for a well-typed configuration; problems surface when
    the returned resolver is called.
    """
    if config is None:
        config = ResolverConfig(**options)
    elif options:
        config = replace(config, **options)

    resolver = RouteResolver(resource, config)
    logger.debug(
        "Created resolver for %r (identifier key %r, prefix %r)",
        resource,
        resolver.param_key,
        config.prefix,
    )
    return resolver
