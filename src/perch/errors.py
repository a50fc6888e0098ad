"""Perch exception hierarchy.

Shared across the resolver, CLI, and template integration so every
module raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when input outside the resolver itself is malformed.

    Typically a bad ``key=value`` pair on the command line or an invalid
    template global name.
    """


class RouteError(PerchError):
    """Base for route resolution failures.

    Always a programming or configuration error on the caller's side,
    never a transient condition.
    """


class InvalidResource(RouteError):
    """The route name's resource segment does not match the resolver's resource."""

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Route resolver: expected resource {expected!r}, got {got!r}.")


class InvalidAction(RouteError):
    """The route name's action segment is not a resourceful action."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Route resolver: unknown action {action!r}.")


class MissingPrefixParam(RouteError):
    """A ``{placeholder}`` in the prefix template has no matching parameter."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing route prefix param: {key!r}")


class MissingIdentifierParam(RouteError):
    """An identifier-bound action found none of its candidate keys."""

    def __init__(self, keys: tuple[str, ...], action: str) -> None:
        self.keys = keys
        self.action = action
        expected = " or ".join(repr(k) for k in keys)
        super().__init__(
            f"Missing resource id param: expected {expected} for action {action!r}."
        )
