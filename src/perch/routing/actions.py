"""Resourceful actions and their canonical HTTP methods.

The set of actions is closed: adding one means touching every ``match``
over ``Action`` in this package.
"""

from enum import Enum

from perch.errors import InvalidAction

HTTP_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class Action(Enum):
    """One of the seven conventional resource actions."""

    INDEX = "index"
    CREATE = "create"
    STORE = "store"
    SHOW = "show"
    EDIT = "edit"
    UPDATE = "update"
    DESTROY = "destroy"


# Actions that address a single resource instance
IDENTIFIER_ACTIONS: frozenset[Action] = frozenset(
    {Action.SHOW, Action.EDIT, Action.UPDATE, Action.DESTROY}
)


def parse_action(value: str | Action) -> Action:
    """Return the ``Action`` for *value*.

    Raises ``InvalidAction`` if *value* is not one of the seven action names.
    Matching is exact: ``"Show"`` is not ``"show"``.
    """
    if isinstance(value, Action):
        return value
    try:
        return Action(value)
    except ValueError:
        raise InvalidAction(str(value)) from None


def method_for_action(action: str | Action) -> str:
    """Return the HTTP method a backend expects for *action*.

    ``update`` always maps to ``PUT`` even though PATCH is usually
    accepted too; ``PATCH`` is never returned.
    """
    match parse_action(action):
        case Action.INDEX | Action.CREATE | Action.SHOW | Action.EDIT:
            return "GET"
        case Action.STORE:
            return "POST"
        case Action.UPDATE:
            return "PUT"
        case Action.DESTROY:
            return "DELETE"
