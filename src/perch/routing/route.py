"""TemplateSegment, Endpoint, and RouteInfo frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed segment of a prefix template.

    Literal:     ``/users/``  (is_param=False)
    Placeholder: ``{user}``   (is_param=True, param_name="user")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A resolved route: the HTTP method and the concrete URL."""

    method: str
    url: str

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """One row of a resource's route table.

    ``path`` keeps its placeholders, e.g. ``/users/{user}/photos/{photo}``;
    ``params`` names them in the order they appear.
    """

    name: str
    method: str
    path: str
    params: tuple[str, ...] = ()
