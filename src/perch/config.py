"""Resolver configuration.

ResolverConfig is a frozen dataclass, immutable after creation and shared
by every call of the resolver built from it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Options for a resource route resolver. Immutable after creation.

    All fields have defaults. Override what you need::

        config = ResolverConfig(prefix="/users/{user}", base_url="https://api.example.com")
    """

    # Nested path template, placeholders filled from route params
    prefix: str = ""

    # Identifier param name; None derives it by singularizing the resource
    resource_param: str | None = None

    trailing_slash: bool = False

    # Absolute origin (e.g. "https://api.example.com"); empty yields relative paths
    base_url: str = ""
