"""Parsing of ``KEY=VALUE`` command-line parameters."""

import argparse
from typing import Any

from perch.config import ResolverConfig
from perch.errors import ConfigurationError


def parse_params(pairs: list[str]) -> dict[str, Any]:
    """Turn ``["user=7", "tag=a", "tag=b"]`` into ``{"user": "7", "tag": ["a", "b"]}``.

    Keys keep their first-seen order. Raises ``ConfigurationError`` for a
    pair without ``=`` or with an empty key.
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Invalid parameter {pair!r}: expected KEY=VALUE."
            raise ConfigurationError(msg)
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params


def config_from_args(args: argparse.Namespace) -> ResolverConfig:
    """Build a ``ResolverConfig`` from the shared resolver options."""
    return ResolverConfig(
        prefix=args.prefix,
        resource_param=args.resource_param,
        trailing_slash=args.trailing_slash,
        base_url=args.base_url,
    )
