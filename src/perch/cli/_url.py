"""``perch url`` — resolve one route name.

Prints the HTTP method and URL, e.g. ``GET /users/7/photos/42``.
"""

import argparse
import sys

from perch.cli._params import config_from_args, parse_params
from perch.errors import PerchError
from perch.routing.resolver import create_resolver


def run_url(args: argparse.Namespace) -> None:
    """Resolve ``args.name`` with ``args.param`` and print the endpoint.

    The resource is taken from the part of the name before the first dot.
    Exits with status 1 on a malformed parameter or resolution failure.
    """
    resource, _, _ = args.name.partition(".")
    try:
        params = parse_params(args.param)
        resolver = create_resolver(resource, config_from_args(args))
        endpoint = resolver.endpoint(args.name, params)
    except PerchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(endpoint)
