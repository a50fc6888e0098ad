"""``perch routes`` — list the route table of a resource.

Prints every action with method, route name, path pattern, and the
parameters the path needs.
"""

import argparse

from perch.cli._params import config_from_args
from perch.routing.resolver import create_resolver


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, NAME, PATH, and PARAMS for ``args.resource``."""
    resolver = create_resolver(args.resource, config_from_args(args))
    rows = [
        (info.method, info.name, info.path, ",".join(info.params) or "-")
        for info in resolver.routes()
    ]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[2]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "NAME", "PATH", "PARAMS"))
    sep_len = max_method + max_name + max_path + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, name, path, params in rows:
        print(fmt.format(method, name, path, params))
