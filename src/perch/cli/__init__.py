"""Perch CLI — resolve route names and print route tables.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys


def _add_resolver_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--prefix",
        default="",
        help="Nested prefix template (e.g. /users/{user})",
    )
    parser.add_argument(
        "--resource-param",
        default=None,
        help="Identifier param name (default: singular of the resource)",
    )
    parser.add_argument(
        "--trailing-slash",
        action="store_true",
        help="Append a trailing slash to every URL",
    )
    parser.add_argument(
        "--base-url",
        default="",
        help="Absolute base URL (e.g. https://api.example.com)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — resolve resource route names to URLs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- perch url --------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Resolve a route name to METHOD and URL")
    url_parser.add_argument("name", help="Route name (e.g. photos.show)")
    url_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Route parameter; repeat a key to pass a list",
    )
    _add_resolver_options(url_parser)

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes of a resource")
    routes_parser.add_argument("resource", help="Resource name (e.g. photos)")
    _add_resolver_options(routes_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "url":
        from perch.cli._url import run_url

        run_url(args)
    elif args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
