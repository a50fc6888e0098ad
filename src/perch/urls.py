"""String helpers for URL assembly.

Token encoding, slash-aware joining, query-string building, and the
minimal English singularization used to derive identifier keys.

Usage::

    from perch.urls import join_url, build_query_string

    url = join_url("https://api.example.com", "users/7", "/photos")
    # "https://api.example.com/users/7/photos"
"""

import re
from collections.abc import Mapping, Set
from typing import Any
from urllib.parse import quote, urlencode

# Characters encodeURIComponent leaves alone beyond quote()'s own unreserved set
_COMPONENT_SAFE = "!~*'()"

# Kept literal in query strings, as browsers do
_QUERY_SAFE = "*"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_SLASH_RUN_RE = re.compile(r"/{2,}")


def singularize(word: str) -> str:
    """Return a best-effort singular form of *word*.

    Applies the first matching rule::

        >>> singularize("categories")
        'category'
        >>> singularize("classes")
        'class'
        >>> singularize("photos")
        'photo'
        >>> singularize("sheep")
        'sheep'

    This is a heuristic, not a pluralization engine: ``"buses"`` becomes
    ``"bus"`` but ``"news"`` becomes ``"new"``. Pass an explicit
    ``resource_param`` when the heuristic gets it wrong.
    """
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("ses"):
        return word[:-2]
    if word.endswith("s"):
        return word[:-1]
    return word


def trim_slashes(value: str) -> str:
    """Strip every leading and trailing ``/`` from *value*."""
    return value.strip("/")


def stringify(value: Any) -> str:
    """Render a parameter value as text.

    Booleans become ``true``/``false`` and ``None`` becomes ``null``, so
    a present-but-null value still fills its path segment.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_component(value: Any) -> str:
    """Percent-encode *value* for use as a single path segment.

    Equivalent to JavaScript's ``encodeURIComponent``: ``/``, ``?``,
    ``#``, ``&`` and spaces are all escaped.
    """
    return quote(stringify(value), safe=_COMPONENT_SAFE)


def join_url(*parts: str | None) -> str:
    """Join URL parts with exactly one ``/`` between them.

    Empty parts are dropped, runs of slashes collapse to one, and the
    ``scheme://`` separator of an absolute base is left intact. A result
    without a scheme always starts with ``/``.
    """
    path = "/".join(trim_slashes(str(p)) for p in parts if p)
    match = _SCHEME_RE.match(path)
    if match:
        return match.group() + _SLASH_RUN_RE.sub("/", path[match.end() :])
    return _SLASH_RUN_RE.sub("/", "/" + path)


def build_query_string(params: Mapping[str, Any], used: Set[str] = frozenset()) -> str:
    """Encode every parameter not in *used* as a query string.

    Entries whose value is ``None`` are skipped. Lists and tuples expand
    to repeated ``key[]`` pairs in element order; everything else is a
    single ``key=value`` pair. Mapping order is preserved. Values are
    form-encoded: spaces become ``+`` and ``*`` is left as is, while
    ``~`` also stays literal (``quote_plus`` never escapes it).

    Example::

        build_query_string({"page": 2, "tags": ["a", "b"]})
        -> "page=2&tags%5B%5D=a&tags%5B%5D=b"

    Returns an empty string when nothing is left to encode.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if key in used or value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", stringify(item)) for item in value)
        else:
            pairs.append((key, stringify(value)))
    return urlencode(pairs, safe=_QUERY_SAFE)
