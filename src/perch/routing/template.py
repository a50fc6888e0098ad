"""Prefix template parsing and substitution.

A prefix template is a path fragment such as ``/users/{user}`` or
``/companies/{company}/teams/{team}``. It is parsed once into segments
and substituted on every resolution.
"""

import re
from collections.abc import Mapping, Set
from typing import Any

from perch.errors import MissingPrefixParam
from perch.routing.route import TemplateSegment
from perch.urls import encode_component, trim_slashes

_NAME_RE = re.compile(r"\w+", re.ASCII)


def parse_template(template: str) -> tuple[TemplateSegment, ...]:
    """Scan a prefix template into literal and placeholder segments.

    Examples::

        "/users/{user}"  -> (TemplateSegment("/users/"),
                             TemplateSegment("{user}", is_param=True, param_name="user"))
        "/v{n}/x"        -> (TemplateSegment("/v"),
                             TemplateSegment("{n}", is_param=True, param_name="n"),
                             TemplateSegment("/x"))
        "/a/{not valid}" -> (TemplateSegment("/a/{not valid}"),)

    Only ``{`` + word characters + ``}`` is a placeholder; any other brace
    text stays literal.
    """
    segments: list[TemplateSegment] = []
    literal: list[str] = []
    i = 0
    while i < len(template):
        if template[i] == "{":
            end = template.find("}", i + 1)
            name = template[i + 1 : end] if end != -1 else ""
            if name and _NAME_RE.fullmatch(name):
                if literal:
                    segments.append(TemplateSegment(value="".join(literal)))
                    literal = []
                segments.append(
                    TemplateSegment(value=template[i : end + 1], is_param=True, param_name=name)
                )
                i = end + 1
                continue
        literal.append(template[i])
        i += 1
    if literal:
        segments.append(TemplateSegment(value="".join(literal)))
    return tuple(segments)


def placeholders(segments: tuple[TemplateSegment, ...]) -> tuple[str, ...]:
    """Return placeholder names in first-seen order, without duplicates."""
    names: dict[str, None] = {}
    for seg in segments:
        if seg.is_param and seg.param_name is not None:
            names.setdefault(seg.param_name)
    return tuple(names)


def substitute(
    segments: tuple[TemplateSegment, ...],
    params: Mapping[str, Any],
    used: Set[str] = frozenset(),
) -> tuple[str, frozenset[str]]:
    """Fill placeholders from *params*.

    Returns the slash-trimmed path fragment and *used* extended with every
    key consumed. Raises ``MissingPrefixParam`` for the first placeholder
    without a parameter.
    """
    parts: list[str] = []
    consumed = set(used)
    for seg in segments:
        if not seg.is_param or seg.param_name is None:
            parts.append(seg.value)
            continue
        if seg.param_name not in params:
            raise MissingPrefixParam(seg.param_name)
        parts.append(encode_component(params[seg.param_name]))
        consumed.add(seg.param_name)
    return trim_slashes("".join(parts)), frozenset(consumed)
