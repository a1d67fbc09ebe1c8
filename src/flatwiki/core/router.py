"""Request path routing for the view, edit and save operations."""

import re
from typing import Literal, NamedTuple

import logging

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)

VALID_PATH = re.compile(r"/(edit|save|view)/([a-zA-Z0-9]+)")

Operation = Literal["view", "edit", "save"]


class RouteMatch(NamedTuple):
    operation: Operation
    title: str


def match_path(path: str) -> RouteMatch | None:
    """Match a request path against ``/<operation>/<title>``.

    The whole path must match; titles are one or more ASCII letters or digits.
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return RouteMatch(operation=m.group(1), title=m.group(2))  # type: ignore[arg-type]


def match_route(request: Request, title: str) -> RouteMatch:
    """FastAPI dependency validating the whole request path, or 404.

    ``title`` is the path parameter captured by the route; it is only
    accepted when the full path is an exact ``/<operation>/<title>`` match.
    """
    match = match_path(request.url.path)
    if match is None or match.title != title:
        raise HTTPException(status_code=404, detail="Not Found")
    logger.debug("Routed %s for page %s", match.operation, match.title)
    return match
