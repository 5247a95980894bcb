"""Project-wide middleware."""

from __future__ import annotations

import re
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from blogroll.logging import request_log_context

REQUEST_ID_HEADER = "X-Request-ID"

# Upstream ids are echoed into logs and headers, so only short tokens are accepted
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def request_id_for(request: HttpRequest) -> str:
    """The proxy-supplied request id if well-formed, else a fresh one."""
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_RE.match(incoming):
        return incoming
    return uuid.uuid4().hex


class RequestContextMiddleware:
    """Bind request id, path, method and user to every log record of a request.

    Place after AuthenticationMiddleware so ``request.user`` is available.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request_id_for(request)
        request.request_id = request_id

        user = getattr(request, "user", None)
        with request_log_context(
            request_id=request_id,
            path=request.path,
            method=request.method,
            user_id=user.pk if user is not None and user.is_authenticated else None,
        ):
            response = self.get_response(request)

        if REQUEST_ID_HEADER not in response:
            response[REQUEST_ID_HEADER] = request_id
        return response
