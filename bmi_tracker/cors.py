"""
CORS middleware whose preflight answer is always an empty 200
"""
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import Response


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """
    Starlette's CORSMiddleware answers preflights with "OK", or with a 400 when
    the requested method/headers are not allowed. Browsers only look at the
    headers, so keep the grant headers for allowed preflights and drop them
    otherwise; status is 200 and the body empty either way.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        if response.status_code != 200:
            headers = {
                key: value
                for key, value in headers.items()
                if not key.startswith("access-control-")
            }
        return Response(status_code=200, headers=headers)
