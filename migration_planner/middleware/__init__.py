"""HTTP middleware for the estimation API."""

from .request_id import REQUEST_ID_HEADER, RequestIDMiddleware, get_request_id_from_request

__all__ = ["REQUEST_ID_HEADER", "RequestIDMiddleware", "get_request_id_from_request"]
