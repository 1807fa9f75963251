"""HTTP client and form helpers."""

from utilkit.net.client import (
    HttpClient,
    HttpClientError,
    HttpError,
    HttpNotFoundError,
    HttpResponse,
    HttpServerError,
)
from utilkit.net.forms import encode_post_data, prepare_post_form

__all__ = [
    "HttpClient",
    "HttpClientError",
    "HttpError",
    "HttpNotFoundError",
    "HttpResponse",
    "HttpServerError",
    "encode_post_data",
    "prepare_post_form",
]
