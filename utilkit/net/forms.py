"""Helpers for building HTML form submissions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from urllib.parse import urlencode

_FORM_ID = "PostForm"


def encode_post_data(pairs: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Encode field pairs as an ``application/x-www-form-urlencoded`` body."""
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return urlencode([(name or "", value or "") for name, value in items])


def prepare_post_form(url: str, data: Mapping[str, str]) -> str:
    """Return markup for a hidden form that POSTs *data* to *url* on load."""
    fields = "".join(
        f'<input type="hidden" name="{escape(name)}" value="{escape(value)}">'
        for name, value in data.items()
    )
    form = (
        f'<form id="{_FORM_ID}" name="{_FORM_ID}" action="{escape(url)}" method="POST">'
        f"{fields}</form>"
    )
    script = (
        '<script type="text/javascript">'
        f"var v{_FORM_ID} = document.{_FORM_ID};"
        f"v{_FORM_ID}.submit();"
        "</script>"
    )
    # The script must follow the form it submits.
    return form + script
