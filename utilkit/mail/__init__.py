"""E-mail composition and calendar invitations."""

from utilkit.mail.ics import create_ics, to_ics_datetime
from utilkit.mail.message import (
    Attachment,
    InvalidAddressError,
    build_message,
    is_valid_address,
    send_message,
)

__all__ = [
    "Attachment",
    "InvalidAddressError",
    "build_message",
    "create_ics",
    "is_valid_address",
    "send_message",
    "to_ics_datetime",
]
