"""Composing and sending e-mail messages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Protocol

logger = logging.getLogger(__name__)

_ADDRESS_RE = re.compile(r"^[-0-9a-zA-Z.+_]+@[-0-9a-zA-Z.+_]+\.[a-zA-Z]{2,}$")


class InvalidAddressError(ValueError):
    """An e-mail address failed validation."""

    def __init__(self, field: str, address: str | None) -> None:
        self.field = field
        self.address = address or ""
        super().__init__(f"The {field!r} e-mail address is invalid: {self.address!r}")


@dataclass(frozen=True)
class Attachment:
    """A text attachment."""

    name: str
    data: str
    content_type: str = "text/plain"


class SupportsSendMessage(Protocol):
    def send_message(self, msg: EmailMessage) -> object: ...


def is_valid_address(address: str | None) -> bool:
    if not address:
        return False
    return _ADDRESS_RE.match(address) is not None


def _validated(field: str, addresses: list[str] | None) -> list[str]:
    result = []
    for address in addresses or []:
        if not is_valid_address(address):
            raise InvalidAddressError(field, address)
        result.append(address)
    return result


def build_message(
    subject: str | None,
    body: str | None,
    sender: str,
    to: list[str] | None = None,
    cc: list[str] | None = None,
    bcc: list[str] | None = None,
    *,
    html: bool = False,
    attachment: Attachment | None = None,
) -> EmailMessage:
    """Build an :class:`EmailMessage` after validating every address.

    Raises:
        InvalidAddressError: If the sender or any recipient is malformed.
        ValueError: If no recipient is given at all.
    """
    if not is_valid_address(sender):
        raise InvalidAddressError("From", sender)

    to_list = _validated("To", to)
    cc_list = _validated("CC", cc)
    bcc_list = _validated("Bcc", bcc)
    if not (to_list or cc_list or bcc_list):
        raise ValueError("At least one 'To', 'CC' or 'Bcc' address must be provided")

    msg = EmailMessage()
    msg["Subject"] = subject if subject and not subject.isspace() else ""
    msg["From"] = sender
    if to_list:
        msg["To"] = ", ".join(to_list)
    if cc_list:
        msg["Cc"] = ", ".join(cc_list)
    if bcc_list:
        msg["Bcc"] = ", ".join(bcc_list)

    text = body if body and not body.isspace() else ""
    msg.set_content(text, subtype="html" if html else "plain")

    if attachment is not None:
        maintype, _, subtype = attachment.content_type.partition("/")
        msg.add_attachment(
            attachment.data.encode("utf-8"),
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.name,
        )

    return msg


def send_message(message: EmailMessage, smtp: SupportsSendMessage) -> None:
    """Send *message* through an ``smtplib.SMTP``-like connection."""
    logger.info("Sending mail %r to %s", message["Subject"], message["To"] or message["Bcc"])
    smtp.send_message(message)
