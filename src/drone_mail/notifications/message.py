from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..build.context import BuildContext
from ..config import PluginSettings
from .rendering import render_html, render_subject, render_text


@dataclass(frozen=True, slots=True)
class Payload:
    recipient: str
    subject: str
    html_body: str
    text_body: str
    charset: str
    sender: str

    def to_send_email_kwargs(self) -> dict[str, Any]:
        """Request parameters for the SES ``SendEmail`` operation."""
        return {
            "Destination": {"ToAddresses": [self.recipient]},
            "Message": {
                "Subject": {"Charset": self.charset, "Data": self.subject},
                "Body": {
                    "Html": {"Charset": self.charset, "Data": self.html_body},
                    "Text": {"Charset": self.charset, "Data": self.text_body},
                },
            },
            "Source": self.sender,
        }


def resolve_recipient(context: BuildContext, settings: PluginSettings) -> str:
    return settings.recipient or context.author_email or ""


def compose(context: BuildContext, settings: PluginSettings) -> Payload:
    return Payload(
        recipient=resolve_recipient(context, settings),
        subject=render_subject(context, settings),
        html_body=render_html(context),
        text_body=render_text(context),
        charset=settings.encoding,
        sender=settings.sender,
    )
