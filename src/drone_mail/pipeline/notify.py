from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from ..build.context import BuildContext
from ..config import PluginSettings
from ..notifications.message import Payload, compose
from ..notifications.policy import should_send
from ..ses.client import DeliveryError, SesClient

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    def send(self, payload: Payload) -> str: ...


@dataclass(slots=True)
class NotifyResult:
    attempted: bool
    recipient: Optional[str] = None
    message_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.attempted and self.error is None


def default_sender_factory(settings: PluginSettings) -> EmailSender:
    return SesClient(region=settings.aws_region)


def run_notification(
    context: BuildContext,
    settings: PluginSettings,
    sender_factory: Callable[[PluginSettings], EmailSender] = default_sender_factory,
    dry_run: bool = False,
) -> NotifyResult:
    if not should_send(context.status, context.prev_build_status, settings.always_send):
        logger.debug(
            "status=%s prev_status=%s always_send=%s: nothing to report",
            context.status,
            context.prev_build_status,
            settings.always_send,
        )
        print("Build in a good place. Not sending email.")
        return NotifyResult(attempted=False)

    payload = compose(context, settings)

    if dry_run:
        logger.info("Dry run payload: %s", payload.to_send_email_kwargs())
        print(f"Dry run. Email to {payload.recipient} not sent.")
        return NotifyResult(attempted=False, recipient=payload.recipient)

    result = NotifyResult(attempted=True, recipient=payload.recipient)
    try:
        result.message_id = sender_factory(settings).send(payload)
    except DeliveryError as exc:
        logger.error("SES delivery to %s failed: %s", payload.recipient, exc)
        print(f"Email not sent! Error message: {exc}")
        result.error = str(exc)
    # The confirmation line is printed whether or not SES accepted the message.
    print(f"Build broken or recovered. Email sent to {payload.recipient}")
    return result
