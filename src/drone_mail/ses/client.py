from __future__ import annotations

import logging

import boto3
from botocore.exceptions import ClientError, ParamValidationError

from ..notifications.message import Payload

logger = logging.getLogger(__name__)


class DeliveryError(RuntimeError):
    """SES rejected or failed to process a SendEmail request."""


class SesClient:
    def __init__(self, region: str, client=None) -> None:
        self.region = region
        self._client = client or boto3.client("ses", region_name=region)

    def send(self, payload: Payload) -> str:
        if not payload.recipient:
            raise DeliveryError(
                "No recipient: set PLUGIN_RECIPIENT or DRONE_COMMIT_AUTHOR_EMAIL"
            )

        try:
            response = self._client.send_email(**payload.to_send_email_kwargs())
        except (ClientError, ParamValidationError) as exc:
            raise DeliveryError(str(exc)) from exc

        message_id = response.get("MessageId", "")
        logger.info(
            "SES accepted message %s to=%s region=%s",
            message_id,
            payload.recipient,
            self.region,
        )
        return message_id
