"""Outbound SMS gateway client. Dispatch is fire-and-forget: failures are logged, never raised."""
import logging
import re
import time
from typing import Optional

import httpx

from app.core.config import settings
from app.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

BD_PHONE_PATTERN = re.compile(r"^(?:\+88|88)?(01[3-9]\d{8})$")


def normalize_bd_phone(phone_number: str) -> str:
    """Validate a Bangladeshi mobile number and return it as 88XXXXXXXXXXX."""
    match = BD_PHONE_PATTERN.match((phone_number or "").strip())
    if not match:
        raise ValidationError("Invalid Bangladesh phone number format", "phone_number")
    return f"88{match.group(1)}"


class SmsGateway:
    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        sender_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_url = api_url if api_url is not None else settings.sms_api_url
        self.api_key = api_key if api_key is not None else settings.sms_api_key
        self.sender_id = sender_id if sender_id is not None else settings.sms_sender_id
        self.timeout = timeout if timeout is not None else settings.sms_timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self.api_url)

    async def send(self, number: str, message: str) -> Optional[str]:
        """Post one message. Returns the gateway message id, or None when not sent."""
        if not self.configured:
            logger.warning("SMS gateway not configured; message to %s not sent", number)
            return None

        payload = {
            "api_token": self.api_key,
            "sid": self.sender_id,
            "msisdn": number,
            "sms": message,
            "csms_id": f"SCHOOL_{int(time.time() * 1000)}",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("SMS dispatch to %s failed: %s", number, exc)
            return None

        try:
            body = response.json()
        except ValueError:
            body = {}
        sms_id = body.get("sms_info_id") if isinstance(body, dict) else None
        logger.info("SMS dispatched to %s id=%s", number, sms_id)
        return sms_id


sms_gateway = SmsGateway()


async def dispatch_sms(number: str, message: str) -> None:
    """BackgroundTasks entry point."""
    await sms_gateway.send(number, message)
