from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel

GENERIC_GREETING_NAME = "there"


class OfferMessage(BaseModel):
    subject: str
    body: str


def format_utc(value: datetime) -> str:
    """RFC 1123 style UTC timestamp, e.g. 'Thu, 01 Feb 2024 12:00:00 GMT'."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime('%a, %d %b %Y %H:%M:%S GMT')


def format_rate(rate: float) -> str:
    """Whole rates print without decimals, others in full, e.g. '$25/hr', '$12.345678/hr'."""
    if float(rate).is_integer():
        return f"${int(rate)}/hr"
    return f"${rate!r}/hr"


class OfferMessageBuilder:
    @staticmethod
    def build(job_title: str, job_start: datetime, rate: float, worker_name: Optional[str]) -> OfferMessage:
        """Build the invitation email for a booking offer."""
        name = worker_name or GENERIC_GREETING_NAME
        body = (
            f"Hi {name},\n\n"
            f"You're invited to work {job_title} on {format_utc(job_start)}.\n"
            f"Rate: {format_rate(rate)}. Log in to your dashboard to accept or decline."
        )
        return OfferMessage(subject=f"Offer: {job_title}", body=body)
