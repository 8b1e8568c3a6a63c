#!/usr/bin/env python3
"""
Email stub channel.

Offer emails are not delivered; each message is written as a plain-text
file into an outbox directory so it can be inspected during development.

File layout:
    To: <recipient>
    Subject: <subject>

    <body>
"""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

MAX_SUBJECT_SLUG_LENGTH = 50


def _subject_slug(subject: str) -> str:
    slug = re.sub(r'[^a-zA-Z0-9\-]+', '_', subject)[:MAX_SUBJECT_SLUG_LENGTH]
    return slug or "message"


def _timestamp_slug(now: datetime) -> str:
    iso = now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"
    return re.sub(r'[:.]', '-', iso)


def write_email_stub(
    to: str,
    subject: str,
    body: str,
    outbox_dir: Union[str, Path],
    now: Optional[datetime] = None
) -> Path:
    """
    Write a single email stub file.

    Args:
        to: Recipient address
        subject: Subject line (also used, sanitised, in the file name)
        body: Message body
        outbox_dir: Directory to write into (created if missing)
        now: Timestamp for the file name (defaults to current UTC time)

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory or file cannot be written
    """
    outbox = Path(outbox_dir)
    outbox.mkdir(parents=True, exist_ok=True)

    now = now or datetime.now(timezone.utc)
    file_path = outbox / f"{_timestamp_slug(now)}-{_subject_slug(subject)}.txt"

    content = "\n".join([f"To: {to}", f"Subject: {subject}", "", body])
    file_path.write_text(content, encoding='utf-8')

    logger.debug(f"Email stub written to {file_path}")
    return file_path


class EmailStubChannel:
    """Channel that records outgoing emails as stub files."""

    def __init__(self, outbox_dir: Union[str, Path]):
        self.outbox_dir = Path(outbox_dir)

    def send(self, recipient: str, subject: str, body: str) -> Path:
        return write_email_stub(recipient, subject, body, self.outbox_dir)
