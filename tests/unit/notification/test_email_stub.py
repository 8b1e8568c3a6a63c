#!/usr/bin/env python3
"""
Tests for the email stub channel and offer messages.

Usage:
    uv run python -m pytest tests/unit/notification -v
"""

import os
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

from notification import EmailStubChannel, OfferMessageBuilder, write_email_stub
from notification.message_builder import format_rate, format_utc


class TestWriteEmailStub(unittest.TestCase):
    """Test stub file naming and content."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.outbox = Path(self.temp_dir.name) / "outbox"
        self.now = datetime(2024, 2, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_file_name_and_content(self):
        path = write_email_stub(
            "alex@example.com", "Offer: Concert ushers", "Hi Alex", self.outbox, now=self.now
        )

        self.assertEqual(path.parent, self.outbox)
        self.assertEqual(path.name, "2024-02-01T12-30-05-123Z-Offer_Concert_ushers.txt")
        self.assertEqual(
            path.read_text(encoding='utf-8'),
            "To: alex@example.com\nSubject: Offer: Concert ushers\n\nHi Alex",
        )

    def test_subject_slug_truncated(self):
        path = write_email_stub("a@b.test", "x" * 80, "body", self.outbox, now=self.now)
        self.assertTrue(path.name.endswith("-" + "x" * 50 + ".txt"))

    def test_empty_subject(self):
        path = write_email_stub("a@b.test", "", "body", self.outbox, now=self.now)
        self.assertTrue(path.name.endswith("-message.txt"))

    def test_hyphens_kept(self):
        path = write_email_stub("a@b.test", "Front-of-house / bar", "body", self.outbox, now=self.now)
        self.assertTrue(path.name.endswith("-Front-of-house_bar.txt"))

    def test_unwritable_outbox_raises(self):
        blocker = Path(self.temp_dir.name) / "file"
        blocker.write_text("not a directory")

        with self.assertRaises(OSError):
            write_email_stub("a@b.test", "subject", "body", blocker / "outbox", now=self.now)

    def test_channel_send(self):
        channel = EmailStubChannel(str(self.outbox))

        path = channel.send("alex@example.com", "Hello", "Body text")

        self.assertTrue(path.exists())
        self.assertIn("To: alex@example.com", path.read_text(encoding='utf-8'))
        self.assertEqual(len(os.listdir(self.outbox)), 1)

    def test_channel_defaults_to_current_time(self):
        with patch("notification.email_stub.datetime") as mock_datetime:
            mock_datetime.now.return_value = self.now
            path = EmailStubChannel(self.outbox).send("a@b.test", "Hi", "body")

        self.assertTrue(path.name.startswith("2024-02-01T12-30-05-123Z"))


class TestOfferMessageBuilder(unittest.TestCase):
    """Test offer message rendering."""

    def test_build(self):
        message = OfferMessageBuilder.build(
            job_title="Concert ushers",
            job_start=datetime(2024, 2, 1, 12, 0, tzinfo=timezone.utc),
            rate=25.0,
            worker_name="Alex",
        )

        self.assertEqual(message.subject, "Offer: Concert ushers")
        self.assertEqual(
            message.body,
            "Hi Alex,\n\n"
            "You're invited to work Concert ushers on Thu, 01 Feb 2024 12:00:00 GMT.\n"
            "Rate: $25/hr. Log in to your dashboard to accept or decline.",
        )

    def test_unknown_worker_name(self):
        message = OfferMessageBuilder.build("Gate crew", datetime(2024, 2, 1, 12), 18.5, None)

        self.assertTrue(message.body.startswith("Hi there,"))
        self.assertIn("Rate: $18.5/hr.", message.body)

    def test_format_utc_converts_offsets(self):
        start = datetime(2024, 2, 1, 7, 0, tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(format_utc(start), "Thu, 01 Feb 2024 12:00:00 GMT")

    def test_format_utc_naive_is_utc(self):
        self.assertEqual(format_utc(datetime(2024, 2, 1, 12)), "Thu, 01 Feb 2024 12:00:00 GMT")

    def test_format_rate(self):
        self.assertEqual(format_rate(30), "$30/hr")
        self.assertEqual(format_rate(22.75), "$22.75/hr")

    def test_format_rate_keeps_full_precision(self):
        self.assertEqual(format_rate(12.345678), "$12.345678/hr")
        self.assertEqual(format_rate(1234567.0), "$1234567/hr")


if __name__ == '__main__':
    unittest.main()
