"""
Notification Module

Offer emails for booking invitations. Messages are written as stub files
to an outbox directory rather than delivered.

Usage:
    from notification import EmailStubChannel, OfferMessageBuilder

    message = OfferMessageBuilder.build(job.title, job.start, job.rate, worker_name)
    channel = EmailStubChannel('/tmp/emails')
    path = channel.send('worker@example.com', message.subject, message.body)
"""

from notification.email_stub import EmailStubChannel, write_email_stub
from notification.message_builder import OfferMessage, OfferMessageBuilder

__all__ = [
    'EmailStubChannel',
    'write_email_stub',
    'OfferMessage',
    'OfferMessageBuilder',
]
