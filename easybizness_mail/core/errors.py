"""Error taxonomy for the mail service.

ValidationError is a client fault and maps to HTTP 400. DeliveryError wraps
whatever the mail transport raised; callers only ever see a generic 500.
"""


class MailServiceError(Exception):
    """Base class for errors raised by the mail service."""


class ValidationError(MailServiceError):
    """A required field of the notification request is missing or empty."""


class DeliveryError(MailServiceError):
    """The transport failed to hand the message to the SMTP provider."""
