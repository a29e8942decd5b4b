"""
Forward Reader — main entry point of the forward parser.

Flow:
    1. Subject: forward prefix (Fw: / FW: / Fwd:) → forwarded flag
    2. Body: split into the user's message and the embedded email
    3. Original email: body, from, to, cc, subject, date

The subject parsed from the outer subject line takes precedence over the
Subject header of the embedded email.
"""
import logging
from typing import Optional

from src.config.settings import MAX_BODY_LOG_CHARS
from src.forward_parsing.extractor import ForwardParser
from src.forward_parsing.metrics import record_parse_outcome, timed_stage
from src.models.forward_email import ForwardedMessage

logger = logging.getLogger(__name__)

_default_parser: Optional[ForwardParser] = None


def get_default_parser() -> ForwardParser:
    """Module-level parser sharing the process-wide compiled catalog."""
    global _default_parser
    if _default_parser is None:
        _default_parser = ForwardParser()
    return _default_parser


def read_forwarded_email(
    body: str,
    subject: Optional[str] = None,
    parser: Optional[ForwardParser] = None,
) -> ForwardedMessage:
    """
    Read an email body (and optionally its subject) as a possible forward.

    Args:
        body: Raw plain-text body.
        subject: Raw subject line, used to confirm a forward.
        parser: ForwardParser to use. Defaults to the module-level parser.

    Returns:
        ForwardedMessage. ``email`` is None when no embedded email was found.

    Raises:
        TypeError: If *body* or *subject* is not a string.
    """
    if not isinstance(body, str):
        raise TypeError(f"body must be a string, got {type(body).__name__}")
    if subject is not None and not isinstance(subject, str):
        raise TypeError(f"subject must be a string, got {type(subject).__name__}")

    if parser is None:
        parser = get_default_parser()

    with timed_stage("read"):
        parsed_subject = parser.parse_subject(subject)
        forwarded = parsed_subject is not None

        with timed_stage("body"):
            parsed_body = parser.parse_body(body, forwarded)

        email = None
        if parsed_body.email:
            forwarded = True
            with timed_stage("original_email"):
                email = parser.parse_original_email(parsed_body.email, parsed_body.body)
            if parsed_subject:
                email.subject = parsed_subject

    logger.debug(
        "Read email (forwarded=%s, embedded=%s): %r",
        forwarded,
        email is not None,
        body[:MAX_BODY_LOG_CHARS],
    )
    record_parse_outcome(forwarded)

    return ForwardedMessage(
        forwarded=forwarded,
        message=parsed_body.message or None,
        email=email,
    )
