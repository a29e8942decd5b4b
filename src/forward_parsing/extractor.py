"""
Extraction Orchestrator — subject, body and original email of a forward.

Every field has a fixed chain of methods, strict first, looser after; the
first non-empty result wins and a field nobody resolves is None / [].
Missing data never raises.

    subject    Fw: / FW: / Fwd: prefix
    body       separator line split, then (confirmed forwards only) original
               From line split
    original   body, from, to, cc, subject, date of the embedded email
"""
import logging
from typing import List, Optional, Sequence

from src.config.constants import (
    BODY_MARKER_FIELDS,
    HEADER_SPLIT_ARITY,
    LAX_STRIP_FIELDS,
    SEPARATOR_SPLIT_ARITY,
)
from src.forward_parsing.compiler import get_default_catalog
from src.forward_parsing.mailbox import MailboxTokenizer
from src.forward_parsing.matcher import match_first, match_split, replace_all
from src.forward_parsing.metrics import record_field_method
from src.forward_parsing.normalization import normalize_body, normalize_original_email
from src.forward_parsing.reconciliation import (
    exclude_delimiter_line,
    exclude_header_value,
    reconcile_split,
)
from src.models.forward_email import ForwardBody, Mailbox, OriginalEmail
from src.models.match_outcome import NamedCapture
from src.models.pattern import CompiledCatalog, CompiledPattern

logger = logging.getLogger(__name__)


def _trim(value: Optional[str]) -> str:
    return (value or "").strip()


class ForwardParser:
    """
    Parses forwarded emails against a compiled pattern catalog.

    The catalog is read-only, so one instance can serve concurrent callers.
    """

    def __init__(self, catalog: Optional[CompiledCatalog] = None):
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.mailboxes = MailboxTokenizer(self.catalog)

    # ==================================================================
    # Subject
    # ==================================================================
    def parse_subject(self, subject: Optional[str]) -> Optional[str]:
        """
        Strip the forward prefix from *subject*.

        Only the first matching prefix is removed ("Fwd: Fwd: x" → "Fwd: x").

        Returns:
            The remaining subject ("" for a bare "Fwd: "), or None if the
            subject has no forward prefix.
        """
        outcome = match_first(self.catalog.get("subject"), subject)
        if outcome and len(outcome.slots) > 1:
            return _trim(outcome.slot(1))
        return None

    # ==================================================================
    # Body
    # ==================================================================
    def parse_body(self, body: str, forwarded: bool = False) -> ForwardBody:
        """
        Split a body into the forwarding user's message and the original email.

        Args:
            body: Raw email body.
            forwarded: The subject confirmed a forward; enables the less
                       certain split on the original From line.

        Returns:
            ForwardBody; ``email`` is empty when no forward was recognized.
        """
        text = normalize_body(body)

        # Separator line (Apple Mail, Gmail, Outlook Live / 365, MailMate, ...)
        reconciled = reconcile_split(
            match_split(self.catalog.line("separator"), text),
            SEPARATOR_SPLIT_ARITY,
            [2],
            exclude_delimiter_line,
        )
        if reconciled is not None:
            message, email = reconciled
            record_field_method("body", "separator")
            return ForwardBody(body=text, message=_trim(message), email=_trim(email))

        # Original From line (New Outlook 2019, Outlook Live / 365); the
        # From line stays with the original email
        if forwarded:
            reconciled = reconcile_split(
                match_split(self.catalog.line("original_from"), text),
                HEADER_SPLIT_ARITY,
                [1, 3],
                exclude_header_value,
            )
            if reconciled is not None:
                message, email = reconciled
                record_field_method("body", "original_from")
                return ForwardBody(body=text, message=_trim(message), email=_trim(email))

        record_field_method("body", "none")
        return ForwardBody(body=text)

    # ==================================================================
    # Original email
    # ==================================================================
    def parse_original_email(self, text: str, body: Optional[str] = None) -> OriginalEmail:
        """
        Reconstruct the embedded email.

        Args:
            text: Embedded email (ForwardBody.email).
            body: Full normalized body (ForwardBody.body), searched for the
                  narrative separator ("On <date>, <name> <<addr>> wrote:").
                  Defaults to *text*.
        """
        text = normalize_original_email(text)
        if body is None:
            body = text

        return OriginalEmail(
            body=self.parse_original_body(text),
            from_=self.parse_original_from(text, body),
            to=self.parse_original_to(text),
            cc=self.parse_original_cc(text),
            subject=self.parse_original_subject(text),
            date=self.parse_original_date(text, body),
        )

    def _split_after_header(self, patterns: Sequence[CompiledPattern], text: str, blank_line: bool) -> Optional[str]:
        result = match_split(patterns, text)
        if result is None or result.arity != HEADER_SPLIT_ARITY:
            return None
        # [before, header line, header value, after]: the body follows a blank line
        if blank_line and not result.slots[3].startswith("\n\n"):
            return None

        reconciled = reconcile_split(result, HEADER_SPLIT_ARITY, [3], exclude_header_value)
        if reconciled is None:
            return None
        return _trim(reconciled[1])

    def parse_original_body(self, text: str) -> str:
        """Text after the last header block line, or *text* if there is none."""
        # Strict: Subject (Outlook Live / 365), Cc, To, Reply-To (Apple Mail,
        # Gmail) or Date (MailMate) line followed by a blank line
        for name in BODY_MARKER_FIELDS:
            found = self._split_after_header(self.catalog.line(name), text, blank_line=True)
            if found is not None:
                record_field_method("original_body", f"{name}_strict")
                return found

        # Lax: same markers, no blank line (New Outlook 2019, Yahoo Mail)
        subject_lines = self.catalog.line("original_subject") + self.catalog.line("original_subject_lax")
        candidates: List[Sequence[CompiledPattern]] = [subject_lines]
        candidates += [self.catalog.line(name) for name in BODY_MARKER_FIELDS if name != "original_subject"]

        for patterns in candidates:
            found = self._split_after_header(patterns, text, blank_line=False)
            if found is not None:
                record_field_method("original_body", f"{patterns[0].field}_lax")
                return found

        # No header at all (Outlook 2019)
        record_field_method("original_body", "raw")
        return text

    def parse_original_from(self, text: str, body: str) -> Optional[Mailbox]:
        """Author: From header, then narrative separator, then lax From."""
        author = self.mailboxes.parse_header(self.catalog.get("original_from"), text)
        if isinstance(author, list):
            author = author[0]
        if author is not None and not author.is_empty:
            record_field_method("from", "header")
            return author

        # Narrative separator (Outlook 2019); named groups since the order of
        # parts depends on the locale
        outcome = match_first(self.catalog.get("separator_with_information"), body)
        if isinstance(outcome, NamedCapture):
            author = self.mailboxes.prepare(outcome.get("from_address"), outcome.get("from_name"))
            if not author.is_empty:
                record_field_method("from", "narrative")
                return author

        # Lax From (Yahoo Mail)
        outcome = match_first(self.catalog.get("original_from_lax"), text)
        if isinstance(outcome, NamedCapture):
            author = self.mailboxes.prepare(outcome.get("from_address"), outcome.get("from_name"))
            if not author.is_empty:
                record_field_method("from", "lax")
                return author

        record_field_method("from", "none")
        return None

    def _strip_lax_fragments(self, target: str, text: str) -> str:
        for name in LAX_STRIP_FIELDS.get(target, []):
            text = replace_all(self.catalog.get(name), text)
        return text

    def _parse_recipients(self, target: str, text: str) -> List[Mailbox]:
        field = f"original_{target}"
        recipients = self.mailboxes.parse_header(self.catalog.get(field), text, force_list=True)
        if recipients:
            record_field_method(target, "header")
            return recipients

        # Subject / Date (/ Cc) glued to the header (Yahoo Mail)
        cleaned = self._strip_lax_fragments(target, text)
        recipients = self.mailboxes.parse_header(self.catalog.get(f"{field}_lax"), cleaned, force_list=True)
        record_field_method(target, "lax" if recipients else "none")
        return recipients

    def parse_original_to(self, text: str) -> List[Mailbox]:
        return self._parse_recipients("to", text)

    def parse_original_cc(self, text: str) -> List[Mailbox]:
        return self._parse_recipients("cc", text)

    def parse_original_subject(self, text: str) -> Optional[str]:
        outcome = match_first(self.catalog.get("original_subject"), text)
        if outcome:
            record_field_method("subject", "header")
            return _trim(outcome.slot(1))

        outcome = match_first(self.catalog.get("original_subject_lax"), text)
        if outcome:
            record_field_method("subject", "lax")
            return _trim(outcome.slot(1))

        record_field_method("subject", "none")
        return None

    def parse_original_date(self, text: str, body: str) -> Optional[str]:
        """Date: Date header, then narrative separator, then lax Date."""
        outcome = match_first(self.catalog.get("original_date"), text)
        if outcome:
            record_field_method("date", "header")
            return _trim(outcome.slot(1))

        outcome = match_first(self.catalog.get("separator_with_information"), body)
        if isinstance(outcome, NamedCapture) and _trim(outcome.get("date")):
            record_field_method("date", "narrative")
            return _trim(outcome.get("date"))

        outcome = match_first(self.catalog.get("original_date_lax"), self._strip_lax_fragments("date", text))
        if outcome:
            record_field_method("date", "lax")
            return _trim(outcome.slot(1))

        record_field_method("date", "none")
        return None
