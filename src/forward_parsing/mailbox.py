"""
Mailbox Tokenizer — splits a From / To / Cc line into Mailbox entries.

A line may hold several entries ("Alice <a@x.com>, 'Bob' <b@x.com>; c@x.com").
Each iteration matches the line against the ordered mailbox shapes, emits one
Mailbox, removes the matched span and one leading "," or ";". When no shape
matches, the whole remainder becomes the last entry. The remaining line
strictly shrinks on every iteration, so the loop ends after at most
``len(line)`` iterations.
"""
import logging
from typing import List, Optional, Sequence, Union

from src.config.constants import MAILBOX_SEPARATORS
from src.forward_parsing.matcher import match_first
from src.models.forward_email import Mailbox
from src.models.match_outcome import NamedCapture, SingleCapture
from src.models.pattern import CompiledCatalog, CompiledPattern

logger = logging.getLogger(__name__)


def _trim(value: Optional[str]) -> str:
    return (value or "").strip()


class MailboxTokenizer:
    """Mailbox parsing against the catalog's ``mailbox`` / ``mailbox_address`` fields."""

    def __init__(self, catalog: CompiledCatalog):
        self.shapes = catalog.get("mailbox")
        self.address_shapes = catalog.get("mailbox_address")

    # ------------------------------------------------------------------
    # Single entry
    # ------------------------------------------------------------------
    def is_address(self, value: Optional[str]) -> bool:
        return bool(value) and bool(match_first(self.address_shapes, value))

    def prepare(self, address: Optional[str], name: Optional[str]) -> Mailbox:
        """
        Build a Mailbox from raw captures.

        An address token that is not address-shaped is a display name
        (some clients only include the name).
        """
        address = _trim(address)
        name = _trim(name)

        if not self.is_address(address):
            if address:
                name = address
            address = ""

        return Mailbox(address=address or None, name=name or None)

    @staticmethod
    def _captured_parts(outcome: SingleCapture):
        if isinstance(outcome, NamedCapture):
            return outcome.get("address"), outcome.get("name")
        # Positional shapes: (whole, name, address) or (whole, address)
        if len(outcome.slots) >= 3:
            return outcome.slots[2], outcome.slots[1]
        return outcome.last, None

    # ------------------------------------------------------------------
    # Whole line
    # ------------------------------------------------------------------
    def tokenize(self, line: Optional[str]) -> List[Mailbox]:
        """Split a mailboxes line into Mailbox entries, in order."""
        remaining = _trim(line)
        mailboxes: List[Mailbox] = []

        while remaining:
            outcome = match_first(self.shapes, remaining)

            if not outcome or outcome.end <= outcome.start:
                mailboxes.append(self.prepare(remaining, None))
                break

            address, name = self._captured_parts(outcome)
            mailboxes.append(self.prepare(address, name))

            remaining = _trim(remaining[:outcome.start] + remaining[outcome.end:])
            if remaining and remaining[0] in MAILBOX_SEPARATORS:
                remaining = _trim(remaining[1:])

        return mailboxes

    def parse_header(
        self,
        header_patterns: Sequence[CompiledPattern],
        text: Optional[str],
        force_list: bool = False,
    ) -> Union[None, Mailbox, List[Mailbox]]:
        """
        Find a header line with *header_patterns* and tokenize its value.

        The mailboxes line is the innermost capture of the matching
        alternative.

        Returns:
            A list when several mailboxes are found or *force_list* is set,
            a single Mailbox otherwise; None / [] when nothing was found.
        """
        outcome = match_first(header_patterns, text)
        mailboxes = self.tokenize(outcome.last) if outcome else []

        if len(mailboxes) > 1 or force_list:
            return mailboxes
        return mailboxes[0] if mailboxes else None
