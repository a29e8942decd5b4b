"""
Typed Pydantic models for the forward parser output contracts.

    Mailbox           — display name + address pair
    ForwardBody       — user-authored message vs. embedded original email
    OriginalEmail     — reconstructed forwarded message
    ForwardedMessage  — top-level result of read_forwarded_email()
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Mailbox(BaseModel):
    """
    A mailbox found in a From / To / Cc line.

    Some clients repeat the address as the display name
    ("bessie.berry@acme.com <bessie.berry@acme.com>"); the name is dropped in
    that case.
    """

    model_config = ConfigDict(frozen=True)

    address: Optional[str] = Field(None, description="Validated address, None if the token was not address-shaped.")
    name: Optional[str] = Field(None, description="Display name, None if absent or identical to the address.")

    @model_validator(mode="before")
    @classmethod
    def collapse_name(cls, data):
        if isinstance(data, dict) and data.get("name") is not None and data.get("name") == data.get("address"):
            data = {**data, "name": None}
        return data

    @property
    def is_empty(self) -> bool:
        return not self.address and not self.name

    def to_dict(self) -> dict:
        return {"address": self.address, "name": self.name}


class ForwardBody(BaseModel):
    """Normalized body split at the first separator (or original From line)."""

    body: str = Field(..., description="Normalized full body, used to look for narrative separators.")
    message: str = Field("", description="Text written by the forwarding user, before the separator.")
    email: str = Field("", description="Embedded original email, nested forwards reconciled.")


class OriginalEmail(BaseModel):
    """The forwarded message, reconstructed from its embedded headers."""

    model_config = ConfigDict(populate_by_name=True)

    body: str = ""
    from_: Optional[Mailbox] = Field(None, alias="from")
    to: List[Mailbox] = Field(default_factory=list)
    cc: List[Mailbox] = Field(default_factory=list)
    subject: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "body": self.body,
            "from": self.from_.to_dict() if self.from_ is not None else None,
            "to": [m.to_dict() for m in self.to],
            "cc": [m.to_dict() for m in self.cc],
            "subject": self.subject,
            "date": self.date,
        }


class ForwardedMessage(BaseModel):
    """Result of reading an email: forward flag, user message, original email."""

    forwarded: bool = False
    message: Optional[str] = None
    email: Optional[OriginalEmail] = None

    def to_dict(self) -> dict:
        return {
            "forwarded": self.forwarded,
            "message": self.message,
            "email": self.email.to_dict() if self.email is not None else None,
        }
