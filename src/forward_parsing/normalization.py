"""
Text normalization applied before any matching.

    normalize_body            CRLF → LF, BOM removed, NBSP cleanup
    normalize_original_email  BOM removed, ">" quote markers and the
                              4-space Outlook 2019 indentation stripped
"""
import re2

BYTE_ORDER_MARK = "\ufeff"
NON_BREAKING_SPACE = "\u00a0"

_TRAILING_NON_BREAKING_SPACE = re2.compile("(?m)\u00a0$")            # IONOS by 1 & 1
_QUOTE_LINE_BREAK = re2.compile(r"(?m)^(>+)\s?$")               # Apple Mail, Missive
_QUOTE = re2.compile(r"(?m)^(>+)\s?")                           # Apple Mail
_FOUR_SPACES = re2.compile(r"(?m)^( {4})\s?")                   # Outlook 2019


def normalize_body(body: str) -> str:
    """Normalize a raw email body (line endings, BOM, non-breaking spaces)."""
    text = body.replace("\r\n", "\n")
    text = text.replace(BYTE_ORDER_MARK, "")
    text = _TRAILING_NON_BREAKING_SPACE.sub("", text)
    return text.replace(NON_BREAKING_SPACE, " ")


def normalize_original_email(text: str) -> str:
    """Remove quoting from an embedded email, keeping its line breaks."""
    text = text.replace(BYTE_ORDER_MARK, "")
    text = _QUOTE_LINE_BREAK.sub("", text)
    text = _QUOTE.sub("", text)
    return _FOUR_SPACES.sub("", text)
