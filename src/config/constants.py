"""
Constants used across the forward parser.
Versioned and pinned for determinism.
"""
from typing import Dict, List

# =============================================================================
# Versions
# =============================================================================
PARSER_VERSION: str = "forward-parser-1.4.0"
CATALOG_VERSION: str = "forward-catalog-2025.3"

# =============================================================================
# Catalog fields
# =============================================================================
# Fields the extractor reads; a catalog missing one of them cannot be compiled.
REQUIRED_FIELDS: List[str] = [
    "subject",
    "separator",
    "separator_with_information",
    "original_subject",
    "original_subject_lax",
    "original_from",
    "original_from_lax",
    "original_to",
    "original_to_lax",
    "original_reply_to",
    "original_cc",
    "original_cc_lax",
    "original_date",
    "original_date_lax",
    "mailbox",
    "mailbox_address",
]

# Fields that also get a line-capturing variant (whole matched line as group 1).
LINE_FIELDS: List[str] = [
    "separator",
    "original_subject",
    "original_subject_lax",
    "original_from",
    "original_from_lax",
    "original_to",
    "original_to_lax",
    "original_reply_to",
    "original_cc",
    "original_cc_lax",
    "original_date",
    "original_date_lax",
]

# Named capture slots an alternative may declare.
CAPTURE_SLOTS: List[str] = ["date", "from_name", "from_address", "name", "address"]

ALLOWED_FLAGS: str = "ims"

# =============================================================================
# Split arities
# =============================================================================
# [before, separator line, after]
SEPARATOR_SPLIT_ARITY: int = 3
# [before, header line, header value, after]
HEADER_SPLIT_ARITY: int = 4

# =============================================================================
# Mailboxes
# =============================================================================
MAILBOX_SEPARATORS: List[str] = [
    ",",  # Apple Mail, Gmail, New Outlook 2019, Thunderbird
    ";",  # Outlook Live / 365, Yahoo Mail
]

# =============================================================================
# Original body markers
# =============================================================================
# Header lines after which the original body starts, tried in this order.
BODY_MARKER_FIELDS: List[str] = [
    "original_subject",
    "original_cc",
    "original_to",
    "original_reply_to",
    "original_date",
]

# =============================================================================
# Lax fallbacks
# =============================================================================
# Some clients (Yahoo Mail) glue Subject / Date / Cc to the neighbouring
# header without a line break. These fragments are removed, in order, before
# the lax pattern of the target field is tried.
LAX_STRIP_FIELDS: Dict[str, List[str]] = {
    "to": ["original_subject_lax", "original_date_lax", "original_cc_lax"],
    "cc": ["original_subject_lax", "original_date_lax"],
    "date": ["original_subject_lax"],
}
