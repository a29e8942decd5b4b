"""
JSON Schemas for the pattern catalog and the parser output.

Two schemas:
1. PATTERN_CATALOG_SCHEMA — shape of a catalog (built-in or loaded from file)
2. FORWARD_RESULT_SCHEMA  — JSON form of ForwardedMessage.to_dict()
"""
from src.config.constants import ALLOWED_FLAGS, CAPTURE_SLOTS, REQUIRED_FIELDS

# =============================================================================
# 1. Pattern catalog
# =============================================================================
PATTERN_ALTERNATIVE_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["pattern"],
    "properties": {
        "pattern": {
            "type": "string",
            "minLength": 1,
            "description": "RE2 source, without inline flags",
        },
        "flags": {
            "type": "string",
            "pattern": f"^[{ALLOWED_FLAGS}]*$",
            "description": "i = ignore case, m = multiline, s = dot matches newline",
        },
        "client": {
            "type": "string",
            "description": "Mail clients / locales producing this shape (documentation only)",
        },
        "captures": {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "string", "enum": CAPTURE_SLOTS},
            "description": "Named capture slots declared by the pattern",
        },
    },
}

PATTERN_CATALOG_SCHEMA: dict = {
    "type": "object",
    "required": REQUIRED_FIELDS,
    "additionalProperties": {
        "type": "array",
        "minItems": 1,
        "items": PATTERN_ALTERNATIVE_SCHEMA,
    },
}

# =============================================================================
# 2. Parser output
# =============================================================================
_NULLABLE_STRING: dict = {"type": ["string", "null"]}

MAILBOX_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["address", "name"],
    "properties": {
        "address": _NULLABLE_STRING,
        "name": _NULLABLE_STRING,
    },
}

FORWARD_RESULT_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["forwarded", "message", "email"],
    "properties": {
        "forwarded": {"type": "boolean"},
        "message": _NULLABLE_STRING,
        "email": {
            "oneOf": [
                {"type": "null"},
                {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["body", "from", "to", "cc", "subject", "date"],
                    "properties": {
                        "body": {"type": "string"},
                        "from": {"oneOf": [{"type": "null"}, MAILBOX_SCHEMA]},
                        "to": {"type": "array", "items": MAILBOX_SCHEMA},
                        "cc": {"type": "array", "items": MAILBOX_SCHEMA},
                        "subject": _NULLABLE_STRING,
                        "date": _NULLABLE_STRING,
                    },
                },
            ],
        },
    },
}
