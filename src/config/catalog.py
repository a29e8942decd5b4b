"""
Default pattern catalog — client / locale conventions for forwarded emails.

Each field maps to an ordered list of alternatives. Order matters: the first
alternative that matches wins, so alternatives go from most to least specific.

Entry shape:
    {
        "pattern":  RE2 source (no inline flags),
        "flags":    subset of "ims",
        "client":   mail clients / locales producing this shape,
        "captures": named capture slots declared by the pattern (optional),
    }

Patterns use RE2 syntax only (no backreferences, no lookaround) so that
matching stays linear in the length of the input.
"""
from typing import Dict, List

from src.config.constants import CATALOG_VERSION

__all__ = ["CATALOG_VERSION", "DEFAULT_PATTERN_CATALOG"]


# Named groups for the narrative separators ("On <date>, <name> <<address>> wrote:")
_DATE = r"(?P<date>.+)"
_NAME = r"(?P<from_name>.+)"
_ADDRESS = r"(?P<from_address>.+)"
_NARRATIVE_CAPTURES = ["date", "from_name", "from_address"]


def _narrative(pattern: str, client: str) -> dict:
    return {
        "pattern": pattern.format(date=_DATE, name=_NAME, address=_ADDRESS),
        "flags": "m",
        "client": client,
        "captures": list(_NARRATIVE_CAPTURES),
    }


DEFAULT_PATTERN_CATALOG: Dict[str, List[dict]] = {
    # =========================================================================
    # Subject prefixes
    # =========================================================================
    "subject": [
        {
            "pattern": r"^Fw:(.*)",
            "flags": "m",
            "client": "Outlook Live / 365 (cs, en, hr, hu, sk), Yahoo Mail (all locales)",
        },
        {
            "pattern": r"^FW:(.*)",
            "flags": "m",
            "client": "Outlook Live / 365 (nl, pt), New Outlook 2019, Outlook 2019 (all locales)",
        },
        {
            "pattern": r"^Fwd:(.*)",
            "flags": "m",
            "client": "Gmail, Thunderbird (all locales), Missive, MailMate",
        },
    ],

    # =========================================================================
    # Separators
    # =========================================================================
    "separator": [
        {
            "pattern": r"^>?\s*Begin forwarded message\s?:",
            "flags": "m",
            "client": "Apple Mail (en)",
        },
        {
            "pattern": r"^\s*-{8,10}\s*Forwarded message\s*-{8,10}\s*",
            "flags": "m",
            "client": "Gmail (all locales), Missive (en), HubSpot (en)",
        },
        {
            "pattern": r"^\s*_{32}\s*$",
            "flags": "m",
            "client": "Outlook Live / 365 (all locales)",
        },
        {
            "pattern": r"^\s?Forwarded message:",
            "flags": "m",
            "client": "MailMate",
        },
        {
            "pattern": r"^>?\s*-{6,10} Original Message -{6,10}\s*",
            "flags": "m",
            "client": "Outlook 2019 / Exchange (en)",
        },
    ],

    "separator_with_information": [
        _narrative(r"^\s?Dne\s?{date},\s?{name}\s*[\[|<]{address}[\]|>]\s?napsal\(a\)\s?:", "Outlook 2019 (cz)"),
        _narrative(r'^\s?D.\s?{date}\s?skrev\s?"{name}"\s*[\[|<]{address}[\]|>]\s?:', "Outlook 2019 (da)"),
        _narrative(r'^\s?Am\s?{date}\s?schrieb\s?"{name}"\s*[\[|<]{address}[\]|>]\s?:', "Outlook 2019 (de)"),
        _narrative(r'^\s?On\s?{date},\s?"{name}"\s*[\[|<]{address}[\]|>]\s?wrote\s?:', "Outlook 2019 (en)"),
        _narrative(r'^\s?El\s?{date},\s?"{name}"\s*[\[|<]{address}[\]|>]\s?escribió\s?:', "Outlook 2019 (es)"),
        _narrative(r"^\s?Le\s?{date},\s?«{name}»\s*[\[|<]{address}[\]|>]\s?a écrit\s?:", "Outlook 2019 (fr)"),
        _narrative(r"^\s?{name}\s*[\[|<]{address}[\]|>]\s?kirjoitti\s?{date}\s?:", "Outlook 2019 (fi)"),
        _narrative(r"^\s?{date}\s?időpontban\s?{name}\s*[\[|<|(]{address}[\]|>|)]\s?ezt írta\s?:", "Outlook 2019 (hu)"),
        _narrative(r'^\s?Il giorno\s?{date}\s?"{name}"\s*[\[|<]{address}[\]|>]\s?ha scritto\s?:', "Outlook 2019 (it)"),
        _narrative(r"^\s?Op\s?{date}\s?heeft\s?{name}\s*[\[|<]{address}[\]|>]\s?geschreven\s?:", "Outlook 2019 (nl)"),
        _narrative(r"^\s?{name}\s*[\[|<]{address}[\]|>]\s?skrev følgende den\s?{date}\s?:", "Outlook 2019 (no)"),
        _narrative(r"^\s?Dnia\s?{date}\s?„{name}”\s*[\[|<]{address}[\]|>]\s?napisał\s?:", "Outlook 2019 (pl)"),
        _narrative(r'^\s?Em\s?{date},\s?"{name}"\s*[\[|<]{address}[\]|>]\s?escreveu\s?:', "Outlook 2019 (pt)"),
        _narrative(r'^\s?{date}\s?пользователь\s?"{name}"\s*[\[|<]{address}[\]|>]\s?написал\s?:', "Outlook 2019 (ru)"),
        _narrative(r"^\s?{date}\s?používateľ\s?{name}\s*\([\[|<]{address}[\]|>]\)\s?napísal\s?:", "Outlook 2019 (sk)"),
        _narrative(r'^\s?Den\s?{date}\s?skrev\s?"{name}"\s*[\[|<]{address}[\]|>]\s?följande\s?:', "Outlook 2019 (sv)"),
        _narrative(r'^\s?"{name}"\s*[\[|<]{address}[\]|>],\s?{date}\s?tarihinde şunu yazdı\s?:', "Outlook 2019 (tr)"),
    ],

    # =========================================================================
    # Original headers
    # =========================================================================
    "original_subject": [
        {
            "pattern": r"^\*?Subject\s?:\*?(.+)",
            "flags": "im",
            "client": "Apple Mail, Gmail, Outlook Live / 365, New Outlook 2019 (en), Thunderbird, Missive, HubSpot",
        },
    ],

    "original_subject_lax": [
        {
            "pattern": r"Subject\s?:(.+)",
            "flags": "i",
            "client": "Yahoo Mail (en)",
        },
    ],

    "original_from": [
        {
            "pattern": r"^\*?\s*From\s?:\*?(.+)$",
            "flags": "m",
            "client": "Apple Mail, Outlook Live / 365, New Outlook 2019 (en), Thunderbird, Missive, HubSpot",
        },
    ],

    "original_from_lax": [
        {
            "pattern": r"\s*From\s?:(?P<from_name>.+?)\s?\n?\s*[\[|<](?P<from_address>.+?)[\]|>]",
            "flags": "",
            "client": "Yahoo Mail (en)",
            "captures": ["from_name", "from_address"],
        },
    ],

    "original_to": [
        {
            "pattern": r"^\*?\s*To\s?:\*?(.+)$",
            "flags": "m",
            "client": "Apple Mail, Gmail, Outlook Live / 365, Thunderbird, Missive, HubSpot",
        },
        {
            "pattern": r"^To:\s*<(.+)>$",
            "flags": "m",
            "client": "Thunderbird (en)",
        },
    ],

    "original_to_lax": [
        {
            "pattern": r"\s*To\s?:(.+)$",
            "flags": "m",
            "client": "Yahoo Mail (en)",
        },
        {
            "pattern": r"^To:\s*<(.+)>$",
            "flags": "m",
            "client": "Thunderbird (en)",
        },
    ],

    "original_reply_to": [
        {
            "pattern": r"^\s*Reply-To\s?:(.+)$",
            "flags": "m",
            "client": "Apple Mail (en)",
        },
    ],

    "original_cc": [
        {
            "pattern": r"^\*?\s*Cc\s?:\*?(.+)$",
            "flags": "m",
            "client": "Apple Mail, Gmail, Outlook Live / 365, New Outlook 2019, Missive, HubSpot",
        },
        {
            "pattern": r"^\s*CC\s?:(.+)$",
            "flags": "m",
            "client": "New Outlook 2019 (es, nl, pt), Thunderbird",
        },
        {
            "pattern": r"^\s*CC：(.+)$",
            "flags": "m",
            "client": "HubSpot (ja)",
        },
    ],

    "original_cc_lax": [
        {
            "pattern": r"\s*Cc\s?:(.+)$",
            "flags": "m",
            "client": "Yahoo Mail (da, en, it, nl, pt, pt-br, ro, tr)",
        },
        {
            "pattern": r"\s*CC\s?:(.+)$",
            "flags": "m",
            "client": "Yahoo Mail (de, es)",
        },
    ],

    "original_date": [
        {
            "pattern": r"^\s*Date\s?:(.+)$",
            "flags": "m",
            "client": "Apple Mail, Gmail, New Outlook 2019, Thunderbird, Missive, HubSpot",
        },
        {
            "pattern": r"^Date:\s*(.+)$",
            "flags": "m",
            "client": "Thunderbird (en)",
        },
    ],

    "original_date_lax": [
        {
            "pattern": r"\s*Datum\s?:(.+)$",
            "flags": "m",
            "client": "Yahoo Mail (cs)",
        },
        {
            "pattern": r"^Date:\s*(.+)$",
            "flags": "m",
            "client": "Thunderbird (en)",
        },
    ],

    # =========================================================================
    # Mailboxes
    # =========================================================================
    "mailbox": [
        {
            # "<walter.sheltan@acme.com<mailto:walter.sheltan@acme.com>>"
            "pattern": r"^\s?\n?\s*<.+?<mailto:(?P<address>.+?)>>",
            "flags": "",
            "client": "Outlook 2019",
            "captures": ["address"],
        },
        {
            # "Walter Sheltan <walter.sheltan@acme.com<mailto:walter.sheltan@acme.com>>"
            "pattern": r"^(?P<name>.+?)\s?\n?\s*<.+?<mailto:(?P<address>.+?)>>",
            "flags": "",
            "client": "Outlook 2019",
            "captures": ["name", "address"],
        },
        {
            # "Walter Sheltan <mailto:walter.sheltan@acme.com>" or "[mailto:...]"
            "pattern": r"^(?P<name>.+?)\s?\n?\s*[\[|<]mailto:(?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Outlook 2019",
            "captures": ["name", "address"],
        },
        {
            # "'Walter Sheltan' <walter.sheltan@acme.com>"
            "pattern": r"^'(?P<name>.+?)'\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Outlook Live / 365",
            "captures": ["name", "address"],
        },
        {
            # "\"'Walter Sheltan'\" <walter.sheltan@acme.com>"
            "pattern": r"^\"'(?P<name>.+?)'\"\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Outlook Live / 365",
            "captures": ["name", "address"],
        },
        {
            # "\"Walter Sheltan\" <walter.sheltan@acme.com>"
            "pattern": r"^\"(?P<name>.+?)\"\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Gmail, Thunderbird",
            "captures": ["name", "address"],
        },
        {
            # "Walter Sheltan <walter.sheltan@acme.com>"
            "pattern": r"^(?P<name>[^,;]+?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Apple Mail, Gmail, Thunderbird",
            "captures": ["name", "address"],
        },
        {
            # "<walter.sheltan@acme.com>"
            "pattern": r"^(?P<name>.?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Thunderbird",
            "captures": ["name", "address"],
        },
        {
            # "walter.sheltan@acme.com"
            "pattern": r"^(?P<address>[^\s@]+@[^\s@]+\.[^\s@,;]+)",
            "flags": "",
            "client": "Outlook Live / 365, Yahoo Mail",
            "captures": ["address"],
        },
        {
            # "Walter, Sheltan <walter.sheltan@acme.com>"
            "pattern": r"^(?P<name>[^;].+?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            "flags": "",
            "client": "Outlook 2019",
            "captures": ["name", "address"],
        },
    ],

    "mailbox_address": [
        {
            "pattern": r"^([^\s@]+)@([^\s@]+)\.([^\s@]+)$",
            "flags": "",
            "client": "any",
        },
    ],
}
