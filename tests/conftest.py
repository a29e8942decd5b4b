"""
Shared test fixtures for the forward parser test suite.
"""
import pytest

from src.config.catalog import DEFAULT_PATTERN_CATALOG
from src.forward_parsing.compiler import compile_catalog, get_default_catalog
from src.forward_parsing.extractor import ForwardParser
from src.forward_parsing.mailbox import MailboxTokenizer


# ==========================================================================
# Catalog & parser
# ==========================================================================

@pytest.fixture
def catalog():
    return get_default_catalog()


@pytest.fixture
def catalog_data():
    """Deep-ish copy of the built-in catalog, safe to mutate in a test."""
    return {name: [dict(entry) for entry in entries] for name, entries in DEFAULT_PATTERN_CATALOG.items()}


@pytest.fixture
def parser(catalog):
    return ForwardParser(catalog)


@pytest.fixture
def tokenizer(catalog):
    return MailboxTokenizer(catalog)


@pytest.fixture
def compile_fields(catalog_data):
    """Compile a catalog restricted to some fields (others kept as-is)."""
    def _compile(**overrides):
        data = {**catalog_data, **overrides}
        return compile_catalog(data)
    return _compile


# ==========================================================================
# Sample bodies
# ==========================================================================

@pytest.fixture
def gmail_body():
    return (
        "Can you take a look?\n"
        "\n"
        "---------- Forwarded message ---------\n"
        "From: Jane Doe <jane@example.com>\n"
        "Date: Mon, Apr 1, 2024 at 9:30 AM\n"
        "Subject: Quarterly Report\n"
        "To: Alice <alice@x.com>, Bob <bob@x.com>\n"
        "Cc: Carol <carol@x.com>\n"
        "\n"
        "Hello team,\n"
        "the report is attached.\n"
    )


@pytest.fixture
def apple_mail_body():
    return (
        "FYI\n"
        "\n"
        "Begin forwarded message:\n"
        "\n"
        "> From: \"Walter Sheltan\" <walter.sheltan@acme.com>\n"
        "> Subject: Lunch\n"
        "> Date: 1 April 2024 at 12:00:00 CEST\n"
        "> To: \"Bessie Berry\" <bessie.berry@acme.com>\n"
        ">\n"
        "> See you at noon.\n"
    )


@pytest.fixture
def outlook_365_body():
    return (
        "Please handle.\n"
        "\n"
        "________________________________\n"
        "From: Walter Sheltan <walter.sheltan@acme.com>\n"
        "Sent: Monday, April 1, 2024 9:30 AM\n"
        "To: Bessie Berry <bessie.berry@acme.com>; Nicholas <nicholas@globex.corp>\n"
        "Subject: Invoice\n"
        "\n"
        "Invoice attached.\n"
    )


@pytest.fixture
def outlook_2019_body():
    return (
        "See below.\n"
        "\n"
        "-------- Original Message --------\n"
        "On Mon, 1 Apr 2024 at 09:30, \"Walter Sheltan\" <walter.sheltan@acme.com> wrote:\n"
        "\n"
        "Meeting moved to Friday.\n"
    )


@pytest.fixture
def nested_body():
    return (
        "Look at this thread\n"
        "\n"
        "---------- Forwarded message ---------\n"
        "From: Alice <alice@x.com>\n"
        "Subject: Second\n"
        "\n"
        "first message\n"
        "\n"
        "---------- Forwarded message ---------\n"
        "From: Bob <bob@x.com>\n"
        "Subject: First\n"
        "\n"
        "second message\n"
    )
