"""
Unit tests for the parser models and the output schema.
"""
from jsonschema import validate

from src.config.schemas import FORWARD_RESULT_SCHEMA
from src.models.forward_email import ForwardedMessage, Mailbox, OriginalEmail
from src.models.match_outcome import NO_MATCH, NamedCapture, SingleCapture, SplitResult


class TestMatchOutcome:
    def test_truthiness(self):
        assert not NO_MATCH
        assert SingleCapture(slots=("a",))
        assert NamedCapture(slots=("a",), names={"date": "x"})

    def test_named_capture_is_single_capture(self):
        outcome = NamedCapture(slots=("On x", "x"), names={"date": "x"})
        assert isinstance(outcome, SingleCapture)
        assert outcome.get("date") == "x"
        assert outcome.get("from_name") is None

    def test_split_result_repetitions(self):
        result = SplitResult(slots=("a", "|", "b", "", "|", "c"), arity=3)
        assert result.repetitions == 2
        assert result.head == "a"
        assert result.repetition(1) == ("", "|", "c")


class TestOriginalEmail:
    def test_from_alias(self):
        email = OriginalEmail.model_validate({"from": {"address": "a@b.co", "name": "A"}})
        assert email.from_ == Mailbox(address="a@b.co", name="A")

    def test_to_dict_matches_schema(self):
        message = ForwardedMessage(
            forwarded=True,
            message="FYI",
            email=OriginalEmail(
                body="Hello",
                from_=Mailbox(address="jane@example.com", name="Jane Doe"),
                to=[Mailbox(address="alice@x.com", name="Alice")],
                subject="Hi",
            ),
        )
        data = message.to_dict()
        validate(instance=data, schema=FORWARD_RESULT_SCHEMA)
        assert data["email"]["from"] == {"address": "jane@example.com", "name": "Jane Doe"}
        assert data["email"]["cc"] == []
        assert data["email"]["date"] is None

    def test_not_forwarded_matches_schema(self):
        data = ForwardedMessage().to_dict()
        validate(instance=data, schema=FORWARD_RESULT_SCHEMA)
        assert data == {"forwarded": False, "message": None, "email": None}

    def test_missing_from_serialized_as_null(self):
        assert OriginalEmail(body="x").to_dict()["from"] is None
