"""
Match outcomes — closed set of results returned by the matching engine.

    MatchOutcome = NoMatch | SingleCapture | NamedCapture

SplitResult is the outcome of split-mode matching (or None when nothing matched).
"""
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class NoMatch:
    """No alternative matched."""

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch()


@dataclass(frozen=True)
class SingleCapture:
    """Positional captures of the winning alternative (slot 0 = whole match)."""

    slots: Tuple[Optional[str], ...]
    alternative_index: int = 0
    start: int = 0                                      # Span of the whole match in the text
    end: int = 0

    def __bool__(self) -> bool:
        return True

    @property
    def last(self) -> Optional[str]:
        """Innermost capture, or the whole match when the pattern has no group."""
        return self.slots[-1]

    def slot(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.slots):
            return self.slots[index]
        return None


@dataclass(frozen=True)
class NamedCapture(SingleCapture):
    """Positional captures plus the named slots the alternative declares."""

    names: Mapping[str, Optional[str]] = field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        return self.names.get(name)


MatchOutcome = Union[NoMatch, SingleCapture, NamedCapture]


@dataclass(frozen=True)
class SplitResult:
    """
    Split-mode output, ``arity`` slots per delimiter occurrence.

    Repetition 0 is ``[before, *captures, after]``; every later repetition is
    ``["", *captures, after]`` where ``after`` runs up to the next delimiter
    (or the end of the text). Concatenating all slots of all repetitions, with
    the captures of each delimiter counted once, rebuilds the input text.
    """

    slots: Tuple[str, ...]
    arity: int
    alternative_index: int = 0

    @property
    def repetitions(self) -> int:
        return len(self.slots) // self.arity if self.arity else 0

    @property
    def head(self) -> str:
        return self.slots[0]

    def repetition(self, index: int) -> Tuple[str, ...]:
        start = index * self.arity
        return self.slots[start:start + self.arity]

    def __len__(self) -> int:
        return len(self.slots)
