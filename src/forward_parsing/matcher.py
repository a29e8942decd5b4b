"""
Alternative-Matching Engine — ordered alternatives over RE2 patterns.

Three modes:
    first        first alternative (declared order) matching anywhere
    split        partition the text around the first delimiter and every
                 nested delimiter after it (nested forwards)
    replace_all  remove every match of every alternative

Alternatives are always tried strictly in declared order; the first one that
matches wins even if a later one would capture more.
"""
import logging
from typing import List, Literal, Optional, Sequence, Union

from src.models.match_outcome import (
    NO_MATCH,
    MatchOutcome,
    NamedCapture,
    SingleCapture,
    SplitResult,
)
from src.models.pattern import CompiledPattern

logger = logging.getLogger(__name__)

MatchMode = Literal["first", "split", "replace_all"]


def match_first(alternatives: Sequence[CompiledPattern], text: Optional[str]) -> MatchOutcome:
    """
    Return the captures of the first alternative matching *text*.

    Returns:
        NamedCapture when the alternative declares named slots,
        SingleCapture otherwise, NO_MATCH if nothing matched.
    """
    if not text:
        return NO_MATCH

    for pattern in alternatives:
        m = pattern.regex.search(text)
        if m is None:
            continue

        logger.debug("Matched %r", pattern)
        slots = (m.group(0),) + tuple(m.groups())

        if pattern.captures:
            groups = m.groupdict()
            return NamedCapture(
                slots=slots,
                alternative_index=pattern.index,
                start=m.start(),
                end=m.end(),
                names={name: groups.get(name) for name in pattern.captures},
            )
        return SingleCapture(slots=slots, alternative_index=pattern.index, start=m.start(), end=m.end())

    return NO_MATCH


def _occurrences(pattern: CompiledPattern, text: str) -> List:
    return [m for m in pattern.regex.finditer(text) if m.end() > m.start()]


def match_split(alternatives: Sequence[CompiledPattern], text: Optional[str]) -> Optional[SplitResult]:
    """
    Split *text* around the first delimiter and every nested one after it.

    The first delimiter is the first match of the first alternative (declared
    order) that matches at all. Every later delimiter is the earliest match,
    starting after the previous delimiter, of any alternative with the same
    number of groups; ties go to the alternative declared first. A Gmail
    forward nested in an Outlook one is split on both separators.

    Each delimiter contributes ``[before, *groups, after]`` (``before`` is
    empty after the first one, ``after`` runs up to the next delimiter), so
    the result holds ``arity = 2 + groups`` slots per delimiter.

    Returns:
        SplitResult, or None if no alternative matched.
    """
    if not text:
        return None

    found = [(pattern, _occurrences(pattern, text)) for pattern in alternatives]
    found = [(pattern, occurrences) for pattern, occurrences in found if occurrences]
    if not found:
        return None

    winner, winner_occurrences = found[0]
    group_count = len(winner_occurrences[0].groups())
    candidates = [occurrences for _, occurrences in found if len(occurrences[0].groups()) == group_count]

    # Each delimiter ends strictly after the previous one, so the loop runs
    # at most len(text) times; cursors only move forward.
    delimiters = [winner_occurrences[0]]
    cursors = [0] * len(candidates)
    while True:
        offset = delimiters[-1].end()
        following = None
        for i, occurrences in enumerate(candidates):
            while cursors[i] < len(occurrences) and occurrences[cursors[i]].start() < offset:
                cursors[i] += 1
            if cursors[i] < len(occurrences):
                m = occurrences[cursors[i]]
                if following is None or m.start() < following.start():
                    following = m
        if following is None:
            break
        delimiters.append(following)

    logger.debug("Split on %r: %d delimiter(s)", winner, len(delimiters))
    slots: List[str] = []
    for i, m in enumerate(delimiters):
        slots.append(text[:m.start()] if i == 0 else "")
        slots.extend(g if g is not None else "" for g in m.groups())
        end = delimiters[i + 1].start() if i + 1 < len(delimiters) else len(text)
        slots.append(text[m.end():end])

    return SplitResult(
        slots=tuple(slots),
        arity=2 + group_count,
        alternative_index=winner.index,
    )


def replace_all(alternatives: Sequence[CompiledPattern], text: Optional[str]) -> str:
    """Remove every match of every alternative from *text*."""
    if not text:
        return text or ""

    for pattern in alternatives:
        kept = []
        position = 0
        for m in pattern.regex.finditer(text):
            kept.append(text[position:m.start()])
            position = m.end()
        if position:
            kept.append(text[position:])
            text = "".join(kept)

    return text


def try_match(
    alternatives: Sequence[CompiledPattern],
    text: Optional[str],
    mode: MatchMode = "first",
) -> Union[MatchOutcome, Optional[SplitResult], str]:
    """Dispatch to match_first / match_split / replace_all."""
    if mode == "first":
        return match_first(alternatives, text)
    if mode == "split":
        return match_split(alternatives, text)
    if mode == "replace_all":
        return replace_all(alternatives, text)
    raise ValueError(f"Unknown match mode: {mode!r}")
