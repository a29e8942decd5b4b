"""
PatternAlternative, CompiledPattern and CompiledCatalog — pattern catalog types.

Built once at startup by the compiler and read-only afterwards, so a single
CompiledCatalog can be shared by every thread of the process.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class PatternAlternative:
    """One declarative alternative of a catalog field."""

    field: str
    index: int                                          # Position within the field, 0 = most specific
    source: str
    flags: str = ""
    client: str = ""
    captures: Tuple[str, ...] = ()                      # Declared named capture slots

    @property
    def flagged_source(self) -> str:
        """Source with its flags inlined, e.g. ``(?im)^Subject:(.+)``."""
        return f"(?{self.flags}){self.source}" if self.flags else self.source

    @property
    def line_source(self) -> str:
        """Source wrapped in one outer capturing group, flags preserved."""
        wrapped = f"({self.source})"
        return f"(?{self.flags}){wrapped}" if self.flags else wrapped


@dataclass(frozen=True)
class CompiledPattern:
    """Executable form of a PatternAlternative."""

    alternative: PatternAlternative
    regex: Any                                          # re2 compiled pattern
    line: bool = False                                  # True for the line-capturing variant

    @property
    def field(self) -> str:
        return self.alternative.field

    @property
    def index(self) -> int:
        return self.alternative.index

    @property
    def captures(self) -> Tuple[str, ...]:
        return self.alternative.captures

    def __repr__(self) -> str:
        kind = "line" if self.line else "inner"
        return f"CompiledPattern({self.field}[{self.index}], {kind})"


@dataclass(frozen=True)
class CompiledCatalog:
    """Compiled pattern table: field name → alternatives in catalog order."""

    version: str
    inner: Mapping[str, Tuple[CompiledPattern, ...]] = field(default_factory=dict)
    lines: Mapping[str, Tuple[CompiledPattern, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", MappingProxyType(dict(self.inner)))
        object.__setattr__(self, "lines", MappingProxyType(dict(self.lines)))

    def get(self, name: str) -> Tuple[CompiledPattern, ...]:
        """Inner-capture alternatives of *name*."""
        return self.inner[name]

    def line(self, name: str) -> Tuple[CompiledPattern, ...]:
        """Line-capturing alternatives of *name*."""
        return self.lines[name]

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.inner.keys())
