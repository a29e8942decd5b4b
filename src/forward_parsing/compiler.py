"""
Pattern Compiler — builds the immutable CompiledCatalog from catalog data.

For every field, each alternative is compiled with RE2 (linear-time matching,
no backtracking). Fields listed in LINE_FIELDS additionally get a
line-capturing variant: the source wrapped in one outer group, flags kept.

Any defect (schema violation, pattern RE2 rejects, declared captures that do
not match the pattern's named groups) raises ConfigurationError: the parser
must not start with a partially compiled catalog.
"""
import json
import logging
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

import re2
from jsonschema import ValidationError, validate

from src.config.catalog import DEFAULT_PATTERN_CATALOG
from src.config.constants import CATALOG_VERSION, LINE_FIELDS, PARSER_VERSION
from src.config.schemas import PATTERN_CATALOG_SCHEMA
from src.config.settings import PATTERN_CATALOG_PATH
from src.models.errors import ConfigurationError
from src.models.pattern import CompiledCatalog, CompiledPattern, PatternAlternative

logger = logging.getLogger(__name__)


# ======================================================================
# Loading & validation
# ======================================================================

def load_catalog(path: Optional[str] = None) -> Dict[str, List[dict]]:
    """
    Load catalog data from a JSON file, or return the built-in catalog.

    Args:
        path: JSON file path. Defaults to PATTERN_CATALOG_PATH; empty means
              the built-in DEFAULT_PATTERN_CATALOG.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    if path is None:
        path = PATTERN_CATALOG_PATH
    if not path:
        return DEFAULT_PATTERN_CATALOG

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot load pattern catalog from %s: %s", path, e)
        raise ConfigurationError(f"cannot load pattern catalog from '{path}': {e}") from e

    logger.info("Pattern catalog loaded from %s (%d fields)", path, len(data))
    return data


def validate_catalog(catalog: Dict[str, List[dict]]) -> None:
    """Check catalog data against PATTERN_CATALOG_SCHEMA."""
    try:
        validate(instance=catalog, schema=PATTERN_CATALOG_SCHEMA)
    except ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path)
        logger.error("Pattern catalog schema violation at '%s': %s", path, e.message)
        raise ConfigurationError(f"schema violation at '{path}': {e.message}") from e


def build_alternatives(catalog: Dict[str, List[dict]]) -> Dict[str, Tuple[PatternAlternative, ...]]:
    """Turn validated catalog data into PatternAlternative tuples, order preserved."""
    return {
        name: tuple(
            PatternAlternative(
                field=name,
                index=i,
                source=entry["pattern"],
                flags=entry.get("flags", ""),
                client=entry.get("client", ""),
                captures=tuple(entry.get("captures", ())),
            )
            for i, entry in enumerate(entries)
        )
        for name, entries in catalog.items()
    }


# ======================================================================
# Compilation
# ======================================================================

def compile_alternative(alternative: PatternAlternative, line: bool = False) -> CompiledPattern:
    """
    Compile one alternative (inner-capture form, or line form if *line*).

    Raises:
        ConfigurationError: If RE2 rejects the pattern or the named groups
                            differ from the declared captures.
    """
    source = alternative.line_source if line else alternative.flagged_source

    try:
        regex = re2.compile(source)
    except re2.error as e:
        logger.error("Invalid pattern %s[%d] '%s': %s", alternative.field, alternative.index, source, e)
        raise ConfigurationError(
            f"invalid pattern '{source}': {e}", field=alternative.field, index=alternative.index
        ) from e

    declared = set(alternative.captures)
    named = set(regex.groupindex)
    if declared != named:
        raise ConfigurationError(
            f"declared captures {sorted(declared)} do not match named groups {sorted(named)}",
            field=alternative.field,
            index=alternative.index,
        )

    return CompiledPattern(alternative=alternative, regex=regex, line=line)


def compile_catalog(
    catalog: Optional[Dict[str, List[dict]]] = None,
    version: str = CATALOG_VERSION,
) -> CompiledCatalog:
    """
    Validate and compile a pattern catalog.

    Args:
        catalog: Catalog data. Defaults to load_catalog().
        version: Version label carried by the compiled catalog.

    Returns:
        Immutable CompiledCatalog with inner and line variants.

    Raises:
        ConfigurationError: On any catalog defect.
    """
    if catalog is None:
        catalog = load_catalog()

    validate_catalog(catalog)
    alternatives = build_alternatives(catalog)

    inner: Dict[str, Tuple[CompiledPattern, ...]] = {}
    lines: Dict[str, Tuple[CompiledPattern, ...]] = {}

    for name, alts in alternatives.items():
        inner[name] = tuple(compile_alternative(a) for a in alts)
        if name in LINE_FIELDS:
            lines[name] = tuple(compile_alternative(a, line=True) for a in alts)

    compiled = CompiledCatalog(version=version, inner=inner, lines=lines)
    logger.info(
        "Pattern catalog %s compiled for %s: %d fields, %d alternatives, %d line variants",
        version,
        PARSER_VERSION,
        len(compiled.fields),
        sum(len(v) for v in inner.values()),
        sum(len(v) for v in lines.values()),
    )
    return compiled


@lru_cache(maxsize=1)
def get_default_catalog() -> CompiledCatalog:
    """Process-wide compiled catalog, built on first use."""
    return compile_catalog()
