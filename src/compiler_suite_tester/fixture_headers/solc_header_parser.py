"""Structured header loader for conformance fixtures.

Conformance fixtures keep their metadata in a trailing comment block::

    contract C {}
    // ====
    // EVMVersion: >=byzantium
    // compileViaYul: true
    // ----
    // ParserError 2314: (14-15): Expected ';' but got '}'

The ``// ====`` block holds ``key: value`` settings and the ``// ----`` block
holds the expected compiler output, one entry per line.
"""

from __future__ import annotations

from typing import Any

import yaml

from .header_models import FixtureHeaderError, FixtureProperties

SETTINGS_MARKER = "// ===="
EXPECTATIONS_MARKER = "// ----"
_COMMENT_PREFIX = "//"


def load_solc_properties(src: str, revision: str | None = None) -> FixtureProperties:
    """Load the settings and expectation blocks of a conformance fixture.

    Conformance fixtures do not declare revisions, so ``revision`` must be None.
    """
    if revision is not None:
        raise FixtureHeaderError("conformance fixtures do not support revisions")

    settings_lines: list[str] = []
    expectation_lines: list[str] = []
    section: list[str] | None = None
    for line in src.splitlines():
        stripped = line.strip()
        if stripped == SETTINGS_MARKER:
            section = settings_lines
            continue
        if stripped == EXPECTATIONS_MARKER:
            section = expectation_lines
            continue
        if section is None:
            continue
        if not stripped.startswith(_COMMENT_PREFIX):
            # Multi-source fixtures restart source text after a block.
            section = None
            continue
        content = stripped[len(_COMMENT_PREFIX) :].strip()
        if content:
            section.append(content)

    return FixtureProperties(
        settings=_parse_settings(settings_lines),
        expectations=tuple(expectation_lines),
    )


def _parse_settings(lines: list[str]) -> dict[str, Any]:
    settings: dict[str, Any] = {}
    for line in lines:
        key, separator, raw_value = line.partition(":")
        key = key.strip()
        if not separator or not key:
            raise FixtureHeaderError(f"malformed setting line: {line!r}")
        if key in settings:
            raise FixtureHeaderError(f"duplicate setting '{key}'")
        settings[key] = _resolve_scalar(raw_value.strip())
    return settings


def _resolve_scalar(raw_value: str) -> Any:
    """Resolve ``true``/``42``-style values; keep anything YAML rejects verbatim."""
    if not raw_value:
        return None
    try:
        value = yaml.safe_load(raw_value)
    except yaml.YAMLError:
        # Version ranges such as ">=byzantium" are not YAML scalars.
        return raw_value
    if isinstance(value, (dict, list)):
        return raw_value
    return value
