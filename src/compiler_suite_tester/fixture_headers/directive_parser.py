"""Plain directive-comment header loader.

Directives are single-line comments of the form ``//@ name`` or
``//@ name: value``. A directive may be scoped to one revision with
``//@[rev] name: value``; scoped directives only apply when that revision is
active. Supported directives: ``revisions``, ``compile-flags``, ``exit-code``
and ``ignore-test``.
"""

from __future__ import annotations

import re
import shlex
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .header_models import FixtureHeaderError, FixtureProperties

_DIRECTIVE_PATTERN = re.compile(
    r"^\s*//@(?:\[(?P<revision>[^\]]+)\])?\s+(?P<name>[A-Za-z][\w-]*)\s*(?::\s*(?P<value>.*))?$"
)
IGNORE_DEFAULT_REASON = "ignored by directive"


@dataclass(frozen=True)
class _Directive:
    line_number: int
    revision: str | None
    name: str
    value: str | None


def load_revisions(path: Path) -> tuple[str, ...]:
    """Return the revisions declared by the fixture at ``path``, in declaration order."""
    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureHeaderError(f"Failed to read fixture {path}: {exc}") from exc
    try:
        return parse_revisions(src)
    except FixtureHeaderError as exc:
        raise FixtureHeaderError(f"{path}: {exc}") from exc


def parse_revisions(src: str) -> tuple[str, ...]:
    revisions: list[str] = []
    for directive in _iter_directives(src):
        if directive.name != "revisions":
            continue
        if directive.revision is not None:
            raise FixtureHeaderError(
                f"line {directive.line_number}: revisions cannot be scoped to a revision"
            )
        for tag in (directive.value or "").split():
            if tag in revisions:
                raise FixtureHeaderError(
                    f"line {directive.line_number}: duplicate revision '{tag}'"
                )
            revisions.append(tag)
    return tuple(revisions)


def load_properties(src: str, revision: str | None = None) -> FixtureProperties:
    """Load the directives that apply to ``revision`` (or to the unrevisioned fixture)."""
    revisions = parse_revisions(src)
    if revision is not None and revision not in revisions:
        raise FixtureHeaderError(f"revision '{revision}' is not declared by the fixture")

    compile_flags: list[str] = []
    expected_exit_code: int | None = None
    ignore_reason: str | None = None
    for directive in _iter_directives(src):
        if directive.revision is not None:
            if directive.revision not in revisions:
                raise FixtureHeaderError(
                    f"line {directive.line_number}: unknown revision '{directive.revision}'"
                )
            if directive.revision != revision:
                continue
        if directive.name == "compile-flags":
            compile_flags.extend(shlex.split(directive.value or ""))
        elif directive.name == "exit-code":
            expected_exit_code = _parse_exit_code(directive)
        elif directive.name == "ignore-test":
            ignore_reason = directive.value or IGNORE_DEFAULT_REASON

    return FixtureProperties(
        revisions=revisions,
        compile_flags=tuple(compile_flags),
        expected_exit_code=expected_exit_code,
        ignore_reason=ignore_reason,
    )


def unscoped_ignore_reason(src: str) -> str | None:
    """Return the reason of an ``ignore-test`` directive that applies to every revision."""
    for directive in _iter_directives(src):
        if directive.name == "ignore-test" and directive.revision is None:
            return directive.value or IGNORE_DEFAULT_REASON
    return None


def _parse_exit_code(directive: _Directive) -> int:
    try:
        return int((directive.value or "").strip())
    except ValueError as exc:
        raise FixtureHeaderError(
            f"line {directive.line_number}: exit-code must be an integer"
        ) from exc


def _iter_directives(src: str) -> Iterator[_Directive]:
    for line_number, line in enumerate(src.splitlines(), start=1):
        match = _DIRECTIVE_PATTERN.match(line)
        if match is None:
            continue
        value = match.group("value")
        yield _Directive(
            line_number=line_number,
            revision=match.group("revision"),
            name=match.group("name"),
            value=value.strip() if value is not None else None,
        )
