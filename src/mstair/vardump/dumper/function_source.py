# File: src/mstair/vardump/dumper/function_source.py
"""
Recover a re-parseable expression for a function value from its source text.

Only lambdas have an expression form. The declaring lines are located with
`inspect`, read through a SourceReader, and re-tokenized with `tokenize` to
isolate the ``lambda`` expression: it ends at the first comma, closing bracket,
semicolon, comprehension ``for`` or logical newline that sits at its own
bracket depth, so the result is always bracket-balanced even when the
declaring lines carry trailing code.

When the source cannot be located, read or delimited, a placeholder lambda
whose body is a string describing the failure is produced instead.
"""

from __future__ import annotations

import inspect
import io
import linecache
import textwrap
import tokenize
from collections.abc import Callable
from dataclasses import dataclass
from types import CodeType
from typing import Any, Final, TypeAlias

from mstair.vardump.dumper.errors import SourceUnavailableError
from mstair.vardump.xlogging import create_logger


__all__ = [
    "SourceLocator",
    "SourceReader",
    "export_function",
    "extract_function_literal",
    "locate_source",
    "placeholder_literal",
    "read_source_lines",
]

SourceReader: TypeAlias = Callable[[str, int, int], str]
"""Returns lines ``start..end`` (1-based, inclusive) of the file at ``path``."""

FUNCTION_KEYWORD: Final[str] = "lambda"
_OPENERS: Final[frozenset[str]] = frozenset("([{")
_CLOSERS: Final[frozenset[str]] = frozenset(")]}")
_TERMINATORS: Final[frozenset[str]] = frozenset({",", ";"})
_TERMINATOR_NAMES: Final[frozenset[str]] = frozenset({"for", "async"})


@dataclass(frozen=True, slots=True)
class SourceLocator:
    """Where a function is declared: file path and 1-based inclusive line range."""

    path: str
    start: int
    end: int


def _function_name(func: Any) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)


def locate_source(func: Any) -> SourceLocator:
    """
    Find the declaring file and line range of ``func``.

    :raises SourceUnavailableError: For builtins, functions created by exec/eval, or missing files.
    """
    target = inspect.unwrap(getattr(func, "__func__", func))
    try:
        path = inspect.getsourcefile(target)
        lines, start = inspect.getsourcelines(target)
    except (OSError, TypeError) as exc:
        raise SourceUnavailableError(f"cannot locate source of {_function_name(func)}: {exc}") from exc
    if not path or not lines:
        raise SourceUnavailableError(f"no source file for {_function_name(func)}")
    start = max(start, 1)
    return SourceLocator(path=path, start=start, end=start + len(lines) - 1)


def read_source_lines(path: str, start: int, end: int) -> str:
    """
    Return lines ``start..end`` (1-based, inclusive) of ``path``.

    :raises SourceUnavailableError: If the file cannot be read or the range is out of bounds.
    """
    lines = linecache.getlines(path)
    if not lines:
        raise SourceUnavailableError(f"cannot read {path}")
    if start < 1 or end < start or end > len(lines):
        raise SourceUnavailableError(f"line range {start}-{end} outside {path} ({len(lines)} lines)")
    return "".join(lines[start - 1 : end])


@dataclass(slots=True)
class _OpenLambda:
    start: tuple[int, int]
    depth: int
    in_body: bool = False


def _scan_lambda_spans(source: str) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Return sorted (start, end) token positions of every lambda expression in ``source``."""
    spans: list[tuple[tuple[int, int], tuple[int, int]]] = []
    open_lambdas: list[_OpenLambda] = []
    last_end: tuple[int, int] | None = None
    depth = 0

    def close_bodies(min_depth: int) -> None:
        while (
            last_end is not None
            and open_lambdas
            and open_lambdas[-1].in_body
            and open_lambdas[-1].depth >= min_depth
        ):
            spans.append((open_lambdas.pop().start, last_end))

    try:
        for tok in tokenize.generate_tokens(io.StringIO(source).readline):
            if tok.type in {tokenize.NL, tokenize.COMMENT, tokenize.INDENT, tokenize.DEDENT}:
                continue
            if tok.type in {tokenize.NEWLINE, tokenize.ENDMARKER}:
                close_bodies(0)
                continue
            if tok.type == tokenize.OP and tok.string in _CLOSERS:
                close_bodies(depth)
                depth -= 1
            elif tok.type == tokenize.OP and tok.string in _OPENERS:
                depth += 1
            elif (tok.type == tokenize.OP and tok.string in _TERMINATORS) or (
                tok.type == tokenize.NAME and tok.string in _TERMINATOR_NAMES
            ):
                close_bodies(depth)
            elif tok.type == tokenize.OP and tok.string == ":":
                pending = next(
                    (o for o in reversed(open_lambdas) if not o.in_body and o.depth == depth), None
                )
                if pending is not None:
                    pending.in_body = True
            elif tok.type == tokenize.NAME and tok.string == FUNCTION_KEYWORD:
                open_lambdas.append(_OpenLambda(start=tok.start, depth=depth))
            last_end = tok.end
    except (tokenize.TokenError, SyntaxError) as exc:
        # Declaring lines may end inside an enclosing call, e.g. "key=lambda x: x)"
        create_logger(__name__).debug("tokenize stopped early: %s", exc)
        close_bodies(0)
    return sorted(spans)


def _slice(lines: list[str], start: tuple[int, int], end: tuple[int, int]) -> str:
    (srow, scol), (erow, ecol) = start, end
    if srow == erow:
        return lines[srow - 1][scol:ecol]
    chunk = [lines[srow - 1][scol:], *lines[srow : erow - 1], lines[erow - 1][:ecol]]
    return "".join(chunk)


def _compiles_to(candidate: str, code: CodeType) -> bool:
    """True if ``candidate`` compiles to a lambda with the same bytecode, constants and names."""
    try:
        module_code = compile(candidate, "<lambda>", "eval")
    except SyntaxError:
        return False
    return any(
        isinstance(const, CodeType)
        and const.co_code == code.co_code
        and const.co_consts == code.co_consts
        and const.co_names == code.co_names
        and const.co_varnames == code.co_varnames
        for const in module_code.co_consts
    )


def extract_function_literal(source: str, code: CodeType | None = None) -> str:
    """
    Isolate the lambda expression declared in ``source``.

    When several lambdas start on the first line, the one whose bytecode matches
    ``code`` is preferred; otherwise the first one is used. Multi-line results are
    wrapped in parentheses so they stay valid wherever they are embedded.

    :raises SourceUnavailableError: If ``source`` holds no complete lambda expression.
    """
    text = textwrap.dedent(source)
    lines = text.splitlines(keepends=True)
    spans = _scan_lambda_spans(text)
    if not spans:
        raise SourceUnavailableError("no complete lambda expression in declaring lines")
    first_row = spans[0][0][0]
    spans = [span for span in spans if span[0][0] == first_row]
    # Outermost lambdas first; nested ones are only candidates when nothing else matches
    candidates = [_slice(lines, start, end).strip() for start, end in spans]
    chosen = candidates[0]
    if code is not None:
        chosen = next((c for c in candidates if _compiles_to(c, code)), chosen)
    if "\n" in chosen:
        chosen = f"({chosen})"
    return chosen


def placeholder_literal(func: Any, reason: str) -> str:
    """Return a callable lambda literal whose body documents why extraction failed."""
    note = f"<function {_function_name(func)}: source unavailable: {reason}>"
    return f"(lambda *args, **kwargs: {note!r})"


def export_function(func: Any, *, source_reader: SourceReader = read_source_lines) -> str:
    """
    Return a lambda literal for ``func``, or a placeholder literal. Never raises.
    """
    logger = create_logger(__name__)
    try:
        if getattr(func, "__name__", None) != "<lambda>":
            raise SourceUnavailableError("declared with def, no expression form")
        locator = locate_source(func)
        source = source_reader(locator.path, locator.start, locator.end)
        literal = extract_function_literal(source, getattr(func, "__code__", None))
    except SourceUnavailableError as exc:
        logger.debug("function source unavailable: %s", exc)
        return placeholder_literal(func, str(exc))
    logger.trace("extracted %s", literal)
    return literal


# End of file: src/mstair/vardump/dumper/function_source.py
