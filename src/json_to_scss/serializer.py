"""Serializer: recursive rendering of a JSON value into Sass map/list source."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .dialects import DialectStyle, style_for
from .errors import ContractViolation
from .model import (
    SCALARS,
    Node,
    VBool,
    VList,
    VMap,
    VNumber,
    VString,
    _EmptyStringType,
    _NullType,
)
from .normalizer import classify
from .options import FormatOptions


# ---------------------------------------------------------------------------
# RenderContext
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderContext:
    """Depth and options threaded through the recursive walk.

    ``active`` holds the ids of the containers currently being rendered, so
    that a self-referencing structure is reported instead of recursing
    forever.
    """

    options: FormatOptions
    style: DialectStyle
    depth: int = 0
    active: frozenset[int] = frozenset()

    @property
    def indent(self) -> str:
        """Indentation of the entries of the container at this depth."""
        return self.options.indent_unit * (self.options.indent_base_depth + self.depth)

    @property
    def close_indent(self) -> str:
        """Indentation of the closing delimiter of the container at this depth."""
        return self.options.indent_unit * max(self.options.indent_base_depth + self.depth - 1, 0)

    def enter(self, container) -> RenderContext:
        """Return the context for the children of *container*."""
        key = id(container)
        if key in self.active:
            raise ContractViolation("cyclic reference: a container contains itself")
        return RenderContext(
            options=self.options,
            style=self.style,
            depth=self.depth + 1,
            active=self.active | {key},
        )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def to_sass(value, options: FormatOptions | None = None) -> str:
    """Render *value* as Sass source: ``prefix`` + literal + ``suffix``.

    Example (defaults, block dialect)::

        to_sass({"color": "red", "size": 10})
        → '(\\n  color: "red",\\n  size: 10\\n);'
    """
    if options is None:
        options = FormatOptions()
    ctx = RenderContext(options=options, style=style_for(options.dialect))
    body = _render(value, classify(value), ctx)
    return ctx.style.wrap_root(options.prefix, body) + options.suffix


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def render_scalar(node: Node, options: FormatOptions) -> str:
    """Literal text of a scalar case."""
    if isinstance(node, _NullType):
        return "null"
    if isinstance(node, VBool):
        return "true" if node.value else "false"
    if isinstance(node, VNumber):
        return format_number(node.value)
    if isinstance(node, _EmptyStringType):
        return options.empty_string
    if isinstance(node, VString):
        return quote_string(node.value)
    raise ContractViolation(f"{node!r} is not a scalar")


# An odd run of backslashes in front of a quote, a line break or the end of
# the string would escape the wrong character.
_DANGLING_BACKSLASHES = re.compile(r'(?<!\\)\\+(?=["\n\r]|\Z)')


def _pair_backslashes(match: re.Match) -> str:
    run = match.group(0)
    return run + "\\" if len(run) % 2 else run


def quote_string(value: str) -> str:
    """Double-quote *value* as a Sass string literal.

    ``"`` is escaped, line breaks become ``\\a `` / ``\\d ``, and other
    backslash escapes (``\\f101``) pass through to Sass unchanged.
    """
    text = _DANGLING_BACKSLASHES.sub(_pair_backslashes, value)
    text = text.replace('"', '\\"').replace("\n", "\\a ").replace("\r", "\\d ")
    return '"' + text + '"'


def format_number(value: int | float) -> str:
    """Format like JavaScript does: ``1.0`` → ``1``, ``0.5`` → ``0.5``."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _key(key: str) -> str:
    return key if key else '""'


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def _render(value, node: Node, ctx: RenderContext) -> str:
    if isinstance(node, VMap):
        return _render_map(value, node, ctx)
    if isinstance(node, VList):
        return _render_list(value, node, ctx)
    return render_scalar(node, ctx.options)


def _render_map(value, node: VMap, ctx: RenderContext) -> str:
    if not node.entries:
        return ctx.style.empty
    inner = ctx.enter(value)
    entries = [
        (_key(k), _render(v, classify(v), inner))
        for k, v in node.entries.items()
    ]
    return ctx.style.format_map(entries, ctx.indent, ctx.close_indent)


def _render_list(value, node: VList, ctx: RenderContext) -> str:
    if not node.items:
        return ctx.style.empty
    inner = ctx.enter(value)
    nodes = [classify(item) for item in node.items]

    if all(isinstance(n, SCALARS) for n in nodes):
        return ctx.style.format_inline_list([render_scalar(n, ctx.options) for n in nodes])

    # Map elements of an undelimited list share the list's own indentation.
    map_ctx = inner if ctx.style.delimits_list_items else replace(inner, depth=ctx.depth)
    items = []
    for item, n in zip(node.items, nodes):
        if isinstance(n, VMap):
            items.append(_render_map(item, n, map_ctx))
        elif isinstance(n, VList) and n.items and all(isinstance(classify(i), SCALARS) for i in n.items):
            items.append(ctx.style.format_inline_group(
                [render_scalar(classify(i), ctx.options) for i in n.items]
            ))
        else:
            items.append(_render(item, n, inner))
    return ctx.style.format_list(items, ctx.indent, ctx.close_indent)
