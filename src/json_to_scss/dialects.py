"""Dialect punctuation.

Every difference between the block (``.scss``) and indentation (``.sass``)
output lives here; the serializer looks the style up once per conversion
and never branches on the dialect itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .model import Dialect


class DialectStyle(ABC):
    """Punctuation rules of one dialect."""

    dialect: Dialect
    empty = "()"
    # List elements get their own delimiters, so maps inside sit one level deeper.
    delimits_list_items = True

    def wrap_root(self, prefix: str, body: str) -> str:
        return prefix + body

    @abstractmethod
    def format_map(self, entries: list[tuple[str, str]], indent: str, close_indent: str) -> str:
        """Multi-line map from already rendered ``(key, value)`` pairs."""

    @abstractmethod
    def format_list(self, items: list[str], indent: str, close_indent: str) -> str:
        """Multi-line list, used when the list holds maps or lists."""

    @abstractmethod
    def format_inline_list(self, items: list[str]) -> str:
        """Single-line list of scalars."""

    @staticmethod
    def format_inline_group(items: list[str]) -> str:
        """Parenthesised single-line list, valid in both dialects."""
        if len(items) == 1:
            return f"({items[0]},)"
        return "(" + ", ".join(items) + ")"


class BlockStyle(DialectStyle):
    """``$name: (\\n  key: value,\\n  other: value\\n);``"""

    dialect = Dialect.BLOCK

    def format_map(self, entries, indent, close_indent):
        lines = [f"{indent}{key}: {value}" for key, value in entries]
        return "(\n" + ",\n".join(lines) + "\n" + close_indent + ")"

    def format_list(self, items, indent, close_indent):
        lines = [f"{indent}{item}" for item in items]
        return "(\n" + ",\n".join(lines) + "\n" + close_indent + ")"

    def format_inline_list(self, items):
        return self.format_inline_group(items)


class IndentationStyle(DialectStyle):
    """``$name:\\nkey: value\\nnested:\\n  inner: value``"""

    dialect = Dialect.INDENTATION
    delimits_list_items = False

    def wrap_root(self, prefix, body):
        if not body.startswith("\n"):
            return prefix + body
        if not prefix.strip():
            return body[1:]
        return prefix.rstrip() + body

    def format_map(self, entries, indent, close_indent):
        lines = []
        for key, value in entries:
            # a nested block opens with a newline: no space after the colon
            sep = "" if value.startswith("\n") else " "
            lines.append(f"{indent}{key}:{sep}{value}")
        return "\n" + "\n".join(lines)

    def format_list(self, items, indent, close_indent):
        # Nested blocks arrive already indented; a trailing comma ends each element.
        blocks = [item[1:] if item.startswith("\n") else indent + item for item in items]
        return "\n" + ",\n".join(blocks)

    def format_inline_list(self, items):
        if len(items) == 1:
            return f"{items[0]},"
        return ", ".join(items)


STYLES: dict[Dialect, DialectStyle] = {
    Dialect.BLOCK: BlockStyle(),
    Dialect.INDENTATION: IndentationStyle(),
}


def style_for(dialect: Dialect) -> DialectStyle:
    return STYLES[dialect]
