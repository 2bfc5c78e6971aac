"""Tests for json_to_scss.options."""

import dataclasses

import pytest

from json_to_scss.errors import OptionsError
from json_to_scss.model import Dialect
from json_to_scss.options import FormatOptions


class TestDefaults:
    def test_block(self):
        opts = FormatOptions()
        assert opts.prefix == ""
        assert opts.suffix == ";"
        assert opts.empty_string_quote == "double"
        assert opts.indent_unit == "  "
        assert opts.indent_base_depth == 1
        assert opts.strip_leading_underscore is False
        assert opts.dialect is Dialect.BLOCK

    def test_indentation(self):
        opts = FormatOptions(dialect=Dialect.INDENTATION)
        assert opts.suffix == ""
        assert opts.indent_base_depth == 0

    def test_explicit_values_kept(self):
        opts = FormatOptions(suffix="", indent_base_depth=0)
        assert opts.suffix == ""
        assert opts.indent_base_depth == 0

    def test_explicit_suffix_in_indentation_dialect(self):
        opts = FormatOptions(dialect=Dialect.INDENTATION, suffix=";")
        assert opts.suffix == ";"


class TestDialectCoercion:
    @pytest.mark.parametrize("raw", ["block", "scss", ".scss", "SCSS"])
    def test_block_names(self, raw):
        assert FormatOptions(dialect=raw).dialect is Dialect.BLOCK

    @pytest.mark.parametrize("raw", ["indentation", "sass", ".sass"])
    def test_indentation_names(self, raw):
        assert FormatOptions(dialect=raw).dialect is Dialect.INDENTATION

    def test_unknown_dialect(self):
        with pytest.raises(OptionsError, match="dialect"):
            FormatOptions(dialect="less")

    def test_extension(self):
        assert Dialect.BLOCK.extension == ".scss"
        assert Dialect.INDENTATION.extension == ".sass"


class TestValidation:
    def test_unknown_quote(self):
        with pytest.raises(OptionsError):
            FormatOptions(empty_string_quote="backtick")

    def test_negative_depth(self):
        with pytest.raises(OptionsError):
            FormatOptions(indent_base_depth=-1)

    def test_non_int_depth(self):
        with pytest.raises(OptionsError):
            FormatOptions(indent_base_depth="2")

    def test_options_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            FormatOptions(dialect="nope")


class TestEmptyString:
    def test_double(self):
        assert FormatOptions().empty_string == '""'

    def test_single(self):
        assert FormatOptions(empty_string_quote="single").empty_string == "''"


def test_frozen():
    opts = FormatOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.prefix = "$x: "


def test_replace_keeps_resolved_defaults():
    opts = dataclasses.replace(FormatOptions(dialect="indentation"), prefix="$x: ")
    assert opts.prefix == "$x: "
    assert opts.suffix == ""
    assert opts.indent_base_depth == 0
