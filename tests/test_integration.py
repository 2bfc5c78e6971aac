"""End-to-end integration tests."""

import json

from json_to_scss import FormatOptions, convert_file, to_sass
from json_to_scss.cli import main

TOKENS = {
    "colors": {
        "primary": "#0055ff",
        "muted": "",
        "shades": [100, 200, 300],
    },
    "breakpoints": {"sm": "576px", "md": "768px"},
    "radius": 4,
    "dark": False,
    "font": None,
}


def test_block_document():
    out = to_sass(TOKENS, FormatOptions(prefix="$tokens: "))
    assert out == (
        "$tokens: (\n"
        "  colors: (\n"
        '    primary: "#0055ff",\n'
        '    muted: "",\n'
        "    shades: (100, 200, 300)\n"
        "  ),\n"
        "  breakpoints: (\n"
        '    sm: "576px",\n'
        '    md: "768px"\n'
        "  ),\n"
        "  radius: 4,\n"
        "  dark: false,\n"
        "  font: null\n"
        ");"
    )


def test_indentation_document():
    out = to_sass(TOKENS, FormatOptions(prefix="$tokens: ", dialect="indentation", empty_string_quote="single"))
    assert out == (
        "$tokens:\n"
        "colors:\n"
        '  primary: "#0055ff"\n'
        "  muted: ''\n"
        "  shades: 100, 200, 300\n"
        "breakpoints:\n"
        '  sm: "576px"\n'
        '  md: "768px"\n'
        "radius: 4\n"
        "dark: false\n"
        "font: null"
    )


def test_file_round_trip_through_json(tmp_path):
    src = tmp_path / "_tokens.json"
    src.write_text(json.dumps(TOKENS), encoding="utf-8")
    out = convert_file(src, tmp_path / "tokens.scss", FormatOptions(strip_leading_underscore=True))
    assert out.read_text(encoding="utf-8") == to_sass(TOKENS, FormatOptions(prefix="$tokens: "))


def test_cli_glob(tmp_path, capsys):
    (tmp_path / "tokens").mkdir()
    for name in ("colors", "spacing"):
        (tmp_path / "tokens" / f"{name}.json").write_text('{"base": 1}', encoding="utf-8")
    (tmp_path / "tokens" / "README.md").write_text("docs", encoding="utf-8")

    assert main(["tokens/*", "dist"], cwd=tmp_path) == 0

    assert sorted(p.name for p in (tmp_path / "dist").iterdir()) == ["colors.scss", "spacing.scss"]
    assert (tmp_path / "dist" / "spacing.scss").read_text(encoding="utf-8") == "$spacing: (\n  base: 1\n);"
