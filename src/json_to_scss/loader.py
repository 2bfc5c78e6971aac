"""Reading source files into JSON values.

``.json`` files are parsed with :mod:`json`; ``.js`` modules are evaluated by
Node.js and their export is read back as JSON, which also drops anything that
is not plain data (functions, ``undefined``, symbols).
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from pathlib import Path

from .errors import LoadError

logger = logging.getLogger(__name__)

# Prints the module export (or its ES ``default``) as JSON on stdout.
_NODE_SCRIPT = r"""
const path = require('path');
let m = require(path.resolve(process.argv[1]));
if (m && m.__esModule && 'default' in m) { m = m.default; }
const out = JSON.stringify(m);
process.stdout.write(out === undefined ? 'null' : out);
"""

NODE_TIMEOUT = 30.0


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def load_json(path: str | Path):
    """Parse a JSON file.  Duplicate keys resolve to the last one."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise LoadError(path, f"cannot read file ({exc.strerror or exc})") from exc
    except UnicodeDecodeError as exc:
        raise LoadError(path, f"not UTF-8 text ({exc.reason})") from exc

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise LoadError(path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    except ValueError as exc:
        raise LoadError(path, str(exc)) from exc


def load_js_module(path: str | Path, node: str = "node"):
    """Evaluate a JavaScript module with Node.js and return its export."""
    path = Path(path)
    if not path.is_file():
        raise LoadError(path, "no such file")

    executable = shutil.which(node)
    if executable is None:
        raise LoadError(path, f"'{node}' was not found on PATH; it is required for .js sources")

    logger.debug("evaluating %s with %s", path, executable)
    try:
        proc = subprocess.run(
            [executable, "-e", _NODE_SCRIPT, str(path)],
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=NODE_TIMEOUT,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise LoadError(path, f"module evaluation timed out after {NODE_TIMEOUT:g}s") from exc
    except OSError as exc:
        raise LoadError(path, f"cannot run {executable} ({exc})") from exc

    if proc.returncode != 0:
        detail = [line for line in proc.stderr.splitlines() if line.strip()]
        errors = [line.strip() for line in detail if "Error" in line]
        if errors:
            reason = errors[0]
        elif detail:
            reason = detail[-1].strip()
        else:
            reason = f"exit status {proc.returncode}"
        raise LoadError(path, f"module evaluation failed: {reason}")

    try:
        return json.loads(proc.stdout)
    except json.JSONDecodeError as exc:
        raise LoadError(path, f"module export is not serializable: {exc.msg}") from exc


def load_source(path: str | Path):
    """Load a ``.json`` or ``.js`` source, chosen by extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return load_json(path)
    if suffix == ".js":
        return load_js_module(path)
    raise LoadError(path, f"unsupported source extension {suffix or '(none)'!r}")
