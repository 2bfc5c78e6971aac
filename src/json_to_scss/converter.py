"""File-level conversion: load each source, render it, write the result."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ContractViolation, LoadError
from .loader import load_source
from .naming import default_prefix, variable_name
from .options import FormatOptions
from .paths import is_supported
from .serializer import to_sass

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    """Outcome of a batch conversion."""

    converted: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def options_for_source(source: str | Path, options: FormatOptions) -> FormatOptions:
    """Fill in the ``$name: `` prefix derived from *source* when none is set."""
    if options.prefix:
        return options
    name = variable_name(source, options.strip_leading_underscore)
    return dataclasses.replace(options, prefix=default_prefix(name))


def convert_file(source: str | Path, destination: str | Path, options: FormatOptions | None = None) -> Path:
    """Convert one source file and write *destination*.  Returns the path written."""
    source = Path(source)
    destination = Path(destination)
    if options is None:
        options = FormatOptions()

    value = load_source(source)
    logger.debug("loaded %s", source)
    text = to_sass(value, options_for_source(source, options))

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
    return destination


def convert_files(
    sources: list[Path],
    destinations: list[Path],
    options: FormatOptions | None = None,
) -> ConversionReport:
    """Convert every supported source to its paired destination.

    Unsupported files are skipped; a file that fails to load or render is
    recorded and the remaining files are still converted.
    """
    if len(sources) != len(destinations):
        raise ValueError(
            f"{len(sources)} sources but {len(destinations)} destinations"
        )
    if options is None:
        options = FormatOptions()

    report = ConversionReport()
    for source, destination in zip(sources, destinations):
        source = Path(source)
        if not is_supported(source):
            logger.warning("skipping %s: only .js and .json files are converted", source)
            report.skipped.append(source)
            continue
        try:
            written = convert_file(source, destination, options)
        except (LoadError, ContractViolation, OSError, RecursionError) as exc:
            logger.error("failed to convert %s: %s", source, exc)
            report.failed.append((source, str(exc)))
            continue
        logger.info("%s → %s", source, written)
        report.converted.append((source, written))

    return report
