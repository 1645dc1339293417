"""Minification of several HTML files sharing one alias table."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from css_inline_minifier.core.minifier import CssInlineMinifier
from css_inline_minifier.core.result import MinificationResult
from css_inline_minifier.telemetry.metrics import record_document

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class MinifierInputError(Exception):
    """Raised when an input document cannot be read."""


class MinifierOutputError(Exception):
    """Raised when a minified document cannot be written."""


@dataclass
class FileResult:
    """Minification outcome of one file."""

    source: Path
    output: Optional[Path]
    result: MinificationResult


@dataclass
class BatchReport:
    """Outcome of a batch run."""

    files: List[FileResult] = field(default_factory=list)
    classes: int = 0

    @property
    def original_bytes(self) -> int:
        return sum(item.result.original_bytes for item in self.files)

    @property
    def minified_bytes(self) -> int:
        return sum(item.result.minified_bytes for item in self.files)

    @property
    def reduced_percentage(self) -> float:
        if not self.original_bytes:
            return 0.0
        return (self.original_bytes - self.minified_bytes) / self.original_bytes * 100


def output_path_for(source: Path, suffix: str = ".min", output_dir: Optional[PathLike] = None) -> Path:
    """
    Build the output path of a minified file.

    ``page.html`` becomes ``page.min.html``; with ``output_dir`` the file keeps
    its name and moves to that directory instead.
    """
    if output_dir is not None:
        return Path(output_dir) / source.name
    return source.with_name(f"{source.stem}{suffix}{source.suffix}")


def _check_unique_outputs(sources: List[Path], outputs: List[Path]) -> None:
    seen = {}
    for source, output in zip(sources, outputs):
        key = output.resolve()
        if key in seen:
            raise MinifierInputError(f"{seen[key]} and {source} would both be written to {output}")
        seen[key] = source


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MinifierInputError(f"Cannot read {path}: {exc}") from exc


def _write(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise MinifierOutputError(f"Cannot write {path}: {exc}") from exc


def minify_documents(documents: Sequence[str], minifier: CssInlineMinifier) -> List[MinificationResult]:
    """
    Minify several documents in one session.

    Whitelist discovery and class renaming run over every document before any
    stylesheet is touched, so a selector survives if its class appears in any
    of the documents.

    Args:
        documents: HTML texts, in the order that fixes alias numbering
        minifier: Session to use

    Returns:
        One result per document, each with its own size totals
    """
    for document in documents:
        minifier.discover_whitelist_from_markup(document)

    marked_up = [minifier.rewrite_markup_classes(document) for document in documents]

    results = []
    for document in marked_up:
        minifier.reset_sizes()
        text = minifier.rewrite_stylesheets(document)
        results.append(minifier.snapshot(text))
    return results


def minify_files(
    paths: Sequence[PathLike],
    minifier: Optional[CssInlineMinifier] = None,
    output_suffix: str = ".min",
    output_dir: Optional[PathLike] = None,
    write: bool = True,
) -> BatchReport:
    """
    Minify HTML files and write the results.

    Args:
        paths: Input files; a single path is the single-file case
        minifier: Session to use (a fresh one if not given)
        output_suffix: Inserted before the extension of each output file
        output_dir: Directory receiving the outputs instead of the input folder
        write: When False nothing is written and outputs are None

    Returns:
        BatchReport with per-file results

    Raises:
        MinifierInputError: An input cannot be read, or two inputs map to the
            same output file
        MinifierOutputError: An output cannot be written
    """
    minifier = minifier or CssInlineMinifier()
    sources = [Path(p) for p in paths]
    outputs: List[Optional[Path]] = [None] * len(sources)
    if write:
        outputs = [output_path_for(source, output_suffix, output_dir) for source in sources]
        _check_unique_outputs(sources, outputs)

    documents = [_read(source) for source in sources]
    logger.info("Minifying %d file(s)", len(sources))

    started = time.time()
    results = minify_documents(documents, minifier)
    duration = time.time() - started

    report = BatchReport(classes=len(minifier.aliases))
    if write and output_dir is not None:
        try:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MinifierOutputError(f"Cannot create output directory {output_dir}: {exc}") from exc

    for source, output, result in zip(sources, outputs, results):
        if output is not None:
            _write(output, result.text)
        record_document("batch", result, duration / len(sources))
        logger.info(
            "%s: %d -> %d CSS bytes (%.1f%% smaller)",
            source,
            result.original_bytes,
            result.minified_bytes,
            result.reduced_percentage(),
        )
        report.files.append(FileResult(source=source, output=output, result=result))

    return report
