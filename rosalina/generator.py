"""
Host-side code-behind generation.

This module wraps the pure ``synthesize`` operation with everything that
touches the outside world: status logging, progress notifications,
document discovery and writing the generated file to disk.
"""

from __future__ import annotations

import os
import re
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Tuple, Union

from .codegen.constants import UI_DOCUMENT_EXTENSION
from .codegen.renderer import BannerMeta
from .synthesis import RenderedFile, SynthesisRequest, synthesize_request
from .utils.exceptions import PersistenceError, RosalinaError
from .utils.logging import RosalinaLogger, get_logger

logger = get_logger(__name__)

PROGRESS_TITLE = "Generating UI code behind"
PROGRESS_INFO = "Working..."
PROGRESS_VALUE = 0.25

_CSHARP_IDENTIFIER_RE = re.compile(r"^@?[A-Za-z_][A-Za-z0-9_]*$")
_CSHARP_KEYWORDS = frozenset("""
    abstract as base bool break byte case catch char checked class const
    continue decimal default delegate do double else enum event explicit
    extern false finally fixed float for foreach goto if implicit in int
    interface internal is lock long namespace new null object operator out
    override params private protected public readonly ref return sbyte
    sealed short sizeof stackalloc static string struct switch this throw
    true try typeof uint ulong unchecked unsafe ushort using virtual void
    volatile while
""".split())


def is_valid_identifier(name: str) -> bool:
    """Check whether ``name`` can be used as a C# class name."""
    if not _CSHARP_IDENTIFIER_RE.match(name):
        return False
    return name.startswith("@") or name not in _CSHARP_KEYWORDS


class ProgressReporter(Protocol):
    """Protocol for surfacing generation progress to an operator."""

    def update(self, title: str, info: str, progress: float) -> None:
        """Show progress (0.0 - 1.0) for the running generation."""
        ...

    def clear(self) -> None:
        """Remove any progress display."""
        ...


class LoggingProgressReporter:
    """Progress reporter that writes progress updates to the debug log."""

    def __init__(self):
        self.logger = get_logger("progress")

    def update(self, title: str, info: str, progress: float) -> None:
        self.logger.debug(f"{title}: {info} ({progress:.0%})")

    def clear(self) -> None:
        self.logger.debug("Progress cleared")


@dataclass
class GenerationReport:
    """Outcome of a batch generation."""
    generated: List[RenderedFile] = field(default_factory=list)
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


class CodeBehindGenerator:
    """
    Generates and writes code-behind files for UI documents.

    Each call to ``generate`` is independent; the generator keeps no state
    between documents apart from its banner and progress reporter.
    """

    def __init__(
        self,
        banner: Optional[BannerMeta] = None,
        progress: Optional[ProgressReporter] = None,
    ):
        """
        Initialize the generator.

        Args:
            banner: Tool name and version for generated files
            progress: Progress reporter; logs progress when omitted
        """
        self.banner = banner or BannerMeta.default()
        self.progress = progress or LoggingProgressReporter()
        self.status = RosalinaLogger("generator")

    def generate(self, document_path: Union[str, os.PathLike], dry_run: bool = False) -> RenderedFile:
        """
        Generate the code-behind for one document and write it next to it.

        Args:
            document_path: Path of the UI document
            dry_run: Render only, do not write

        Returns:
            The rendered file

        Raises:
            InvalidRequestError: If the document path has no usable name
            PersistenceError: If the generated file cannot be written
        """
        path = os.fspath(document_path)
        self.status.log_generation_start(path)
        self.progress.update(PROGRESS_TITLE, PROGRESS_INFO, PROGRESS_VALUE)
        try:
            request = SynthesisRequest.from_path(path)
            if not is_valid_identifier(request.type_name):
                self.status.log_invalid_identifier(request.type_name, path)

            rendered = synthesize_request(request, self.banner)
            if not dry_run:
                self.write(rendered)
        finally:
            self.progress.clear()

        if dry_run:
            logger.info(f"Dry run, not writing {rendered.path}")
        else:
            self.status.log_generation_done(rendered.path)
        return rendered

    def write(self, rendered: RenderedFile) -> None:
        """
        Write a rendered file, replacing any previous version.

        The text goes to a temporary file in the target directory first and
        is moved into place afterwards, so the target is never left half
        written.
        """
        directory = os.path.dirname(rendered.path) or "."
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".rosalina-", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(rendered.text)
            os.chmod(tmp_path, _target_mode(rendered.path))
            os.replace(tmp_path, rendered.path)
            tmp_path = None
        except OSError as e:
            raise PersistenceError(rendered.path, str(e), rendered.text) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

    def generate_all(
        self, document_paths: Iterable[Union[str, os.PathLike]], dry_run: bool = False
    ) -> GenerationReport:
        """
        Generate code-behind files for several documents.

        A failing document is recorded in the report and does not stop the
        remaining ones.
        """
        report = GenerationReport()
        for document_path in document_paths:
            path = os.fspath(document_path)
            try:
                report.generated.append(self.generate(path, dry_run=dry_run))
            except RosalinaError as e:
                self.status.log_generation_failed(path, e.message)
                report.failures.append((path, e.message))
        return report


def _target_mode(path: str) -> int:
    """Permission bits for a file written to ``path``.

    An existing file keeps its mode; a new one gets 0o666 minus the umask.
    """
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def is_ui_document(path: Union[str, os.PathLike], extension: str = UI_DOCUMENT_EXTENSION) -> bool:
    """Check whether ``path`` names a UI document file."""
    return os.fspath(path).lower().endswith(extension.lower())


def find_documents(
    root: Union[str, os.PathLike], extension: str = UI_DOCUMENT_EXTENSION
) -> List[str]:
    """
    Resolve ``root`` to UI document paths.

    A file is returned as-is; a directory is searched recursively and the
    matches are returned sorted.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return [os.fspath(root)]

    return sorted(
        str(path)
        for path in root_path.rglob("*")
        if path.is_file() and is_ui_document(path, extension)
    )
