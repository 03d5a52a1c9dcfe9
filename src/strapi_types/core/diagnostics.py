# topmark:header:start
#
#   project      : StrapiTypes
#   file         : diagnostics.py
#   file_relpath : src/strapi_types/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for StrapiTypes.

Diagnostics report problems found in the input Strapi project (malformed
schemas, unhandled attribute kinds, missing custom field extensions) without
aborting generation. They are collected during a run and reported to the
operator once the generated output is complete.

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message + source).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-run collection with helpers for
      adding and summarizing diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from strapi_types.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from strapi_types.config.logging import StrapiTypesLogger


logger: StrapiTypesLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during generation.

    Levels are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional source file."""

    level: DiagnosticLevel
    message: str
    source: Path | None = None

    def render(self) -> str:
        """Return a one-block, human-readable rendering of this diagnostic.

        Returns:
            The rendered diagnostic, prefixed with its level and source file (if any).
        """
        prefix: str = f"[{self.level.value}]"
        where: str = f" {self.source}:" if self.source is not None else ""
        return f"{prefix}{where} {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error

    def summary(self) -> str:
        """Return a one-line summary, e.g. ``"1 error(s), 2 warning(s)"``."""
        parts: list[str] = [f"{self.n_error} error(s)", f"{self.n_warning} warning(s)"]
        if self.n_info:
            parts.append(f"{self.n_info} info")
        return ", ".join(parts)


@dataclass
class DiagnosticLog:
    """Mutable, per-run collection of diagnostics.

    Collects every diagnostic emitted while loading schemas and generating
    types, in insertion order.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str, *, source: Path | None = None) -> None:
        """Add an ``info`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            source: The schema file the diagnostic relates to, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, source))

    def add_warning(self, message: str, *, source: Path | None = None) -> None:
        """Add a ``warning`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            source: The schema file the diagnostic relates to, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, source))

    def add_error(self, message: str, *, source: Path | None = None) -> None:
        """Add an ``error`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            source: The schema file the diagnostic relates to, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, source))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, preserving their order."""
        for diagnostic in diagnostics:
            self._add(diagnostic)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics stored in this log, in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts for the given diagnostics.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
