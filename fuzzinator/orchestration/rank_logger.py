"""RankLogger for logging ranking runs in formatted output.

This module provides the RankLogger class that writes structured plain-text
log files with a header, a rank phase per ranking request, and a summary.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from fuzzinator.models import FuzzyConfig, RankedString


class RankLogger:
    """Logger for ranking runs with structured output format.

    Usage:
        with RankLogger(preset="default") as logger:
            logger.log_header(config)
            logger.log_rank_phase(root, candidate_count, threshold, sort, results)
            logger.log_summary(candidate_count, results, duration)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(
        self,
        log_file_path: Optional[Path] = None,
        preset: Optional[str] = None,
    ) -> None:
        """Initialize the RankLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.
            preset: Name of the preset the engine was built from, if any.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._preset = preset
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None
        self._request_counter = 0

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"rank_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file path is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".fuzzinator_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def open(self) -> None:
        """Open the log file for writing.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        if self._file_handle is not None:
            return
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")

    def close(self) -> None:
        """Close the log file. Safe to call more than once."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def __enter__(self) -> "RankLogger":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def get_log_path(self) -> Path:
        """Get the path to the log file."""
        return self._log_file_path

    def log_header(self, config: FuzzyConfig) -> None:
        """Write the header section: title, timestamp and scoring settings."""
        multiplier = config.scoring.multiplier
        self._write_separator()
        self._write_line("Fuzzinator - Rank Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line(f"Preset: {self._preset or 'custom'}")
        self._write_line(f"Formula: {config.scoring.formula}")
        self._write_line(
            f"Multiplier: initial={multiplier.initial} reducer={multiplier.reducer} "
            f"reduction_delimiter={multiplier.reduction_delimiter!r} "
            f"reset_delimiter={multiplier.reset_delimiter!r} "
            f"reset_reducer={multiplier.reset_reducer}"
        )
        self._write_line(f"Alphabet size: {len(config.scalars.chars)}")
        self._write_line("")

    def log_rank_phase(
        self,
        root: str,
        candidate_count: int,
        threshold: Optional[float],
        sort: bool,
        results: List[RankedString],
    ) -> None:
        """Write one ranking request and its results to the log file.

        Args:
            root: The root string.
            candidate_count: Number of candidates ranked.
            threshold: Threshold applied, if any.
            sort: Whether results were sorted.
            results: RankedString results in output order.
        """
        self._request_counter += 1
        self._write_separator()
        self._write_line(f"RANK PHASE {self._request_counter}")
        self._write_separator()
        self._write_line(f"Root: {root!r}")
        self._write_line(f"Candidates: {candidate_count}")
        self._write_line(f"Threshold: {threshold if threshold else 'none'}")
        self._write_line(f"Sorted: {'yes' if sort else 'no'}")
        self._write_line(f"Results: {len(results)}")
        self._write_line("")

        for position, result in enumerate(results, start=1):
            self._write_line(
                f"{position}. {result.value!r} "
                f"distance={result.distance:.6g} score={result.score:.4f}",
                indent=2,
            )
        if results:
            self._write_line("")

    def log_summary(
        self,
        candidate_count: int,
        results: List[RankedString],
        duration: float,
    ) -> None:
        """Write the summary section to the log file."""
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Rank requests: {self._request_counter}")
        self._write_line(f"Candidates ranked: {candidate_count:,}")
        self._write_line(f"Results kept: {len(results):,}")
        self._write_line(f"Filtered by threshold: {candidate_count - len(results):,}")
        if results:
            best = min(results, key=lambda r: r.distance)
            self._write_line(f"Best match: {best.value!r} (score {best.score:.4f})")
        self._write_line(f"Duration: {self._format_duration(duration)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_duration(self, seconds: float) -> str:
        """Format duration as "0.012s", "45.0s" or "5m 23s"."""
        if seconds < 60:
            return f"{seconds:.3f}s" if seconds < 1 else f"{seconds:.1f}s"
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"

    def _format_timestamp(self, dt: datetime) -> str:
        """Format a datetime as 'YYYY-MM-DD HH:MM:SS'."""
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        """Write a separator line to the log file."""
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
