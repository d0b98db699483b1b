#!/usr/bin/env python3

"""Progress tracking for struct analysis runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil

from .utils import format_elapsed


class ProgressTracker:
    """
    Track and report analysis progress with simple statistics.

    Provides contextual timing, per-document tracking, and declaration and
    field counters for the summary line.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.document_count = 0
        self.declaration_count = 0
        self.field_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(
                f"Completed operation: {operation_name} in {format_elapsed(elapsed)}"
            )
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(
                f"Failed operation: {operation_name} after {format_elapsed(elapsed)}: {e}"
            )
            raise
        finally:
            self.operation_stack.pop()

    @contextmanager
    def track_document(self, document_name: str) -> Iterator[None]:
        """
        Track the analysis of a single document.

        Args:
            document_name: Path or label of the document

        Yields:
            None
        """
        self.document_count += 1
        document_start = time()
        initial_declarations = self.declaration_count

        self.logger.debug(f"Processing document #{self.document_count}: {document_name}")

        try:
            yield

            elapsed = time() - document_start
            found = self.declaration_count - initial_declarations
            self.logger.debug(
                f"Document #{self.document_count} completed in {format_elapsed(elapsed)} "
                f"({found} structs analyzed)"
            )

        except Exception as e:
            elapsed = time() - document_start
            self.logger.error(
                f"Document #{self.document_count} failed after {format_elapsed(elapsed)}: {e}"
            )
            raise

    def count_declaration(self, field_count: int = 0) -> None:
        """Increment counters for one analyzed declaration."""
        self.declaration_count += 1
        self.field_count += field_count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time

        self.logger.info(
            f"Analysis complete: {self.document_count} documents, "
            f"{self.declaration_count} structs, {self.field_count} fields "
            f"in {format_elapsed(total_time)}"
        )

    def log_memory_usage(self) -> None:
        """Log the resident memory of the current process."""
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.document_count = 0
        self.declaration_count = 0
        self.field_count = 0
        self.operation_stack.clear()
