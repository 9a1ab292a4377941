"""Domain errors raised by processors."""
from __future__ import annotations


class ProcessorError(Exception):
    """A processor could not handle the submitted configuration."""


class SubmissionCancelledError(ProcessorError):
    """The client went away before the processor finished."""
