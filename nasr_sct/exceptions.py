"""
Exceptions raised by the nasr_sct library.

Soft skips (incomplete entities, unresolved references) never surface as
exceptions; only conditions that must abort a whole extraction run do.
"""


class NasrError(Exception):
    """Base class for all nasr_sct errors."""


class TruncatedDocumentError(NasrError):
    """Raised when a document ends while an element is still open."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Document ended before closing tag of {tag}")


class CoordinateError(NasrError, ValueError):
    """Raised when coordinate text cannot be decoded or is out of range."""


class ArchiveError(NasrError):
    """Raised when a NASR subscription archive is missing expected content."""
