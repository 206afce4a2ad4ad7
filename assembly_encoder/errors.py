"""
Errors raised by the assembly encoding pipeline.

Every one of these aborts the current run; there is no partial output.
"""


class AssemblyEncoderError(Exception):
    """Base class for all pipeline failures."""


class TraversalError(AssemblyEncoderError):
    """A directory entry could not be read while walking the input tree."""


class MetadataMissingError(AssemblyEncoderError):
    """Required metadata files are absent (only raised in strict mode)."""

    def __init__(self, root, missing):
        self.root = root
        self.missing = sorted(missing)
        super().__init__(
            f"Missing metadata files under {root}: {', '.join(self.missing)}"
        )


class AssemblyNotFoundError(AssemblyEncoderError):
    """No GCA_-prefixed entry exists under the input root."""


class SequenceReadError(AssemblyEncoderError):
    """A selected sequence file could not be opened, read or decoded."""
