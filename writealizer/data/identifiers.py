import re

import pandas as pd

from .schemas import SchemaError


EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+$")


class IdentifierRule:
    """Derive a row ID from a path-like ``filename`` value.

    The basename (split on ``/``) has its extension stripped, is split on
    ``separator`` and ``segment`` selects the piece kept. Analysis tools run
    on Windows write backslash paths, so the default separator is ``\\`` and
    the default segment is the last one.
    """

    __slots__ = ("separator", "segment")

    def __init__(self, separator="\\", segment=-1):
        if not separator:
            raise ValueError("Identifier separator must be a non-empty string.")
        self.separator = separator
        self.segment = int(segment)

    @classmethod
    def from_config(cls, config):
        return cls(separator=config.separator, segment=config.segment)

    def extract(self, value):
        if pd.isna(value):
            raise SchemaError("Cannot derive an ID from a missing filename value.")
        text = str(value).strip()
        basename = text.rsplit("/", 1)[-1]
        stem = EXTENSION_PATTERN.sub("", basename)
        parts = stem.split(self.separator)
        try:
            identifier = parts[self.segment]
        except IndexError:
            raise SchemaError(
                f"Cannot derive an ID from {text!r}: segment {self.segment} requested "
                f"but only {len(parts)} {self.separator!r}-delimited segment(s) present."
            ) from None
        if not identifier:
            raise SchemaError(f"Cannot derive an ID from {text!r}: selected segment is empty.")
        return identifier

    def apply(self, values):
        return [self.extract(value) for value in values]


__all__ = ["IdentifierRule", "EXTENSION_PATTERN"]
