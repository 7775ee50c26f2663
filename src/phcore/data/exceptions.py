# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)


class PersistenceError(ValueError):
    """Base class for errors raised by the persistence computations."""


class InvalidComplexError(PersistenceError):
    """Closure invariant violated, duplicate simplices, or a dangling boundary reference."""


class FormatError(PersistenceError):
    """Malformed buffer or matrix handed to an input adapter."""


class DimensionMismatchError(PersistenceError):
    """Requested dimension lies outside the dimensions of the complex."""
