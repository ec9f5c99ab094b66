# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for cronkit."""


class CronkitError(Exception):
    """Base exception for all cronkit errors."""


class MissingInputError(CronkitError):
    """A required argument was absent or empty."""


class CronSyntaxError(CronkitError):
    """Malformed field grammar or wrong number of fields."""


class CronRangeError(CronkitError):
    """A well-formed value falls outside its field's domain."""


class UnparseableDescriptionError(CronkitError):
    """No generator rule matched a schedule description."""


class UnknownActionError(CronkitError):
    """The dispatcher received an unrecognised action tag."""


class ExhaustedError(CronkitError):
    """The occurrence search passed its horizon without enough matches."""
