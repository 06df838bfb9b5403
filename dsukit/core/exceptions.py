# -----------------------------------------------------------------------------
# dsukit - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of dsukit.
#
# dsukit is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


"""
Exception hierarchy for dsukit.

Every error raised by the library derives from DsuError so callers can
handle library failures in one place. Errors that mirror a builtin
(out of range indices, unknown keys) also derive from that builtin.
"""

import functools
from collections.abc import Hashable

import typer
from loguru import logger


class DsuError(Exception):
    """
    Base exception for all dsukit errors.

    All dsukit exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a DsuError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ElementOutOfRangeError(DsuError, IndexError):
    """
    Raised when an element falls outside [base, base + size). The core
    structure always uses base 0; commands report the labels users typed.

    This is a programming error on the caller's side (it tracked the
    wrong universe size) and is never clamped or ignored.
    """

    def __init__(self, element, size: int, details: str = None, base: int = 0):
        self.element = element
        self.size = size
        self.base = base
        super().__init__(
            f"Element ({element}) is out of disjoint set bounds: [{base}, {base + size})",
            details,
        )


class ValidationError(DsuError):
    """
    Input validation errors.

    Raised when a value handed to the library fails validation checks,
    such as a negative universe size or a duplicated key.
    """

    pass


class UnknownKeyError(ValidationError, KeyError):
    """Raised when a keyed lookup names a key that was never registered."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InputFormatError(ValidationError):
    """
    Malformed edge-list input.

    Carries the 1-based line number of the offending line when known.
    """

    def __init__(self, message: str, details: str = None, line_number: int = None):
        self.line_number = line_number
        super().__init__(message, details)


class ConfigurationError(DsuError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, missing,
    or contain incompatible settings.
    """

    pass


# Convenience functions for creating common errors
def element_out_of_range(element, size: int, base: int = 0) -> ElementOutOfRangeError:
    """Create an ElementOutOfRangeError for a label outside [base, base + size)."""
    return ElementOutOfRangeError(
        element,
        size,
        "Elements are dense integer labels; check the size the structure was created with",
        base=base,
    )


def invalid_size(size) -> ValidationError:
    """Create a ValidationError for a universe size that is not a non-negative int."""
    return ValidationError(
        f"Invalid disjoint set size: {size!r}",
        "The size must be a non-negative integer",
    )


def malformed_edge_line(line_number: int, line: str, reason: str) -> InputFormatError:
    """Create an InputFormatError for an unparsable edge-list line."""
    return InputFormatError(
        f"Malformed edge on line {line_number}: {line.strip()!r}",
        reason,
        line_number=line_number,
    )


def path_not_found(path: str) -> ValidationError:
    """Create a ValidationError for non-existent paths."""
    return ValidationError(
        f"Path not found: {path}",
        "Please check that the path exists and is accessible",
    )


def unknown_key(key: Hashable) -> UnknownKeyError:
    """Create an UnknownKeyError for a key missing from a keyed disjoint set."""
    return UnknownKeyError(
        f"Unknown key: {key!r}",
        "Keys must be registered when the keyed disjoint set is created",
    )


def handle_dsu_exception(func):
    """
    Decorator for CLI entry points.

    Logs DsuError failures and turns them into a non-zero exit code
    instead of a traceback. typer control flow exceptions pass through.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort):
            raise
        except DsuError as e:
            logger.error(e.message)
            if e.details:
                logger.debug(f"Details: {e.details}")
            raise typer.Exit(1) from e
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            raise typer.Exit(130) from None

    return wrapper
