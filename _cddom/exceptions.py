# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""These are the specific cddom exceptions."""

from __future__ import annotations

from typing import Optional


class CdDomBaseException(Exception):
    pass


class IncompleteColor(CdDomBaseException):
    """
    Raised when a color triplet can't be extracted from a node because one of its
    components is missing or doesn't contain a valid number.
    """

    def __init__(self, color_type: str, field: str, reason: str):
        self.color_type = color_type
        self.field = field
        self.reason = reason
        super().__init__(color_type, field, reason)

    def __str__(self):
        return (
            f"Incomplete {self.color_type} color, component `{self.field}` "
            f"{self.reason}."
        )


class InvalidCodePath(CdDomBaseException, RuntimeError):
    """Raised when a code path that is not expected to be executed is reached."""

    def __init__(self):  # pragma: no cover
        super().__init__(
            "An unintended path was taken through the code. Please report this bug."
        )


class InvalidNumber(CdDomBaseException, ValueError):
    """Raised when a node's text isn't a valid numeric literal."""

    def __init__(self, text: str, message: str = "is not a valid number"):
        self.text = text
        self.message = message
        super().__init__(text, message)

    def __str__(self):
        return f"{self.text!r} {self.message}."


class InvalidOperation(CdDomBaseException):
    """Raised when an invalid operation is attempted by the client code."""

    pass


class ParsingError(CdDomBaseException):
    """
    Raised when the input data can't be parsed to a tree. The ``message`` is the
    diagnostic that the employed parser reported, the position is available as
    ``line`` and ``column`` if the parser provides it.
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message, line, column)

    def __str__(self):
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class ParsingValidityError(ParsingError):
    pass


class ParsingEmptyStream(ParsingError):
    def __init__(self):
        super().__init__("The input stream is empty.")


__all__ = (
    CdDomBaseException.__name__,
    IncompleteColor.__name__,
    InvalidCodePath.__name__,
    InvalidNumber.__name__,
    InvalidOperation.__name__,
    ParsingEmptyStream.__name__,
    ParsingError.__name__,
    ParsingValidityError.__name__,
)
