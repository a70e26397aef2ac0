"""
Exceptions raised while parsing unified diff text.

Every parser stage raises a subclass of UnidiffError and lets it propagate to
the caller; nothing inside the package catches them.
"""

from typing import Optional


class UnidiffError(Exception):
    """Base class for unified diff parsing failures.

    Attributes:
        message: Explanation of the error
        stage: Parser stage that failed (if available)
        line_number: 1-based input line the failure refers to (if available)
    """

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.message = message
        self.stage = stage
        self.line_number = line_number

        details = []
        if stage:
            details.append(f"stage={stage}")
        if line_number is not None:
            details.append(f"line={line_number}")

        full_message = message
        if details:
            full_message = f"{message} [{', '.join(details)}]"

        super().__init__(full_message)


class FormatError(UnidiffError):
    """Input does not follow the expected literal/structural grammar.

    Raised for a missing or misplaced delimiter, too few input lines, an
    unrecognized line prefix or an integer field that does not parse.
    """


class TimestampParseError(UnidiffError):
    """A header timestamp does not match ``YYYY-MM-DD HH:MM:SS[.f] +HHMM``.

    Attributes:
        text: The timestamp text that failed to parse
    """

    def __init__(
        self,
        message: str,
        text: str,
        stage: Optional[str] = "timestamp",
        line_number: Optional[int] = None,
    ):
        self.text = text
        super().__init__(message, stage=stage, line_number=line_number)
