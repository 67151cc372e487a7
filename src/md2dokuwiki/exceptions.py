#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2dokuwiki library.

This module defines specialized exception classes for the error conditions
that can occur while loading rule sets, converting documents and reading or
writing files.

Exception Hierarchy
-------------------
- Md2DokuWikiError (base exception)

  - ValidationError (parameter/option validation)
    - TitleError (first line does not follow the RFC title convention)

  - FileError (file access and I/O)
    - FileNotFoundError (file or directory doesn't exist)
    - FileAccessError (permissions, undecodable content)

  - OutputWriteError (output file or directory write failures)

  - RuleError (rule compilation and substitution failures)

"""

from typing import Any


class Md2DokuWikiError(Exception):
    """Base exception class for all md2dokuwiki-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2DokuWikiError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class TitleError(ValidationError):
    """Exception raised when a document's first line lacks the RFC title prefix.

    Only raised when strict title checking is enabled; otherwise the
    converter logs a warning and falls back to the bare first line.

    Parameters
    ----------
    first_line : str
        The first line of the document
    prefix : str
        The prefix the line was expected to start with
    message : str, optional
        Custom error message. If not provided, generates one from the line

    """

    def __init__(self, first_line: str, prefix: str, message: str | None = None):
        """Initialize the title error."""
        if message is None:
            message = f"First line {first_line!r} does not start with the RFC title prefix {prefix!r}"
        super().__init__(message, parameter_name="title_prefix", parameter_value=first_line)
        self.first_line = first_line
        self.prefix = prefix


class FileError(Md2DokuWikiError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file or input directory cannot be found.

    Parameters
    ----------
    file_path : str
        Path that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be read.

    This includes permission errors and content that cannot be decoded
    with the configured encoding.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(Md2DokuWikiError):
    """Exception raised when writing an output file or directory fails.

    Parameters
    ----------
    file_path : str
        Path to the output that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str
        Path to the file that failed to write

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class RuleError(Md2DokuWikiError):
    """Exception raised when a rule cannot be compiled or applied.

    Parameters
    ----------
    message : str
        Description of the rule failure
    rule_name : str, optional
        Name of the rule that failed
    original_error : Exception, optional
        The underlying exception, usually a ``re.error``

    Attributes
    ----------
    rule_name : str or None
        Name of the rule that failed

    """

    def __init__(self, message: str, rule_name: str | None = None, original_error: Exception | None = None):
        """Initialize the rule error."""
        super().__init__(message, original_error)
        self.rule_name = rule_name
