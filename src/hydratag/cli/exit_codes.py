# topmark:header:start
#
#   project      : HydraTag
#   file         : exit_codes.py
#   file_relpath : src/hydratag/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes of the HydraTag CLI.

Values above 2 follow the BSD ``sysexits.h`` conventions, so scripts can tell
usage, input and I/O problems apart::

    result = subprocess.run(["hydratag", "compile", "templates/"])
    if result.returncode == ExitCode.WOULD_CHANGE:
        print("Templates need compiling.")
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the HydraTag CLI.

    Attributes:
        SUCCESS (int): Nothing to do, or all requested changes were written.
        FAILURE (int): Generic failure.
        WOULD_CHANGE (int): Dry run found templates that would be rewritten.
        USAGE_ERROR (int): Invalid command line invocation.
        ENCODING_ERROR (int): A template is not valid UTF-8.
        FILE_NOT_FOUND (int): An input path does not exist.
        PIPELINE_ERROR (int): A template could not be compiled (nesting too deep).
        IO_ERROR (int): A template could not be read or written.
        CONFIG_ERROR (int): The effective configuration is invalid.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
