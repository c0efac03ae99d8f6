"""Error codes for CLI exit status.

Every failure the build pipeline can report maps to one of these codes, so
scripts wrapping `fdist` can tell a bad invocation from a broken toolchain
or a failed Flutter build.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the fdist command.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: User error (bad flags, missing project, invalid pubspec)
    - 2: Environment error (flutter or env2dart not on PATH)
    - 3: Build error (an external command failed)
    - 5: I/O error (expected artifact or lockfile not found)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
