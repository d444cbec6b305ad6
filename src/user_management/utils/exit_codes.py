"""
Exit codes for the usermgmt CLI.

Semantic exit codes so scripts can tell a rejected save from a missing user.
"""

# Success
SUCCESS = 0

# General error (unspecified, including storage failures)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5

# Input rejected by validation or not persisted by the backend
ERROR_REJECTED = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_REJECTED: "ERROR_REJECTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")

