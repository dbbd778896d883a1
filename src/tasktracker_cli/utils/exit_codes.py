"""
Exit codes for Task Tracker CLI.

Each error kind maps to its own exit code so scripts can tell a missing task
apart from a broken task file.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (also used by Click for usage errors)
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 3

# Task file could not be created, read, written or parsed
ERROR_STORAGE = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Task not found",
        ERROR_STORAGE: "Task file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")
