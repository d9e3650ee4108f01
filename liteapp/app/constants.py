"""
Application-wide constants and limits.
"""

MIN_KEY_WIDTH = 12  # Minimum width of the command column in overview help
MAX_COMMAND_NAME_LENGTH = 255  # Maximum length for command names

HELP_OPTS = ("h", "help")  # Named options that request per-command help

NO_DESCRIPTION = "No description for the command"
