"""Constants for pytextkit - shared sentinels and default settings."""

# Sentinels
EMPTY = ""
INDEX_NOT_FOUND = -1
SPACE = " "

# Wrapping defaults
DEFAULT_BREAK_PATTERN = SPACE
DEFAULT_WRAP_LENGTH = 80
