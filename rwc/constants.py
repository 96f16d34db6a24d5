"""Shared constants for rwc."""

RWC_HOME_EXT = ".rwc"  # user-level config directory suffix

# Streaming strategies read this many bytes per chunk
BUFFER_SIZE = 1048576

# Metric names, in column order
METRICS = ("bytes", "chars", "words", "lines")

# Display label for anonymous standard input
STDIN_LABEL = "Stdin"

# Display label for the aggregate row
TOTALS_LABEL = "Totals"
