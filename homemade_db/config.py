"""
Configuration file for the homemadeDB front-end.
Contains the user-facing literals and the tunable runtime behavior of the REPL.
"""

# ============================================================================
# REPL Output Literals
# ============================================================================

# Prompt printed before every read (no trailing newline)
PROMPT = 'homemadeDB > '

# Printed by the .exit meta-command
EXIT_MESSAGE = 'Exiting - Good bye.'

# Printed after a statement was prepared and executed
EXECUTED_MESSAGE = 'Executed.'

# Unknown meta-command
UNRECOGNIZED_COMMAND_FORMAT = "Unrecognized command: '{}'"

# Unknown statement keyword (the double space is part of the literal)
UNRECOGNIZED_KEYWORD_FORMAT = "Unrecognized  keyword at start of: '{}'"

# Shown on Ctrl+C while waiting for input
INTERRUPT_HINT = 'Use .exit to quit'

# ============================================================================
# Meta-command Configuration
# ============================================================================

# Every meta-command starts with this character
META_COMMAND_PREFIX = '.'

# ============================================================================
# End-of-input Configuration
# ============================================================================

# What happens when the input stream ends or cannot be read:
#   'shutdown' - leave the loop with exit status 0
#   'fail'     - raise InputSourceError (fatal precondition violation)
EOF_SHUTDOWN = 'shutdown'
EOF_FAIL = 'fail'
EOF_POLICIES = [EOF_SHUTDOWN, EOF_FAIL]
ON_EOF = EOF_SHUTDOWN

# Exit statuses returned by main()
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# ============================================================================
# Debug and Logging
# ============================================================================

# Enable debug mode (DEBUG level, log file enabled)
DEBUG = False

# Log file location
LOG_FILE = 'homemade_db.log'

# Log line format
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'

# Verbose output (mirror log records to stderr)
VERBOSE = False
