"""
FILE: ticklist/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - RECORD_DELIMITER: Separator between flag and description on disk
  - FLAG_DONE / FLAG_TODO: Flag alphabet for the task file
  - LINE_SEPARATOR: Separator between records
  - DEFAULT_FILENAME / DEFAULT_DIRNAME: Task file location defaults
  - ENV_TASKS_FILE / ENV_LOG_LEVEL: Environment variable names
NOTES:
  - Single source of truth for the on-disk format
"""

# Task file format
RECORD_DELIMITER = "|"
LINE_SEPARATOR = "\n"
FLAG_DONE = "1"
FLAG_TODO = "0"

# Task file location
DEFAULT_DIRNAME = ".ticklist"
DEFAULT_FILENAME = "tasks.txt"

# Environment overrides
ENV_TASKS_FILE = "TICKLIST_FILE"
ENV_LOG_LEVEL = "TICKLIST_LOG_LEVEL"
