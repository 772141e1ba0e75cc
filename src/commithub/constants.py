"""Constants used throughout CommitHub."""

# Version
VERSION = "0.1.0"

# Directory names
REPO_DIR = ".commithub"
OBJECTS_DIR = "objects"

# File names
HEAD_FILE = "HEAD"
INDEX_FILE = "index"

# Hash algorithm
HASH_ALGORITHM = "sha1"
HASH_LENGTH = 40  # SHA-1 produces 40 hex characters

# Exit codes
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2
EXIT_DATA_ERROR = 3

# Log output
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
