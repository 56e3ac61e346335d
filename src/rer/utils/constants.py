"""
Constants and default settings for episode renaming.

This module holds the fallback values used when neither the command line nor
the environment supplies a setting, the environment variable names the CLI
reads, and the status labels reported for every processed file. A `.env` file
in the working directory is loaded on import so its values are visible to the
environment lookups.
"""

from dotenv import load_dotenv

load_dotenv()

# Resource defaults
DEFAULT_NAME = ""
DEFAULT_YEAR = 2023
DEFAULT_SEASON = 1
DEFAULT_EPISODE = 1
DEFAULT_EXTENSION = "mp4"
DEFAULT_PAD_WIDTH = 0
DEFAULT_SOURCE_LABEL = "WEB_DL"
DEFAULT_CLARITY_LABEL = "1080p"
DEFAULT_ENCODE_LABEL = "H264"

# Captured season/episode numbers must fit this range
MAX_CAPTURE_NUMBER = 255

# Named groups read from the user pattern
SEASON_GROUP = "season"
EPISODE_GROUP = "ep"

# Environment variables (command-line flags take precedence)
ENV_PATH = "RER_PATH"
ENV_REGEX = "RER_REGEX"
ENV_NAME = "RER_NAME"
ENV_YEAR = "RER_YEAR"
ENV_SEASON = "RER_SEASON"
ENV_SOURCE = "RER_SOURCE"
ENV_CLARITY = "RER_CLARITY"
ENV_ENCODE = "RER_ENCODE"
ENV_LENIENT = "RER_LENIENT"
ENV_PAD_WIDTH = "RER_PAD_WIDTH"
ENV_DEFAULT_EXT = "RER_DEFAULT_EXT"
ENV_LOG_FILE = "RER_LOG_FILE"

# Processing status codes
STATUS_RENAMED = "RENAMED"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"

# Exit codes
EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_STARTUP_ERROR = 2
