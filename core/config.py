# core/config.py

"""
Program-wide settings. Environment variables override the defaults where noted.
"""

import os

# storage key holding the serialized list of courses
SAVE_KEY = "courses"

# GRADEBOOK_STORE overrides the default store location
STORE_ENV_VAR = "GRADEBOOK_STORE"
DEFAULT_STORE_DIR = os.path.join(os.path.expanduser("~"), "Documents", "Gradebooks")
DEFAULT_STORE_FILENAME = "gradebook.json"

# GRADEBOOK_LOG_LEVEL accepts any logging level name
LOG_LEVEL_ENV_VAR = "GRADEBOOK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Standing thresholds for averages (percent)
GOOD_STANDING_MIN = 75.0
FAIR_STANDING_MIN = 50.0


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
