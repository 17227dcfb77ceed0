"""
Fixed configuration values.

SUS questionnaire layout, significance thresholds and the content size
ceiling. Public functions take these as keyword defaults; nothing is read
from the environment.
"""

# Questionnaire layout
N_ITEMS = 10
N_FIELDS = N_ITEMS + 1         # ten ratings plus the system label
DELIMITER = ';'
RATING_MIN = 1
RATING_MAX = 5
SUS_ITEM_WEIGHT = 2.5          # sum of item contributions (0-40) -> 0-100

# Header fields checked verbatim (0-based)
HEADER_FIRST_PREFIX = "Question 1"
HEADER_LAST_QUESTION = "Question 10"

# Inference
ALPHA = 0.05
CONF_LEVEL = 0.95

# Descriptives
TUKEY_K = 1.5
DECIMALS = 2

# File acquisition ceiling (ca. 1 MB)
MAX_CONTENT_BYTES = 1024 * 1024
