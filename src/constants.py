"""Application-wide constants and defaults.

This module centralizes the message templates and default values used by the
pattern demos so that tests and demos agree on the exact wording.
"""

import os

# =============================================================================
# Proxy Message Templates
# =============================================================================
READ_MESSAGE = "The value of {key} is {value}"
CHANGE_MESSAGE = "Changed {key} from {old} to {new}"
MISSING_PROPERTY_MESSAGE = "This property doesn't exist in object"
NUMERIC_AGE_MESSAGE = "Sorry you can only pass numeric value for age"
INVALID_NAME_MESSAGE = "Invalid name"

# =============================================================================
# Validation Defaults
# =============================================================================
DEFAULT_MIN_NAME_LENGTH = 2

# =============================================================================
# Singleton Defaults
# =============================================================================
DEFAULT_COUNTER_START = 0

# =============================================================================
# Prototype Demo Messages
# =============================================================================
BARK_MESSAGE = "Woof!"
PLAY_MESSAGE = "Playing now!"
FLY_MESSAGE = "Flying!"

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
