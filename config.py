# config.py
# Central configuration for the DataSplit command line tools

# --- Data split ---
# Fraction of points routed to the test set when --test_ratio is not given
DEFAULT_TEST_RATIO = 0.2

# --- Random seed ---
# 0 means seed from the current time (non-reproducible run)
DEFAULT_SEED = 0

# --- File formats ---
# Delimiter used for files whose extension is not recognised
DEFAULT_DELIMITER = ','

# --- Logging ---
LOG_DIR = 'logs'
LOG_LEVEL = 'INFO'
# If True, also echo log records to stderr (warnings are meant for the user)
LOG_TO_CONSOLE = True
