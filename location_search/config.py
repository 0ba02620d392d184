"""
Configuration settings for location search.
"""
import logging
from pathlib import Path


# Base paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / 'data'

# Default dataset (array of states → districts → subDistricts → villages)
DATA_FILE = DATA_DIR / 'sample_locations.json'

# Matcher thresholds (0-1 scale, 0 = field must start with the query)
SEARCH_THRESHOLD = 0.0   # search(): near-exact only
FUZZY_THRESHOLD = 0.1    # fuzzy_search(): mild fuzziness

# How far into the field a matching span may start (0 = anchored at the first character)
SEARCH_DISTANCE = 0

# Trie pre-filter settings
PREFIX_LENGTH = 3             # Characters of the query used to look up candidate words
PREFIX_BACKOFF_FUZZY = True   # fuzzy_search(): shorten the prefix when it matches no stored name

# Ranking tie-break: Levenshtein distance between query and whole field value
RANK_TIE_BREAK_EDIT_DISTANCE = True

# Debug logging flags (can be toggled independently)
DEBUG_QUERY = True     # Log per-phase candidate counts and timing for each query
DEBUG_BUILD = True     # Log record store counts and trie size after construction

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.INFO):
    """Configure root logging for entry points (CLI, web app)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
