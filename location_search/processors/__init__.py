"""
Location search processors - 3 phases
"""
from . import phase1_filters
from . import phase2_prefilter
from . import phase3_matching

__all__ = [
    'phase1_filters',
    'phase2_prefilter',
    'phase3_matching',
]
