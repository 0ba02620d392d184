"""
Location search over the state → district → subDistrict → village hierarchy.
"""
from .levels import Filter, Level
from .pipeline import LocationSearch
from .utils.data_loader import DatasetError

__all__ = [
    'DatasetError',
    'Filter',
    'Level',
    'LocationSearch',
]
