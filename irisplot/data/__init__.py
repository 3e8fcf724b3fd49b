"""
Dataset loading and validation module.
"""

from .loader import IrisLoader, detect_label_style, species_domain
from .validator import DataValidator, PREFIXED_SPECIES, PLAIN_SPECIES

__all__ = [
    'IrisLoader',
    'DataValidator',
    'detect_label_style',
    'species_domain',
    'PREFIXED_SPECIES',
    'PLAIN_SPECIES',
]
