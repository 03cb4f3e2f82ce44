"""
Creature variation tokens.
"""

from enum import Enum

from .table import build_token_map


class CreatureVariationTag(Enum):
    """Rule tokens read inside a CREATURE_VARIATION object."""

    CV_NEW_TAG = "CV_NEW_TAG"
    CV_ADD_TAG = "CV_ADD_TAG"
    CV_REMOVE_TAG = "CV_REMOVE_TAG"
    CV_CONVERT_TAG = "CV_CONVERT_TAG"
    CVCT_MASTER = "CVCT_MASTER"
    CVCT_TARGET = "CVCT_TARGET"
    CVCT_REPLACEMENT = "CVCT_REPLACEMENT"
    CV_NEW_CTAG = "CV_NEW_CTAG"
    CV_ADD_CTAG = "CV_ADD_CTAG"
    CV_REMOVE_CTAG = "CV_REMOVE_CTAG"
    CV_CONVERT_CTAG = "CV_CONVERT_CTAG"
    UNKNOWN = "UNKNOWN"


CREATURE_VARIATION_TOKENS = build_token_map(CreatureVariationTag)
