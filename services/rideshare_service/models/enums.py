"""Enum definitions for rideshare service models."""

import enum


class MatchQuality(int, enum.Enum):
    """Outcome of comparing two (source, destination) pairs."""

    PERFECT = 0
    PARTIAL = 1
    NONE = 5
