"""Hangul name compatibility (이름 궁합) service."""

__version__ = "0.1.0"
