"""Utility helpers for nhlstreams."""

from nhlstreams.utils.logging_setup import setup_logging

__all__ = ["setup_logging"]
