"""Exceptions raised by the sketch package.

Only construction can fail. Once a sketch exists, add() and estimate()
are total: a counter that reaches COUNTER_MAX saturates instead of
raising, so there is no overflow exception.
"""
from __future__ import annotations


class SketchError(Exception):
    """Base class for every error raised by wordsketch."""


class InvalidParameter(SketchError, ValueError):
    """A sizing input, dimension, counter payload or name is out of range."""
