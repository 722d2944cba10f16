"""Shepherd - weekly planner for ministry, family and personal growth."""

__version__ = "0.1.0"
