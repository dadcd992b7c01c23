"""Compile, run, verify and watch small programming exercises."""

__version__ = "4.4.0"