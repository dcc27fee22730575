"""CWVER

Work with calendar week version strings such as ``21w45.7`` (ISO week-year
2021, week 45, Sunday): convert them to and from dates, and find the
workday(s) in the middle of a regression range for bisecting.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
