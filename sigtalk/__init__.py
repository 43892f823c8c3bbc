"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Also provides the helpers it is built from: a printf-style formatter, a
per-descriptor line reader, and string, character and descriptor output
utilities.
"""

__version__ = "0.1.0"