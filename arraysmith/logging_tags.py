# arraysmith/logging_tags.py
"""
Central place for defining logging subsystem tags.

Tags prefix debug messages so output from the different layers stays
searchable.
"""

BUFFER = "[BUFFER]"
BUILDER = "[BUILDER]"
BUILD = "[BUILD]"
CONFIG = "[CONFIG]"
