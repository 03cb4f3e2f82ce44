"""
Utilities for dfraw-parser.
"""
