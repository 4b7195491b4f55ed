"""
fullname_parser.core package

- context:    per-call ParseState
- pipeline:   ordered pass runner
- exceptions: error hierarchy

This __init__ intentionally exports NOTHING to avoid circular imports
(config imports core.exceptions before logging is available).
"""

__all__ = []
