"""
Utility modules.

This module provides:
- io_utils: Input/output utilities for JSON and CSV files
"""

from .io_utils import (
    load_json,
    save_json,
    save_trace_to_csv,
    load_trace_from_csv,
    ensure_serializable
)

__all__ = [
    'load_json',
    'save_json',
    'save_trace_to_csv',
    'load_trace_from_csv',
    'ensure_serializable'
]
