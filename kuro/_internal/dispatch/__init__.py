"""Dispatcher for kuro requests.

WARNING: This is an internal module. Use the verb functions in ``kuro``.
"""

from kuro._internal.dispatch.client import ado, do

__all__ = ["do", "ado"]
