"""Internal modules for kuro.

These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher and JSON codec
    http - Shared HTTP client configuration
    redaction - Header redaction for debug traces
"""
