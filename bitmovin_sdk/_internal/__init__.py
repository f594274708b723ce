"""Internal modules for the Bitmovin SDK.

These are not intended for direct use in application code.

Modules:
    http - Transport construction
    redaction - Masking of credentials in log output
"""
