"""Diagnostic HTTP service reporting the runtime environment of its process."""
