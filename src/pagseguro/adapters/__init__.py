"""Adapters: concrete HTTP, logging and resource implementations.

Everything that performs I/O lives here; the core only sees abstractions.
"""
