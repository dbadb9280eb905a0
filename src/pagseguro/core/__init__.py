"""Core of the client: configuration, domain, conversion and errors.

The core depends on abstractions (`core.interfaces`) only; HTTP and logging
implementations live in `pagseguro.adapters`.
"""
