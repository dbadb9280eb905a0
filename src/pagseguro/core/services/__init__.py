"""Orchestration services built on top of the adapters."""
