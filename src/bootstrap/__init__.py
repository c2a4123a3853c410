"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so request handlers
can obtain lifecycle services without importing infrastructure directly.
"""
