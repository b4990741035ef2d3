"""Marketplace report adapters."""
