"""Allocation data preparation domain."""
