"""Intrinsic value calculation service."""
