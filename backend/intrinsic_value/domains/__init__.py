"""
Domains package for organizing business logic into clear, separated modules.

This package contains one domain:
- valuation: Intrinsic value calculation (two-stage DCF and classification)
"""
