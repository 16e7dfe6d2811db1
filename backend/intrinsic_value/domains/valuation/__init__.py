"""
Valuation Domain

This domain handles intrinsic value calculations.
Includes the two-stage DCF engine and the over/under-valuation classification.
"""
