"""Monetary domain package.

This package contains the Money value type and everything around it: Currency definitions and
the currency table, rounding modes, errors, JSON serialization and locale-aware formatting.
Amounts are held as integer minor units, so arithmetic is exact.
"""
