"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies
for marketplace records, including ISO Currency definitions, display locales
and Money calculations with exact decimal arithmetic.
"""
