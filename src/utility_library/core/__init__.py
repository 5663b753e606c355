"""
Core helpers, independent of any host runtime.

Ordering predicates, numeric, string and enum helpers, collection helpers
and conversion.
"""
