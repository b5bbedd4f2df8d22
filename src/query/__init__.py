"""Catalog query layer.

This module derives cascading filter options and filtered product
subsets as pure functions of the store contents and filter state.
"""
