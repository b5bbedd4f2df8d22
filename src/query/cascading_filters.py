"""Cascading filter engine.

This module computes dependent option lists and the filtered product
list. Every function is recomputed from its inputs on each call; no
option list is cached between queries.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.types import FilterOptions, FilterState, Product, VehicleApplication


def available_makes(products: Iterable[Product]) -> list[str]:
    """Return distinct vehicle makes across all applications.

    Args:
        products: Store products.

    Returns:
        Sorted unique makes.
    """
    return _sorted_unique(
        application.make for product in products for application in product.applications
    )


def available_models(products: Iterable[Product], make: str) -> list[str]:
    """Return distinct models for a make.

    Args:
        products: Store products.
        make: Selected make; empty means no make chosen.

    Returns:
        Sorted unique models, empty when no make is selected.
    """
    if not make:
        return []
    return _sorted_unique(
        application.model
        for product in products
        for application in product.applications
        if application.make == make
    )


def available_years(products: Iterable[Product], make: str, model: str) -> list[str]:
    """Return distinct year labels for a make and model.

    Args:
        products: Store products.
        make: Selected make.
        model: Selected model.

    Returns:
        Sorted unique year labels, empty unless both are selected.
    """
    if not make or not model:
        return []
    return _sorted_unique(
        application.years
        for product in products
        for application in product.applications
        if application.make == make and application.model == model
    )


def available_categories(
    products: Iterable[Product],
    make: str = "",
    model: str = "",
) -> list[str]:
    """Return distinct categories, narrowed by the vehicle selection.

    The model constraint only applies when a make is also selected.

    Args:
        products: Store products.
        make: Optional selected make.
        model: Optional selected model.

    Returns:
        Sorted unique categories.
    """
    relevant = products
    if make:
        relevant = [
            product
            for product in products
            if any(
                application.make == make and (not model or application.model == model)
                for application in product.applications
            )
        ]
    return _sorted_unique(product.category for product in relevant)


def filter_options(products: Sequence[Product], state: FilterState) -> FilterOptions:
    """Bundle every option list for the current filter state."""
    return FilterOptions(
        makes=tuple(available_makes(products)),
        models=tuple(available_models(products, state.make)),
        years=tuple(available_years(products, state.make, state.model)),
        categories=tuple(available_categories(products, state.make, state.model)),
    )


def apply_filters(products: Iterable[Product], state: FilterState) -> list[Product]:
    """Filter products by vehicle, category, and free-text search.

    Store order is preserved. Products without applications are never
    excluded by the vehicle selection.

    Args:
        products: Store products in order.
        state: Current filter selections.

    Returns:
        Matching products in their original order.
    """
    search_term = state.search.lower()
    filtered: list[Product] = []
    for product in products:
        if product.applications and not any(
            _application_matches(application, state) for application in product.applications
        ):
            continue
        if state.category and product.category != state.category:
            continue
        if search_term and not _matches_search(product, search_term):
            continue
        filtered.append(product)
    return filtered


def _application_matches(application: VehicleApplication, state: FilterState) -> bool:
    return (
        (not state.make or application.make == state.make)
        and (not state.model or application.model == state.model)
        and (not state.year or application.years == state.year)
    )


def _matches_search(product: Product, search_term: str) -> bool:
    if search_term in product.sku.lower():
        return True
    if search_term in product.name.lower():
        return True
    if search_term in product.oem_ref.lower():
        return True
    return any(search_term in reference.part.lower() for reference in product.cross_reference)


def _sorted_unique(values: Iterable[str]) -> list[str]:
    return sorted(set(values))
