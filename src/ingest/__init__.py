"""Catalog upload ingestion.

This module reads CSV and JSON uploads and maps them into products.
It replaces the record store only when a whole upload succeeds.
"""
