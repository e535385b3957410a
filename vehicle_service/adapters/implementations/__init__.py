"""Concrete vendor adapter implementations."""
