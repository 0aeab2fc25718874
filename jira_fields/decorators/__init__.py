"""Decorators shared across the package."""
