"""Listings app package.

Labor and tractor listings published by providers, with search and
owner-only availability management.
"""
