"""Unit tests for the metadata package.

Co-located with the package so it can be extracted with its tests intact.
"""
