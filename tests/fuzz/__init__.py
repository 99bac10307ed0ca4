"""Fuzz properties for numeralcodec.

This package contains:
- test_roundtrip_property: write-read-write stability and reader robustness
  over random option sets

Run with: pytest -m fuzz

Python 3.13+.
"""
