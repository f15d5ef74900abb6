"""
Test suite for the ledger test helpers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
