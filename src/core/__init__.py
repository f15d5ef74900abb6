"""
Core unit model, exact arithmetic, payload encoding, and config contracts.

This module contains the foundational building blocks that are independent
of the ledger client and of the network the tests run against.
"""
