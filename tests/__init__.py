# ShaVault Test Suite
"""
Test suite including:
- Unit tests (constants, padding, compression, digest encoding)
- Integration tests (reference oracle, CLI, concurrency, logging)
- Security tests (invalid inputs, avalanche)

Run with: pytest
"""
