"""
Test suite for bigint_rsa

Contains:
- tests/unit/          : Unit tests for individual modules
"""
