"""
Test suite for secret_recovery

Contains:
- tests/unit/          : Unit tests for individual modules
"""
