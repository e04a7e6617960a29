"""
Test suite for encapsulation-lab

Contains:
- tests/unit/          : Unit tests for individual value objects
"""
