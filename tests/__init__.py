"""
Test suite for the Vector3 geometry core

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
