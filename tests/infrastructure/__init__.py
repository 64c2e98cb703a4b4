"""Test infrastructure - scripted connections and other test doubles.

This package contains test support code, NOT actual tests.
"""
