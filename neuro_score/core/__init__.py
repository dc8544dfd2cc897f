"""Persistence of test results."""
