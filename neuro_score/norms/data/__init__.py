"""Normative data, one module per instrument."""
