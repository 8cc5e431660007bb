"""Deterministic career scoring engine."""
