"""Induction machine drive models and utilities."""
