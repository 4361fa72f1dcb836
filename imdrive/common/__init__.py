"""Common models and utilities for machine drives."""
