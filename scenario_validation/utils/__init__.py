"""Shared helpers for the validation engine."""
