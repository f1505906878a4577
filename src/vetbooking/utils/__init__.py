"""Utility helpers for vetbooking."""
