"""Barangay e-governance API package."""
