"""Adapters – concrete backends for the versioned store port."""
