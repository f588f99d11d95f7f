"""Validation layer: request bodies and camelCase response shapes."""
