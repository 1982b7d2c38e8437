"""Constant tables shared across blurhash-map modules."""
