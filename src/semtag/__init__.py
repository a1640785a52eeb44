"""Semantic-version source backed by annotated git tags."""
