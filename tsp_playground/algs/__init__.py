"""Geometry primitives and tour heuristics."""
