"""Bundled data files (default slope map, contour and weights)."""
