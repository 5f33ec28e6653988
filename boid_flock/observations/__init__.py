"""Observation helpers: measure the flock, don't draw it."""
