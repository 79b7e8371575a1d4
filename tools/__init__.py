"""Standalone maintenance scripts. Run from the repository root, e.g. `python -m tools.ordinal_drift`."""
