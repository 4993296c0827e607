"""Test package for weightgraph."""
