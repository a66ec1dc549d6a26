"""Test suite for glowkit.

Test Structure:
- unit/: one directory per package under glowkit.core
  (effects, library, generation, semantics, caching, search, config,
  utils) plus engine/ for the LookEngine facade
- conftest.py: shared fixtures (catalog tree, sample palette, small
  effect catalog)
"""
