"""Data structures and library integrations for netalgo.

Submodules are imported explicitly, e.g. ``from netalgo.lib.union_find
import UnionFind``; the top-level ``netalgo`` package re-exports the
public API.
"""
