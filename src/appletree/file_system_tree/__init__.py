"""In-memory tree model of a rendered directory, built on anytree.

This package collects the entries produced by the tree walker into an anytree
hierarchy, which supports counting and structured (JSON) export.
"""
