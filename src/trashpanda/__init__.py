"""TRASHPANDA helpers

A grab-bag of small, stateless helpers: URL query-parameter merging, string and
base-64 encoding, array and number utilities, dot-path object access and
three-way comparators for sorting.

Nothing is re-exported here; import helpers from their defining modules, e.g.
``from trashpanda.url import merge_url_params``.
"""

__all__ = ["__version__"]
__version__ = "0.18.1"
