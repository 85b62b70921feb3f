"""Entrypoints (inbound adapters) for TRASHPANDA.

Expose the helpers to the outside world. Currently only the command line.
Parse and validate inputs, call the helper modules, and present results.
"""
