"""The ``trashpanda`` command line."""
