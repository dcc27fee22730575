"""Integration tests: the wired application, adapters included."""
