"""Command line interface of CWVER."""
