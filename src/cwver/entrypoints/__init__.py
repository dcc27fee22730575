"""Entrypoints (inbound adapters) for CWVER.

Expose the application to the outside world through the command line. Parse
and validate inputs, send queries through the message bus, and present
results.

Dependency rule: may import `cwver.bootstrap` and `cwver.service_layer`;
avoid importing `cwver.adapters` directly.
"""
