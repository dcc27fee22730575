"""Adapters (infrastructure) for CWVER.

Provide concrete implementations of the ports in `cwver.interfaces`
(e.g., the system clock).

Dependency rule: may import `cwver.interfaces`; the domain must not import
this package.
"""
