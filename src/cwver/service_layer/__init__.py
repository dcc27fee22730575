"""Service layer for CWVER.

Implements application use-cases: query objects, their handlers, and the
message bus dispatching between them. Calls the domain and the outbound ports
defined in `cwver.interfaces`.

Dependency rule: may import `cwver.domain` and `cwver.interfaces`, but not
`cwver.adapters` or `cwver.entrypoints`.
"""
