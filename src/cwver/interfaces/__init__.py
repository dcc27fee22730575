"""Interfaces (application boundary) for CWVER.

Defines framework-free application contracts shared by the service layer and
adapters (e.g., clocks). Business rules stay out of this package.

Dependency rule: this package is independent, do not import from any
`cwver.*` modules. It may be imported by `cwver.service_layer`,
`cwver.adapters`, and `cwver.bootstrap`.
"""
