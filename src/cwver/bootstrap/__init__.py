"""Bootstrap (composition root) for CWVER.

Assembles the application at runtime: wires concrete adapters (the clock) to
service-layer query handlers and composes the message bus.

Import rules:
- Entry points import *this* package to obtain a ready message bus.
- This package may import: `cwver.adapters`, `cwver.service_layer`,
  `cwver.interfaces`, `cwver.domain`, and `cwver.config`.
- Inner layers must not import `cwver.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
