"""Bootstrap the message bus with handlers and their dependencies."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cwver.adapters.clock import SystemClock
from cwver.service_layer.handlers import QUERY_HANDLERS
from cwver.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from cwver.interfaces.clock import Clock
    from cwver.service_layer.queries import Query


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_message_bus(
    query_handlers: dict[type[Query], Callable[..., Any]], clock: Clock
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"clock": clock}
    injected_query_handlers = {
        query_type: inject_dependencies(handler, dependencies)
        for query_type, handler in query_handlers.items()
    }
    return MessageBus(query_handlers=injected_query_handlers)


def bootstrap(clock: Clock | None = None) -> AppContainer:
    """Bootstrap the message bus with handlers and a clock.

    Args:
        clock: Source of today's date; defaults to the system clock.
    """
    message_bus = build_message_bus(QUERY_HANDLERS, clock or SystemClock())
    return AppContainer(message_bus=message_bus)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
