"""Message bus implementation for handling queries."""

import logging
from collections.abc import Callable
from typing import Any

from cwver.domain.errors import DomainError

from .queries import Query

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForQuery(LookupError):
    """Exception raised when no handler is found for a query."""

    def __init__(self, query: Query) -> None:
        super().__init__(f"No handler found for query {type(query).__name__}")


class MessageBus:
    """A simple message bus for handling queries.

    The main responsibility of the message bus is to route queries to their
    appropriate handlers and hand back the handler's result. It also manages
    logging and error handling during the dispatch process.

    Args:
        query_handlers: A mapping of query types to their handlers.
            Note that handlers should be callables that accept a single query argument.
            Additional dependencies (i.e. a clock) should be injected via closures
            or other means.

    Note:
        This implementation is synchronous; every query is answered in place.
    """

    def __init__(self, query_handlers: dict[type[Query], Callable[..., Any]]) -> None:
        self._query_handlers = query_handlers

    def handle(self, query: Query) -> Any:
        """Handle a query by dispatching it to the appropriate handler.

        Args:
            query: The query to handle.

        Returns:
            Whatever the handler returns.

        Raises:
            NoHandlerForQuery: If no handler is found for the query type.
            Exception: If the handler raises an exception.
        """

        if handler := self._query_handlers.get(type(query)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling query %s with handler %s", query, handler_name)
            try:
                return handler(query)
            except DomainError as e:
                logger.debug("Query %s rejected by %s: %s", query, handler_name, e)
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling query %s with handler %s", query, handler_name
                )
                raise
        logger.error("No handler found for query %s", type(query).__name__)
        raise NoHandlerForQuery(query)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
