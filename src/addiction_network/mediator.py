"""
Command/query mediator.

Commands and queries are frozen dataclasses deriving from Request. Each
request type maps to one handler factory; requests travel through the
registered pipeline behaviors before reaching their handler.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, TypeVar

TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')


class Request(Generic[TResponse], ABC):
    """
    Base class for commands and queries.

    The type parameter names the handler's response type:

        @dataclass(frozen=True)
        class TravelCommand(Request[TravelOutcome]):
            destination: str
    """
    pass


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """Handles exactly one request type"""

    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        pass


class PipelineBehavior(ABC):
    """
    Middleware wrapped around every handler.

    A behavior may inspect the request, call next_handler() to continue,
    and post-process or translate what comes back.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler):
        pass


class Mediator:
    """Routes requests through behaviors to their registered handler"""

    def __init__(self):
        self._handlers: Dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: List[PipelineBehavior] = []

    def register_handler(self, request_type: type, handler_factory: Callable[[], RequestHandler]):
        """
        Register a handler factory for a request type.

        The factory runs once per request, so handlers stay stateless.
        """
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior):
        """Append a behavior; the first registered runs outermost"""
        self._behaviors.append(behavior)

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """
        Dispatch a request through the pipeline.

        Raises:
            ValueError: If no handler is registered for the request type
        """
        request_type = type(request)
        if request_type not in self._handlers:
            raise ValueError(f"No handler registered for {request_type.__name__}")

        async def final_handler():
            handler = self._handlers[request_type]()
            return await handler.handle(request)

        pipeline = final_handler
        for behavior in reversed(self._behaviors):
            pipeline = lambda b=behavior, n=pipeline: b.handle(request, n)

        return await pipeline()

    def send(self, request: Request[TResponse]) -> TResponse:
        """Blocking dispatch for synchronous callers such as the CLI"""
        return asyncio.run(self.send_async(request))
