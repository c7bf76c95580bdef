"""Intent router dispatching platform intents to reply handlers."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, MutableMapping

from ask_devoxx_engine.core.exceptions import InvalidIntentError
from ask_devoxx_engine.core.models import IntentEvent, SpokenReply

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer


IntentHandler = Callable[[IntentEvent, "ServiceContainer"], SpokenReply]


def _key(intent_name: str | Enum) -> str:
    return intent_name.value if isinstance(intent_name, Enum) else intent_name


class IntentHandlerNotFoundError(InvalidIntentError):
    """Raised when no handler is registered for the requested intent."""


class IntentRouter:
    """Dispatch intents to registered handlers by intent name."""

    def __init__(self, handlers: Mapping[str | Enum, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[str, IntentHandler] = {
            _key(name): handler for name, handler in (handlers or {}).items()
        }

    def register(self, intent_name: str | Enum, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent_name``."""

        self._handlers[_key(intent_name)] = handler

    def unregister(self, intent_name: str | Enum) -> None:
        """Remove a handler if present."""

        self._handlers.pop(_key(intent_name), None)

    def dispatch(self, event: IntentEvent, services: "ServiceContainer") -> SpokenReply:
        """Invoke the handler for ``event.intent_name`` with the provided services."""

        try:
            handler = self._handlers[event.intent_name]
        except KeyError as exc:
            raise IntentHandlerNotFoundError() from exc
        return handler(event, services)

    def handlers(self) -> Mapping[str, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentHandler",
    "IntentHandlerNotFoundError",
]
