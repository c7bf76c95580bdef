"""Intent, slot and request type names used by the Ask Devoxx skill."""

from enum import Enum

SLOT_COMMAND = "Command"


class IntentName(str, Enum):
    """Enumeration of the intents recognized by the skill."""

    ONE_SHOT_COMMAND = "OneShotCommandIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"


class RequestType(str, Enum):
    """Request types delivered by the voice platform."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


__all__ = ["IntentName", "RequestType", "SLOT_COMMAND"]
