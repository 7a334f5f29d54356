"""Messages exchanged between protocol participants.

Each kind of message is its own frozen dataclass. The wire form is JSON with
an external tag: ``{"Variant": payload}``, or the bare string ``"EmptyMsg"``
for the message without a payload. Byte strings travel as lists of integers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Union

__all__ = [
    "NormalMessage",
    "P2pMessage",
    "SubsetMessage",
    "BroadcastMessage",
    "EmptyMsg",
    "KeyGenSuccessWithResult",
    "SignOfflineSuccessWithResult",
    "SignOnlineSuccessWithResult",
    "SendingMessage",
    "to_dict",
    "from_dict",
    "dumps",
    "loads",
]


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        if not all(
            isinstance(x, int) and not isinstance(x, bool) and 0 <= x <= 255 for x in value
        ):
            raise ValueError("byte values must be integers in 0..255")
        return bytes(value)
    raise ValueError(f"expected bytes, got {type(value).__name__}")


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NormalMessage:
    """A message addressed to a single participant."""

    to: str
    message: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", _as_str(self.to))
        object.__setattr__(self, "message", _as_bytes(self.message))


@dataclass(frozen=True)
class P2pMessage:
    """Point-to-point messages, keyed by recipient."""

    messages: Dict[str, bytes] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "messages",
            {_as_str(k): _as_bytes(v) for k, v in dict(self.messages).items()},
        )


@dataclass(frozen=True)
class SubsetMessage:
    """A message sent to the participants of the signing subset."""

    message: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", _as_bytes(self.message))


@dataclass(frozen=True)
class BroadcastMessage:
    """A message sent to all participants."""

    message: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", _as_bytes(self.message))


@dataclass(frozen=True)
class EmptyMsg:
    """No message to send."""


@dataclass(frozen=True)
class KeyGenSuccessWithResult:
    """Key generation finished; carries its serialized result."""

    result: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", _as_str(self.result))


@dataclass(frozen=True)
class SignOfflineSuccessWithResult:
    """The offline signing phase finished; carries its serialized result."""

    result: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", _as_str(self.result))


@dataclass(frozen=True)
class SignOnlineSuccessWithResult:
    """The online signing phase finished; carries its serialized result."""

    result: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", _as_str(self.result))


SendingMessage = Union[
    NormalMessage,
    P2pMessage,
    SubsetMessage,
    BroadcastMessage,
    EmptyMsg,
    KeyGenSuccessWithResult,
    SignOfflineSuccessWithResult,
    SignOnlineSuccessWithResult,
]

_BYTES_VARIANTS = {cls.__name__: cls for cls in (SubsetMessage, BroadcastMessage)}
_RESULT_VARIANTS = {
    cls.__name__: cls
    for cls in (
        KeyGenSuccessWithResult,
        SignOfflineSuccessWithResult,
        SignOnlineSuccessWithResult,
    )
}


def to_dict(message: SendingMessage) -> Union[Dict[str, Any], str]:
    """Convert ``message`` to its JSON-ready tagged form."""
    if isinstance(message, EmptyMsg):
        return "EmptyMsg"
    if isinstance(message, NormalMessage):
        return {"NormalMessage": [message.to, list(message.message)]}
    if isinstance(message, P2pMessage):
        return {"P2pMessage": {k: list(v) for k, v in message.messages.items()}}
    if isinstance(message, (SubsetMessage, BroadcastMessage)):
        return {type(message).__name__: list(message.message)}
    if isinstance(
        message,
        (KeyGenSuccessWithResult, SignOfflineSuccessWithResult, SignOnlineSuccessWithResult),
    ):
        return {type(message).__name__: message.result}
    raise TypeError(f"not a sending message: {type(message).__name__}")


def from_dict(data: Union[Dict[str, Any], str]) -> SendingMessage:
    """Build a message from its tagged form; raises ValueError if malformed."""
    if data == "EmptyMsg":
        return EmptyMsg()
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("expected a single-key mapping or \"EmptyMsg\"")
    ((tag, payload),) = data.items()
    if tag == "EmptyMsg":
        if payload is not None:
            raise ValueError("EmptyMsg carries no payload")
        return EmptyMsg()
    if tag == "NormalMessage":
        if not isinstance(payload, (list, tuple)) or len(payload) != 2:
            raise ValueError("NormalMessage payload must be [to, message]")
        return NormalMessage(payload[0], payload[1])
    if tag == "P2pMessage":
        if not isinstance(payload, dict):
            raise ValueError("P2pMessage payload must be a mapping")
        return P2pMessage(payload)
    if tag in _BYTES_VARIANTS:
        return _BYTES_VARIANTS[tag](payload)
    if tag in _RESULT_VARIANTS:
        return _RESULT_VARIANTS[tag](payload)
    raise ValueError(f"unknown message variant {tag!r}")


def dumps(message: SendingMessage) -> str:
    """Serialize ``message`` to compact JSON."""
    return json.dumps(to_dict(message), separators=(",", ":"))


def loads(text: str) -> SendingMessage:
    """Parse a message from JSON text."""
    return from_dict(json.loads(text))