"""Core outcome types shared by the decoder, transport and client."""

from .types import (
    Ambiguous,
    DecodeFailure,
    DecodeOutcome,
    Envelope,
    StatusClass,
    Value,
)

__all__ = [
    "Ambiguous",
    "DecodeFailure",
    "DecodeOutcome",
    "Envelope",
    "StatusClass",
    "Value",
]
