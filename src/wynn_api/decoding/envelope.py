"""Response envelope classification and decoding.

Every request yields one ``(status, body)`` envelope and exactly one decode
attempt, with three terminal outcomes:

* a multiple-choices status decodes the body as the API's disambiguation
  payload and returns ``Ambiguous`` with the candidates untouched;
* a success status decodes the body as the caller's target type and returns
  ``Value``;
* anything that does not decode returns (or, in strict mode, raises) a
  ``DecodeFailure`` locating the problem in the body.

Error statuses are the transport's concern and never reach this module.
"""

from __future__ import annotations

import functools
import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from wynn_api.core.types import (
    Ambiguous,
    DecodeFailure,
    DecodeOutcome,
    StatusClass,
    Value,
    excerpt_around,
)
from wynn_api.exceptions import SchemaMismatchError, TransportError

from .indexed import object_pairs

log = logging.getLogger(__name__)

# The multiple-choices payload: candidate key -> raw candidate record
CHOICES_SHAPE = dict[str, dict[str, Any]]


@functools.lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    try:
        return _adapter(target)
    except TypeError:
        # Unhashable target descriptions are rebuilt on every call
        return TypeAdapter(target)


def _byte_offset(text: str, char_offset: int) -> int:
    return len(text[:char_offset].encode("utf-8"))


def _locate(text: str, path: tuple[str | int, ...]) -> int:
    """Character offset of the deepest object key in ``path`` found in ``text``.

    Keys are searched in document order, each after the previous one, so
    repeated names resolve to the occurrence under the right parent in the
    common case. Array indices carry no text and are skipped.
    """
    cursor = 0
    for part in path:
        if not isinstance(part, str):
            continue
        found = text.find(json.dumps(part, ensure_ascii=False), cursor)
        if found < 0:
            break
        cursor = found
    return cursor


class _Decoder:
    """One decode attempt over a fully-received body."""

    def __init__(self, body: bytes, url: str | None) -> None:
        self.body = body
        self.url = url
        self.text = ""

    def failure(
        self, char_offset: int, cause: str, path: tuple[str | int, ...] = ()
    ) -> DecodeFailure:
        return DecodeFailure(
            offset=_byte_offset(self.text, char_offset),
            cause=cause,
            excerpt=excerpt_around(self.text, char_offset),
            path=path,
            url=self.url,
        )

    def run(self, target: Any) -> DecodeOutcome[Any]:
        try:
            self.text = self.body.decode("utf-8")
        except UnicodeDecodeError as e:
            self.text = self.body.decode("utf-8", errors="replace")
            # The bytes before the bad one are valid UTF-8
            char_offset = len(self.body[: e.start].decode("utf-8"))
            return DecodeFailure(
                offset=e.start,
                cause=f"invalid UTF-8: {e.reason}",
                excerpt=excerpt_around(self.text, char_offset),
                url=self.url,
            )

        try:
            payload = json.loads(self.text, object_pairs_hook=object_pairs)
        except json.JSONDecodeError as e:
            return self.failure(e.pos, f"invalid JSON: {e.msg}")

        try:
            return Value(_adapter_for(target).validate_python(payload))
        except ValidationError as e:
            first = e.errors(include_url=False)[0]
            path = tuple(first["loc"])
            cause = first["msg"]
            if e.error_count() > 1:
                cause = f"{cause} (and {e.error_count() - 1} more errors)"
            return self.failure(_locate(self.text, path), cause, path)


def decode(
    target: Any,
    status_class: StatusClass,
    body: bytes,
    *,
    strict: bool = False,
    url: str | None = None,
) -> DecodeOutcome[Any]:
    """Decode one response body against ``target``.

    Args:
        target: The type to populate: a record model, a container of them,
            or any other type pydantic can validate.
        status_class: Classification of the response status.
        body: The raw response body.
        strict: Raise instead of returning a ``DecodeFailure``.
        url: The request URL, carried into failures for diagnostics.

    Returns:
        ``Value`` with the decoded target, ``Ambiguous`` with the raw
        candidates of a multiple-choices response, or ``DecodeFailure``.

    Raises:
        SchemaMismatchError: In strict mode, when decoding fails.
        TransportError: If handed an error-class status.
    """
    if status_class is StatusClass.ERROR:
        raise TransportError("error responses are not decoded", url=url)

    decoder = _Decoder(body, url)
    if status_class is StatusClass.MULTIPLE_CHOICES:
        outcome = decoder.run(CHOICES_SHAPE)
        if isinstance(outcome, Value):
            log.debug("Ambiguous response from %s: %d choices", url, len(outcome.value))
            return Ambiguous(outcome.value)
    else:
        outcome = decoder.run(target)

    if isinstance(outcome, DecodeFailure):
        if strict:
            log.error("Schema mismatch: %s", outcome.describe())
            raise SchemaMismatchError(outcome)
        log.warning(
            "Response from %s failed to decode at byte %d: %s",
            url,
            outcome.offset,
            outcome.cause,
        )
    return outcome
