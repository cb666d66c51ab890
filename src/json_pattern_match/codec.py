"""JsonCodec: parse and pretty-print JSON at the public boundary.

The structural matcher only ever sees parsed trees.  Callers that hand in
raw JSON text go through ``JsonCodec.loads``; failure reports render trees
through ``JsonCodec.dumps``.  All codec options live in an explicit
``JsonCodecConfig`` value instead of a process-wide mapper.
"""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass
from typing import Any

import json5

from json_pattern_match.errors import InvalidJsonError

__all__ = ["JsonCodec", "JsonCodecConfig"]


@dataclass(frozen=True, slots=True)
class JsonCodecConfig:
    """Immutable options for parsing and serializing JSON.

    Attributes:
        allow_comments: Accept ``//`` and ``/* */`` comments in input text.
            Parsing then goes through ``json5``, which also accepts its other
            relaxations (single quotes, trailing commas, unquoted keys, hex
            numbers).  False parses with strict ``json``.
        pretty_print: Indent serialized output by two spaces.
        omit_nulls: Drop object members whose value is null when serializing.
        date_format: ``strftime`` format for ``date``/``datetime`` values met
            while serializing.  ``None`` means ISO-8601 via ``isoformat()``.
    """

    allow_comments: bool = True
    pretty_print: bool = True
    omit_nulls: bool = True
    date_format: str | None = None

    def __post_init__(self) -> None:
        if self.date_format is not None and not self.date_format:
            msg = "date_format must be None or a non-empty strftime format"
            raise ValueError(msg)


class JsonCodec:
    """Parses and serializes JSON according to a ``JsonCodecConfig``."""

    def __init__(self, config: JsonCodecConfig | None = None) -> None:
        self._config: JsonCodecConfig = (
            config if config is not None else JsonCodecConfig()
        )

    @property
    def config(self) -> JsonCodecConfig:
        return self._config

    def loads(self, text: str | bytes | bytearray, source: str = "input") -> Any:
        """Parse JSON text into a plain Python tree.

        Args:
            text:   The raw JSON text.
            source: Name of the input for error messages, e.g. ``"pattern"``.

        Raises:
            InvalidJsonError: If ``text`` is not valid JSON.
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidJsonError(source, repr(text), str(exc)) from exc
        try:
            if self._config.allow_comments:
                return json5.loads(text)
            return json.loads(text)
        except ValueError as exc:
            raise InvalidJsonError(source, text, str(exc)) from exc

    def dumps(self, value: Any) -> str:
        """Serialize a tree to JSON text, applying the configured options."""
        if self._config.omit_nulls:
            value = self._strip_nulls(value)
        return json.dumps(
            value,
            indent=2 if self._config.pretty_print else None,
            ensure_ascii=False,
            default=self._default,
        )

    def _strip_nulls(self, value: Any) -> Any:
        """Recursively drop None-valued object members (never mutates input)."""
        if isinstance(value, dict):
            return {k: self._strip_nulls(v) for k, v in value.items() if v is not None}
        if isinstance(value, (list, tuple)):
            return [self._strip_nulls(item) for item in value]
        return value

    def _default(self, value: Any) -> Any:
        if isinstance(value, (dt.date, dt.datetime)):
            if self._config.date_format is None:
                return value.isoformat()
            return value.strftime(self._config.date_format)
        return str(value)
