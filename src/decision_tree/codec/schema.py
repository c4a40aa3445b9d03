"""Struct schemas: typed models <-> wire mappings.

StructSchema binds a frozen pydantic model to one stage per field. Decoding
runs each present field through its stage and validates the result into the
model; encoding runs the stages backwards. Failures in either direction come
back as ``None``. Only ``encode_strict`` raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from decision_tree.codec.query import WireMapping
from decision_tree.codec.stages import Each, MaxLength, NonEmpty, RequiredHead, Split, Stage
from decision_tree.exceptions import SchemaEncodeError, StageError
from decision_tree.models.config import VisualizerConfig
from decision_tree.models.params import StepsParams

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StructSchema(Generic[ModelT]):
    """Bidirectional schema between a pydantic model and a wire mapping.

    Args:
        model: The frozen pydantic model the schema decodes into.
        fields: Field name -> stage turning that field's value list into the
            field value. Keys in the wire mapping that are not listed here are
            ignored on decode.
        required: Names of fields that must be present in the wire mapping.
            All other fields are optional: absent on decode means "use the
            model default", ``None`` on encode means "omit the key".
        keys: Field name -> wire key, for fields whose query parameter is
            named differently from the model field.
    """

    def __init__(
        self,
        model: type[ModelT],
        fields: Mapping[str, Stage],
        *,
        required: Iterable[str] = (),
        keys: Optional[Mapping[str, str]] = None,
    ) -> None:
        unknown = set(fields) - set(model.model_fields)
        if unknown:
            raise ValueError(f"{model.__name__} has no fields named {sorted(unknown)}")
        self.model = model
        self.fields = dict(fields)
        self.required = frozenset(required)
        self.keys = {name: name for name in self.fields}
        self.keys.update(keys or {})

    def decode(self, wire: Mapping[str, Any]) -> Optional[ModelT]:
        """Decode a wire mapping. Returns None if any part fails."""
        data: dict[str, Any] = {}
        for name, stage in self.fields.items():
            raw = wire.get(self.keys[name])
            if raw is None:
                if name in self.required:
                    logger.debug("Decode failed: missing required field %r", name)
                    return None
                continue
            try:
                data[name] = stage.decode(raw)
            except StageError as exc:
                logger.debug("Decode failed for field %r: %s", name, exc)
                return None
        return self.coerce(data)

    def coerce(self, data: Mapping[str, Any]) -> Optional[ModelT]:
        """Validate a plain mapping into the model. Returns None on failure."""
        try:
            return self.model.model_validate(dict(data))
        except ValidationError as exc:
            logger.debug("%s validation failed: %s", self.model.__name__, exc)
            return None

    def _encode(self, value: Any) -> WireMapping:
        if not isinstance(value, self.model):
            raise StageError(
                f"expected {self.model.__name__}, got {type(value).__name__}"
            )
        wire: WireMapping = {}
        for name, stage in self.fields.items():
            field_value = getattr(value, name)
            if field_value is None:
                if name in self.required:
                    raise StageError(f"required field {name!r} is None")
                continue
            encoded = stage.encode(field_value)
            if not isinstance(encoded, list) or not all(isinstance(v, str) for v in encoded):
                raise StageError(f"field {name!r} did not encode to a list of strings")
            wire[self.keys[name]] = encoded
        return wire

    def encode(self, value: Any) -> Optional[WireMapping]:
        """Encode a model instance. Returns None if it does not conform."""
        try:
            return self._encode(value)
        except StageError as exc:
            logger.debug("Encode failed: %s", exc)
            return None

    def encode_strict(self, value: Any) -> WireMapping:
        """Encode a model instance, raising SchemaEncodeError if it does not conform."""
        try:
            return self._encode(value)
        except StageError as exc:
            raise SchemaEncodeError(value, str(exc)) from exc

    def is_valid(self, value: Any) -> bool:
        """Whether ``value`` is a model instance that encodes successfully."""
        return self.encode(value) is not None


def formula_stage(config: VisualizerConfig) -> Stage:
    """Stage for one formula string such as ``a,b_c,d``."""
    return (
        NonEmpty()
        .pipe(MaxLength(config.max_formula_length))
        .pipe(Split(config.group_delimiter))
        .pipe(Each(Split(config.label_delimiter)))
    )


def steps_schema(config: Optional[VisualizerConfig] = None) -> StructSchema[StepsParams]:
    """Schema for StepsParams, carried under ``config.param_name``."""
    config = config or VisualizerConfig()
    return StructSchema(
        StepsParams,
        {"steps": RequiredHead(formula_stage(config))},
        keys={"steps": config.param_name},
    )
