"""
Expandable References

A relationship field on a resource arrives on the wire either as a bare
identifier string or, when the caller asked for it via ``expand[]``, as the
fully embedded related object. The types here absorb that ambiguity at the
decode boundary and expose two accessors, ``id`` and ``value``, so call
sites never branch on the wire shape.

Types:
    - Expandable[T]: single reference
    - ExpandableCollection[T]: ordered sequence of single references
    - DynamicExpandable[A, B, ...]: single reference whose expanded form may
      be one of several resource types, chosen by the ``object`` field

All three plug into pydantic through ``__get_pydantic_core_schema__``:
    - decode from ``str``, a mapping, ``None`` or an existing instance
    - serialize to the bare id (a list of ids for collections), so an
      expanded object is never sent back to the server

Example:
    class Charge(StripeResource):
        customer: Expandable[Customer] = Field(default_factory=Expandable)

    charge = Charge.model_validate({"id": "ch_1", "object": "charge", "customer": "cus_123"})
    charge.customer.id          # "cus_123"
    charge.customer.value       # None
"""

from collections.abc import Mapping, Sequence
from types import GenericAlias
from typing import Any, Generic, Iterator, List, Optional, Tuple, Type, TypeVar, get_args

from pydantic import BaseModel, GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

ModelT = TypeVar("ModelT")


def _model_args(source: Any) -> Tuple[Any, ...]:
    return tuple(arg for arg in get_args(source) if isinstance(arg, type))


def _decode_model(model_type: Any, raw: Any) -> Any:
    if isinstance(model_type, type) and isinstance(raw, model_type):
        return raw
    if isinstance(model_type, type) and issubclass(model_type, BaseModel):
        return model_type.model_validate(raw)
    return raw


def _model_id(model: Any) -> Optional[str]:
    if isinstance(model, Mapping):
        return model.get("id")
    return getattr(model, "id", None)


class Expandable(Generic[ModelT]):
    """
    Reference to a related resource: empty, a bare id, or an expanded object.

    Read ``id`` unconditionally; read ``value`` only after checking
    ``is_expanded``. Requesting expansion does not guarantee the server
    inlined the object.

    Attributes:
        id: Identifier of the related resource, None when the relation is unset
        value: The embedded resource, None unless the server expanded it
    """

    __slots__ = ("_id", "_value")

    def __init__(self, id: Optional[str] = None, value: Optional[ModelT] = None):
        if value is not None:
            value_id = _model_id(value)
            if id is None:
                id = value_id
            elif value_id != id:
                raise ValueError(
                    f"Expanded object id {value_id!r} does not match reference id {id!r}"
                )
        self._id = id
        self._value = value

    @classmethod
    def of(cls, id: str) -> "Expandable[ModelT]":
        """Reference built from a bare id, as used in request parameters."""
        return cls(id=id)

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def value(self) -> Optional[ModelT]:
        return self._value

    @property
    def is_expanded(self) -> bool:
        return self._value is not None

    def __bool__(self) -> bool:
        return self._id is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Expandable):
            return self._id == other._id and self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        if self._id is None:
            return f"{type(self).__name__}()"
        state = "expanded" if self.is_expanded else "unexpanded"
        return f"{type(self).__name__}(id={self._id!r}, {state})"

    @classmethod
    def _decode(cls, raw: Any, model_types: Tuple[Any, ...]) -> "Expandable":
        if raw is None:
            return cls()
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            return cls(id=raw)
        if isinstance(raw, (Mapping, BaseModel)):
            model = cls._decode_object(raw, model_types)
            model_id = _model_id(model)
            if not isinstance(model_id, str):
                raise PydanticCustomError(
                    "expandable_missing_id",
                    "Expanded object has no string 'id'",
                )
            return cls(id=model_id, value=model)
        raise PydanticCustomError(
            "expandable_type",
            "Expected an id string, an object or null, got {kind}",
            {"kind": type(raw).__name__},
        )

    @classmethod
    def _decode_object(cls, raw: Any, model_types: Tuple[Any, ...]) -> Any:
        model_type = model_types[0] if model_types else None
        return _decode_model(model_type, raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        model_types = _model_args(source)

        def validate(raw: Any) -> "Expandable":
            return cls._decode(raw, model_types)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ref: ref.id,
            ),
        )


class DynamicExpandable(Expandable[Any]):
    """
    Reference whose expanded form may be one of several resource types.

    Declared as ``DynamicExpandable[Card, BankAccount]``. The expanded class
    is the one whose ``OBJECT_NAME`` equals the payload's ``object`` field;
    when no class claims it, each candidate is tried in declaration order.

    Example:
        source = customer.default_source
        card = source.value_as(Card)     # None unless a Card was expanded
    """

    __slots__ = ()

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple):
            params = (params,)
        return GenericAlias(cls, params)

    def value_as(self, model_type: Type[ModelT]) -> Optional[ModelT]:
        """Expanded value when it is an instance of ``model_type``, else None."""
        if isinstance(self._value, model_type):
            return self._value
        return None

    @classmethod
    def _decode_object(cls, raw: Any, model_types: Tuple[Any, ...]) -> Any:
        if not model_types:
            return raw
        for model_type in model_types:
            if isinstance(raw, model_type):
                return raw

        object_name = raw.get("object") if isinstance(raw, Mapping) else getattr(raw, "object", None)
        for model_type in model_types:
            if getattr(model_type, "OBJECT_NAME", None) == object_name:
                return _decode_model(model_type, raw)

        errors = []
        for model_type in model_types:
            try:
                return _decode_model(model_type, raw)
            except ValueError as e:
                errors.append(f"{model_type.__name__}: {e}")
        raise PydanticCustomError(
            "dynamic_expandable_no_match",
            "Expanded object matches none of the declared types: {errors}",
            {"errors": "; ".join(errors)},
        )


class ExpandableCollection(Generic[ModelT], Sequence):
    """
    Ordered, immutable sequence of Expandable references.

    Each element independently holds a bare id or an expanded object; order
    is the server's order. ``null`` or an absent field decodes to an empty
    collection.

    Attributes:
        ids: Identifiers of every element, in order
        values: Expanded objects only, in order
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Sequence[Any]] = None):
        self._items: Tuple[Expandable[ModelT], ...] = tuple(
            item if isinstance(item, Expandable) else Expandable._decode(item, ())
            for item in (items or ())
        )

    @classmethod
    def of(cls, ids: Sequence[str]) -> "ExpandableCollection[ModelT]":
        """Collection built from bare ids, as used in request parameters."""
        return cls([Expandable.of(i) for i in ids])

    @property
    def ids(self) -> List[str]:
        return [item.id for item in self._items if item.id is not None]

    @property
    def values(self) -> List[ModelT]:
        return [item.value for item in self._items if item.is_expanded]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Expandable[ModelT]]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExpandableCollection):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        model_types = _model_args(source)

        def validate(raw: Any) -> "ExpandableCollection":
            if raw is None:
                return cls()
            if isinstance(raw, cls):
                return raw
            if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
                raise PydanticCustomError(
                    "expandable_collection_type",
                    "Expected a list of references, got {kind}",
                    {"kind": type(raw).__name__},
                )
            return cls([Expandable._decode(item, model_types) for item in raw])

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda refs: refs.ids,
            ),
        )
