"""Pydantic base for every object and resource built out of property groups.

Fields are collected from the composed property groups in method resolution
order (leftmost group first) followed by the fields declared on the class
itself. That order is also the serialized key order.

Serialized documents follow these rules:

- a field is omitted while it holds an empty value (``''``, ``0``,
  ``False``, ``None``, an empty list or dictionary);
- fields named in ``_always`` are emitted even when empty;
- fields declared with ``Field(exclude=True)`` are local to this process,
  they are never emitted nor read back from a document.
"""
import logging
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    List,
    Optional,
    Tuple
)

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PrivateAttr,
    StrictStr,
    ValidationInfo,
    model_serializer,
    model_validator
)

from .utils import format_timestamp

logger = logging.getLogger(__name__)

# STIX timestamp kept in its string form, datetimes are formatted on the way in
Timestamp = Annotated[StrictStr, BeforeValidator(format_timestamp)]
StringList = Optional[List[StrictStr]]
DictList = Optional[List[Dict[str, Any]]]


def _is_empty(value):
    if isinstance(value, (list, dict)):
        return not value
    return value is None or value == '' or value is False or (
        type(value) is int and value == 0)


class _Composable(BaseModel):
    """Shared behaviour of property groups and the models composed of them."""

    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    def _append(self, name, value):
        # assignment runs the field validation; items already in the list are
        # kept as they are
        current = getattr(self, name)
        if current is None:
            setattr(self, name, [value])
        else:
            setattr(self, name, current + [value])
        return len(getattr(self, name)) - 1


class _STIXBase(_Composable):

    _always: ClassVar[FrozenSet[str]] = frozenset()
    _field_order: ClassVar[Tuple[str, ...]] = ()
    _local_fields: ClassVar[FrozenSet[str]] = frozenset()

    _custom: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        order = []
        for klass in cls.__mro__[1:] + (cls,):
            for name in _own_fields(klass):
                if name in order:
                    order.remove(name)
                order.append(name)
        cls._field_order = tuple(order)
        cls._local_fields = frozenset(
            name for name, field in cls.model_fields.items() if field.exclude)

    @model_serializer(mode='wrap')
    def _serialize(self, handler):
        data = handler(self)
        out = {}
        for name in self._field_order:
            if name in self._always:
                out[name] = getattr(self, name)
            elif name in data and not _is_empty(data[name]):
                out[name] = data[name]
        out.update(self._custom)
        return out

    @model_validator(mode='wrap')
    @classmethod
    def _read_document(cls, data, handler, info: ValidationInfo):
        context = info.context or {}
        if not context.get('document') or not isinstance(data, dict):
            return handler(data)
        custom = {}
        fields = {}
        for key, value in data.items():
            if key in cls._local_fields:
                raise ValueError("'{}' is not part of a {} document".format(
                    key, cls.__name__))
            if key in cls.model_fields:
                if value is not None:
                    fields[key] = value
            elif context.get('allow_custom'):
                logger.debug("Keeping custom property %s on %s", key,
                             cls.__name__)
                custom[key] = value
            else:
                raise ValueError("Unexpected property '{}' for {}".format(
                    key, cls.__name__))
        obj = handler(fields)
        obj._custom.update(custom)
        return obj

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.serialize())

    def to_dict(self):
        return self.model_dump(exclude_defaults=True)

    def serialize(self, pretty=False):
        if pretty:
            return self.model_dump_json(exclude_defaults=True, indent=4)
        return self.model_dump_json(exclude_defaults=True)

    @classmethod
    def from_dict(cls, data, allow_custom=False):
        """Build an instance from a decoded JSON document.

        Args:
            data (:obj:`dict`): Decoded document.
            allow_custom (:obj:`bool`, optional): Keep properties that are
                not declared on the class and emit them again on
                serialization. Defaults to ``False``, in which case an
                undeclared property raises ``ValueError``.

        Returns:
            An instance of ``cls`` with every present property set.
        """
        if not isinstance(data, dict):
            raise TypeError("{} expects a JSON object, not {}".format(
                cls.__name__, type(data).__name__))
        return cls.model_validate(data, context={
            'document': True, 'allow_custom': allow_custom})

    @classmethod
    def parse(cls, data, allow_custom=False):
        if isinstance(data, (str, bytes)):
            return cls.model_validate_json(data, context={
                'document': True, 'allow_custom': allow_custom})
        return cls.from_dict(data, allow_custom=allow_custom)


def _own_fields(klass):
    fields = getattr(klass, 'model_fields', None)
    if not fields:
        return []
    inherited = set()
    for base in klass.__bases__:
        inherited.update(getattr(base, 'model_fields', None) or {})
    return [name for name in fields if name not in inherited]
