"""STIX 2.1 objects built from the common properties and property groups.

Every kind has a ``new()`` constructor that stamps its type string::

    grouping = Grouping.new(context='suspicious-activity')
    grouping.set_name('Phishing wave')
    grouping.add_object_ref(observed.id)

All of the methods not defined local to a kind are inherited from the
individual property groups.
"""
import json
import logging
from typing import ClassVar, Optional

import stix2
from pydantic import Field, StrictInt, StrictStr

from .base import StringList, Timestamp
from .common import CommonObjectProperties
from .properties import (
    DescriptionProperty,
    NameProperty,
    ObjectRefsProperty,
    ResolvesToRefsProperty
)
from .utils import to_open_vocab

logger = logging.getLogger(__name__)


class _STIXObject(CommonObjectProperties):
    _type: ClassVar[Optional[str]] = None

    @classmethod
    def new(cls, **kwargs):
        obj = cls(**kwargs)
        obj.init_sdo(cls._type)
        return obj

    def to_stix2(self, allow_custom=False):
        """Convert to the equivalent ``stix2`` library object.

        Observed Data converts only when it lists its observables in
        ``object_refs``; ``objects`` is kept as a string here while
        ``stix2`` expects a dictionary.

        Returns:
            A ``stix2.v21`` object. Raises the ``stix2`` exceptions if the
            object is missing properties the STIX 2.1 spec requires.
        """
        return stix2.parse(self.to_dict(), allow_custom=allow_custom,
                           version='2.1')


class _Observable(_STIXObject):

    @classmethod
    def new(cls, **kwargs):
        obj = cls(**kwargs)
        obj.init_sco(cls._type)
        return obj


class Grouping(_STIXObject, NameProperty, DescriptionProperty):
    """STIX 2.1 Grouping SDO.

    Asserts that the referenced objects share a context, eg: a set of
    indicators and observations that belong to one suspicious activity.
    """

    _type: ClassVar[str] = 'grouping'

    context: StrictStr = ''
    object_refs: StringList = None

    def set_context(self, s):
        self.context = s

    def set_context_from_label(self, label):
        self.context = to_open_vocab(label)

    def get_context(self):
        return self.context

    def add_object_ref(self, s):
        return self._append('object_refs', s)

    def get_object_refs(self):
        return self.object_refs


class ObservedData(_STIXObject, ObjectRefsProperty):
    """STIX 2.1 Observed Data SDO."""

    _type: ClassVar[str] = 'observed-data'

    first_observed: Timestamp = ''
    last_observed: Timestamp = ''
    number_observed: StrictInt = Field(default=0, ge=0)
    objects: StrictStr = ''

    def set_first_observed(self, t):
        self.first_observed = t

    def get_first_observed(self):
        return self.first_observed

    def set_last_observed(self, t):
        self.last_observed = t

    def get_last_observed(self):
        return self.last_observed

    def set_number_observed(self, i):
        self.number_observed = i

    def get_number_observed(self):
        return self.number_observed

    def set_objects(self, s):
        self.objects = s

    def get_objects(self):
        return self.objects


class Report(_STIXObject, NameProperty, DescriptionProperty,
             ObjectRefsProperty):
    """STIX 2.1 Report SDO."""

    _type: ClassVar[str] = 'report'

    report_types: StringList = None
    published: Timestamp = ''

    def add_report_type(self, s):
        return self._append('report_types', s)

    def set_published(self, t):
        self.published = t

    def get_published(self):
        return self.published


class DomainName(_Observable, ResolvesToRefsProperty):
    _type: ClassVar[str] = 'domain-name'

    value: StrictStr = ''

    def set_value(self, s):
        self.value = s

    def get_value(self):
        return self.value


class IPv4Address(_Observable, ResolvesToRefsProperty):
    _type: ClassVar[str] = 'ipv4-addr'

    value: StrictStr = ''

    def set_value(self, s):
        self.value = s

    def get_value(self):
        return self.value


OBJ_MAP = {
    Grouping._type: Grouping,
    ObservedData._type: ObservedData,
    Report._type: Report,
    DomainName._type: DomainName,
    IPv4Address._type: IPv4Address,
}


def new(object_type, **kwargs):
    """Create a new object of the given kind.

    Args:
        object_type (:obj:`str`): STIX type string, eg: ``grouping``.
        **kwargs: Initial property values.

    Returns:
        A new, fully stamped object of the matching class.
    """
    try:
        cls = OBJ_MAP[object_type]
    except KeyError:
        raise ValueError("Unsupported object type '{}'".format(object_type))
    return cls.new(**kwargs)


def parse(data, allow_custom=False):
    """Decode a STIX object from a JSON string or dictionary.

    The class is picked from the document's ``type`` property.
    """
    if isinstance(data, (str, bytes)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise TypeError("Expected a JSON object, not {}".format(
            type(data).__name__))
    try:
        cls = OBJ_MAP[data['type']]
    except KeyError:
        raise ValueError("Can't parse object with type '{}'".format(
            data.get('type')))
    logger.debug("Parsing %s", data.get('id'))
    return cls.from_dict(data, allow_custom=allow_custom)
