"""TAXII 2.1 resources and the collection registry.

A ``Collections`` resource is a simple wrapper around a list of ``Collection``
resources. Each ``Collection`` carries the access policy a TAXII server uses
to decide whether a client can read objects from it or add objects to it:

- ``can_read`` / ``can_write`` are part of the resource and always emitted;
- ``enabled`` / ``hidden`` / ``date_added`` are local to this process and
  never emitted.

Nothing here is thread-safe. A server sharing one registry between requests
has to hold its own lock around ``add_collection()``, ``get_new_collection()``
and the flag setters.
"""
import copy
import logging
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr
from taxii2client import MEDIA_TYPE_TAXII_V21

from .base import StringList, Timestamp, _STIXBase
from .properties import DescriptionProperty, IDProperty, TitleProperty
from .utils import get_deterministic_uuid, get_timestamp

logger = logging.getLogger(__name__)

MEDIA_TYPE_STIX_V21 = 'application/stix+json;version=2.1'

__all__ = [
    'MEDIA_TYPE_STIX_V21',
    'MEDIA_TYPE_TAXII_V21',
    'APIRoot',
    'Collection',
    'CollectionRecord',
    'Collections',
    'Discovery',
    'init_collection',
    'init_collection_record',
    'init_collections',
    'new_api_root',
    'new_collection',
    'new_collection_record',
    'new_collections',
    'new_discovery',
]


class Collection(_STIXBase, IDProperty, TitleProperty, DescriptionProperty):
    """TAXII 2.1 Collection resource.

    General information about a Collection: its id, a human-readable title
    and description, the media types of objects that can be requested from or
    added to it, and whether the client can get objects from it and/or add
    objects to it.
    """

    _always: ClassVar[FrozenSet[str]] = frozenset(['can_read', 'can_write'])

    date_added: Timestamp = Field(default='', exclude=True)
    enabled: StrictBool = Field(default=False, exclude=True)
    hidden: StrictBool = Field(default=False, exclude=True)
    can_read: StrictBool = False
    can_write: StrictBool = False
    media_types: StringList = None

    def set_new_id(self, seed=None):
        self.id = get_deterministic_uuid(seed=seed)
        return self.id

    def set_date_added(self, t):
        self.date_added = t

    def set_date_added_to_current_time(self):
        self.date_added = get_timestamp()

    def get_date_added(self):
        return self.date_added

    def set_enabled(self):
        self.enabled = True

    def set_disabled(self):
        self.enabled = False

    def get_enabled(self):
        return self.enabled

    def set_hidden(self):
        self.hidden = True

    def set_visible(self):
        self.hidden = False

    def get_hidden(self):
        return self.hidden

    def set_can_read(self):
        self.can_read = True

    def get_can_read(self):
        return self.can_read

    def set_can_write(self):
        self.can_write = True

    def get_can_write(self):
        return self.can_write

    def add_media_type(self, s):
        # no de-duplication, the same media type can be listed twice
        return self._append('media_types', s)


class Collections(_STIXBase):
    """TAXII 2.1 Collections resource.

    ``collections`` stays ``None`` until the first collection is added.
    """

    collections: Optional[List[Collection]] = None

    def __len__(self):
        return len(self.collections or [])

    def __iter__(self):
        return iter(self.collections or [])

    def __getitem__(self, index):
        if self.collections is None:
            raise IndexError("collections index out of range")
        return self.collections[index]

    def add_collection(self, o):
        """Add a collection that was created separately.

        Args:
            o (:obj:`Collection`): The collection to add. The list keeps a
                copy, later changes to ``o`` do not reach the registry.

        Returns:
            :obj:`int`: Position in the list where the collection was added.
        """
        if not isinstance(o, Collection):
            raise TypeError("Expected a Collection, not {}".format(
                type(o).__name__))
        self._init_collections_property()
        index = self._append('collections', copy.deepcopy(o))
        logger.debug("Added collection %r at %d", o.id, index)
        return index

    def get_new_collection(self):
        """Create a collection and add it to the list.

        Returns:
            :obj:`Collection`: The entry that is held in the list, not a
            copy. Changes made to it show up when this resource is
            serialized.
        """
        self._init_collections_property()
        o = init_collection()
        index = self._append('collections', o)
        logger.debug("Created new collection at %d", index)
        return self.collections[index]

    def _init_collections_property(self):
        if self.collections is None:
            self.collections = []


class CollectionRecord(_STIXBase):
    """Membership of one STIX object in one collection.

    Handed to the persistence layer, which stores it in the collection data
    table.
    """

    collection_id: StrictStr = ''
    stix_id: StrictStr = ''


class Discovery(_STIXBase, TitleProperty, DescriptionProperty):
    """TAXII 2.1 Discovery resource."""

    contact: StrictStr = ''
    default: StrictStr = ''
    api_roots: StringList = None

    def set_contact(self, s):
        self.contact = s

    def get_contact(self):
        return self.contact

    def set_default(self, s):
        self.default = s

    def get_default(self):
        return self.default

    def add_api_root(self, s):
        return self._append('api_roots', s)


class APIRoot(_STIXBase, TitleProperty, DescriptionProperty):
    """TAXII 2.1 API Root resource."""

    versions: StringList = None
    max_content_length: StrictInt = Field(default=0, ge=0)

    def add_version(self, s):
        return self._append('versions', s)

    def set_max_content_length(self, i):
        self.max_content_length = i

    def get_max_content_length(self):
        return self.max_content_length


def init_collections():
    return Collections()


def init_collection():
    return Collection()


def init_collection_record():
    return CollectionRecord()


def new_collection_record(cid, sid):
    """Pair a collection id with a STIX id for the persistence layer."""
    obj = init_collection_record()
    obj.collection_id = cid
    obj.stix_id = sid
    return obj


def new_collection():
    return Collection()


def new_collections():
    return Collections()


def new_discovery():
    return Discovery()


def new_api_root():
    return APIRoot()
