import logging

from pydantic import Field, StrictBool, StrictInt, StrictStr

from .base import DictList, StringList, Timestamp, _STIXBase
from .utils import get_deterministic_uuid, get_timestamp

logger = logging.getLogger(__name__)

STIX_VERSION = '2.1'


class CommonObjectProperties(_STIXBase):
    """Properties shared by every STIX object.

    Objects must be created through their ``new()`` constructor, which runs
    :meth:`init_sdo` or :meth:`init_sco` to stamp the object type. A bare
    ``Kind()`` is a zero value with an empty ``type``.
    """

    type: StrictStr = Field(
        default='',
        description="The object type. MUST match the specific kind being defined.",
    )
    spec_version: StrictStr = ''
    id: StrictStr = ''
    created_by_ref: StrictStr = ''
    created: Timestamp = ''
    modified: Timestamp = ''
    revoked: StrictBool = False
    labels: StringList = None
    confidence: StrictInt = Field(default=0, ge=0, le=100)
    lang: StrictStr = ''
    external_references: DictList = None
    object_marking_refs: StringList = None
    granular_markings: DictList = None
    defanged: StrictBool = False

    def init_sdo(self, object_type):
        """Stamp the identity of a new STIX Domain Object.

        Sets the type, the spec version, a new identifier (unless one was
        supplied) and the created / modified timestamps.
        """
        self.set_object_type(object_type)
        self.set_spec_version_21()
        if not self.id:
            self.set_new_id(object_type)
        if not self.created:
            self.set_created_to_current_time()
        if not self.modified:
            self.set_modified_to_created()
        logger.debug("Initialised %s", self.id)

    def init_sco(self, object_type):
        """Stamp the identity of a new STIX Cyber-observable Object."""
        self.set_object_type(object_type)
        self.set_spec_version_21()
        if not self.id:
            self.set_new_id(object_type)
        logger.debug("Initialised %s", self.id)

    def set_object_type(self, s):
        self.type = s

    def get_object_type(self):
        return self.type

    def set_spec_version_21(self):
        self.spec_version = STIX_VERSION

    def get_spec_version(self):
        return self.spec_version

    def set_id(self, s):
        self.id = s

    def set_new_id(self, object_type, seed=None):
        self.id = get_deterministic_uuid(prefix=object_type + '--', seed=seed)
        return self.id

    def get_id(self):
        return self.id

    def set_created_by_ref(self, s):
        self.created_by_ref = s

    def get_created_by_ref(self):
        return self.created_by_ref

    def set_created(self, t):
        self.created = t

    def set_created_to_current_time(self):
        self.created = get_timestamp()

    def get_created(self):
        return self.created

    def set_modified(self, t):
        self.modified = t

    def set_modified_to_created(self):
        self.modified = self.created

    def set_modified_to_current_time(self):
        self.modified = get_timestamp()

    def get_modified(self):
        return self.modified

    def set_revoked(self):
        self.revoked = True

    def get_revoked(self):
        return self.revoked

    def add_label(self, s):
        return self._append('labels', s)

    def set_confidence(self, i):
        self.confidence = i

    def get_confidence(self):
        return self.confidence

    def set_lang(self, s):
        self.lang = s

    def get_lang(self):
        return self.lang

    def add_external_reference(self, source_name, url=None, external_id=None,
                               description=None):
        ref = {'source_name': source_name}
        if description:
            ref['description'] = description
        if url:
            ref['url'] = url
        if external_id:
            ref['external_id'] = external_id
        return self._append('external_references', ref)

    def add_object_marking_ref(self, s):
        return self._append('object_marking_refs', s)

    def add_granular_marking(self, marking_ref, selectors):
        marking = {'marking_ref': marking_ref, 'selectors': list(selectors)}
        return self._append('granular_markings', marking)

    def set_defanged(self):
        self.defanged = True
