"""Reusable property groups.

Each group owns one semantic concern and its accessors. Objects and resources
pick up a group by mixing it in; the group's fields are then serialized in
the position the group takes in the class bases.
"""
from pydantic import Field, StrictStr

from .base import StringList, _Composable


class IDProperty(_Composable):
    id: StrictStr = Field(default='', description="Identifier of the resource.")

    def set_id(self, s):
        self.id = s

    def get_id(self):
        return self.id


class TitleProperty(_Composable):
    title: StrictStr = Field(default='', description="Human readable title.")

    def set_title(self, s):
        self.title = s

    def get_title(self):
        return self.title


class NameProperty(_Composable):
    name: StrictStr = Field(default='', description="Name used to identify the object.")

    def set_name(self, s):
        self.name = s

    def get_name(self):
        return self.name


class DescriptionProperty(_Composable):
    description: StrictStr = Field(default='', description="More details and context.")

    def set_description(self, s):
        self.description = s

    def get_description(self):
        return self.description


class ObjectRefsProperty(_Composable):
    object_refs: StringList = Field(
        default=None,
        description="Identifiers of the objects referred to by this object.",
    )

    def add_object_ref(self, s):
        return self._append('object_refs', s)

    def add_object_refs(self, refs):
        for ref in refs:
            self.add_object_ref(ref)

    def get_object_refs(self):
        return self.object_refs


class ResolvesToRefsProperty(_Composable):
    resolves_to_refs: StringList = Field(
        default=None,
        description="Identifiers of the objects this one resolves to.",
    )

    def add_resolves_to_ref(self, s):
        return self._append('resolves_to_refs', s)

    def get_resolves_to_refs(self):
        return self.resolves_to_refs
