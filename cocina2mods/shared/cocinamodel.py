# ------------------------------------------------------------------------------
# Name:          cocinamodel.py
# Purpose:       Read-only object model for Cocina descriptive metadata, built
#                from the Cocina JSON shape (camelCase keys).  The writers in
#                cocina2mods.mods only ever read these objects.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t
from enum import IntEnum, auto

class ValueShape(IntEnum):
    # exactly one of these is populated on any DescriptiveValue
    PLAIN = auto()
    STRUCTURED = auto()
    PARALLEL = auto()
    GROUPED = auto()


def _str(d: dict[str, t.Any], key: str) -> str:
    value: t.Any = d.get(key)
    if value is None:
        return ''
    return str(value)

def _list(d: dict[str, t.Any], key: str, cls) -> list:
    return [cls.fromDict(item) for item in (d.get(key) or []) if item is not None]

def _obj(d: dict[str, t.Any], key: str, cls):
    item: t.Any = d.get(key)
    if not item:
        return None
    return cls.fromDict(item)


class Source:
    def __init__(
        self,
        code: str = '',
        uri: str = '',
        value: str = '',
        version: str = '',
    ) -> None:
        self.code: str = code
        self.uri: str = uri
        self.value: str = value
        self.version: str = version

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Source':
        return cls(
            code=_str(d, 'code'),
            uri=_str(d, 'uri'),
            value=_str(d, 'value'),
            version=_str(d, 'version'),
        )


class Standard:
    '''
    A controlled term: used for `standard`, `encoding` and `valueScript`.
    '''
    def __init__(
        self,
        code: str = '',
        uri: str = '',
        value: str = '',
        source: Source | None = None,
    ) -> None:
        self.code: str = code
        self.uri: str = uri
        self.value: str = value
        self.source: Source | None = source

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Standard':
        return cls(
            code=_str(d, 'code'),
            uri=_str(d, 'uri'),
            value=_str(d, 'value'),
            source=_obj(d, 'source', Source),
        )


class ValueLanguage:
    def __init__(
        self,
        code: str = '',
        value: str = '',
        uri: str = '',
        source: Source | None = None,
        valueScript: Standard | None = None,
    ) -> None:
        self.code: str = code
        self.value: str = value
        self.uri: str = uri
        self.source: Source | None = source
        self.valueScript: Standard | None = valueScript

    @property
    def scriptCode(self) -> str:
        if self.valueScript is None:
            return ''
        return self.valueScript.code

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'ValueLanguage':
        return cls(
            code=_str(d, 'code'),
            value=_str(d, 'value'),
            uri=_str(d, 'uri'),
            source=_obj(d, 'source', Source),
            valueScript=_obj(d, 'valueScript', Standard),
        )


class DescriptiveValue:
    def __init__(self) -> None:
        self.value: str = ''
        self.hasValue: bool = False  # distinguishes value='' from no value at all
        self.code: str = ''
        self.uri: str = ''
        self.type: str = ''
        self.status: str = ''
        self.displayLabel: str = ''
        self.qualifier: str = ''
        self.valueAt: str = ''
        self.source: Source | None = None
        self.standard: Standard | None = None
        self.encoding: Standard | None = None
        self.valueLanguage: ValueLanguage | None = None
        self.structuredValue: list[DescriptiveValue] = []
        self.parallelValue: list[DescriptiveValue] = []
        self.groupedValue: list[DescriptiveValue] = []
        self.note: list[DescriptiveValue] = []
        self.identifier: list[DescriptiveValue] = []
        self.appliesTo: list[DescriptiveValue] = []

    @property
    def shape(self) -> ValueShape:
        if self.structuredValue:
            return ValueShape.STRUCTURED
        if self.parallelValue:
            return ValueShape.PARALLEL
        if self.groupedValue:
            return ValueShape.GROUPED
        return ValueShape.PLAIN

    @property
    def langCode(self) -> str:
        if self.valueLanguage is None:
            return ''
        return self.valueLanguage.code

    @property
    def scriptCode(self) -> str:
        if self.valueLanguage is None:
            return ''
        return self.valueLanguage.scriptCode

    def notesOfType(self, noteType: str) -> list['DescriptiveValue']:
        return [note for note in self.note if note.type == noteType]

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'DescriptiveValue':
        dv = cls()
        dv.hasValue = d.get('value') is not None
        dv.value = _str(d, 'value')
        dv.code = _str(d, 'code')
        dv.uri = _str(d, 'uri')
        dv.type = _str(d, 'type')
        dv.status = _str(d, 'status')
        dv.displayLabel = _str(d, 'displayLabel')
        dv.qualifier = _str(d, 'qualifier')
        dv.valueAt = _str(d, 'valueAt')
        dv.source = _obj(d, 'source', Source)
        dv.standard = _obj(d, 'standard', Standard)
        dv.encoding = _obj(d, 'encoding', Standard)
        dv.valueLanguage = _obj(d, 'valueLanguage', ValueLanguage)
        dv.structuredValue = _list(d, 'structuredValue', DescriptiveValue)
        dv.parallelValue = _list(d, 'parallelValue', DescriptiveValue)
        dv.groupedValue = _list(d, 'groupedValue', DescriptiveValue)
        dv.note = _list(d, 'note', DescriptiveValue)
        dv.identifier = _list(d, 'identifier', DescriptiveValue)
        dv.appliesTo = _list(d, 'appliesTo', DescriptiveValue)
        return dv


class Role:
    def __init__(
        self,
        value: str = '',
        code: str = '',
        uri: str = '',
        source: Source | None = None,
    ) -> None:
        self.value: str = value
        self.code: str = code
        self.uri: str = uri
        self.source: Source | None = source

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Role':
        return cls(
            value=_str(d, 'value'),
            code=_str(d, 'code'),
            uri=_str(d, 'uri'),
            source=_obj(d, 'source', Source),
        )


class Contributor:
    def __init__(self) -> None:
        self.name: list[DescriptiveValue] = []
        self.type: str = ''
        self.status: str = ''
        self.role: list[Role] = []
        self.note: list[DescriptiveValue] = []
        self.identifier: list[DescriptiveValue] = []
        self.valueAt: str = ''

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Contributor':
        contrib = cls()
        contrib.name = _list(d, 'name', DescriptiveValue)
        contrib.type = _str(d, 'type')
        contrib.status = _str(d, 'status')
        contrib.role = _list(d, 'role', Role)
        contrib.note = _list(d, 'note', DescriptiveValue)
        contrib.identifier = _list(d, 'identifier', DescriptiveValue)
        contrib.valueAt = _str(d, 'valueAt')
        return contrib


class Event:
    def __init__(self) -> None:
        self.type: str = ''
        self.displayLabel: str = ''
        self.date: list[DescriptiveValue] = []
        self.location: list[DescriptiveValue] = []
        self.contributor: list[Contributor] = []
        self.note: list[DescriptiveValue] = []
        self.identifier: list[DescriptiveValue] = []

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Event':
        event = cls()
        event.type = _str(d, 'type')
        event.displayLabel = _str(d, 'displayLabel')
        event.date = _list(d, 'date', DescriptiveValue)
        event.location = _list(d, 'location', DescriptiveValue)
        event.contributor = _list(d, 'contributor', Contributor)
        event.note = _list(d, 'note', DescriptiveValue)
        event.identifier = _list(d, 'identifier', DescriptiveValue)
        return event


class Language:
    def __init__(self) -> None:
        self.code: str = ''
        self.value: str = ''
        self.uri: str = ''
        self.status: str = ''
        self.displayLabel: str = ''
        self.source: Source | None = None
        self.script: DescriptiveValue | None = None

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Language':
        lang = cls()
        lang.code = _str(d, 'code')
        lang.value = _str(d, 'value')
        lang.uri = _str(d, 'uri')
        lang.status = _str(d, 'status')
        lang.displayLabel = _str(d, 'displayLabel')
        lang.source = _obj(d, 'source', Source)
        lang.script = _obj(d, 'script', DescriptiveValue)
        return lang


class Access:
    def __init__(self) -> None:
        self.url: list[DescriptiveValue] = []
        self.physicalLocation: list[DescriptiveValue] = []
        self.digitalLocation: list[DescriptiveValue] = []
        self.accessContact: list[DescriptiveValue] = []
        self.note: list[DescriptiveValue] = []

    @property
    def hasLocations(self) -> bool:
        return bool(
            self.url or self.physicalLocation or self.digitalLocation or self.accessContact
        )

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Access':
        access = cls()
        access.url = _list(d, 'url', DescriptiveValue)
        access.physicalLocation = _list(d, 'physicalLocation', DescriptiveValue)
        access.digitalLocation = _list(d, 'digitalLocation', DescriptiveValue)
        access.accessContact = _list(d, 'accessContact', DescriptiveValue)
        access.note = _list(d, 'note', DescriptiveValue)
        return access


class AdminMetadata:
    def __init__(self) -> None:
        self.contributor: list[Contributor] = []
        self.event: list[Event] = []
        self.language: list[Language] = []
        self.note: list[DescriptiveValue] = []
        self.identifier: list[DescriptiveValue] = []
        self.standard: Standard | None = None

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'AdminMetadata':
        admin = cls()
        admin.contributor = _list(d, 'contributor', Contributor)
        admin.event = _list(d, 'event', Event)
        admin.language = _list(d, 'language', Language)
        admin.note = _list(d, 'note', DescriptiveValue)
        admin.identifier = _list(d, 'identifier', DescriptiveValue)
        admin.standard = _obj(d, 'standard', Standard)
        return admin


class Geographic:
    def __init__(self) -> None:
        self.form: list[DescriptiveValue] = []
        self.subject: list[DescriptiveValue] = []

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Geographic':
        geo = cls()
        geo.form = _list(d, 'form', DescriptiveValue)
        geo.subject = _list(d, 'subject', DescriptiveValue)
        return geo


class Description:
    '''
    The root of a descriptive metadata tree (a "descriptive resource").
    Collection order is significant: the first title is the primary title
    unless another one has status "primary".
    '''
    def __init__(self) -> None:
        self.title: list[DescriptiveValue] = []
        self.contributor: list[Contributor] = []
        self.event: list[Event] = []
        self.form: list[DescriptiveValue] = []
        self.geographic: list[Geographic] = []
        self.language: list[Language] = []
        self.note: list[DescriptiveValue] = []
        self.identifier: list[DescriptiveValue] = []
        self.subject: list[DescriptiveValue] = []
        self.access: Access | None = None
        self.relatedResource: list[RelatedResource] = []
        self.adminMetadata: AdminMetadata | None = None
        self.purl: str = ''

    def _fillFromDict(self, d: dict[str, t.Any]) -> None:
        self.title = _list(d, 'title', DescriptiveValue)
        self.contributor = _list(d, 'contributor', Contributor)
        self.event = _list(d, 'event', Event)
        self.form = _list(d, 'form', DescriptiveValue)
        self.geographic = _list(d, 'geographic', Geographic)
        self.language = _list(d, 'language', Language)
        self.note = _list(d, 'note', DescriptiveValue)
        self.identifier = _list(d, 'identifier', DescriptiveValue)
        self.subject = _list(d, 'subject', DescriptiveValue)
        self.access = _obj(d, 'access', Access)
        self.relatedResource = _list(d, 'relatedResource', RelatedResource)
        self.adminMetadata = _obj(d, 'adminMetadata', AdminMetadata)
        self.purl = _str(d, 'purl')

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'Description':
        desc = cls()
        desc._fillFromDict(d)
        return desc


class RelatedResource(Description):
    def __init__(self) -> None:
        super().__init__()
        self.type: str = ''
        self.displayLabel: str = ''
        self.valueAt: str = ''

    @classmethod
    def fromDict(cls, d: dict[str, t.Any]) -> 'RelatedResource':
        related = cls()
        related._fillFromDict(d)
        related.type = _str(d, 'type')
        related.displayLabel = _str(d, 'displayLabel')
        related.valueAt = _str(d, 'valueAt')
        return related
