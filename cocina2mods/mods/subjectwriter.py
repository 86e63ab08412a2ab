# ------------------------------------------------------------------------------
# Name:          subjectwriter.py
# Purpose:       SubjectWriter writes Cocina subjects as MODS <subject> (and
#                <classification>) elements.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import re

from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.contributorwriter import ContributorWriter

MAP_COORDINATES: str = 'map coordinates'
CLASSIFICATION: str = 'classification'
NAF: str = 'naf'
LCSH: str = 'lcsh'


class SubjectWriter:
    '''
    Writes subjects.  Subjects of type 'map coordinates' also need the map scale
    and projection, which are in the form list, so the forms are passed in.
    '''
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None,
        forms: list[DescriptiveValue] | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()
        self.forms: list[DescriptiveValue] = forms or []

    def writeSubjects(self, subjects: list[DescriptiveValue]) -> None:
        for subject in subjects:
            self.write(subject)

    def write(self, subject: DescriptiveValue) -> None:
        if subject.type == CLASSIFICATION:
            self.writeClassification(subject)
            return

        if subject.valueAt:
            self.tb.element('subject', CocinaUtilities.xlinkAttributes(subject.valueAt))
            return

        shape: ValueShape = subject.shape
        if shape == ValueShape.PARALLEL:
            self._writeParallel(subject)
        elif shape == ValueShape.STRUCTURED:
            self._writeStructured(subject)
        elif shape == ValueShape.GROUPED:
            for member in subject.groupedValue:
                self.write(member)
        elif subject.value or (subject.code and subject.type == 'place'):
            # only a place has somewhere to put a code (<geographicCode>)
            self._writeBasic(subject)

    # ----- <classification> -----

    def writeClassification(self, subject: DescriptiveValue) -> None:
        if not subject.value:
            return
        attrib: dict[str, str] = {}
        if subject.source is not None:
            attrib['authority'] = subject.source.code
            edition: re.Match | None = re.search(r'\d+', subject.source.version)
            if edition:
                attrib['edition'] = edition.group(0)
        attrib['displayLabel'] = subject.displayLabel
        attrib |= CocinaUtilities.uriAttributes(subject)
        self.tb.element(
            'classification', CocinaUtilities.compactAttributes(attrib), subject.value
        )

    # ----- <subject> -----

    @staticmethod
    def isNameType(subjectType: str) -> bool:
        return subjectType in CocinaVocabulary.COCINA_NAME_TYPE_TO_MODS

    @staticmethod
    def hasMapCoordinates(subject: DescriptiveValue, subjectType: str = '') -> bool:
        '''
        True if writing this subject writes a <cartographics> (which carries the
        map scale and projection from the forms), at any depth.
        '''
        subjectType = subjectType or subject.type
        if subjectType == MAP_COORDINATES:
            return True
        if subject.type == CLASSIFICATION or subject.valueAt:
            return False
        shape: ValueShape = subject.shape
        if shape == ValueShape.PARALLEL:
            return any(
                SubjectWriter.hasMapCoordinates(variant, variant.type or subjectType)
                for variant in subject.parallelValue
            )
        if shape == ValueShape.GROUPED:
            return any(SubjectWriter.hasMapCoordinates(member) for member in subject.groupedValue)
        if shape == ValueShape.STRUCTURED:
            if subjectType in ('place', 'time') or SubjectWriter.isNameType(subjectType):
                return False
            return any(
                SubjectWriter.hasMapCoordinates(component)
                for component in subject.structuredValue
            )
        return False

    def _subjectAuthority(self, subject: DescriptiveValue) -> str:
        if subject.source is None or subject.type == 'place':
            return ''
        if self.isNameType(subject.type) and subject.source.code == NAF:
            # a name from the name authority file is an LCSH subject
            return LCSH
        return subject.source.code

    def _writeBasic(self, subject: DescriptiveValue) -> None:
        attrib: dict[str, str] = CocinaUtilities.compactAttributes({
            'authority': self._subjectAuthority(subject),
            'displayLabel': subject.displayLabel,
        })
        self.tb.start('subject', attrib)
        self.writeComponent(subject)
        self.tb.end('subject')

    def _writeParallel(self, subject: DescriptiveValue) -> None:
        altRepGroup: str = self.idGenerator.nextAltRepGroup()
        for variant in subject.parallelValue:
            attrib: dict[str, str] = (
                CocinaUtilities.languageAttributes(variant)
                | {'altRepGroup': altRepGroup}
                | CocinaUtilities.compactAttributes({
                    'displayLabel': variant.displayLabel or subject.displayLabel
                })
            )
            self.tb.start('subject', attrib)
            if variant.shape == ValueShape.STRUCTURED:
                self._writeStructuredContents(variant, variant.type or subject.type)
            else:
                self.writeComponent(variant, variant.type or subject.type)
            self.tb.end('subject')

    def _writeStructured(self, subject: DescriptiveValue) -> None:
        attrib: dict[str, str] = {}
        if subject.source is not None:
            attrib['authority'] = subject.source.code
            attrib['authorityURI'] = subject.source.uri
        elif subject.structuredValue[0].source is not None:
            attrib['authority'] = subject.structuredValue[0].source.code
        attrib['valueURI'] = subject.uri
        attrib['displayLabel'] = subject.displayLabel
        attrib |= CocinaUtilities.languageAttributes(subject)

        self.tb.start('subject', CocinaUtilities.compactAttributes(attrib))
        self._writeStructuredContents(subject, subject.type)
        self.tb.end('subject')

    def _writeStructuredContents(self, subject: DescriptiveValue, subjectType: str) -> None:
        if subjectType == 'place':
            self._writeHierarchicalGeographic(subject)
        elif subjectType == 'time':
            self._writeTemporalRange(subject)
        elif self.isNameType(subjectType):
            self._writeName(subject, subjectType)
        else:
            for component in subject.structuredValue:
                self.writeComponent(component)

    # ----- children of <subject> -----

    @staticmethod
    def componentAttributes(component: DescriptiveValue) -> dict[str, str]:
        # authority attributes only accompany an actual URI
        attrib: dict[str, str] = {}
        hasSourceUri: bool = component.source is not None and bool(component.source.uri)
        if component.uri or hasSourceUri:
            attrib |= CocinaUtilities.uriAttributes(component)
        if component.encoding is not None and component.encoding.code:
            attrib['encoding'] = component.encoding.code
        return attrib

    def writeComponent(self, component: DescriptiveValue, componentType: str = '') -> None:
        componentType = componentType or component.type
        if self.isNameType(componentType):
            self._writeName(component, componentType)
        elif componentType == 'title':
            self.tb.start('titleInfo', self.componentAttributes(component))
            self.tb.element('title', {}, CocinaUtilities.joinedValue(component))
            self.tb.end('titleInfo')
        elif componentType == MAP_COORDINATES:
            self._writeCartographics(component)
        elif componentType == 'place':
            self._writeGeographic(component)
        elif componentType == 'time' and component.shape == ValueShape.STRUCTURED:
            self._writeTemporalRange(component)
        elif component.shape == ValueShape.STRUCTURED:
            for subComponent in component.structuredValue:
                self.writeComponent(subComponent)
        elif not component.value:
            return
        else:
            tag: str = CocinaVocabulary.COCINA_SUBJECT_TYPE_TO_MODS.get(
                componentType, CocinaVocabulary.DEFAULT_SUBJECT_TAG
            )
            self.tb.element(tag, self.componentAttributes(component), component.value)

    def _writeName(self, name: DescriptiveValue, nameType: str) -> None:
        attrib: dict[str, str] = (
            {'type': CocinaVocabulary.modsNameTypeForCocinaType(nameType)}
            | self.componentAttributes(name)
        )
        self.tb.start('name', CocinaUtilities.compactAttributes(attrib))
        if name.shape == ValueShape.STRUCTURED:
            for part in name.structuredValue:
                self.tb.element(
                    'namePart', ContributorWriter.namePartAttributes(part), part.value
                )
        else:
            self.tb.element('namePart', {}, name.value)
        self.tb.end('name')

    def _writeGeographic(self, place: DescriptiveValue) -> None:
        if place.code:
            attrib: dict[str, str] = {}
            if place.source is not None and place.source.code:
                attrib['authority'] = place.source.code
            self.tb.element('geographicCode', attrib, place.code)
            return

        attrib = CocinaUtilities.languageAttributes(place) | CocinaUtilities.uriAttributes(place)
        attrib.pop('script', None)
        self.tb.element('geographic', attrib, place.value)

    def _writeTemporalRange(self, time: DescriptiveValue) -> None:
        for point in time.structuredValue:
            attrib: dict[str, str] = {}
            if point.type in ('start', 'end'):
                attrib['point'] = point.type
            encoding = point.encoding or time.encoding
            if encoding is not None and encoding.code:
                attrib['encoding'] = encoding.code
            self.tb.element('temporal', attrib, point.value)

    def _writeHierarchicalGeographic(self, place: DescriptiveValue) -> None:
        self.tb.start('hierarchicalGeographic', {})
        for part in place.structuredValue:
            tag: str = CocinaVocabulary.COCINA_HIERARCHICAL_GEOGRAPHIC_TO_MODS.get(part.type, '')
            if not tag:
                self.notices.notify(
                    f'unknown hierarchical geographic part type "{part.type}"; not written'
                )
                continue
            self.tb.element(tag, {}, part.value)
        self.tb.end('hierarchicalGeographic')

    def _writeCartographics(self, coordinates: DescriptiveValue) -> None:
        self.tb.start('cartographics', {})
        scale: str = self._formValue('map scale')
        if scale:
            self.tb.element('scale', {}, scale)
        projection: str = self._formValue('map projection')
        if projection:
            self.tb.element('projection', {}, projection)
        self.tb.element('coordinates', {}, coordinates.value)
        self.tb.end('cartographics')

    def _formValue(self, formType: str) -> str:
        for form in self.forms:
            if form.type == formType:
                return form.value
        return ''
