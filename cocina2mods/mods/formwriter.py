# ------------------------------------------------------------------------------
# Name:          formwriter.py
# Purpose:       FormWriter writes Cocina forms as MODS <typeOfResource>,
#                <genre>, <physicalDescription> and (for map scale and
#                projection) <subject>/<cartographics> elements.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.subjectwriter import SubjectWriter

RESOURCE_TYPE: str = 'resource type'
MODS_RESOURCE_TYPES: str = 'MODS resource types'
SELF_DEPOSIT_RESOURCE_TYPES: str = 'Stanford self-deposit resource types'
MAP_FORM_TYPES: tuple[str, ...] = ('map scale', 'map projection')

# typeOfResource values that are really flags on (another) typeOfResource
RESOURCE_TYPE_FLAGS: tuple[str, ...] = ('collection', 'manuscript')

SELF_DEPOSIT_GENRE_TYPES: dict[str, str] = {
    'type': 'H2 type',
    'subtype': 'H2 subtype',
}


class FormWriter:
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None,
        subjects: list[DescriptiveValue] | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()
        self.subjects: list[DescriptiveValue] = subjects or []

    @staticmethod
    def isPhysicalDescription(form: DescriptiveValue) -> bool:
        return form.type in CocinaVocabulary.COCINA_PHYSICAL_DESCRIPTION_TO_MODS

    @staticmethod
    def isModsResourceType(form: DescriptiveValue) -> bool:
        return (form.type == RESOURCE_TYPE
                and form.source is not None
                and form.source.value == MODS_RESOURCE_TYPES)

    def writeForms(self, forms: list[DescriptiveValue]) -> None:
        typeOfResourceFlags: dict[str, str] = {
            form.value: 'yes' for form in forms
            if self.isModsResourceType(form) and form.value in RESOURCE_TYPE_FLAGS
        }
        physicalDescriptions: list[DescriptiveValue] = [
            form for form in forms if self.isPhysicalDescription(form)
        ]
        physicalDescriptionWritten: bool = False

        for form in forms:
            if self.isPhysicalDescription(form):
                if not physicalDescriptionWritten:
                    self._writePhysicalDescription(physicalDescriptions)
                    physicalDescriptionWritten = True
                continue
            if form.type in MAP_FORM_TYPES:
                continue
            if self.isModsResourceType(form) and form.value in RESOURCE_TYPE_FLAGS:
                continue
            self.write(form, typeOfResourceFlags)
            if self.isModsResourceType(form):
                # only the first typeOfResource carries the flags
                typeOfResourceFlags = {}

        if typeOfResourceFlags:
            # flags with no typeOfResource to go on
            self.tb.element('typeOfResource', typeOfResourceFlags)

        self._writeCartographics(forms)

    def write(
        self,
        form: DescriptiveValue,
        typeOfResourceFlags: dict[str, str] | None = None
    ) -> None:
        shape: ValueShape = form.shape
        if shape == ValueShape.PARALLEL:
            altRepGroup: str = self.idGenerator.nextAltRepGroup()
            for variant in form.parallelValue:
                attrib: dict[str, str] = (
                    CocinaUtilities.languageAttributes(variant) | {'altRepGroup': altRepGroup}
                )
                self._writeForm(variant, form.type, form, attrib)
            return

        if shape == ValueShape.GROUPED:
            # a grouped form is one physicalDescription's worth of values
            self._writePhysicalDescription(form.groupedValue)
            return

        if form.type == RESOURCE_TYPE and shape == ValueShape.STRUCTURED:
            self._writeSelfDepositGenres(form)
            return

        attrib = dict(typeOfResourceFlags or {})
        self._writeForm(form, form.type, form, attrib)

    def _writeForm(
        self,
        form: DescriptiveValue,
        formType: str,
        owner: DescriptiveValue,
        attrib: dict[str, str]
    ) -> None:
        if not form.value:
            return
        attrib = (
            CocinaUtilities.uriAttributes(form)
            | CocinaUtilities.compactAttributes({
                'displayLabel': form.displayLabel or owner.displayLabel
            })
            | attrib
        )
        if formType == RESOURCE_TYPE and self.isModsResourceType(owner):
            self.tb.element('typeOfResource', attrib, form.value)
        elif formType in (RESOURCE_TYPE, 'genre'):
            self.tb.element('genre', attrib, form.value)
        else:
            self.notices.notify(f'unknown form type "{formType}"; written as genre')
            self.tb.element('genre', attrib, form.value)

    def _writeSelfDepositGenres(self, form: DescriptiveValue) -> None:
        for part in form.structuredValue:
            genreType: str = SELF_DEPOSIT_GENRE_TYPES.get(part.type, '')
            attrib: dict[str, str] = {'type': genreType} if genreType else {}
            self.tb.element('genre', attrib, part.value)

    def _writePhysicalDescription(self, forms: list[DescriptiveValue]) -> None:
        members: list[DescriptiveValue] = [
            form for form in forms if self.isPhysicalDescription(form) and form.value
        ]
        notes: list[DescriptiveValue] = [note for form in forms for note in form.note]
        if not members and not notes:
            return

        self.tb.start('physicalDescription', {})
        for form in members:
            tag: str = CocinaVocabulary.COCINA_PHYSICAL_DESCRIPTION_TO_MODS[form.type]
            attrib: dict[str, str] = {}
            if tag == 'form':
                if form.type != 'form':
                    attrib['type'] = form.type
                attrib |= CocinaUtilities.uriAttributes(form)
            self.tb.element(tag, attrib, form.value)
        for note in notes:
            self.tb.element(
                'note',
                CocinaUtilities.compactAttributes({
                    'type': note.type,
                    'displayLabel': note.displayLabel,
                }),
                note.value
            )
        self.tb.end('physicalDescription')

    def _writeCartographics(self, forms: list[DescriptiveValue]) -> None:
        # map coordinates subjects write their own scale and projection
        if any(SubjectWriter.hasMapCoordinates(subject) for subject in self.subjects):
            return
        mapForms: list[DescriptiveValue] = [
            form for form in forms if form.type in MAP_FORM_TYPES and form.value
        ]
        if not mapForms:
            return

        self.tb.start('subject', {})
        self.tb.start('cartographics', {})
        for formType, tag in zip(MAP_FORM_TYPES, ('scale', 'projection')):
            for form in mapForms:
                if form.type == formType:
                    self.tb.element(tag, {}, form.value)
        self.tb.end('cartographics')
        self.tb.end('subject')
