# ------------------------------------------------------------------------------
# Name:          contributorwriter.py
# Purpose:       ContributorWriter writes Cocina contributors as MODS <name>
#                elements (basic, structured, grouped and parallel names).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import music21 as m21

from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import Contributor
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.rolewriter import RoleWriter
from cocina2mods.mods.identifierwriter import IdentifierWriter
from cocina2mods.mods.nametitlegroup import NameTitleGroup

environLocal = m21.environment.Environment('cocina2mods.mods.contributorwriter')

UNSPECIFIED_OTHERS: str = 'unspecified others'
UNCITED_DESCRIPTION: str = 'not included in citation'


class ContributorWriter:
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()
        self.roleWriter: RoleWriter = RoleWriter(tb, self.notices)

    def writeContributors(
        self,
        contributors: list[Contributor],
        titles: list[DescriptiveValue] | None = None
    ) -> None:
        # Contributors that share a nameTitleGroup with a uniform title have
        # already been written (by TitleWriter, right after that title).
        alreadyWritten: list[Contributor] = []
        if titles:
            alreadyWritten = NameTitleGroup.contributorsInNameTitleGroups(titles, contributors)

        for contributor in contributors:
            if any(contributor is c for c in alreadyWritten):
                continue
            self.write(contributor)

    def write(
        self,
        contributor: Contributor,
        nameTitleGroups: dict[int | None, str] | None = None
    ) -> None:
        '''
        Writes one contributor.  nameTitleGroups maps a parallel variant index to
        the nameTitleGroup id for that variant's <name>; the key None applies to
        a name that is not parallel (or to every variant that has no id of its own).
        '''
        nameTitleGroups = nameTitleGroups or {}
        if contributor.type == UNSPECIFIED_OTHERS:
            self.tb.start('name', {})
            self.tb.element('etal')
            self.tb.end('name')
            return

        if not contributor.name:
            return

        firstName: DescriptiveValue = contributor.name[0]
        if firstName.shape == ValueShape.PARALLEL:
            self._writeParallelContributor(contributor, firstName, nameTitleGroups)
            return

        self._writeBasicContributor(contributor, nameTitleGroups.get(None, ''))

    def _writeBasicContributor(self, contributor: Contributor, nameTitleGroup: str) -> None:
        firstName: DescriptiveValue = contributor.name[0]
        attrib: dict[str, str] = (
            {
                'type': self.nameTypeFor(contributor, firstName, nameTitleGroup),
                'nameTitleGroup': nameTitleGroup,
            }
            | CocinaUtilities.languageAttributes(firstName)
            | CocinaUtilities.uriAttributes(firstName)
            | {'displayLabel': firstName.displayLabel}
        )
        if contributor.status == 'primary':
            attrib['usage'] = 'primary'
        attrib |= CocinaUtilities.xlinkAttributes(firstName.valueAt or contributor.valueAt)

        self.tb.start('name', CocinaUtilities.compactAttributes(attrib))
        for name in contributor.name:
            self.writeName(name)
        self._writeContributorDetails(contributor)
        self.tb.end('name')

    def _writeParallelContributor(
        self,
        contributor: Contributor,
        name: DescriptiveValue,
        nameTitleGroups: dict[int | None, str]
    ) -> None:
        altRepGroup: str = self.idGenerator.nextAltRepGroup()
        for i, variant in enumerate(name.parallelValue):
            variantNameTitleGroup: str = nameTitleGroups.get(i, nameTitleGroups.get(None, ''))

            attrib: dict[str, str] = (
                {
                    'type': self.nameTypeFor(contributor, name, variantNameTitleGroup),
                    'nameTitleGroup': variantNameTitleGroup,
                    'altRepGroup': altRepGroup,
                }
                | CocinaUtilities.languageAttributes(variant)
                | CocinaUtilities.uriAttributes(variant)
            )
            if variant.status == 'primary':
                attrib['usage'] = 'primary'
            if variant.type == 'transliteration' and variant.standard is not None:
                attrib['transliteration'] = variant.standard.value
            attrib |= CocinaUtilities.xlinkAttributes(name.valueAt)

            self.tb.start('name', CocinaUtilities.compactAttributes(attrib))
            self.writeName(variant)
            self._writeContributorDetails(contributor)
            self.tb.end('name')

    @staticmethod
    def nameTypeFor(
        contributor: Contributor,
        name: DescriptiveValue,
        nameTitleGroup: str = ''
    ) -> str:
        # the contributor's type wins over the name's type; a name in a
        # nameTitleGroup is personal unless we know better
        modsType: str = CocinaVocabulary.modsNameTypeForCocinaType(contributor.type)
        if not modsType:
            modsType = CocinaVocabulary.modsNameTypeForCocinaType(name.type)
        if not modsType and nameTitleGroup:
            modsType = 'personal'
        return modsType

    def _writeContributorDetails(self, contributor: Contributor) -> None:
        self.writeIdentifiers(contributor)
        self.writeNotes(contributor)
        self.roleWriter.writeRoles(contributor)

    def writeName(self, name: DescriptiveValue) -> None:
        shape: ValueShape = name.shape
        if shape == ValueShape.STRUCTURED:
            for part in name.structuredValue:
                self.writeName(part)
        elif shape == ValueShape.GROUPED:
            self._writeGroupedName(name)
        elif shape == ValueShape.PARALLEL:
            # a parallel name nested inside a name; write the variants in order
            for variant in name.parallelValue:
                self.writeName(variant)
        elif name.hasValue:
            if name.type == 'display':
                self.tb.element('displayForm', {}, name.value)
            else:
                self.tb.element('namePart', self.namePartAttributes(name), name.value)

    @staticmethod
    def namePartAttributes(part: DescriptiveValue) -> dict[str, str]:
        attrib: dict[str, str] = {}
        modsType: str = CocinaVocabulary.COCINA_NAME_PART_TO_MODS.get(part.type, '')
        if modsType:
            attrib['type'] = modsType
        attrib |= CocinaUtilities.xlinkAttributes(part.valueAt)
        return attrib

    def _writeGroupedName(self, name: DescriptiveValue) -> None:
        for part in name.groupedValue:
            if part.type == 'pseudonym':
                self.tb.element(
                    'alternativeName',
                    self.namePartAttributes(part) | {'altType': 'pseudonym'},
                    part.value
                )
            elif part.type == 'alternative':
                self.tb.element('alternativeName', self.namePartAttributes(part), part.value)
            else:
                self.writeName(part)

    def writeIdentifiers(self, contributor: Contributor) -> None:
        for identifier in contributor.identifier:
            text, modsType = IdentifierWriter.textAndType(identifier)
            if not text:
                continue

            attrib: dict[str, str] = {
                'displayLabel': identifier.displayLabel,
                'typeURI': identifier.source.uri if identifier.source is not None else '',
                'type': modsType,
            }
            if identifier.status == 'invalid':
                attrib['invalid'] = 'yes'
            self.tb.element(
                'nameIdentifier', CocinaUtilities.compactAttributes(attrib), text
            )

    def writeNotes(self, contributor: Contributor) -> None:
        for note in contributor.note:
            if note.type == 'affiliation':
                self.tb.element('affiliation', {}, note.value)
            elif note.type == 'description':
                self.tb.element('description', {}, note.value)
            elif note.type == 'citation status':
                if note.value == 'false':
                    self.tb.element('description', {}, UNCITED_DESCRIPTION)
            else:
                self.notices.notify(
                    f'unknown contributor note type "{note.type}"; note not written'
                )
                environLocal.printDebug(f'dropped contributor note: {note.value}')
