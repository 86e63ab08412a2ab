# ------------------------------------------------------------------------------
# Name:          titlewriter.py
# Purpose:       TitleWriter writes Cocina titles as MODS <titleInfo> elements.
#                Uniform titles with an embedded name are written as a
#                <titleInfo>/<name> pair sharing a nameTitleGroup.
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
from cocina2mods.mods.modsexceptions import ModsValueError
from cocina2mods.mods.nametitlegroup import NameTitleGroup
from cocina2mods.mods.contributorwriter import ContributorWriter

environLocal = m21.environment.Environment('cocina2mods.mods.titlewriter')

NONSORTING_COUNT_NOTE: str = 'nonsorting character count'


class TitleWriter:
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()
        # contributors already written next to a uniform title
        self.writtenContributors: list[Contributor] = []

    def writeTitles(
        self,
        titles: list[DescriptiveValue],
        contributors: list[Contributor] | None = None,
        additionalAttributes: dict[str, str] | None = None
    ) -> None:
        for title in titles:
            self.write(title, contributors or [], additionalAttributes or {})

    def write(
        self,
        title: DescriptiveValue,
        contributors: list[Contributor],
        additionalAttributes: dict[str, str]
    ) -> None:
        if title.valueAt:
            self.tb.element('titleInfo', CocinaUtilities.xlinkAttributes(title.valueAt))
            return

        # (contributor, {parallelIndex: nameTitleGroup}) for each contributor that
        # shares a nameTitleGroup with this title; written once, after the title
        pending: list[tuple[Contributor, dict[int | None, str]]] = []

        shape: ValueShape = title.shape
        if shape == ValueShape.PARALLEL:
            self._writeParallel(title, contributors, additionalAttributes, pending)
        elif shape == ValueShape.GROUPED:
            for groupedTitle in title.groupedValue:
                self._writeBasic(groupedTitle, additionalAttributes)
        elif shape == ValueShape.STRUCTURED:
            attrib: dict[str, str] = self.titleInfoAttributes(title) | additionalAttributes
            self._writeStructuredWithNames(title, title, attrib, contributors, pending)
        elif title.hasValue:
            self._writeBasic(title, additionalAttributes)

        self._writeNameTitleContributors(pending)

    @staticmethod
    def titleInfoAttributes(title: DescriptiveValue) -> dict[str, str]:
        attrib: dict[str, str] = {}
        if title.status == 'primary':
            attrib['usage'] = 'primary'
        attrib |= CocinaUtilities.languageAttributes(title)
        attrib['displayLabel'] = title.displayLabel
        attrib |= CocinaUtilities.uriAttributes(title)
        if title.standard is not None:
            attrib['transliteration'] = title.standard.value
        if title.type == 'supplied':
            attrib['supplied'] = 'yes'
        elif title.type != 'transliterated':
            attrib['type'] = title.type
        return CocinaUtilities.compactAttributes(attrib)

    def _writeBasic(self, title: DescriptiveValue, additionalAttributes: dict[str, str]) -> None:
        attrib: dict[str, str] = self.titleInfoAttributes(title) | additionalAttributes
        self.tb.start('titleInfo', CocinaUtilities.compactAttributes(attrib))
        self.tb.element('title', {}, title.value)
        self.tb.end('titleInfo')

    def _writeParallel(
        self,
        title: DescriptiveValue,
        contributors: list[Contributor],
        additionalAttributes: dict[str, str],
        pending: list[tuple[Contributor, dict[int | None, str]]]
    ) -> None:
        altRepGroup: str = self.idGenerator.nextAltRepGroup()
        primaryIndex: int = 0
        for i, variant in enumerate(title.parallelValue):
            if variant.status == 'primary':
                primaryIndex = i
                break

        for i, variant in enumerate(title.parallelValue):
            attrib: dict[str, str] = (
                CocinaUtilities.languageAttributes(variant)
                | {'displayLabel': variant.displayLabel}
                | CocinaUtilities.uriAttributes(variant)
                | additionalAttributes
                | {'altRepGroup': altRepGroup}
            )
            if title.type == 'uniform':
                # uniform variants are only primary if they say so
                attrib['type'] = 'uniform'
                if variant.status == 'primary':
                    attrib['usage'] = 'primary'
            elif i == primaryIndex:
                attrib['usage'] = 'primary'
            else:
                attrib['type'] = 'translated'
                if variant.type == 'transliterated' and variant.standard is not None:
                    attrib['transliteration'] = variant.standard.value
            attrib = CocinaUtilities.compactAttributes(attrib)

            if variant.shape == ValueShape.STRUCTURED:
                if title.type == 'uniform':
                    self._writeStructuredWithNames(variant, title, attrib, contributors, pending)
                else:
                    self._writeStructured(variant, attrib)
            elif variant.hasValue:
                self.tb.start('titleInfo', attrib)
                self.tb.element('title', {}, variant.value)
                self.tb.end('titleInfo')

    def _writeStructuredWithNames(
        self,
        title: DescriptiveValue,
        outerTitle: DescriptiveValue,
        attrib: dict[str, str],
        contributors: list[Contributor],
        pending: list[tuple[Contributor, dict[int | None, str]]]
    ) -> None:
        # A uniform title that embeds a name is split into <titleInfo> and <name>,
        # linked by a nameTitleGroup id.
        if outerTitle.type != 'uniform':
            self._writeStructured(title, attrib)
            return

        nameTokens: list[str] = NameTitleGroup.titleNameTokens(title)
        if not nameTokens:
            self._writeStructured(title, attrib)
            return

        contributor: Contributor | None
        parallelIndex: int | None
        contributor, _nameIndex, parallelIndex = (
            NameTitleGroup.findContributorForTitle(title, contributors)
        )
        if contributor is not None and self._alreadyWritten(contributor):
            # an earlier title already wrote this contributor with its own group
            self._writeStructured(title, attrib)
            return

        nameTitleGroup: str = self.idGenerator.nextNameTitleGroup()
        self._writeStructured(title, attrib | {'nameTitleGroup': nameTitleGroup})

        if contributor is not None:
            for pendingContributor, nameTitleGroups in pending:
                if pendingContributor is contributor:
                    nameTitleGroups.setdefault(parallelIndex, nameTitleGroup)
                    return
            pending.append((contributor, {parallelIndex: nameTitleGroup}))
            return

        self._writeEmbeddedName(title, nameTitleGroup)

    def _alreadyWritten(self, contributor: Contributor) -> bool:
        return any(contributor is c for c in self.writtenContributors)

    def _writeNameTitleContributors(
        self,
        pending: list[tuple[Contributor, dict[int | None, str]]]
    ) -> None:
        if not pending:
            return
        contributorWriter = ContributorWriter(self.tb, self.idGenerator, self.notices)
        for contributor, nameTitleGroups in pending:
            contributorWriter.write(contributor, nameTitleGroups)
            self.writtenContributors.append(contributor)

    def _writeEmbeddedName(self, title: DescriptiveValue, nameTitleGroup: str) -> None:
        nameParts: list[DescriptiveValue] = [
            part for part in title.structuredValue if part.type == 'name'
        ]
        attrib: dict[str, str] = {'type': 'personal', 'nameTitleGroup': nameTitleGroup}
        for part in nameParts:
            attrib |= CocinaUtilities.uriAttributes(part)

        self.tb.start('name', attrib)
        for part in nameParts:
            if part.shape == ValueShape.STRUCTURED:
                for subPart in part.structuredValue:
                    self.tb.element(
                        'namePart',
                        ContributorWriter.namePartAttributes(subPart),
                        subPart.value
                    )
            else:
                self.tb.element('namePart', {}, part.value)
        self.tb.end('name')

    def _writeStructured(self, title: DescriptiveValue, attrib: dict[str, str]) -> None:
        titleParts: list[tuple[str, DescriptiveValue]] = []
        for part in self.flattenStructuredValue(title):
            if part.type in CocinaVocabulary.TITLE_NAME_PART_TYPES:
                continue
            tag: str = CocinaVocabulary.COCINA_TITLE_PART_TO_MODS.get(part.type, '')
            if not tag:
                self.notices.notify(
                    f'unknown title part type "{part.type}"; title part not written'
                )
                continue
            titleParts.append((tag, part))

        if not titleParts:
            raise ModsValueError(
                'structured title has no recognizable title parts: '
                + str([part.type for part in title.structuredValue])
            )

        nonSortCount: int = self.nonSortingCharacterCount(title)
        self.tb.start('titleInfo', attrib)
        for tag, part in titleParts:
            text: str = part.value
            if tag == 'nonSort' and len(text) < nonSortCount:
                text = text.ljust(nonSortCount)
            self.tb.element(tag, {}, text)
        self.tb.end('titleInfo')

    @staticmethod
    def flattenStructuredValue(title: DescriptiveValue) -> list[DescriptiveValue]:
        # leaves first, then the leaves of any nested (non-name) structuredValues
        leaves: list[DescriptiveValue] = [
            part for part in title.structuredValue if part.shape == ValueShape.PLAIN
        ]
        nodes: list[DescriptiveValue] = [
            part for part in title.structuredValue
            if part.shape == ValueShape.STRUCTURED and part.type != 'name'
        ]
        for node in nodes:
            leaves.extend(TitleWriter.flattenStructuredValue(node))
        return leaves

    @staticmethod
    def nonSortingCharacterCount(title: DescriptiveValue) -> int:
        for note in title.note:
            if note.type.lower() == NONSORTING_COUNT_NOTE:
                try:
                    return int(note.value)
                except ValueError:
                    environLocal.warn(
                        f'invalid nonsorting character count: "{note.value}"'
                    )
                    return 0
        return 0
