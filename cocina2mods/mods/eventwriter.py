# ------------------------------------------------------------------------------
# Name:          eventwriter.py
# Purpose:       EventWriter writes Cocina events as MODS <originInfo> elements.
#                An event that carries parallel (translated) values is written
#                as several <originInfo> elements sharing an altRepGroup, one
#                per language/script.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import music21 as m21

from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import ValueLanguage
from cocina2mods.shared import Contributor
from cocina2mods.shared import Event
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder

environLocal = m21.environment.Environment('cocina2mods.mods.eventwriter')

DATE_TYPE_NOTE: str = 'date type'
DATE_POINTS: tuple[str, ...] = ('start', 'end')


class GroupedParallelValues:
    '''
    The values of a translated event that belong in one <originInfo>: the Nth
    variant of every parallel location, publisher name, date and note, plus
    whatever non-parallel values get merged in.  Dates and notes are kept
    paired with the value that owns them, since some of their attributes
    (encoding, qualifier, date type, note type) live on the owner.
    '''
    def __init__(self) -> None:
        self.locations: list[DescriptiveValue] = []
        self.names: list[DescriptiveValue] = []
        self.dates: list[tuple[DescriptiveValue, DescriptiveValue | None]] = []
        self.notes: list[tuple[DescriptiveValue, DescriptiveValue | None]] = []
        self.valueLanguage: ValueLanguage | None = None

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

    def hasLanguageOrScript(self) -> bool:
        return bool(self.langCode or self.scriptCode)

    def isEnglishOrLatin(self) -> bool:
        return CocinaUtilities.isEnglishOrLatin(self.langCode, self.scriptCode)

    def takeValueLanguage(self, value: DescriptiveValue) -> None:
        # first one found wins
        if self.valueLanguage is None and value.valueLanguage is not None:
            self.valueLanguage = value.valueLanguage

    def merge(self, other: 'GroupedParallelValues') -> None:
        self.locations.extend(other.locations)
        self.names.extend(other.names)
        self.dates.extend(other.dates)
        self.notes.extend(other.notes)


class EventWriter:
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()

    def writeEvents(self, events: list[Event]) -> None:
        for event in events:
            self.write(event)

    def write(self, event: Event) -> None:
        if self.isTranslated(event):
            self._writeTranslated(event)
        else:
            self._writeBasic(event)

    @staticmethod
    def isTranslated(event: Event) -> bool:
        for value in event.location + event.note + event.date:
            if value.shape == ValueShape.PARALLEL:
                return True
        # only publishers are written, so only their names can make groups
        for contributor in event.contributor:
            if (EventWriter.isPublisher(contributor)
                    and contributor.name[0].shape == ValueShape.PARALLEL):
                return True
        return False

    @staticmethod
    def hasPublisherRole(contributor: Contributor) -> bool:
        for role in contributor.role:
            if role.value.lower() == 'publisher' or role.code == 'pbl':
                return True
        return False

    @staticmethod
    def isPublisher(contributor: Contributor) -> bool:
        # a contributor with no roles at all is taken to be the publisher
        if not contributor.name:
            return False
        return not contributor.role or EventWriter.hasPublisherRole(contributor)

    def effectiveEventType(self, event: Event) -> str:
        if event.type:
            return event.type
        for contributor in event.contributor:
            if self.hasPublisherRole(contributor):
                return 'publication'
        return ''

    def originInfoAttributes(self, event: Event, eventType: str) -> dict[str, str]:
        attrib: dict[str, str] = {}
        if eventType:
            modsEventType: str = CocinaVocabulary.COCINA_EVENT_TYPE_TO_MODS.get(eventType, '')
            if modsEventType:
                attrib['eventType'] = modsEventType
            else:
                self.notices.notify(f'unknown event type "{eventType}"; eventType not written')
        if event.displayLabel:
            attrib['displayLabel'] = event.displayLabel
        return attrib

    # ----- basic (non-translated) events -----

    def _writeBasic(self, event: Event) -> None:
        eventType: str = self.effectiveEventType(event)
        publishers: list[Contributor] = self._publishers(event)
        if not (event.date or event.location or publishers or event.note):
            return

        self.tb.start('originInfo', self.originInfoAttributes(event, eventType))
        for date in event.date:
            self.writeDate(date, eventType)
        for location in event.location:
            self.writeLocation(location)
        for contributor in publishers:
            self.writePublisher(contributor.name[0], parallel=False)
        for note in event.note:
            self.writeNote(note)
        self.tb.end('originInfo')

    def _publishers(self, event: Event) -> list[Contributor]:
        output: list[Contributor] = []
        for contributor in event.contributor:
            if not contributor.name:
                continue
            if not self.isPublisher(contributor):
                self.notices.notify(
                    'event contributor without a publisher role; not written'
                )
                continue
            output.append(contributor)
        return output

    # ----- translated events -----

    def _writeTranslated(self, event: Event) -> None:
        eventType: str = self.effectiveEventType(event)
        altRepGroup: str = self.idGenerator.nextAltRepGroup()
        groups: list[GroupedParallelValues] = self.groupParallelValues(event)

        attrib: dict[str, str] = self.originInfoAttributes(event, eventType)
        for group in groups:
            groupAttrib: dict[str, str] = CocinaUtilities.compactAttributes({
                'script': group.scriptCode,
                'lang': group.langCode,
                'altRepGroup': altRepGroup,
            }) | attrib
            self.tb.start('originInfo', groupAttrib)
            for location in group.locations:
                self.writeLocation(location)
            for name in group.names:
                self.writePublisher(name, parallel=True)
            for date, owner in group.dates:
                self.writeDate(date, eventType, owner)
            for note, owner in group.notes:
                self.writeNote(note, owner)
            self.tb.end('originInfo')

    def groupParallelValues(self, event: Event) -> list[GroupedParallelValues]:
        '''
        Zips the parallel values of an event by position: the Nth variant of each
        parallel location, name, date and note go into the Nth group.  Variants are
        assumed to be in the same language/script order in every collection; that
        is not checked.  Non-parallel values are then merged into the English/Latin
        groups (or into every group, if there are no English/Latin groups).
        '''
        publishers: list[Contributor] = self._publishers(event)
        parallelSize: int = 0
        for value in event.location + event.date + event.note:
            if value.shape == ValueShape.PARALLEL:
                parallelSize = max(parallelSize, len(value.parallelValue))
        for contributor in publishers:
            if contributor.name[0].shape == ValueShape.PARALLEL:
                parallelSize = max(parallelSize, len(contributor.name[0].parallelValue))

        groups: list[GroupedParallelValues] = [
            GroupedParallelValues() for _ in range(parallelSize)
        ]
        nonParallel: GroupedParallelValues = GroupedParallelValues()

        for location in event.location:
            if location.shape == ValueShape.PARALLEL:
                for i, variant in enumerate(location.parallelValue):
                    groups[i].locations.append(variant)
                    groups[i].takeValueLanguage(variant)
            else:
                nonParallel.locations.append(location)

        for contributor in publishers:
            name: DescriptiveValue = contributor.name[0]
            if name.shape == ValueShape.PARALLEL:
                for i, variant in enumerate(name.parallelValue):
                    groups[i].names.append(variant)
                    groups[i].takeValueLanguage(variant)
            else:
                nonParallel.names.append(name)

        for date in event.date:
            if date.shape == ValueShape.PARALLEL:
                for i, variant in enumerate(date.parallelValue):
                    groups[i].dates.append((variant, date))
                    groups[i].takeValueLanguage(variant)
            else:
                nonParallel.dates.append((date, None))

        for note in event.note:
            if note.shape == ValueShape.PARALLEL:
                for i, variant in enumerate(note.parallelValue):
                    groups[i].notes.append((variant, note))
                    groups[i].takeValueLanguage(variant)
            else:
                nonParallel.notes.append((note, None))

        # Groups with no language or script at all are treated like non-parallel
        # values, if there is an English/Latin group to put them in.
        englishOrLatin: list[GroupedParallelValues] = [
            group for group in groups
            if group.hasLanguageOrScript() and group.isEnglishOrLatin()
        ]
        if englishOrLatin:
            languageless: list[GroupedParallelValues] = [
                group for group in groups if not group.hasLanguageOrScript()
            ]
            for group in languageless:
                nonParallel.merge(group)
            groups = [group for group in groups if group.hasLanguageOrScript()]

        targets: list[GroupedParallelValues] = englishOrLatin or groups
        for group in targets:
            group.merge(nonParallel)

        environLocal.printDebug(f'translated event: {len(groups)} groups')
        return groups

    # ----- children of originInfo -----

    def writeDate(
        self,
        date: DescriptiveValue,
        eventType: str,
        owner: DescriptiveValue | None = None
    ) -> None:
        tag: str = CocinaVocabulary.dateTagForEventType(eventType)
        if date.shape == ValueShape.STRUCTURED:
            for i, part in enumerate(date.structuredValue):
                # a primary range is keyed on its first date
                isKeyDate: bool = part.status == 'primary' or (
                    i == 0 and 'primary' in (date.status, owner.status if owner else '')
                )
                self._writeDateElement(
                    tag, part, eventType, [date] + ([owner] if owner else []), isKeyDate
                )
        elif date.hasValue:
            isKeyDate = 'primary' in (date.status, owner.status if owner else '')
            self._writeDateElement(tag, date, eventType, [owner] if owner else [], isKeyDate)

    def _writeDateElement(
        self,
        tag: str,
        date: DescriptiveValue,
        eventType: str,
        owners: list[DescriptiveValue],
        isKeyDate: bool
    ) -> None:
        # encoding, qualifier and date type notes are inherited from the owners
        # (a structured date, and/or a parallel date) when the date lacks them
        encoding: str = date.encoding.code if date.encoding is not None else ''
        qualifier: str = date.qualifier
        dateType: str = self._dateTypeNote(date)
        for owner in owners:
            if not encoding and owner.encoding is not None:
                encoding = owner.encoding.code
            if not qualifier:
                qualifier = owner.qualifier
            if not dateType:
                dateType = self._dateTypeNote(owner)

        attrib: dict[str, str] = {}
        if encoding:
            attrib['encoding'] = encoding
        if qualifier:
            attrib['qualifier'] = qualifier
        if isKeyDate:
            attrib['keyDate'] = 'yes'
        if date.type in DATE_POINTS:
            attrib['point'] = date.type
        if eventType == 'development':
            attrib['type'] = 'developed'
        elif tag == CocinaVocabulary.DEFAULT_DATE_TAG and dateType:
            attrib['type'] = dateType
        self.tb.element(tag, attrib, date.value)

    @staticmethod
    def _dateTypeNote(date: DescriptiveValue) -> str:
        for note in date.notesOfType(DATE_TYPE_NOTE):
            return note.value
        return ''

    def writeLocation(self, location: DescriptiveValue) -> None:
        if not location.value and not location.code:
            return
        attrib: dict[str, str] = {}
        if location.type == 'supplied':
            attrib['supplied'] = 'yes'
        uriAttrib: dict[str, str] = CocinaUtilities.uriAttributes(location)
        self.tb.start('place', attrib)
        if location.value:
            self.tb.element('placeTerm', {'type': 'text'} | uriAttrib, location.value)
        if location.code:
            self.tb.element('placeTerm', {'type': 'code'} | uriAttrib, location.code)
        self.tb.end('place')

    def writePublisher(self, name: DescriptiveValue, parallel: bool) -> None:
        text: str = CocinaUtilities.joinedValue(name)
        if not text:
            return
        attrib: dict[str, str] = {}
        if not parallel:
            # in a translated event, lang and script are on the <originInfo>
            attrib = CocinaUtilities.languageAttributes(name)
            if name.standard is not None and name.standard.value:
                attrib['transliteration'] = name.standard.value
        self.tb.element('publisher', attrib, text)

    def writeNote(self, note: DescriptiveValue, owner: DescriptiveValue | None = None) -> None:
        noteType: str = note.type or (owner.type if owner is not None else '')
        tag: str = CocinaVocabulary.COCINA_EVENT_NOTE_TYPE_TO_MODS.get(noteType, '')
        if not tag:
            self.notices.notify(f'unknown event note type "{noteType}"; note not written')
            return
        source = note.source or (owner.source if owner is not None else None)
        attrib: dict[str, str] = {}
        if source is not None and source.code:
            attrib['authority'] = source.code
        self.tb.element(tag, attrib, note.value)
