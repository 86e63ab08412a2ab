# ------------------------------------------------------------------------------
# Name:          adminmetadatawriter.py
# Purpose:       AdminMetadataWriter writes Cocina descriptive adminMetadata
#                as a MODS <recordInfo> element.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import AdminMetadata
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.languagewriter import LanguageWriter
from cocina2mods.mods.identifierwriter import IdentifierWriter

# key: Cocina adminMetadata event type, value: MODS recordInfo child
RECORD_DATE_TAGS: dict[str, str] = {
    'creation': 'recordCreationDate',
    'modification': 'recordChangeDate',
}

RECORD_ORIGIN_NOTE: str = 'record origin'


class AdminMetadataWriter:
    def __init__(self, tb: TreeBuilder) -> None:
        self.tb: TreeBuilder = tb

    @staticmethod
    def isEmpty(admin: AdminMetadata) -> bool:
        return not (
            admin.language
            or admin.contributor
            or admin.standard is not None
            or admin.note
            or admin.event
            or admin.identifier
        )

    def write(self, admin: AdminMetadata | None) -> None:
        if admin is None or self.isEmpty(admin):
            return

        self.tb.start('recordInfo', {})
        self._writeLanguagesOfCataloging(admin)
        self._writeContentSources(admin)
        self._writeDescriptionStandard(admin)
        self._writeRecordOrigin(admin)
        self._writeRecordDates(admin)
        self._writeRecordIdentifiers(admin)
        self.tb.end('recordInfo')

    def _writeLanguagesOfCataloging(self, admin: AdminMetadata) -> None:
        languageWriter = LanguageWriter(self.tb)
        for language in admin.language:
            languageWriter.write(language, tag='languageOfCataloging')

    def _writeContentSources(self, admin: AdminMetadata) -> None:
        for contributor in admin.contributor:
            if not contributor.name:
                continue
            source = contributor.name[0]
            text: str = source.code or source.value
            if text:
                self.tb.element(
                    'recordContentSource', CocinaUtilities.uriAttributes(source), text
                )

    def _writeDescriptionStandard(self, admin: AdminMetadata) -> None:
        standard = admin.standard
        if standard is None:
            return
        if standard.uri:
            attrib: dict[str, str] = CocinaUtilities.uriAttributes(standard)
            if standard.code:
                attrib['authority'] = standard.code
            self.tb.element('descriptionStandard', attrib, standard.value or standard.code)
        elif standard.code or standard.value:
            self.tb.element('descriptionStandard', {}, standard.code or standard.value)

    def _writeRecordOrigin(self, admin: AdminMetadata) -> None:
        for note in admin.note:
            if note.type == RECORD_ORIGIN_NOTE and note.value:
                self.tb.element('recordOrigin', {}, note.value)
                return

    def _writeRecordDates(self, admin: AdminMetadata) -> None:
        for eventType, tag in RECORD_DATE_TAGS.items():
            for event in admin.event:
                if event.type != eventType:
                    continue
                for date in event.date:
                    if not date.value:
                        continue
                    attrib: dict[str, str] = {}
                    if date.encoding is not None and date.encoding.code:
                        attrib['encoding'] = date.encoding.code
                    self.tb.element(tag, attrib, date.value)

    def _writeRecordIdentifiers(self, admin: AdminMetadata) -> None:
        for identifier in admin.identifier:
            text, source = IdentifierWriter.textAndType(identifier)
            if not text:
                continue
            attrib: dict[str, str] = CocinaUtilities.compactAttributes({
                'displayLabel': identifier.displayLabel,
                'source': source,
            })
            if identifier.status == 'invalid':
                attrib['invalid'] = 'yes'
            self.tb.element('recordIdentifier', attrib, text)
