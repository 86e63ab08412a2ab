# ------------------------------------------------------------------------------
# Name:          partwriter.py
# Purpose:       PartWriter writes Cocina part notes as a MODS <part> element,
#                with <detail>, <extent>, <text> and <date> children.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder

PART_NOTE_TYPE: str = 'part'
PAGE_POINTS: tuple[str, ...] = ('start', 'end')


class PartWriter:
    '''
    A part note's groupedValue holds typed pieces: 'number', 'caption' and
    'title' go in a <detail> (whose type comes from a 'detail type' piece),
    'text' and 'date' go directly in the <part>, and 'list' (plus an optional
    'extent unit', and an optional start/end page range) goes in an <extent>.
    A part note with a structuredValue is a list of such groups.

    A related resource's 'location within source' note (or 'volume', 'marker',
    etc.) is also written in the <part>, as a typed <detail> with <number> (and
    a <caption> from its displayLabel).
    '''
    def __init__(self, tb: TreeBuilder) -> None:
        self.tb: TreeBuilder = tb

    @staticmethod
    def isPartNote(note: DescriptiveValue) -> bool:
        return (note.type == PART_NOTE_TYPE
                or note.type in CocinaVocabulary.COCINA_PART_DETAIL_NOTE_TYPE_TO_MODS)

    @staticmethod
    def partGroups(note: DescriptiveValue) -> list[list[DescriptiveValue]]:
        if note.type != PART_NOTE_TYPE:
            return []
        if note.shape == ValueShape.STRUCTURED:
            return [member.groupedValue for member in note.structuredValue if member.groupedValue]
        if note.groupedValue:
            return [note.groupedValue]
        return []

    @staticmethod
    def hasContent(note: DescriptiveValue) -> bool:
        if note.type in CocinaVocabulary.COCINA_PART_DETAIL_NOTE_TYPE_TO_MODS:
            return bool(note.value)
        for group in PartWriter.partGroups(note):
            for piece in group:
                if piece.type in (CocinaVocabulary.PART_DETAIL_TYPES
                                  + CocinaVocabulary.PART_OTHER_TYPES):
                    return True
                if piece.type == 'list' or PartWriter._pageRange(group):
                    return True
        return False

    def write(self, notes: list[DescriptiveValue]) -> None:
        # all the notes go in one <part>, which is only written if it has content
        notes = [note for note in notes if self.hasContent(note)]
        if not notes:
            return

        self.tb.start('part', {})
        for note in notes:
            if note.type == PART_NOTE_TYPE:
                for group in self.partGroups(note):
                    self._writeGroup(group)
            else:
                self._writeDetailNote(note)
        self.tb.end('part')

    def _writeDetailNote(self, note: DescriptiveValue) -> None:
        detailType: str = CocinaVocabulary.COCINA_PART_DETAIL_NOTE_TYPE_TO_MODS[note.type]
        self.tb.start('detail', {'type': detailType})
        self.tb.element('number', {}, note.value)
        if note.displayLabel:
            self.tb.element('caption', {}, note.displayLabel)
        self.tb.end('detail')

    def _writeGroup(self, group: list[DescriptiveValue]) -> None:
        detailValues: list[DescriptiveValue] = [
            piece for piece in group if piece.type in CocinaVocabulary.PART_DETAIL_TYPES
        ]
        if detailValues:
            attrib: dict[str, str] = {}
            detailType: str = self._valueOfType(group, 'detail type')
            if detailType:
                attrib['type'] = detailType
            self.tb.start('detail', attrib)
            for piece in detailValues:
                self.tb.element(piece.type, {}, piece.value)
            self.tb.end('detail')

        for piece in group:
            if piece.type in CocinaVocabulary.PART_OTHER_TYPES:
                self.tb.element(piece.type, {}, piece.value)

        self._writeExtent(group)

    def _writeExtent(self, group: list[DescriptiveValue]) -> None:
        listValue: str = self._valueOfType(group, 'list')
        pages: list[DescriptiveValue] = self._pageRange(group)
        if not listValue and not pages:
            return

        attrib: dict[str, str] = {}
        unit: str = self._valueOfType(group, 'extent unit')
        if unit:
            attrib['unit'] = unit
        self.tb.start('extent', attrib)
        for page in pages:
            self.tb.element(page.type, {}, page.value)
        if listValue:
            self.tb.element('list', {}, listValue)
        self.tb.end('extent')

    @staticmethod
    def _valueOfType(group: list[DescriptiveValue], pieceType: str) -> str:
        for piece in group:
            if piece.type == pieceType:
                return piece.value
        return ''

    @staticmethod
    def _pageRange(group: list[DescriptiveValue]) -> list[DescriptiveValue]:
        for piece in group:
            if piece.shape == ValueShape.STRUCTURED:
                return [page for page in piece.structuredValue if page.type in PAGE_POINTS]
        return []
