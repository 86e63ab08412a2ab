# ------------------------------------------------------------------------------
# Name:          notewriter.py
# Purpose:       NoteWriter writes Cocina notes as MODS <note>, <abstract>,
#                <tableOfContents>, <targetAudience> or <part> elements.
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
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.partwriter import PartWriter
from cocina2mods.mods.partwriter import PART_NOTE_TYPE

ITALIC_MARKUP_PATTERN: re.Pattern = re.compile(r'(</?i>)')

# note types that have their own MODS element
NOTE_TYPE_TO_TAG: dict[str, str] = {
    'table of contents': 'tableOfContents',
    'target audience': 'targetAudience',
}


class NoteWriter:
    def __init__(self, tb: TreeBuilder, idGenerator: IdGenerator) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator

    def writeNotes(self, notes: list[DescriptiveValue]) -> None:
        for note in notes:
            self.write(note)

    def write(self, note: DescriptiveValue) -> None:
        if note.type == PART_NOTE_TYPE:
            PartWriter(self.tb).write([note])
            return

        tag: str = self.tagFor(note)
        if note.shape == ValueShape.PARALLEL:
            altRepGroup: str = self.idGenerator.nextAltRepGroup()
            for variant in note.parallelValue:
                attrib: dict[str, str] = (
                    self.noteAttributes(note, tag)
                    | self.noteAttributes(variant, tag)
                    | CocinaUtilities.languageAttributes(variant)
                    | {'altRepGroup': altRepGroup}
                )
                self._writeNoteElement(tag, attrib, CocinaUtilities.joinedValue(variant))
            return

        attrib = self.noteAttributes(note, tag) | CocinaUtilities.languageAttributes(note)
        self._writeNoteElement(tag, attrib, CocinaUtilities.joinedValue(note))

    @staticmethod
    def tagFor(note: DescriptiveValue) -> str:
        noteType: str = note.type.lower()
        if (noteType in CocinaVocabulary.ABSTRACT_NOTE_TYPES
                or note.displayLabel in CocinaVocabulary.ABSTRACT_DISPLAY_LABELS):
            return 'abstract'
        return NOTE_TYPE_TO_TAG.get(noteType, 'note')

    @staticmethod
    def noteAttributes(note: DescriptiveValue, tag: str) -> dict[str, str]:
        attrib: dict[str, str] = {}
        # only <note> needs its type stated
        if tag == 'note':
            attrib['type'] = note.type
        attrib['displayLabel'] = note.displayLabel
        attrib |= CocinaUtilities.uriAttributes(note)
        attrib |= CocinaUtilities.xlinkAttributes(note.valueAt)
        return CocinaUtilities.compactAttributes(attrib)

    def _writeNoteElement(self, tag: str, attrib: dict[str, str], text: str) -> None:
        self.tb.start(tag, attrib)
        if text:
            self.writeMarkedUpText(text)
        self.tb.end(tag)

    def writeMarkedUpText(self, text: str) -> None:
        '''
        Writes text that may contain literal <i>...</i> markup.  The markup is
        written raw (via cdata), everything else is written as (escaped) text.
        '''
        for run in ITALIC_MARKUP_PATTERN.split(text):
            if not run:
                continue
            if ITALIC_MARKUP_PATTERN.fullmatch(run):
                self.tb.cdata(run)
            else:
                self.tb.data(run)
