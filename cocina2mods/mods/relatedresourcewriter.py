# ------------------------------------------------------------------------------
# Name:          relatedresourcewriter.py
# Purpose:       RelatedResourceWriter writes Cocina related resources as MODS
#                <relatedItem> elements, each holding a nested description.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import copy

from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import RelatedResource
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.partwriter import PartWriter

OTHER_RELATION_TYPE_NOTE: str = 'other relation type'


class RelatedResourceWriter:
    '''
    Each related resource is written as a <relatedItem> containing everything
    a top-level description would contain (written by a nested DescriptiveWriter,
    sharing our IdGenerator), followed by a <part> made from the resource's
    part notes.  Related resources that are only a reference (valueAt) are
    written last, as empty <relatedItem xlink:href="..."/> elements.
    '''
    def __init__(
        self,
        tb: TreeBuilder,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None
    ) -> None:
        self.tb: TreeBuilder = tb
        self.idGenerator: IdGenerator = idGenerator
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()

    def writeRelatedResources(self, relatedResources: list[RelatedResource]) -> None:
        for related in relatedResources:
            if not related.valueAt:
                self.write(related)

        for related in relatedResources:
            if related.valueAt:
                self.tb.element('relatedItem', CocinaUtilities.xlinkAttributes(related.valueAt))

    @staticmethod
    def otherTypeNote(related: RelatedResource) -> DescriptiveValue | None:
        for note in related.note:
            if note.type == OTHER_RELATION_TYPE_NOTE:
                return note
        return None

    def relatedItemAttributes(self, related: RelatedResource) -> dict[str, str]:
        attrib: dict[str, str] = {}
        if related.type:
            if related.type in CocinaVocabulary.COCINA_RELATED_TYPE_TO_MODS:
                # 'related to' maps to '', and gets no type at all
                attrib['type'] = CocinaVocabulary.COCINA_RELATED_TYPE_TO_MODS[related.type]
            else:
                self.notices.notify(
                    f'unknown related resource type "{related.type}"; type not written'
                )
        attrib['displayLabel'] = related.displayLabel

        otherTypeNote: DescriptiveValue | None = self.otherTypeNote(related)
        if otherTypeNote is not None:
            attrib['otherType'] = otherTypeNote.value
            attrib['otherTypeURI'] = otherTypeNote.uri
            if otherTypeNote.source is not None:
                attrib['otherTypeAuth'] = otherTypeNote.source.value
        return CocinaUtilities.compactAttributes(attrib)

    @staticmethod
    def contentWithoutPartNotes(related: RelatedResource) -> RelatedResource:
        # a shallow copy is enough; we only replace the note list
        content: RelatedResource = copy.copy(related)
        content.note = [
            note for note in related.note
            if not PartWriter.isPartNote(note) and note.type != OTHER_RELATION_TYPE_NOTE
        ]
        return content

    def write(self, related: RelatedResource) -> None:
        # imported here because DescriptiveWriter imports us
        from cocina2mods.mods.descriptivewriter import DescriptiveWriter

        self.tb.start('relatedItem', self.relatedItemAttributes(related))
        DescriptiveWriter.write(
            self.tb,
            self.contentWithoutPartNotes(related),
            self.idGenerator,
            self.notices
        )
        PartWriter(self.tb).write(
            [note for note in related.note if PartWriter.isPartNote(note)]
        )
        self.tb.end('relatedItem')
