# ------------------------------------------------------------------------------
# Name:          descriptivewriter.py
# Purpose:       DescriptiveWriter writes the children of a MODS <mods> (or
#                <relatedItem>) element from one Cocina description.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import Description
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.titlewriter import TitleWriter
from cocina2mods.mods.contributorwriter import ContributorWriter
from cocina2mods.mods.formwriter import FormWriter
from cocina2mods.mods.languagewriter import LanguageWriter
from cocina2mods.mods.notewriter import NoteWriter
from cocina2mods.mods.subjectwriter import SubjectWriter
from cocina2mods.mods.eventwriter import EventWriter
from cocina2mods.mods.identifierwriter import IdentifierWriter
from cocina2mods.mods.locationwriter import LocationWriter
from cocina2mods.mods.adminmetadatawriter import AdminMetadataWriter
from cocina2mods.mods.relatedresourcewriter import RelatedResourceWriter
from cocina2mods.mods.geographicwriter import GeographicWriter


class DescriptiveWriter:
    '''
    Calls each of the element writers once, in MODS document order:
    title, contributor, form, language, note, subject, event, identifier,
    location, adminMetadata, relatedResource, geographic.

    All the writers share one IdGenerator, so altRepGroup and nameTitleGroup
    ids are unique across the whole document (including any relatedItems).
    '''
    @staticmethod
    def write(
        tb: TreeBuilder,
        description: Description,
        idGenerator: IdGenerator,
        notices: ModsNotices | None = None
    ) -> None:
        if notices is None:
            notices = ModsNotices()

        # contributors that belong to a uniform title are written with that title
        TitleWriter(tb, idGenerator, notices).writeTitles(
            description.title, description.contributor
        )
        ContributorWriter(tb, idGenerator, notices).writeContributors(
            description.contributor, description.title
        )
        FormWriter(tb, idGenerator, notices, subjects=description.subject).writeForms(
            description.form
        )
        LanguageWriter(tb).writeLanguages(description.language)
        NoteWriter(tb, idGenerator).writeNotes(description.note)
        SubjectWriter(tb, idGenerator, notices, forms=description.form).writeSubjects(
            description.subject
        )
        EventWriter(tb, idGenerator, notices).writeEvents(description.event)
        IdentifierWriter(tb).writeIdentifiers(description.identifier)
        LocationWriter(tb).write(description.access, description.purl)
        AdminMetadataWriter(tb).write(description.adminMetadata)
        RelatedResourceWriter(tb, idGenerator, notices).writeRelatedResources(
            description.relatedResource
        )
        GeographicWriter(tb, notices).writeGeographics(description.geographic)
