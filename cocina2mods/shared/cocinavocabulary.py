# ------------------------------------------------------------------------------
# Name:          cocinavocabulary.py
# Purpose:       Look-up tables between Cocina descriptive vocabulary and MODS
#                vocabulary.  These tables are the single home for both
#                directions (MODS->Cocina and Cocina->MODS), so the inverse
#                tables are computed here from the forward ones, never typed in
#                twice.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

#    All members are static.  CocinaVocabulary is just a namespace for these
#    look-up tables and the few functions that consult them.

import typing as t
from types import MappingProxyType


def _frozen(d: dict[str, str]) -> t.Mapping[str, str]:
    return MappingProxyType(d)

def _inverted(d: t.Mapping[str, str]) -> dict[str, str]:
    return {value: key for key, value in d.items()}


class CocinaVocabulary:
    # key: MODS name@type, value: Cocina contributor type
    MODS_NAME_TYPE_TO_COCINA: t.Mapping[str, str] = _frozen({
        'personal': 'person',
        'corporate': 'organization',
        'family': 'family',
        'conference': 'conference',
    })

    # key: Cocina contributor type, value: MODS name@type.
    # 'event' is one-way: MODS 'corporate' already maps back to 'organization'.
    COCINA_NAME_TYPE_TO_MODS: t.Mapping[str, str] = _frozen(
        _inverted(MODS_NAME_TYPE_TO_COCINA) | {'event': 'corporate'}
    )

    # key: MODS namePart@type, value: Cocina name part type
    MODS_NAME_PART_TO_COCINA: t.Mapping[str, str] = _frozen({
        'family': 'surname',
        'given': 'forename',
        'termsOfAddress': 'term of address',
        'date': 'life dates',
    })

    COCINA_NAME_PART_TO_MODS: t.Mapping[str, str] = _frozen(
        _inverted(MODS_NAME_PART_TO_COCINA) | {'activity dates': 'date'}
    )

    # key: MODS titleInfo child, value: Cocina title part type
    MODS_TITLE_PART_TO_COCINA: t.Mapping[str, str] = _frozen({
        'nonSort': 'nonsorting characters',
        'title': 'main title',
        'subTitle': 'subtitle',
        'partName': 'part name',
        'partNumber': 'part number',
    })

    COCINA_TITLE_PART_TO_MODS: t.Mapping[str, str] = _frozen(
        _inverted(MODS_TITLE_PART_TO_COCINA) | {'title': 'title'}
    )

    # title structuredValue parts that are really (parts of) names
    TITLE_NAME_PART_TYPES: tuple[str, ...] = (
        'name',
        'forename',
        'surname',
        'life dates',
        'term of address',
    )

    # key: Cocina identifier type, value: MODS identifier@type
    # (Standard Identifier Schemes and Standard Identifier Source Codes)
    COCINA_IDENTIFIER_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'ARK': 'ark',
        'DOI': 'doi',
        'Handle': 'hdl',
        'ISBN': 'isbn',
        'ISMN': 'ismn',
        'ISNI': 'isni',
        'ISRC': 'isrc',
        'ISSN': 'issn',
        'ISSN-L': 'issn-l',
        'ISTC': 'istc',
        'LCCN': 'lccn',
        'LC control number': 'lccn',
        'local': 'local',
        'ORCID': 'orcid',
        'SICI': 'sici',
        'STRN': 'strn',
        'UPC': 'upc',
        'URI': 'uri',
        'URN': 'urn',
        'VIAF': 'viaf',
        'Wikidata': 'wikidata',
        'music plate': 'music-plate',
        'music publisher': 'music-publisher',
        'videorecording identifier': 'videorecording-identifier',
        'issue number': 'issue number',
        'matrix number': 'matrix number',
    })

    MODS_IDENTIFIER_TYPE_TO_COCINA: t.Mapping[str, str] = _frozen(
        _inverted(COCINA_IDENTIFIER_TYPE_TO_MODS) | {'lccn': 'LCCN'}
    )

    # key: Cocina event type, value: MODS originInfo@eventType
    COCINA_EVENT_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'acquisition': 'acquisition',
        'capture': 'capture',
        'copyright': 'copyright notice',
        'creation': 'production',
        'degree conferral': 'degree conferral',
        'development': 'development',
        'distribution': 'distribution',
        'generation': 'generation',
        'manufacture': 'manufacture',
        'modification': 'modification',
        'performance': 'performance',
        'presentation': 'presentation',
        'production': 'production',
        'publication': 'publication',
        'release': 'release',
        'validity': 'validity',
    })

    # key: Cocina event type, value: MODS date element in originInfo
    # (everything else is dateOther)
    COCINA_EVENT_TYPE_TO_DATE_TAG: t.Mapping[str, str] = _frozen({
        'creation': 'dateCreated',
        'publication': 'dateIssued',
        'copyright': 'copyrightDate',
        'capture': 'dateCaptured',
    })

    DEFAULT_DATE_TAG: str = 'dateOther'

    # key: Cocina event note type, value: MODS originInfo child
    COCINA_EVENT_NOTE_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'edition': 'edition',
        'issuance': 'issuance',
        'frequency': 'frequency',
    })

    # key: Cocina subject type, value: MODS subject child
    COCINA_SUBJECT_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'time': 'temporal',
        'genre': 'genre',
        'place': 'geographic',
        'occupation': 'occupation',
        'topic': 'topic',
    })

    DEFAULT_SUBJECT_TAG: str = 'topic'

    # key: Cocina place part type, value: MODS hierarchicalGeographic child
    COCINA_HIERARCHICAL_GEOGRAPHIC_TO_MODS: t.Mapping[str, str] = _frozen({
        'continent': 'continent',
        'country': 'country',
        'province': 'province',
        'region': 'region',
        'state': 'state',
        'territory': 'territory',
        'county': 'county',
        'city': 'city',
        'city section': 'citySection',
        'island': 'island',
        'area': 'area',
        'extraterrestrial area': 'extraterrestrialArea',
    })

    # key: Cocina form type, value: MODS physicalDescription child
    COCINA_PHYSICAL_DESCRIPTION_TO_MODS: t.Mapping[str, str] = _frozen({
        'form': 'form',
        'material': 'form',
        'technique': 'form',
        'media': 'form',
        'carrier': 'form',
        'extent': 'extent',
        'media type': 'internetMediaType',
        'digital origin': 'digitalOrigin',
        'reformatting quality': 'reformattingQuality',
    })

    # key: Cocina related resource type, value: MODS relatedItem@type
    # ('related to' is a null type by design)
    COCINA_RELATED_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'has original version': 'original',
        'has other format': 'otherFormat',
        'has part': 'constituent',
        'has version': 'otherVersion',
        'in series': 'series',
        'part of': 'host',
        'preceded by': 'preceding',
        'related to': '',
        'reviewed by': 'reviewOf',
        'referenced by': 'isReferencedBy',
        'references': 'references',
        'succeeded by': 'succeeding',
    })

    # part note groupedValue types
    PART_DETAIL_TYPES: tuple[str, ...] = ('number', 'caption', 'title')
    PART_OTHER_TYPES: tuple[str, ...] = ('text', 'date')

    # key: Cocina related resource note type, value: MODS part/detail@type
    COCINA_PART_DETAIL_NOTE_TYPE_TO_MODS: t.Mapping[str, str] = _frozen({
        'location within source': 'part',
        'volume': 'volume',
        'issue': 'issue',
        'chapter': 'chapter',
        'section': 'section',
        'paragraph': 'paragraph',
        'track': 'track',
        'marker': 'marker',
    })

    # A note with any of these types (case-insensitive) is an abstract.
    ABSTRACT_NOTE_TYPES: tuple[str, ...] = ('abstract', 'summary', 'scope and content')

    # A note with any of these displayLabels is an abstract.
    ABSTRACT_DISPLAY_LABELS: tuple[str, ...] = (
        'Abstract',
        'Summary',
        'Scope and content',
        'Review',
        'Content advice',
        'Subject',
    )

    # Role vocabularies that have no valid MODS rendering; roles from these
    # are dropped for contributors with a recognized MODS name type.
    NON_EXPORTABLE_ROLE_SOURCES: tuple[str, ...] = (
        'Stanford self-deposit contributor types',
        'DataCite contributor types',
        'DataCite properties',
    )

    # Role text that is never written as a MODS role (matched case-insensitively).
    SUPPRESSED_ROLE_VALUES: tuple[str, ...] = ('conference',)

    # Parallel values that are not otherwise grouped default to the groups
    # in one of these languages or scripts.
    DEFAULT_GROUP_LANGUAGES: tuple[str, ...] = ('eng',)
    DEFAULT_GROUP_SCRIPTS: tuple[str, ...] = ('Latn',)

    @staticmethod
    def modsNameTypeForCocinaType(cocinaType: str) -> str:
        return CocinaVocabulary.COCINA_NAME_TYPE_TO_MODS.get(cocinaType, '')

    @staticmethod
    def cocinaNameTypeForModsType(modsType: str) -> str:
        return CocinaVocabulary.MODS_NAME_TYPE_TO_COCINA.get(modsType, '')

    @staticmethod
    def modsIdentifierTypeForCocinaType(cocinaType: str) -> str:
        # Unknown identifier types pass through unchanged.
        if not cocinaType:
            return ''
        return CocinaVocabulary.COCINA_IDENTIFIER_TYPE_TO_MODS.get(cocinaType, cocinaType)

    @staticmethod
    def dateTagForEventType(eventType: str) -> str:
        return CocinaVocabulary.COCINA_EVENT_TYPE_TO_DATE_TAG.get(
            eventType, CocinaVocabulary.DEFAULT_DATE_TAG
        )
