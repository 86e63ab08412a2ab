# ------------------------------------------------------------------------------
# Name:          cocinautilities.py
# Purpose:       Utility functions shared by the MODS writers: attribute
#                composition from Cocina values, and a few value queries.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

#    All methods are static.  CocinaUtilities is just a namespace for these functions.

import typing as t

from cocina2mods.shared.cocinamodel import DescriptiveValue
from cocina2mods.shared.cocinamodel import ValueShape
from cocina2mods.shared.cocinavocabulary import CocinaVocabulary

XLINK_HREF: str = 'xlink:href'


class CocinaUtilities:
    @staticmethod
    def compactAttributes(attrib: dict[str, str | None]) -> dict[str, str]:
        # MODS never gets an empty attribute
        return {key: value for key, value in attrib.items() if value}

    @staticmethod
    def uriAttributes(cocina: t.Any) -> dict[str, str]:
        '''
        Returns {valueURI, authorityURI, authority} for anything with
        optional .uri and .source{code, uri}, omitting absent keys.
        '''
        if cocina is None:
            return {}
        attrib: dict[str, str] = {}
        uri: str = getattr(cocina, 'uri', '')
        if uri:
            attrib['valueURI'] = uri
        source = getattr(cocina, 'source', None)
        if source is not None:
            if source.uri:
                attrib['authorityURI'] = source.uri
            if source.code:
                attrib['authority'] = source.code
        return attrib

    @staticmethod
    def languageAttributes(cocina: DescriptiveValue | None) -> dict[str, str]:
        # lang and script, from valueLanguage
        if cocina is None:
            return {}
        attrib: dict[str, str] = {}
        if cocina.langCode:
            attrib['lang'] = cocina.langCode
        if cocina.scriptCode:
            attrib['script'] = cocina.scriptCode
        return attrib

    @staticmethod
    def xlinkAttributes(valueAt: str) -> dict[str, str]:
        if not valueAt:
            return {}
        return {XLINK_HREF: valueAt}

    @staticmethod
    def valueTokens(cocina: DescriptiveValue) -> list[str]:
        # The leaf strings of a plain or structured value, in order.
        if cocina.shape == ValueShape.STRUCTURED:
            output: list[str] = []
            for part in cocina.structuredValue:
                output.extend(CocinaUtilities.valueTokens(part))
            return output
        if cocina.shape == ValueShape.PLAIN and cocina.value:
            return [cocina.value]
        return []

    @staticmethod
    def parallelVariants(cocina: DescriptiveValue) -> list[DescriptiveValue]:
        # a parallel value's variants, or the value itself
        if cocina.shape == ValueShape.PARALLEL:
            return cocina.parallelValue
        return [cocina]

    @staticmethod
    def isEnglishOrLatin(
        langCode: str,
        scriptCode: str
    ) -> bool:
        return (
            langCode in CocinaVocabulary.DEFAULT_GROUP_LANGUAGES
            or scriptCode in CocinaVocabulary.DEFAULT_GROUP_SCRIPTS
        )

    @staticmethod
    def joinedValue(cocina: DescriptiveValue, separator: str = ' -- ') -> str:
        if cocina.shape == ValueShape.STRUCTURED:
            return separator.join(
                part.value for part in cocina.structuredValue if part.value
            )
        return cocina.value
