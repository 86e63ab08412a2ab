# ------------------------------------------------------------------------------
# Name:          identifierwriter.py
# Purpose:       IdentifierWriter writes Cocina identifiers as MODS
#                <identifier> elements.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder


class IdentifierWriter:
    def __init__(self, tb: TreeBuilder) -> None:
        self.tb: TreeBuilder = tb

    def writeIdentifiers(self, identifiers: list[DescriptiveValue]) -> None:
        for identifier in identifiers:
            self.write(identifier)

    @staticmethod
    def textAndType(identifier: DescriptiveValue) -> tuple[str, str]:
        # An identifier that is only a URI has type 'uri'.  Unknown identifier
        # types are written as-is.
        if not identifier.value and identifier.uri:
            return identifier.uri, 'uri'
        return (
            identifier.value,
            CocinaVocabulary.modsIdentifierTypeForCocinaType(identifier.type)
        )

    def write(self, identifier: DescriptiveValue) -> None:
        text, modsType = self.textAndType(identifier)
        if not text:
            return
        attrib: dict[str, str] = {
            'type': modsType,
            'displayLabel': identifier.displayLabel,
        }
        if identifier.status == 'invalid':
            attrib['invalid'] = 'yes'
        attrib |= CocinaUtilities.xlinkAttributes(identifier.valueAt)
        self.tb.element('identifier', CocinaUtilities.compactAttributes(attrib), text)
