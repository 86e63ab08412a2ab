# ------------------------------------------------------------------------------
# Name:          locationwriter.py
# Purpose:       LocationWriter writes Cocina access metadata (and the purl) as
#                MODS <accessCondition> and <location> elements.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import Access
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder

SHELF_LOCATOR: str = 'shelf locator'
PRIMARY_DISPLAY: str = 'primary display'

# key: Cocina access note type, value: MODS accessCondition@type
# (other types are written as-is)
ACCESS_CONDITION_TYPES: dict[str, str] = {
    'access restriction': 'restriction on access',
}


class LocationWriter:
    '''
    Writes <accessCondition>s, then one <location> holding the physical
    locations and shelf locators, then the purl in a <location> of its own,
    then each other url in a <location> of its own.
    '''
    def __init__(self, tb: TreeBuilder) -> None:
        self.tb: TreeBuilder = tb

    def write(self, access: Access | None, purl: str = '') -> None:
        if access is not None:
            self.writeAccessConditions(access.note)
            self.writePhysicalLocations(access)

        if purl:
            self.tb.start('location', {})
            self.tb.element('url', {'usage': PRIMARY_DISPLAY}, purl)
            self.tb.end('location')

        if access is not None:
            for url in access.url:
                if url.value and url.value != purl:
                    self.writeUrl(url, hasPurl=bool(purl))

    def writeAccessConditions(self, notes: list[DescriptiveValue]) -> None:
        for note in notes:
            if not note.value:
                continue
            attrib: dict[str, str] = CocinaUtilities.compactAttributes({
                'type': ACCESS_CONDITION_TYPES.get(note.type, note.type),
                'displayLabel': note.displayLabel,
            })
            self.tb.element('accessCondition', attrib, note.value)

    @staticmethod
    def physicalLocationAttributes(location: DescriptiveValue) -> dict[str, str]:
        return (CocinaUtilities.uriAttributes(location)
                | CocinaUtilities.languageAttributes(location))

    def writePhysicalLocations(self, access: Access) -> None:
        physicalLocations: list[DescriptiveValue] = [
            loc for loc in access.physicalLocation
            if loc.type != SHELF_LOCATOR and (loc.value or loc.code)
        ]
        shelfLocators: list[DescriptiveValue] = [
            loc for loc in access.physicalLocation
            if loc.type == SHELF_LOCATOR and loc.value
        ]
        accessContacts: list[DescriptiveValue] = [
            loc for loc in access.accessContact if loc.value
        ]
        digitalLocations: list[DescriptiveValue] = [
            loc for loc in access.digitalLocation if loc.value
        ]
        if not (physicalLocations or shelfLocators or accessContacts or digitalLocations):
            return

        self.tb.start('location', {})
        for loc in physicalLocations:
            self.tb.element(
                'physicalLocation',
                self.physicalLocationAttributes(loc),
                loc.value or loc.code
            )
        for loc in accessContacts:
            self.tb.element(
                'physicalLocation',
                {'type': 'repository'} | self.physicalLocationAttributes(loc),
                loc.value
            )
        for loc in digitalLocations:
            self.tb.element(
                'physicalLocation',
                {'type': 'discovery'} | self.physicalLocationAttributes(loc),
                loc.value
            )
        for loc in shelfLocators:
            self.tb.element('shelfLocator', {}, loc.value)
        self.tb.end('location')

    def writeUrl(self, url: DescriptiveValue, hasPurl: bool) -> None:
        attrib: dict[str, str] = {}
        # the purl, if there is one, is always the primary display
        if url.status == 'primary' and not hasPurl:
            attrib['usage'] = PRIMARY_DISPLAY
        if url.displayLabel:
            attrib['displayLabel'] = url.displayLabel
        if url.note and url.note[0].value:
            attrib['note'] = url.note[0].value
        self.tb.start('location', {})
        self.tb.element('url', attrib, url.value)
        self.tb.end('location')
