# ------------------------------------------------------------------------------
# Name:          geographicwriter.py
# Purpose:       GeographicWriter writes Cocina geographic metadata as a MODS
#                <extension displayLabel="geo"> holding an RDF description
#                (Dublin Core, GML and GMD elements).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import Geographic
from cocina2mods.shared import SharedConstants
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder

DEFAULT_FORMAT: str = 'image/jpeg'
DEFAULT_TYPE: str = 'Image'

POINT_COORDINATES: str = 'point coordinates'
BOUNDING_BOX_COORDINATES: str = 'bounding box coordinates'
COVERAGE: str = 'coverage'


class GeographicWriter:
    def __init__(self, tb: TreeBuilder, notices: ModsNotices | None = None) -> None:
        self.tb: TreeBuilder = tb
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()

    def writeGeographics(self, geographics: list[Geographic]) -> None:
        for geo in geographics:
            self.write(geo)

    def write(self, geo: Geographic) -> None:
        subjectType: str = geo.subject[0].type if geo.subject else ''

        self.tb.start('extension', {'displayLabel': 'geo'})
        self.tb.start('rdf:RDF', self.namespaceAttributes(subjectType))
        self.tb.start('rdf:Description', {})
        self.tb.element('dc:format', {}, self.formatFor(geo))
        self.tb.element('dc:type', {}, self.typeFor(geo))
        if subjectType == POINT_COORDINATES:
            self._writeCenterPoint(geo.subject[0])
        elif subjectType == BOUNDING_BOX_COORDINATES:
            self._writeBoundingBox(geo.subject[0])
            self._writeCoverage(geo.subject)
        elif subjectType:
            self.notices.notify(
                f'unknown geographic subject type "{subjectType}"; coordinates not written'
            )
        self.tb.end('rdf:Description')
        self.tb.end('rdf:RDF')
        self.tb.end('extension')

    @staticmethod
    def namespaceAttributes(subjectType: str) -> dict[str, str]:
        attrib: dict[str, str] = {
            'xmlns:gml': SharedConstants.GML_NAMESPACE,
            'xmlns:dc': SharedConstants.DC_NAMESPACE,
        }
        if POINT_COORDINATES in subjectType:
            attrib['xmlns:gmd'] = SharedConstants.GMD_NAMESPACE
        return attrib

    @staticmethod
    def _formValue(geo: Geographic, formType: str) -> str:
        for form in geo.form:
            if form.type == formType:
                return form.value
        return ''

    @staticmethod
    def formatFor(geo: Geographic) -> str:
        # e.g. 'application/x-esri-shapefile; format=Shapefile'
        dataFormat: str = GeographicWriter._formValue(geo, 'data format')
        if dataFormat:
            mediaType: str = GeographicWriter._formValue(geo, 'media type')
            return f'{mediaType}; format={dataFormat}'
        return DEFAULT_FORMAT

    @staticmethod
    def typeFor(geo: Geographic) -> str:
        return GeographicWriter._formValue(geo, 'type') or DEFAULT_TYPE

    @staticmethod
    def _coordinate(subject: DescriptiveValue, name: str) -> str:
        for point in subject.structuredValue:
            if name in point.type:
                return point.value
        return ''

    def _writeCenterPoint(self, subject: DescriptiveValue) -> None:
        latitude: str = self._coordinate(subject, 'latitude')
        longitude: str = self._coordinate(subject, 'longitude')
        self.tb.start('gmd:centerPoint', {})
        self.tb.start('gml:Point', {'gml:id': 'ID'})
        self.tb.element('gml:pos', {}, f'{latitude} {longitude}')
        self.tb.end('gml:Point')
        self.tb.end('gmd:centerPoint')

    def _writeBoundingBox(self, subject: DescriptiveValue) -> None:
        corners: dict[str, str] = {
            point.type: point.value for point in subject.structuredValue
        }
        attrib: dict[str, str] = {}
        if subject.standard is not None and subject.standard.code:
            attrib['gml:srsName'] = subject.standard.code

        self.tb.start('gml:boundedBy', {})
        self.tb.start('gml:Envelope', attrib)
        self.tb.element(
            'gml:lowerCorner', {}, f"{corners.get('west', '')} {corners.get('south', '')}"
        )
        self.tb.element(
            'gml:upperCorner', {}, f"{corners.get('east', '')} {corners.get('north', '')}"
        )
        self.tb.end('gml:Envelope')
        self.tb.end('gml:boundedBy')

    def _writeCoverage(self, subjects: list[DescriptiveValue]) -> None:
        for subject in subjects:
            if COVERAGE not in subject.type:
                continue
            self.tb.element(
                'dc:coverage',
                CocinaUtilities.compactAttributes({
                    'rdf:resource': subject.uri,
                    'dc:language': subject.langCode,
                    'dc:title': subject.value,
                })
            )
