# ------------------------------------------------------------------------------
# Name:          modswriter.py
# Purpose:       ModsWriter is an object that takes a Cocina description and
#                writes it to a file as MODS XML.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from xml.etree.ElementTree import Element, ElementTree, indent

from cocina2mods.shared import SharedConstants
from cocina2mods.shared import Description
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder
from cocina2mods.mods.modsexceptions import ModsExportError
from cocina2mods.mods.descriptivewriter import DescriptiveWriter


class ModsWriter:
    Debug: bool = False  # can be set to True for more debugging

    def __init__(self, description: Description) -> None:
        self._description: Description = description

        # default options (these can be set to non-default values by clients,
        # as long as they do it before they call write())

        # client can set to '3.6', '3.7', etc (anything starting with '3.')
        self.modsVersion: str = SharedConstants.DEFAULT_MODS_VERSION

        # client can set to False for unindented output
        self.indent: bool = True

        # notices about data that could not be written (filled in by write())
        self.notices: ModsNotices = ModsNotices()

    def rootAttributes(self) -> dict[str, str]:
        attrib: dict[str, str] = {
            'xmlns': SharedConstants.MODS_NAMESPACE,
            'xmlns:xlink': SharedConstants.XLINK_NAMESPACE,
            'xmlns:xsi': SharedConstants.XSI_NAMESPACE,
        }
        if self._description.geographic:
            attrib['xmlns:rdf'] = SharedConstants.RDF_NAMESPACE
        attrib['version'] = self.modsVersion
        attrib['xsi:schemaLocation'] = SharedConstants.modsSchemaLocation(self.modsVersion)
        return attrib

    def makeRootElement(self) -> Element:
        if not self.modsVersion.startswith('3.'):
            raise ModsExportError(
                f'invalid modsVersion: {self.modsVersion}. Must start with \'3.\'.'
            )

        # one IdGenerator per document
        idGenerator: IdGenerator = IdGenerator()
        tb: TreeBuilder = TreeBuilder()
        tb.start('mods', self.rootAttributes())
        DescriptiveWriter.write(tb, self._description, idGenerator, self.notices)
        tb.end('mods')
        return tb.close()

    def write(self, fp) -> bool:
        modsElement: Element = self.makeRootElement()
        if self.indent:
            indent(modsElement, space='   ', level=0)

        fp.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        ElementTree(modsElement).write(fp, encoding='unicode')
        fp.write('\n')
        return True
