# ------------------------------------------------------------------------------
# Name:          sharedconstants.py
# Purpose:       Constants shared by the Cocina model, the MODS writers and
#                setup.py.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

# must be kept up to date with setup.py:cocina2modsversion
_COCINA2MODS_VERSION: str = '1.0.0'


class SharedConstants:
    VERSION: str = _COCINA2MODS_VERSION

    MODS_NAMESPACE: str = 'http://www.loc.gov/mods/v3'
    XLINK_NAMESPACE: str = 'http://www.w3.org/1999/xlink'
    XSI_NAMESPACE: str = 'http://www.w3.org/2001/XMLSchema-instance'
    RDF_NAMESPACE: str = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
    DC_NAMESPACE: str = 'http://purl.org/dc/elements/1.1/'
    GML_NAMESPACE: str = 'http://www.opengis.net/gml/3.2/'
    GMD_NAMESPACE: str = 'http://www.isotc211.org/2005/gmd'

    DEFAULT_MODS_VERSION: str = '3.7'

    @staticmethod
    def modsSchemaLocation(modsVersion: str) -> str:
        dashed: str = modsVersion.replace('.', '-')
        return (
            f'{SharedConstants.MODS_NAMESPACE} '
            f'http://www.loc.gov/standards/mods/v3/mods-{dashed}.xsd'
        )
