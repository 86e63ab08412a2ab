# ------------------------------------------------------------------------------
# Purpose:       cocina2mods is a Cocina descriptive metadata to MODS XML
#                converter package and command line tool.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

__all__ = [
    'shared',
    'mods',
    'Description',
    'ModsWriter',
    'ModsExportError',
]

from .shared import Description
from .mods import ModsWriter
from .mods import ModsExportError
