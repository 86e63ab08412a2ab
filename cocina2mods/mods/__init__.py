# ------------------------------------------------------------------------------
# Purpose:       mods is a module of cocina2mods containing the MODS writers,
#                one per Cocina concept, plus DescriptiveWriter (which calls
#                them all in order) and ModsWriter (which writes the file).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
'''
The :mod:`mods` module provides export of Cocina descriptive metadata to MODS.
'''

from .modsexceptions import ModsExportError
from .modsexceptions import ModsValueError

from .nametitlegroup import NameTitleGroup
from .rolewriter import RoleWriter
from .contributorwriter import ContributorWriter
from .titlewriter import TitleWriter
from .eventwriter import EventWriter
from .partwriter import PartWriter
from .notewriter import NoteWriter
from .subjectwriter import SubjectWriter
from .formwriter import FormWriter
from .languagewriter import LanguageWriter
from .identifierwriter import IdentifierWriter
from .locationwriter import LocationWriter
from .adminmetadatawriter import AdminMetadataWriter
from .relatedresourcewriter import RelatedResourceWriter
from .geographicwriter import GeographicWriter
from .descriptivewriter import DescriptiveWriter
from .modswriter import ModsWriter
