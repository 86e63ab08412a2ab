# ------------------------------------------------------------------------------
# Purpose:       shared is a module of cocina2mods containing the Cocina object
#                model, the Cocina/MODS vocabularies, and the utilities shared
#                by the MODS writers.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
__all__ = [
    'SharedConstants',
    'ValueShape',
    'DescriptiveValue',
    'Contributor',
    'Event',
    'Description',
    'RelatedResource',
    'CocinaVocabulary',
    'CocinaUtilities',
    'IdGenerator',
    'ModsTreeBuilder',
    'ModsTreeBuilderError',
    'ModsNotices',
]

from .sharedconstants import SharedConstants
from .cocinamodel import ValueShape
from .cocinamodel import Source
from .cocinamodel import Standard
from .cocinamodel import ValueLanguage
from .cocinamodel import DescriptiveValue
from .cocinamodel import Role
from .cocinamodel import Contributor
from .cocinamodel import Event
from .cocinamodel import Language
from .cocinamodel import Access
from .cocinamodel import AdminMetadata
from .cocinamodel import Geographic
from .cocinamodel import Description
from .cocinamodel import RelatedResource
from .cocinavocabulary import CocinaVocabulary
from .cocinautilities import CocinaUtilities
from .idgenerator import IdGenerator
from .treebuilder import ModsTreeBuilder
from .treebuilder import ModsTreeBuilderError
from .modsnotices import ModsNotices
