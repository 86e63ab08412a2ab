# ------------------------------------------------------------------------------
# Name:          rolewriter.py
# Purpose:       RoleWriter writes a Cocina contributor role as a MODS <role>
#                containing text and/or code <roleTerm>s.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from cocina2mods.shared import Role
from cocina2mods.shared import Contributor
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder


class RoleWriter:
    def __init__(self, tb: TreeBuilder, notices: ModsNotices | None = None) -> None:
        self.tb: TreeBuilder = tb
        self.notices: ModsNotices = notices if notices is not None else ModsNotices()

    @staticmethod
    def isExportable(role: Role, contributor: Contributor | None = None) -> bool:
        '''
        Some roles have no valid MODS rendering: the role text 'conference', and
        roles from a few non-MODS vocabularies (when the contributor has a type
        that MODS knows about).
        '''
        if role.value.lower() in CocinaVocabulary.SUPPRESSED_ROLE_VALUES:
            return False
        if role.source is not None and contributor is not None:
            if (role.source.value in CocinaVocabulary.NON_EXPORTABLE_ROLE_SOURCES
                    and contributor.type in CocinaVocabulary.COCINA_NAME_TYPE_TO_MODS):
                return False
        return True

    def write(self, role: Role, contributor: Contributor | None = None) -> None:
        if not role.value and not role.code:
            return

        if not self.isExportable(role, contributor):
            self.notices.notify(
                f'role "{role.value or role.code}" has no MODS equivalent; not written'
            )
            return

        uriAttr: dict[str, str] = CocinaUtilities.uriAttributes(role)
        self.tb.start('role', {})
        if role.value:
            self.tb.element('roleTerm', {'type': 'text'} | uriAttr, role.value)
        if role.code:
            self.tb.element('roleTerm', {'type': 'code'} | uriAttr, role.code)
        self.tb.end('role')

    def writeRoles(self, contributor: Contributor) -> None:
        for role in contributor.role:
            self.write(role, contributor)
