# ------------------------------------------------------------------------------
# Name:          nametitlegroup.py
# Purpose:       NameTitleGroup decides which contributor (if any) is the name
#                embedded in a structured title, so that the title and the
#                contributor can share a nameTitleGroup id.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

#    All methods are static.  NameTitleGroup is just a namespace for these functions.

from cocina2mods.shared import ValueShape
from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import Contributor
from cocina2mods.shared import CocinaUtilities

NAME_PART_TYPE: str = 'name'


class NameTitleGroup:
    @staticmethod
    def titleNameTokens(title: DescriptiveValue) -> list[str]:
        '''
        Returns the strings of the name embedded in a structured title (the
        structuredValue parts of type 'name', each of which may itself be
        structured).  A title that is not structured has no embedded name.
        '''
        if title.shape != ValueShape.STRUCTURED:
            return []
        tokens: list[str] = []
        for part in title.structuredValue:
            if part.type == NAME_PART_TYPE:
                tokens.extend(CocinaUtilities.valueTokens(part))
        return tokens

    @staticmethod
    def findContributorForTitle(
        title: DescriptiveValue,
        contributors: list[Contributor]
    ) -> tuple[Contributor | None, int | None, int | None]:
        '''
        Returns (contributor, nameIndex, parallelIndex) for the first contributor
        name (or parallel variant of a contributor name) that contains every
        token of the title's embedded name.  Search order is contributors, then
        names, then parallel variants.  Returns (None, None, None) if the title
        has no embedded name, or nothing matches.

        Matching is by string equality only: two different people with the
        same name string will be linked.
        '''
        titleTokens: list[str] = NameTitleGroup.titleNameTokens(title)
        if not titleTokens:
            return None, None, None

        for contributor in contributors:
            for nameIndex, name in enumerate(contributor.name):
                if name.shape == ValueShape.PARALLEL:
                    for parallelIndex, variant in enumerate(name.parallelValue):
                        if NameTitleGroup._allTokensFound(titleTokens, variant):
                            return contributor, nameIndex, parallelIndex
                elif NameTitleGroup._allTokensFound(titleTokens, name):
                    return contributor, nameIndex, None

        return None, None, None

    @staticmethod
    def _allTokensFound(titleTokens: list[str], name: DescriptiveValue) -> bool:
        nameTokens: list[str] = CocinaUtilities.valueTokens(name)
        if not nameTokens:
            return False
        return all(token in nameTokens for token in titleTokens)

    @staticmethod
    def uniformTitleVariants(title: DescriptiveValue) -> list[DescriptiveValue]:
        # the structured uniform titles (or parallel variants thereof) that might
        # carry an embedded name
        if title.type != 'uniform':
            return []
        return [
            variant for variant in CocinaUtilities.parallelVariants(title)
            if variant.shape == ValueShape.STRUCTURED
        ]

    @staticmethod
    def contributorsInNameTitleGroups(
        titles: list[DescriptiveValue],
        contributors: list[Contributor]
    ) -> list[Contributor]:
        '''
        Returns the contributors that will be written next to a uniform title
        (by TitleWriter) rather than in the contributor list.
        '''
        output: list[Contributor] = []
        for title in titles:
            for variant in NameTitleGroup.uniformTitleVariants(title):
                contributor, _nameIndex, _parallelIndex = (
                    NameTitleGroup.findContributorForTitle(variant, contributors)
                )
                if contributor is not None and not any(contributor is c for c in output):
                    output.append(contributor)
        return output
