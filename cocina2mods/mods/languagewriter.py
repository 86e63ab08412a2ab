# ------------------------------------------------------------------------------
# Name:          languagewriter.py
# Purpose:       LanguageWriter writes Cocina languages as MODS <language>
#                elements (and, for AdminMetadataWriter, the <languageTerm> and
#                <scriptTerm> contents of <languageOfCataloging>).
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from cocina2mods.shared import Language
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import ModsTreeBuilder as TreeBuilder


class LanguageWriter:
    def __init__(self, tb: TreeBuilder) -> None:
        self.tb: TreeBuilder = tb

    def writeLanguages(self, languages: list[Language]) -> None:
        for language in languages:
            self.write(language)

    def write(self, language: Language, tag: str = 'language') -> None:
        if not self.hasTerms(language):
            return
        attrib: dict[str, str] = {}
        if language.status == 'primary':
            attrib['usage'] = 'primary'
        if language.displayLabel:
            attrib['displayLabel'] = language.displayLabel
        self.tb.start(tag, attrib)
        self.writeTerms(language)
        self.tb.end(tag)

    @staticmethod
    def hasTerms(language: Language) -> bool:
        if language.value or language.code:
            return True
        return language.script is not None and bool(language.script.value or language.script.code)

    def writeTerms(self, language: Language) -> None:
        languageAttrib: dict[str, str] = CocinaUtilities.uriAttributes(language)
        if language.value:
            self.tb.element('languageTerm', {'type': 'text'} | languageAttrib, language.value)
        if language.code:
            self.tb.element('languageTerm', {'type': 'code'} | languageAttrib, language.code)

        script = language.script
        if script is None:
            return
        scriptAttrib: dict[str, str] = CocinaUtilities.uriAttributes(script)
        if script.value:
            self.tb.element('scriptTerm', {'type': 'text'} | scriptAttrib, script.value)
        if script.code:
            self.tb.element('scriptTerm', {'type': 'code'} | scriptAttrib, script.code)
