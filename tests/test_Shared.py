import pytest

# The things we're testing
from cocina2mods.shared import CocinaVocabulary
from cocina2mods.shared import CocinaUtilities
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder
from cocina2mods.shared import ModsTreeBuilderError

# test utilities
from tests.Utilities import *

def test_IdGeneratorCounters():
    gen = IdGenerator()
    assert gen.nextAltRepGroup() == '1'
    assert gen.nextAltRepGroup() == '2'
    # the two counters are independent
    assert gen.nextNameTitleGroup() == '1'
    assert gen.nextAltRepGroup() == '3'
    assert gen.nextNameTitleGroup() == '2'

    ids = [gen.nextAltRepGroup() for _ in range(100)]
    assert len(set(ids)) == 100

    # a new document starts over
    assert IdGenerator().nextAltRepGroup() == '1'

def test_UriAttributes():
    dv = makeValue({
        'value': 'Cats',
        'uri': 'http://id.loc.gov/authorities/subjects/sh85021262',
        'source': {'code': 'lcsh', 'uri': 'http://id.loc.gov/authorities/subjects/'},
    })
    expected = {
        'valueURI': 'http://id.loc.gov/authorities/subjects/sh85021262',
        'authorityURI': 'http://id.loc.gov/authorities/subjects/',
        'authority': 'lcsh',
    }
    assert CocinaUtilities.uriAttributes(dv) == expected
    # pure function: same answer every time
    assert CocinaUtilities.uriAttributes(dv) == CocinaUtilities.uriAttributes(dv)

    # absent keys are omitted, never empty
    assert CocinaUtilities.uriAttributes(makeValue({'value': 'Cats'})) == {}
    assert CocinaUtilities.uriAttributes(
        makeValue({'value': 'Cats', 'source': {'code': 'lcsh'}})
    ) == {'authority': 'lcsh'}
    assert CocinaUtilities.uriAttributes(None) == {}

def test_CompactAndLanguageAttributes():
    assert CocinaUtilities.compactAttributes(
        {'type': 'uniform', 'displayLabel': '', 'usage': None}
    ) == {'type': 'uniform'}

    dv = makeValue({
        'value': 'Война и мир',
        'valueLanguage': {'code': 'rus', 'valueScript': {'code': 'Cyrl'}},
    })
    assert CocinaUtilities.languageAttributes(dv) == {'lang': 'rus', 'script': 'Cyrl'}
    assert CocinaUtilities.languageAttributes(makeValue({'value': 'x'})) == {}

def test_JoinedValueAndTokens():
    dv = makeValue({'structuredValue': [
        {'value': 'Smith', 'type': 'surname'},
        {'value': 'John', 'type': 'forename'},
    ]})
    assert CocinaUtilities.joinedValue(dv) == 'Smith -- John'
    assert CocinaUtilities.joinedValue(dv, ', ') == 'Smith, John'
    assert CocinaUtilities.valueTokens(dv) == ['Smith', 'John']
    assert CocinaUtilities.joinedValue(makeValue({'value': 'plain'})) == 'plain'

def test_NameTypeVocabularyRoundTrip():
    for cocinaType in CocinaVocabulary.MODS_NAME_TYPE_TO_COCINA.values():
        modsType = CocinaVocabulary.modsNameTypeForCocinaType(cocinaType)
        assert CocinaVocabulary.cocinaNameTypeForModsType(modsType) == cocinaType

    # the one-way special case
    assert CocinaVocabulary.modsNameTypeForCocinaType('event') == 'corporate'
    assert CocinaVocabulary.cocinaNameTypeForModsType('corporate') == 'organization'

    assert CocinaVocabulary.modsNameTypeForCocinaType('unknown') == ''

def test_IdentifierTypeVocabulary():
    assert CocinaVocabulary.modsIdentifierTypeForCocinaType('ISBN') == 'isbn'
    assert CocinaVocabulary.modsIdentifierTypeForCocinaType('LC control number') == 'lccn'
    # unknown types pass through
    assert CocinaVocabulary.modsIdentifierTypeForCocinaType('OCLC') == 'OCLC'
    assert CocinaVocabulary.modsIdentifierTypeForCocinaType('') == ''

def test_TreeBuilderNesting():
    tb = ModsTreeBuilder()
    tb.start('mods', {})
    tb.element('note', {'type': 'x'}, 'text')
    with pytest.raises(ModsTreeBuilderError):
        tb.end('titleInfo')
    with pytest.raises(ModsTreeBuilderError):
        tb.close()
    tb.end('mods')
    elem = tb.close()
    CheckElement(elem, 'mods', expectedChildTags=['note'])
    CheckLeaf(elem[0], 'note', 'text', {'type': 'x'})

    with pytest.raises(ModsTreeBuilderError):
        ModsTreeBuilder().end('mods')

def test_Notices():
    notices = ModsNotices()
    assert len(notices) == 0
    notices.notify('unknown note type "foo"; note not written')
    assert len(notices) == 1
    assert 'unknown note type' in notices
    assert 'role' not in notices
