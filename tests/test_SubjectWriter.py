import pytest

# The things we're testing
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.mods import SubjectWriter

# test utilities
from tests.Utilities import *

def writeSubjects(cocinas: list[dict], forms: list[dict] | None = None,
                  notices: ModsNotices | None = None):
    subjects = [makeValue(c) for c in cocinas]
    formValues = [makeValue(f) for f in forms or []]
    return writeElement(
        lambda tb: SubjectWriter(tb, IdGenerator(), notices, forms=formValues).writeSubjects(
            subjects
        )
    )

LCSH_SOURCE = {'code': 'lcsh', 'uri': 'http://id.loc.gov/authorities/subjects/'}

def test_BasicTopic():
    mods = writeSubjects([
        {'value': 'Cats', 'type': 'topic', 'source': {'code': 'lcsh'}},
        {'value': 'Dogs', 'type': 'topic', 'uri': 'http://id.loc.gov/authorities/subjects/sh1',
         'source': LCSH_SOURCE},
        {'value': 'Whatever'},
    ])
    assert childTags(mods) == ['subject', 'subject', 'subject']
    CheckElement(mods[0], 'subject', {'authority': 'lcsh'}, expectedChildTags=['topic'])
    CheckLeaf(mods[0][0], 'topic', 'Cats')
    CheckLeaf(mods[1][0], 'topic', 'Dogs', {
        'valueURI': 'http://id.loc.gov/authorities/subjects/sh1',
        'authorityURI': 'http://id.loc.gov/authorities/subjects/',
        'authority': 'lcsh',
    })
    CheckElement(mods[2], 'subject', {}, expectedChildTags=['topic'])

def test_CodeOnlySubjects():
    # only places can write a code; a code-only topic writes nothing
    mods = writeSubjects([
        {'code': 'x', 'type': 'topic'},
        {'code': 'n-us-ca', 'type': 'place'},
        {'structuredValue': [
            {'value': 'Cats', 'type': 'topic'},
            {'code': 'y', 'type': 'topic'},
        ]},
    ])
    assert childTags(mods) == ['subject', 'subject']
    CheckElement(mods[0], 'subject', {}, expectedChildTags=['geographicCode'])
    CheckLeaf(mods[0][0], 'geographicCode', 'n-us-ca')
    CheckElement(mods[1], 'subject', {}, expectedChildTags=['topic'])
    CheckLeaf(mods[1][0], 'topic', 'Cats')

def test_SubjectTypes():
    mods = writeSubjects([
        {'value': '1950s', 'type': 'time'},
        {'value': 'Comedy', 'type': 'genre'},
        {'value': 'Paris (France)', 'type': 'place', 'source': {'code': 'lcsh'}},
        {'value': 'Dunnett, Dorothy', 'type': 'person', 'source': {'code': 'naf'}},
        {'value': 'Gaudy night', 'type': 'title'},
        {'code': 'n-us-ca', 'type': 'place', 'source': {'code': 'marcgac'}},
    ])
    assert [child[0].tag for child in mods] == [
        'temporal', 'genre', 'geographic', 'name', 'titleInfo', 'geographicCode'
    ]
    # places never get a subject authority; names from naf are lcsh subjects
    CheckElement(mods[2], 'subject', {})
    CheckElement(mods[3], 'subject', {'authority': 'lcsh'})
    CheckElement(mods[3][0], 'name', {'type': 'personal'}, expectedChildTags=['namePart'])
    CheckElement(mods[4][0], 'titleInfo', {}, expectedChildTags=['title'])
    CheckLeaf(mods[5][0], 'geographicCode', 'n-us-ca', {'authority': 'marcgac'})

def test_StructuredSubject():
    mods = writeSubjects([{
        'structuredValue': [
            {'value': 'Cats', 'type': 'topic'},
            {'value': 'France', 'type': 'place'},
            {'value': '20th century', 'type': 'time'},
        ],
        'source': LCSH_SOURCE,
        'uri': 'http://id.loc.gov/authorities/subjects/sh2',
    }])
    CheckElement(mods[0], 'subject', {
        'authority': 'lcsh',
        'authorityURI': 'http://id.loc.gov/authorities/subjects/',
        'valueURI': 'http://id.loc.gov/authorities/subjects/sh2',
    }, expectedChildTags=['topic', 'geographic', 'temporal'])

def test_StructuredSubjectInheritsAuthority():
    mods = writeSubjects([{'structuredValue': [
        {'value': 'Cats', 'type': 'topic', 'source': {'code': 'lcsh'}},
        {'value': 'History', 'type': 'topic'},
    ]}])
    CheckElement(mods[0], 'subject', {'authority': 'lcsh'},
                 expectedChildTags=['topic', 'topic'])

def test_HierarchicalGeographic():
    notices = ModsNotices()
    mods = writeSubjects([{
        'type': 'place',
        'structuredValue': [
            {'value': 'Canada', 'type': 'country'},
            {'value': 'British Columbia', 'type': 'province'},
            {'value': 'Vancouver', 'type': 'city'},
            {'value': 'Nowhere', 'type': 'bogus'},
        ],
    }], notices=notices)
    hg = mods[0][0]
    CheckElement(hg, 'hierarchicalGeographic', {},
                 expectedChildTags=['country', 'province', 'city'])
    assert 'unknown hierarchical geographic part type "bogus"' in notices

def test_TemporalRange():
    mods = writeSubjects([{
        'type': 'time',
        'encoding': {'code': 'w3cdtf'},
        'structuredValue': [
            {'value': '1890', 'type': 'start'},
            {'value': '1910', 'type': 'end'},
        ],
    }])
    subject = mods[0]
    assert childTags(subject) == ['temporal', 'temporal']
    CheckLeaf(subject[0], 'temporal', '1890', {'point': 'start', 'encoding': 'w3cdtf'})
    CheckLeaf(subject[1], 'temporal', '1910', {'point': 'end', 'encoding': 'w3cdtf'})

def test_MapCoordinatesPullScaleAndProjectionFromForms():
    mods = writeSubjects(
        [{'value': 'E 72°--E 148°/N 13°--N 18°', 'type': 'map coordinates'}],
        forms=[
            {'value': 'Scale 1:100,000', 'type': 'map scale'},
            {'value': 'Mercator', 'type': 'map projection'},
        ],
    )
    cartographics = mods[0][0]
    CheckElement(cartographics, 'cartographics', {},
                 expectedChildTags=['scale', 'projection', 'coordinates'])
    CheckLeaf(cartographics[0], 'scale', 'Scale 1:100,000')

def test_Classification():
    mods = writeSubjects([
        {'type': 'classification', 'value': 'G9801.S12 2015 .Z3',
         'source': {'code': 'lcc'}},
        {'type': 'classification', 'value': '683', 'displayLabel': 'Dewey',
         'source': {'code': 'ddc', 'version': '11th edition'}},
    ])
    CheckLeaf(mods[0], 'classification', 'G9801.S12 2015 .Z3', {'authority': 'lcc'})
    CheckLeaf(mods[1], 'classification', '683',
              {'authority': 'ddc', 'edition': '11', 'displayLabel': 'Dewey'})

def test_ParallelSubject():
    mods = writeSubjects([{
        'type': 'topic',
        'parallelValue': [
            {'value': 'Cats', 'valueLanguage': {'code': 'eng'}},
            {'value': 'Chats', 'valueLanguage': {'code': 'fre'}},
        ],
    }])
    assert childTags(mods) == ['subject', 'subject']
    CheckElement(mods[0], 'subject', {'lang': 'eng', 'altRepGroup': '1'},
                 expectedChildTags=['topic'])
    CheckElement(mods[1], 'subject', {'lang': 'fre', 'altRepGroup': '1'},
                 expectedChildTags=['topic'])

def test_SubjectReference():
    mods = writeSubjects([{'valueAt': 'http://example.com/subject'}])
    CheckLeaf(mods[0], 'subject', '', {'xlink:href': 'http://example.com/subject'})
