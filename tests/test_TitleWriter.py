import pytest

# The things we're testing
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.mods import TitleWriter
from cocina2mods.mods import ModsValueError

# test utilities
from tests.Utilities import *

def writeTitles(cocinas: list[dict], notices: ModsNotices | None = None):
    titles = [makeValue(c) for c in cocinas]
    return writeElement(
        lambda tb: TitleWriter(tb, IdGenerator(), notices).writeTitles(titles)
    )

def test_BasicTitles():
    mods = writeTitles([
        {'value': 'Gaudy night', 'status': 'primary'},
        {'value': 'Night, gaudy', 'type': 'alternative'},
        {'value': 'Untitled', 'type': 'supplied'},
    ])
    assert childTags(mods) == ['titleInfo', 'titleInfo', 'titleInfo']
    CheckElement(mods[0], 'titleInfo', {'usage': 'primary'}, expectedChildTags=['title'])
    CheckLeaf(mods[0][0], 'title', 'Gaudy night')
    CheckElement(mods[1], 'titleInfo', {'type': 'alternative'})
    CheckElement(mods[2], 'titleInfo', {'supplied': 'yes'})

def test_TitleReference():
    mods = writeTitles([{'valueAt': 'http://example.com/title'}])
    CheckLeaf(mods[0], 'titleInfo', '', {'xlink:href': 'http://example.com/title'})

def test_StructuredTitle():
    mods = writeTitles([{
        'structuredValue': [
            {'value': 'The', 'type': 'nonsorting characters'},
            {'value': 'hobbit', 'type': 'main title'},
            {'value': 'or, There and back again', 'type': 'subtitle'},
            {'value': '1', 'type': 'part number'},
            {'value': 'Unabridged', 'type': 'part name'},
        ],
        'note': [{'type': 'nonsorting character count', 'value': '4'}],
    }])
    titleInfo = mods[0]
    assert childTags(titleInfo) == ['nonSort', 'title', 'subTitle', 'partNumber', 'partName']
    CheckLeaf(titleInfo[0], 'nonSort', 'The ')
    CheckLeaf(titleInfo[2], 'subTitle', 'or, There and back again')

def test_UnknownTitlePart():
    notices = ModsNotices()
    mods = writeTitles([{'structuredValue': [
        {'value': 'Hobbit', 'type': 'main title'},
        {'value': 'x', 'type': 'bogus'},
    ]}], notices)
    assert childTags(mods[0]) == ['title']
    assert 'unknown title part type "bogus"' in notices

    with pytest.raises(ModsValueError):
        writeTitles([{'structuredValue': [{'value': 'x', 'type': 'bogus'}]}], ModsNotices())

def test_ParallelTitle():
    mods = writeTitles([{'parallelValue': [
        {'value': 'Война и мир', 'valueLanguage': {'code': 'rus', 'valueScript': {'code': 'Cyrl'}}},
        {'value': 'Voĭna i mir', 'type': 'transliterated',
         'standard': {'value': 'ALA-LC Romanization Tables'},
         'valueLanguage': {'code': 'rus', 'valueScript': {'code': 'Latn'}}},
        {'value': 'War and peace', 'valueLanguage': {'code': 'eng'}},
    ]}])
    assert childTags(mods) == ['titleInfo'] * 3
    CheckElement(mods[0], 'titleInfo', {
        'lang': 'rus', 'script': 'Cyrl', 'altRepGroup': '1', 'usage': 'primary'
    }, expectedChildTags=['title'])
    CheckElement(mods[1], 'titleInfo', {
        'lang': 'rus', 'script': 'Latn', 'altRepGroup': '1', 'type': 'translated',
        'transliteration': 'ALA-LC Romanization Tables',
    })
    CheckElement(mods[2], 'titleInfo', {
        'lang': 'eng', 'altRepGroup': '1', 'type': 'translated'
    })

def test_ParallelTitleWithPrimaryVariant():
    mods = writeTitles([{'parallelValue': [
        {'value': 'Война и мир', 'valueLanguage': {'code': 'rus'}},
        {'value': 'War and peace', 'status': 'primary', 'valueLanguage': {'code': 'eng'}},
    ]}])
    CheckElement(mods[0], 'titleInfo', {'lang': 'rus', 'altRepGroup': '1', 'type': 'translated'})
    CheckElement(mods[1], 'titleInfo', {'lang': 'eng', 'altRepGroup': '1', 'usage': 'primary'})

def test_UniformTitleSplit():
    mods = writeTitles([{
        'type': 'uniform',
        'structuredValue': [
            {'type': 'title', 'value': 'Hamlet'},
            {'type': 'name', 'value': 'Shakespeare, William'},
        ],
    }])
    assert childTags(mods) == ['titleInfo', 'name']
    CheckElement(mods[0], 'titleInfo', {'type': 'uniform', 'nameTitleGroup': '1'},
                 expectedChildTags=['title'])
    CheckLeaf(mods[0][0], 'title', 'Hamlet')
    CheckElement(mods[1], 'name', {'type': 'personal', 'nameTitleGroup': '1'},
                 expectedChildTags=['namePart'])
    CheckLeaf(mods[1][0], 'namePart', 'Shakespeare, William')

def test_UniformTitleWithoutNameIsNotSplit():
    mods = writeTitles([{
        'type': 'uniform',
        'structuredValue': [{'type': 'title', 'value': 'Bible'}],
    }])
    assert childTags(mods) == ['titleInfo']
    CheckElement(mods[0], 'titleInfo', {'type': 'uniform'}, expectedChildTags=['title'])

def test_UniformTitleSharesGroupWithContributor():
    # the contributor is written with the title, and not again
    mods = descriptionElement({
        'title': [
            {'value': 'Hamlet', 'status': 'primary'},
            {
                'type': 'uniform',
                'structuredValue': [
                    {'type': 'name', 'value': 'Shakespeare, William'},
                    {'type': 'title', 'value': 'Hamlet'},
                ],
            },
        ],
        'contributor': [
            {'name': [{'value': 'Shakespeare, William'}], 'type': 'person',
             'role': [{'value': 'author'}]},
            {'name': [{'value': 'Burbage, Richard'}], 'type': 'person'},
        ],
    })
    assert childTags(mods) == ['titleInfo', 'titleInfo', 'name', 'name']
    CheckElement(mods[1], 'titleInfo', {'type': 'uniform', 'nameTitleGroup': '1'})
    CheckElement(mods[2], 'name', {'type': 'personal', 'nameTitleGroup': '1'},
                 expectedChildTags=['namePart', 'role'])
    CheckLeaf(mods[3][0], 'namePart', 'Burbage, Richard')
    assert mods[3].get('nameTitleGroup') is None

MISHNAH_NAME = [
    {'value': 'Israel Meir', 'type': 'name'},
    {'value': 'ha-Kohen', 'type': 'term of address'},
    {'value': '1838-1933', 'type': 'life dates'},
]
MISHNAH_HEBREW_NAME = [
    {'value': 'Israel Meir in Hebrew characters', 'type': 'name'},
    {'value': '1838-1933', 'type': 'life dates'},
]
MISHNAH_UNIFORM_TITLE = {
    'type': 'uniform',
    'parallelValue': [
        {'structuredValue': [
            {'value': 'Mishnah berurah. English and Hebrew', 'type': 'title'},
            {'structuredValue': MISHNAH_NAME, 'type': 'name'},
        ]},
        {'structuredValue': [
            {'structuredValue': MISHNAH_HEBREW_NAME, 'type': 'name'},
            {'value': 'Mishnah berurah in Hebrew characters', 'type': 'title'},
        ]},
    ],
}
MISHNAH_CONTRIBUTOR = {
    'name': [{
        'parallelValue': [
            {'structuredValue': MISHNAH_NAME, 'status': 'primary'},
            {'structuredValue': MISHNAH_HEBREW_NAME},
        ],
        'type': 'person',
        'status': 'primary',
    }],
}

def test_ParallelUniformTitleWithParallelContributor():
    # each parallel name is written once, paired with its own title variant
    mods = descriptionElement({
        'title': [
            MISHNAH_UNIFORM_TITLE,
            {'structuredValue': [
                {'value': 'Mishnah berurah', 'type': 'main title'},
                {'value': 'the classic commentary', 'type': 'subtitle'},
            ]},
        ],
        'contributor': [MISHNAH_CONTRIBUTOR],
    })
    assert childTags(mods) == ['titleInfo', 'titleInfo', 'name', 'name', 'titleInfo']
    CheckElement(mods[0], 'titleInfo',
                 {'type': 'uniform', 'altRepGroup': '1', 'nameTitleGroup': '1'},
                 expectedChildTags=['title'])
    CheckLeaf(mods[0][0], 'title', 'Mishnah berurah. English and Hebrew')
    CheckElement(mods[1], 'titleInfo',
                 {'type': 'uniform', 'altRepGroup': '1', 'nameTitleGroup': '2'},
                 expectedChildTags=['title'])
    CheckLeaf(mods[1][0], 'title', 'Mishnah berurah in Hebrew characters')
    CheckElement(mods[2], 'name', {
        'type': 'personal', 'usage': 'primary', 'altRepGroup': '2', 'nameTitleGroup': '1'
    }, expectedChildTags=['namePart', 'namePart', 'namePart'])
    CheckLeaf(mods[2][0], 'namePart', 'Israel Meir')
    CheckLeaf(mods[2][1], 'namePart', 'ha-Kohen', {'type': 'termsOfAddress'})
    CheckLeaf(mods[2][2], 'namePart', '1838-1933', {'type': 'date'})
    CheckElement(mods[3], 'name', {
        'type': 'personal', 'altRepGroup': '2', 'nameTitleGroup': '2'
    }, expectedChildTags=['namePart', 'namePart'])
    CheckLeaf(mods[3][0], 'namePart', 'Israel Meir in Hebrew characters')
    CheckElement(mods[4], 'titleInfo', {}, expectedChildTags=['title', 'subTitle'])

def test_ParallelUniformTitleWithoutContributor():
    # no matching contributor: each variant writes its own embedded name
    mods = descriptionElement({'title': [MISHNAH_UNIFORM_TITLE]})
    assert childTags(mods) == ['titleInfo', 'name', 'titleInfo', 'name']
    CheckElement(mods[0], 'titleInfo',
                 {'type': 'uniform', 'altRepGroup': '1', 'nameTitleGroup': '1'})
    CheckElement(mods[1], 'name', {'type': 'personal', 'nameTitleGroup': '1'},
                 expectedChildTags=['namePart', 'namePart', 'namePart'])
    CheckElement(mods[2], 'titleInfo',
                 {'type': 'uniform', 'altRepGroup': '1', 'nameTitleGroup': '2'})
    CheckElement(mods[3], 'name', {'type': 'personal', 'nameTitleGroup': '2'},
                 expectedChildTags=['namePart', 'namePart'])
    CheckLeaf(mods[3][0], 'namePart', 'Israel Meir in Hebrew characters')

def test_ContributorInTwoUniformTitlesIsWrittenOnce():
    uniform = {
        'type': 'uniform',
        'structuredValue': [
            {'type': 'name', 'value': 'Shakespeare, William'},
            {'type': 'title', 'value': 'Hamlet'},
        ],
    }
    mods = descriptionElement({
        'title': [uniform, uniform],
        'contributor': [{'name': [{'value': 'Shakespeare, William'}], 'type': 'person'}],
    })
    assert childTags(mods) == ['titleInfo', 'name', 'titleInfo']
    CheckElement(mods[0], 'titleInfo', {'type': 'uniform', 'nameTitleGroup': '1'})
    CheckElement(mods[1], 'name', {'type': 'personal', 'nameTitleGroup': '1'})
    CheckElement(mods[2], 'titleInfo', {'type': 'uniform'}, expectedChildTags=['title'])
