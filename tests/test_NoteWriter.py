import pytest

# The things we're testing
from cocina2mods.shared import IdGenerator
from cocina2mods.mods import NoteWriter
from cocina2mods.mods import PartWriter

# test utilities
from tests.Utilities import *

def writeNotes(cocinas: list[dict]):
    notes = [makeValue(c) for c in cocinas]
    return writeElement(lambda tb: NoteWriter(tb, IdGenerator()).writeNotes(notes))

def test_ItalicMarkupIsWrittenRaw():
    tb = RecordingTreeBuilder()
    tb.start('mods', {})
    NoteWriter(tb, IdGenerator()).write(makeValue({'value': 'A <i>B</i> C'}))
    tb.end('mods')
    tb.close()
    assert tb.contentEvents() == [
        ('data', 'A '),
        ('cdata', '<i>'),
        ('data', 'B'),
        ('cdata', '</i>'),
        ('data', ' C'),
    ]

def test_ItalicMarkupAtEnds():
    tb = RecordingTreeBuilder()
    tb.start('mods', {})
    NoteWriter(tb, IdGenerator()).write(makeValue({'value': '<i>Title</i>'}))
    tb.end('mods')
    tb.close()
    # no empty text runs
    assert tb.contentEvents() == [('cdata', '<i>'), ('data', 'Title'), ('cdata', '</i>')]

def test_NoteTags():
    mods = writeNotes([
        {'value': 'A plain note'},
        {'value': 'Typed', 'type': 'statement of responsibility', 'displayLabel': 'By'},
        {'value': 'Summary', 'type': 'Summary'},
        {'value': 'Reviewed', 'displayLabel': 'Review'},
        {'value': 'Chapter 1', 'type': 'table of contents'},
        {'value': 'Adults', 'type': 'target audience'},
    ])
    assert childTags(mods) == [
        'note', 'note', 'abstract', 'abstract', 'tableOfContents', 'targetAudience'
    ]
    CheckLeaf(mods[0], 'note', 'A plain note')
    CheckLeaf(mods[1], 'note', 'Typed',
              {'type': 'statement of responsibility', 'displayLabel': 'By'})
    CheckLeaf(mods[2], 'abstract', 'Summary')
    CheckLeaf(mods[3], 'abstract', 'Reviewed', {'displayLabel': 'Review'})
    CheckLeaf(mods[4], 'tableOfContents', 'Chapter 1')
    CheckLeaf(mods[5], 'targetAudience', 'Adults')

def test_StructuredNoteIsJoined():
    mods = writeNotes([{
        'type': 'table of contents',
        'structuredValue': [{'value': 'Chapter 1'}, {'value': 'Chapter 2'}],
    }])
    CheckLeaf(mods[0], 'tableOfContents', 'Chapter 1 -- Chapter 2')

def test_ParallelNote():
    mods = writeNotes([
        {'parallelValue': [
            {'value': 'English', 'valueLanguage': {'code': 'eng'}},
            {'value': 'Français', 'valueLanguage': {'code': 'fre'}},
        ], 'type': 'abstract'},
        {'parallelValue': [{'value': 'a'}, {'value': 'b'}]},
    ])
    assert childTags(mods) == ['abstract', 'abstract', 'note', 'note']
    CheckLeaf(mods[0], 'abstract', 'English', {'lang': 'eng', 'altRepGroup': '1'})
    CheckLeaf(mods[1], 'abstract', 'Français', {'lang': 'fre', 'altRepGroup': '1'})
    assert mods[2].get('altRepGroup') == '2'
    assert mods[3].get('altRepGroup') == '2'

def test_PartNote():
    mods = writeNotes([{
        'type': 'part',
        'groupedValue': [
            {'type': 'detail type', 'value': 'volume'},
            {'type': 'number', 'value': '2'},
            {'type': 'caption', 'value': 'v.'},
            {'type': 'text', 'value': 'Some text'},
            {'type': 'list', 'value': '1-10'},
            {'type': 'extent unit', 'value': 'pages'},
        ],
    }])
    assert childTags(mods) == ['part']
    part = mods[0]
    assert childTags(part) == ['detail', 'text', 'extent']
    CheckElement(part[0], 'detail', {'type': 'volume'}, expectedChildTags=['number', 'caption'])
    CheckLeaf(part[0][0], 'number', '2')
    CheckLeaf(part[1], 'text', 'Some text')
    CheckElement(part[2], 'extent', {'unit': 'pages'}, expectedChildTags=['list'])
    CheckLeaf(part[2][0], 'list', '1-10')

def test_PartNotePageRange():
    mods = writeNotes([{
        'type': 'part',
        'groupedValue': [
            {'type': 'extent unit', 'value': 'pages'},
            {'structuredValue': [
                {'type': 'start', 'value': '12'},
                {'type': 'end', 'value': '20'},
            ]},
        ],
    }])
    extent = mods[0][0]
    CheckElement(extent, 'extent', {'unit': 'pages'}, expectedChildTags=['start', 'end'])

def test_EmptyPartNoteWritesNothing():
    mods = writeNotes([{'type': 'part', 'groupedValue': [
        {'type': 'detail type', 'value': 'volume'},
    ]}])
    assert childTags(mods) == []

def test_DetailNotes():
    notes = [
        makeValue({'type': 'volume', 'value': '3'}),
        makeValue({'type': 'location within source', 'value': '12', 'displayLabel': 'Page'}),
    ]
    assert all(PartWriter.isPartNote(note) for note in notes)
    mods = writeElement(lambda tb: PartWriter(tb).write(notes))
    part = mods[0]
    assert childTags(part) == ['detail', 'detail']
    CheckElement(part[0], 'detail', {'type': 'volume'}, expectedChildTags=['number'])
    CheckElement(part[1], 'detail', {'type': 'part'}, expectedChildTags=['number', 'caption'])
    CheckLeaf(part[1][1], 'caption', 'Page')
