from xml.etree.ElementTree import Element

from cocina2mods.shared import DescriptiveValue
from cocina2mods.shared import Contributor
from cocina2mods.shared import Event
from cocina2mods.shared import Description
from cocina2mods.shared import IdGenerator
from cocina2mods.shared import ModsNotices
from cocina2mods.shared import ModsTreeBuilder
from cocina2mods.mods import DescriptiveWriter

# Notices are checked by the tests; don't also print them.
ModsNotices.Warn = False

PURL = 'https://purl.stanford.edu/bb000kk0000'


class RecordingTreeBuilder(ModsTreeBuilder):
    '''
    A ModsTreeBuilder that also records every call made to it, so tests can
    see the difference between text (data) and raw markup (cdata).
    '''
    def __init__(self) -> None:
        super().__init__()
        self.events: list[tuple] = []

    def start(self, name: str, attr: dict[str, str]):
        self.events.append(('start', name, dict(attr)))
        super().start(name, attr)

    def end(self, name: str):
        self.events.append(('end', name))
        super().end(name)

    def data(self, theData: str):
        self.events.append(('data', theData))
        super().data(theData)

    def cdata(self, theMarkup: str):
        self.events.append(('cdata', theMarkup))
        super().cdata(theMarkup)

    def contentEvents(self) -> list[tuple]:
        return [ev for ev in self.events if ev[0] in ('data', 'cdata')]


def makeValue(d: dict) -> DescriptiveValue:
    return DescriptiveValue.fromDict(d)

def makeContributor(d: dict) -> Contributor:
    return Contributor.fromDict(d)

def makeEvent(d: dict) -> Event:
    return Event.fromDict(d)

def writeElement(writeFunc) -> Element:
    # writeFunc(tb) writes into a <mods> element, which is returned
    tb = ModsTreeBuilder()
    tb.start('mods', {})
    writeFunc(tb)
    tb.end('mods')
    return tb.close()

def descriptionElement(cocina: dict, notices: ModsNotices | None = None) -> Element:
    description: Description = Description.fromDict(cocina)
    idGenerator: IdGenerator = IdGenerator()
    return writeElement(
        lambda tb: DescriptiveWriter.write(tb, description, idGenerator, notices)
    )

def childTags(elem: Element) -> list[str]:
    return [child.tag for child in elem]

def CheckElement(elem: Element,
                 expectedTag: str,
                 expectedAttrib: dict[str, str] | None = None,
                 expectedText: str = '',
                 expectedChildTags: list[str] | None = None):
    assert elem.tag == expectedTag
    assert dict(elem.attrib) == (expectedAttrib or {})
    assert (elem.text or '') == expectedText
    if expectedChildTags is not None:
        assert childTags(elem) == expectedChildTags

def CheckLeaf(elem: Element,
              expectedTag: str,
              expectedText: str = '',
              expectedAttrib: dict[str, str] | None = None):
    CheckElement(elem, expectedTag, expectedAttrib, expectedText, expectedChildTags=[])
