# ------------------------------------------------------------------------------
# Name:          treebuilder.py
# Purpose:       ModsTreeBuilder, a TreeBuilder that checks start/end nesting,
#                and knows the difference between text and raw markup content.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from xml.etree.ElementTree import TreeBuilder, Element

class ModsTreeBuilderError(Exception):
    pass

class ModsTreeBuilder:
    def __init__(
        self,
        element_factory=None,
        *,
        comment_factory=None,
        pi_factory=None,
        insert_comments=False,
        insert_pis=False
    ) -> None:
        self.tb: TreeBuilder = TreeBuilder(
            element_factory=element_factory,
            comment_factory=comment_factory,
            pi_factory=pi_factory,
            insert_comments=insert_comments,
            insert_pis=insert_pis
        )
        self.stack: list[str] = []

    def start(self, name: str, attr: dict[str, str]):
        self.stack.append(name)
        self.tb.start(name, attr)

    def end(self, name: str):
        if not self.stack:
            raise ModsTreeBuilderError(f'tb.end("{name}") called with no open element')
        if self.stack[-1] != name:
            raise ModsTreeBuilderError(
                f'mismatched tb.end call: is "{name}", should be "{self.stack[-1]}"'
            )
        self.tb.end(name)
        self.stack = self.stack[:-1]

    def data(self, theData: str):
        self.tb.data(theData)

    def cdata(self, theMarkup: str):
        '''
        Raw markup content (e.g. '<i>').  ElementTree has no CDATA node, so this
        goes through the text channel: the element's text is the same character
        data a CDATA section would carry, but the written file has escaped text
        ('&lt;i&gt;'), not a <![CDATA[...]]> section.  Subclasses can still tell
        cdata calls from data calls.
        '''
        self.tb.data(theMarkup)

    def element(self, name: str, attr: dict[str, str] | None = None, text: str = ''):
        # a leaf element, start to end
        self.start(name, attr or {})
        if text:
            self.data(text)
        self.end(name)

    def close(self) -> Element:
        if self.stack:
            raise ModsTreeBuilderError(f'tb.close() called with open elements: {self.stack}')
        return self.tb.close()
