# ------------------------------------------------------------------------------
# Name:          idgenerator.py
# Purpose:       IdGenerator hands out altRepGroup and nameTitleGroup ids for
#                one MODS document.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

class IdGenerator:
    '''
    Two independent counters, one for altRepGroup and one for nameTitleGroup.
    Construct one per document, and pass it to every writer of that document;
    a generator must never be shared across documents.  Not thread-safe.
    '''
    FIRST_ID: int = 1

    def __init__(self) -> None:
        self._nextAltRepGroup: int = self.FIRST_ID
        self._nextNameTitleGroup: int = self.FIRST_ID

    def nextAltRepGroup(self) -> str:
        output: str = str(self._nextAltRepGroup)
        self._nextAltRepGroup += 1
        return output

    def nextNameTitleGroup(self) -> str:
        output: str = str(self._nextNameTitleGroup)
        self._nextNameTitleGroup += 1
        return output
