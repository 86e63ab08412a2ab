# ------------------------------------------------------------------------------
# Name:          modsnotices.py
# Purpose:       ModsNotices collects non-fatal data-quality notices raised
#                while writing MODS, and forwards each one to the music21
#                environment's warning channel.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import music21 as m21

environLocal = m21.environment.Environment('cocina2mods.shared.modsnotices')

class ModsNotices:
    # set to False to collect notices without printing them
    Warn: bool = True

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
        if self.Warn:
            environLocal.warn(message, header='cocina2mods:')

    def __len__(self) -> int:
        return len(self.messages)

    def __contains__(self, fragment: str) -> bool:
        return any(fragment in message for message in self.messages)
