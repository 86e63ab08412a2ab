# ------------------------------------------------------------------------------
# Name:          modsexceptions.py
# Purpose:       Exceptions that can be raised during MODS operations.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
class ModsExportError(Exception):
    '''When an error occurs while converting to MODS.'''
    pass

class ModsValueError(ModsExportError):
    '''When a Cocina value has a shape that cannot be written as MODS at all.'''
    pass
