# ------------------------------------------------------------------------------
# Name:          __main__.py
# Purpose:       Command-line app to convert a Cocina descriptive metadata JSON
#                file to a MODS XML file.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2023 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import argparse
import json
import sys

from cocina2mods.shared import SharedConstants
from cocina2mods.shared import Description
from cocina2mods.mods import ModsWriter
from cocina2mods.mods import ModsExportError


def main() -> int:
    parser = argparse.ArgumentParser(prog='cocina2mods')
    parser.add_argument('inputFile',
                        help='input Cocina JSON file (the "description" object of a '
                            + 'Cocina object, or a whole Cocina object containing one)')
    parser.add_argument('outputFile',
                        help='output MODS XML file ("-" for stdout)')
    parser.add_argument('-mv', '--modsVersion', default=SharedConstants.DEFAULT_MODS_VERSION,
                        help='MODS version to write (must start with "3.")')
    parser.add_argument('-p', '--purl', default='',
                        help='purl to write as the primary display url (overrides any '
                            + 'purl in the input file)')
    parser.add_argument('-ni', '--noIndent', action='store_true',
                        help='write unindented XML')

    args = parser.parse_args()

    with open(args.inputFile, encoding='utf-8') as f:
        cocina = json.load(f)
    if 'description' in cocina:
        cocina = cocina['description']

    description: Description = Description.fromDict(cocina)
    if args.purl:
        description.purl = args.purl

    writer = ModsWriter(description)
    writer.modsVersion = args.modsVersion
    writer.indent = not args.noIndent

    try:
        if args.outputFile == '-':
            writer.write(sys.stdout)
        else:
            with open(args.outputFile, 'wt', encoding='utf-8') as fp:
                writer.write(fp)
    except ModsExportError as e:
        print(f'cocina2mods: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
