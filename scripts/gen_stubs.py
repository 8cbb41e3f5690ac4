#!/usr/bin/env python3
"""
gen_stubs.py - JavaScript extension stub generator entry point

Generates the JavaScript module for a class described by a JSON descriptor.

Usage:
    python scripts/gen_stubs.py DESCRIPTOR --namespace NS [--channel EXPR]
                                [--scripts DIR] [-o OUTPUT] [--verbose]
"""

import argparse
import json
import logging
import os
import sys

# Add scripts directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)

from stub_gen import ClassDescriptor, DescriptorError, DirectoryScriptResolver, StubGenerator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate JavaScript extension stubs')
    parser.add_argument('descriptor',
                        help='Path to the JSON class descriptor')
    parser.add_argument('--namespace', required=True,
                        help='Namespace the extension is installed under')
    parser.add_argument('--channel', default='extension',
                        help='Script expression naming the channel (default: extension)')
    parser.add_argument('--scripts', default=None,
                        help='Directory holding companion <ClassName>.js scripts')
    parser.add_argument('-o', '--output', default=None,
                        help='Output file (default: stdout)')
    parser.add_argument('--verbose', action='store_true',
                        help='Log diagnostics')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        descriptor = ClassDescriptor.load(args.descriptor)
    except FileNotFoundError:
        print(f'error: descriptor not found: {args.descriptor}', file=sys.stderr)
        return 1
    except (DescriptorError, json.JSONDecodeError) as e:
        print(f'error: {args.descriptor}: {e}', file=sys.stderr)
        return 1

    resolver = DirectoryScriptResolver(args.scripts) if args.scripts else None
    gen = StubGenerator(script_resolver=resolver)
    stub = gen.generate(args.channel, args.namespace, descriptor)

    if args.output is None:
        sys.stdout.write(stub)
        return 0

    print('=== Generating JavaScript stubs:')
    print(f'  {descriptor.identity} => {args.output}')
    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.output, 'w', encoding='utf-8', newline='\n') as f:
        f.write(stub)
    return 0


if __name__ == '__main__':
    sys.exit(main())
