#!/usr/bin/env python3

# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Callable
from typing import Iterable

import argparse
import logging
import sys

from emojikit import __version__
from emojikit.common import logging_helpers
from emojikit.common.const import Group
from emojikit.common.const import SkinTone
from emojikit.common.emojis import get_by_shortcode
from emojikit.common.emojis import get_by_unicode
from emojikit.common.emojis import iter_emojis
from emojikit.common.emojis import iter_group
from emojikit.common.emojis import search
from emojikit.common.emojis import skin_tones
from emojikit.common.exceptions import EmojiDataError
from emojikit.common.structs import Emoji
from emojikit.common.text_helpers import replace_shortcodes

log = logging.getLogger('emojikit.cli')


def format_emoji(emoji: Emoji) -> str:
    shortcodes = ' '.join(f':{code}:' for code in emoji.shortcodes)
    fields = [emoji.as_str(), emoji.name, str(emoji.group), shortcodes]
    if emoji.skin_tone is not None and emoji.skin_tone != SkinTone.DEFAULT:
        fields.append(emoji.skin_tone.name.lower())
    return '\t'.join(field for field in fields if field)


def print_emojis(emojis: Iterable[Emoji]) -> None:
    for emoji in emojis:
        print(format_emoji(emoji))


def not_found(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def cmd_replace(args: argparse.Namespace) -> int:
    text = args.text
    if text is None:
        text = sys.stdin.read()
    sys.stdout.write(replace_shortcodes(text))
    if args.text is not None:
        sys.stdout.write('\n')
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    emoji = get_by_unicode(args.emoji)
    if emoji is None:
        return not_found(f'Unknown emoji: {args.emoji}')
    print(format_emoji(emoji))
    return 0


def cmd_shortcode(args: argparse.Namespace) -> int:
    shortcode = args.shortcode.strip(':')
    emoji = get_by_shortcode(shortcode)
    if emoji is None:
        return not_found(f'Unknown shortcode: {shortcode}')
    print(format_emoji(emoji))
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    results = list(search(args.query, include_shortcodes=args.shortcodes))
    if not results:
        return not_found(f'No emoji found for "{args.query}"')
    if args.limit > 0:
        results = results[:args.limit]
    print_emojis(results)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    if args.group is None:
        print_emojis(iter_emojis())
        return 0

    try:
        emojis = iter_group(args.group)
    except ValueError as error:
        return not_found(str(error))
    print_emojis(emojis)
    return 0


def cmd_tones(args: argparse.Namespace) -> int:
    emoji = get_by_unicode(args.emoji)
    if emoji is None:
        emoji = get_by_shortcode(args.emoji.strip(':'))
    if emoji is None:
        return not_found(f'Unknown emoji: {args.emoji}')

    family = skin_tones(emoji)
    if family is None:
        return not_found(f'{emoji.name} has no skin tones')
    print_emojis(family)
    return 0


def cmd_groups(_args: argparse.Namespace) -> int:
    for group in Group:
        print(f'{group.name.lower()}\t{group}')
    return 0


COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    'replace': cmd_replace,
    'get': cmd_get,
    'shortcode': cmd_shortcode,
    'search': cmd_search,
    'list': cmd_list,
    'tones': cmd_tones,
    'groups': cmd_groups,
}


def create_arg_parser() -> argparse.ArgumentParser:

    emoji_help = 'The emoji, e.g. 🚀'

    parser = argparse.ArgumentParser(prog='emojikit')
    parser.add_argument('-V', '--version',
                        action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        help='Print debug messages')
    parser.add_argument('-q', '--quiet',
                        action='store_true',
                        help='Show only critical errors')
    parser.add_argument('-l', '--loglevel',
                        help='Set loglevels, e.g. "c.table=DEBUG,INFO"')

    subparsers = parser.add_subparsers(required=True,
                                       metavar='commands',
                                       dest='command')

    subparser = subparsers.add_parser(
        'replace',
        help='Replace :shortcodes: with emojis')
    subparser.add_argument('text', type=str, nargs='?',
                           help='The text, read from stdin if omitted')

    subparser = subparsers.add_parser(
        'get',
        help='Show an emoji')
    subparser.add_argument('emoji', type=str, help=emoji_help)

    subparser = subparsers.add_parser(
        'shortcode',
        help='Show the emoji of a shortcode')
    subparser.add_argument('shortcode', type=str,
                           help='The shortcode, e.g. rocket')

    subparser = subparsers.add_parser(
        'search',
        help='Search emojis by name')
    subparser.add_argument('query', type=str)
    subparser.add_argument('--limit', type=int, default=10,
                           help='Maximum number of results, 0 for all')
    subparser.add_argument('--shortcodes', action='store_true',
                           help='Also match shortcodes')

    subparser = subparsers.add_parser(
        'list',
        help='List emojis in recommended order')
    subparser.add_argument('--group', type=str,
                           help='Only list emojis of this group')

    subparser = subparsers.add_parser(
        'tones',
        help='List the skin tones of an emoji')
    subparser.add_argument('emoji', type=str,
                           help='The emoji or its shortcode')

    subparser = subparsers.add_parser(
        'groups',
        help='List the emoji groups')

    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging_helpers.init()
    if args.verbose:
        logging_helpers.set_verbose()
    if args.quiet:
        logging_helpers.set_quiet()
    if args.loglevel:
        logging_helpers.set_loglevels(args.loglevel)

    try:
        return COMMANDS[args.command](args)
    except EmojiDataError:
        log.exception('Failed to load emoji data')
        return 1


if __name__ == '__main__':
    sys.exit(main())
