#!/usr/bin/env python3

# Fetches emoji-test.txt and the shortcode feeds and writes
# emojikit/common/emoji_data.py
# Execute this script from the repo root dir, emojikit has to be
# importable, install it first with `pip install -e .`
#
# ./scripts/generate_emoji_data.py --shortcodes data/emojione_shortcodes.json \
#     --fallback-shortcodes data/cldr_shortcodes.json

from typing import Any

import argparse
import json
import logging
import sys
from pathlib import Path
from urllib.request import urlopen

from emojikit.common.codegen import write_emoji_data
from emojikit.common.const import EMOJI_TEST_URL
from emojikit.common.exceptions import EmojiDataError
from emojikit.common.shortcodes import EMOJI_PRETTY_URL
from emojikit.common.shortcodes import assign_shortcodes
from emojikit.common.shortcodes import parse_emoji_pretty
from emojikit.common.shortcodes import parse_shortcode_map
from emojikit.common.table import EmojiTable
from emojikit.common.unicode_data import get_emoji_version
from emojikit.common.unicode_data import parse_emoji_test

logging.basicConfig(level='INFO', format='%(levelname)s: %(message)s')
log = logging.getLogger(__name__)

DEFAULT_EMOJI_VERSION = '15.1'
DEFAULT_OUTPUT = Path('emojikit') / 'common' / 'emoji_data.py'


def read_source(source: str) -> bytes:
    if source.startswith(('https://', 'http://')):
        log.info('Fetching %s', source)
        with urlopen(source) as f:
            return f.read()

    log.info('Reading %s', source)
    return Path(source).read_bytes()


def load_shortcodes(source: str) -> dict[str, list[str]]:
    data: Any = json.loads(read_source(source))
    if isinstance(data, list):
        return parse_emoji_pretty(data)
    if isinstance(data, dict):
        return parse_shortcode_map(data)
    raise EmojiDataError(f'Unsupported shortcode format in {source}')


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate the emoji data module')
    parser.add_argument('--emoji-version',
                        default=DEFAULT_EMOJI_VERSION,
                        help='Unicode emoji version to fetch')
    parser.add_argument('--emoji-test',
                        help='Path or URL of emoji-test.txt, '
                             'defaults to the unicode.org file')
    parser.add_argument('--shortcodes',
                        default=EMOJI_PRETTY_URL,
                        help='Path or URL of emoji_pretty.json or of a '
                             'JSON object mapping shortcodes to emojis')
    parser.add_argument('--fallback-shortcodes',
                        action='append',
                        default=[],
                        help='Shortcode feed only used for emojis without '
                             'a shortcode, can be given multiple times')
    parser.add_argument('--output',
                        type=Path,
                        default=DEFAULT_OUTPUT,
                        help='Module to write')
    return parser


def main() -> None:
    args = create_arg_parser().parse_args()

    emoji_test = args.emoji_test
    if emoji_test is None:
        emoji_test = EMOJI_TEST_URL.format(version=args.emoji_version)

    text = read_source(emoji_test).decode('utf-8')
    emoji_version = get_emoji_version(text) or args.emoji_version

    try:
        records = parse_emoji_test(text)
        fallbacks = [load_shortcodes(source)
                     for source in args.fallback_shortcodes]
        records = assign_shortcodes(records,
                                    load_shortcodes(args.shortcodes),
                                    fallbacks)
        # Run the integrity checks of the runtime table before writing
        EmojiTable(records)
    except EmojiDataError as error:
        log.error('Invalid emoji data: %s', error)
        sys.exit(1)

    shortcode_source = ', '.join([args.shortcodes, *args.fallback_shortcodes])
    with args.output.open(mode='w', encoding='utf-8') as file:
        write_emoji_data(file,
                         records,
                         emoji_version,
                         emoji_test,
                         shortcode_source)

    log.info('Wrote %s emojis to %s', len(records), args.output)


if __name__ == '__main__':
    main()
