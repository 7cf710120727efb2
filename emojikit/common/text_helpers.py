# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from emojikit.common.emojis import get_by_shortcode

SHORTCODE_DELIMITER = ':'


def replace_shortcodes(text: str) -> str:
    '''
    Replaces every ":shortcode:" in text with its emoji.

    Unknown shortcodes are left untouched, their closing colon may open
    the next shortcode, e.g. ":maybe:rocket:" -> ":maybe🚀"
    '''
    result: list[str] = []
    while True:
        start = text.find(SHORTCODE_DELIMITER)
        if start == -1:
            break

        end = text.find(SHORTCODE_DELIMITER, start + 1)
        if end == -1:
            break

        emoji = get_by_shortcode(text[start + 1:end])
        if emoji is None:
            # Keep everything up to the closing colon, it may start
            # the next shortcode
            result.append(text[:end])
            text = text[end:]
            continue

        result.append(text[:start])
        result.append(emoji.as_str())
        text = text[end + 1:]

    result.append(text)
    return ''.join(result)
