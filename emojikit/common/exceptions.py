# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only


class EmojiDataError(Exception):
    '''
    Raised when emoji data can not be parsed or fails an integrity check
    '''

    def __init__(self, text: str = '') -> None:
        Exception.__init__(self)
        self.text = text

    def __str__(self) -> str:
        return self.text


class DuplicateEmojiError(EmojiDataError):
    pass


class DuplicateShortcodeError(EmojiDataError):
    pass
