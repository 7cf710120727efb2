__version__ = '1.0.0'

from emojikit.common.const import Group  # noqa: E402
from emojikit.common.const import SkinTone  # noqa: E402
from emojikit.common.const import UnicodeVersion  # noqa: E402
from emojikit.common.emojis import get_by_shortcode  # noqa: E402
from emojikit.common.emojis import get_by_unicode  # noqa: E402
from emojikit.common.emojis import iter_emojis  # noqa: E402
from emojikit.common.emojis import iter_group  # noqa: E402
from emojikit.common.emojis import search  # noqa: E402
from emojikit.common.emojis import skin_tones  # noqa: E402
from emojikit.common.emojis import with_skin_tone  # noqa: E402
from emojikit.common.exceptions import DuplicateEmojiError  # noqa: E402
from emojikit.common.exceptions import DuplicateShortcodeError  # noqa: E402
from emojikit.common.exceptions import EmojiDataError  # noqa: E402
from emojikit.common.structs import Emoji  # noqa: E402
from emojikit.common.text_helpers import replace_shortcodes  # noqa: E402

__all__ = [
    'DuplicateEmojiError',
    'DuplicateShortcodeError',
    'Emoji',
    'EmojiDataError',
    'Group',
    'SkinTone',
    'UnicodeVersion',
    'get_by_shortcode',
    'get_by_unicode',
    'iter_emojis',
    'iter_group',
    'replace_shortcodes',
    'search',
    'skin_tones',
    'with_skin_tone',
]
