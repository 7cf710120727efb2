# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import importlib.util
import unittest
from pathlib import Path

SCRIPT = Path(__file__).parents[2] / 'scripts' / 'generate_emoji_data.py'


def load_script():
    spec = importlib.util.spec_from_file_location('generate_emoji_data',
                                                  SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestGenerateScript(unittest.TestCase):

    def test_usage_header(self) -> None:
        header = SCRIPT.read_text(encoding='utf-8').split('\n\n')[1]
        self.assertIn('Execute this script from the repo root dir', header)
        self.assertIn('pip install -e .', header)

    def test_parser(self) -> None:
        script = load_script()
        args = script.create_arg_parser().parse_args(
            ['--shortcodes', 'data/emojione_shortcodes.json',
             '--fallback-shortcodes', 'data/cldr_shortcodes.json',
             '--fallback-shortcodes', 'extra.json'])
        self.assertEqual(args.shortcodes, 'data/emojione_shortcodes.json')
        self.assertEqual(args.fallback_shortcodes,
                         ['data/cldr_shortcodes.json', 'extra.json'])
        self.assertEqual(args.output, script.DEFAULT_OUTPUT)

        args = script.create_arg_parser().parse_args([])
        self.assertEqual(args.fallback_shortcodes, [])


if __name__ == '__main__':
    unittest.main()
