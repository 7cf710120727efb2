# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

import io
import unittest
from contextlib import redirect_stderr
from contextlib import redirect_stdout
from unittest.mock import patch

from emojikit.emojikit_cli import create_arg_parser
from emojikit.emojikit_cli import main


def run(*argv: str) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        code = main(['--quiet', *argv])
    return code, stdout.getvalue(), stderr.getvalue()


class TestCli(unittest.TestCase):

    def test_parser(self) -> None:
        args = create_arg_parser().parse_args(
            ['search', 'cat', '--limit', '3', '--shortcodes'])
        self.assertEqual(args.command, 'search')
        self.assertEqual(args.query, 'cat')
        self.assertEqual(args.limit, 3)
        self.assertTrue(args.shortcodes)

        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                create_arg_parser().parse_args([])

    def test_replace(self) -> None:
        code, out, _err = run('replace', 'launch :rocket: now')
        self.assertEqual(code, 0)
        self.assertEqual(out, 'launch \U0001F680 now\n')

    def test_replace_stdin(self) -> None:
        with patch('sys.stdin', io.StringIO(':+1:\n')):
            code, out, _err = run('replace')
        self.assertEqual(code, 0)
        self.assertEqual(out, '\U0001F44D\n')

    def test_get(self) -> None:
        code, out, _err = run('get', '\U0001F680')
        self.assertEqual(code, 0)
        self.assertEqual(out, '\U0001F680\trocket\tTravel & Places\t:rocket:\n')

        code, out, err = run('get', 'x')
        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn('Unknown emoji', err)

    def test_shortcode(self) -> None:
        code, out, _err = run('shortcode', ':wave_tone5:')
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith('\U0001F44B\U0001F3FF\t'))
        self.assertTrue(out.endswith('\tdark\n'))

        code, _out, err = run('shortcode', 'nonexistent_xyz')
        self.assertEqual(code, 1)
        self.assertIn('nonexistent_xyz', err)

    def test_search(self) -> None:
        code, out, _err = run('search', 'star', '--limit', '2')
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith('\u2B50\tstar\t'))

        code, out, _err = run('search', 'qqqqxzzz')
        self.assertEqual(code, 1)
        self.assertEqual(out, '')

    def test_list(self) -> None:
        code, out, _err = run('list', '--group', 'flags')
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertTrue(lines)
        for line in lines:
            self.assertEqual(line.split('\t')[2], 'Flags')

        code, _out, err = run('list', '--group', 'component')
        self.assertEqual(code, 1)
        self.assertIn('component', err)

    def test_tones(self) -> None:
        code, out, _err = run('tones', 'raised_hands')
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 6)

        code, _out, err = run('tones', '\U0001F680')
        self.assertEqual(code, 1)
        self.assertIn('no skin tones', err)

    def test_groups(self) -> None:
        code, out, _err = run('groups')
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[0], 'smileys_and_emotion\tSmileys & Emotion')


if __name__ == '__main__':
    unittest.main()
