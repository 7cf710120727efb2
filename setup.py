#!/usr/bin/env python3

from __future__ import annotations

import re
import sys

if sys.version_info < (3, 10):
    sys.exit('emojikit needs Python 3.10+')

from pathlib import Path

from setuptools import setup


REPO_DIR = Path(__file__).resolve().parent


def get_version() -> str:
    init = (REPO_DIR / 'emojikit' / '__init__.py').read_text(encoding='utf-8')
    match = re.search(r"^__version__ = '([^']+)'", init, re.MULTILINE)
    if match is None:
        raise SystemExit('ERROR: __version__ not found in emojikit/__init__.py')
    return match.group(1)


setup(
    name='emojikit',
    version=get_version(),
    description='Emoji lookup by code point, shortcode and name',
    license='GPL-3.0-only',
    python_requires='>=3.10',
    packages=[
        'emojikit',
        'emojikit.common',
    ],
    install_requires=[
        'packaging>=20.0',
    ],
    entry_points={
        'console_scripts': [
            'emojikit = emojikit.emojikit_cli:main',
        ],
    },
)
