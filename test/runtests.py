#!/usr/bin/env python


'''
Runs emojikit's Test Suite

All unit tests, run from the test directory.
'''

import sys
import unittest
import getopt
verbose = 1

try:
    shortargs = 'hv:'
    longargs = 'help verbose='
    opts, args = getopt.getopt(sys.argv[1:], shortargs, longargs.split())
except getopt.error as msg:
    print(msg)
    print('for help use --help')
    sys.exit(2)
for o, a in opts:
    if o in ('-h', '--help'):
        print('runtests [--help] [--verbose level]')
        sys.exit()
    elif o in ('-v', '--verbose'):
        try:
            verbose = int(a)
        except Exception:
            print('verbose must be a number >= 0')
            sys.exit(2)

# new test modules need to be added manually
modules = ('common.test_const',
           'common.test_table',
           'common.test_unicode_data',
           'common.test_shortcodes',
           'common.test_codegen',
           'common.test_generate_script',
           'common.test_search',
           'common.test_emojis',
           'common.test_text_helpers',
           'common.test_logging_helpers',
           'common.test_cli',
           )

nb_errors = 0
nb_failures = 0

for mod in modules:
    suite = unittest.defaultTestLoader.loadTestsFromName(mod)
    result = unittest.TextTestRunner(verbosity=verbose).run(suite)
    nb_errors += len(result.errors)
    nb_failures += len(result.failures)

sys.exit(nb_errors + nb_failures)
