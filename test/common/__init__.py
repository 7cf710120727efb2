# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only
