# This file is part of emojikit.
#
# SPDX-License-Identifier: GPL-3.0-only

# Generated by scripts/generate_emoji_data.py, do not edit by hand.
#
# Emoji data: https://unicode.org/Public/emoji/15.1/emoji-test.txt
# Shortcodes: data/emojione_shortcodes.json, data/cldr_shortcodes.json

# pylint: disable=line-too-long,too-many-lines

EMOJI_VERSION = '15.1'

EMOJI_DATA = [
    ('\U0001F600', 'grinning face', 'Smileys & Emotion', 'face-smiling', '1.0', ('grinning',), (), None),
    ('\U0001F603', 'grinning face with big eyes', 'Smileys & Emotion', 'face-smiling', '0.6', ('smiley',), (), None),
    ('\U0001F604', 'grinning face with smiling eyes', 'Smileys & Emotion', 'face-smiling', '0.6', ('smile',), (), None),
    ('\U0001F601', 'beaming face with smiling eyes', 'Smileys & Emotion', 'face-smiling', '0.6', ('grin',), (), None),
    ('\U0001F606', 'grinning squinting face', 'Smileys & Emotion', 'face-smiling', '0.6', ('laughing', 'satisfied'), (), None),
    ('\U0001F605', 'grinning face with sweat', 'Smileys & Emotion', 'face-smiling', '0.6', ('sweat_smile',), (), None),
    ('\U0001F923', 'rolling on the floor laughing', 'Smileys & Emotion', 'face-smiling', '3.0', ('rofl', 'rolling_on_the_floor_laughing'), (), None),
    ('\U0001F602', 'face with tears of joy', 'Smileys & Emotion', 'face-smiling', '0.6', ('joy',), (), None),
    ('\U0001F642', 'slightly smiling face', 'Smileys & Emotion', 'face-smiling', '1.0', ('slight_smile', 'slightly_smiling_face'), (), None),
    ('\U0001F643', 'upside-down face', 'Smileys & Emotion', 'face-smiling', '1.0', ('upside_down', 'upside_down_face'), (), None),
    ('\U0001FAE0', 'melting face', 'Smileys & Emotion', 'face-smiling', '14.0', ('melting_face',), (), None),
    ('\U0001F609', 'winking face', 'Smileys & Emotion', 'face-smiling', '0.6', ('wink',), (), None),
    ('\U0001F60A', 'smiling face with smiling eyes', 'Smileys & Emotion', 'face-smiling', '0.6', ('blush',), (), None),
    ('\U0001F607', 'smiling face with halo', 'Smileys & Emotion', 'face-smiling', '1.0', ('innocent',), (), None),
    ('\U0001F970', 'smiling face with hearts', 'Smileys & Emotion', 'face-affection', '11.0', ('smiling_face_with_3_hearts',), (), None),
    ('\U0001F60D', 'smiling face with heart-eyes', 'Smileys & Emotion', 'face-affection', '0.6', ('heart_eyes',), (), None),
    ('\U0001F929', 'star-struck', 'Smileys & Emotion', 'face-affection', '5.0', ('star_struck',), (), None),
    ('\U0001F618', 'face blowing a kiss', 'Smileys & Emotion', 'face-affection', '0.6', ('kissing_heart',), (), None),
    ('\U0001F617', 'kissing face', 'Smileys & Emotion', 'face-affection', '1.0', ('kissing',), (), None),
    ('\u263A\uFE0F', 'smiling face', 'Smileys & Emotion', 'face-affection', '0.6', ('relaxed',), ('\u263A',), None),
    ('\U0001F61A', 'kissing face with closed eyes', 'Smileys & Emotion', 'face-affection', '0.6', ('kissing_closed_eyes',), (), None),
    ('\U0001F619', 'kissing face with smiling eyes', 'Smileys & Emotion', 'face-affection', '1.0', ('kissing_smiling_eyes',), (), None),
    ('\U0001F972', 'smiling face with tear', 'Smileys & Emotion', 'face-affection', '13.0', ('smiling_face_with_tear',), (), None),
    ('\U0001F60B', 'face savoring food', 'Smileys & Emotion', 'face-tongue', '0.6', ('yum',), (), None),
    ('\U0001F61B', 'face with tongue', 'Smileys & Emotion', 'face-tongue', '1.0', ('stuck_out_tongue',), (), None),
    ('\U0001F61C', 'winking face with tongue', 'Smileys & Emotion', 'face-tongue', '0.6', ('stuck_out_tongue_winking_eye',), (), None),
    ('\U0001F92A', 'zany face', 'Smileys & Emotion', 'face-tongue', '5.0', ('zany_face',), (), None),
    ('\U0001F61D', 'squinting face with tongue', 'Smileys & Emotion', 'face-tongue', '0.6', ('stuck_out_tongue_closed_eyes',), (), None),
    ('\U0001F911', 'money-mouth face', 'Smileys & Emotion', 'face-tongue', '1.0', ('money_mouth', 'money_mouth_face'), (), None),
    ('\U0001F917', 'smiling face with open hands', 'Smileys & Emotion', 'face-hand', '1.0', ('hugging', 'hugging_face'), (), None),
    ('\U0001F92D', 'face with hand over mouth', 'Smileys & Emotion', 'face-hand', '5.0', ('face_with_hand_over_mouth',), (), None),
    ('\U0001FAE2', 'face with open eyes and hand over mouth', 'Smileys & Emotion', 'face-hand', '14.0', ('face_with_open_eyes_and_hand_over_mouth',), (), None),
    ('\U0001FAE3', 'face with peeking eye', 'Smileys & Emotion', 'face-hand', '14.0', ('face_with_peeking_eye',), (), None),
    ('\U0001F92B', 'shushing face', 'Smileys & Emotion', 'face-hand', '5.0', ('shushing_face',), (), None),
    ('\U0001F914', 'thinking face', 'Smileys & Emotion', 'face-hand', '1.0', ('thinking', 'thinking_face'), (), None),
    ('\U0001FAE1', 'saluting face', 'Smileys & Emotion', 'face-hand', '14.0', ('saluting_face',), (), None),
    ('\U0001F910', 'zipper-mouth face', 'Smileys & Emotion', 'face-neutral-skeptical', '1.0', ('zipper_mouth', 'zipper_mouth_face'), (), None),
    ('\U0001F928', 'face with raised eyebrow', 'Smileys & Emotion', 'face-neutral-skeptical', '5.0', ('face_with_raised_eyebrow',), (), None),
    ('\U0001F610', 'neutral face', 'Smileys & Emotion', 'face-neutral-skeptical', '0.7', ('neutral_face',), (), None),
    ('\U0001F611', 'expressionless face', 'Smileys & Emotion', 'face-neutral-skeptical', '1.0', ('expressionless',), (), None),
    ('\U0001F636', 'face without mouth', 'Smileys & Emotion', 'face-neutral-skeptical', '1.0', ('no_mouth',), (), None),
    ('\U0001FAE5', 'dotted line face', 'Smileys & Emotion', 'face-neutral-skeptical', '14.0', ('dotted_line_face',), (), None),
    ('\U0001F636\u200D\U0001F32B\uFE0F', 'face in clouds', 'Smileys & Emotion', 'face-neutral-skeptical', '13.1', ('face_in_clouds',), ('\U0001F636\u200D\U0001F32B',), None),
    ('\U0001F60F', 'smirking face', 'Smileys & Emotion', 'face-neutral-skeptical', '0.6', ('smirk',), (), None),
    ('\U0001F612', 'unamused face', 'Smileys & Emotion', 'face-neutral-skeptical', '0.6', ('unamused',), (), None),
    ('\U0001F644', 'face with rolling eyes', 'Smileys & Emotion', 'face-neutral-skeptical', '1.0', ('rolling_eyes', 'face_with_rolling_eyes'), (), None),
    ('\U0001F62C', 'grimacing face', 'Smileys & Emotion', 'face-neutral-skeptical', '1.0', ('grimacing',), (), None),
    ('\U0001F62E\u200D\U0001F4A8', 'face exhaling', 'Smileys & Emotion', 'face-neutral-skeptical', '13.1', ('face_exhaling',), (), None),
    ('\U0001F925', 'lying face', 'Smileys & Emotion', 'face-neutral-skeptical', '3.0', ('lying_face', 'liar'), (), None),
    ('\U0001FAE8', 'shaking face', 'Smileys & Emotion', 'face-neutral-skeptical', '15.0', ('shaking_face',), (), None),
    ('\U0001F642\u200D\u2194\uFE0F', 'head shaking horizontally', 'Smileys & Emotion', 'face-neutral-skeptical', '15.1', (), ('\U0001F642\u200D\u2194',), None),
    ('\U0001F642\u200D\u2195\uFE0F', 'head shaking vertically', 'Smileys & Emotion', 'face-neutral-skeptical', '15.1', (), ('\U0001F642\u200D\u2195',), None),
    ('\U0001F60C', 'relieved face', 'Smileys & Emotion', 'face-sleepy', '0.6', ('relieved',), (), None),
    ('\U0001F614', 'pensive face', 'Smileys & Emotion', 'face-sleepy', '0.6', ('pensive',), (), None),
    ('\U0001F62A', 'sleepy face', 'Smileys & Emotion', 'face-sleepy', '0.6', ('sleepy',), (), None),
    ('\U0001F924', 'drooling face', 'Smileys & Emotion', 'face-sleepy', '3.0', ('drooling_face', 'drool'), (), None),
    ('\U0001F634', 'sleeping face', 'Smileys & Emotion', 'face-sleepy', '1.0', ('sleeping',), (), None),
    ('\U0001F637', 'face with medical mask', 'Smileys & Emotion', 'face-unwell', '0.6', ('mask',), (), None),
    ('\U0001F912', 'face with thermometer', 'Smileys & Emotion', 'face-unwell', '1.0', ('thermometer_face', 'face_with_thermometer'), (), None),
    ('\U0001F915', 'face with head-bandage', 'Smileys & Emotion', 'face-unwell', '1.0', ('head_bandage', 'face_with_head_bandage'), (), None),
    ('\U0001F922', 'nauseated face', 'Smileys & Emotion', 'face-unwell', '3.0', ('nauseated_face', 'sick'), (), None),
    ('\U0001F92E', 'face vomiting', 'Smileys & Emotion', 'face-unwell', '5.0', ('face_vomiting',), (), None),
    ('\U0001F927', 'sneezing face', 'Smileys & Emotion', 'face-unwell', '3.0', ('sneezing_face', 'sneeze'), (), None),
    ('\U0001F975', 'hot face', 'Smileys & Emotion', 'face-unwell', '11.0', ('hot_face',), (), None),
    ('\U0001F976', 'cold face', 'Smileys & Emotion', 'face-unwell', '11.0', ('cold_face',), (), None),
    ('\U0001F974', 'woozy face', 'Smileys & Emotion', 'face-unwell', '11.0', ('woozy_face',), (), None),
    ('\U0001F635', 'face with crossed-out eyes', 'Smileys & Emotion', 'face-unwell', '0.6', ('dizzy_face',), (), None),
    ('\U0001F635\u200D\U0001F4AB', 'face with spiral eyes', 'Smileys & Emotion', 'face-unwell', '13.1', ('face_with_spiral_eyes',), (), None),
    ('\U0001F92F', 'exploding head', 'Smileys & Emotion', 'face-unwell', '5.0', ('exploding_head',), (), None),
    ('\U0001F920', 'cowboy hat face', 'Smileys & Emotion', 'face-hat', '3.0', ('cowboy', 'face_with_cowboy_hat'), (), None),
    ('\U0001F973', 'partying face', 'Smileys & Emotion', 'face-hat', '11.0', ('partying_face',), (), None),
    ('\U0001F978', 'disguised face', 'Smileys & Emotion', 'face-hat', '13.0', ('disguised_face',), (), None),
    ('\U0001F60E', 'smiling face with sunglasses', 'Smileys & Emotion', 'face-glasses', '1.0', ('sunglasses',), (), None),
    ('\U0001F913', 'nerd face', 'Smileys & Emotion', 'face-glasses', '1.0', ('nerd', 'nerd_face'), (), None),
    ('\U0001F9D0', 'face with monocle', 'Smileys & Emotion', 'face-glasses', '5.0', ('face_with_monocle',), (), None),
    ('\U0001F615', 'confused face', 'Smileys & Emotion', 'face-concerned', '1.0', ('confused',), (), None),
    ('\U0001FAE4', 'face with diagonal mouth', 'Smileys & Emotion', 'face-concerned', '14.0', ('face_with_diagonal_mouth',), (), None),
    ('\U0001F61F', 'worried face', 'Smileys & Emotion', 'face-concerned', '1.0', ('worried',), (), None),
    ('\U0001F641', 'slightly frowning face', 'Smileys & Emotion', 'face-concerned', '1.0', ('slight_frown', 'slightly_frowning_face'), (), None),
    ('\u2639\uFE0F', 'frowning face', 'Smileys & Emotion', 'face-concerned', '0.7', ('frowning2', 'white_frowning_face'), ('\u2639',), None),
    ('\U0001F62E', 'face with open mouth', 'Smileys & Emotion', 'face-concerned', '1.0', ('open_mouth',), (), None),
    ('\U0001F62F', 'hushed face', 'Smileys & Emotion', 'face-concerned', '1.0', ('hushed',), (), None),
    ('\U0001F632', 'astonished face', 'Smileys & Emotion', 'face-concerned', '0.6', ('astonished',), (), None),
    ('\U0001F633', 'flushed face', 'Smileys & Emotion', 'face-concerned', '0.6', ('flushed',), (), None),
    ('\U0001F97A', 'pleading face', 'Smileys & Emotion', 'face-concerned', '11.0', ('pleading_face',), (), None),
    ('\U0001F979', 'face holding back tears', 'Smileys & Emotion', 'face-concerned', '14.0', ('face_holding_back_tears',), (), None),
    ('\U0001F626', 'frowning face with open mouth', 'Smileys & Emotion', 'face-concerned', '1.0', ('frowning',), (), None),
    ('\U0001F627', 'anguished face', 'Smileys & Emotion', 'face-concerned', '1.0', ('anguished',), (), None),
    ('\U0001F628', 'fearful face', 'Smileys & Emotion', 'face-concerned', '0.6', ('fearful',), (), None),
    ('\U0001F630', 'anxious face with sweat', 'Smileys & Emotion', 'face-concerned', '0.6', ('cold_sweat',), (), None),
    ('\U0001F625', 'sad but relieved face', 'Smileys & Emotion', 'face-concerned', '0.6', ('disappointed_relieved',), (), None),
    ('\U0001F622', 'crying face', 'Smileys & Emotion', 'face-concerned', '0.6', ('cry',), (), None),
    ('\U0001F62D', 'loudly crying face', 'Smileys & Emotion', 'face-concerned', '0.6', ('sob',), (), None),
    ('\U0001F631', 'face screaming in fear', 'Smileys & Emotion', 'face-concerned', '0.6', ('scream',), (), None),
    ('\U0001F616', 'confounded face', 'Smileys & Emotion', 'face-concerned', '0.6', ('confounded',), (), None),
    ('\U0001F623', 'persevering face', 'Smileys & Emotion', 'face-concerned', '0.6', ('persevere',), (), None),
    ('\U0001F61E', 'disappointed face', 'Smileys & Emotion', 'face-concerned', '0.6', ('disappointed',), (), None),
    ('\U0001F613', 'downcast face with sweat', 'Smileys & Emotion', 'face-concerned', '0.6', ('sweat',), (), None),
    ('\U0001F629', 'weary face', 'Smileys & Emotion', 'face-concerned', '0.6', ('weary',), (), None),
    ('\U0001F62B', 'tired face', 'Smileys & Emotion', 'face-concerned', '0.6', ('tired_face',), (), None),
    ('\U0001F971', 'yawning face', 'Smileys & Emotion', 'face-concerned', '12.0', ('yawning_face',), (), None),
    ('\U0001F624', 'face with steam from nose', 'Smileys & Emotion', 'face-negative', '0.6', ('triumph',), (), None),
    ('\U0001F621', 'enraged face', 'Smileys & Emotion', 'face-negative', '0.6', ('rage',), (), None),
    ('\U0001F620', 'angry face', 'Smileys & Emotion', 'face-negative', '0.6', ('angry',), (), None),
    ('\U0001F92C', 'face with symbols on mouth', 'Smileys & Emotion', 'face-negative', '5.0', ('face_with_symbols_over_mouth',), (), None),
    ('\U0001F608', 'smiling face with horns', 'Smileys & Emotion', 'face-negative', '1.0', ('smiling_imp',), (), None),
    ('\U0001F47F', 'angry face with horns', 'Smileys & Emotion', 'face-negative', '0.6', ('imp',), (), None),
    ('\U0001F480', 'skull', 'Smileys & Emotion', 'face-negative', '0.6', ('skull', 'skeleton'), (), None),
    ('\u2620\uFE0F', 'skull and crossbones', 'Smileys & Emotion', 'face-negative', '1.0', ('skull_crossbones', 'skull_and_crossbones'), ('\u2620',), None),
    ('\U0001F4A9', 'pile of poo', 'Smileys & Emotion', 'face-costume', '0.6', ('poop', 'hankey', 'poo', 'shit'), (), None),
    ('\U0001F921', 'clown face', 'Smileys & Emotion', 'face-costume', '3.0', ('clown', 'clown_face'), (), None),
    ('\U0001F479', 'ogre', 'Smileys & Emotion', 'face-costume', '0.6', ('japanese_ogre',), (), None),
    ('\U0001F47A', 'goblin', 'Smileys & Emotion', 'face-costume', '0.6', ('japanese_goblin',), (), None),
    ('\U0001F47B', 'ghost', 'Smileys & Emotion', 'face-costume', '0.6', ('ghost',), (), None),
    ('\U0001F47D', 'alien', 'Smileys & Emotion', 'face-costume', '0.6', ('alien',), (), None),
    ('\U0001F47E', 'alien monster', 'Smileys & Emotion', 'face-costume', '0.6', ('space_invader',), (), None),
    ('\U0001F916', 'robot', 'Smileys & Emotion', 'face-costume', '1.0', ('robot', 'robot_face'), (), None),
    ('\U0001F63A', 'grinning cat', 'Smileys & Emotion', 'cat-face', '0.6', ('smiley_cat',), (), None),
    ('\U0001F638', 'grinning cat with smiling eyes', 'Smileys & Emotion', 'cat-face', '0.6', ('smile_cat',), (), None),
    ('\U0001F639', 'cat with tears of joy', 'Smileys & Emotion', 'cat-face', '0.6', ('joy_cat',), (), None),
    ('\U0001F63B', 'smiling cat with heart-eyes', 'Smileys & Emotion', 'cat-face', '0.6', ('heart_eyes_cat',), (), None),
    ('\U0001F63C', 'cat with wry smile', 'Smileys & Emotion', 'cat-face', '0.6', ('smirk_cat',), (), None),
    ('\U0001F63D', 'kissing cat', 'Smileys & Emotion', 'cat-face', '0.6', ('kissing_cat',), (), None),
    ('\U0001F640', 'weary cat', 'Smileys & Emotion', 'cat-face', '0.6', ('scream_cat',), (), None),
    ('\U0001F63F', 'crying cat', 'Smileys & Emotion', 'cat-face', '0.6', ('crying_cat_face',), (), None),
    ('\U0001F63E', 'pouting cat', 'Smileys & Emotion', 'cat-face', '0.6', ('pouting_cat',), (), None),
    ('\U0001F648', 'see-no-evil monkey', 'Smileys & Emotion', 'monkey-face', '0.6', ('see_no_evil',), (), None),
    ('\U0001F649', 'hear-no-evil monkey', 'Smileys & Emotion', 'monkey-face', '0.6', ('hear_no_evil',), (), None),
    ('\U0001F64A', 'speak-no-evil monkey', 'Smileys & Emotion', 'monkey-face', '0.6', ('speak_no_evil',), (), None),
    ('\U0001F48C', 'love letter', 'Smileys & Emotion', 'heart', '0.6', ('love_letter',), (), None),
    ('\U0001F498', 'heart with arrow', 'Smileys & Emotion', 'heart', '0.6', ('cupid',), (), None),
    ('\U0001F49D', 'heart with ribbon', 'Smileys & Emotion', 'heart', '0.6', ('gift_heart',), (), None),
    ('\U0001F496', 'sparkling heart', 'Smileys & Emotion', 'heart', '0.6', ('sparkling_heart',), (), None),
    ('\U0001F497', 'growing heart', 'Smileys & Emotion', 'heart', '0.6', ('heartpulse',), (), None),
    ('\U0001F493', 'beating heart', 'Smileys & Emotion', 'heart', '0.6', ('heartbeat',), (), None),
    ('\U0001F49E', 'revolving hearts', 'Smileys & Emotion', 'heart', '0.6', ('revolving_hearts',), (), None),
    ('\U0001F495', 'two hearts', 'Smileys & Emotion', 'heart', '0.6', ('two_hearts',), (), None),
    ('\U0001F49F', 'heart decoration', 'Smileys & Emotion', 'heart', '0.6', ('heart_decoration',), (), None),
    ('\u2763\uFE0F', 'heart exclamation', 'Smileys & Emotion', 'heart', '1.0', ('heart_exclamation', 'heavy_heart_exclamation_mark_ornament'), ('\u2763',), None),
    ('\U0001F494', 'broken heart', 'Smileys & Emotion', 'heart', '0.6', ('broken_heart',), (), None),
    ('\u2764\uFE0F\u200D\U0001F525', 'heart on fire', 'Smileys & Emotion', 'heart', '13.1', ('heart_on_fire',), ('\u2764\u200D\U0001F525',), None),
    ('\u2764\uFE0F\u200D\U0001FA79', 'mending heart', 'Smileys & Emotion', 'heart', '13.1', ('mending_heart',), ('\u2764\u200D\U0001FA79',), None),
    ('\u2764\uFE0F', 'red heart', 'Smileys & Emotion', 'heart', '0.6', ('heart',), ('\u2764',), None),
    ('\U0001FA77', 'pink heart', 'Smileys & Emotion', 'heart', '15.0', ('pink_heart',), (), None),
    ('\U0001F9E1', 'orange heart', 'Smileys & Emotion', 'heart', '5.0', ('orange_heart',), (), None),
    ('\U0001F49B', 'yellow heart', 'Smileys & Emotion', 'heart', '0.6', ('yellow_heart',), (), None),
    ('\U0001F49A', 'green heart', 'Smileys & Emotion', 'heart', '0.6', ('green_heart',), (), None),
    ('\U0001F499', 'blue heart', 'Smileys & Emotion', 'heart', '0.6', ('blue_heart',), (), None),
    ('\U0001FA75', 'light blue heart', 'Smileys & Emotion', 'heart', '15.0', ('light_blue_heart',), (), None),
    ('\U0001F49C', 'purple heart', 'Smileys & Emotion', 'heart', '0.6', ('purple_heart',), (), None),
    ('\U0001F90E', 'brown heart', 'Smileys & Emotion', 'heart', '12.0', ('brown_heart',), (), None),
    ('\U0001F5A4', 'black heart', 'Smileys & Emotion', 'heart', '3.0', ('black_heart',), (), None),
    ('\U0001FA76', 'grey heart', 'Smileys & Emotion', 'heart', '15.0', ('grey_heart',), (), None),
    ('\U0001F90D', 'white heart', 'Smileys & Emotion', 'heart', '12.0', ('white_heart',), (), None),
    ('\U0001F48B', 'kiss mark', 'Smileys & Emotion', 'emotion', '0.6', ('kiss',), (), None),
    ('\U0001F4AF', 'hundred points', 'Smileys & Emotion', 'emotion', '0.6', ('100',), (), None),
    ('\U0001F4A2', 'anger symbol', 'Smileys & Emotion', 'emotion', '0.6', ('anger',), (), None),
    ('\U0001F4A5', 'collision', 'Smileys & Emotion', 'emotion', '0.6', ('boom',), (), None),
    ('\U0001F4AB', 'dizzy', 'Smileys & Emotion', 'emotion', '0.6', ('dizzy',), (), None),
    ('\U0001F4A6', 'sweat droplets', 'Smileys & Emotion', 'emotion', '0.6', ('sweat_drops',), (), None),
    ('\U0001F4A8', 'dashing away', 'Smileys & Emotion', 'emotion', '0.6', ('dash',), (), None),
    ('\U0001F573\uFE0F', 'hole', 'Smileys & Emotion', 'emotion', '0.7', ('hole',), ('\U0001F573',), None),
    ('\U0001F4AC', 'speech balloon', 'Smileys & Emotion', 'emotion', '0.6', ('speech_balloon',), (), None),
    ('\U0001F441\uFE0F\u200D\U0001F5E8\uFE0F', 'eye in speech bubble', 'Smileys & Emotion', 'emotion', '2.0', ('eye_in_speech_bubble',), ('\U0001F441\u200D\U0001F5E8\uFE0F', '\U0001F441\uFE0F\u200D\U0001F5E8', '\U0001F441\u200D\U0001F5E8'), None),
    ('\U0001F5E8\uFE0F', 'left speech bubble', 'Smileys & Emotion', 'emotion', '2.0', ('speech_left', 'left_speech_bubble'), ('\U0001F5E8',), None),
    ('\U0001F5EF\uFE0F', 'right anger bubble', 'Smileys & Emotion', 'emotion', '0.7', ('anger_right', 'right_anger_bubble'), ('\U0001F5EF',), None),
    ('\U0001F4AD', 'thought balloon', 'Smileys & Emotion', 'emotion', '1.0', ('thought_balloon',), (), None),
    ('\U0001F4A4', 'ZZZ', 'Smileys & Emotion', 'emotion', '0.6', ('zzz',), (), None),
    ('\U0001F44B', 'waving hand', 'People & Body', 'hand-fingers-open', '0.6', ('wave',), (), (
        ('\U0001F44B\U0001F3FB', 'waving hand: light skin tone', '1.0', 'LIGHT', ('wave_tone1',), ()),
        ('\U0001F44B\U0001F3FC', 'waving hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('wave_tone2',), ()),
        ('\U0001F44B\U0001F3FD', 'waving hand: medium skin tone', '1.0', 'MEDIUM', ('wave_tone3',), ()),
        ('\U0001F44B\U0001F3FE', 'waving hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('wave_tone4',), ()),
        ('\U0001F44B\U0001F3FF', 'waving hand: dark skin tone', '1.0', 'DARK', ('wave_tone5',), ()),
    )),
    ('\U0001F91A', 'raised back of hand', 'People & Body', 'hand-fingers-open', '3.0', ('raised_back_of_hand', 'back_of_hand'), (), (
        ('\U0001F91A\U0001F3FB', 'raised back of hand: light skin tone', '3.0', 'LIGHT', ('raised_back_of_hand_tone1', 'back_of_hand_tone1'), ()),
        ('\U0001F91A\U0001F3FC', 'raised back of hand: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('raised_back_of_hand_tone2', 'back_of_hand_tone2'), ()),
        ('\U0001F91A\U0001F3FD', 'raised back of hand: medium skin tone', '3.0', 'MEDIUM', ('raised_back_of_hand_tone3', 'back_of_hand_tone3'), ()),
        ('\U0001F91A\U0001F3FE', 'raised back of hand: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('raised_back_of_hand_tone4', 'back_of_hand_tone4'), ()),
        ('\U0001F91A\U0001F3FF', 'raised back of hand: dark skin tone', '3.0', 'DARK', ('raised_back_of_hand_tone5', 'back_of_hand_tone5'), ()),
    )),
    ('\U0001F590\uFE0F', 'hand with fingers splayed', 'People & Body', 'hand-fingers-open', '0.7', ('hand_splayed', 'raised_hand_with_fingers_splayed'), ('\U0001F590',), (
        ('\U0001F590\U0001F3FB', 'hand with fingers splayed: light skin tone', '1.0', 'LIGHT', ('hand_splayed_tone1', 'raised_hand_with_fingers_splayed_tone1'), ()),
        ('\U0001F590\U0001F3FC', 'hand with fingers splayed: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('hand_splayed_tone2', 'raised_hand_with_fingers_splayed_tone2'), ()),
        ('\U0001F590\U0001F3FD', 'hand with fingers splayed: medium skin tone', '1.0', 'MEDIUM', ('hand_splayed_tone3', 'raised_hand_with_fingers_splayed_tone3'), ()),
        ('\U0001F590\U0001F3FE', 'hand with fingers splayed: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('hand_splayed_tone4', 'raised_hand_with_fingers_splayed_tone4'), ()),
        ('\U0001F590\U0001F3FF', 'hand with fingers splayed: dark skin tone', '1.0', 'DARK', ('hand_splayed_tone5', 'raised_hand_with_fingers_splayed_tone5'), ()),
    )),
    ('\u270B', 'raised hand', 'People & Body', 'hand-fingers-open', '0.6', ('raised_hand',), (), (
        ('\u270B\U0001F3FB', 'raised hand: light skin tone', '1.0', 'LIGHT', ('raised_hand_tone1',), ()),
        ('\u270B\U0001F3FC', 'raised hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('raised_hand_tone2',), ()),
        ('\u270B\U0001F3FD', 'raised hand: medium skin tone', '1.0', 'MEDIUM', ('raised_hand_tone3',), ()),
        ('\u270B\U0001F3FE', 'raised hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('raised_hand_tone4',), ()),
        ('\u270B\U0001F3FF', 'raised hand: dark skin tone', '1.0', 'DARK', ('raised_hand_tone5',), ()),
    )),
    ('\U0001F596', 'vulcan salute', 'People & Body', 'hand-fingers-open', '1.0', ('vulcan', 'raised_hand_with_part_between_middle_and_ring_fingers'), (), (
        ('\U0001F596\U0001F3FB', 'vulcan salute: light skin tone', '1.0', 'LIGHT', ('vulcan_tone1', 'raised_hand_with_part_between_middle_and_ring_fingers_tone1'), ()),
        ('\U0001F596\U0001F3FC', 'vulcan salute: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('vulcan_tone2', 'raised_hand_with_part_between_middle_and_ring_fingers_tone2'), ()),
        ('\U0001F596\U0001F3FD', 'vulcan salute: medium skin tone', '1.0', 'MEDIUM', ('vulcan_tone3', 'raised_hand_with_part_between_middle_and_ring_fingers_tone3'), ()),
        ('\U0001F596\U0001F3FE', 'vulcan salute: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('vulcan_tone4', 'raised_hand_with_part_between_middle_and_ring_fingers_tone4'), ()),
        ('\U0001F596\U0001F3FF', 'vulcan salute: dark skin tone', '1.0', 'DARK', ('vulcan_tone5', 'raised_hand_with_part_between_middle_and_ring_fingers_tone5'), ()),
    )),
    ('\U0001FAF1', 'rightwards hand', 'People & Body', 'hand-fingers-open', '14.0', ('rightwards_hand',), (), (
        ('\U0001FAF1\U0001F3FB', 'rightwards hand: light skin tone', '14.0', 'LIGHT', ('rightwards_hand_light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FC', 'rightwards hand: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('rightwards_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FD', 'rightwards hand: medium skin tone', '14.0', 'MEDIUM', ('rightwards_hand_medium_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FE', 'rightwards hand: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('rightwards_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FF', 'rightwards hand: dark skin tone', '14.0', 'DARK', ('rightwards_hand_dark_skin_tone',), ()),
    )),
    ('\U0001FAF2', 'leftwards hand', 'People & Body', 'hand-fingers-open', '14.0', ('leftwards_hand',), (), (
        ('\U0001FAF2\U0001F3FB', 'leftwards hand: light skin tone', '14.0', 'LIGHT', ('leftwards_hand_light_skin_tone',), ()),
        ('\U0001FAF2\U0001F3FC', 'leftwards hand: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('leftwards_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF2\U0001F3FD', 'leftwards hand: medium skin tone', '14.0', 'MEDIUM', ('leftwards_hand_medium_skin_tone',), ()),
        ('\U0001FAF2\U0001F3FE', 'leftwards hand: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('leftwards_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF2\U0001F3FF', 'leftwards hand: dark skin tone', '14.0', 'DARK', ('leftwards_hand_dark_skin_tone',), ()),
    )),
    ('\U0001FAF3', 'palm down hand', 'People & Body', 'hand-fingers-open', '14.0', ('palm_down_hand',), (), (
        ('\U0001FAF3\U0001F3FB', 'palm down hand: light skin tone', '14.0', 'LIGHT', ('palm_down_hand_light_skin_tone',), ()),
        ('\U0001FAF3\U0001F3FC', 'palm down hand: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('palm_down_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF3\U0001F3FD', 'palm down hand: medium skin tone', '14.0', 'MEDIUM', ('palm_down_hand_medium_skin_tone',), ()),
        ('\U0001FAF3\U0001F3FE', 'palm down hand: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('palm_down_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF3\U0001F3FF', 'palm down hand: dark skin tone', '14.0', 'DARK', ('palm_down_hand_dark_skin_tone',), ()),
    )),
    ('\U0001FAF4', 'palm up hand', 'People & Body', 'hand-fingers-open', '14.0', ('palm_up_hand',), (), (
        ('\U0001FAF4\U0001F3FB', 'palm up hand: light skin tone', '14.0', 'LIGHT', ('palm_up_hand_light_skin_tone',), ()),
        ('\U0001FAF4\U0001F3FC', 'palm up hand: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('palm_up_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF4\U0001F3FD', 'palm up hand: medium skin tone', '14.0', 'MEDIUM', ('palm_up_hand_medium_skin_tone',), ()),
        ('\U0001FAF4\U0001F3FE', 'palm up hand: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('palm_up_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF4\U0001F3FF', 'palm up hand: dark skin tone', '14.0', 'DARK', ('palm_up_hand_dark_skin_tone',), ()),
    )),
    ('\U0001FAF7', 'leftwards pushing hand', 'People & Body', 'hand-fingers-open', '15.0', ('leftwards_pushing_hand',), (), (
        ('\U0001FAF7\U0001F3FB', 'leftwards pushing hand: light skin tone', '15.0', 'LIGHT', ('leftwards_pushing_hand_light_skin_tone',), ()),
        ('\U0001FAF7\U0001F3FC', 'leftwards pushing hand: medium-light skin tone', '15.0', 'MEDIUM_LIGHT', ('leftwards_pushing_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF7\U0001F3FD', 'leftwards pushing hand: medium skin tone', '15.0', 'MEDIUM', ('leftwards_pushing_hand_medium_skin_tone',), ()),
        ('\U0001FAF7\U0001F3FE', 'leftwards pushing hand: medium-dark skin tone', '15.0', 'MEDIUM_DARK', ('leftwards_pushing_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF7\U0001F3FF', 'leftwards pushing hand: dark skin tone', '15.0', 'DARK', ('leftwards_pushing_hand_dark_skin_tone',), ()),
    )),
    ('\U0001FAF8', 'rightwards pushing hand', 'People & Body', 'hand-fingers-open', '15.0', ('rightwards_pushing_hand',), (), (
        ('\U0001FAF8\U0001F3FB', 'rightwards pushing hand: light skin tone', '15.0', 'LIGHT', ('rightwards_pushing_hand_light_skin_tone',), ()),
        ('\U0001FAF8\U0001F3FC', 'rightwards pushing hand: medium-light skin tone', '15.0', 'MEDIUM_LIGHT', ('rightwards_pushing_hand_medium-light_skin_tone',), ()),
        ('\U0001FAF8\U0001F3FD', 'rightwards pushing hand: medium skin tone', '15.0', 'MEDIUM', ('rightwards_pushing_hand_medium_skin_tone',), ()),
        ('\U0001FAF8\U0001F3FE', 'rightwards pushing hand: medium-dark skin tone', '15.0', 'MEDIUM_DARK', ('rightwards_pushing_hand_medium-dark_skin_tone',), ()),
        ('\U0001FAF8\U0001F3FF', 'rightwards pushing hand: dark skin tone', '15.0', 'DARK', ('rightwards_pushing_hand_dark_skin_tone',), ()),
    )),
    ('\U0001F44C', 'OK hand', 'People & Body', 'hand-fingers-partial', '0.6', ('ok_hand',), (), (
        ('\U0001F44C\U0001F3FB', 'OK hand: light skin tone', '1.0', 'LIGHT', ('ok_hand_tone1',), ()),
        ('\U0001F44C\U0001F3FC', 'OK hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('ok_hand_tone2',), ()),
        ('\U0001F44C\U0001F3FD', 'OK hand: medium skin tone', '1.0', 'MEDIUM', ('ok_hand_tone3',), ()),
        ('\U0001F44C\U0001F3FE', 'OK hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('ok_hand_tone4',), ()),
        ('\U0001F44C\U0001F3FF', 'OK hand: dark skin tone', '1.0', 'DARK', ('ok_hand_tone5',), ()),
    )),
    ('\U0001F90C', 'pinched fingers', 'People & Body', 'hand-fingers-partial', '13.0', ('pinched_fingers',), (), (
        ('\U0001F90C\U0001F3FB', 'pinched fingers: light skin tone', '13.0', 'LIGHT', ('pinched_fingers_light_skin_tone',), ()),
        ('\U0001F90C\U0001F3FC', 'pinched fingers: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('pinched_fingers_medium-light_skin_tone',), ()),
        ('\U0001F90C\U0001F3FD', 'pinched fingers: medium skin tone', '13.0', 'MEDIUM', ('pinched_fingers_medium_skin_tone',), ()),
        ('\U0001F90C\U0001F3FE', 'pinched fingers: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('pinched_fingers_medium-dark_skin_tone',), ()),
        ('\U0001F90C\U0001F3FF', 'pinched fingers: dark skin tone', '13.0', 'DARK', ('pinched_fingers_dark_skin_tone',), ()),
    )),
    ('\U0001F90F', 'pinching hand', 'People & Body', 'hand-fingers-partial', '12.0', ('pinching_hand',), (), (
        ('\U0001F90F\U0001F3FB', 'pinching hand: light skin tone', '12.0', 'LIGHT', ('pinching_hand_light_skin_tone',), ()),
        ('\U0001F90F\U0001F3FC', 'pinching hand: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('pinching_hand_medium-light_skin_tone',), ()),
        ('\U0001F90F\U0001F3FD', 'pinching hand: medium skin tone', '12.0', 'MEDIUM', ('pinching_hand_medium_skin_tone',), ()),
        ('\U0001F90F\U0001F3FE', 'pinching hand: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('pinching_hand_medium-dark_skin_tone',), ()),
        ('\U0001F90F\U0001F3FF', 'pinching hand: dark skin tone', '12.0', 'DARK', ('pinching_hand_dark_skin_tone',), ()),
    )),
    ('\u270C\uFE0F', 'victory hand', 'People & Body', 'hand-fingers-partial', '0.6', ('v',), ('\u270C',), (
        ('\u270C\U0001F3FB', 'victory hand: light skin tone', '1.0', 'LIGHT', ('v_tone1',), ()),
        ('\u270C\U0001F3FC', 'victory hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('v_tone2',), ()),
        ('\u270C\U0001F3FD', 'victory hand: medium skin tone', '1.0', 'MEDIUM', ('v_tone3',), ()),
        ('\u270C\U0001F3FE', 'victory hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('v_tone4',), ()),
        ('\u270C\U0001F3FF', 'victory hand: dark skin tone', '1.0', 'DARK', ('v_tone5',), ()),
    )),
    ('\U0001F91E', 'crossed fingers', 'People & Body', 'hand-fingers-partial', '3.0', ('fingers_crossed', 'hand_with_index_and_middle_finger_crossed'), (), (
        ('\U0001F91E\U0001F3FB', 'crossed fingers: light skin tone', '3.0', 'LIGHT', ('fingers_crossed_tone1', 'hand_with_index_and_middle_fingers_crossed_tone1'), ()),
        ('\U0001F91E\U0001F3FC', 'crossed fingers: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('fingers_crossed_tone2', 'hand_with_index_and_middle_fingers_crossed_tone2'), ()),
        ('\U0001F91E\U0001F3FD', 'crossed fingers: medium skin tone', '3.0', 'MEDIUM', ('fingers_crossed_tone3', 'hand_with_index_and_middle_fingers_crossed_tone3'), ()),
        ('\U0001F91E\U0001F3FE', 'crossed fingers: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('fingers_crossed_tone4', 'hand_with_index_and_middle_fingers_crossed_tone4'), ()),
        ('\U0001F91E\U0001F3FF', 'crossed fingers: dark skin tone', '3.0', 'DARK', ('fingers_crossed_tone5', 'hand_with_index_and_middle_fingers_crossed_tone5'), ()),
    )),
    ('\U0001FAF0', 'hand with index finger and thumb crossed', 'People & Body', 'hand-fingers-partial', '14.0', ('hand_with_index_finger_and_thumb_crossed',), (), (
        ('\U0001FAF0\U0001F3FB', 'hand with index finger and thumb crossed: light skin tone', '14.0', 'LIGHT', ('hand_with_index_finger_and_thumb_crossed_light_skin_tone',), ()),
        ('\U0001FAF0\U0001F3FC', 'hand with index finger and thumb crossed: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('hand_with_index_finger_and_thumb_crossed_medium-light_skin_tone',), ()),
        ('\U0001FAF0\U0001F3FD', 'hand with index finger and thumb crossed: medium skin tone', '14.0', 'MEDIUM', ('hand_with_index_finger_and_thumb_crossed_medium_skin_tone',), ()),
        ('\U0001FAF0\U0001F3FE', 'hand with index finger and thumb crossed: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('hand_with_index_finger_and_thumb_crossed_medium-dark_skin_tone',), ()),
        ('\U0001FAF0\U0001F3FF', 'hand with index finger and thumb crossed: dark skin tone', '14.0', 'DARK', ('hand_with_index_finger_and_thumb_crossed_dark_skin_tone',), ()),
    )),
    ('\U0001F91F', 'love-you gesture', 'People & Body', 'hand-fingers-partial', '5.0', ('love_you_gesture',), (), (
        ('\U0001F91F\U0001F3FB', 'love-you gesture: light skin tone', '5.0', 'LIGHT', ('love_you_gesture_tone1', 'love_you_gesture_light_skin_tone'), ()),
        ('\U0001F91F\U0001F3FC', 'love-you gesture: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('love_you_gesture_tone2', 'love_you_gesture_medium_light_skin_tone'), ()),
        ('\U0001F91F\U0001F3FD', 'love-you gesture: medium skin tone', '5.0', 'MEDIUM', ('love_you_gesture_tone3', 'love_you_gesture_medium_skin_tone'), ()),
        ('\U0001F91F\U0001F3FE', 'love-you gesture: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('love_you_gesture_tone4', 'love_you_gesture_medium_dark_skin_tone'), ()),
        ('\U0001F91F\U0001F3FF', 'love-you gesture: dark skin tone', '5.0', 'DARK', ('love_you_gesture_tone5', 'love_you_gesture_dark_skin_tone'), ()),
    )),
    ('\U0001F918', 'sign of the horns', 'People & Body', 'hand-fingers-partial', '1.0', ('metal', 'sign_of_the_horns'), (), (
        ('\U0001F918\U0001F3FB', 'sign of the horns: light skin tone', '1.0', 'LIGHT', ('metal_tone1', 'sign_of_the_horns_tone1'), ()),
        ('\U0001F918\U0001F3FC', 'sign of the horns: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('metal_tone2', 'sign_of_the_horns_tone2'), ()),
        ('\U0001F918\U0001F3FD', 'sign of the horns: medium skin tone', '1.0', 'MEDIUM', ('metal_tone3', 'sign_of_the_horns_tone3'), ()),
        ('\U0001F918\U0001F3FE', 'sign of the horns: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('metal_tone4', 'sign_of_the_horns_tone4'), ()),
        ('\U0001F918\U0001F3FF', 'sign of the horns: dark skin tone', '1.0', 'DARK', ('metal_tone5', 'sign_of_the_horns_tone5'), ()),
    )),
    ('\U0001F919', 'call me hand', 'People & Body', 'hand-fingers-partial', '3.0', ('call_me', 'call_me_hand'), (), (
        ('\U0001F919\U0001F3FB', 'call me hand: light skin tone', '3.0', 'LIGHT', ('call_me_tone1', 'call_me_hand_tone1'), ()),
        ('\U0001F919\U0001F3FC', 'call me hand: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('call_me_tone2', 'call_me_hand_tone2'), ()),
        ('\U0001F919\U0001F3FD', 'call me hand: medium skin tone', '3.0', 'MEDIUM', ('call_me_tone3', 'call_me_hand_tone3'), ()),
        ('\U0001F919\U0001F3FE', 'call me hand: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('call_me_tone4', 'call_me_hand_tone4'), ()),
        ('\U0001F919\U0001F3FF', 'call me hand: dark skin tone', '3.0', 'DARK', ('call_me_tone5', 'call_me_hand_tone5'), ()),
    )),
    ('\U0001F448', 'backhand index pointing left', 'People & Body', 'hand-single-finger', '0.6', ('point_left',), (), (
        ('\U0001F448\U0001F3FB', 'backhand index pointing left: light skin tone', '1.0', 'LIGHT', ('point_left_tone1',), ()),
        ('\U0001F448\U0001F3FC', 'backhand index pointing left: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('point_left_tone2',), ()),
        ('\U0001F448\U0001F3FD', 'backhand index pointing left: medium skin tone', '1.0', 'MEDIUM', ('point_left_tone3',), ()),
        ('\U0001F448\U0001F3FE', 'backhand index pointing left: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('point_left_tone4',), ()),
        ('\U0001F448\U0001F3FF', 'backhand index pointing left: dark skin tone', '1.0', 'DARK', ('point_left_tone5',), ()),
    )),
    ('\U0001F449', 'backhand index pointing right', 'People & Body', 'hand-single-finger', '0.6', ('point_right',), (), (
        ('\U0001F449\U0001F3FB', 'backhand index pointing right: light skin tone', '1.0', 'LIGHT', ('point_right_tone1',), ()),
        ('\U0001F449\U0001F3FC', 'backhand index pointing right: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('point_right_tone2',), ()),
        ('\U0001F449\U0001F3FD', 'backhand index pointing right: medium skin tone', '1.0', 'MEDIUM', ('point_right_tone3',), ()),
        ('\U0001F449\U0001F3FE', 'backhand index pointing right: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('point_right_tone4',), ()),
        ('\U0001F449\U0001F3FF', 'backhand index pointing right: dark skin tone', '1.0', 'DARK', ('point_right_tone5',), ()),
    )),
    ('\U0001F446', 'backhand index pointing up', 'People & Body', 'hand-single-finger', '0.6', ('point_up_2',), (), (
        ('\U0001F446\U0001F3FB', 'backhand index pointing up: light skin tone', '1.0', 'LIGHT', ('point_up_2_tone1',), ()),
        ('\U0001F446\U0001F3FC', 'backhand index pointing up: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('point_up_2_tone2',), ()),
        ('\U0001F446\U0001F3FD', 'backhand index pointing up: medium skin tone', '1.0', 'MEDIUM', ('point_up_2_tone3',), ()),
        ('\U0001F446\U0001F3FE', 'backhand index pointing up: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('point_up_2_tone4',), ()),
        ('\U0001F446\U0001F3FF', 'backhand index pointing up: dark skin tone', '1.0', 'DARK', ('point_up_2_tone5',), ()),
    )),
    ('\U0001F595', 'middle finger', 'People & Body', 'hand-single-finger', '1.0', ('middle_finger', 'reversed_hand_with_middle_finger_extended'), (), (
        ('\U0001F595\U0001F3FB', 'middle finger: light skin tone', '1.0', 'LIGHT', ('middle_finger_tone1', 'reversed_hand_with_middle_finger_extended_tone1'), ()),
        ('\U0001F595\U0001F3FC', 'middle finger: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('middle_finger_tone2', 'reversed_hand_with_middle_finger_extended_tone2'), ()),
        ('\U0001F595\U0001F3FD', 'middle finger: medium skin tone', '1.0', 'MEDIUM', ('middle_finger_tone3', 'reversed_hand_with_middle_finger_extended_tone3'), ()),
        ('\U0001F595\U0001F3FE', 'middle finger: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('middle_finger_tone4', 'reversed_hand_with_middle_finger_extended_tone4'), ()),
        ('\U0001F595\U0001F3FF', 'middle finger: dark skin tone', '1.0', 'DARK', ('middle_finger_tone5', 'reversed_hand_with_middle_finger_extended_tone5'), ()),
    )),
    ('\U0001F447', 'backhand index pointing down', 'People & Body', 'hand-single-finger', '0.6', ('point_down',), (), (
        ('\U0001F447\U0001F3FB', 'backhand index pointing down: light skin tone', '1.0', 'LIGHT', ('point_down_tone1',), ()),
        ('\U0001F447\U0001F3FC', 'backhand index pointing down: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('point_down_tone2',), ()),
        ('\U0001F447\U0001F3FD', 'backhand index pointing down: medium skin tone', '1.0', 'MEDIUM', ('point_down_tone3',), ()),
        ('\U0001F447\U0001F3FE', 'backhand index pointing down: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('point_down_tone4',), ()),
        ('\U0001F447\U0001F3FF', 'backhand index pointing down: dark skin tone', '1.0', 'DARK', ('point_down_tone5',), ()),
    )),
    ('\u261D\uFE0F', 'index pointing up', 'People & Body', 'hand-single-finger', '0.6', ('point_up',), ('\u261D',), (
        ('\u261D\U0001F3FB', 'index pointing up: light skin tone', '1.0', 'LIGHT', ('point_up_tone1',), ()),
        ('\u261D\U0001F3FC', 'index pointing up: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('point_up_tone2',), ()),
        ('\u261D\U0001F3FD', 'index pointing up: medium skin tone', '1.0', 'MEDIUM', ('point_up_tone3',), ()),
        ('\u261D\U0001F3FE', 'index pointing up: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('point_up_tone4',), ()),
        ('\u261D\U0001F3FF', 'index pointing up: dark skin tone', '1.0', 'DARK', ('point_up_tone5',), ()),
    )),
    ('\U0001FAF5', 'index pointing at the viewer', 'People & Body', 'hand-single-finger', '14.0', ('index_pointing_at_the_viewer',), (), (
        ('\U0001FAF5\U0001F3FB', 'index pointing at the viewer: light skin tone', '14.0', 'LIGHT', ('index_pointing_at_the_viewer_light_skin_tone',), ()),
        ('\U0001FAF5\U0001F3FC', 'index pointing at the viewer: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('index_pointing_at_the_viewer_medium-light_skin_tone',), ()),
        ('\U0001FAF5\U0001F3FD', 'index pointing at the viewer: medium skin tone', '14.0', 'MEDIUM', ('index_pointing_at_the_viewer_medium_skin_tone',), ()),
        ('\U0001FAF5\U0001F3FE', 'index pointing at the viewer: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('index_pointing_at_the_viewer_medium-dark_skin_tone',), ()),
        ('\U0001FAF5\U0001F3FF', 'index pointing at the viewer: dark skin tone', '14.0', 'DARK', ('index_pointing_at_the_viewer_dark_skin_tone',), ()),
    )),
    ('\U0001F44D', 'thumbs up', 'People & Body', 'hand-fingers-closed', '0.6', ('thumbsup', '+1', 'thumbup'), (), (
        ('\U0001F44D\U0001F3FB', 'thumbs up: light skin tone', '1.0', 'LIGHT', ('thumbsup_tone1', '+1_tone1', 'thumbup_tone1'), ()),
        ('\U0001F44D\U0001F3FC', 'thumbs up: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('thumbsup_tone2', '+1_tone2', 'thumbup_tone2'), ()),
        ('\U0001F44D\U0001F3FD', 'thumbs up: medium skin tone', '1.0', 'MEDIUM', ('thumbsup_tone3', '+1_tone3', 'thumbup_tone3'), ()),
        ('\U0001F44D\U0001F3FE', 'thumbs up: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('thumbsup_tone4', '+1_tone4', 'thumbup_tone4'), ()),
        ('\U0001F44D\U0001F3FF', 'thumbs up: dark skin tone', '1.0', 'DARK', ('thumbsup_tone5', '+1_tone5', 'thumbup_tone5'), ()),
    )),
    ('\U0001F44E', 'thumbs down', 'People & Body', 'hand-fingers-closed', '0.6', ('thumbsdown', '-1', 'thumbdown'), (), (
        ('\U0001F44E\U0001F3FB', 'thumbs down: light skin tone', '1.0', 'LIGHT', ('thumbsdown_tone1', '-1_tone1', 'thumbdown_tone1'), ()),
        ('\U0001F44E\U0001F3FC', 'thumbs down: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('thumbsdown_tone2', '-1_tone2', 'thumbdown_tone2'), ()),
        ('\U0001F44E\U0001F3FD', 'thumbs down: medium skin tone', '1.0', 'MEDIUM', ('thumbsdown_tone3', '-1_tone3', 'thumbdown_tone3'), ()),
        ('\U0001F44E\U0001F3FE', 'thumbs down: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('thumbsdown_tone4', '-1_tone4', 'thumbdown_tone4'), ()),
        ('\U0001F44E\U0001F3FF', 'thumbs down: dark skin tone', '1.0', 'DARK', ('thumbsdown_tone5', '-1_tone5', 'thumbdown_tone5'), ()),
    )),
    ('\u270A', 'raised fist', 'People & Body', 'hand-fingers-closed', '0.6', ('fist',), (), (
        ('\u270A\U0001F3FB', 'raised fist: light skin tone', '1.0', 'LIGHT', ('fist_tone1',), ()),
        ('\u270A\U0001F3FC', 'raised fist: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('fist_tone2',), ()),
        ('\u270A\U0001F3FD', 'raised fist: medium skin tone', '1.0', 'MEDIUM', ('fist_tone3',), ()),
        ('\u270A\U0001F3FE', 'raised fist: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('fist_tone4',), ()),
        ('\u270A\U0001F3FF', 'raised fist: dark skin tone', '1.0', 'DARK', ('fist_tone5',), ()),
    )),
    ('\U0001F44A', 'oncoming fist', 'People & Body', 'hand-fingers-closed', '0.6', ('punch',), (), (
        ('\U0001F44A\U0001F3FB', 'oncoming fist: light skin tone', '1.0', 'LIGHT', ('punch_tone1',), ()),
        ('\U0001F44A\U0001F3FC', 'oncoming fist: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('punch_tone2',), ()),
        ('\U0001F44A\U0001F3FD', 'oncoming fist: medium skin tone', '1.0', 'MEDIUM', ('punch_tone3',), ()),
        ('\U0001F44A\U0001F3FE', 'oncoming fist: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('punch_tone4',), ()),
        ('\U0001F44A\U0001F3FF', 'oncoming fist: dark skin tone', '1.0', 'DARK', ('punch_tone5',), ()),
    )),
    ('\U0001F91B', 'left-facing fist', 'People & Body', 'hand-fingers-closed', '3.0', ('left_facing_fist', 'left_fist'), (), (
        ('\U0001F91B\U0001F3FB', 'left-facing fist: light skin tone', '3.0', 'LIGHT', ('left_facing_fist_tone1', 'left_fist_tone1'), ()),
        ('\U0001F91B\U0001F3FC', 'left-facing fist: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('left_facing_fist_tone2', 'left_fist_tone2'), ()),
        ('\U0001F91B\U0001F3FD', 'left-facing fist: medium skin tone', '3.0', 'MEDIUM', ('left_facing_fist_tone3', 'left_fist_tone3'), ()),
        ('\U0001F91B\U0001F3FE', 'left-facing fist: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('left_facing_fist_tone4', 'left_fist_tone4'), ()),
        ('\U0001F91B\U0001F3FF', 'left-facing fist: dark skin tone', '3.0', 'DARK', ('left_facing_fist_tone5', 'left_fist_tone5'), ()),
    )),
    ('\U0001F91C', 'right-facing fist', 'People & Body', 'hand-fingers-closed', '3.0', ('right_facing_fist', 'right_fist'), (), (
        ('\U0001F91C\U0001F3FB', 'right-facing fist: light skin tone', '3.0', 'LIGHT', ('right_facing_fist_tone1', 'right_fist_tone1'), ()),
        ('\U0001F91C\U0001F3FC', 'right-facing fist: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('right_facing_fist_tone2', 'right_fist_tone2'), ()),
        ('\U0001F91C\U0001F3FD', 'right-facing fist: medium skin tone', '3.0', 'MEDIUM', ('right_facing_fist_tone3', 'right_fist_tone3'), ()),
        ('\U0001F91C\U0001F3FE', 'right-facing fist: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('right_facing_fist_tone4', 'right_fist_tone4'), ()),
        ('\U0001F91C\U0001F3FF', 'right-facing fist: dark skin tone', '3.0', 'DARK', ('right_facing_fist_tone5', 'right_fist_tone5'), ()),
    )),
    ('\U0001F44F', 'clapping hands', 'People & Body', 'hands', '0.6', ('clap',), (), (
        ('\U0001F44F\U0001F3FB', 'clapping hands: light skin tone', '1.0', 'LIGHT', ('clap_tone1',), ()),
        ('\U0001F44F\U0001F3FC', 'clapping hands: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('clap_tone2',), ()),
        ('\U0001F44F\U0001F3FD', 'clapping hands: medium skin tone', '1.0', 'MEDIUM', ('clap_tone3',), ()),
        ('\U0001F44F\U0001F3FE', 'clapping hands: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('clap_tone4',), ()),
        ('\U0001F44F\U0001F3FF', 'clapping hands: dark skin tone', '1.0', 'DARK', ('clap_tone5',), ()),
    )),
    ('\U0001F64C', 'raising hands', 'People & Body', 'hands', '0.6', ('raised_hands',), (), (
        ('\U0001F64C\U0001F3FB', 'raising hands: light skin tone', '1.0', 'LIGHT', ('raised_hands_tone1',), ()),
        ('\U0001F64C\U0001F3FC', 'raising hands: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('raised_hands_tone2',), ()),
        ('\U0001F64C\U0001F3FD', 'raising hands: medium skin tone', '1.0', 'MEDIUM', ('raised_hands_tone3',), ()),
        ('\U0001F64C\U0001F3FE', 'raising hands: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('raised_hands_tone4',), ()),
        ('\U0001F64C\U0001F3FF', 'raising hands: dark skin tone', '1.0', 'DARK', ('raised_hands_tone5',), ()),
    )),
    ('\U0001FAF6', 'heart hands', 'People & Body', 'hands', '14.0', ('heart_hands',), (), (
        ('\U0001FAF6\U0001F3FB', 'heart hands: light skin tone', '14.0', 'LIGHT', ('heart_hands_light_skin_tone',), ()),
        ('\U0001FAF6\U0001F3FC', 'heart hands: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('heart_hands_medium-light_skin_tone',), ()),
        ('\U0001FAF6\U0001F3FD', 'heart hands: medium skin tone', '14.0', 'MEDIUM', ('heart_hands_medium_skin_tone',), ()),
        ('\U0001FAF6\U0001F3FE', 'heart hands: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('heart_hands_medium-dark_skin_tone',), ()),
        ('\U0001FAF6\U0001F3FF', 'heart hands: dark skin tone', '14.0', 'DARK', ('heart_hands_dark_skin_tone',), ()),
    )),
    ('\U0001F450', 'open hands', 'People & Body', 'hands', '0.6', ('open_hands',), (), (
        ('\U0001F450\U0001F3FB', 'open hands: light skin tone', '1.0', 'LIGHT', ('open_hands_tone1',), ()),
        ('\U0001F450\U0001F3FC', 'open hands: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('open_hands_tone2',), ()),
        ('\U0001F450\U0001F3FD', 'open hands: medium skin tone', '1.0', 'MEDIUM', ('open_hands_tone3',), ()),
        ('\U0001F450\U0001F3FE', 'open hands: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('open_hands_tone4',), ()),
        ('\U0001F450\U0001F3FF', 'open hands: dark skin tone', '1.0', 'DARK', ('open_hands_tone5',), ()),
    )),
    ('\U0001F932', 'palms up together', 'People & Body', 'hands', '5.0', ('palms_up_together',), (), (
        ('\U0001F932\U0001F3FB', 'palms up together: light skin tone', '5.0', 'LIGHT', ('palms_up_together_tone1', 'palms_up_together_light_skin_tone'), ()),
        ('\U0001F932\U0001F3FC', 'palms up together: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('palms_up_together_tone2', 'palms_up_together_medium_light_skin_tone'), ()),
        ('\U0001F932\U0001F3FD', 'palms up together: medium skin tone', '5.0', 'MEDIUM', ('palms_up_together_tone3', 'palms_up_together_medium_skin_tone'), ()),
        ('\U0001F932\U0001F3FE', 'palms up together: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('palms_up_together_tone4', 'palms_up_together_medium_dark_skin_tone'), ()),
        ('\U0001F932\U0001F3FF', 'palms up together: dark skin tone', '5.0', 'DARK', ('palms_up_together_tone5', 'palms_up_together_dark_skin_tone'), ()),
    )),
    ('\U0001F91D', 'handshake', 'People & Body', 'hands', '3.0', ('handshake', 'shaking_hands'), (), (
        ('\U0001F91D\U0001F3FB', 'handshake: light skin tone', '14.0', 'LIGHT', ('handshake_light_skin_tone',), ()),
        ('\U0001F91D\U0001F3FC', 'handshake: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('handshake_medium-light_skin_tone',), ()),
        ('\U0001F91D\U0001F3FD', 'handshake: medium skin tone', '14.0', 'MEDIUM', ('handshake_medium_skin_tone',), ()),
        ('\U0001F91D\U0001F3FE', 'handshake: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('handshake_medium-dark_skin_tone',), ()),
        ('\U0001F91D\U0001F3FF', 'handshake: dark skin tone', '14.0', 'DARK', ('handshake_dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FC', 'handshake: light skin tone, medium-light skin tone', '14.0', 'LIGHT_AND_MEDIUM_LIGHT', ('handshake_light_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FD', 'handshake: light skin tone, medium skin tone', '14.0', 'LIGHT_AND_MEDIUM', ('handshake_light_skin_tone_medium_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FE', 'handshake: light skin tone, medium-dark skin tone', '14.0', 'LIGHT_AND_MEDIUM_DARK', ('handshake_light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FB\u200D\U0001FAF2\U0001F3FF', 'handshake: light skin tone, dark skin tone', '14.0', 'LIGHT_AND_DARK', ('handshake_light_skin_tone_dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FC\u200D\U0001FAF2\U0001F3FB', 'handshake: medium-light skin tone, light skin tone', '14.0', 'MEDIUM_LIGHT_AND_LIGHT', ('handshake_medium-light_skin_tone_light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FC\u200D\U0001FAF2\U0001F3FD', 'handshake: medium-light skin tone, medium skin tone', '14.0', 'MEDIUM_LIGHT_AND_MEDIUM', ('handshake_medium-light_skin_tone_medium_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FC\u200D\U0001FAF2\U0001F3FE', 'handshake: medium-light skin tone, medium-dark skin tone', '14.0', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('handshake_medium-light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FC\u200D\U0001FAF2\U0001F3FF', 'handshake: medium-light skin tone, dark skin tone', '14.0', 'MEDIUM_LIGHT_AND_DARK', ('handshake_medium-light_skin_tone_dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FD\u200D\U0001FAF2\U0001F3FB', 'handshake: medium skin tone, light skin tone', '14.0', 'MEDIUM_AND_LIGHT', ('handshake_medium_skin_tone_light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FD\u200D\U0001FAF2\U0001F3FC', 'handshake: medium skin tone, medium-light skin tone', '14.0', 'MEDIUM_AND_MEDIUM_LIGHT', ('handshake_medium_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FD\u200D\U0001FAF2\U0001F3FE', 'handshake: medium skin tone, medium-dark skin tone', '14.0', 'MEDIUM_AND_MEDIUM_DARK', ('handshake_medium_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FD\u200D\U0001FAF2\U0001F3FF', 'handshake: medium skin tone, dark skin tone', '14.0', 'MEDIUM_AND_DARK', ('handshake_medium_skin_tone_dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FE\u200D\U0001FAF2\U0001F3FB', 'handshake: medium-dark skin tone, light skin tone', '14.0', 'MEDIUM_DARK_AND_LIGHT', ('handshake_medium-dark_skin_tone_light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FE\u200D\U0001FAF2\U0001F3FC', 'handshake: medium-dark skin tone, medium-light skin tone', '14.0', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('handshake_medium-dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FE\u200D\U0001FAF2\U0001F3FD', 'handshake: medium-dark skin tone, medium skin tone', '14.0', 'MEDIUM_DARK_AND_MEDIUM', ('handshake_medium-dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FE\u200D\U0001FAF2\U0001F3FF', 'handshake: medium-dark skin tone, dark skin tone', '14.0', 'MEDIUM_DARK_AND_DARK', ('handshake_medium-dark_skin_tone_dark_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FF\u200D\U0001FAF2\U0001F3FB', 'handshake: dark skin tone, light skin tone', '14.0', 'DARK_AND_LIGHT', ('handshake_dark_skin_tone_light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FF\u200D\U0001FAF2\U0001F3FC', 'handshake: dark skin tone, medium-light skin tone', '14.0', 'DARK_AND_MEDIUM_LIGHT', ('handshake_dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FF\u200D\U0001FAF2\U0001F3FD', 'handshake: dark skin tone, medium skin tone', '14.0', 'DARK_AND_MEDIUM', ('handshake_dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001FAF1\U0001F3FF\u200D\U0001FAF2\U0001F3FE', 'handshake: dark skin tone, medium-dark skin tone', '14.0', 'DARK_AND_MEDIUM_DARK', ('handshake_dark_skin_tone_medium-dark_skin_tone',), ()),
    )),
    ('\U0001F64F', 'folded hands', 'People & Body', 'hands', '0.6', ('pray',), (), (
        ('\U0001F64F\U0001F3FB', 'folded hands: light skin tone', '1.0', 'LIGHT', ('pray_tone1',), ()),
        ('\U0001F64F\U0001F3FC', 'folded hands: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('pray_tone2',), ()),
        ('\U0001F64F\U0001F3FD', 'folded hands: medium skin tone', '1.0', 'MEDIUM', ('pray_tone3',), ()),
        ('\U0001F64F\U0001F3FE', 'folded hands: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('pray_tone4',), ()),
        ('\U0001F64F\U0001F3FF', 'folded hands: dark skin tone', '1.0', 'DARK', ('pray_tone5',), ()),
    )),
    ('\u270D\uFE0F', 'writing hand', 'People & Body', 'hand-prop', '0.7', ('writing_hand',), ('\u270D',), (
        ('\u270D\U0001F3FB', 'writing hand: light skin tone', '1.0', 'LIGHT', ('writing_hand_tone1',), ()),
        ('\u270D\U0001F3FC', 'writing hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('writing_hand_tone2',), ()),
        ('\u270D\U0001F3FD', 'writing hand: medium skin tone', '1.0', 'MEDIUM', ('writing_hand_tone3',), ()),
        ('\u270D\U0001F3FE', 'writing hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('writing_hand_tone4',), ()),
        ('\u270D\U0001F3FF', 'writing hand: dark skin tone', '1.0', 'DARK', ('writing_hand_tone5',), ()),
    )),
    ('\U0001F485', 'nail polish', 'People & Body', 'hand-prop', '0.6', ('nail_care',), (), (
        ('\U0001F485\U0001F3FB', 'nail polish: light skin tone', '1.0', 'LIGHT', ('nail_care_tone1',), ()),
        ('\U0001F485\U0001F3FC', 'nail polish: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('nail_care_tone2',), ()),
        ('\U0001F485\U0001F3FD', 'nail polish: medium skin tone', '1.0', 'MEDIUM', ('nail_care_tone3',), ()),
        ('\U0001F485\U0001F3FE', 'nail polish: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('nail_care_tone4',), ()),
        ('\U0001F485\U0001F3FF', 'nail polish: dark skin tone', '1.0', 'DARK', ('nail_care_tone5',), ()),
    )),
    ('\U0001F933', 'selfie', 'People & Body', 'hand-prop', '3.0', ('selfie',), (), (
        ('\U0001F933\U0001F3FB', 'selfie: light skin tone', '3.0', 'LIGHT', ('selfie_tone1',), ()),
        ('\U0001F933\U0001F3FC', 'selfie: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('selfie_tone2',), ()),
        ('\U0001F933\U0001F3FD', 'selfie: medium skin tone', '3.0', 'MEDIUM', ('selfie_tone3',), ()),
        ('\U0001F933\U0001F3FE', 'selfie: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('selfie_tone4',), ()),
        ('\U0001F933\U0001F3FF', 'selfie: dark skin tone', '3.0', 'DARK', ('selfie_tone5',), ()),
    )),
    ('\U0001F4AA', 'flexed biceps', 'People & Body', 'body-parts', '0.6', ('muscle',), (), (
        ('\U0001F4AA\U0001F3FB', 'flexed biceps: light skin tone', '1.0', 'LIGHT', ('muscle_tone1',), ()),
        ('\U0001F4AA\U0001F3FC', 'flexed biceps: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('muscle_tone2',), ()),
        ('\U0001F4AA\U0001F3FD', 'flexed biceps: medium skin tone', '1.0', 'MEDIUM', ('muscle_tone3',), ()),
        ('\U0001F4AA\U0001F3FE', 'flexed biceps: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('muscle_tone4',), ()),
        ('\U0001F4AA\U0001F3FF', 'flexed biceps: dark skin tone', '1.0', 'DARK', ('muscle_tone5',), ()),
    )),
    ('\U0001F9BE', 'mechanical arm', 'People & Body', 'body-parts', '12.0', ('mechanical_arm',), (), None),
    ('\U0001F9BF', 'mechanical leg', 'People & Body', 'body-parts', '12.0', ('mechanical_leg',), (), None),
    ('\U0001F9B5', 'leg', 'People & Body', 'body-parts', '11.0', ('leg',), (), (
        ('\U0001F9B5\U0001F3FB', 'leg: light skin tone', '11.0', 'LIGHT', ('leg_tone1', 'leg_light_skin_tone'), ()),
        ('\U0001F9B5\U0001F3FC', 'leg: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('leg_tone2', 'leg_medium_light_skin_tone'), ()),
        ('\U0001F9B5\U0001F3FD', 'leg: medium skin tone', '11.0', 'MEDIUM', ('leg_tone3', 'leg_medium_skin_tone'), ()),
        ('\U0001F9B5\U0001F3FE', 'leg: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('leg_tone4', 'leg_medium_dark_skin_tone'), ()),
        ('\U0001F9B5\U0001F3FF', 'leg: dark skin tone', '11.0', 'DARK', ('leg_tone5', 'leg_dark_skin_tone'), ()),
    )),
    ('\U0001F9B6', 'foot', 'People & Body', 'body-parts', '11.0', ('foot',), (), (
        ('\U0001F9B6\U0001F3FB', 'foot: light skin tone', '11.0', 'LIGHT', ('foot_tone1', 'foot_light_skin_tone'), ()),
        ('\U0001F9B6\U0001F3FC', 'foot: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('foot_tone2', 'foot_medium_light_skin_tone'), ()),
        ('\U0001F9B6\U0001F3FD', 'foot: medium skin tone', '11.0', 'MEDIUM', ('foot_tone3', 'foot_medium_skin_tone'), ()),
        ('\U0001F9B6\U0001F3FE', 'foot: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('foot_tone4', 'foot_medium_dark_skin_tone'), ()),
        ('\U0001F9B6\U0001F3FF', 'foot: dark skin tone', '11.0', 'DARK', ('foot_tone5', 'foot_dark_skin_tone'), ()),
    )),
    ('\U0001F442', 'ear', 'People & Body', 'body-parts', '0.6', ('ear',), (), (
        ('\U0001F442\U0001F3FB', 'ear: light skin tone', '1.0', 'LIGHT', ('ear_tone1',), ()),
        ('\U0001F442\U0001F3FC', 'ear: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('ear_tone2',), ()),
        ('\U0001F442\U0001F3FD', 'ear: medium skin tone', '1.0', 'MEDIUM', ('ear_tone3',), ()),
        ('\U0001F442\U0001F3FE', 'ear: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('ear_tone4',), ()),
        ('\U0001F442\U0001F3FF', 'ear: dark skin tone', '1.0', 'DARK', ('ear_tone5',), ()),
    )),
    ('\U0001F9BB', 'ear with hearing aid', 'People & Body', 'body-parts', '12.0', ('ear_with_hearing_aid',), (), (
        ('\U0001F9BB\U0001F3FB', 'ear with hearing aid: light skin tone', '12.0', 'LIGHT', ('ear_with_hearing_aid_light_skin_tone',), ()),
        ('\U0001F9BB\U0001F3FC', 'ear with hearing aid: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('ear_with_hearing_aid_medium-light_skin_tone',), ()),
        ('\U0001F9BB\U0001F3FD', 'ear with hearing aid: medium skin tone', '12.0', 'MEDIUM', ('ear_with_hearing_aid_medium_skin_tone',), ()),
        ('\U0001F9BB\U0001F3FE', 'ear with hearing aid: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('ear_with_hearing_aid_medium-dark_skin_tone',), ()),
        ('\U0001F9BB\U0001F3FF', 'ear with hearing aid: dark skin tone', '12.0', 'DARK', ('ear_with_hearing_aid_dark_skin_tone',), ()),
    )),
    ('\U0001F443', 'nose', 'People & Body', 'body-parts', '0.6', ('nose',), (), (
        ('\U0001F443\U0001F3FB', 'nose: light skin tone', '1.0', 'LIGHT', ('nose_tone1',), ()),
        ('\U0001F443\U0001F3FC', 'nose: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('nose_tone2',), ()),
        ('\U0001F443\U0001F3FD', 'nose: medium skin tone', '1.0', 'MEDIUM', ('nose_tone3',), ()),
        ('\U0001F443\U0001F3FE', 'nose: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('nose_tone4',), ()),
        ('\U0001F443\U0001F3FF', 'nose: dark skin tone', '1.0', 'DARK', ('nose_tone5',), ()),
    )),
    ('\U0001F9E0', 'brain', 'People & Body', 'body-parts', '5.0', ('brain',), (), None),
    ('\U0001FAC0', 'anatomical heart', 'People & Body', 'body-parts', '13.0', ('anatomical_heart',), (), None),
    ('\U0001FAC1', 'lungs', 'People & Body', 'body-parts', '13.0', ('lungs',), (), None),
    ('\U0001F9B7', 'tooth', 'People & Body', 'body-parts', '11.0', ('tooth',), (), None),
    ('\U0001F9B4', 'bone', 'People & Body', 'body-parts', '11.0', ('bone',), (), None),
    ('\U0001F440', 'eyes', 'People & Body', 'body-parts', '0.6', ('eyes',), (), None),
    ('\U0001F441\uFE0F', 'eye', 'People & Body', 'body-parts', '0.7', ('eye',), ('\U0001F441',), None),
    ('\U0001F445', 'tongue', 'People & Body', 'body-parts', '0.6', ('tongue',), (), None),
    ('\U0001F444', 'mouth', 'People & Body', 'body-parts', '0.6', ('lips',), (), None),
    ('\U0001FAE6', 'biting lip', 'People & Body', 'body-parts', '14.0', ('biting_lip',), (), None),
    ('\U0001F476', 'baby', 'People & Body', 'person', '0.6', ('baby',), (), (
        ('\U0001F476\U0001F3FB', 'baby: light skin tone', '1.0', 'LIGHT', ('baby_tone1',), ()),
        ('\U0001F476\U0001F3FC', 'baby: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('baby_tone2',), ()),
        ('\U0001F476\U0001F3FD', 'baby: medium skin tone', '1.0', 'MEDIUM', ('baby_tone3',), ()),
        ('\U0001F476\U0001F3FE', 'baby: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('baby_tone4',), ()),
        ('\U0001F476\U0001F3FF', 'baby: dark skin tone', '1.0', 'DARK', ('baby_tone5',), ()),
    )),
    ('\U0001F9D2', 'child', 'People & Body', 'person', '5.0', ('child',), (), (
        ('\U0001F9D2\U0001F3FB', 'child: light skin tone', '5.0', 'LIGHT', ('child_tone1', 'child_light_skin_tone'), ()),
        ('\U0001F9D2\U0001F3FC', 'child: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('child_tone2', 'child_medium_light_skin_tone'), ()),
        ('\U0001F9D2\U0001F3FD', 'child: medium skin tone', '5.0', 'MEDIUM', ('child_tone3', 'child_medium_skin_tone'), ()),
        ('\U0001F9D2\U0001F3FE', 'child: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('child_tone4', 'child_medium_dark_skin_tone'), ()),
        ('\U0001F9D2\U0001F3FF', 'child: dark skin tone', '5.0', 'DARK', ('child_tone5', 'child_dark_skin_tone'), ()),
    )),
    ('\U0001F466', 'boy', 'People & Body', 'person', '0.6', ('boy',), (), (
        ('\U0001F466\U0001F3FB', 'boy: light skin tone', '1.0', 'LIGHT', ('boy_tone1',), ()),
        ('\U0001F466\U0001F3FC', 'boy: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('boy_tone2',), ()),
        ('\U0001F466\U0001F3FD', 'boy: medium skin tone', '1.0', 'MEDIUM', ('boy_tone3',), ()),
        ('\U0001F466\U0001F3FE', 'boy: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('boy_tone4',), ()),
        ('\U0001F466\U0001F3FF', 'boy: dark skin tone', '1.0', 'DARK', ('boy_tone5',), ()),
    )),
    ('\U0001F467', 'girl', 'People & Body', 'person', '0.6', ('girl',), (), (
        ('\U0001F467\U0001F3FB', 'girl: light skin tone', '1.0', 'LIGHT', ('girl_tone1',), ()),
        ('\U0001F467\U0001F3FC', 'girl: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('girl_tone2',), ()),
        ('\U0001F467\U0001F3FD', 'girl: medium skin tone', '1.0', 'MEDIUM', ('girl_tone3',), ()),
        ('\U0001F467\U0001F3FE', 'girl: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('girl_tone4',), ()),
        ('\U0001F467\U0001F3FF', 'girl: dark skin tone', '1.0', 'DARK', ('girl_tone5',), ()),
    )),
    ('\U0001F9D1', 'person', 'People & Body', 'person', '5.0', ('adult',), (), (
        ('\U0001F9D1\U0001F3FB', 'person: light skin tone', '5.0', 'LIGHT', ('adult_tone1', 'adult_light_skin_tone'), ()),
        ('\U0001F9D1\U0001F3FC', 'person: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('adult_tone2', 'adult_medium_light_skin_tone'), ()),
        ('\U0001F9D1\U0001F3FD', 'person: medium skin tone', '5.0', 'MEDIUM', ('adult_tone3', 'adult_medium_skin_tone'), ()),
        ('\U0001F9D1\U0001F3FE', 'person: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('adult_tone4', 'adult_medium_dark_skin_tone'), ()),
        ('\U0001F9D1\U0001F3FF', 'person: dark skin tone', '5.0', 'DARK', ('adult_tone5', 'adult_dark_skin_tone'), ()),
    )),
    ('\U0001F471', 'person: blond hair', 'People & Body', 'person', '0.6', ('blond_haired_person', 'person_with_blond_hair'), (), (
        ('\U0001F471\U0001F3FB', 'person: light skin tone, blond hair', '1.0', 'LIGHT', ('blond_haired_person_tone1', 'person_with_blond_hair_tone1'), ()),
        ('\U0001F471\U0001F3FC', 'person: medium-light skin tone, blond hair', '1.0', 'MEDIUM_LIGHT', ('blond_haired_person_tone2', 'person_with_blond_hair_tone2'), ()),
        ('\U0001F471\U0001F3FD', 'person: medium skin tone, blond hair', '1.0', 'MEDIUM', ('blond_haired_person_tone3', 'person_with_blond_hair_tone3'), ()),
        ('\U0001F471\U0001F3FE', 'person: medium-dark skin tone, blond hair', '1.0', 'MEDIUM_DARK', ('blond_haired_person_tone4', 'person_with_blond_hair_tone4'), ()),
        ('\U0001F471\U0001F3FF', 'person: dark skin tone, blond hair', '1.0', 'DARK', ('blond_haired_person_tone5', 'person_with_blond_hair_tone5'), ()),
    )),
    ('\U0001F468', 'man', 'People & Body', 'person', '0.6', ('man',), (), (
        ('\U0001F468\U0001F3FB', 'man: light skin tone', '1.0', 'LIGHT', ('man_tone1',), ()),
        ('\U0001F468\U0001F3FC', 'man: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('man_tone2',), ()),
        ('\U0001F468\U0001F3FD', 'man: medium skin tone', '1.0', 'MEDIUM', ('man_tone3',), ()),
        ('\U0001F468\U0001F3FE', 'man: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('man_tone4',), ()),
        ('\U0001F468\U0001F3FF', 'man: dark skin tone', '1.0', 'DARK', ('man_tone5',), ()),
    )),
    ('\U0001F9D4', 'person: beard', 'People & Body', 'person', '5.0', ('bearded_person',), (), (
        ('\U0001F9D4\U0001F3FB', 'person: light skin tone, beard', '5.0', 'LIGHT', ('bearded_person_tone1', 'bearded_person_light_skin_tone'), ()),
        ('\U0001F9D4\U0001F3FC', 'person: medium-light skin tone, beard', '5.0', 'MEDIUM_LIGHT', ('bearded_person_tone2', 'bearded_person_medium_light_skin_tone'), ()),
        ('\U0001F9D4\U0001F3FD', 'person: medium skin tone, beard', '5.0', 'MEDIUM', ('bearded_person_tone3', 'bearded_person_medium_skin_tone'), ()),
        ('\U0001F9D4\U0001F3FE', 'person: medium-dark skin tone, beard', '5.0', 'MEDIUM_DARK', ('bearded_person_tone4', 'bearded_person_medium_dark_skin_tone'), ()),
        ('\U0001F9D4\U0001F3FF', 'person: dark skin tone, beard', '5.0', 'DARK', ('bearded_person_tone5', 'bearded_person_dark_skin_tone'), ()),
    )),
    ('\U0001F9D4\u200D\u2642\uFE0F', 'man: beard', 'People & Body', 'person', '13.1', ('man_beard',), ('\U0001F9D4\u200D\u2642',), (
        ('\U0001F9D4\U0001F3FB\u200D\u2642\uFE0F', 'man: light skin tone, beard', '13.1', 'LIGHT', ('man_light_skin_tone_beard',), ('\U0001F9D4\U0001F3FB\u200D\u2642',)),
        ('\U0001F9D4\U0001F3FC\u200D\u2642\uFE0F', 'man: medium-light skin tone, beard', '13.1', 'MEDIUM_LIGHT', ('man_medium-light_skin_tone_beard',), ('\U0001F9D4\U0001F3FC\u200D\u2642',)),
        ('\U0001F9D4\U0001F3FD\u200D\u2642\uFE0F', 'man: medium skin tone, beard', '13.1', 'MEDIUM', ('man_medium_skin_tone_beard',), ('\U0001F9D4\U0001F3FD\u200D\u2642',)),
        ('\U0001F9D4\U0001F3FE\u200D\u2642\uFE0F', 'man: medium-dark skin tone, beard', '13.1', 'MEDIUM_DARK', ('man_medium-dark_skin_tone_beard',), ('\U0001F9D4\U0001F3FE\u200D\u2642',)),
        ('\U0001F9D4\U0001F3FF\u200D\u2642\uFE0F', 'man: dark skin tone, beard', '13.1', 'DARK', ('man_dark_skin_tone_beard',), ('\U0001F9D4\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D4\u200D\u2640\uFE0F', 'woman: beard', 'People & Body', 'person', '13.1', ('woman_beard',), ('\U0001F9D4\u200D\u2640',), (
        ('\U0001F9D4\U0001F3FB\u200D\u2640\uFE0F', 'woman: light skin tone, beard', '13.1', 'LIGHT', ('woman_light_skin_tone_beard',), ('\U0001F9D4\U0001F3FB\u200D\u2640',)),
        ('\U0001F9D4\U0001F3FC\u200D\u2640\uFE0F', 'woman: medium-light skin tone, beard', '13.1', 'MEDIUM_LIGHT', ('woman_medium-light_skin_tone_beard',), ('\U0001F9D4\U0001F3FC\u200D\u2640',)),
        ('\U0001F9D4\U0001F3FD\u200D\u2640\uFE0F', 'woman: medium skin tone, beard', '13.1', 'MEDIUM', ('woman_medium_skin_tone_beard',), ('\U0001F9D4\U0001F3FD\u200D\u2640',)),
        ('\U0001F9D4\U0001F3FE\u200D\u2640\uFE0F', 'woman: medium-dark skin tone, beard', '13.1', 'MEDIUM_DARK', ('woman_medium-dark_skin_tone_beard',), ('\U0001F9D4\U0001F3FE\u200D\u2640',)),
        ('\U0001F9D4\U0001F3FF\u200D\u2640\uFE0F', 'woman: dark skin tone, beard', '13.1', 'DARK', ('woman_dark_skin_tone_beard',), ('\U0001F9D4\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F468\u200D\U0001F9B0', 'man: red hair', 'People & Body', 'person', '11.0', ('man_red_haired',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9B0', 'man: light skin tone, red hair', '11.0', 'LIGHT', ('man_red_haired_tone1', 'man_red_haired_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9B0', 'man: medium-light skin tone, red hair', '11.0', 'MEDIUM_LIGHT', ('man_red_haired_tone2', 'man_red_haired_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9B0', 'man: medium skin tone, red hair', '11.0', 'MEDIUM', ('man_red_haired_tone3', 'man_red_haired_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9B0', 'man: medium-dark skin tone, red hair', '11.0', 'MEDIUM_DARK', ('man_red_haired_tone4', 'man_red_haired_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9B0', 'man: dark skin tone, red hair', '11.0', 'DARK', ('man_red_haired_tone5', 'man_red_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F468\u200D\U0001F9B1', 'man: curly hair', 'People & Body', 'person', '11.0', ('man_curly_haired',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9B1', 'man: light skin tone, curly hair', '11.0', 'LIGHT', ('man_curly_haired_tone1', 'man_curly_haired_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9B1', 'man: medium-light skin tone, curly hair', '11.0', 'MEDIUM_LIGHT', ('man_curly_haired_tone2', 'man_curly_haired_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9B1', 'man: medium skin tone, curly hair', '11.0', 'MEDIUM', ('man_curly_haired_tone3', 'man_curly_haired_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9B1', 'man: medium-dark skin tone, curly hair', '11.0', 'MEDIUM_DARK', ('man_curly_haired_tone4', 'man_curly_haired_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9B1', 'man: dark skin tone, curly hair', '11.0', 'DARK', ('man_curly_haired_tone5', 'man_curly_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F468\u200D\U0001F9B3', 'man: white hair', 'People & Body', 'person', '11.0', ('man_white_haired',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9B3', 'man: light skin tone, white hair', '11.0', 'LIGHT', ('man_white_haired_tone1', 'man_white_haired_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9B3', 'man: medium-light skin tone, white hair', '11.0', 'MEDIUM_LIGHT', ('man_white_haired_tone2', 'man_white_haired_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9B3', 'man: medium skin tone, white hair', '11.0', 'MEDIUM', ('man_white_haired_tone3', 'man_white_haired_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9B3', 'man: medium-dark skin tone, white hair', '11.0', 'MEDIUM_DARK', ('man_white_haired_tone4', 'man_white_haired_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9B3', 'man: dark skin tone, white hair', '11.0', 'DARK', ('man_white_haired_tone5', 'man_white_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F468\u200D\U0001F9B2', 'man: bald', 'People & Body', 'person', '11.0', ('man_bald',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9B2', 'man: light skin tone, bald', '11.0', 'LIGHT', ('man_bald_tone1', 'man_bald_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9B2', 'man: medium-light skin tone, bald', '11.0', 'MEDIUM_LIGHT', ('man_bald_tone2', 'man_bald_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9B2', 'man: medium skin tone, bald', '11.0', 'MEDIUM', ('man_bald_tone3', 'man_bald_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9B2', 'man: medium-dark skin tone, bald', '11.0', 'MEDIUM_DARK', ('man_bald_tone4', 'man_bald_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9B2', 'man: dark skin tone, bald', '11.0', 'DARK', ('man_bald_tone5', 'man_bald_dark_skin_tone'), ()),
    )),
    ('\U0001F469', 'woman', 'People & Body', 'person', '0.6', ('woman',), (), (
        ('\U0001F469\U0001F3FB', 'woman: light skin tone', '1.0', 'LIGHT', ('woman_tone1',), ()),
        ('\U0001F469\U0001F3FC', 'woman: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('woman_tone2',), ()),
        ('\U0001F469\U0001F3FD', 'woman: medium skin tone', '1.0', 'MEDIUM', ('woman_tone3',), ()),
        ('\U0001F469\U0001F3FE', 'woman: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('woman_tone4',), ()),
        ('\U0001F469\U0001F3FF', 'woman: dark skin tone', '1.0', 'DARK', ('woman_tone5',), ()),
    )),
    ('\U0001F469\u200D\U0001F9B0', 'woman: red hair', 'People & Body', 'person', '11.0', ('woman_red_haired',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9B0', 'woman: light skin tone, red hair', '11.0', 'LIGHT', ('woman_red_haired_tone1', 'woman_red_haired_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9B0', 'woman: medium-light skin tone, red hair', '11.0', 'MEDIUM_LIGHT', ('woman_red_haired_tone2', 'woman_red_haired_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9B0', 'woman: medium skin tone, red hair', '11.0', 'MEDIUM', ('woman_red_haired_tone3', 'woman_red_haired_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9B0', 'woman: medium-dark skin tone, red hair', '11.0', 'MEDIUM_DARK', ('woman_red_haired_tone4', 'woman_red_haired_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9B0', 'woman: dark skin tone, red hair', '11.0', 'DARK', ('woman_red_haired_tone5', 'woman_red_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9B0', 'person: red hair', 'People & Body', 'person', '12.1', ('person_red_hair',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9B0', 'person: light skin tone, red hair', '12.1', 'LIGHT', ('person_light_skin_tone_red_hair',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9B0', 'person: medium-light skin tone, red hair', '12.1', 'MEDIUM_LIGHT', ('person_medium-light_skin_tone_red_hair',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9B0', 'person: medium skin tone, red hair', '12.1', 'MEDIUM', ('person_medium_skin_tone_red_hair',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9B0', 'person: medium-dark skin tone, red hair', '12.1', 'MEDIUM_DARK', ('person_medium-dark_skin_tone_red_hair',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9B0', 'person: dark skin tone, red hair', '12.1', 'DARK', ('person_dark_skin_tone_red_hair',), ()),
    )),
    ('\U0001F469\u200D\U0001F9B1', 'woman: curly hair', 'People & Body', 'person', '11.0', ('woman_curly_haired',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9B1', 'woman: light skin tone, curly hair', '11.0', 'LIGHT', ('woman_curly_haired_tone1', 'woman_curly_haired_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9B1', 'woman: medium-light skin tone, curly hair', '11.0', 'MEDIUM_LIGHT', ('woman_curly_haired_tone2', 'woman_curly_haired_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9B1', 'woman: medium skin tone, curly hair', '11.0', 'MEDIUM', ('woman_curly_haired_tone3', 'woman_curly_haired_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9B1', 'woman: medium-dark skin tone, curly hair', '11.0', 'MEDIUM_DARK', ('woman_curly_haired_tone4', 'woman_curly_haired_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9B1', 'woman: dark skin tone, curly hair', '11.0', 'DARK', ('woman_curly_haired_tone5', 'woman_curly_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9B1', 'person: curly hair', 'People & Body', 'person', '12.1', ('person_curly_hair',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9B1', 'person: light skin tone, curly hair', '12.1', 'LIGHT', ('person_light_skin_tone_curly_hair',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9B1', 'person: medium-light skin tone, curly hair', '12.1', 'MEDIUM_LIGHT', ('person_medium-light_skin_tone_curly_hair',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9B1', 'person: medium skin tone, curly hair', '12.1', 'MEDIUM', ('person_medium_skin_tone_curly_hair',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9B1', 'person: medium-dark skin tone, curly hair', '12.1', 'MEDIUM_DARK', ('person_medium-dark_skin_tone_curly_hair',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9B1', 'person: dark skin tone, curly hair', '12.1', 'DARK', ('person_dark_skin_tone_curly_hair',), ()),
    )),
    ('\U0001F469\u200D\U0001F9B3', 'woman: white hair', 'People & Body', 'person', '11.0', ('woman_white_haired',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9B3', 'woman: light skin tone, white hair', '11.0', 'LIGHT', ('woman_white_haired_tone1', 'woman_white_haired_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9B3', 'woman: medium-light skin tone, white hair', '11.0', 'MEDIUM_LIGHT', ('woman_white_haired_tone2', 'woman_white_haired_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9B3', 'woman: medium skin tone, white hair', '11.0', 'MEDIUM', ('woman_white_haired_tone3', 'woman_white_haired_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9B3', 'woman: medium-dark skin tone, white hair', '11.0', 'MEDIUM_DARK', ('woman_white_haired_tone4', 'woman_white_haired_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9B3', 'woman: dark skin tone, white hair', '11.0', 'DARK', ('woman_white_haired_tone5', 'woman_white_haired_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9B3', 'person: white hair', 'People & Body', 'person', '12.1', ('person_white_hair',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9B3', 'person: light skin tone, white hair', '12.1', 'LIGHT', ('person_light_skin_tone_white_hair',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9B3', 'person: medium-light skin tone, white hair', '12.1', 'MEDIUM_LIGHT', ('person_medium-light_skin_tone_white_hair',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9B3', 'person: medium skin tone, white hair', '12.1', 'MEDIUM', ('person_medium_skin_tone_white_hair',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9B3', 'person: medium-dark skin tone, white hair', '12.1', 'MEDIUM_DARK', ('person_medium-dark_skin_tone_white_hair',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9B3', 'person: dark skin tone, white hair', '12.1', 'DARK', ('person_dark_skin_tone_white_hair',), ()),
    )),
    ('\U0001F469\u200D\U0001F9B2', 'woman: bald', 'People & Body', 'person', '11.0', ('woman_bald',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9B2', 'woman: light skin tone, bald', '11.0', 'LIGHT', ('woman_bald_tone1', 'woman_bald_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9B2', 'woman: medium-light skin tone, bald', '11.0', 'MEDIUM_LIGHT', ('woman_bald_tone2', 'woman_bald_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9B2', 'woman: medium skin tone, bald', '11.0', 'MEDIUM', ('woman_bald_tone3', 'woman_bald_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9B2', 'woman: medium-dark skin tone, bald', '11.0', 'MEDIUM_DARK', ('woman_bald_tone4', 'woman_bald_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9B2', 'woman: dark skin tone, bald', '11.0', 'DARK', ('woman_bald_tone5', 'woman_bald_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9B2', 'person: bald', 'People & Body', 'person', '12.1', ('person_bald',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9B2', 'person: light skin tone, bald', '12.1', 'LIGHT', ('person_light_skin_tone_bald',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9B2', 'person: medium-light skin tone, bald', '12.1', 'MEDIUM_LIGHT', ('person_medium-light_skin_tone_bald',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9B2', 'person: medium skin tone, bald', '12.1', 'MEDIUM', ('person_medium_skin_tone_bald',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9B2', 'person: medium-dark skin tone, bald', '12.1', 'MEDIUM_DARK', ('person_medium-dark_skin_tone_bald',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9B2', 'person: dark skin tone, bald', '12.1', 'DARK', ('person_dark_skin_tone_bald',), ()),
    )),
    ('\U0001F471\u200D\u2640\uFE0F', 'woman: blond hair', 'People & Body', 'person', '4.0', ('blond-haired_woman',), ('\U0001F471\u200D\u2640',), (
        ('\U0001F471\U0001F3FB\u200D\u2640\uFE0F', 'woman: light skin tone, blond hair', '4.0', 'LIGHT', ('blond-haired_woman_tone1', 'blond-haired_woman_light_skin_tone'), ('\U0001F471\U0001F3FB\u200D\u2640',)),
        ('\U0001F471\U0001F3FC\u200D\u2640\uFE0F', 'woman: medium-light skin tone, blond hair', '4.0', 'MEDIUM_LIGHT', ('blond-haired_woman_tone2', 'blond-haired_woman_medium_light_skin_tone'), ('\U0001F471\U0001F3FC\u200D\u2640',)),
        ('\U0001F471\U0001F3FD\u200D\u2640\uFE0F', 'woman: medium skin tone, blond hair', '4.0', 'MEDIUM', ('blond-haired_woman_tone3', 'blond-haired_woman_medium_skin_tone'), ('\U0001F471\U0001F3FD\u200D\u2640',)),
        ('\U0001F471\U0001F3FE\u200D\u2640\uFE0F', 'woman: medium-dark skin tone, blond hair', '4.0', 'MEDIUM_DARK', ('blond-haired_woman_tone4', 'blond-haired_woman_medium_dark_skin_tone'), ('\U0001F471\U0001F3FE\u200D\u2640',)),
        ('\U0001F471\U0001F3FF\u200D\u2640\uFE0F', 'woman: dark skin tone, blond hair', '4.0', 'DARK', ('blond-haired_woman_tone5', 'blond-haired_woman_dark_skin_tone'), ('\U0001F471\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F471\u200D\u2642\uFE0F', 'man: blond hair', 'People & Body', 'person', '4.0', ('blond-haired_man',), ('\U0001F471\u200D\u2642',), (
        ('\U0001F471\U0001F3FB\u200D\u2642\uFE0F', 'man: light skin tone, blond hair', '4.0', 'LIGHT', ('blond-haired_man_tone1', 'blond-haired_man_light_skin_tone'), ('\U0001F471\U0001F3FB\u200D\u2642',)),
        ('\U0001F471\U0001F3FC\u200D\u2642\uFE0F', 'man: medium-light skin tone, blond hair', '4.0', 'MEDIUM_LIGHT', ('blond-haired_man_tone2', 'blond-haired_man_medium_light_skin_tone'), ('\U0001F471\U0001F3FC\u200D\u2642',)),
        ('\U0001F471\U0001F3FD\u200D\u2642\uFE0F', 'man: medium skin tone, blond hair', '4.0', 'MEDIUM', ('blond-haired_man_tone3', 'blond-haired_man_medium_skin_tone'), ('\U0001F471\U0001F3FD\u200D\u2642',)),
        ('\U0001F471\U0001F3FE\u200D\u2642\uFE0F', 'man: medium-dark skin tone, blond hair', '4.0', 'MEDIUM_DARK', ('blond-haired_man_tone4', 'blond-haired_man_medium_dark_skin_tone'), ('\U0001F471\U0001F3FE\u200D\u2642',)),
        ('\U0001F471\U0001F3FF\u200D\u2642\uFE0F', 'man: dark skin tone, blond hair', '4.0', 'DARK', ('blond-haired_man_tone5', 'blond-haired_man_dark_skin_tone'), ('\U0001F471\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D3', 'older person', 'People & Body', 'person', '5.0', ('older_adult',), (), (
        ('\U0001F9D3\U0001F3FB', 'older person: light skin tone', '5.0', 'LIGHT', ('older_adult_tone1', 'older_adult_light_skin_tone'), ()),
        ('\U0001F9D3\U0001F3FC', 'older person: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('older_adult_tone2', 'older_adult_medium_light_skin_tone'), ()),
        ('\U0001F9D3\U0001F3FD', 'older person: medium skin tone', '5.0', 'MEDIUM', ('older_adult_tone3', 'older_adult_medium_skin_tone'), ()),
        ('\U0001F9D3\U0001F3FE', 'older person: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('older_adult_tone4', 'older_adult_medium_dark_skin_tone'), ()),
        ('\U0001F9D3\U0001F3FF', 'older person: dark skin tone', '5.0', 'DARK', ('older_adult_tone5', 'older_adult_dark_skin_tone'), ()),
    )),
    ('\U0001F474', 'old man', 'People & Body', 'person', '0.6', ('older_man',), (), (
        ('\U0001F474\U0001F3FB', 'old man: light skin tone', '1.0', 'LIGHT', ('older_man_tone1',), ()),
        ('\U0001F474\U0001F3FC', 'old man: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('older_man_tone2',), ()),
        ('\U0001F474\U0001F3FD', 'old man: medium skin tone', '1.0', 'MEDIUM', ('older_man_tone3',), ()),
        ('\U0001F474\U0001F3FE', 'old man: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('older_man_tone4',), ()),
        ('\U0001F474\U0001F3FF', 'old man: dark skin tone', '1.0', 'DARK', ('older_man_tone5',), ()),
    )),
    ('\U0001F475', 'old woman', 'People & Body', 'person', '0.6', ('older_woman', 'grandma'), (), (
        ('\U0001F475\U0001F3FB', 'old woman: light skin tone', '1.0', 'LIGHT', ('older_woman_tone1', 'grandma_tone1'), ()),
        ('\U0001F475\U0001F3FC', 'old woman: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('older_woman_tone2', 'grandma_tone2'), ()),
        ('\U0001F475\U0001F3FD', 'old woman: medium skin tone', '1.0', 'MEDIUM', ('older_woman_tone3', 'grandma_tone3'), ()),
        ('\U0001F475\U0001F3FE', 'old woman: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('older_woman_tone4', 'grandma_tone4'), ()),
        ('\U0001F475\U0001F3FF', 'old woman: dark skin tone', '1.0', 'DARK', ('older_woman_tone5', 'grandma_tone5'), ()),
    )),
    ('\U0001F64D', 'person frowning', 'People & Body', 'person-gesture', '0.6', ('person_frowning',), (), (
        ('\U0001F64D\U0001F3FB', 'person frowning: light skin tone', '1.0', 'LIGHT', ('person_frowning_tone1',), ()),
        ('\U0001F64D\U0001F3FC', 'person frowning: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_frowning_tone2',), ()),
        ('\U0001F64D\U0001F3FD', 'person frowning: medium skin tone', '1.0', 'MEDIUM', ('person_frowning_tone3',), ()),
        ('\U0001F64D\U0001F3FE', 'person frowning: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_frowning_tone4',), ()),
        ('\U0001F64D\U0001F3FF', 'person frowning: dark skin tone', '1.0', 'DARK', ('person_frowning_tone5',), ()),
    )),
    ('\U0001F64D\u200D\u2642\uFE0F', 'man frowning', 'People & Body', 'person-gesture', '4.0', ('man_frowning',), ('\U0001F64D\u200D\u2642',), (
        ('\U0001F64D\U0001F3FB\u200D\u2642\uFE0F', 'man frowning: light skin tone', '4.0', 'LIGHT', ('man_frowning_tone1', 'man_frowning_light_skin_tone'), ('\U0001F64D\U0001F3FB\u200D\u2642',)),
        ('\U0001F64D\U0001F3FC\u200D\u2642\uFE0F', 'man frowning: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_frowning_tone2', 'man_frowning_medium_light_skin_tone'), ('\U0001F64D\U0001F3FC\u200D\u2642',)),
        ('\U0001F64D\U0001F3FD\u200D\u2642\uFE0F', 'man frowning: medium skin tone', '4.0', 'MEDIUM', ('man_frowning_tone3', 'man_frowning_medium_skin_tone'), ('\U0001F64D\U0001F3FD\u200D\u2642',)),
        ('\U0001F64D\U0001F3FE\u200D\u2642\uFE0F', 'man frowning: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_frowning_tone4', 'man_frowning_medium_dark_skin_tone'), ('\U0001F64D\U0001F3FE\u200D\u2642',)),
        ('\U0001F64D\U0001F3FF\u200D\u2642\uFE0F', 'man frowning: dark skin tone', '4.0', 'DARK', ('man_frowning_tone5', 'man_frowning_dark_skin_tone'), ('\U0001F64D\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F64D\u200D\u2640\uFE0F', 'woman frowning', 'People & Body', 'person-gesture', '4.0', ('woman_frowning',), ('\U0001F64D\u200D\u2640',), (
        ('\U0001F64D\U0001F3FB\u200D\u2640\uFE0F', 'woman frowning: light skin tone', '4.0', 'LIGHT', ('woman_frowning_tone1', 'woman_frowning_light_skin_tone'), ('\U0001F64D\U0001F3FB\u200D\u2640',)),
        ('\U0001F64D\U0001F3FC\u200D\u2640\uFE0F', 'woman frowning: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_frowning_tone2', 'woman_frowning_medium_light_skin_tone'), ('\U0001F64D\U0001F3FC\u200D\u2640',)),
        ('\U0001F64D\U0001F3FD\u200D\u2640\uFE0F', 'woman frowning: medium skin tone', '4.0', 'MEDIUM', ('woman_frowning_tone3', 'woman_frowning_medium_skin_tone'), ('\U0001F64D\U0001F3FD\u200D\u2640',)),
        ('\U0001F64D\U0001F3FE\u200D\u2640\uFE0F', 'woman frowning: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_frowning_tone4', 'woman_frowning_medium_dark_skin_tone'), ('\U0001F64D\U0001F3FE\u200D\u2640',)),
        ('\U0001F64D\U0001F3FF\u200D\u2640\uFE0F', 'woman frowning: dark skin tone', '4.0', 'DARK', ('woman_frowning_tone5', 'woman_frowning_dark_skin_tone'), ('\U0001F64D\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F64E', 'person pouting', 'People & Body', 'person-gesture', '0.6', ('person_pouting', 'person_with_pouting_face'), (), (
        ('\U0001F64E\U0001F3FB', 'person pouting: light skin tone', '1.0', 'LIGHT', ('person_pouting_tone1', 'person_with_pouting_face_tone1'), ()),
        ('\U0001F64E\U0001F3FC', 'person pouting: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_pouting_tone2', 'person_with_pouting_face_tone2'), ()),
        ('\U0001F64E\U0001F3FD', 'person pouting: medium skin tone', '1.0', 'MEDIUM', ('person_pouting_tone3', 'person_with_pouting_face_tone3'), ()),
        ('\U0001F64E\U0001F3FE', 'person pouting: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_pouting_tone4', 'person_with_pouting_face_tone4'), ()),
        ('\U0001F64E\U0001F3FF', 'person pouting: dark skin tone', '1.0', 'DARK', ('person_pouting_tone5', 'person_with_pouting_face_tone5'), ()),
    )),
    ('\U0001F64E\u200D\u2642\uFE0F', 'man pouting', 'People & Body', 'person-gesture', '4.0', ('man_pouting',), ('\U0001F64E\u200D\u2642',), (
        ('\U0001F64E\U0001F3FB\u200D\u2642\uFE0F', 'man pouting: light skin tone', '4.0', 'LIGHT', ('man_pouting_tone1', 'man_pouting_light_skin_tone'), ('\U0001F64E\U0001F3FB\u200D\u2642',)),
        ('\U0001F64E\U0001F3FC\u200D\u2642\uFE0F', 'man pouting: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_pouting_tone2', 'man_pouting_medium_light_skin_tone'), ('\U0001F64E\U0001F3FC\u200D\u2642',)),
        ('\U0001F64E\U0001F3FD\u200D\u2642\uFE0F', 'man pouting: medium skin tone', '4.0', 'MEDIUM', ('man_pouting_tone3', 'man_pouting_medium_skin_tone'), ('\U0001F64E\U0001F3FD\u200D\u2642',)),
        ('\U0001F64E\U0001F3FE\u200D\u2642\uFE0F', 'man pouting: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_pouting_tone4', 'man_pouting_medium_dark_skin_tone'), ('\U0001F64E\U0001F3FE\u200D\u2642',)),
        ('\U0001F64E\U0001F3FF\u200D\u2642\uFE0F', 'man pouting: dark skin tone', '4.0', 'DARK', ('man_pouting_tone5', 'man_pouting_dark_skin_tone'), ('\U0001F64E\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F64E\u200D\u2640\uFE0F', 'woman pouting', 'People & Body', 'person-gesture', '4.0', ('woman_pouting',), ('\U0001F64E\u200D\u2640',), (
        ('\U0001F64E\U0001F3FB\u200D\u2640\uFE0F', 'woman pouting: light skin tone', '4.0', 'LIGHT', ('woman_pouting_tone1', 'woman_pouting_light_skin_tone'), ('\U0001F64E\U0001F3FB\u200D\u2640',)),
        ('\U0001F64E\U0001F3FC\u200D\u2640\uFE0F', 'woman pouting: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_pouting_tone2', 'woman_pouting_medium_light_skin_tone'), ('\U0001F64E\U0001F3FC\u200D\u2640',)),
        ('\U0001F64E\U0001F3FD\u200D\u2640\uFE0F', 'woman pouting: medium skin tone', '4.0', 'MEDIUM', ('woman_pouting_tone3', 'woman_pouting_medium_skin_tone'), ('\U0001F64E\U0001F3FD\u200D\u2640',)),
        ('\U0001F64E\U0001F3FE\u200D\u2640\uFE0F', 'woman pouting: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_pouting_tone4', 'woman_pouting_medium_dark_skin_tone'), ('\U0001F64E\U0001F3FE\u200D\u2640',)),
        ('\U0001F64E\U0001F3FF\u200D\u2640\uFE0F', 'woman pouting: dark skin tone', '4.0', 'DARK', ('woman_pouting_tone5', 'woman_pouting_dark_skin_tone'), ('\U0001F64E\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F645', 'person gesturing NO', 'People & Body', 'person-gesture', '0.6', ('person_gesturing_no', 'no_good'), (), (
        ('\U0001F645\U0001F3FB', 'person gesturing NO: light skin tone', '1.0', 'LIGHT', ('person_gesturing_no_tone1', 'no_good_tone1'), ()),
        ('\U0001F645\U0001F3FC', 'person gesturing NO: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_gesturing_no_tone2', 'no_good_tone2'), ()),
        ('\U0001F645\U0001F3FD', 'person gesturing NO: medium skin tone', '1.0', 'MEDIUM', ('person_gesturing_no_tone3', 'no_good_tone3'), ()),
        ('\U0001F645\U0001F3FE', 'person gesturing NO: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_gesturing_no_tone4', 'no_good_tone4'), ()),
        ('\U0001F645\U0001F3FF', 'person gesturing NO: dark skin tone', '1.0', 'DARK', ('person_gesturing_no_tone5', 'no_good_tone5'), ()),
    )),
    ('\U0001F645\u200D\u2642\uFE0F', 'man gesturing NO', 'People & Body', 'person-gesture', '4.0', ('man_gesturing_no',), ('\U0001F645\u200D\u2642',), (
        ('\U0001F645\U0001F3FB\u200D\u2642\uFE0F', 'man gesturing NO: light skin tone', '4.0', 'LIGHT', ('man_gesturing_no_tone1', 'man_gesturing_no_light_skin_tone'), ('\U0001F645\U0001F3FB\u200D\u2642',)),
        ('\U0001F645\U0001F3FC\u200D\u2642\uFE0F', 'man gesturing NO: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_gesturing_no_tone2', 'man_gesturing_no_medium_light_skin_tone'), ('\U0001F645\U0001F3FC\u200D\u2642',)),
        ('\U0001F645\U0001F3FD\u200D\u2642\uFE0F', 'man gesturing NO: medium skin tone', '4.0', 'MEDIUM', ('man_gesturing_no_tone3', 'man_gesturing_no_medium_skin_tone'), ('\U0001F645\U0001F3FD\u200D\u2642',)),
        ('\U0001F645\U0001F3FE\u200D\u2642\uFE0F', 'man gesturing NO: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_gesturing_no_tone4', 'man_gesturing_no_medium_dark_skin_tone'), ('\U0001F645\U0001F3FE\u200D\u2642',)),
        ('\U0001F645\U0001F3FF\u200D\u2642\uFE0F', 'man gesturing NO: dark skin tone', '4.0', 'DARK', ('man_gesturing_no_tone5', 'man_gesturing_no_dark_skin_tone'), ('\U0001F645\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F645\u200D\u2640\uFE0F', 'woman gesturing NO', 'People & Body', 'person-gesture', '4.0', ('woman_gesturing_no',), ('\U0001F645\u200D\u2640',), (
        ('\U0001F645\U0001F3FB\u200D\u2640\uFE0F', 'woman gesturing NO: light skin tone', '4.0', 'LIGHT', ('woman_gesturing_no_tone1', 'woman_gesturing_no_light_skin_tone'), ('\U0001F645\U0001F3FB\u200D\u2640',)),
        ('\U0001F645\U0001F3FC\u200D\u2640\uFE0F', 'woman gesturing NO: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_gesturing_no_tone2', 'woman_gesturing_no_medium_light_skin_tone'), ('\U0001F645\U0001F3FC\u200D\u2640',)),
        ('\U0001F645\U0001F3FD\u200D\u2640\uFE0F', 'woman gesturing NO: medium skin tone', '4.0', 'MEDIUM', ('woman_gesturing_no_tone3', 'woman_gesturing_no_medium_skin_tone'), ('\U0001F645\U0001F3FD\u200D\u2640',)),
        ('\U0001F645\U0001F3FE\u200D\u2640\uFE0F', 'woman gesturing NO: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_gesturing_no_tone4', 'woman_gesturing_no_medium_dark_skin_tone'), ('\U0001F645\U0001F3FE\u200D\u2640',)),
        ('\U0001F645\U0001F3FF\u200D\u2640\uFE0F', 'woman gesturing NO: dark skin tone', '4.0', 'DARK', ('woman_gesturing_no_tone5', 'woman_gesturing_no_dark_skin_tone'), ('\U0001F645\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F646', 'person gesturing OK', 'People & Body', 'person-gesture', '0.6', ('person_gesturing_ok', 'ok_woman'), (), (
        ('\U0001F646\U0001F3FB', 'person gesturing OK: light skin tone', '1.0', 'LIGHT', ('person_gesturing_ok_tone1', 'ok_woman_tone1'), ()),
        ('\U0001F646\U0001F3FC', 'person gesturing OK: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_gesturing_ok_tone2', 'ok_woman_tone2'), ()),
        ('\U0001F646\U0001F3FD', 'person gesturing OK: medium skin tone', '1.0', 'MEDIUM', ('person_gesturing_ok_tone3', 'ok_woman_tone3'), ()),
        ('\U0001F646\U0001F3FE', 'person gesturing OK: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_gesturing_ok_tone4', 'ok_woman_tone4'), ()),
        ('\U0001F646\U0001F3FF', 'person gesturing OK: dark skin tone', '1.0', 'DARK', ('person_gesturing_ok_tone5', 'ok_woman_tone5'), ()),
    )),
    ('\U0001F646\u200D\u2642\uFE0F', 'man gesturing OK', 'People & Body', 'person-gesture', '4.0', ('man_gesturing_ok',), ('\U0001F646\u200D\u2642',), (
        ('\U0001F646\U0001F3FB\u200D\u2642\uFE0F', 'man gesturing OK: light skin tone', '4.0', 'LIGHT', ('man_gesturing_ok_tone1', 'man_gesturing_ok_light_skin_tone'), ('\U0001F646\U0001F3FB\u200D\u2642',)),
        ('\U0001F646\U0001F3FC\u200D\u2642\uFE0F', 'man gesturing OK: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_gesturing_ok_tone2', 'man_gesturing_ok_medium_light_skin_tone'), ('\U0001F646\U0001F3FC\u200D\u2642',)),
        ('\U0001F646\U0001F3FD\u200D\u2642\uFE0F', 'man gesturing OK: medium skin tone', '4.0', 'MEDIUM', ('man_gesturing_ok_tone3', 'man_gesturing_ok_medium_skin_tone'), ('\U0001F646\U0001F3FD\u200D\u2642',)),
        ('\U0001F646\U0001F3FE\u200D\u2642\uFE0F', 'man gesturing OK: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_gesturing_ok_tone4', 'man_gesturing_ok_medium_dark_skin_tone'), ('\U0001F646\U0001F3FE\u200D\u2642',)),
        ('\U0001F646\U0001F3FF\u200D\u2642\uFE0F', 'man gesturing OK: dark skin tone', '4.0', 'DARK', ('man_gesturing_ok_tone5', 'man_gesturing_ok_dark_skin_tone'), ('\U0001F646\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F646\u200D\u2640\uFE0F', 'woman gesturing OK', 'People & Body', 'person-gesture', '4.0', ('woman_gesturing_ok',), ('\U0001F646\u200D\u2640',), (
        ('\U0001F646\U0001F3FB\u200D\u2640\uFE0F', 'woman gesturing OK: light skin tone', '4.0', 'LIGHT', ('woman_gesturing_ok_tone1', 'woman_gesturing_ok_light_skin_tone'), ('\U0001F646\U0001F3FB\u200D\u2640',)),
        ('\U0001F646\U0001F3FC\u200D\u2640\uFE0F', 'woman gesturing OK: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_gesturing_ok_tone2', 'woman_gesturing_ok_medium_light_skin_tone'), ('\U0001F646\U0001F3FC\u200D\u2640',)),
        ('\U0001F646\U0001F3FD\u200D\u2640\uFE0F', 'woman gesturing OK: medium skin tone', '4.0', 'MEDIUM', ('woman_gesturing_ok_tone3', 'woman_gesturing_ok_medium_skin_tone'), ('\U0001F646\U0001F3FD\u200D\u2640',)),
        ('\U0001F646\U0001F3FE\u200D\u2640\uFE0F', 'woman gesturing OK: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_gesturing_ok_tone4', 'woman_gesturing_ok_medium_dark_skin_tone'), ('\U0001F646\U0001F3FE\u200D\u2640',)),
        ('\U0001F646\U0001F3FF\u200D\u2640\uFE0F', 'woman gesturing OK: dark skin tone', '4.0', 'DARK', ('woman_gesturing_ok_tone5', 'woman_gesturing_ok_dark_skin_tone'), ('\U0001F646\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F481', 'person tipping hand', 'People & Body', 'person-gesture', '0.6', ('person_tipping_hand', 'information_desk_person'), (), (
        ('\U0001F481\U0001F3FB', 'person tipping hand: light skin tone', '1.0', 'LIGHT', ('person_tipping_hand_tone1', 'information_desk_person_tone1'), ()),
        ('\U0001F481\U0001F3FC', 'person tipping hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_tipping_hand_tone2', 'information_desk_person_tone2'), ()),
        ('\U0001F481\U0001F3FD', 'person tipping hand: medium skin tone', '1.0', 'MEDIUM', ('person_tipping_hand_tone3', 'information_desk_person_tone3'), ()),
        ('\U0001F481\U0001F3FE', 'person tipping hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_tipping_hand_tone4', 'information_desk_person_tone4'), ()),
        ('\U0001F481\U0001F3FF', 'person tipping hand: dark skin tone', '1.0', 'DARK', ('person_tipping_hand_tone5', 'information_desk_person_tone5'), ()),
    )),
    ('\U0001F481\u200D\u2642\uFE0F', 'man tipping hand', 'People & Body', 'person-gesture', '4.0', ('man_tipping_hand',), ('\U0001F481\u200D\u2642',), (
        ('\U0001F481\U0001F3FB\u200D\u2642\uFE0F', 'man tipping hand: light skin tone', '4.0', 'LIGHT', ('man_tipping_hand_tone1', 'man_tipping_hand_light_skin_tone'), ('\U0001F481\U0001F3FB\u200D\u2642',)),
        ('\U0001F481\U0001F3FC\u200D\u2642\uFE0F', 'man tipping hand: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_tipping_hand_tone2', 'man_tipping_hand_medium_light_skin_tone'), ('\U0001F481\U0001F3FC\u200D\u2642',)),
        ('\U0001F481\U0001F3FD\u200D\u2642\uFE0F', 'man tipping hand: medium skin tone', '4.0', 'MEDIUM', ('man_tipping_hand_tone3', 'man_tipping_hand_medium_skin_tone'), ('\U0001F481\U0001F3FD\u200D\u2642',)),
        ('\U0001F481\U0001F3FE\u200D\u2642\uFE0F', 'man tipping hand: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_tipping_hand_tone4', 'man_tipping_hand_medium_dark_skin_tone'), ('\U0001F481\U0001F3FE\u200D\u2642',)),
        ('\U0001F481\U0001F3FF\u200D\u2642\uFE0F', 'man tipping hand: dark skin tone', '4.0', 'DARK', ('man_tipping_hand_tone5', 'man_tipping_hand_dark_skin_tone'), ('\U0001F481\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F481\u200D\u2640\uFE0F', 'woman tipping hand', 'People & Body', 'person-gesture', '4.0', ('woman_tipping_hand',), ('\U0001F481\u200D\u2640',), (
        ('\U0001F481\U0001F3FB\u200D\u2640\uFE0F', 'woman tipping hand: light skin tone', '4.0', 'LIGHT', ('woman_tipping_hand_tone1', 'woman_tipping_hand_light_skin_tone'), ('\U0001F481\U0001F3FB\u200D\u2640',)),
        ('\U0001F481\U0001F3FC\u200D\u2640\uFE0F', 'woman tipping hand: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_tipping_hand_tone2', 'woman_tipping_hand_medium_light_skin_tone'), ('\U0001F481\U0001F3FC\u200D\u2640',)),
        ('\U0001F481\U0001F3FD\u200D\u2640\uFE0F', 'woman tipping hand: medium skin tone', '4.0', 'MEDIUM', ('woman_tipping_hand_tone3', 'woman_tipping_hand_medium_skin_tone'), ('\U0001F481\U0001F3FD\u200D\u2640',)),
        ('\U0001F481\U0001F3FE\u200D\u2640\uFE0F', 'woman tipping hand: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_tipping_hand_tone4', 'woman_tipping_hand_medium_dark_skin_tone'), ('\U0001F481\U0001F3FE\u200D\u2640',)),
        ('\U0001F481\U0001F3FF\u200D\u2640\uFE0F', 'woman tipping hand: dark skin tone', '4.0', 'DARK', ('woman_tipping_hand_tone5', 'woman_tipping_hand_dark_skin_tone'), ('\U0001F481\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F64B', 'person raising hand', 'People & Body', 'person-gesture', '0.6', ('person_raising_hand', 'raising_hand'), (), (
        ('\U0001F64B\U0001F3FB', 'person raising hand: light skin tone', '1.0', 'LIGHT', ('person_raising_hand_tone1', 'raising_hand_tone1'), ()),
        ('\U0001F64B\U0001F3FC', 'person raising hand: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_raising_hand_tone2', 'raising_hand_tone2'), ()),
        ('\U0001F64B\U0001F3FD', 'person raising hand: medium skin tone', '1.0', 'MEDIUM', ('person_raising_hand_tone3', 'raising_hand_tone3'), ()),
        ('\U0001F64B\U0001F3FE', 'person raising hand: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_raising_hand_tone4', 'raising_hand_tone4'), ()),
        ('\U0001F64B\U0001F3FF', 'person raising hand: dark skin tone', '1.0', 'DARK', ('person_raising_hand_tone5', 'raising_hand_tone5'), ()),
    )),
    ('\U0001F64B\u200D\u2642\uFE0F', 'man raising hand', 'People & Body', 'person-gesture', '4.0', ('man_raising_hand',), ('\U0001F64B\u200D\u2642',), (
        ('\U0001F64B\U0001F3FB\u200D\u2642\uFE0F', 'man raising hand: light skin tone', '4.0', 'LIGHT', ('man_raising_hand_tone1', 'man_raising_hand_light_skin_tone'), ('\U0001F64B\U0001F3FB\u200D\u2642',)),
        ('\U0001F64B\U0001F3FC\u200D\u2642\uFE0F', 'man raising hand: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_raising_hand_tone2', 'man_raising_hand_medium_light_skin_tone'), ('\U0001F64B\U0001F3FC\u200D\u2642',)),
        ('\U0001F64B\U0001F3FD\u200D\u2642\uFE0F', 'man raising hand: medium skin tone', '4.0', 'MEDIUM', ('man_raising_hand_tone3', 'man_raising_hand_medium_skin_tone'), ('\U0001F64B\U0001F3FD\u200D\u2642',)),
        ('\U0001F64B\U0001F3FE\u200D\u2642\uFE0F', 'man raising hand: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_raising_hand_tone4', 'man_raising_hand_medium_dark_skin_tone'), ('\U0001F64B\U0001F3FE\u200D\u2642',)),
        ('\U0001F64B\U0001F3FF\u200D\u2642\uFE0F', 'man raising hand: dark skin tone', '4.0', 'DARK', ('man_raising_hand_tone5', 'man_raising_hand_dark_skin_tone'), ('\U0001F64B\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F64B\u200D\u2640\uFE0F', 'woman raising hand', 'People & Body', 'person-gesture', '4.0', ('woman_raising_hand',), ('\U0001F64B\u200D\u2640',), (
        ('\U0001F64B\U0001F3FB\u200D\u2640\uFE0F', 'woman raising hand: light skin tone', '4.0', 'LIGHT', ('woman_raising_hand_tone1', 'woman_raising_hand_light_skin_tone'), ('\U0001F64B\U0001F3FB\u200D\u2640',)),
        ('\U0001F64B\U0001F3FC\u200D\u2640\uFE0F', 'woman raising hand: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_raising_hand_tone2', 'woman_raising_hand_medium_light_skin_tone'), ('\U0001F64B\U0001F3FC\u200D\u2640',)),
        ('\U0001F64B\U0001F3FD\u200D\u2640\uFE0F', 'woman raising hand: medium skin tone', '4.0', 'MEDIUM', ('woman_raising_hand_tone3', 'woman_raising_hand_medium_skin_tone'), ('\U0001F64B\U0001F3FD\u200D\u2640',)),
        ('\U0001F64B\U0001F3FE\u200D\u2640\uFE0F', 'woman raising hand: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_raising_hand_tone4', 'woman_raising_hand_medium_dark_skin_tone'), ('\U0001F64B\U0001F3FE\u200D\u2640',)),
        ('\U0001F64B\U0001F3FF\u200D\u2640\uFE0F', 'woman raising hand: dark skin tone', '4.0', 'DARK', ('woman_raising_hand_tone5', 'woman_raising_hand_dark_skin_tone'), ('\U0001F64B\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9CF', 'deaf person', 'People & Body', 'person-gesture', '12.0', ('deaf_person',), (), (
        ('\U0001F9CF\U0001F3FB', 'deaf person: light skin tone', '12.0', 'LIGHT', ('deaf_person_light_skin_tone',), ()),
        ('\U0001F9CF\U0001F3FC', 'deaf person: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('deaf_person_medium-light_skin_tone',), ()),
        ('\U0001F9CF\U0001F3FD', 'deaf person: medium skin tone', '12.0', 'MEDIUM', ('deaf_person_medium_skin_tone',), ()),
        ('\U0001F9CF\U0001F3FE', 'deaf person: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('deaf_person_medium-dark_skin_tone',), ()),
        ('\U0001F9CF\U0001F3FF', 'deaf person: dark skin tone', '12.0', 'DARK', ('deaf_person_dark_skin_tone',), ()),
    )),
    ('\U0001F9CF\u200D\u2642\uFE0F', 'deaf man', 'People & Body', 'person-gesture', '12.0', ('deaf_man',), ('\U0001F9CF\u200D\u2642',), (
        ('\U0001F9CF\U0001F3FB\u200D\u2642\uFE0F', 'deaf man: light skin tone', '12.0', 'LIGHT', ('deaf_man_light_skin_tone',), ('\U0001F9CF\U0001F3FB\u200D\u2642',)),
        ('\U0001F9CF\U0001F3FC\u200D\u2642\uFE0F', 'deaf man: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('deaf_man_medium-light_skin_tone',), ('\U0001F9CF\U0001F3FC\u200D\u2642',)),
        ('\U0001F9CF\U0001F3FD\u200D\u2642\uFE0F', 'deaf man: medium skin tone', '12.0', 'MEDIUM', ('deaf_man_medium_skin_tone',), ('\U0001F9CF\U0001F3FD\u200D\u2642',)),
        ('\U0001F9CF\U0001F3FE\u200D\u2642\uFE0F', 'deaf man: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('deaf_man_medium-dark_skin_tone',), ('\U0001F9CF\U0001F3FE\u200D\u2642',)),
        ('\U0001F9CF\U0001F3FF\u200D\u2642\uFE0F', 'deaf man: dark skin tone', '12.0', 'DARK', ('deaf_man_dark_skin_tone',), ('\U0001F9CF\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9CF\u200D\u2640\uFE0F', 'deaf woman', 'People & Body', 'person-gesture', '12.0', ('deaf_woman',), ('\U0001F9CF\u200D\u2640',), (
        ('\U0001F9CF\U0001F3FB\u200D\u2640\uFE0F', 'deaf woman: light skin tone', '12.0', 'LIGHT', ('deaf_woman_light_skin_tone',), ('\U0001F9CF\U0001F3FB\u200D\u2640',)),
        ('\U0001F9CF\U0001F3FC\u200D\u2640\uFE0F', 'deaf woman: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('deaf_woman_medium-light_skin_tone',), ('\U0001F9CF\U0001F3FC\u200D\u2640',)),
        ('\U0001F9CF\U0001F3FD\u200D\u2640\uFE0F', 'deaf woman: medium skin tone', '12.0', 'MEDIUM', ('deaf_woman_medium_skin_tone',), ('\U0001F9CF\U0001F3FD\u200D\u2640',)),
        ('\U0001F9CF\U0001F3FE\u200D\u2640\uFE0F', 'deaf woman: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('deaf_woman_medium-dark_skin_tone',), ('\U0001F9CF\U0001F3FE\u200D\u2640',)),
        ('\U0001F9CF\U0001F3FF\u200D\u2640\uFE0F', 'deaf woman: dark skin tone', '12.0', 'DARK', ('deaf_woman_dark_skin_tone',), ('\U0001F9CF\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F647', 'person bowing', 'People & Body', 'person-gesture', '0.6', ('person_bowing', 'bow'), (), (
        ('\U0001F647\U0001F3FB', 'person bowing: light skin tone', '1.0', 'LIGHT', ('person_bowing_tone1', 'bow_tone1'), ()),
        ('\U0001F647\U0001F3FC', 'person bowing: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_bowing_tone2', 'bow_tone2'), ()),
        ('\U0001F647\U0001F3FD', 'person bowing: medium skin tone', '1.0', 'MEDIUM', ('person_bowing_tone3', 'bow_tone3'), ()),
        ('\U0001F647\U0001F3FE', 'person bowing: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_bowing_tone4', 'bow_tone4'), ()),
        ('\U0001F647\U0001F3FF', 'person bowing: dark skin tone', '1.0', 'DARK', ('person_bowing_tone5', 'bow_tone5'), ()),
    )),
    ('\U0001F647\u200D\u2642\uFE0F', 'man bowing', 'People & Body', 'person-gesture', '4.0', ('man_bowing',), ('\U0001F647\u200D\u2642',), (
        ('\U0001F647\U0001F3FB\u200D\u2642\uFE0F', 'man bowing: light skin tone', '4.0', 'LIGHT', ('man_bowing_tone1', 'man_bowing_light_skin_tone'), ('\U0001F647\U0001F3FB\u200D\u2642',)),
        ('\U0001F647\U0001F3FC\u200D\u2642\uFE0F', 'man bowing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_bowing_tone2', 'man_bowing_medium_light_skin_tone'), ('\U0001F647\U0001F3FC\u200D\u2642',)),
        ('\U0001F647\U0001F3FD\u200D\u2642\uFE0F', 'man bowing: medium skin tone', '4.0', 'MEDIUM', ('man_bowing_tone3', 'man_bowing_medium_skin_tone'), ('\U0001F647\U0001F3FD\u200D\u2642',)),
        ('\U0001F647\U0001F3FE\u200D\u2642\uFE0F', 'man bowing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_bowing_tone4', 'man_bowing_medium_dark_skin_tone'), ('\U0001F647\U0001F3FE\u200D\u2642',)),
        ('\U0001F647\U0001F3FF\u200D\u2642\uFE0F', 'man bowing: dark skin tone', '4.0', 'DARK', ('man_bowing_tone5', 'man_bowing_dark_skin_tone'), ('\U0001F647\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F647\u200D\u2640\uFE0F', 'woman bowing', 'People & Body', 'person-gesture', '4.0', ('woman_bowing',), ('\U0001F647\u200D\u2640',), (
        ('\U0001F647\U0001F3FB\u200D\u2640\uFE0F', 'woman bowing: light skin tone', '4.0', 'LIGHT', ('woman_bowing_tone1', 'woman_bowing_light_skin_tone'), ('\U0001F647\U0001F3FB\u200D\u2640',)),
        ('\U0001F647\U0001F3FC\u200D\u2640\uFE0F', 'woman bowing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_bowing_tone2', 'woman_bowing_medium_light_skin_tone'), ('\U0001F647\U0001F3FC\u200D\u2640',)),
        ('\U0001F647\U0001F3FD\u200D\u2640\uFE0F', 'woman bowing: medium skin tone', '4.0', 'MEDIUM', ('woman_bowing_tone3', 'woman_bowing_medium_skin_tone'), ('\U0001F647\U0001F3FD\u200D\u2640',)),
        ('\U0001F647\U0001F3FE\u200D\u2640\uFE0F', 'woman bowing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_bowing_tone4', 'woman_bowing_medium_dark_skin_tone'), ('\U0001F647\U0001F3FE\u200D\u2640',)),
        ('\U0001F647\U0001F3FF\u200D\u2640\uFE0F', 'woman bowing: dark skin tone', '4.0', 'DARK', ('woman_bowing_tone5', 'woman_bowing_dark_skin_tone'), ('\U0001F647\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F926', 'person facepalming', 'People & Body', 'person-gesture', '3.0', ('person_facepalming', 'face_palm', 'facepalm'), (), (
        ('\U0001F926\U0001F3FB', 'person facepalming: light skin tone', '3.0', 'LIGHT', ('person_facepalming_tone1', 'face_palm_tone1', 'facepalm_tone1'), ()),
        ('\U0001F926\U0001F3FC', 'person facepalming: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_facepalming_tone2', 'face_palm_tone2', 'facepalm_tone2'), ()),
        ('\U0001F926\U0001F3FD', 'person facepalming: medium skin tone', '3.0', 'MEDIUM', ('person_facepalming_tone3', 'face_palm_tone3', 'facepalm_tone3'), ()),
        ('\U0001F926\U0001F3FE', 'person facepalming: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_facepalming_tone4', 'face_palm_tone4', 'facepalm_tone4'), ()),
        ('\U0001F926\U0001F3FF', 'person facepalming: dark skin tone', '3.0', 'DARK', ('person_facepalming_tone5', 'face_palm_tone5', 'facepalm_tone5'), ()),
    )),
    ('\U0001F926\u200D\u2642\uFE0F', 'man facepalming', 'People & Body', 'person-gesture', '4.0', ('man_facepalming',), ('\U0001F926\u200D\u2642',), (
        ('\U0001F926\U0001F3FB\u200D\u2642\uFE0F', 'man facepalming: light skin tone', '4.0', 'LIGHT', ('man_facepalming_tone1', 'man_facepalming_light_skin_tone'), ('\U0001F926\U0001F3FB\u200D\u2642',)),
        ('\U0001F926\U0001F3FC\u200D\u2642\uFE0F', 'man facepalming: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_facepalming_tone2', 'man_facepalming_medium_light_skin_tone'), ('\U0001F926\U0001F3FC\u200D\u2642',)),
        ('\U0001F926\U0001F3FD\u200D\u2642\uFE0F', 'man facepalming: medium skin tone', '4.0', 'MEDIUM', ('man_facepalming_tone3', 'man_facepalming_medium_skin_tone'), ('\U0001F926\U0001F3FD\u200D\u2642',)),
        ('\U0001F926\U0001F3FE\u200D\u2642\uFE0F', 'man facepalming: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_facepalming_tone4', 'man_facepalming_medium_dark_skin_tone'), ('\U0001F926\U0001F3FE\u200D\u2642',)),
        ('\U0001F926\U0001F3FF\u200D\u2642\uFE0F', 'man facepalming: dark skin tone', '4.0', 'DARK', ('man_facepalming_tone5', 'man_facepalming_dark_skin_tone'), ('\U0001F926\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F926\u200D\u2640\uFE0F', 'woman facepalming', 'People & Body', 'person-gesture', '4.0', ('woman_facepalming',), ('\U0001F926\u200D\u2640',), (
        ('\U0001F926\U0001F3FB\u200D\u2640\uFE0F', 'woman facepalming: light skin tone', '4.0', 'LIGHT', ('woman_facepalming_tone1', 'woman_facepalming_light_skin_tone'), ('\U0001F926\U0001F3FB\u200D\u2640',)),
        ('\U0001F926\U0001F3FC\u200D\u2640\uFE0F', 'woman facepalming: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_facepalming_tone2', 'woman_facepalming_medium_light_skin_tone'), ('\U0001F926\U0001F3FC\u200D\u2640',)),
        ('\U0001F926\U0001F3FD\u200D\u2640\uFE0F', 'woman facepalming: medium skin tone', '4.0', 'MEDIUM', ('woman_facepalming_tone3', 'woman_facepalming_medium_skin_tone'), ('\U0001F926\U0001F3FD\u200D\u2640',)),
        ('\U0001F926\U0001F3FE\u200D\u2640\uFE0F', 'woman facepalming: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_facepalming_tone4', 'woman_facepalming_medium_dark_skin_tone'), ('\U0001F926\U0001F3FE\u200D\u2640',)),
        ('\U0001F926\U0001F3FF\u200D\u2640\uFE0F', 'woman facepalming: dark skin tone', '4.0', 'DARK', ('woman_facepalming_tone5', 'woman_facepalming_dark_skin_tone'), ('\U0001F926\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F937', 'person shrugging', 'People & Body', 'person-gesture', '3.0', ('person_shrugging', 'shrug'), (), (
        ('\U0001F937\U0001F3FB', 'person shrugging: light skin tone', '3.0', 'LIGHT', ('person_shrugging_tone1', 'shrug_tone1'), ()),
        ('\U0001F937\U0001F3FC', 'person shrugging: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_shrugging_tone2', 'shrug_tone2'), ()),
        ('\U0001F937\U0001F3FD', 'person shrugging: medium skin tone', '3.0', 'MEDIUM', ('person_shrugging_tone3', 'shrug_tone3'), ()),
        ('\U0001F937\U0001F3FE', 'person shrugging: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_shrugging_tone4', 'shrug_tone4'), ()),
        ('\U0001F937\U0001F3FF', 'person shrugging: dark skin tone', '3.0', 'DARK', ('person_shrugging_tone5', 'shrug_tone5'), ()),
    )),
    ('\U0001F937\u200D\u2642\uFE0F', 'man shrugging', 'People & Body', 'person-gesture', '4.0', ('man_shrugging',), ('\U0001F937\u200D\u2642',), (
        ('\U0001F937\U0001F3FB\u200D\u2642\uFE0F', 'man shrugging: light skin tone', '4.0', 'LIGHT', ('man_shrugging_tone1', 'man_shrugging_light_skin_tone'), ('\U0001F937\U0001F3FB\u200D\u2642',)),
        ('\U0001F937\U0001F3FC\u200D\u2642\uFE0F', 'man shrugging: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_shrugging_tone2', 'man_shrugging_medium_light_skin_tone'), ('\U0001F937\U0001F3FC\u200D\u2642',)),
        ('\U0001F937\U0001F3FD\u200D\u2642\uFE0F', 'man shrugging: medium skin tone', '4.0', 'MEDIUM', ('man_shrugging_tone3', 'man_shrugging_medium_skin_tone'), ('\U0001F937\U0001F3FD\u200D\u2642',)),
        ('\U0001F937\U0001F3FE\u200D\u2642\uFE0F', 'man shrugging: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_shrugging_tone4', 'man_shrugging_medium_dark_skin_tone'), ('\U0001F937\U0001F3FE\u200D\u2642',)),
        ('\U0001F937\U0001F3FF\u200D\u2642\uFE0F', 'man shrugging: dark skin tone', '4.0', 'DARK', ('man_shrugging_tone5', 'man_shrugging_dark_skin_tone'), ('\U0001F937\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F937\u200D\u2640\uFE0F', 'woman shrugging', 'People & Body', 'person-gesture', '4.0', ('woman_shrugging',), ('\U0001F937\u200D\u2640',), (
        ('\U0001F937\U0001F3FB\u200D\u2640\uFE0F', 'woman shrugging: light skin tone', '4.0', 'LIGHT', ('woman_shrugging_tone1', 'woman_shrugging_light_skin_tone'), ('\U0001F937\U0001F3FB\u200D\u2640',)),
        ('\U0001F937\U0001F3FC\u200D\u2640\uFE0F', 'woman shrugging: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_shrugging_tone2', 'woman_shrugging_medium_light_skin_tone'), ('\U0001F937\U0001F3FC\u200D\u2640',)),
        ('\U0001F937\U0001F3FD\u200D\u2640\uFE0F', 'woman shrugging: medium skin tone', '4.0', 'MEDIUM', ('woman_shrugging_tone3', 'woman_shrugging_medium_skin_tone'), ('\U0001F937\U0001F3FD\u200D\u2640',)),
        ('\U0001F937\U0001F3FE\u200D\u2640\uFE0F', 'woman shrugging: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_shrugging_tone4', 'woman_shrugging_medium_dark_skin_tone'), ('\U0001F937\U0001F3FE\u200D\u2640',)),
        ('\U0001F937\U0001F3FF\u200D\u2640\uFE0F', 'woman shrugging: dark skin tone', '4.0', 'DARK', ('woman_shrugging_tone5', 'woman_shrugging_dark_skin_tone'), ('\U0001F937\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9D1\u200D\u2695\uFE0F', 'health worker', 'People & Body', 'person-role', '12.1', ('health_worker',), ('\U0001F9D1\u200D\u2695',), (
        ('\U0001F9D1\U0001F3FB\u200D\u2695\uFE0F', 'health worker: light skin tone', '12.1', 'LIGHT', ('health_worker_light_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2695',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2695\uFE0F', 'health worker: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('health_worker_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2695',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2695\uFE0F', 'health worker: medium skin tone', '12.1', 'MEDIUM', ('health_worker_medium_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2695',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2695\uFE0F', 'health worker: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('health_worker_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2695',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2695\uFE0F', 'health worker: dark skin tone', '12.1', 'DARK', ('health_worker_dark_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2695',)),
    )),
    ('\U0001F468\u200D\u2695\uFE0F', 'man health worker', 'People & Body', 'person-role', '4.0', ('man_health_worker',), ('\U0001F468\u200D\u2695',), (
        ('\U0001F468\U0001F3FB\u200D\u2695\uFE0F', 'man health worker: light skin tone', '4.0', 'LIGHT', ('man_health_worker_tone1', 'man_health_worker_light_skin_tone'), ('\U0001F468\U0001F3FB\u200D\u2695',)),
        ('\U0001F468\U0001F3FC\u200D\u2695\uFE0F', 'man health worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_health_worker_tone2', 'man_health_worker_medium_light_skin_tone'), ('\U0001F468\U0001F3FC\u200D\u2695',)),
        ('\U0001F468\U0001F3FD\u200D\u2695\uFE0F', 'man health worker: medium skin tone', '4.0', 'MEDIUM', ('man_health_worker_tone3', 'man_health_worker_medium_skin_tone'), ('\U0001F468\U0001F3FD\u200D\u2695',)),
        ('\U0001F468\U0001F3FE\u200D\u2695\uFE0F', 'man health worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_health_worker_tone4', 'man_health_worker_medium_dark_skin_tone'), ('\U0001F468\U0001F3FE\u200D\u2695',)),
        ('\U0001F468\U0001F3FF\u200D\u2695\uFE0F', 'man health worker: dark skin tone', '4.0', 'DARK', ('man_health_worker_tone5', 'man_health_worker_dark_skin_tone'), ('\U0001F468\U0001F3FF\u200D\u2695',)),
    )),
    ('\U0001F469\u200D\u2695\uFE0F', 'woman health worker', 'People & Body', 'person-role', '4.0', ('woman_health_worker',), ('\U0001F469\u200D\u2695',), (
        ('\U0001F469\U0001F3FB\u200D\u2695\uFE0F', 'woman health worker: light skin tone', '4.0', 'LIGHT', ('woman_health_worker_tone1', 'woman_health_worker_light_skin_tone'), ('\U0001F469\U0001F3FB\u200D\u2695',)),
        ('\U0001F469\U0001F3FC\u200D\u2695\uFE0F', 'woman health worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_health_worker_tone2', 'woman_health_worker_medium_light_skin_tone'), ('\U0001F469\U0001F3FC\u200D\u2695',)),
        ('\U0001F469\U0001F3FD\u200D\u2695\uFE0F', 'woman health worker: medium skin tone', '4.0', 'MEDIUM', ('woman_health_worker_tone3', 'woman_health_worker_medium_skin_tone'), ('\U0001F469\U0001F3FD\u200D\u2695',)),
        ('\U0001F469\U0001F3FE\u200D\u2695\uFE0F', 'woman health worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_health_worker_tone4', 'woman_health_worker_medium_dark_skin_tone'), ('\U0001F469\U0001F3FE\u200D\u2695',)),
        ('\U0001F469\U0001F3FF\u200D\u2695\uFE0F', 'woman health worker: dark skin tone', '4.0', 'DARK', ('woman_health_worker_tone5', 'woman_health_worker_dark_skin_tone'), ('\U0001F469\U0001F3FF\u200D\u2695',)),
    )),
    ('\U0001F9D1\u200D\U0001F393', 'student', 'People & Body', 'person-role', '12.1', ('student',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F393', 'student: light skin tone', '12.1', 'LIGHT', ('student_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F393', 'student: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('student_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F393', 'student: medium skin tone', '12.1', 'MEDIUM', ('student_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F393', 'student: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('student_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F393', 'student: dark skin tone', '12.1', 'DARK', ('student_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F393', 'man student', 'People & Body', 'person-role', '4.0', ('man_student',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F393', 'man student: light skin tone', '4.0', 'LIGHT', ('man_student_tone1', 'man_student_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F393', 'man student: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_student_tone2', 'man_student_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F393', 'man student: medium skin tone', '4.0', 'MEDIUM', ('man_student_tone3', 'man_student_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F393', 'man student: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_student_tone4', 'man_student_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F393', 'man student: dark skin tone', '4.0', 'DARK', ('man_student_tone5', 'man_student_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F393', 'woman student', 'People & Body', 'person-role', '4.0', ('woman_student',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F393', 'woman student: light skin tone', '4.0', 'LIGHT', ('woman_student_tone1', 'woman_student_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F393', 'woman student: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_student_tone2', 'woman_student_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F393', 'woman student: medium skin tone', '4.0', 'MEDIUM', ('woman_student_tone3', 'woman_student_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F393', 'woman student: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_student_tone4', 'woman_student_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F393', 'woman student: dark skin tone', '4.0', 'DARK', ('woman_student_tone5', 'woman_student_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F3EB', 'teacher', 'People & Body', 'person-role', '12.1', ('teacher',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F3EB', 'teacher: light skin tone', '12.1', 'LIGHT', ('teacher_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F3EB', 'teacher: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('teacher_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F3EB', 'teacher: medium skin tone', '12.1', 'MEDIUM', ('teacher_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F3EB', 'teacher: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('teacher_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F3EB', 'teacher: dark skin tone', '12.1', 'DARK', ('teacher_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F3EB', 'man teacher', 'People & Body', 'person-role', '4.0', ('man_teacher',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F3EB', 'man teacher: light skin tone', '4.0', 'LIGHT', ('man_teacher_tone1', 'man_teacher_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F3EB', 'man teacher: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_teacher_tone2', 'man_teacher_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F3EB', 'man teacher: medium skin tone', '4.0', 'MEDIUM', ('man_teacher_tone3', 'man_teacher_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F3EB', 'man teacher: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_teacher_tone4', 'man_teacher_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F3EB', 'man teacher: dark skin tone', '4.0', 'DARK', ('man_teacher_tone5', 'man_teacher_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F3EB', 'woman teacher', 'People & Body', 'person-role', '4.0', ('woman_teacher',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F3EB', 'woman teacher: light skin tone', '4.0', 'LIGHT', ('woman_teacher_tone1', 'woman_teacher_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F3EB', 'woman teacher: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_teacher_tone2', 'woman_teacher_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F3EB', 'woman teacher: medium skin tone', '4.0', 'MEDIUM', ('woman_teacher_tone3', 'woman_teacher_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F3EB', 'woman teacher: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_teacher_tone4', 'woman_teacher_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F3EB', 'woman teacher: dark skin tone', '4.0', 'DARK', ('woman_teacher_tone5', 'woman_teacher_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\u2696\uFE0F', 'judge', 'People & Body', 'person-role', '12.1', ('judge',), ('\U0001F9D1\u200D\u2696',), (
        ('\U0001F9D1\U0001F3FB\u200D\u2696\uFE0F', 'judge: light skin tone', '12.1', 'LIGHT', ('judge_light_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2696',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2696\uFE0F', 'judge: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('judge_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2696',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2696\uFE0F', 'judge: medium skin tone', '12.1', 'MEDIUM', ('judge_medium_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2696',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2696\uFE0F', 'judge: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('judge_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2696',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2696\uFE0F', 'judge: dark skin tone', '12.1', 'DARK', ('judge_dark_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2696',)),
    )),
    ('\U0001F468\u200D\u2696\uFE0F', 'man judge', 'People & Body', 'person-role', '4.0', ('man_judge',), ('\U0001F468\u200D\u2696',), (
        ('\U0001F468\U0001F3FB\u200D\u2696\uFE0F', 'man judge: light skin tone', '4.0', 'LIGHT', ('man_judge_tone1', 'man_judge_light_skin_tone'), ('\U0001F468\U0001F3FB\u200D\u2696',)),
        ('\U0001F468\U0001F3FC\u200D\u2696\uFE0F', 'man judge: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_judge_tone2', 'man_judge_medium_light_skin_tone'), ('\U0001F468\U0001F3FC\u200D\u2696',)),
        ('\U0001F468\U0001F3FD\u200D\u2696\uFE0F', 'man judge: medium skin tone', '4.0', 'MEDIUM', ('man_judge_tone3', 'man_judge_medium_skin_tone'), ('\U0001F468\U0001F3FD\u200D\u2696',)),
        ('\U0001F468\U0001F3FE\u200D\u2696\uFE0F', 'man judge: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_judge_tone4', 'man_judge_medium_dark_skin_tone'), ('\U0001F468\U0001F3FE\u200D\u2696',)),
        ('\U0001F468\U0001F3FF\u200D\u2696\uFE0F', 'man judge: dark skin tone', '4.0', 'DARK', ('man_judge_tone5', 'man_judge_dark_skin_tone'), ('\U0001F468\U0001F3FF\u200D\u2696',)),
    )),
    ('\U0001F469\u200D\u2696\uFE0F', 'woman judge', 'People & Body', 'person-role', '4.0', ('woman_judge',), ('\U0001F469\u200D\u2696',), (
        ('\U0001F469\U0001F3FB\u200D\u2696\uFE0F', 'woman judge: light skin tone', '4.0', 'LIGHT', ('woman_judge_tone1', 'woman_judge_light_skin_tone'), ('\U0001F469\U0001F3FB\u200D\u2696',)),
        ('\U0001F469\U0001F3FC\u200D\u2696\uFE0F', 'woman judge: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_judge_tone2', 'woman_judge_medium_light_skin_tone'), ('\U0001F469\U0001F3FC\u200D\u2696',)),
        ('\U0001F469\U0001F3FD\u200D\u2696\uFE0F', 'woman judge: medium skin tone', '4.0', 'MEDIUM', ('woman_judge_tone3', 'woman_judge_medium_skin_tone'), ('\U0001F469\U0001F3FD\u200D\u2696',)),
        ('\U0001F469\U0001F3FE\u200D\u2696\uFE0F', 'woman judge: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_judge_tone4', 'woman_judge_medium_dark_skin_tone'), ('\U0001F469\U0001F3FE\u200D\u2696',)),
        ('\U0001F469\U0001F3FF\u200D\u2696\uFE0F', 'woman judge: dark skin tone', '4.0', 'DARK', ('woman_judge_tone5', 'woman_judge_dark_skin_tone'), ('\U0001F469\U0001F3FF\u200D\u2696',)),
    )),
    ('\U0001F9D1\u200D\U0001F33E', 'farmer', 'People & Body', 'person-role', '12.1', ('farmer',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F33E', 'farmer: light skin tone', '12.1', 'LIGHT', ('farmer_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F33E', 'farmer: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('farmer_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F33E', 'farmer: medium skin tone', '12.1', 'MEDIUM', ('farmer_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F33E', 'farmer: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('farmer_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F33E', 'farmer: dark skin tone', '12.1', 'DARK', ('farmer_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F33E', 'man farmer', 'People & Body', 'person-role', '4.0', ('man_farmer',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F33E', 'man farmer: light skin tone', '4.0', 'LIGHT', ('man_farmer_tone1', 'man_farmer_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F33E', 'man farmer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_farmer_tone2', 'man_farmer_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F33E', 'man farmer: medium skin tone', '4.0', 'MEDIUM', ('man_farmer_tone3', 'man_farmer_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F33E', 'man farmer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_farmer_tone4', 'man_farmer_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F33E', 'man farmer: dark skin tone', '4.0', 'DARK', ('man_farmer_tone5', 'man_farmer_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F33E', 'woman farmer', 'People & Body', 'person-role', '4.0', ('woman_farmer',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F33E', 'woman farmer: light skin tone', '4.0', 'LIGHT', ('woman_farmer_tone1', 'woman_farmer_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F33E', 'woman farmer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_farmer_tone2', 'woman_farmer_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F33E', 'woman farmer: medium skin tone', '4.0', 'MEDIUM', ('woman_farmer_tone3', 'woman_farmer_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F33E', 'woman farmer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_farmer_tone4', 'woman_farmer_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F33E', 'woman farmer: dark skin tone', '4.0', 'DARK', ('woman_farmer_tone5', 'woman_farmer_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F373', 'cook', 'People & Body', 'person-role', '12.1', ('cook',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F373', 'cook: light skin tone', '12.1', 'LIGHT', ('cook_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F373', 'cook: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('cook_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F373', 'cook: medium skin tone', '12.1', 'MEDIUM', ('cook_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F373', 'cook: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('cook_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F373', 'cook: dark skin tone', '12.1', 'DARK', ('cook_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F373', 'man cook', 'People & Body', 'person-role', '4.0', ('man_cook',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F373', 'man cook: light skin tone', '4.0', 'LIGHT', ('man_cook_tone1', 'man_cook_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F373', 'man cook: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_cook_tone2', 'man_cook_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F373', 'man cook: medium skin tone', '4.0', 'MEDIUM', ('man_cook_tone3', 'man_cook_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F373', 'man cook: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_cook_tone4', 'man_cook_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F373', 'man cook: dark skin tone', '4.0', 'DARK', ('man_cook_tone5', 'man_cook_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F373', 'woman cook', 'People & Body', 'person-role', '4.0', ('woman_cook',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F373', 'woman cook: light skin tone', '4.0', 'LIGHT', ('woman_cook_tone1', 'woman_cook_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F373', 'woman cook: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_cook_tone2', 'woman_cook_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F373', 'woman cook: medium skin tone', '4.0', 'MEDIUM', ('woman_cook_tone3', 'woman_cook_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F373', 'woman cook: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_cook_tone4', 'woman_cook_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F373', 'woman cook: dark skin tone', '4.0', 'DARK', ('woman_cook_tone5', 'woman_cook_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F527', 'mechanic', 'People & Body', 'person-role', '12.1', ('mechanic',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F527', 'mechanic: light skin tone', '12.1', 'LIGHT', ('mechanic_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F527', 'mechanic: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('mechanic_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F527', 'mechanic: medium skin tone', '12.1', 'MEDIUM', ('mechanic_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F527', 'mechanic: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('mechanic_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F527', 'mechanic: dark skin tone', '12.1', 'DARK', ('mechanic_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F527', 'man mechanic', 'People & Body', 'person-role', '4.0', ('man_mechanic',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F527', 'man mechanic: light skin tone', '4.0', 'LIGHT', ('man_mechanic_tone1', 'man_mechanic_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F527', 'man mechanic: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_mechanic_tone2', 'man_mechanic_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F527', 'man mechanic: medium skin tone', '4.0', 'MEDIUM', ('man_mechanic_tone3', 'man_mechanic_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F527', 'man mechanic: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_mechanic_tone4', 'man_mechanic_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F527', 'man mechanic: dark skin tone', '4.0', 'DARK', ('man_mechanic_tone5', 'man_mechanic_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F527', 'woman mechanic', 'People & Body', 'person-role', '4.0', ('woman_mechanic',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F527', 'woman mechanic: light skin tone', '4.0', 'LIGHT', ('woman_mechanic_tone1', 'woman_mechanic_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F527', 'woman mechanic: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_mechanic_tone2', 'woman_mechanic_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F527', 'woman mechanic: medium skin tone', '4.0', 'MEDIUM', ('woman_mechanic_tone3', 'woman_mechanic_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F527', 'woman mechanic: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_mechanic_tone4', 'woman_mechanic_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F527', 'woman mechanic: dark skin tone', '4.0', 'DARK', ('woman_mechanic_tone5', 'woman_mechanic_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F3ED', 'factory worker', 'People & Body', 'person-role', '12.1', ('factory_worker',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F3ED', 'factory worker: light skin tone', '12.1', 'LIGHT', ('factory_worker_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F3ED', 'factory worker: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('factory_worker_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F3ED', 'factory worker: medium skin tone', '12.1', 'MEDIUM', ('factory_worker_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F3ED', 'factory worker: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('factory_worker_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F3ED', 'factory worker: dark skin tone', '12.1', 'DARK', ('factory_worker_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F3ED', 'man factory worker', 'People & Body', 'person-role', '4.0', ('man_factory_worker',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F3ED', 'man factory worker: light skin tone', '4.0', 'LIGHT', ('man_factory_worker_tone1', 'man_factory_worker_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F3ED', 'man factory worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_factory_worker_tone2', 'man_factory_worker_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F3ED', 'man factory worker: medium skin tone', '4.0', 'MEDIUM', ('man_factory_worker_tone3', 'man_factory_worker_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F3ED', 'man factory worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_factory_worker_tone4', 'man_factory_worker_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F3ED', 'man factory worker: dark skin tone', '4.0', 'DARK', ('man_factory_worker_tone5', 'man_factory_worker_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F3ED', 'woman factory worker', 'People & Body', 'person-role', '4.0', ('woman_factory_worker',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F3ED', 'woman factory worker: light skin tone', '4.0', 'LIGHT', ('woman_factory_worker_tone1', 'woman_factory_worker_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F3ED', 'woman factory worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_factory_worker_tone2', 'woman_factory_worker_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F3ED', 'woman factory worker: medium skin tone', '4.0', 'MEDIUM', ('woman_factory_worker_tone3', 'woman_factory_worker_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F3ED', 'woman factory worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_factory_worker_tone4', 'woman_factory_worker_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F3ED', 'woman factory worker: dark skin tone', '4.0', 'DARK', ('woman_factory_worker_tone5', 'woman_factory_worker_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F4BC', 'office worker', 'People & Body', 'person-role', '12.1', ('office_worker',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F4BC', 'office worker: light skin tone', '12.1', 'LIGHT', ('office_worker_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F4BC', 'office worker: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('office_worker_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F4BC', 'office worker: medium skin tone', '12.1', 'MEDIUM', ('office_worker_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F4BC', 'office worker: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('office_worker_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F4BC', 'office worker: dark skin tone', '12.1', 'DARK', ('office_worker_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F4BC', 'man office worker', 'People & Body', 'person-role', '4.0', ('man_office_worker',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F4BC', 'man office worker: light skin tone', '4.0', 'LIGHT', ('man_office_worker_tone1', 'man_office_worker_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F4BC', 'man office worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_office_worker_tone2', 'man_office_worker_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F4BC', 'man office worker: medium skin tone', '4.0', 'MEDIUM', ('man_office_worker_tone3', 'man_office_worker_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F4BC', 'man office worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_office_worker_tone4', 'man_office_worker_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F4BC', 'man office worker: dark skin tone', '4.0', 'DARK', ('man_office_worker_tone5', 'man_office_worker_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F4BC', 'woman office worker', 'People & Body', 'person-role', '4.0', ('woman_office_worker',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F4BC', 'woman office worker: light skin tone', '4.0', 'LIGHT', ('woman_office_worker_tone1', 'woman_office_worker_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F4BC', 'woman office worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_office_worker_tone2', 'woman_office_worker_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F4BC', 'woman office worker: medium skin tone', '4.0', 'MEDIUM', ('woman_office_worker_tone3', 'woman_office_worker_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F4BC', 'woman office worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_office_worker_tone4', 'woman_office_worker_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F4BC', 'woman office worker: dark skin tone', '4.0', 'DARK', ('woman_office_worker_tone5', 'woman_office_worker_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F52C', 'scientist', 'People & Body', 'person-role', '12.1', ('scientist',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F52C', 'scientist: light skin tone', '12.1', 'LIGHT', ('scientist_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F52C', 'scientist: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('scientist_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F52C', 'scientist: medium skin tone', '12.1', 'MEDIUM', ('scientist_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F52C', 'scientist: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('scientist_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F52C', 'scientist: dark skin tone', '12.1', 'DARK', ('scientist_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F52C', 'man scientist', 'People & Body', 'person-role', '4.0', ('man_scientist',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F52C', 'man scientist: light skin tone', '4.0', 'LIGHT', ('man_scientist_tone1', 'man_scientist_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F52C', 'man scientist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_scientist_tone2', 'man_scientist_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F52C', 'man scientist: medium skin tone', '4.0', 'MEDIUM', ('man_scientist_tone3', 'man_scientist_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F52C', 'man scientist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_scientist_tone4', 'man_scientist_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F52C', 'man scientist: dark skin tone', '4.0', 'DARK', ('man_scientist_tone5', 'man_scientist_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F52C', 'woman scientist', 'People & Body', 'person-role', '4.0', ('woman_scientist',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F52C', 'woman scientist: light skin tone', '4.0', 'LIGHT', ('woman_scientist_tone1', 'woman_scientist_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F52C', 'woman scientist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_scientist_tone2', 'woman_scientist_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F52C', 'woman scientist: medium skin tone', '4.0', 'MEDIUM', ('woman_scientist_tone3', 'woman_scientist_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F52C', 'woman scientist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_scientist_tone4', 'woman_scientist_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F52C', 'woman scientist: dark skin tone', '4.0', 'DARK', ('woman_scientist_tone5', 'woman_scientist_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F4BB', 'technologist', 'People & Body', 'person-role', '12.1', ('technologist',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F4BB', 'technologist: light skin tone', '12.1', 'LIGHT', ('technologist_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F4BB', 'technologist: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('technologist_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F4BB', 'technologist: medium skin tone', '12.1', 'MEDIUM', ('technologist_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F4BB', 'technologist: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('technologist_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F4BB', 'technologist: dark skin tone', '12.1', 'DARK', ('technologist_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F4BB', 'man technologist', 'People & Body', 'person-role', '4.0', ('man_technologist',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F4BB', 'man technologist: light skin tone', '4.0', 'LIGHT', ('man_technologist_tone1', 'man_technologist_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F4BB', 'man technologist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_technologist_tone2', 'man_technologist_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F4BB', 'man technologist: medium skin tone', '4.0', 'MEDIUM', ('man_technologist_tone3', 'man_technologist_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F4BB', 'man technologist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_technologist_tone4', 'man_technologist_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F4BB', 'man technologist: dark skin tone', '4.0', 'DARK', ('man_technologist_tone5', 'man_technologist_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F4BB', 'woman technologist', 'People & Body', 'person-role', '4.0', ('woman_technologist',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F4BB', 'woman technologist: light skin tone', '4.0', 'LIGHT', ('woman_technologist_tone1', 'woman_technologist_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F4BB', 'woman technologist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_technologist_tone2', 'woman_technologist_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F4BB', 'woman technologist: medium skin tone', '4.0', 'MEDIUM', ('woman_technologist_tone3', 'woman_technologist_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F4BB', 'woman technologist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_technologist_tone4', 'woman_technologist_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F4BB', 'woman technologist: dark skin tone', '4.0', 'DARK', ('woman_technologist_tone5', 'woman_technologist_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F3A4', 'singer', 'People & Body', 'person-role', '12.1', ('singer',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F3A4', 'singer: light skin tone', '12.1', 'LIGHT', ('singer_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F3A4', 'singer: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('singer_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F3A4', 'singer: medium skin tone', '12.1', 'MEDIUM', ('singer_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F3A4', 'singer: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('singer_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F3A4', 'singer: dark skin tone', '12.1', 'DARK', ('singer_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F3A4', 'man singer', 'People & Body', 'person-role', '4.0', ('man_singer',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F3A4', 'man singer: light skin tone', '4.0', 'LIGHT', ('man_singer_tone1', 'man_singer_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F3A4', 'man singer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_singer_tone2', 'man_singer_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F3A4', 'man singer: medium skin tone', '4.0', 'MEDIUM', ('man_singer_tone3', 'man_singer_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F3A4', 'man singer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_singer_tone4', 'man_singer_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F3A4', 'man singer: dark skin tone', '4.0', 'DARK', ('man_singer_tone5', 'man_singer_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F3A4', 'woman singer', 'People & Body', 'person-role', '4.0', ('woman_singer',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F3A4', 'woman singer: light skin tone', '4.0', 'LIGHT', ('woman_singer_tone1', 'woman_singer_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F3A4', 'woman singer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_singer_tone2', 'woman_singer_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F3A4', 'woman singer: medium skin tone', '4.0', 'MEDIUM', ('woman_singer_tone3', 'woman_singer_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F3A4', 'woman singer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_singer_tone4', 'woman_singer_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F3A4', 'woman singer: dark skin tone', '4.0', 'DARK', ('woman_singer_tone5', 'woman_singer_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F3A8', 'artist', 'People & Body', 'person-role', '12.1', ('artist',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F3A8', 'artist: light skin tone', '12.1', 'LIGHT', ('artist_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F3A8', 'artist: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('artist_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F3A8', 'artist: medium skin tone', '12.1', 'MEDIUM', ('artist_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F3A8', 'artist: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('artist_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F3A8', 'artist: dark skin tone', '12.1', 'DARK', ('artist_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F3A8', 'man artist', 'People & Body', 'person-role', '4.0', ('man_artist',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F3A8', 'man artist: light skin tone', '4.0', 'LIGHT', ('man_artist_tone1', 'man_artist_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F3A8', 'man artist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_artist_tone2', 'man_artist_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F3A8', 'man artist: medium skin tone', '4.0', 'MEDIUM', ('man_artist_tone3', 'man_artist_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F3A8', 'man artist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_artist_tone4', 'man_artist_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F3A8', 'man artist: dark skin tone', '4.0', 'DARK', ('man_artist_tone5', 'man_artist_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F3A8', 'woman artist', 'People & Body', 'person-role', '4.0', ('woman_artist',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F3A8', 'woman artist: light skin tone', '4.0', 'LIGHT', ('woman_artist_tone1', 'woman_artist_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F3A8', 'woman artist: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_artist_tone2', 'woman_artist_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F3A8', 'woman artist: medium skin tone', '4.0', 'MEDIUM', ('woman_artist_tone3', 'woman_artist_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F3A8', 'woman artist: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_artist_tone4', 'woman_artist_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F3A8', 'woman artist: dark skin tone', '4.0', 'DARK', ('woman_artist_tone5', 'woman_artist_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\u2708\uFE0F', 'pilot', 'People & Body', 'person-role', '12.1', ('pilot',), ('\U0001F9D1\u200D\u2708',), (
        ('\U0001F9D1\U0001F3FB\u200D\u2708\uFE0F', 'pilot: light skin tone', '12.1', 'LIGHT', ('pilot_light_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2708',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2708\uFE0F', 'pilot: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('pilot_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2708',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2708\uFE0F', 'pilot: medium skin tone', '12.1', 'MEDIUM', ('pilot_medium_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2708',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2708\uFE0F', 'pilot: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('pilot_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2708',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2708\uFE0F', 'pilot: dark skin tone', '12.1', 'DARK', ('pilot_dark_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2708',)),
    )),
    ('\U0001F468\u200D\u2708\uFE0F', 'man pilot', 'People & Body', 'person-role', '4.0', ('man_pilot',), ('\U0001F468\u200D\u2708',), (
        ('\U0001F468\U0001F3FB\u200D\u2708\uFE0F', 'man pilot: light skin tone', '4.0', 'LIGHT', ('man_pilot_tone1', 'man_pilot_light_skin_tone'), ('\U0001F468\U0001F3FB\u200D\u2708',)),
        ('\U0001F468\U0001F3FC\u200D\u2708\uFE0F', 'man pilot: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_pilot_tone2', 'man_pilot_medium_light_skin_tone'), ('\U0001F468\U0001F3FC\u200D\u2708',)),
        ('\U0001F468\U0001F3FD\u200D\u2708\uFE0F', 'man pilot: medium skin tone', '4.0', 'MEDIUM', ('man_pilot_tone3', 'man_pilot_medium_skin_tone'), ('\U0001F468\U0001F3FD\u200D\u2708',)),
        ('\U0001F468\U0001F3FE\u200D\u2708\uFE0F', 'man pilot: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_pilot_tone4', 'man_pilot_medium_dark_skin_tone'), ('\U0001F468\U0001F3FE\u200D\u2708',)),
        ('\U0001F468\U0001F3FF\u200D\u2708\uFE0F', 'man pilot: dark skin tone', '4.0', 'DARK', ('man_pilot_tone5', 'man_pilot_dark_skin_tone'), ('\U0001F468\U0001F3FF\u200D\u2708',)),
    )),
    ('\U0001F469\u200D\u2708\uFE0F', 'woman pilot', 'People & Body', 'person-role', '4.0', ('woman_pilot',), ('\U0001F469\u200D\u2708',), (
        ('\U0001F469\U0001F3FB\u200D\u2708\uFE0F', 'woman pilot: light skin tone', '4.0', 'LIGHT', ('woman_pilot_tone1', 'woman_pilot_light_skin_tone'), ('\U0001F469\U0001F3FB\u200D\u2708',)),
        ('\U0001F469\U0001F3FC\u200D\u2708\uFE0F', 'woman pilot: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_pilot_tone2', 'woman_pilot_medium_light_skin_tone'), ('\U0001F469\U0001F3FC\u200D\u2708',)),
        ('\U0001F469\U0001F3FD\u200D\u2708\uFE0F', 'woman pilot: medium skin tone', '4.0', 'MEDIUM', ('woman_pilot_tone3', 'woman_pilot_medium_skin_tone'), ('\U0001F469\U0001F3FD\u200D\u2708',)),
        ('\U0001F469\U0001F3FE\u200D\u2708\uFE0F', 'woman pilot: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_pilot_tone4', 'woman_pilot_medium_dark_skin_tone'), ('\U0001F469\U0001F3FE\u200D\u2708',)),
        ('\U0001F469\U0001F3FF\u200D\u2708\uFE0F', 'woman pilot: dark skin tone', '4.0', 'DARK', ('woman_pilot_tone5', 'woman_pilot_dark_skin_tone'), ('\U0001F469\U0001F3FF\u200D\u2708',)),
    )),
    ('\U0001F9D1\u200D\U0001F680', 'astronaut', 'People & Body', 'person-role', '12.1', ('astronaut',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F680', 'astronaut: light skin tone', '12.1', 'LIGHT', ('astronaut_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F680', 'astronaut: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('astronaut_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F680', 'astronaut: medium skin tone', '12.1', 'MEDIUM', ('astronaut_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F680', 'astronaut: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('astronaut_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F680', 'astronaut: dark skin tone', '12.1', 'DARK', ('astronaut_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F680', 'man astronaut', 'People & Body', 'person-role', '4.0', ('man_astronaut',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F680', 'man astronaut: light skin tone', '4.0', 'LIGHT', ('man_astronaut_tone1', 'man_astronaut_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F680', 'man astronaut: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_astronaut_tone2', 'man_astronaut_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F680', 'man astronaut: medium skin tone', '4.0', 'MEDIUM', ('man_astronaut_tone3', 'man_astronaut_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F680', 'man astronaut: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_astronaut_tone4', 'man_astronaut_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F680', 'man astronaut: dark skin tone', '4.0', 'DARK', ('man_astronaut_tone5', 'man_astronaut_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F680', 'woman astronaut', 'People & Body', 'person-role', '4.0', ('woman_astronaut',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F680', 'woman astronaut: light skin tone', '4.0', 'LIGHT', ('woman_astronaut_tone1', 'woman_astronaut_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F680', 'woman astronaut: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_astronaut_tone2', 'woman_astronaut_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F680', 'woman astronaut: medium skin tone', '4.0', 'MEDIUM', ('woman_astronaut_tone3', 'woman_astronaut_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F680', 'woman astronaut: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_astronaut_tone4', 'woman_astronaut_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F680', 'woman astronaut: dark skin tone', '4.0', 'DARK', ('woman_astronaut_tone5', 'woman_astronaut_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F692', 'firefighter', 'People & Body', 'person-role', '12.1', ('firefighter',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F692', 'firefighter: light skin tone', '12.1', 'LIGHT', ('firefighter_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F692', 'firefighter: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('firefighter_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F692', 'firefighter: medium skin tone', '12.1', 'MEDIUM', ('firefighter_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F692', 'firefighter: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('firefighter_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F692', 'firefighter: dark skin tone', '12.1', 'DARK', ('firefighter_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F692', 'man firefighter', 'People & Body', 'person-role', '4.0', ('man_firefighter',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F692', 'man firefighter: light skin tone', '4.0', 'LIGHT', ('man_firefighter_tone1', 'man_firefighter_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F692', 'man firefighter: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_firefighter_tone2', 'man_firefighter_medium_light_skin_tone'), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F692', 'man firefighter: medium skin tone', '4.0', 'MEDIUM', ('man_firefighter_tone3', 'man_firefighter_medium_skin_tone'), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F692', 'man firefighter: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_firefighter_tone4', 'man_firefighter_medium_dark_skin_tone'), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F692', 'man firefighter: dark skin tone', '4.0', 'DARK', ('man_firefighter_tone5', 'man_firefighter_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F692', 'woman firefighter', 'People & Body', 'person-role', '4.0', ('woman_firefighter',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F692', 'woman firefighter: light skin tone', '4.0', 'LIGHT', ('woman_firefighter_tone1', 'woman_firefighter_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F692', 'woman firefighter: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_firefighter_tone2', 'woman_firefighter_medium_light_skin_tone'), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F692', 'woman firefighter: medium skin tone', '4.0', 'MEDIUM', ('woman_firefighter_tone3', 'woman_firefighter_medium_skin_tone'), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F692', 'woman firefighter: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_firefighter_tone4', 'woman_firefighter_medium_dark_skin_tone'), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F692', 'woman firefighter: dark skin tone', '4.0', 'DARK', ('woman_firefighter_tone5', 'woman_firefighter_dark_skin_tone'), ()),
    )),
    ('\U0001F46E', 'police officer', 'People & Body', 'person-role', '0.6', ('police_officer', 'cop'), (), (
        ('\U0001F46E\U0001F3FB', 'police officer: light skin tone', '1.0', 'LIGHT', ('police_officer_tone1', 'cop_tone1'), ()),
        ('\U0001F46E\U0001F3FC', 'police officer: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('police_officer_tone2', 'cop_tone2'), ()),
        ('\U0001F46E\U0001F3FD', 'police officer: medium skin tone', '1.0', 'MEDIUM', ('police_officer_tone3', 'cop_tone3'), ()),
        ('\U0001F46E\U0001F3FE', 'police officer: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('police_officer_tone4', 'cop_tone4'), ()),
        ('\U0001F46E\U0001F3FF', 'police officer: dark skin tone', '1.0', 'DARK', ('police_officer_tone5', 'cop_tone5'), ()),
    )),
    ('\U0001F46E\u200D\u2642\uFE0F', 'man police officer', 'People & Body', 'person-role', '4.0', ('man_police_officer',), ('\U0001F46E\u200D\u2642',), (
        ('\U0001F46E\U0001F3FB\u200D\u2642\uFE0F', 'man police officer: light skin tone', '4.0', 'LIGHT', ('man_police_officer_tone1', 'man_police_officer_light_skin_tone'), ('\U0001F46E\U0001F3FB\u200D\u2642',)),
        ('\U0001F46E\U0001F3FC\u200D\u2642\uFE0F', 'man police officer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_police_officer_tone2', 'man_police_officer_medium_light_skin_tone'), ('\U0001F46E\U0001F3FC\u200D\u2642',)),
        ('\U0001F46E\U0001F3FD\u200D\u2642\uFE0F', 'man police officer: medium skin tone', '4.0', 'MEDIUM', ('man_police_officer_tone3', 'man_police_officer_medium_skin_tone'), ('\U0001F46E\U0001F3FD\u200D\u2642',)),
        ('\U0001F46E\U0001F3FE\u200D\u2642\uFE0F', 'man police officer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_police_officer_tone4', 'man_police_officer_medium_dark_skin_tone'), ('\U0001F46E\U0001F3FE\u200D\u2642',)),
        ('\U0001F46E\U0001F3FF\u200D\u2642\uFE0F', 'man police officer: dark skin tone', '4.0', 'DARK', ('man_police_officer_tone5', 'man_police_officer_dark_skin_tone'), ('\U0001F46E\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F46E\u200D\u2640\uFE0F', 'woman police officer', 'People & Body', 'person-role', '4.0', ('woman_police_officer',), ('\U0001F46E\u200D\u2640',), (
        ('\U0001F46E\U0001F3FB\u200D\u2640\uFE0F', 'woman police officer: light skin tone', '4.0', 'LIGHT', ('woman_police_officer_tone1', 'woman_police_officer_light_skin_tone'), ('\U0001F46E\U0001F3FB\u200D\u2640',)),
        ('\U0001F46E\U0001F3FC\u200D\u2640\uFE0F', 'woman police officer: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_police_officer_tone2', 'woman_police_officer_medium_light_skin_tone'), ('\U0001F46E\U0001F3FC\u200D\u2640',)),
        ('\U0001F46E\U0001F3FD\u200D\u2640\uFE0F', 'woman police officer: medium skin tone', '4.0', 'MEDIUM', ('woman_police_officer_tone3', 'woman_police_officer_medium_skin_tone'), ('\U0001F46E\U0001F3FD\u200D\u2640',)),
        ('\U0001F46E\U0001F3FE\u200D\u2640\uFE0F', 'woman police officer: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_police_officer_tone4', 'woman_police_officer_medium_dark_skin_tone'), ('\U0001F46E\U0001F3FE\u200D\u2640',)),
        ('\U0001F46E\U0001F3FF\u200D\u2640\uFE0F', 'woman police officer: dark skin tone', '4.0', 'DARK', ('woman_police_officer_tone5', 'woman_police_officer_dark_skin_tone'), ('\U0001F46E\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F575\uFE0F', 'detective', 'People & Body', 'person-role', '0.7', ('detective', 'sleuth_or_spy', 'spy'), ('\U0001F575',), (
        ('\U0001F575\U0001F3FB', 'detective: light skin tone', '2.0', 'LIGHT', ('detective_tone1', 'sleuth_or_spy_tone1', 'spy_tone1'), ()),
        ('\U0001F575\U0001F3FC', 'detective: medium-light skin tone', '2.0', 'MEDIUM_LIGHT', ('detective_tone2', 'sleuth_or_spy_tone2', 'spy_tone2'), ()),
        ('\U0001F575\U0001F3FD', 'detective: medium skin tone', '2.0', 'MEDIUM', ('detective_tone3', 'sleuth_or_spy_tone3', 'spy_tone3'), ()),
        ('\U0001F575\U0001F3FE', 'detective: medium-dark skin tone', '2.0', 'MEDIUM_DARK', ('detective_tone4', 'sleuth_or_spy_tone4', 'spy_tone4'), ()),
        ('\U0001F575\U0001F3FF', 'detective: dark skin tone', '2.0', 'DARK', ('detective_tone5', 'sleuth_or_spy_tone5', 'spy_tone5'), ()),
    )),
    ('\U0001F575\uFE0F\u200D\u2642\uFE0F', 'man detective', 'People & Body', 'person-role', '4.0', ('man_detective',), ('\U0001F575\u200D\u2642\uFE0F', '\U0001F575\uFE0F\u200D\u2642', '\U0001F575\u200D\u2642'), (
        ('\U0001F575\U0001F3FB\u200D\u2642\uFE0F', 'man detective: light skin tone', '4.0', 'LIGHT', ('man_detective_tone1', 'man_detective_light_skin_tone'), ('\U0001F575\U0001F3FB\u200D\u2642',)),
        ('\U0001F575\U0001F3FC\u200D\u2642\uFE0F', 'man detective: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_detective_tone2', 'man_detective_medium_light_skin_tone'), ('\U0001F575\U0001F3FC\u200D\u2642',)),
        ('\U0001F575\U0001F3FD\u200D\u2642\uFE0F', 'man detective: medium skin tone', '4.0', 'MEDIUM', ('man_detective_tone3', 'man_detective_medium_skin_tone'), ('\U0001F575\U0001F3FD\u200D\u2642',)),
        ('\U0001F575\U0001F3FE\u200D\u2642\uFE0F', 'man detective: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_detective_tone4', 'man_detective_medium_dark_skin_tone'), ('\U0001F575\U0001F3FE\u200D\u2642',)),
        ('\U0001F575\U0001F3FF\u200D\u2642\uFE0F', 'man detective: dark skin tone', '4.0', 'DARK', ('man_detective_tone5', 'man_detective_dark_skin_tone'), ('\U0001F575\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F575\uFE0F\u200D\u2640\uFE0F', 'woman detective', 'People & Body', 'person-role', '4.0', ('woman_detective',), ('\U0001F575\u200D\u2640\uFE0F', '\U0001F575\uFE0F\u200D\u2640', '\U0001F575\u200D\u2640'), (
        ('\U0001F575\U0001F3FB\u200D\u2640\uFE0F', 'woman detective: light skin tone', '4.0', 'LIGHT', ('woman_detective_tone1', 'woman_detective_light_skin_tone'), ('\U0001F575\U0001F3FB\u200D\u2640',)),
        ('\U0001F575\U0001F3FC\u200D\u2640\uFE0F', 'woman detective: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_detective_tone2', 'woman_detective_medium_light_skin_tone'), ('\U0001F575\U0001F3FC\u200D\u2640',)),
        ('\U0001F575\U0001F3FD\u200D\u2640\uFE0F', 'woman detective: medium skin tone', '4.0', 'MEDIUM', ('woman_detective_tone3', 'woman_detective_medium_skin_tone'), ('\U0001F575\U0001F3FD\u200D\u2640',)),
        ('\U0001F575\U0001F3FE\u200D\u2640\uFE0F', 'woman detective: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_detective_tone4', 'woman_detective_medium_dark_skin_tone'), ('\U0001F575\U0001F3FE\u200D\u2640',)),
        ('\U0001F575\U0001F3FF\u200D\u2640\uFE0F', 'woman detective: dark skin tone', '4.0', 'DARK', ('woman_detective_tone5', 'woman_detective_dark_skin_tone'), ('\U0001F575\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F482', 'guard', 'People & Body', 'person-role', '0.6', ('guard', 'guardsman'), (), (
        ('\U0001F482\U0001F3FB', 'guard: light skin tone', '1.0', 'LIGHT', ('guard_tone1', 'guardsman_tone1'), ()),
        ('\U0001F482\U0001F3FC', 'guard: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('guard_tone2', 'guardsman_tone2'), ()),
        ('\U0001F482\U0001F3FD', 'guard: medium skin tone', '1.0', 'MEDIUM', ('guard_tone3', 'guardsman_tone3'), ()),
        ('\U0001F482\U0001F3FE', 'guard: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('guard_tone4', 'guardsman_tone4'), ()),
        ('\U0001F482\U0001F3FF', 'guard: dark skin tone', '1.0', 'DARK', ('guard_tone5', 'guardsman_tone5'), ()),
    )),
    ('\U0001F482\u200D\u2642\uFE0F', 'man guard', 'People & Body', 'person-role', '4.0', ('man_guard',), ('\U0001F482\u200D\u2642',), (
        ('\U0001F482\U0001F3FB\u200D\u2642\uFE0F', 'man guard: light skin tone', '4.0', 'LIGHT', ('man_guard_tone1', 'man_guard_light_skin_tone'), ('\U0001F482\U0001F3FB\u200D\u2642',)),
        ('\U0001F482\U0001F3FC\u200D\u2642\uFE0F', 'man guard: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_guard_tone2', 'man_guard_medium_light_skin_tone'), ('\U0001F482\U0001F3FC\u200D\u2642',)),
        ('\U0001F482\U0001F3FD\u200D\u2642\uFE0F', 'man guard: medium skin tone', '4.0', 'MEDIUM', ('man_guard_tone3', 'man_guard_medium_skin_tone'), ('\U0001F482\U0001F3FD\u200D\u2642',)),
        ('\U0001F482\U0001F3FE\u200D\u2642\uFE0F', 'man guard: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_guard_tone4', 'man_guard_medium_dark_skin_tone'), ('\U0001F482\U0001F3FE\u200D\u2642',)),
        ('\U0001F482\U0001F3FF\u200D\u2642\uFE0F', 'man guard: dark skin tone', '4.0', 'DARK', ('man_guard_tone5', 'man_guard_dark_skin_tone'), ('\U0001F482\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F482\u200D\u2640\uFE0F', 'woman guard', 'People & Body', 'person-role', '4.0', ('woman_guard',), ('\U0001F482\u200D\u2640',), (
        ('\U0001F482\U0001F3FB\u200D\u2640\uFE0F', 'woman guard: light skin tone', '4.0', 'LIGHT', ('woman_guard_tone1', 'woman_guard_light_skin_tone'), ('\U0001F482\U0001F3FB\u200D\u2640',)),
        ('\U0001F482\U0001F3FC\u200D\u2640\uFE0F', 'woman guard: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_guard_tone2', 'woman_guard_medium_light_skin_tone'), ('\U0001F482\U0001F3FC\u200D\u2640',)),
        ('\U0001F482\U0001F3FD\u200D\u2640\uFE0F', 'woman guard: medium skin tone', '4.0', 'MEDIUM', ('woman_guard_tone3', 'woman_guard_medium_skin_tone'), ('\U0001F482\U0001F3FD\u200D\u2640',)),
        ('\U0001F482\U0001F3FE\u200D\u2640\uFE0F', 'woman guard: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_guard_tone4', 'woman_guard_medium_dark_skin_tone'), ('\U0001F482\U0001F3FE\u200D\u2640',)),
        ('\U0001F482\U0001F3FF\u200D\u2640\uFE0F', 'woman guard: dark skin tone', '4.0', 'DARK', ('woman_guard_tone5', 'woman_guard_dark_skin_tone'), ('\U0001F482\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F977', 'ninja', 'People & Body', 'person-role', '13.0', ('ninja',), (), (
        ('\U0001F977\U0001F3FB', 'ninja: light skin tone', '13.0', 'LIGHT', ('ninja_light_skin_tone',), ()),
        ('\U0001F977\U0001F3FC', 'ninja: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('ninja_medium-light_skin_tone',), ()),
        ('\U0001F977\U0001F3FD', 'ninja: medium skin tone', '13.0', 'MEDIUM', ('ninja_medium_skin_tone',), ()),
        ('\U0001F977\U0001F3FE', 'ninja: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('ninja_medium-dark_skin_tone',), ()),
        ('\U0001F977\U0001F3FF', 'ninja: dark skin tone', '13.0', 'DARK', ('ninja_dark_skin_tone',), ()),
    )),
    ('\U0001F477', 'construction worker', 'People & Body', 'person-role', '0.6', ('construction_worker',), (), (
        ('\U0001F477\U0001F3FB', 'construction worker: light skin tone', '1.0', 'LIGHT', ('construction_worker_tone1',), ()),
        ('\U0001F477\U0001F3FC', 'construction worker: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('construction_worker_tone2',), ()),
        ('\U0001F477\U0001F3FD', 'construction worker: medium skin tone', '1.0', 'MEDIUM', ('construction_worker_tone3',), ()),
        ('\U0001F477\U0001F3FE', 'construction worker: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('construction_worker_tone4',), ()),
        ('\U0001F477\U0001F3FF', 'construction worker: dark skin tone', '1.0', 'DARK', ('construction_worker_tone5',), ()),
    )),
    ('\U0001F477\u200D\u2642\uFE0F', 'man construction worker', 'People & Body', 'person-role', '4.0', ('man_construction_worker',), ('\U0001F477\u200D\u2642',), (
        ('\U0001F477\U0001F3FB\u200D\u2642\uFE0F', 'man construction worker: light skin tone', '4.0', 'LIGHT', ('man_construction_worker_tone1', 'man_construction_worker_light_skin_tone'), ('\U0001F477\U0001F3FB\u200D\u2642',)),
        ('\U0001F477\U0001F3FC\u200D\u2642\uFE0F', 'man construction worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_construction_worker_tone2', 'man_construction_worker_medium_light_skin_tone'), ('\U0001F477\U0001F3FC\u200D\u2642',)),
        ('\U0001F477\U0001F3FD\u200D\u2642\uFE0F', 'man construction worker: medium skin tone', '4.0', 'MEDIUM', ('man_construction_worker_tone3', 'man_construction_worker_medium_skin_tone'), ('\U0001F477\U0001F3FD\u200D\u2642',)),
        ('\U0001F477\U0001F3FE\u200D\u2642\uFE0F', 'man construction worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_construction_worker_tone4', 'man_construction_worker_medium_dark_skin_tone'), ('\U0001F477\U0001F3FE\u200D\u2642',)),
        ('\U0001F477\U0001F3FF\u200D\u2642\uFE0F', 'man construction worker: dark skin tone', '4.0', 'DARK', ('man_construction_worker_tone5', 'man_construction_worker_dark_skin_tone'), ('\U0001F477\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F477\u200D\u2640\uFE0F', 'woman construction worker', 'People & Body', 'person-role', '4.0', ('woman_construction_worker',), ('\U0001F477\u200D\u2640',), (
        ('\U0001F477\U0001F3FB\u200D\u2640\uFE0F', 'woman construction worker: light skin tone', '4.0', 'LIGHT', ('woman_construction_worker_tone1', 'woman_construction_worker_light_skin_tone'), ('\U0001F477\U0001F3FB\u200D\u2640',)),
        ('\U0001F477\U0001F3FC\u200D\u2640\uFE0F', 'woman construction worker: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_construction_worker_tone2', 'woman_construction_worker_medium_light_skin_tone'), ('\U0001F477\U0001F3FC\u200D\u2640',)),
        ('\U0001F477\U0001F3FD\u200D\u2640\uFE0F', 'woman construction worker: medium skin tone', '4.0', 'MEDIUM', ('woman_construction_worker_tone3', 'woman_construction_worker_medium_skin_tone'), ('\U0001F477\U0001F3FD\u200D\u2640',)),
        ('\U0001F477\U0001F3FE\u200D\u2640\uFE0F', 'woman construction worker: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_construction_worker_tone4', 'woman_construction_worker_medium_dark_skin_tone'), ('\U0001F477\U0001F3FE\u200D\u2640',)),
        ('\U0001F477\U0001F3FF\u200D\u2640\uFE0F', 'woman construction worker: dark skin tone', '4.0', 'DARK', ('woman_construction_worker_tone5', 'woman_construction_worker_dark_skin_tone'), ('\U0001F477\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001FAC5', 'person with crown', 'People & Body', 'person-role', '14.0', ('person_with_crown',), (), (
        ('\U0001FAC5\U0001F3FB', 'person with crown: light skin tone', '14.0', 'LIGHT', ('person_with_crown_light_skin_tone',), ()),
        ('\U0001FAC5\U0001F3FC', 'person with crown: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('person_with_crown_medium-light_skin_tone',), ()),
        ('\U0001FAC5\U0001F3FD', 'person with crown: medium skin tone', '14.0', 'MEDIUM', ('person_with_crown_medium_skin_tone',), ()),
        ('\U0001FAC5\U0001F3FE', 'person with crown: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('person_with_crown_medium-dark_skin_tone',), ()),
        ('\U0001FAC5\U0001F3FF', 'person with crown: dark skin tone', '14.0', 'DARK', ('person_with_crown_dark_skin_tone',), ()),
    )),
    ('\U0001F934', 'prince', 'People & Body', 'person-role', '3.0', ('prince',), (), (
        ('\U0001F934\U0001F3FB', 'prince: light skin tone', '3.0', 'LIGHT', ('prince_tone1',), ()),
        ('\U0001F934\U0001F3FC', 'prince: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('prince_tone2',), ()),
        ('\U0001F934\U0001F3FD', 'prince: medium skin tone', '3.0', 'MEDIUM', ('prince_tone3',), ()),
        ('\U0001F934\U0001F3FE', 'prince: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('prince_tone4',), ()),
        ('\U0001F934\U0001F3FF', 'prince: dark skin tone', '3.0', 'DARK', ('prince_tone5',), ()),
    )),
    ('\U0001F478', 'princess', 'People & Body', 'person-role', '0.6', ('princess',), (), (
        ('\U0001F478\U0001F3FB', 'princess: light skin tone', '1.0', 'LIGHT', ('princess_tone1',), ()),
        ('\U0001F478\U0001F3FC', 'princess: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('princess_tone2',), ()),
        ('\U0001F478\U0001F3FD', 'princess: medium skin tone', '1.0', 'MEDIUM', ('princess_tone3',), ()),
        ('\U0001F478\U0001F3FE', 'princess: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('princess_tone4',), ()),
        ('\U0001F478\U0001F3FF', 'princess: dark skin tone', '1.0', 'DARK', ('princess_tone5',), ()),
    )),
    ('\U0001F473', 'person wearing turban', 'People & Body', 'person-role', '0.6', ('person_wearing_turban', 'man_with_turban'), (), (
        ('\U0001F473\U0001F3FB', 'person wearing turban: light skin tone', '1.0', 'LIGHT', ('person_wearing_turban_tone1', 'man_with_turban_tone1'), ()),
        ('\U0001F473\U0001F3FC', 'person wearing turban: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_wearing_turban_tone2', 'man_with_turban_tone2'), ()),
        ('\U0001F473\U0001F3FD', 'person wearing turban: medium skin tone', '1.0', 'MEDIUM', ('person_wearing_turban_tone3', 'man_with_turban_tone3'), ()),
        ('\U0001F473\U0001F3FE', 'person wearing turban: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_wearing_turban_tone4', 'man_with_turban_tone4'), ()),
        ('\U0001F473\U0001F3FF', 'person wearing turban: dark skin tone', '1.0', 'DARK', ('person_wearing_turban_tone5', 'man_with_turban_tone5'), ()),
    )),
    ('\U0001F473\u200D\u2642\uFE0F', 'man wearing turban', 'People & Body', 'person-role', '4.0', ('man_wearing_turban',), ('\U0001F473\u200D\u2642',), (
        ('\U0001F473\U0001F3FB\u200D\u2642\uFE0F', 'man wearing turban: light skin tone', '4.0', 'LIGHT', ('man_wearing_turban_tone1', 'man_wearing_turban_light_skin_tone'), ('\U0001F473\U0001F3FB\u200D\u2642',)),
        ('\U0001F473\U0001F3FC\u200D\u2642\uFE0F', 'man wearing turban: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_wearing_turban_tone2', 'man_wearing_turban_medium_light_skin_tone'), ('\U0001F473\U0001F3FC\u200D\u2642',)),
        ('\U0001F473\U0001F3FD\u200D\u2642\uFE0F', 'man wearing turban: medium skin tone', '4.0', 'MEDIUM', ('man_wearing_turban_tone3', 'man_wearing_turban_medium_skin_tone'), ('\U0001F473\U0001F3FD\u200D\u2642',)),
        ('\U0001F473\U0001F3FE\u200D\u2642\uFE0F', 'man wearing turban: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_wearing_turban_tone4', 'man_wearing_turban_medium_dark_skin_tone'), ('\U0001F473\U0001F3FE\u200D\u2642',)),
        ('\U0001F473\U0001F3FF\u200D\u2642\uFE0F', 'man wearing turban: dark skin tone', '4.0', 'DARK', ('man_wearing_turban_tone5', 'man_wearing_turban_dark_skin_tone'), ('\U0001F473\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F473\u200D\u2640\uFE0F', 'woman wearing turban', 'People & Body', 'person-role', '4.0', ('woman_wearing_turban',), ('\U0001F473\u200D\u2640',), (
        ('\U0001F473\U0001F3FB\u200D\u2640\uFE0F', 'woman wearing turban: light skin tone', '4.0', 'LIGHT', ('woman_wearing_turban_tone1', 'woman_wearing_turban_light_skin_tone'), ('\U0001F473\U0001F3FB\u200D\u2640',)),
        ('\U0001F473\U0001F3FC\u200D\u2640\uFE0F', 'woman wearing turban: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_wearing_turban_tone2', 'woman_wearing_turban_medium_light_skin_tone'), ('\U0001F473\U0001F3FC\u200D\u2640',)),
        ('\U0001F473\U0001F3FD\u200D\u2640\uFE0F', 'woman wearing turban: medium skin tone', '4.0', 'MEDIUM', ('woman_wearing_turban_tone3', 'woman_wearing_turban_medium_skin_tone'), ('\U0001F473\U0001F3FD\u200D\u2640',)),
        ('\U0001F473\U0001F3FE\u200D\u2640\uFE0F', 'woman wearing turban: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_wearing_turban_tone4', 'woman_wearing_turban_medium_dark_skin_tone'), ('\U0001F473\U0001F3FE\u200D\u2640',)),
        ('\U0001F473\U0001F3FF\u200D\u2640\uFE0F', 'woman wearing turban: dark skin tone', '4.0', 'DARK', ('woman_wearing_turban_tone5', 'woman_wearing_turban_dark_skin_tone'), ('\U0001F473\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F472', 'person with skullcap', 'People & Body', 'person-role', '0.6', ('man_with_chinese_cap', 'man_with_gua_pi_mao'), (), (
        ('\U0001F472\U0001F3FB', 'person with skullcap: light skin tone', '1.0', 'LIGHT', ('man_with_chinese_cap_tone1', 'man_with_gua_pi_mao_tone1'), ()),
        ('\U0001F472\U0001F3FC', 'person with skullcap: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('man_with_chinese_cap_tone2', 'man_with_gua_pi_mao_tone2'), ()),
        ('\U0001F472\U0001F3FD', 'person with skullcap: medium skin tone', '1.0', 'MEDIUM', ('man_with_chinese_cap_tone3', 'man_with_gua_pi_mao_tone3'), ()),
        ('\U0001F472\U0001F3FE', 'person with skullcap: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('man_with_chinese_cap_tone4', 'man_with_gua_pi_mao_tone4'), ()),
        ('\U0001F472\U0001F3FF', 'person with skullcap: dark skin tone', '1.0', 'DARK', ('man_with_chinese_cap_tone5', 'man_with_gua_pi_mao_tone5'), ()),
    )),
    ('\U0001F9D5', 'woman with headscarf', 'People & Body', 'person-role', '5.0', ('woman_with_headscarf',), (), (
        ('\U0001F9D5\U0001F3FB', 'woman with headscarf: light skin tone', '5.0', 'LIGHT', ('woman_with_headscarf_tone1', 'woman_with_headscarf_light_skin_tone'), ()),
        ('\U0001F9D5\U0001F3FC', 'woman with headscarf: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_with_headscarf_tone2', 'woman_with_headscarf_medium_light_skin_tone'), ()),
        ('\U0001F9D5\U0001F3FD', 'woman with headscarf: medium skin tone', '5.0', 'MEDIUM', ('woman_with_headscarf_tone3', 'woman_with_headscarf_medium_skin_tone'), ()),
        ('\U0001F9D5\U0001F3FE', 'woman with headscarf: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_with_headscarf_tone4', 'woman_with_headscarf_medium_dark_skin_tone'), ()),
        ('\U0001F9D5\U0001F3FF', 'woman with headscarf: dark skin tone', '5.0', 'DARK', ('woman_with_headscarf_tone5', 'woman_with_headscarf_dark_skin_tone'), ()),
    )),
    ('\U0001F935', 'person in tuxedo', 'People & Body', 'person-role', '3.0', ('man_in_tuxedo',), (), (
        ('\U0001F935\U0001F3FB', 'person in tuxedo: light skin tone', '3.0', 'LIGHT', ('man_in_tuxedo_tone1', 'tuxedo_tone1'), ()),
        ('\U0001F935\U0001F3FC', 'person in tuxedo: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('man_in_tuxedo_tone2', 'tuxedo_tone2'), ()),
        ('\U0001F935\U0001F3FD', 'person in tuxedo: medium skin tone', '3.0', 'MEDIUM', ('man_in_tuxedo_tone3', 'tuxedo_tone3'), ()),
        ('\U0001F935\U0001F3FE', 'person in tuxedo: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('man_in_tuxedo_tone4', 'tuxedo_tone4'), ()),
        ('\U0001F935\U0001F3FF', 'person in tuxedo: dark skin tone', '3.0', 'DARK', ('man_in_tuxedo_tone5', 'tuxedo_tone5'), ()),
    )),
    ('\U0001F935\u200D\u2642\uFE0F', 'man in tuxedo', 'People & Body', 'person-role', '13.0', (), ('\U0001F935\u200D\u2642',), (
        ('\U0001F935\U0001F3FB\u200D\u2642\uFE0F', 'man in tuxedo: light skin tone', '13.0', 'LIGHT', ('man_in_tuxedo_light_skin_tone',), ('\U0001F935\U0001F3FB\u200D\u2642',)),
        ('\U0001F935\U0001F3FC\u200D\u2642\uFE0F', 'man in tuxedo: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('man_in_tuxedo_medium-light_skin_tone',), ('\U0001F935\U0001F3FC\u200D\u2642',)),
        ('\U0001F935\U0001F3FD\u200D\u2642\uFE0F', 'man in tuxedo: medium skin tone', '13.0', 'MEDIUM', ('man_in_tuxedo_medium_skin_tone',), ('\U0001F935\U0001F3FD\u200D\u2642',)),
        ('\U0001F935\U0001F3FE\u200D\u2642\uFE0F', 'man in tuxedo: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('man_in_tuxedo_medium-dark_skin_tone',), ('\U0001F935\U0001F3FE\u200D\u2642',)),
        ('\U0001F935\U0001F3FF\u200D\u2642\uFE0F', 'man in tuxedo: dark skin tone', '13.0', 'DARK', ('man_in_tuxedo_dark_skin_tone',), ('\U0001F935\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F935\u200D\u2640\uFE0F', 'woman in tuxedo', 'People & Body', 'person-role', '13.0', ('woman_in_tuxedo',), ('\U0001F935\u200D\u2640',), (
        ('\U0001F935\U0001F3FB\u200D\u2640\uFE0F', 'woman in tuxedo: light skin tone', '13.0', 'LIGHT', ('woman_in_tuxedo_light_skin_tone',), ('\U0001F935\U0001F3FB\u200D\u2640',)),
        ('\U0001F935\U0001F3FC\u200D\u2640\uFE0F', 'woman in tuxedo: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('woman_in_tuxedo_medium-light_skin_tone',), ('\U0001F935\U0001F3FC\u200D\u2640',)),
        ('\U0001F935\U0001F3FD\u200D\u2640\uFE0F', 'woman in tuxedo: medium skin tone', '13.0', 'MEDIUM', ('woman_in_tuxedo_medium_skin_tone',), ('\U0001F935\U0001F3FD\u200D\u2640',)),
        ('\U0001F935\U0001F3FE\u200D\u2640\uFE0F', 'woman in tuxedo: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('woman_in_tuxedo_medium-dark_skin_tone',), ('\U0001F935\U0001F3FE\u200D\u2640',)),
        ('\U0001F935\U0001F3FF\u200D\u2640\uFE0F', 'woman in tuxedo: dark skin tone', '13.0', 'DARK', ('woman_in_tuxedo_dark_skin_tone',), ('\U0001F935\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F470', 'person with veil', 'People & Body', 'person-role', '0.6', ('bride_with_veil',), (), (
        ('\U0001F470\U0001F3FB', 'person with veil: light skin tone', '1.0', 'LIGHT', ('bride_with_veil_tone1',), ()),
        ('\U0001F470\U0001F3FC', 'person with veil: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('bride_with_veil_tone2',), ()),
        ('\U0001F470\U0001F3FD', 'person with veil: medium skin tone', '1.0', 'MEDIUM', ('bride_with_veil_tone3',), ()),
        ('\U0001F470\U0001F3FE', 'person with veil: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('bride_with_veil_tone4',), ()),
        ('\U0001F470\U0001F3FF', 'person with veil: dark skin tone', '1.0', 'DARK', ('bride_with_veil_tone5',), ()),
    )),
    ('\U0001F470\u200D\u2642\uFE0F', 'man with veil', 'People & Body', 'person-role', '13.0', ('man_with_veil',), ('\U0001F470\u200D\u2642',), (
        ('\U0001F470\U0001F3FB\u200D\u2642\uFE0F', 'man with veil: light skin tone', '13.0', 'LIGHT', ('man_with_veil_light_skin_tone',), ('\U0001F470\U0001F3FB\u200D\u2642',)),
        ('\U0001F470\U0001F3FC\u200D\u2642\uFE0F', 'man with veil: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('man_with_veil_medium-light_skin_tone',), ('\U0001F470\U0001F3FC\u200D\u2642',)),
        ('\U0001F470\U0001F3FD\u200D\u2642\uFE0F', 'man with veil: medium skin tone', '13.0', 'MEDIUM', ('man_with_veil_medium_skin_tone',), ('\U0001F470\U0001F3FD\u200D\u2642',)),
        ('\U0001F470\U0001F3FE\u200D\u2642\uFE0F', 'man with veil: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('man_with_veil_medium-dark_skin_tone',), ('\U0001F470\U0001F3FE\u200D\u2642',)),
        ('\U0001F470\U0001F3FF\u200D\u2642\uFE0F', 'man with veil: dark skin tone', '13.0', 'DARK', ('man_with_veil_dark_skin_tone',), ('\U0001F470\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F470\u200D\u2640\uFE0F', 'woman with veil', 'People & Body', 'person-role', '13.0', ('woman_with_veil',), ('\U0001F470\u200D\u2640',), (
        ('\U0001F470\U0001F3FB\u200D\u2640\uFE0F', 'woman with veil: light skin tone', '13.0', 'LIGHT', ('woman_with_veil_light_skin_tone',), ('\U0001F470\U0001F3FB\u200D\u2640',)),
        ('\U0001F470\U0001F3FC\u200D\u2640\uFE0F', 'woman with veil: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('woman_with_veil_medium-light_skin_tone',), ('\U0001F470\U0001F3FC\u200D\u2640',)),
        ('\U0001F470\U0001F3FD\u200D\u2640\uFE0F', 'woman with veil: medium skin tone', '13.0', 'MEDIUM', ('woman_with_veil_medium_skin_tone',), ('\U0001F470\U0001F3FD\u200D\u2640',)),
        ('\U0001F470\U0001F3FE\u200D\u2640\uFE0F', 'woman with veil: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('woman_with_veil_medium-dark_skin_tone',), ('\U0001F470\U0001F3FE\u200D\u2640',)),
        ('\U0001F470\U0001F3FF\u200D\u2640\uFE0F', 'woman with veil: dark skin tone', '13.0', 'DARK', ('woman_with_veil_dark_skin_tone',), ('\U0001F470\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F930', 'pregnant woman', 'People & Body', 'person-role', '3.0', ('pregnant_woman', 'expecting_woman'), (), (
        ('\U0001F930\U0001F3FB', 'pregnant woman: light skin tone', '3.0', 'LIGHT', ('pregnant_woman_tone1', 'expecting_woman_tone1'), ()),
        ('\U0001F930\U0001F3FC', 'pregnant woman: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('pregnant_woman_tone2', 'expecting_woman_tone2'), ()),
        ('\U0001F930\U0001F3FD', 'pregnant woman: medium skin tone', '3.0', 'MEDIUM', ('pregnant_woman_tone3', 'expecting_woman_tone3'), ()),
        ('\U0001F930\U0001F3FE', 'pregnant woman: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('pregnant_woman_tone4', 'expecting_woman_tone4'), ()),
        ('\U0001F930\U0001F3FF', 'pregnant woman: dark skin tone', '3.0', 'DARK', ('pregnant_woman_tone5', 'expecting_woman_tone5'), ()),
    )),
    ('\U0001FAC3', 'pregnant man', 'People & Body', 'person-role', '14.0', ('pregnant_man',), (), (
        ('\U0001FAC3\U0001F3FB', 'pregnant man: light skin tone', '14.0', 'LIGHT', ('pregnant_man_light_skin_tone',), ()),
        ('\U0001FAC3\U0001F3FC', 'pregnant man: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('pregnant_man_medium-light_skin_tone',), ()),
        ('\U0001FAC3\U0001F3FD', 'pregnant man: medium skin tone', '14.0', 'MEDIUM', ('pregnant_man_medium_skin_tone',), ()),
        ('\U0001FAC3\U0001F3FE', 'pregnant man: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('pregnant_man_medium-dark_skin_tone',), ()),
        ('\U0001FAC3\U0001F3FF', 'pregnant man: dark skin tone', '14.0', 'DARK', ('pregnant_man_dark_skin_tone',), ()),
    )),
    ('\U0001FAC4', 'pregnant person', 'People & Body', 'person-role', '14.0', ('pregnant_person',), (), (
        ('\U0001FAC4\U0001F3FB', 'pregnant person: light skin tone', '14.0', 'LIGHT', ('pregnant_person_light_skin_tone',), ()),
        ('\U0001FAC4\U0001F3FC', 'pregnant person: medium-light skin tone', '14.0', 'MEDIUM_LIGHT', ('pregnant_person_medium-light_skin_tone',), ()),
        ('\U0001FAC4\U0001F3FD', 'pregnant person: medium skin tone', '14.0', 'MEDIUM', ('pregnant_person_medium_skin_tone',), ()),
        ('\U0001FAC4\U0001F3FE', 'pregnant person: medium-dark skin tone', '14.0', 'MEDIUM_DARK', ('pregnant_person_medium-dark_skin_tone',), ()),
        ('\U0001FAC4\U0001F3FF', 'pregnant person: dark skin tone', '14.0', 'DARK', ('pregnant_person_dark_skin_tone',), ()),
    )),
    ('\U0001F931', 'breast-feeding', 'People & Body', 'person-role', '5.0', ('breast_feeding',), (), (
        ('\U0001F931\U0001F3FB', 'breast-feeding: light skin tone', '5.0', 'LIGHT', ('breast_feeding_tone1', 'breast_feeding_light_skin_tone'), ()),
        ('\U0001F931\U0001F3FC', 'breast-feeding: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('breast_feeding_tone2', 'breast_feeding_medium_light_skin_tone'), ()),
        ('\U0001F931\U0001F3FD', 'breast-feeding: medium skin tone', '5.0', 'MEDIUM', ('breast_feeding_tone3', 'breast_feeding_medium_skin_tone'), ()),
        ('\U0001F931\U0001F3FE', 'breast-feeding: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('breast_feeding_tone4', 'breast_feeding_medium_dark_skin_tone'), ()),
        ('\U0001F931\U0001F3FF', 'breast-feeding: dark skin tone', '5.0', 'DARK', ('breast_feeding_tone5', 'breast_feeding_dark_skin_tone'), ()),
    )),
    ('\U0001F469\u200D\U0001F37C', 'woman feeding baby', 'People & Body', 'person-role', '13.0', ('woman_feeding_baby',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F37C', 'woman feeding baby: light skin tone', '13.0', 'LIGHT', ('woman_feeding_baby_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F37C', 'woman feeding baby: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('woman_feeding_baby_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F37C', 'woman feeding baby: medium skin tone', '13.0', 'MEDIUM', ('woman_feeding_baby_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F37C', 'woman feeding baby: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('woman_feeding_baby_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F37C', 'woman feeding baby: dark skin tone', '13.0', 'DARK', ('woman_feeding_baby_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F37C', 'man feeding baby', 'People & Body', 'person-role', '13.0', ('man_feeding_baby',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F37C', 'man feeding baby: light skin tone', '13.0', 'LIGHT', ('man_feeding_baby_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F37C', 'man feeding baby: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('man_feeding_baby_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F37C', 'man feeding baby: medium skin tone', '13.0', 'MEDIUM', ('man_feeding_baby_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F37C', 'man feeding baby: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('man_feeding_baby_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F37C', 'man feeding baby: dark skin tone', '13.0', 'DARK', ('man_feeding_baby_dark_skin_tone',), ()),
    )),
    ('\U0001F9D1\u200D\U0001F37C', 'person feeding baby', 'People & Body', 'person-role', '13.0', ('person_feeding_baby',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F37C', 'person feeding baby: light skin tone', '13.0', 'LIGHT', ('person_feeding_baby_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F37C', 'person feeding baby: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('person_feeding_baby_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F37C', 'person feeding baby: medium skin tone', '13.0', 'MEDIUM', ('person_feeding_baby_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F37C', 'person feeding baby: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('person_feeding_baby_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F37C', 'person feeding baby: dark skin tone', '13.0', 'DARK', ('person_feeding_baby_dark_skin_tone',), ()),
    )),
    ('\U0001F47C', 'baby angel', 'People & Body', 'person-fantasy', '0.6', ('angel',), (), (
        ('\U0001F47C\U0001F3FB', 'baby angel: light skin tone', '1.0', 'LIGHT', ('angel_tone1',), ()),
        ('\U0001F47C\U0001F3FC', 'baby angel: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('angel_tone2',), ()),
        ('\U0001F47C\U0001F3FD', 'baby angel: medium skin tone', '1.0', 'MEDIUM', ('angel_tone3',), ()),
        ('\U0001F47C\U0001F3FE', 'baby angel: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('angel_tone4',), ()),
        ('\U0001F47C\U0001F3FF', 'baby angel: dark skin tone', '1.0', 'DARK', ('angel_tone5',), ()),
    )),
    ('\U0001F385', 'Santa Claus', 'People & Body', 'person-fantasy', '0.6', ('santa',), (), (
        ('\U0001F385\U0001F3FB', 'Santa Claus: light skin tone', '1.0', 'LIGHT', ('santa_tone1',), ()),
        ('\U0001F385\U0001F3FC', 'Santa Claus: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('santa_tone2',), ()),
        ('\U0001F385\U0001F3FD', 'Santa Claus: medium skin tone', '1.0', 'MEDIUM', ('santa_tone3',), ()),
        ('\U0001F385\U0001F3FE', 'Santa Claus: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('santa_tone4',), ()),
        ('\U0001F385\U0001F3FF', 'Santa Claus: dark skin tone', '1.0', 'DARK', ('santa_tone5',), ()),
    )),
    ('\U0001F936', 'Mrs. Claus', 'People & Body', 'person-fantasy', '3.0', ('mrs_claus', 'mother_christmas'), (), (
        ('\U0001F936\U0001F3FB', 'Mrs. Claus: light skin tone', '3.0', 'LIGHT', ('mrs_claus_tone1', 'mother_christmas_tone1'), ()),
        ('\U0001F936\U0001F3FC', 'Mrs. Claus: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('mrs_claus_tone2', 'mother_christmas_tone2'), ()),
        ('\U0001F936\U0001F3FD', 'Mrs. Claus: medium skin tone', '3.0', 'MEDIUM', ('mrs_claus_tone3', 'mother_christmas_tone3'), ()),
        ('\U0001F936\U0001F3FE', 'Mrs. Claus: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('mrs_claus_tone4', 'mother_christmas_tone4'), ()),
        ('\U0001F936\U0001F3FF', 'Mrs. Claus: dark skin tone', '3.0', 'DARK', ('mrs_claus_tone5', 'mother_christmas_tone5'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F384', 'mx claus', 'People & Body', 'person-fantasy', '13.0', ('mx_claus',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F384', 'mx claus: light skin tone', '13.0', 'LIGHT', ('mx_claus_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F384', 'mx claus: medium-light skin tone', '13.0', 'MEDIUM_LIGHT', ('mx_claus_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F384', 'mx claus: medium skin tone', '13.0', 'MEDIUM', ('mx_claus_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F384', 'mx claus: medium-dark skin tone', '13.0', 'MEDIUM_DARK', ('mx_claus_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F384', 'mx claus: dark skin tone', '13.0', 'DARK', ('mx_claus_dark_skin_tone',), ()),
    )),
    ('\U0001F9B8', 'superhero', 'People & Body', 'person-fantasy', '11.0', ('superhero',), (), (
        ('\U0001F9B8\U0001F3FB', 'superhero: light skin tone', '11.0', 'LIGHT', ('superhero_tone1', 'superhero_light_skin_tone'), ()),
        ('\U0001F9B8\U0001F3FC', 'superhero: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('superhero_tone2', 'superhero_medium_light_skin_tone'), ()),
        ('\U0001F9B8\U0001F3FD', 'superhero: medium skin tone', '11.0', 'MEDIUM', ('superhero_tone3', 'superhero_medium_skin_tone'), ()),
        ('\U0001F9B8\U0001F3FE', 'superhero: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('superhero_tone4', 'superhero_medium_dark_skin_tone'), ()),
        ('\U0001F9B8\U0001F3FF', 'superhero: dark skin tone', '11.0', 'DARK', ('superhero_tone5', 'superhero_dark_skin_tone'), ()),
    )),
    ('\U0001F9B8\u200D\u2642\uFE0F', 'man superhero', 'People & Body', 'person-fantasy', '11.0', ('man_superhero',), ('\U0001F9B8\u200D\u2642',), (
        ('\U0001F9B8\U0001F3FB\u200D\u2642\uFE0F', 'man superhero: light skin tone', '11.0', 'LIGHT', ('man_superhero_tone1', 'man_superhero_light_skin_tone'), ('\U0001F9B8\U0001F3FB\u200D\u2642',)),
        ('\U0001F9B8\U0001F3FC\u200D\u2642\uFE0F', 'man superhero: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('man_superhero_tone2', 'man_superhero_medium_light_skin_tone'), ('\U0001F9B8\U0001F3FC\u200D\u2642',)),
        ('\U0001F9B8\U0001F3FD\u200D\u2642\uFE0F', 'man superhero: medium skin tone', '11.0', 'MEDIUM', ('man_superhero_tone3', 'man_superhero_medium_skin_tone'), ('\U0001F9B8\U0001F3FD\u200D\u2642',)),
        ('\U0001F9B8\U0001F3FE\u200D\u2642\uFE0F', 'man superhero: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('man_superhero_tone4', 'man_superhero_medium_dark_skin_tone'), ('\U0001F9B8\U0001F3FE\u200D\u2642',)),
        ('\U0001F9B8\U0001F3FF\u200D\u2642\uFE0F', 'man superhero: dark skin tone', '11.0', 'DARK', ('man_superhero_tone5', 'man_superhero_dark_skin_tone'), ('\U0001F9B8\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9B8\u200D\u2640\uFE0F', 'woman superhero', 'People & Body', 'person-fantasy', '11.0', ('woman_superhero',), ('\U0001F9B8\u200D\u2640',), (
        ('\U0001F9B8\U0001F3FB\u200D\u2640\uFE0F', 'woman superhero: light skin tone', '11.0', 'LIGHT', ('woman_superhero_tone1', 'woman_superhero_light_skin_tone'), ('\U0001F9B8\U0001F3FB\u200D\u2640',)),
        ('\U0001F9B8\U0001F3FC\u200D\u2640\uFE0F', 'woman superhero: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('woman_superhero_tone2', 'woman_superhero_medium_light_skin_tone'), ('\U0001F9B8\U0001F3FC\u200D\u2640',)),
        ('\U0001F9B8\U0001F3FD\u200D\u2640\uFE0F', 'woman superhero: medium skin tone', '11.0', 'MEDIUM', ('woman_superhero_tone3', 'woman_superhero_medium_skin_tone'), ('\U0001F9B8\U0001F3FD\u200D\u2640',)),
        ('\U0001F9B8\U0001F3FE\u200D\u2640\uFE0F', 'woman superhero: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('woman_superhero_tone4', 'woman_superhero_medium_dark_skin_tone'), ('\U0001F9B8\U0001F3FE\u200D\u2640',)),
        ('\U0001F9B8\U0001F3FF\u200D\u2640\uFE0F', 'woman superhero: dark skin tone', '11.0', 'DARK', ('woman_superhero_tone5', 'woman_superhero_dark_skin_tone'), ('\U0001F9B8\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9B9', 'supervillain', 'People & Body', 'person-fantasy', '11.0', ('supervillain',), (), (
        ('\U0001F9B9\U0001F3FB', 'supervillain: light skin tone', '11.0', 'LIGHT', ('supervillain_tone1', 'supervillain_light_skin_tone'), ()),
        ('\U0001F9B9\U0001F3FC', 'supervillain: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('supervillain_tone2', 'supervillain_medium_light_skin_tone'), ()),
        ('\U0001F9B9\U0001F3FD', 'supervillain: medium skin tone', '11.0', 'MEDIUM', ('supervillain_tone3', 'supervillain_medium_skin_tone'), ()),
        ('\U0001F9B9\U0001F3FE', 'supervillain: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('supervillain_tone4', 'supervillain_medium_dark_skin_tone'), ()),
        ('\U0001F9B9\U0001F3FF', 'supervillain: dark skin tone', '11.0', 'DARK', ('supervillain_tone5', 'supervillain_dark_skin_tone'), ()),
    )),
    ('\U0001F9B9\u200D\u2642\uFE0F', 'man supervillain', 'People & Body', 'person-fantasy', '11.0', ('man_supervillain',), ('\U0001F9B9\u200D\u2642',), (
        ('\U0001F9B9\U0001F3FB\u200D\u2642\uFE0F', 'man supervillain: light skin tone', '11.0', 'LIGHT', ('man_supervillain_tone1', 'man_supervillain_light_skin_tone'), ('\U0001F9B9\U0001F3FB\u200D\u2642',)),
        ('\U0001F9B9\U0001F3FC\u200D\u2642\uFE0F', 'man supervillain: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('man_supervillain_tone2', 'man_supervillain_medium_light_skin_tone'), ('\U0001F9B9\U0001F3FC\u200D\u2642',)),
        ('\U0001F9B9\U0001F3FD\u200D\u2642\uFE0F', 'man supervillain: medium skin tone', '11.0', 'MEDIUM', ('man_supervillain_tone3', 'man_supervillain_medium_skin_tone'), ('\U0001F9B9\U0001F3FD\u200D\u2642',)),
        ('\U0001F9B9\U0001F3FE\u200D\u2642\uFE0F', 'man supervillain: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('man_supervillain_tone4', 'man_supervillain_medium_dark_skin_tone'), ('\U0001F9B9\U0001F3FE\u200D\u2642',)),
        ('\U0001F9B9\U0001F3FF\u200D\u2642\uFE0F', 'man supervillain: dark skin tone', '11.0', 'DARK', ('man_supervillain_tone5', 'man_supervillain_dark_skin_tone'), ('\U0001F9B9\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9B9\u200D\u2640\uFE0F', 'woman supervillain', 'People & Body', 'person-fantasy', '11.0', ('woman_supervillain',), ('\U0001F9B9\u200D\u2640',), (
        ('\U0001F9B9\U0001F3FB\u200D\u2640\uFE0F', 'woman supervillain: light skin tone', '11.0', 'LIGHT', ('woman_supervillain_tone1', 'woman_supervillain_light_skin_tone'), ('\U0001F9B9\U0001F3FB\u200D\u2640',)),
        ('\U0001F9B9\U0001F3FC\u200D\u2640\uFE0F', 'woman supervillain: medium-light skin tone', '11.0', 'MEDIUM_LIGHT', ('woman_supervillain_tone2', 'woman_supervillain_medium_light_skin_tone'), ('\U0001F9B9\U0001F3FC\u200D\u2640',)),
        ('\U0001F9B9\U0001F3FD\u200D\u2640\uFE0F', 'woman supervillain: medium skin tone', '11.0', 'MEDIUM', ('woman_supervillain_tone3', 'woman_supervillain_medium_skin_tone'), ('\U0001F9B9\U0001F3FD\u200D\u2640',)),
        ('\U0001F9B9\U0001F3FE\u200D\u2640\uFE0F', 'woman supervillain: medium-dark skin tone', '11.0', 'MEDIUM_DARK', ('woman_supervillain_tone4', 'woman_supervillain_medium_dark_skin_tone'), ('\U0001F9B9\U0001F3FE\u200D\u2640',)),
        ('\U0001F9B9\U0001F3FF\u200D\u2640\uFE0F', 'woman supervillain: dark skin tone', '11.0', 'DARK', ('woman_supervillain_tone5', 'woman_supervillain_dark_skin_tone'), ('\U0001F9B9\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9D9', 'mage', 'People & Body', 'person-fantasy', '5.0', ('mage',), (), (
        ('\U0001F9D9\U0001F3FB', 'mage: light skin tone', '5.0', 'LIGHT', ('mage_tone1', 'mage_light_skin_tone'), ()),
        ('\U0001F9D9\U0001F3FC', 'mage: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('mage_tone2', 'mage_medium_light_skin_tone'), ()),
        ('\U0001F9D9\U0001F3FD', 'mage: medium skin tone', '5.0', 'MEDIUM', ('mage_tone3', 'mage_medium_skin_tone'), ()),
        ('\U0001F9D9\U0001F3FE', 'mage: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('mage_tone4', 'mage_medium_dark_skin_tone'), ()),
        ('\U0001F9D9\U0001F3FF', 'mage: dark skin tone', '5.0', 'DARK', ('mage_tone5', 'mage_dark_skin_tone'), ()),
    )),
    ('\U0001F9D9\u200D\u2642\uFE0F', 'man mage', 'People & Body', 'person-fantasy', '5.0', ('man_mage',), ('\U0001F9D9\u200D\u2642',), (
        ('\U0001F9D9\U0001F3FB\u200D\u2642\uFE0F', 'man mage: light skin tone', '5.0', 'LIGHT', ('man_mage_tone1', 'man_mage_light_skin_tone'), ('\U0001F9D9\U0001F3FB\u200D\u2642',)),
        ('\U0001F9D9\U0001F3FC\u200D\u2642\uFE0F', 'man mage: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_mage_tone2', 'man_mage_medium_light_skin_tone'), ('\U0001F9D9\U0001F3FC\u200D\u2642',)),
        ('\U0001F9D9\U0001F3FD\u200D\u2642\uFE0F', 'man mage: medium skin tone', '5.0', 'MEDIUM', ('man_mage_tone3', 'man_mage_medium_skin_tone'), ('\U0001F9D9\U0001F3FD\u200D\u2642',)),
        ('\U0001F9D9\U0001F3FE\u200D\u2642\uFE0F', 'man mage: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_mage_tone4', 'man_mage_medium_dark_skin_tone'), ('\U0001F9D9\U0001F3FE\u200D\u2642',)),
        ('\U0001F9D9\U0001F3FF\u200D\u2642\uFE0F', 'man mage: dark skin tone', '5.0', 'DARK', ('man_mage_tone5', 'man_mage_dark_skin_tone'), ('\U0001F9D9\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D9\u200D\u2640\uFE0F', 'woman mage', 'People & Body', 'person-fantasy', '5.0', ('woman_mage',), ('\U0001F9D9\u200D\u2640',), (
        ('\U0001F9D9\U0001F3FB\u200D\u2640\uFE0F', 'woman mage: light skin tone', '5.0', 'LIGHT', ('woman_mage_tone1', 'woman_mage_light_skin_tone'), ('\U0001F9D9\U0001F3FB\u200D\u2640',)),
        ('\U0001F9D9\U0001F3FC\u200D\u2640\uFE0F', 'woman mage: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_mage_tone2', 'woman_mage_medium_light_skin_tone'), ('\U0001F9D9\U0001F3FC\u200D\u2640',)),
        ('\U0001F9D9\U0001F3FD\u200D\u2640\uFE0F', 'woman mage: medium skin tone', '5.0', 'MEDIUM', ('woman_mage_tone3', 'woman_mage_medium_skin_tone'), ('\U0001F9D9\U0001F3FD\u200D\u2640',)),
        ('\U0001F9D9\U0001F3FE\u200D\u2640\uFE0F', 'woman mage: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_mage_tone4', 'woman_mage_medium_dark_skin_tone'), ('\U0001F9D9\U0001F3FE\u200D\u2640',)),
        ('\U0001F9D9\U0001F3FF\u200D\u2640\uFE0F', 'woman mage: dark skin tone', '5.0', 'DARK', ('woman_mage_tone5', 'woman_mage_dark_skin_tone'), ('\U0001F9D9\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9DA', 'fairy', 'People & Body', 'person-fantasy', '5.0', ('fairy',), (), (
        ('\U0001F9DA\U0001F3FB', 'fairy: light skin tone', '5.0', 'LIGHT', ('fairy_tone1', 'fairy_light_skin_tone'), ()),
        ('\U0001F9DA\U0001F3FC', 'fairy: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('fairy_tone2', 'fairy_medium_light_skin_tone'), ()),
        ('\U0001F9DA\U0001F3FD', 'fairy: medium skin tone', '5.0', 'MEDIUM', ('fairy_tone3', 'fairy_medium_skin_tone'), ()),
        ('\U0001F9DA\U0001F3FE', 'fairy: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('fairy_tone4', 'fairy_medium_dark_skin_tone'), ()),
        ('\U0001F9DA\U0001F3FF', 'fairy: dark skin tone', '5.0', 'DARK', ('fairy_tone5', 'fairy_dark_skin_tone'), ()),
    )),
    ('\U0001F9DA\u200D\u2642\uFE0F', 'man fairy', 'People & Body', 'person-fantasy', '5.0', ('man_fairy',), ('\U0001F9DA\u200D\u2642',), (
        ('\U0001F9DA\U0001F3FB\u200D\u2642\uFE0F', 'man fairy: light skin tone', '5.0', 'LIGHT', ('man_fairy_tone1', 'man_fairy_light_skin_tone'), ('\U0001F9DA\U0001F3FB\u200D\u2642',)),
        ('\U0001F9DA\U0001F3FC\u200D\u2642\uFE0F', 'man fairy: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_fairy_tone2', 'man_fairy_medium_light_skin_tone'), ('\U0001F9DA\U0001F3FC\u200D\u2642',)),
        ('\U0001F9DA\U0001F3FD\u200D\u2642\uFE0F', 'man fairy: medium skin tone', '5.0', 'MEDIUM', ('man_fairy_tone3', 'man_fairy_medium_skin_tone'), ('\U0001F9DA\U0001F3FD\u200D\u2642',)),
        ('\U0001F9DA\U0001F3FE\u200D\u2642\uFE0F', 'man fairy: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_fairy_tone4', 'man_fairy_medium_dark_skin_tone'), ('\U0001F9DA\U0001F3FE\u200D\u2642',)),
        ('\U0001F9DA\U0001F3FF\u200D\u2642\uFE0F', 'man fairy: dark skin tone', '5.0', 'DARK', ('man_fairy_tone5', 'man_fairy_dark_skin_tone'), ('\U0001F9DA\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9DA\u200D\u2640\uFE0F', 'woman fairy', 'People & Body', 'person-fantasy', '5.0', ('woman_fairy',), ('\U0001F9DA\u200D\u2640',), (
        ('\U0001F9DA\U0001F3FB\u200D\u2640\uFE0F', 'woman fairy: light skin tone', '5.0', 'LIGHT', ('woman_fairy_tone1', 'woman_fairy_light_skin_tone'), ('\U0001F9DA\U0001F3FB\u200D\u2640',)),
        ('\U0001F9DA\U0001F3FC\u200D\u2640\uFE0F', 'woman fairy: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_fairy_tone2', 'woman_fairy_medium_light_skin_tone'), ('\U0001F9DA\U0001F3FC\u200D\u2640',)),
        ('\U0001F9DA\U0001F3FD\u200D\u2640\uFE0F', 'woman fairy: medium skin tone', '5.0', 'MEDIUM', ('woman_fairy_tone3', 'woman_fairy_medium_skin_tone'), ('\U0001F9DA\U0001F3FD\u200D\u2640',)),
        ('\U0001F9DA\U0001F3FE\u200D\u2640\uFE0F', 'woman fairy: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_fairy_tone4', 'woman_fairy_medium_dark_skin_tone'), ('\U0001F9DA\U0001F3FE\u200D\u2640',)),
        ('\U0001F9DA\U0001F3FF\u200D\u2640\uFE0F', 'woman fairy: dark skin tone', '5.0', 'DARK', ('woman_fairy_tone5', 'woman_fairy_dark_skin_tone'), ('\U0001F9DA\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9DB', 'vampire', 'People & Body', 'person-fantasy', '5.0', ('vampire',), (), (
        ('\U0001F9DB\U0001F3FB', 'vampire: light skin tone', '5.0', 'LIGHT', ('vampire_tone1', 'vampire_light_skin_tone'), ()),
        ('\U0001F9DB\U0001F3FC', 'vampire: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('vampire_tone2', 'vampire_medium_light_skin_tone'), ()),
        ('\U0001F9DB\U0001F3FD', 'vampire: medium skin tone', '5.0', 'MEDIUM', ('vampire_tone3', 'vampire_medium_skin_tone'), ()),
        ('\U0001F9DB\U0001F3FE', 'vampire: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('vampire_tone4', 'vampire_medium_dark_skin_tone'), ()),
        ('\U0001F9DB\U0001F3FF', 'vampire: dark skin tone', '5.0', 'DARK', ('vampire_tone5', 'vampire_dark_skin_tone'), ()),
    )),
    ('\U0001F9DB\u200D\u2642\uFE0F', 'man vampire', 'People & Body', 'person-fantasy', '5.0', ('man_vampire',), ('\U0001F9DB\u200D\u2642',), (
        ('\U0001F9DB\U0001F3FB\u200D\u2642\uFE0F', 'man vampire: light skin tone', '5.0', 'LIGHT', ('man_vampire_tone1', 'man_vampire_light_skin_tone'), ('\U0001F9DB\U0001F3FB\u200D\u2642',)),
        ('\U0001F9DB\U0001F3FC\u200D\u2642\uFE0F', 'man vampire: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_vampire_tone2', 'man_vampire_medium_light_skin_tone'), ('\U0001F9DB\U0001F3FC\u200D\u2642',)),
        ('\U0001F9DB\U0001F3FD\u200D\u2642\uFE0F', 'man vampire: medium skin tone', '5.0', 'MEDIUM', ('man_vampire_tone3', 'man_vampire_medium_skin_tone'), ('\U0001F9DB\U0001F3FD\u200D\u2642',)),
        ('\U0001F9DB\U0001F3FE\u200D\u2642\uFE0F', 'man vampire: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_vampire_tone4', 'man_vampire_medium_dark_skin_tone'), ('\U0001F9DB\U0001F3FE\u200D\u2642',)),
        ('\U0001F9DB\U0001F3FF\u200D\u2642\uFE0F', 'man vampire: dark skin tone', '5.0', 'DARK', ('man_vampire_tone5', 'man_vampire_dark_skin_tone'), ('\U0001F9DB\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9DB\u200D\u2640\uFE0F', 'woman vampire', 'People & Body', 'person-fantasy', '5.0', ('woman_vampire',), ('\U0001F9DB\u200D\u2640',), (
        ('\U0001F9DB\U0001F3FB\u200D\u2640\uFE0F', 'woman vampire: light skin tone', '5.0', 'LIGHT', ('woman_vampire_tone1', 'woman_vampire_light_skin_tone'), ('\U0001F9DB\U0001F3FB\u200D\u2640',)),
        ('\U0001F9DB\U0001F3FC\u200D\u2640\uFE0F', 'woman vampire: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_vampire_tone2', 'woman_vampire_medium_light_skin_tone'), ('\U0001F9DB\U0001F3FC\u200D\u2640',)),
        ('\U0001F9DB\U0001F3FD\u200D\u2640\uFE0F', 'woman vampire: medium skin tone', '5.0', 'MEDIUM', ('woman_vampire_tone3', 'woman_vampire_medium_skin_tone'), ('\U0001F9DB\U0001F3FD\u200D\u2640',)),
        ('\U0001F9DB\U0001F3FE\u200D\u2640\uFE0F', 'woman vampire: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_vampire_tone4', 'woman_vampire_medium_dark_skin_tone'), ('\U0001F9DB\U0001F3FE\u200D\u2640',)),
        ('\U0001F9DB\U0001F3FF\u200D\u2640\uFE0F', 'woman vampire: dark skin tone', '5.0', 'DARK', ('woman_vampire_tone5', 'woman_vampire_dark_skin_tone'), ('\U0001F9DB\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9DC', 'merperson', 'People & Body', 'person-fantasy', '5.0', ('merperson',), (), (
        ('\U0001F9DC\U0001F3FB', 'merperson: light skin tone', '5.0', 'LIGHT', ('merperson_tone1', 'merperson_light_skin_tone'), ()),
        ('\U0001F9DC\U0001F3FC', 'merperson: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('merperson_tone2', 'merperson_medium_light_skin_tone'), ()),
        ('\U0001F9DC\U0001F3FD', 'merperson: medium skin tone', '5.0', 'MEDIUM', ('merperson_tone3', 'merperson_medium_skin_tone'), ()),
        ('\U0001F9DC\U0001F3FE', 'merperson: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('merperson_tone4', 'merperson_medium_dark_skin_tone'), ()),
        ('\U0001F9DC\U0001F3FF', 'merperson: dark skin tone', '5.0', 'DARK', ('merperson_tone5', 'merperson_dark_skin_tone'), ()),
    )),
    ('\U0001F9DC\u200D\u2642\uFE0F', 'merman', 'People & Body', 'person-fantasy', '5.0', ('merman',), ('\U0001F9DC\u200D\u2642',), (
        ('\U0001F9DC\U0001F3FB\u200D\u2642\uFE0F', 'merman: light skin tone', '5.0', 'LIGHT', ('merman_tone1', 'merman_light_skin_tone'), ('\U0001F9DC\U0001F3FB\u200D\u2642',)),
        ('\U0001F9DC\U0001F3FC\u200D\u2642\uFE0F', 'merman: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('merman_tone2', 'merman_medium_light_skin_tone'), ('\U0001F9DC\U0001F3FC\u200D\u2642',)),
        ('\U0001F9DC\U0001F3FD\u200D\u2642\uFE0F', 'merman: medium skin tone', '5.0', 'MEDIUM', ('merman_tone3', 'merman_medium_skin_tone'), ('\U0001F9DC\U0001F3FD\u200D\u2642',)),
        ('\U0001F9DC\U0001F3FE\u200D\u2642\uFE0F', 'merman: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('merman_tone4', 'merman_medium_dark_skin_tone'), ('\U0001F9DC\U0001F3FE\u200D\u2642',)),
        ('\U0001F9DC\U0001F3FF\u200D\u2642\uFE0F', 'merman: dark skin tone', '5.0', 'DARK', ('merman_tone5', 'merman_dark_skin_tone'), ('\U0001F9DC\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9DC\u200D\u2640\uFE0F', 'mermaid', 'People & Body', 'person-fantasy', '5.0', ('mermaid',), ('\U0001F9DC\u200D\u2640',), (
        ('\U0001F9DC\U0001F3FB\u200D\u2640\uFE0F', 'mermaid: light skin tone', '5.0', 'LIGHT', ('mermaid_tone1', 'mermaid_light_skin_tone'), ('\U0001F9DC\U0001F3FB\u200D\u2640',)),
        ('\U0001F9DC\U0001F3FC\u200D\u2640\uFE0F', 'mermaid: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('mermaid_tone2', 'mermaid_medium_light_skin_tone'), ('\U0001F9DC\U0001F3FC\u200D\u2640',)),
        ('\U0001F9DC\U0001F3FD\u200D\u2640\uFE0F', 'mermaid: medium skin tone', '5.0', 'MEDIUM', ('mermaid_tone3', 'mermaid_medium_skin_tone'), ('\U0001F9DC\U0001F3FD\u200D\u2640',)),
        ('\U0001F9DC\U0001F3FE\u200D\u2640\uFE0F', 'mermaid: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('mermaid_tone4', 'mermaid_medium_dark_skin_tone'), ('\U0001F9DC\U0001F3FE\u200D\u2640',)),
        ('\U0001F9DC\U0001F3FF\u200D\u2640\uFE0F', 'mermaid: dark skin tone', '5.0', 'DARK', ('mermaid_tone5', 'mermaid_dark_skin_tone'), ('\U0001F9DC\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9DD', 'elf', 'People & Body', 'person-fantasy', '5.0', ('elf',), (), (
        ('\U0001F9DD\U0001F3FB', 'elf: light skin tone', '5.0', 'LIGHT', ('elf_tone1', 'elf_light_skin_tone'), ()),
        ('\U0001F9DD\U0001F3FC', 'elf: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('elf_tone2', 'elf_medium_light_skin_tone'), ()),
        ('\U0001F9DD\U0001F3FD', 'elf: medium skin tone', '5.0', 'MEDIUM', ('elf_tone3', 'elf_medium_skin_tone'), ()),
        ('\U0001F9DD\U0001F3FE', 'elf: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('elf_tone4', 'elf_medium_dark_skin_tone'), ()),
        ('\U0001F9DD\U0001F3FF', 'elf: dark skin tone', '5.0', 'DARK', ('elf_tone5', 'elf_dark_skin_tone'), ()),
    )),
    ('\U0001F9DD\u200D\u2642\uFE0F', 'man elf', 'People & Body', 'person-fantasy', '5.0', ('man_elf',), ('\U0001F9DD\u200D\u2642',), (
        ('\U0001F9DD\U0001F3FB\u200D\u2642\uFE0F', 'man elf: light skin tone', '5.0', 'LIGHT', ('man_elf_tone1', 'man_elf_light_skin_tone'), ('\U0001F9DD\U0001F3FB\u200D\u2642',)),
        ('\U0001F9DD\U0001F3FC\u200D\u2642\uFE0F', 'man elf: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_elf_tone2', 'man_elf_medium_light_skin_tone'), ('\U0001F9DD\U0001F3FC\u200D\u2642',)),
        ('\U0001F9DD\U0001F3FD\u200D\u2642\uFE0F', 'man elf: medium skin tone', '5.0', 'MEDIUM', ('man_elf_tone3', 'man_elf_medium_skin_tone'), ('\U0001F9DD\U0001F3FD\u200D\u2642',)),
        ('\U0001F9DD\U0001F3FE\u200D\u2642\uFE0F', 'man elf: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_elf_tone4', 'man_elf_medium_dark_skin_tone'), ('\U0001F9DD\U0001F3FE\u200D\u2642',)),
        ('\U0001F9DD\U0001F3FF\u200D\u2642\uFE0F', 'man elf: dark skin tone', '5.0', 'DARK', ('man_elf_tone5', 'man_elf_dark_skin_tone'), ('\U0001F9DD\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9DD\u200D\u2640\uFE0F', 'woman elf', 'People & Body', 'person-fantasy', '5.0', ('woman_elf',), ('\U0001F9DD\u200D\u2640',), (
        ('\U0001F9DD\U0001F3FB\u200D\u2640\uFE0F', 'woman elf: light skin tone', '5.0', 'LIGHT', ('woman_elf_tone1', 'woman_elf_light_skin_tone'), ('\U0001F9DD\U0001F3FB\u200D\u2640',)),
        ('\U0001F9DD\U0001F3FC\u200D\u2640\uFE0F', 'woman elf: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_elf_tone2', 'woman_elf_medium_light_skin_tone'), ('\U0001F9DD\U0001F3FC\u200D\u2640',)),
        ('\U0001F9DD\U0001F3FD\u200D\u2640\uFE0F', 'woman elf: medium skin tone', '5.0', 'MEDIUM', ('woman_elf_tone3', 'woman_elf_medium_skin_tone'), ('\U0001F9DD\U0001F3FD\u200D\u2640',)),
        ('\U0001F9DD\U0001F3FE\u200D\u2640\uFE0F', 'woman elf: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_elf_tone4', 'woman_elf_medium_dark_skin_tone'), ('\U0001F9DD\U0001F3FE\u200D\u2640',)),
        ('\U0001F9DD\U0001F3FF\u200D\u2640\uFE0F', 'woman elf: dark skin tone', '5.0', 'DARK', ('woman_elf_tone5', 'woman_elf_dark_skin_tone'), ('\U0001F9DD\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9DE', 'genie', 'People & Body', 'person-fantasy', '5.0', ('genie',), (), None),
    ('\U0001F9DE\u200D\u2642\uFE0F', 'man genie', 'People & Body', 'person-fantasy', '5.0', ('man_genie',), ('\U0001F9DE\u200D\u2642',), None),
    ('\U0001F9DE\u200D\u2640\uFE0F', 'woman genie', 'People & Body', 'person-fantasy', '5.0', ('woman_genie',), ('\U0001F9DE\u200D\u2640',), None),
    ('\U0001F9DF', 'zombie', 'People & Body', 'person-fantasy', '5.0', ('zombie',), (), None),
    ('\U0001F9DF\u200D\u2642\uFE0F', 'man zombie', 'People & Body', 'person-fantasy', '5.0', ('man_zombie',), ('\U0001F9DF\u200D\u2642',), None),
    ('\U0001F9DF\u200D\u2640\uFE0F', 'woman zombie', 'People & Body', 'person-fantasy', '5.0', ('woman_zombie',), ('\U0001F9DF\u200D\u2640',), None),
    ('\U0001F9CC', 'troll', 'People & Body', 'person-fantasy', '14.0', ('troll',), (), None),
    ('\U0001F486', 'person getting massage', 'People & Body', 'person-activity', '0.6', ('person_getting_massage', 'massage'), (), (
        ('\U0001F486\U0001F3FB', 'person getting massage: light skin tone', '1.0', 'LIGHT', ('person_getting_massage_tone1', 'massage_tone1'), ()),
        ('\U0001F486\U0001F3FC', 'person getting massage: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_getting_massage_tone2', 'massage_tone2'), ()),
        ('\U0001F486\U0001F3FD', 'person getting massage: medium skin tone', '1.0', 'MEDIUM', ('person_getting_massage_tone3', 'massage_tone3'), ()),
        ('\U0001F486\U0001F3FE', 'person getting massage: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_getting_massage_tone4', 'massage_tone4'), ()),
        ('\U0001F486\U0001F3FF', 'person getting massage: dark skin tone', '1.0', 'DARK', ('person_getting_massage_tone5', 'massage_tone5'), ()),
    )),
    ('\U0001F486\u200D\u2642\uFE0F', 'man getting massage', 'People & Body', 'person-activity', '4.0', ('man_getting_face_massage',), ('\U0001F486\u200D\u2642',), (
        ('\U0001F486\U0001F3FB\u200D\u2642\uFE0F', 'man getting massage: light skin tone', '4.0', 'LIGHT', ('man_getting_face_massage_tone1', 'man_getting_face_massage_light_skin_tone'), ('\U0001F486\U0001F3FB\u200D\u2642',)),
        ('\U0001F486\U0001F3FC\u200D\u2642\uFE0F', 'man getting massage: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_getting_face_massage_tone2', 'man_getting_face_massage_medium_light_skin_tone'), ('\U0001F486\U0001F3FC\u200D\u2642',)),
        ('\U0001F486\U0001F3FD\u200D\u2642\uFE0F', 'man getting massage: medium skin tone', '4.0', 'MEDIUM', ('man_getting_face_massage_tone3', 'man_getting_face_massage_medium_skin_tone'), ('\U0001F486\U0001F3FD\u200D\u2642',)),
        ('\U0001F486\U0001F3FE\u200D\u2642\uFE0F', 'man getting massage: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_getting_face_massage_tone4', 'man_getting_face_massage_medium_dark_skin_tone'), ('\U0001F486\U0001F3FE\u200D\u2642',)),
        ('\U0001F486\U0001F3FF\u200D\u2642\uFE0F', 'man getting massage: dark skin tone', '4.0', 'DARK', ('man_getting_face_massage_tone5', 'man_getting_face_massage_dark_skin_tone'), ('\U0001F486\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F486\u200D\u2640\uFE0F', 'woman getting massage', 'People & Body', 'person-activity', '4.0', ('woman_getting_face_massage',), ('\U0001F486\u200D\u2640',), (
        ('\U0001F486\U0001F3FB\u200D\u2640\uFE0F', 'woman getting massage: light skin tone', '4.0', 'LIGHT', ('woman_getting_face_massage_tone1', 'woman_getting_face_massage_light_skin_tone'), ('\U0001F486\U0001F3FB\u200D\u2640',)),
        ('\U0001F486\U0001F3FC\u200D\u2640\uFE0F', 'woman getting massage: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_getting_face_massage_tone2', 'woman_getting_face_massage_medium_light_skin_tone'), ('\U0001F486\U0001F3FC\u200D\u2640',)),
        ('\U0001F486\U0001F3FD\u200D\u2640\uFE0F', 'woman getting massage: medium skin tone', '4.0', 'MEDIUM', ('woman_getting_face_massage_tone3', 'woman_getting_face_massage_medium_skin_tone'), ('\U0001F486\U0001F3FD\u200D\u2640',)),
        ('\U0001F486\U0001F3FE\u200D\u2640\uFE0F', 'woman getting massage: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_getting_face_massage_tone4', 'woman_getting_face_massage_medium_dark_skin_tone'), ('\U0001F486\U0001F3FE\u200D\u2640',)),
        ('\U0001F486\U0001F3FF\u200D\u2640\uFE0F', 'woman getting massage: dark skin tone', '4.0', 'DARK', ('woman_getting_face_massage_tone5', 'woman_getting_face_massage_dark_skin_tone'), ('\U0001F486\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F487', 'person getting haircut', 'People & Body', 'person-activity', '0.6', ('person_getting_haircut', 'haircut'), (), (
        ('\U0001F487\U0001F3FB', 'person getting haircut: light skin tone', '1.0', 'LIGHT', ('person_getting_haircut_tone1', 'haircut_tone1'), ()),
        ('\U0001F487\U0001F3FC', 'person getting haircut: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_getting_haircut_tone2', 'haircut_tone2'), ()),
        ('\U0001F487\U0001F3FD', 'person getting haircut: medium skin tone', '1.0', 'MEDIUM', ('person_getting_haircut_tone3', 'haircut_tone3'), ()),
        ('\U0001F487\U0001F3FE', 'person getting haircut: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_getting_haircut_tone4', 'haircut_tone4'), ()),
        ('\U0001F487\U0001F3FF', 'person getting haircut: dark skin tone', '1.0', 'DARK', ('person_getting_haircut_tone5', 'haircut_tone5'), ()),
    )),
    ('\U0001F487\u200D\u2642\uFE0F', 'man getting haircut', 'People & Body', 'person-activity', '4.0', ('man_getting_haircut',), ('\U0001F487\u200D\u2642',), (
        ('\U0001F487\U0001F3FB\u200D\u2642\uFE0F', 'man getting haircut: light skin tone', '4.0', 'LIGHT', ('man_getting_haircut_tone1', 'man_getting_haircut_light_skin_tone'), ('\U0001F487\U0001F3FB\u200D\u2642',)),
        ('\U0001F487\U0001F3FC\u200D\u2642\uFE0F', 'man getting haircut: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_getting_haircut_tone2', 'man_getting_haircut_medium_light_skin_tone'), ('\U0001F487\U0001F3FC\u200D\u2642',)),
        ('\U0001F487\U0001F3FD\u200D\u2642\uFE0F', 'man getting haircut: medium skin tone', '4.0', 'MEDIUM', ('man_getting_haircut_tone3', 'man_getting_haircut_medium_skin_tone'), ('\U0001F487\U0001F3FD\u200D\u2642',)),
        ('\U0001F487\U0001F3FE\u200D\u2642\uFE0F', 'man getting haircut: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_getting_haircut_tone4', 'man_getting_haircut_medium_dark_skin_tone'), ('\U0001F487\U0001F3FE\u200D\u2642',)),
        ('\U0001F487\U0001F3FF\u200D\u2642\uFE0F', 'man getting haircut: dark skin tone', '4.0', 'DARK', ('man_getting_haircut_tone5', 'man_getting_haircut_dark_skin_tone'), ('\U0001F487\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F487\u200D\u2640\uFE0F', 'woman getting haircut', 'People & Body', 'person-activity', '4.0', ('woman_getting_haircut',), ('\U0001F487\u200D\u2640',), (
        ('\U0001F487\U0001F3FB\u200D\u2640\uFE0F', 'woman getting haircut: light skin tone', '4.0', 'LIGHT', ('woman_getting_haircut_tone1', 'woman_getting_haircut_light_skin_tone'), ('\U0001F487\U0001F3FB\u200D\u2640',)),
        ('\U0001F487\U0001F3FC\u200D\u2640\uFE0F', 'woman getting haircut: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_getting_haircut_tone2', 'woman_getting_haircut_medium_light_skin_tone'), ('\U0001F487\U0001F3FC\u200D\u2640',)),
        ('\U0001F487\U0001F3FD\u200D\u2640\uFE0F', 'woman getting haircut: medium skin tone', '4.0', 'MEDIUM', ('woman_getting_haircut_tone3', 'woman_getting_haircut_medium_skin_tone'), ('\U0001F487\U0001F3FD\u200D\u2640',)),
        ('\U0001F487\U0001F3FE\u200D\u2640\uFE0F', 'woman getting haircut: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_getting_haircut_tone4', 'woman_getting_haircut_medium_dark_skin_tone'), ('\U0001F487\U0001F3FE\u200D\u2640',)),
        ('\U0001F487\U0001F3FF\u200D\u2640\uFE0F', 'woman getting haircut: dark skin tone', '4.0', 'DARK', ('woman_getting_haircut_tone5', 'woman_getting_haircut_dark_skin_tone'), ('\U0001F487\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6B6', 'person walking', 'People & Body', 'person-activity', '0.6', ('person_walking', 'walking'), (), (
        ('\U0001F6B6\U0001F3FB', 'person walking: light skin tone', '1.0', 'LIGHT', ('person_walking_tone1', 'walking_tone1'), ()),
        ('\U0001F6B6\U0001F3FC', 'person walking: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_walking_tone2', 'walking_tone2'), ()),
        ('\U0001F6B6\U0001F3FD', 'person walking: medium skin tone', '1.0', 'MEDIUM', ('person_walking_tone3', 'walking_tone3'), ()),
        ('\U0001F6B6\U0001F3FE', 'person walking: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_walking_tone4', 'walking_tone4'), ()),
        ('\U0001F6B6\U0001F3FF', 'person walking: dark skin tone', '1.0', 'DARK', ('person_walking_tone5', 'walking_tone5'), ()),
    )),
    ('\U0001F6B6\u200D\u2642\uFE0F', 'man walking', 'People & Body', 'person-activity', '4.0', ('man_walking',), ('\U0001F6B6\u200D\u2642',), (
        ('\U0001F6B6\U0001F3FB\u200D\u2642\uFE0F', 'man walking: light skin tone', '4.0', 'LIGHT', ('man_walking_tone1', 'man_walking_light_skin_tone'), ('\U0001F6B6\U0001F3FB\u200D\u2642',)),
        ('\U0001F6B6\U0001F3FC\u200D\u2642\uFE0F', 'man walking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_walking_tone2', 'man_walking_medium_light_skin_tone'), ('\U0001F6B6\U0001F3FC\u200D\u2642',)),
        ('\U0001F6B6\U0001F3FD\u200D\u2642\uFE0F', 'man walking: medium skin tone', '4.0', 'MEDIUM', ('man_walking_tone3', 'man_walking_medium_skin_tone'), ('\U0001F6B6\U0001F3FD\u200D\u2642',)),
        ('\U0001F6B6\U0001F3FE\u200D\u2642\uFE0F', 'man walking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_walking_tone4', 'man_walking_medium_dark_skin_tone'), ('\U0001F6B6\U0001F3FE\u200D\u2642',)),
        ('\U0001F6B6\U0001F3FF\u200D\u2642\uFE0F', 'man walking: dark skin tone', '4.0', 'DARK', ('man_walking_tone5', 'man_walking_dark_skin_tone'), ('\U0001F6B6\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F6B6\u200D\u2640\uFE0F', 'woman walking', 'People & Body', 'person-activity', '4.0', ('woman_walking',), ('\U0001F6B6\u200D\u2640',), (
        ('\U0001F6B6\U0001F3FB\u200D\u2640\uFE0F', 'woman walking: light skin tone', '4.0', 'LIGHT', ('woman_walking_tone1', 'woman_walking_light_skin_tone'), ('\U0001F6B6\U0001F3FB\u200D\u2640',)),
        ('\U0001F6B6\U0001F3FC\u200D\u2640\uFE0F', 'woman walking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_walking_tone2', 'woman_walking_medium_light_skin_tone'), ('\U0001F6B6\U0001F3FC\u200D\u2640',)),
        ('\U0001F6B6\U0001F3FD\u200D\u2640\uFE0F', 'woman walking: medium skin tone', '4.0', 'MEDIUM', ('woman_walking_tone3', 'woman_walking_medium_skin_tone'), ('\U0001F6B6\U0001F3FD\u200D\u2640',)),
        ('\U0001F6B6\U0001F3FE\u200D\u2640\uFE0F', 'woman walking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_walking_tone4', 'woman_walking_medium_dark_skin_tone'), ('\U0001F6B6\U0001F3FE\u200D\u2640',)),
        ('\U0001F6B6\U0001F3FF\u200D\u2640\uFE0F', 'woman walking: dark skin tone', '4.0', 'DARK', ('woman_walking_tone5', 'woman_walking_dark_skin_tone'), ('\U0001F6B6\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6B6\u200D\u27A1\uFE0F', 'person walking facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F6B6\u200D\u27A1',), (
        ('\U0001F6B6\U0001F3FB\u200D\u27A1\uFE0F', 'person walking facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F6B6\U0001F3FB\u200D\u27A1',)),
        ('\U0001F6B6\U0001F3FC\u200D\u27A1\uFE0F', 'person walking facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F6B6\U0001F3FC\u200D\u27A1',)),
        ('\U0001F6B6\U0001F3FD\u200D\u27A1\uFE0F', 'person walking facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F6B6\U0001F3FD\u200D\u27A1',)),
        ('\U0001F6B6\U0001F3FE\u200D\u27A1\uFE0F', 'person walking facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F6B6\U0001F3FE\u200D\u27A1',)),
        ('\U0001F6B6\U0001F3FF\u200D\u27A1\uFE0F', 'person walking facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F6B6\U0001F3FF\u200D\u27A1',)),
    )),
    ('\U0001F6B6\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F6B6\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\u200D\u2640\u200D\u27A1'), (
        ('\U0001F6B6\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F6B6\U0001F3FB\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FB\u200D\u2640\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F6B6\U0001F3FC\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FC\u200D\u2640\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F6B6\U0001F3FD\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FD\u200D\u2640\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F6B6\U0001F3FE\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FE\u200D\u2640\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman walking facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F6B6\U0001F3FF\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FF\u200D\u2640\u200D\u27A1')),
    )),
    ('\U0001F6B6\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F6B6\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\u200D\u2642\u200D\u27A1'), (
        ('\U0001F6B6\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F6B6\U0001F3FB\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FB\u200D\u2642\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F6B6\U0001F3FC\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FC\u200D\u2642\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F6B6\U0001F3FD\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FD\u200D\u2642\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F6B6\U0001F3FE\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FE\u200D\u2642\u200D\u27A1')),
        ('\U0001F6B6\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man walking facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F6B6\U0001F3FF\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F6B6\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F6B6\U0001F3FF\u200D\u2642\u200D\u27A1')),
    )),
    ('\U0001F9CD', 'person standing', 'People & Body', 'person-activity', '12.0', ('person_standing',), (), (
        ('\U0001F9CD\U0001F3FB', 'person standing: light skin tone', '12.0', 'LIGHT', ('person_standing_light_skin_tone',), ()),
        ('\U0001F9CD\U0001F3FC', 'person standing: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('person_standing_medium-light_skin_tone',), ()),
        ('\U0001F9CD\U0001F3FD', 'person standing: medium skin tone', '12.0', 'MEDIUM', ('person_standing_medium_skin_tone',), ()),
        ('\U0001F9CD\U0001F3FE', 'person standing: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('person_standing_medium-dark_skin_tone',), ()),
        ('\U0001F9CD\U0001F3FF', 'person standing: dark skin tone', '12.0', 'DARK', ('person_standing_dark_skin_tone',), ()),
    )),
    ('\U0001F9CD\u200D\u2642\uFE0F', 'man standing', 'People & Body', 'person-activity', '12.0', ('man_standing',), ('\U0001F9CD\u200D\u2642',), (
        ('\U0001F9CD\U0001F3FB\u200D\u2642\uFE0F', 'man standing: light skin tone', '12.0', 'LIGHT', ('man_standing_light_skin_tone',), ('\U0001F9CD\U0001F3FB\u200D\u2642',)),
        ('\U0001F9CD\U0001F3FC\u200D\u2642\uFE0F', 'man standing: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('man_standing_medium-light_skin_tone',), ('\U0001F9CD\U0001F3FC\u200D\u2642',)),
        ('\U0001F9CD\U0001F3FD\u200D\u2642\uFE0F', 'man standing: medium skin tone', '12.0', 'MEDIUM', ('man_standing_medium_skin_tone',), ('\U0001F9CD\U0001F3FD\u200D\u2642',)),
        ('\U0001F9CD\U0001F3FE\u200D\u2642\uFE0F', 'man standing: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('man_standing_medium-dark_skin_tone',), ('\U0001F9CD\U0001F3FE\u200D\u2642',)),
        ('\U0001F9CD\U0001F3FF\u200D\u2642\uFE0F', 'man standing: dark skin tone', '12.0', 'DARK', ('man_standing_dark_skin_tone',), ('\U0001F9CD\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9CD\u200D\u2640\uFE0F', 'woman standing', 'People & Body', 'person-activity', '12.0', ('woman_standing',), ('\U0001F9CD\u200D\u2640',), (
        ('\U0001F9CD\U0001F3FB\u200D\u2640\uFE0F', 'woman standing: light skin tone', '12.0', 'LIGHT', ('woman_standing_light_skin_tone',), ('\U0001F9CD\U0001F3FB\u200D\u2640',)),
        ('\U0001F9CD\U0001F3FC\u200D\u2640\uFE0F', 'woman standing: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_standing_medium-light_skin_tone',), ('\U0001F9CD\U0001F3FC\u200D\u2640',)),
        ('\U0001F9CD\U0001F3FD\u200D\u2640\uFE0F', 'woman standing: medium skin tone', '12.0', 'MEDIUM', ('woman_standing_medium_skin_tone',), ('\U0001F9CD\U0001F3FD\u200D\u2640',)),
        ('\U0001F9CD\U0001F3FE\u200D\u2640\uFE0F', 'woman standing: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_standing_medium-dark_skin_tone',), ('\U0001F9CD\U0001F3FE\u200D\u2640',)),
        ('\U0001F9CD\U0001F3FF\u200D\u2640\uFE0F', 'woman standing: dark skin tone', '12.0', 'DARK', ('woman_standing_dark_skin_tone',), ('\U0001F9CD\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9CE', 'person kneeling', 'People & Body', 'person-activity', '12.0', ('person_kneeling',), (), (
        ('\U0001F9CE\U0001F3FB', 'person kneeling: light skin tone', '12.0', 'LIGHT', ('person_kneeling_light_skin_tone',), ()),
        ('\U0001F9CE\U0001F3FC', 'person kneeling: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('person_kneeling_medium-light_skin_tone',), ()),
        ('\U0001F9CE\U0001F3FD', 'person kneeling: medium skin tone', '12.0', 'MEDIUM', ('person_kneeling_medium_skin_tone',), ()),
        ('\U0001F9CE\U0001F3FE', 'person kneeling: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('person_kneeling_medium-dark_skin_tone',), ()),
        ('\U0001F9CE\U0001F3FF', 'person kneeling: dark skin tone', '12.0', 'DARK', ('person_kneeling_dark_skin_tone',), ()),
    )),
    ('\U0001F9CE\u200D\u2642\uFE0F', 'man kneeling', 'People & Body', 'person-activity', '12.0', ('man_kneeling',), ('\U0001F9CE\u200D\u2642',), (
        ('\U0001F9CE\U0001F3FB\u200D\u2642\uFE0F', 'man kneeling: light skin tone', '12.0', 'LIGHT', ('man_kneeling_light_skin_tone',), ('\U0001F9CE\U0001F3FB\u200D\u2642',)),
        ('\U0001F9CE\U0001F3FC\u200D\u2642\uFE0F', 'man kneeling: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('man_kneeling_medium-light_skin_tone',), ('\U0001F9CE\U0001F3FC\u200D\u2642',)),
        ('\U0001F9CE\U0001F3FD\u200D\u2642\uFE0F', 'man kneeling: medium skin tone', '12.0', 'MEDIUM', ('man_kneeling_medium_skin_tone',), ('\U0001F9CE\U0001F3FD\u200D\u2642',)),
        ('\U0001F9CE\U0001F3FE\u200D\u2642\uFE0F', 'man kneeling: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('man_kneeling_medium-dark_skin_tone',), ('\U0001F9CE\U0001F3FE\u200D\u2642',)),
        ('\U0001F9CE\U0001F3FF\u200D\u2642\uFE0F', 'man kneeling: dark skin tone', '12.0', 'DARK', ('man_kneeling_dark_skin_tone',), ('\U0001F9CE\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9CE\u200D\u2640\uFE0F', 'woman kneeling', 'People & Body', 'person-activity', '12.0', ('woman_kneeling',), ('\U0001F9CE\u200D\u2640',), (
        ('\U0001F9CE\U0001F3FB\u200D\u2640\uFE0F', 'woman kneeling: light skin tone', '12.0', 'LIGHT', ('woman_kneeling_light_skin_tone',), ('\U0001F9CE\U0001F3FB\u200D\u2640',)),
        ('\U0001F9CE\U0001F3FC\u200D\u2640\uFE0F', 'woman kneeling: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_kneeling_medium-light_skin_tone',), ('\U0001F9CE\U0001F3FC\u200D\u2640',)),
        ('\U0001F9CE\U0001F3FD\u200D\u2640\uFE0F', 'woman kneeling: medium skin tone', '12.0', 'MEDIUM', ('woman_kneeling_medium_skin_tone',), ('\U0001F9CE\U0001F3FD\u200D\u2640',)),
        ('\U0001F9CE\U0001F3FE\u200D\u2640\uFE0F', 'woman kneeling: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_kneeling_medium-dark_skin_tone',), ('\U0001F9CE\U0001F3FE\u200D\u2640',)),
        ('\U0001F9CE\U0001F3FF\u200D\u2640\uFE0F', 'woman kneeling: dark skin tone', '12.0', 'DARK', ('woman_kneeling_dark_skin_tone',), ('\U0001F9CE\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9CE\u200D\u27A1\uFE0F', 'person kneeling facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9CE\u200D\u27A1',), (
        ('\U0001F9CE\U0001F3FB\u200D\u27A1\uFE0F', 'person kneeling facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9CE\U0001F3FB\u200D\u27A1',)),
        ('\U0001F9CE\U0001F3FC\u200D\u27A1\uFE0F', 'person kneeling facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9CE\U0001F3FC\u200D\u27A1',)),
        ('\U0001F9CE\U0001F3FD\u200D\u27A1\uFE0F', 'person kneeling facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9CE\U0001F3FD\u200D\u27A1',)),
        ('\U0001F9CE\U0001F3FE\u200D\u27A1\uFE0F', 'person kneeling facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9CE\U0001F3FE\u200D\u27A1',)),
        ('\U0001F9CE\U0001F3FF\u200D\u27A1\uFE0F', 'person kneeling facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9CE\U0001F3FF\u200D\u27A1',)),
    )),
    ('\U0001F9CE\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9CE\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\u200D\u2640\u200D\u27A1'), (
        ('\U0001F9CE\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9CE\U0001F3FB\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FB\u200D\u2640\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9CE\U0001F3FC\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FC\u200D\u2640\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9CE\U0001F3FD\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FD\u200D\u2640\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9CE\U0001F3FE\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FE\u200D\u2640\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman kneeling facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9CE\U0001F3FF\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FF\u200D\u2640\u200D\u27A1')),
    )),
    ('\U0001F9CE\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9CE\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\u200D\u2642\u200D\u27A1'), (
        ('\U0001F9CE\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9CE\U0001F3FB\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FB\u200D\u2642\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9CE\U0001F3FC\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FC\u200D\u2642\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9CE\U0001F3FD\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FD\u200D\u2642\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9CE\U0001F3FE\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FE\u200D\u2642\u200D\u27A1')),
        ('\U0001F9CE\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man kneeling facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9CE\U0001F3FF\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F9CE\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F9CE\U0001F3FF\u200D\u2642\u200D\u27A1')),
    )),
    ('\U0001F9D1\u200D\U0001F9AF', 'person with white cane', 'People & Body', 'person-activity', '12.1', ('person_with_white_cane',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9AF', 'person with white cane: light skin tone', '12.1', 'LIGHT', ('person_with_white_cane_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9AF', 'person with white cane: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('person_with_white_cane_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9AF', 'person with white cane: medium skin tone', '12.1', 'MEDIUM', ('person_with_white_cane_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9AF', 'person with white cane: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('person_with_white_cane_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9AF', 'person with white cane: dark skin tone', '12.1', 'DARK', ('person_with_white_cane_dark_skin_tone',), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9D1\u200D\U0001F9AF\u200D\u27A1',), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9D1\U0001F3FB\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9D1\U0001F3FC\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9D1\U0001F3FD\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9D1\U0001F3FE\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'person with white cane facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9D1\U0001F3FF\u200D\U0001F9AF\u200D\u27A1',)),
    )),
    ('\U0001F468\u200D\U0001F9AF', 'man with white cane', 'People & Body', 'person-activity', '12.0', ('man_with_white_cane',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9AF', 'man with white cane: light skin tone', '12.0', 'LIGHT', ('man_with_white_cane_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9AF', 'man with white cane: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('man_with_white_cane_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9AF', 'man with white cane: medium skin tone', '12.0', 'MEDIUM', ('man_with_white_cane_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9AF', 'man with white cane: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('man_with_white_cane_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9AF', 'man with white cane: dark skin tone', '12.0', 'DARK', ('man_with_white_cane_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F468\u200D\U0001F9AF\u200D\u27A1',), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F468\U0001F3FB\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F468\U0001F3FC\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F468\U0001F3FC\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F468\U0001F3FD\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F468\U0001F3FD\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F468\U0001F3FE\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F468\U0001F3FE\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F468\U0001F3FF\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'man with white cane facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F468\U0001F3FF\u200D\U0001F9AF\u200D\u27A1',)),
    )),
    ('\U0001F469\u200D\U0001F9AF', 'woman with white cane', 'People & Body', 'person-activity', '12.0', ('woman_with_white_cane',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9AF', 'woman with white cane: light skin tone', '12.0', 'LIGHT', ('woman_with_white_cane_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9AF', 'woman with white cane: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_with_white_cane_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9AF', 'woman with white cane: medium skin tone', '12.0', 'MEDIUM', ('woman_with_white_cane_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9AF', 'woman with white cane: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_with_white_cane_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9AF', 'woman with white cane: dark skin tone', '12.0', 'DARK', ('woman_with_white_cane_dark_skin_tone',), ()),
    )),
    ('\U0001F469\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F469\u200D\U0001F9AF\u200D\u27A1',), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F469\U0001F3FB\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F469\U0001F3FC\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F469\U0001F3FC\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F469\U0001F3FD\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F469\U0001F3FD\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F469\U0001F3FE\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F469\U0001F3FE\u200D\U0001F9AF\u200D\u27A1',)),
        ('\U0001F469\U0001F3FF\u200D\U0001F9AF\u200D\u27A1\uFE0F', 'woman with white cane facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F469\U0001F3FF\u200D\U0001F9AF\u200D\u27A1',)),
    )),
    ('\U0001F9D1\u200D\U0001F9BC', 'person in motorized wheelchair', 'People & Body', 'person-activity', '12.1', ('person_in_motorized_wheelchair',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9BC', 'person in motorized wheelchair: light skin tone', '12.1', 'LIGHT', ('person_in_motorized_wheelchair_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9BC', 'person in motorized wheelchair: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('person_in_motorized_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9BC', 'person in motorized wheelchair: medium skin tone', '12.1', 'MEDIUM', ('person_in_motorized_wheelchair_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9BC', 'person in motorized wheelchair: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('person_in_motorized_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9BC', 'person in motorized wheelchair: dark skin tone', '12.1', 'DARK', ('person_in_motorized_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9D1\u200D\U0001F9BC\u200D\u27A1',), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9D1\U0001F3FB\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9D1\U0001F3FC\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9D1\U0001F3FD\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9D1\U0001F3FE\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'person in motorized wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9D1\U0001F3FF\u200D\U0001F9BC\u200D\u27A1',)),
    )),
    ('\U0001F468\u200D\U0001F9BC', 'man in motorized wheelchair', 'People & Body', 'person-activity', '12.0', ('man_in_motorized_wheelchair',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9BC', 'man in motorized wheelchair: light skin tone', '12.0', 'LIGHT', ('man_in_motorized_wheelchair_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9BC', 'man in motorized wheelchair: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('man_in_motorized_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9BC', 'man in motorized wheelchair: medium skin tone', '12.0', 'MEDIUM', ('man_in_motorized_wheelchair_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9BC', 'man in motorized wheelchair: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('man_in_motorized_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9BC', 'man in motorized wheelchair: dark skin tone', '12.0', 'DARK', ('man_in_motorized_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F468\u200D\U0001F9BC\u200D\u27A1',), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F468\U0001F3FB\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F468\U0001F3FC\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F468\U0001F3FC\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F468\U0001F3FD\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F468\U0001F3FD\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F468\U0001F3FE\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F468\U0001F3FE\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F468\U0001F3FF\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'man in motorized wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F468\U0001F3FF\u200D\U0001F9BC\u200D\u27A1',)),
    )),
    ('\U0001F469\u200D\U0001F9BC', 'woman in motorized wheelchair', 'People & Body', 'person-activity', '12.0', ('woman_in_motorized_wheelchair',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9BC', 'woman in motorized wheelchair: light skin tone', '12.0', 'LIGHT', ('woman_in_motorized_wheelchair_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9BC', 'woman in motorized wheelchair: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_in_motorized_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9BC', 'woman in motorized wheelchair: medium skin tone', '12.0', 'MEDIUM', ('woman_in_motorized_wheelchair_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9BC', 'woman in motorized wheelchair: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_in_motorized_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9BC', 'woman in motorized wheelchair: dark skin tone', '12.0', 'DARK', ('woman_in_motorized_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F469\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F469\u200D\U0001F9BC\u200D\u27A1',), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F469\U0001F3FB\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F469\U0001F3FC\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F469\U0001F3FC\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F469\U0001F3FD\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F469\U0001F3FD\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F469\U0001F3FE\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F469\U0001F3FE\u200D\U0001F9BC\u200D\u27A1',)),
        ('\U0001F469\U0001F3FF\u200D\U0001F9BC\u200D\u27A1\uFE0F', 'woman in motorized wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F469\U0001F3FF\u200D\U0001F9BC\u200D\u27A1',)),
    )),
    ('\U0001F9D1\u200D\U0001F9BD', 'person in manual wheelchair', 'People & Body', 'person-activity', '12.1', ('person_in_manual_wheelchair',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9BD', 'person in manual wheelchair: light skin tone', '12.1', 'LIGHT', ('person_in_manual_wheelchair_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9BD', 'person in manual wheelchair: medium-light skin tone', '12.1', 'MEDIUM_LIGHT', ('person_in_manual_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9BD', 'person in manual wheelchair: medium skin tone', '12.1', 'MEDIUM', ('person_in_manual_wheelchair_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9BD', 'person in manual wheelchair: medium-dark skin tone', '12.1', 'MEDIUM_DARK', ('person_in_manual_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9BD', 'person in manual wheelchair: dark skin tone', '12.1', 'DARK', ('person_in_manual_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F9D1\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F9D1\u200D\U0001F9BD\u200D\u27A1',), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F9D1\U0001F3FB\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F9D1\U0001F3FC\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F9D1\U0001F3FD\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F9D1\U0001F3FE\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'person in manual wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F9D1\U0001F3FF\u200D\U0001F9BD\u200D\u27A1',)),
    )),
    ('\U0001F468\u200D\U0001F9BD', 'man in manual wheelchair', 'People & Body', 'person-activity', '12.0', ('man_in_manual_wheelchair',), (), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9BD', 'man in manual wheelchair: light skin tone', '12.0', 'LIGHT', ('man_in_manual_wheelchair_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F9BD', 'man in manual wheelchair: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('man_in_manual_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F9BD', 'man in manual wheelchair: medium skin tone', '12.0', 'MEDIUM', ('man_in_manual_wheelchair_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F9BD', 'man in manual wheelchair: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('man_in_manual_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F9BD', 'man in manual wheelchair: dark skin tone', '12.0', 'DARK', ('man_in_manual_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F468\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F468\u200D\U0001F9BD\u200D\u27A1',), (
        ('\U0001F468\U0001F3FB\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F468\U0001F3FB\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F468\U0001F3FC\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F468\U0001F3FC\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F468\U0001F3FD\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F468\U0001F3FD\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F468\U0001F3FE\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F468\U0001F3FE\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F468\U0001F3FF\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'man in manual wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F468\U0001F3FF\u200D\U0001F9BD\u200D\u27A1',)),
    )),
    ('\U0001F469\u200D\U0001F9BD', 'woman in manual wheelchair', 'People & Body', 'person-activity', '12.0', ('woman_in_manual_wheelchair',), (), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9BD', 'woman in manual wheelchair: light skin tone', '12.0', 'LIGHT', ('woman_in_manual_wheelchair_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F9BD', 'woman in manual wheelchair: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_in_manual_wheelchair_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F9BD', 'woman in manual wheelchair: medium skin tone', '12.0', 'MEDIUM', ('woman_in_manual_wheelchair_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F9BD', 'woman in manual wheelchair: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_in_manual_wheelchair_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F9BD', 'woman in manual wheelchair: dark skin tone', '12.0', 'DARK', ('woman_in_manual_wheelchair_dark_skin_tone',), ()),
    )),
    ('\U0001F469\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F469\u200D\U0001F9BD\u200D\u27A1',), (
        ('\U0001F469\U0001F3FB\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F469\U0001F3FB\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F469\U0001F3FC\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F469\U0001F3FC\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F469\U0001F3FD\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F469\U0001F3FD\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F469\U0001F3FE\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F469\U0001F3FE\u200D\U0001F9BD\u200D\u27A1',)),
        ('\U0001F469\U0001F3FF\u200D\U0001F9BD\u200D\u27A1\uFE0F', 'woman in manual wheelchair facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F469\U0001F3FF\u200D\U0001F9BD\u200D\u27A1',)),
    )),
    ('\U0001F3C3', 'person running', 'People & Body', 'person-activity', '0.6', ('person_running', 'runner'), (), (
        ('\U0001F3C3\U0001F3FB', 'person running: light skin tone', '1.0', 'LIGHT', ('person_running_tone1', 'runner_tone1'), ()),
        ('\U0001F3C3\U0001F3FC', 'person running: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_running_tone2', 'runner_tone2'), ()),
        ('\U0001F3C3\U0001F3FD', 'person running: medium skin tone', '1.0', 'MEDIUM', ('person_running_tone3', 'runner_tone3'), ()),
        ('\U0001F3C3\U0001F3FE', 'person running: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_running_tone4', 'runner_tone4'), ()),
        ('\U0001F3C3\U0001F3FF', 'person running: dark skin tone', '1.0', 'DARK', ('person_running_tone5', 'runner_tone5'), ()),
    )),
    ('\U0001F3C3\u200D\u2642\uFE0F', 'man running', 'People & Body', 'person-activity', '4.0', ('man_running',), ('\U0001F3C3\u200D\u2642',), (
        ('\U0001F3C3\U0001F3FB\u200D\u2642\uFE0F', 'man running: light skin tone', '4.0', 'LIGHT', ('man_running_tone1', 'man_running_light_skin_tone'), ('\U0001F3C3\U0001F3FB\u200D\u2642',)),
        ('\U0001F3C3\U0001F3FC\u200D\u2642\uFE0F', 'man running: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_running_tone2', 'man_running_medium_light_skin_tone'), ('\U0001F3C3\U0001F3FC\u200D\u2642',)),
        ('\U0001F3C3\U0001F3FD\u200D\u2642\uFE0F', 'man running: medium skin tone', '4.0', 'MEDIUM', ('man_running_tone3', 'man_running_medium_skin_tone'), ('\U0001F3C3\U0001F3FD\u200D\u2642',)),
        ('\U0001F3C3\U0001F3FE\u200D\u2642\uFE0F', 'man running: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_running_tone4', 'man_running_medium_dark_skin_tone'), ('\U0001F3C3\U0001F3FE\u200D\u2642',)),
        ('\U0001F3C3\U0001F3FF\u200D\u2642\uFE0F', 'man running: dark skin tone', '4.0', 'DARK', ('man_running_tone5', 'man_running_dark_skin_tone'), ('\U0001F3C3\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F3C3\u200D\u2640\uFE0F', 'woman running', 'People & Body', 'person-activity', '4.0', ('woman_running',), ('\U0001F3C3\u200D\u2640',), (
        ('\U0001F3C3\U0001F3FB\u200D\u2640\uFE0F', 'woman running: light skin tone', '4.0', 'LIGHT', ('woman_running_tone1', 'woman_running_light_skin_tone'), ('\U0001F3C3\U0001F3FB\u200D\u2640',)),
        ('\U0001F3C3\U0001F3FC\u200D\u2640\uFE0F', 'woman running: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_running_tone2', 'woman_running_medium_light_skin_tone'), ('\U0001F3C3\U0001F3FC\u200D\u2640',)),
        ('\U0001F3C3\U0001F3FD\u200D\u2640\uFE0F', 'woman running: medium skin tone', '4.0', 'MEDIUM', ('woman_running_tone3', 'woman_running_medium_skin_tone'), ('\U0001F3C3\U0001F3FD\u200D\u2640',)),
        ('\U0001F3C3\U0001F3FE\u200D\u2640\uFE0F', 'woman running: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_running_tone4', 'woman_running_medium_dark_skin_tone'), ('\U0001F3C3\U0001F3FE\u200D\u2640',)),
        ('\U0001F3C3\U0001F3FF\u200D\u2640\uFE0F', 'woman running: dark skin tone', '4.0', 'DARK', ('woman_running_tone5', 'woman_running_dark_skin_tone'), ('\U0001F3C3\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F3C3\u200D\u27A1\uFE0F', 'person running facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F3C3\u200D\u27A1',), (
        ('\U0001F3C3\U0001F3FB\u200D\u27A1\uFE0F', 'person running facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F3C3\U0001F3FB\u200D\u27A1',)),
        ('\U0001F3C3\U0001F3FC\u200D\u27A1\uFE0F', 'person running facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F3C3\U0001F3FC\u200D\u27A1',)),
        ('\U0001F3C3\U0001F3FD\u200D\u27A1\uFE0F', 'person running facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F3C3\U0001F3FD\u200D\u27A1',)),
        ('\U0001F3C3\U0001F3FE\u200D\u27A1\uFE0F', 'person running facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F3C3\U0001F3FE\u200D\u27A1',)),
        ('\U0001F3C3\U0001F3FF\u200D\u27A1\uFE0F', 'person running facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F3C3\U0001F3FF\u200D\u27A1',)),
    )),
    ('\U0001F3C3\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F3C3\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\u200D\u2640\u200D\u27A1'), (
        ('\U0001F3C3\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F3C3\U0001F3FB\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FB\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FB\u200D\u2640\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F3C3\U0001F3FC\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FC\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FC\u200D\u2640\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F3C3\U0001F3FD\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FD\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FD\u200D\u2640\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F3C3\U0001F3FE\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FE\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FE\u200D\u2640\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1\uFE0F', 'woman running facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F3C3\U0001F3FF\u200D\u2640\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FF\u200D\u2640\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FF\u200D\u2640\u200D\u27A1')),
    )),
    ('\U0001F3C3\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right', 'People & Body', 'person-activity', '15.1', (), ('\U0001F3C3\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\u200D\u2642\u200D\u27A1'), (
        ('\U0001F3C3\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right: light skin tone', '15.1', 'LIGHT', (), ('\U0001F3C3\U0001F3FB\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FB\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FB\u200D\u2642\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right: medium-light skin tone', '15.1', 'MEDIUM_LIGHT', (), ('\U0001F3C3\U0001F3FC\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FC\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FC\u200D\u2642\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right: medium skin tone', '15.1', 'MEDIUM', (), ('\U0001F3C3\U0001F3FD\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FD\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FD\u200D\u2642\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right: medium-dark skin tone', '15.1', 'MEDIUM_DARK', (), ('\U0001F3C3\U0001F3FE\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FE\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FE\u200D\u2642\u200D\u27A1')),
        ('\U0001F3C3\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1\uFE0F', 'man running facing right: dark skin tone', '15.1', 'DARK', (), ('\U0001F3C3\U0001F3FF\u200D\u2642\u200D\u27A1\uFE0F', '\U0001F3C3\U0001F3FF\u200D\u2642\uFE0F\u200D\u27A1', '\U0001F3C3\U0001F3FF\u200D\u2642\u200D\u27A1')),
    )),
    ('\U0001F483', 'woman dancing', 'People & Body', 'person-activity', '0.6', ('dancer',), (), (
        ('\U0001F483\U0001F3FB', 'woman dancing: light skin tone', '1.0', 'LIGHT', ('dancer_tone1',), ()),
        ('\U0001F483\U0001F3FC', 'woman dancing: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('dancer_tone2',), ()),
        ('\U0001F483\U0001F3FD', 'woman dancing: medium skin tone', '1.0', 'MEDIUM', ('dancer_tone3',), ()),
        ('\U0001F483\U0001F3FE', 'woman dancing: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('dancer_tone4',), ()),
        ('\U0001F483\U0001F3FF', 'woman dancing: dark skin tone', '1.0', 'DARK', ('dancer_tone5',), ()),
    )),
    ('\U0001F57A', 'man dancing', 'People & Body', 'person-activity', '3.0', ('man_dancing', 'male_dancer'), (), (
        ('\U0001F57A\U0001F3FB', 'man dancing: light skin tone', '3.0', 'LIGHT', ('man_dancing_tone1', 'male_dancer_tone1'), ()),
        ('\U0001F57A\U0001F3FC', 'man dancing: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('man_dancing_tone2', 'male_dancer_tone2'), ()),
        ('\U0001F57A\U0001F3FD', 'man dancing: medium skin tone', '3.0', 'MEDIUM', ('man_dancing_tone3', 'male_dancer_tone3'), ()),
        ('\U0001F57A\U0001F3FE', 'man dancing: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('man_dancing_tone4', 'male_dancer_tone4'), ()),
        ('\U0001F57A\U0001F3FF', 'man dancing: dark skin tone', '3.0', 'DARK', ('man_dancing_tone5', 'male_dancer_tone5'), ()),
    )),
    ('\U0001F574\uFE0F', 'person in suit levitating', 'People & Body', 'person-activity', '0.7', ('levitate', 'man_in_business_suit_levitating'), ('\U0001F574',), (
        ('\U0001F574\U0001F3FB', 'person in suit levitating: light skin tone', '4.0', 'LIGHT', ('levitate_tone1', 'man_in_business_suit_levitating_light_skin_tone', 'man_in_business_suit_levitating_tone1'), ()),
        ('\U0001F574\U0001F3FC', 'person in suit levitating: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('levitate_tone2', 'man_in_business_suit_levitating_medium_light_skin_tone', 'man_in_business_suit_levitating_tone2'), ()),
        ('\U0001F574\U0001F3FD', 'person in suit levitating: medium skin tone', '4.0', 'MEDIUM', ('levitate_tone3', 'man_in_business_suit_levitating_medium_skin_tone', 'man_in_business_suit_levitating_tone3'), ()),
        ('\U0001F574\U0001F3FE', 'person in suit levitating: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('levitate_tone4', 'man_in_business_suit_levitating_medium_dark_skin_tone', 'man_in_business_suit_levitating_tone4'), ()),
        ('\U0001F574\U0001F3FF', 'person in suit levitating: dark skin tone', '4.0', 'DARK', ('levitate_tone5', 'man_in_business_suit_levitating_dark_skin_tone', 'man_in_business_suit_levitating_tone5'), ()),
    )),
    ('\U0001F46F', 'people with bunny ears', 'People & Body', 'person-activity', '0.6', ('people_with_bunny_ears_partying', 'dancers'), (), None),
    ('\U0001F46F\u200D\u2642\uFE0F', 'men with bunny ears', 'People & Body', 'person-activity', '4.0', ('men_with_bunny_ears_partying',), ('\U0001F46F\u200D\u2642',), None),
    ('\U0001F46F\u200D\u2640\uFE0F', 'women with bunny ears', 'People & Body', 'person-activity', '4.0', ('women_with_bunny_ears_partying',), ('\U0001F46F\u200D\u2640',), None),
    ('\U0001F9D6', 'person in steamy room', 'People & Body', 'person-activity', '5.0', ('person_in_steamy_room',), (), (
        ('\U0001F9D6\U0001F3FB', 'person in steamy room: light skin tone', '5.0', 'LIGHT', ('person_in_steamy_room_tone1', 'person_in_steamy_room_light_skin_tone'), ()),
        ('\U0001F9D6\U0001F3FC', 'person in steamy room: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('person_in_steamy_room_tone2', 'person_in_steamy_room_medium_light_skin_tone'), ()),
        ('\U0001F9D6\U0001F3FD', 'person in steamy room: medium skin tone', '5.0', 'MEDIUM', ('person_in_steamy_room_tone3', 'person_in_steamy_room_medium_skin_tone'), ()),
        ('\U0001F9D6\U0001F3FE', 'person in steamy room: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('person_in_steamy_room_tone4', 'person_in_steamy_room_medium_dark_skin_tone'), ()),
        ('\U0001F9D6\U0001F3FF', 'person in steamy room: dark skin tone', '5.0', 'DARK', ('person_in_steamy_room_tone5', 'person_in_steamy_room_dark_skin_tone'), ()),
    )),
    ('\U0001F9D6\u200D\u2642\uFE0F', 'man in steamy room', 'People & Body', 'person-activity', '5.0', ('man_in_steamy_room',), ('\U0001F9D6\u200D\u2642',), (
        ('\U0001F9D6\U0001F3FB\u200D\u2642\uFE0F', 'man in steamy room: light skin tone', '5.0', 'LIGHT', ('man_in_steamy_room_tone1', 'man_in_steamy_room_light_skin_tone'), ('\U0001F9D6\U0001F3FB\u200D\u2642',)),
        ('\U0001F9D6\U0001F3FC\u200D\u2642\uFE0F', 'man in steamy room: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_in_steamy_room_tone2', 'man_in_steamy_room_medium_light_skin_tone'), ('\U0001F9D6\U0001F3FC\u200D\u2642',)),
        ('\U0001F9D6\U0001F3FD\u200D\u2642\uFE0F', 'man in steamy room: medium skin tone', '5.0', 'MEDIUM', ('man_in_steamy_room_tone3', 'man_in_steamy_room_medium_skin_tone'), ('\U0001F9D6\U0001F3FD\u200D\u2642',)),
        ('\U0001F9D6\U0001F3FE\u200D\u2642\uFE0F', 'man in steamy room: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_in_steamy_room_tone4', 'man_in_steamy_room_medium_dark_skin_tone'), ('\U0001F9D6\U0001F3FE\u200D\u2642',)),
        ('\U0001F9D6\U0001F3FF\u200D\u2642\uFE0F', 'man in steamy room: dark skin tone', '5.0', 'DARK', ('man_in_steamy_room_tone5', 'man_in_steamy_room_dark_skin_tone'), ('\U0001F9D6\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D6\u200D\u2640\uFE0F', 'woman in steamy room', 'People & Body', 'person-activity', '5.0', ('woman_in_steamy_room',), ('\U0001F9D6\u200D\u2640',), (
        ('\U0001F9D6\U0001F3FB\u200D\u2640\uFE0F', 'woman in steamy room: light skin tone', '5.0', 'LIGHT', ('woman_in_steamy_room_tone1', 'woman_in_steamy_room_light_skin_tone'), ('\U0001F9D6\U0001F3FB\u200D\u2640',)),
        ('\U0001F9D6\U0001F3FC\u200D\u2640\uFE0F', 'woman in steamy room: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_in_steamy_room_tone2', 'woman_in_steamy_room_medium_light_skin_tone'), ('\U0001F9D6\U0001F3FC\u200D\u2640',)),
        ('\U0001F9D6\U0001F3FD\u200D\u2640\uFE0F', 'woman in steamy room: medium skin tone', '5.0', 'MEDIUM', ('woman_in_steamy_room_tone3', 'woman_in_steamy_room_medium_skin_tone'), ('\U0001F9D6\U0001F3FD\u200D\u2640',)),
        ('\U0001F9D6\U0001F3FE\u200D\u2640\uFE0F', 'woman in steamy room: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_in_steamy_room_tone4', 'woman_in_steamy_room_medium_dark_skin_tone'), ('\U0001F9D6\U0001F3FE\u200D\u2640',)),
        ('\U0001F9D6\U0001F3FF\u200D\u2640\uFE0F', 'woman in steamy room: dark skin tone', '5.0', 'DARK', ('woman_in_steamy_room_tone5', 'woman_in_steamy_room_dark_skin_tone'), ('\U0001F9D6\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9D7', 'person climbing', 'People & Body', 'person-activity', '5.0', ('person_climbing',), (), (
        ('\U0001F9D7\U0001F3FB', 'person climbing: light skin tone', '5.0', 'LIGHT', ('person_climbing_tone1', 'person_climbing_light_skin_tone'), ()),
        ('\U0001F9D7\U0001F3FC', 'person climbing: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('person_climbing_tone2', 'person_climbing_medium_light_skin_tone'), ()),
        ('\U0001F9D7\U0001F3FD', 'person climbing: medium skin tone', '5.0', 'MEDIUM', ('person_climbing_tone3', 'person_climbing_medium_skin_tone'), ()),
        ('\U0001F9D7\U0001F3FE', 'person climbing: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('person_climbing_tone4', 'person_climbing_medium_dark_skin_tone'), ()),
        ('\U0001F9D7\U0001F3FF', 'person climbing: dark skin tone', '5.0', 'DARK', ('person_climbing_tone5', 'person_climbing_dark_skin_tone'), ()),
    )),
    ('\U0001F9D7\u200D\u2642\uFE0F', 'man climbing', 'People & Body', 'person-activity', '5.0', ('man_climbing',), ('\U0001F9D7\u200D\u2642',), (
        ('\U0001F9D7\U0001F3FB\u200D\u2642\uFE0F', 'man climbing: light skin tone', '5.0', 'LIGHT', ('man_climbing_tone1', 'man_climbing_light_skin_tone'), ('\U0001F9D7\U0001F3FB\u200D\u2642',)),
        ('\U0001F9D7\U0001F3FC\u200D\u2642\uFE0F', 'man climbing: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_climbing_tone2', 'man_climbing_medium_light_skin_tone'), ('\U0001F9D7\U0001F3FC\u200D\u2642',)),
        ('\U0001F9D7\U0001F3FD\u200D\u2642\uFE0F', 'man climbing: medium skin tone', '5.0', 'MEDIUM', ('man_climbing_tone3', 'man_climbing_medium_skin_tone'), ('\U0001F9D7\U0001F3FD\u200D\u2642',)),
        ('\U0001F9D7\U0001F3FE\u200D\u2642\uFE0F', 'man climbing: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_climbing_tone4', 'man_climbing_medium_dark_skin_tone'), ('\U0001F9D7\U0001F3FE\u200D\u2642',)),
        ('\U0001F9D7\U0001F3FF\u200D\u2642\uFE0F', 'man climbing: dark skin tone', '5.0', 'DARK', ('man_climbing_tone5', 'man_climbing_dark_skin_tone'), ('\U0001F9D7\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D7\u200D\u2640\uFE0F', 'woman climbing', 'People & Body', 'person-activity', '5.0', ('woman_climbing',), ('\U0001F9D7\u200D\u2640',), (
        ('\U0001F9D7\U0001F3FB\u200D\u2640\uFE0F', 'woman climbing: light skin tone', '5.0', 'LIGHT', ('woman_climbing_tone1', 'woman_climbing_light_skin_tone'), ('\U0001F9D7\U0001F3FB\u200D\u2640',)),
        ('\U0001F9D7\U0001F3FC\u200D\u2640\uFE0F', 'woman climbing: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_climbing_tone2', 'woman_climbing_medium_light_skin_tone'), ('\U0001F9D7\U0001F3FC\u200D\u2640',)),
        ('\U0001F9D7\U0001F3FD\u200D\u2640\uFE0F', 'woman climbing: medium skin tone', '5.0', 'MEDIUM', ('woman_climbing_tone3', 'woman_climbing_medium_skin_tone'), ('\U0001F9D7\U0001F3FD\u200D\u2640',)),
        ('\U0001F9D7\U0001F3FE\u200D\u2640\uFE0F', 'woman climbing: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_climbing_tone4', 'woman_climbing_medium_dark_skin_tone'), ('\U0001F9D7\U0001F3FE\u200D\u2640',)),
        ('\U0001F9D7\U0001F3FF\u200D\u2640\uFE0F', 'woman climbing: dark skin tone', '5.0', 'DARK', ('woman_climbing_tone5', 'woman_climbing_dark_skin_tone'), ('\U0001F9D7\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F93A', 'person fencing', 'People & Body', 'person-sport', '3.0', ('person_fencing', 'fencer', 'fencing'), (), None),
    ('\U0001F3C7', 'horse racing', 'People & Body', 'person-sport', '1.0', ('horse_racing',), (), (
        ('\U0001F3C7\U0001F3FB', 'horse racing: light skin tone', '1.0', 'LIGHT', ('horse_racing_tone1',), ()),
        ('\U0001F3C7\U0001F3FC', 'horse racing: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('horse_racing_tone2',), ()),
        ('\U0001F3C7\U0001F3FD', 'horse racing: medium skin tone', '1.0', 'MEDIUM', ('horse_racing_tone3',), ()),
        ('\U0001F3C7\U0001F3FE', 'horse racing: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('horse_racing_tone4',), ()),
        ('\U0001F3C7\U0001F3FF', 'horse racing: dark skin tone', '1.0', 'DARK', ('horse_racing_tone5',), ()),
    )),
    ('\u26F7\uFE0F', 'skier', 'People & Body', 'person-sport', '0.7', ('skier',), ('\u26F7',), None),
    ('\U0001F3C2', 'snowboarder', 'People & Body', 'person-sport', '0.6', ('snowboarder',), (), (
        ('\U0001F3C2\U0001F3FB', 'snowboarder: light skin tone', '1.0', 'LIGHT', ('snowboarder_tone1', 'snowboarder_light_skin_tone'), ()),
        ('\U0001F3C2\U0001F3FC', 'snowboarder: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('snowboarder_tone2', 'snowboarder_medium_light_skin_tone'), ()),
        ('\U0001F3C2\U0001F3FD', 'snowboarder: medium skin tone', '1.0', 'MEDIUM', ('snowboarder_tone3', 'snowboarder_medium_skin_tone'), ()),
        ('\U0001F3C2\U0001F3FE', 'snowboarder: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('snowboarder_tone4', 'snowboarder_medium_dark_skin_tone'), ()),
        ('\U0001F3C2\U0001F3FF', 'snowboarder: dark skin tone', '1.0', 'DARK', ('snowboarder_tone5', 'snowboarder_dark_skin_tone'), ()),
    )),
    ('\U0001F3CC\uFE0F', 'person golfing', 'People & Body', 'person-sport', '0.7', ('person_golfing', 'golfer'), ('\U0001F3CC',), (
        ('\U0001F3CC\U0001F3FB', 'person golfing: light skin tone', '4.0', 'LIGHT', ('person_golfing_tone1', 'person_golfing_light_skin_tone'), ()),
        ('\U0001F3CC\U0001F3FC', 'person golfing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('person_golfing_tone2', 'person_golfing_medium_light_skin_tone'), ()),
        ('\U0001F3CC\U0001F3FD', 'person golfing: medium skin tone', '4.0', 'MEDIUM', ('person_golfing_tone3', 'person_golfing_medium_skin_tone'), ()),
        ('\U0001F3CC\U0001F3FE', 'person golfing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('person_golfing_tone4', 'person_golfing_medium_dark_skin_tone'), ()),
        ('\U0001F3CC\U0001F3FF', 'person golfing: dark skin tone', '4.0', 'DARK', ('person_golfing_tone5', 'person_golfing_dark_skin_tone'), ()),
    )),
    ('\U0001F3CC\uFE0F\u200D\u2642\uFE0F', 'man golfing', 'People & Body', 'person-sport', '4.0', ('man_golfing',), ('\U0001F3CC\u200D\u2642\uFE0F', '\U0001F3CC\uFE0F\u200D\u2642', '\U0001F3CC\u200D\u2642'), (
        ('\U0001F3CC\U0001F3FB\u200D\u2642\uFE0F', 'man golfing: light skin tone', '4.0', 'LIGHT', ('man_golfing_tone1', 'man_golfing_light_skin_tone'), ('\U0001F3CC\U0001F3FB\u200D\u2642',)),
        ('\U0001F3CC\U0001F3FC\u200D\u2642\uFE0F', 'man golfing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_golfing_tone2', 'man_golfing_medium_light_skin_tone'), ('\U0001F3CC\U0001F3FC\u200D\u2642',)),
        ('\U0001F3CC\U0001F3FD\u200D\u2642\uFE0F', 'man golfing: medium skin tone', '4.0', 'MEDIUM', ('man_golfing_tone3', 'man_golfing_medium_skin_tone'), ('\U0001F3CC\U0001F3FD\u200D\u2642',)),
        ('\U0001F3CC\U0001F3FE\u200D\u2642\uFE0F', 'man golfing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_golfing_tone4', 'man_golfing_medium_dark_skin_tone'), ('\U0001F3CC\U0001F3FE\u200D\u2642',)),
        ('\U0001F3CC\U0001F3FF\u200D\u2642\uFE0F', 'man golfing: dark skin tone', '4.0', 'DARK', ('man_golfing_tone5', 'man_golfing_dark_skin_tone'), ('\U0001F3CC\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F3CC\uFE0F\u200D\u2640\uFE0F', 'woman golfing', 'People & Body', 'person-sport', '4.0', ('woman_golfing',), ('\U0001F3CC\u200D\u2640\uFE0F', '\U0001F3CC\uFE0F\u200D\u2640', '\U0001F3CC\u200D\u2640'), (
        ('\U0001F3CC\U0001F3FB\u200D\u2640\uFE0F', 'woman golfing: light skin tone', '4.0', 'LIGHT', ('woman_golfing_tone1', 'woman_golfing_light_skin_tone'), ('\U0001F3CC\U0001F3FB\u200D\u2640',)),
        ('\U0001F3CC\U0001F3FC\u200D\u2640\uFE0F', 'woman golfing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_golfing_tone2', 'woman_golfing_medium_light_skin_tone'), ('\U0001F3CC\U0001F3FC\u200D\u2640',)),
        ('\U0001F3CC\U0001F3FD\u200D\u2640\uFE0F', 'woman golfing: medium skin tone', '4.0', 'MEDIUM', ('woman_golfing_tone3', 'woman_golfing_medium_skin_tone'), ('\U0001F3CC\U0001F3FD\u200D\u2640',)),
        ('\U0001F3CC\U0001F3FE\u200D\u2640\uFE0F', 'woman golfing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_golfing_tone4', 'woman_golfing_medium_dark_skin_tone'), ('\U0001F3CC\U0001F3FE\u200D\u2640',)),
        ('\U0001F3CC\U0001F3FF\u200D\u2640\uFE0F', 'woman golfing: dark skin tone', '4.0', 'DARK', ('woman_golfing_tone5', 'woman_golfing_dark_skin_tone'), ('\U0001F3CC\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F3C4', 'person surfing', 'People & Body', 'person-sport', '0.6', ('person_surfing', 'surfer'), (), (
        ('\U0001F3C4\U0001F3FB', 'person surfing: light skin tone', '1.0', 'LIGHT', ('person_surfing_tone1', 'surfer_tone1'), ()),
        ('\U0001F3C4\U0001F3FC', 'person surfing: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_surfing_tone2', 'surfer_tone2'), ()),
        ('\U0001F3C4\U0001F3FD', 'person surfing: medium skin tone', '1.0', 'MEDIUM', ('person_surfing_tone3', 'surfer_tone3'), ()),
        ('\U0001F3C4\U0001F3FE', 'person surfing: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_surfing_tone4', 'surfer_tone4'), ()),
        ('\U0001F3C4\U0001F3FF', 'person surfing: dark skin tone', '1.0', 'DARK', ('person_surfing_tone5', 'surfer_tone5'), ()),
    )),
    ('\U0001F3C4\u200D\u2642\uFE0F', 'man surfing', 'People & Body', 'person-sport', '4.0', ('man_surfing',), ('\U0001F3C4\u200D\u2642',), (
        ('\U0001F3C4\U0001F3FB\u200D\u2642\uFE0F', 'man surfing: light skin tone', '4.0', 'LIGHT', ('man_surfing_tone1', 'man_surfing_light_skin_tone'), ('\U0001F3C4\U0001F3FB\u200D\u2642',)),
        ('\U0001F3C4\U0001F3FC\u200D\u2642\uFE0F', 'man surfing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_surfing_tone2', 'man_surfing_medium_light_skin_tone'), ('\U0001F3C4\U0001F3FC\u200D\u2642',)),
        ('\U0001F3C4\U0001F3FD\u200D\u2642\uFE0F', 'man surfing: medium skin tone', '4.0', 'MEDIUM', ('man_surfing_tone3', 'man_surfing_medium_skin_tone'), ('\U0001F3C4\U0001F3FD\u200D\u2642',)),
        ('\U0001F3C4\U0001F3FE\u200D\u2642\uFE0F', 'man surfing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_surfing_tone4', 'man_surfing_medium_dark_skin_tone'), ('\U0001F3C4\U0001F3FE\u200D\u2642',)),
        ('\U0001F3C4\U0001F3FF\u200D\u2642\uFE0F', 'man surfing: dark skin tone', '4.0', 'DARK', ('man_surfing_tone5', 'man_surfing_dark_skin_tone'), ('\U0001F3C4\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F3C4\u200D\u2640\uFE0F', 'woman surfing', 'People & Body', 'person-sport', '4.0', ('woman_surfing',), ('\U0001F3C4\u200D\u2640',), (
        ('\U0001F3C4\U0001F3FB\u200D\u2640\uFE0F', 'woman surfing: light skin tone', '4.0', 'LIGHT', ('woman_surfing_tone1', 'woman_surfing_light_skin_tone'), ('\U0001F3C4\U0001F3FB\u200D\u2640',)),
        ('\U0001F3C4\U0001F3FC\u200D\u2640\uFE0F', 'woman surfing: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_surfing_tone2', 'woman_surfing_medium_light_skin_tone'), ('\U0001F3C4\U0001F3FC\u200D\u2640',)),
        ('\U0001F3C4\U0001F3FD\u200D\u2640\uFE0F', 'woman surfing: medium skin tone', '4.0', 'MEDIUM', ('woman_surfing_tone3', 'woman_surfing_medium_skin_tone'), ('\U0001F3C4\U0001F3FD\u200D\u2640',)),
        ('\U0001F3C4\U0001F3FE\u200D\u2640\uFE0F', 'woman surfing: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_surfing_tone4', 'woman_surfing_medium_dark_skin_tone'), ('\U0001F3C4\U0001F3FE\u200D\u2640',)),
        ('\U0001F3C4\U0001F3FF\u200D\u2640\uFE0F', 'woman surfing: dark skin tone', '4.0', 'DARK', ('woman_surfing_tone5', 'woman_surfing_dark_skin_tone'), ('\U0001F3C4\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6A3', 'person rowing boat', 'People & Body', 'person-sport', '1.0', ('person_rowing_boat', 'rowboat'), (), (
        ('\U0001F6A3\U0001F3FB', 'person rowing boat: light skin tone', '1.0', 'LIGHT', ('person_rowing_boat_tone1', 'rowboat_tone1'), ()),
        ('\U0001F6A3\U0001F3FC', 'person rowing boat: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_rowing_boat_tone2', 'rowboat_tone2'), ()),
        ('\U0001F6A3\U0001F3FD', 'person rowing boat: medium skin tone', '1.0', 'MEDIUM', ('person_rowing_boat_tone3', 'rowboat_tone3'), ()),
        ('\U0001F6A3\U0001F3FE', 'person rowing boat: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_rowing_boat_tone4', 'rowboat_tone4'), ()),
        ('\U0001F6A3\U0001F3FF', 'person rowing boat: dark skin tone', '1.0', 'DARK', ('person_rowing_boat_tone5', 'rowboat_tone5'), ()),
    )),
    ('\U0001F6A3\u200D\u2642\uFE0F', 'man rowing boat', 'People & Body', 'person-sport', '4.0', ('man_rowing_boat',), ('\U0001F6A3\u200D\u2642',), (
        ('\U0001F6A3\U0001F3FB\u200D\u2642\uFE0F', 'man rowing boat: light skin tone', '4.0', 'LIGHT', ('man_rowing_boat_tone1', 'man_rowing_boat_light_skin_tone'), ('\U0001F6A3\U0001F3FB\u200D\u2642',)),
        ('\U0001F6A3\U0001F3FC\u200D\u2642\uFE0F', 'man rowing boat: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_rowing_boat_tone2', 'man_rowing_boat_medium_light_skin_tone'), ('\U0001F6A3\U0001F3FC\u200D\u2642',)),
        ('\U0001F6A3\U0001F3FD\u200D\u2642\uFE0F', 'man rowing boat: medium skin tone', '4.0', 'MEDIUM', ('man_rowing_boat_tone3', 'man_rowing_boat_medium_skin_tone'), ('\U0001F6A3\U0001F3FD\u200D\u2642',)),
        ('\U0001F6A3\U0001F3FE\u200D\u2642\uFE0F', 'man rowing boat: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_rowing_boat_tone4', 'man_rowing_boat_medium_dark_skin_tone'), ('\U0001F6A3\U0001F3FE\u200D\u2642',)),
        ('\U0001F6A3\U0001F3FF\u200D\u2642\uFE0F', 'man rowing boat: dark skin tone', '4.0', 'DARK', ('man_rowing_boat_tone5', 'man_rowing_boat_dark_skin_tone'), ('\U0001F6A3\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F6A3\u200D\u2640\uFE0F', 'woman rowing boat', 'People & Body', 'person-sport', '4.0', ('woman_rowing_boat',), ('\U0001F6A3\u200D\u2640',), (
        ('\U0001F6A3\U0001F3FB\u200D\u2640\uFE0F', 'woman rowing boat: light skin tone', '4.0', 'LIGHT', ('woman_rowing_boat_tone1', 'woman_rowing_boat_light_skin_tone'), ('\U0001F6A3\U0001F3FB\u200D\u2640',)),
        ('\U0001F6A3\U0001F3FC\u200D\u2640\uFE0F', 'woman rowing boat: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_rowing_boat_tone2', 'woman_rowing_boat_medium_light_skin_tone'), ('\U0001F6A3\U0001F3FC\u200D\u2640',)),
        ('\U0001F6A3\U0001F3FD\u200D\u2640\uFE0F', 'woman rowing boat: medium skin tone', '4.0', 'MEDIUM', ('woman_rowing_boat_tone3', 'woman_rowing_boat_medium_skin_tone'), ('\U0001F6A3\U0001F3FD\u200D\u2640',)),
        ('\U0001F6A3\U0001F3FE\u200D\u2640\uFE0F', 'woman rowing boat: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_rowing_boat_tone4', 'woman_rowing_boat_medium_dark_skin_tone'), ('\U0001F6A3\U0001F3FE\u200D\u2640',)),
        ('\U0001F6A3\U0001F3FF\u200D\u2640\uFE0F', 'woman rowing boat: dark skin tone', '4.0', 'DARK', ('woman_rowing_boat_tone5', 'woman_rowing_boat_dark_skin_tone'), ('\U0001F6A3\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F3CA', 'person swimming', 'People & Body', 'person-sport', '0.6', ('person_swimming', 'swimmer'), (), (
        ('\U0001F3CA\U0001F3FB', 'person swimming: light skin tone', '1.0', 'LIGHT', ('person_swimming_tone1', 'swimmer_tone1'), ()),
        ('\U0001F3CA\U0001F3FC', 'person swimming: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_swimming_tone2', 'swimmer_tone2'), ()),
        ('\U0001F3CA\U0001F3FD', 'person swimming: medium skin tone', '1.0', 'MEDIUM', ('person_swimming_tone3', 'swimmer_tone3'), ()),
        ('\U0001F3CA\U0001F3FE', 'person swimming: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_swimming_tone4', 'swimmer_tone4'), ()),
        ('\U0001F3CA\U0001F3FF', 'person swimming: dark skin tone', '1.0', 'DARK', ('person_swimming_tone5', 'swimmer_tone5'), ()),
    )),
    ('\U0001F3CA\u200D\u2642\uFE0F', 'man swimming', 'People & Body', 'person-sport', '4.0', ('man_swimming',), ('\U0001F3CA\u200D\u2642',), (
        ('\U0001F3CA\U0001F3FB\u200D\u2642\uFE0F', 'man swimming: light skin tone', '4.0', 'LIGHT', ('man_swimming_tone1', 'man_swimming_light_skin_tone'), ('\U0001F3CA\U0001F3FB\u200D\u2642',)),
        ('\U0001F3CA\U0001F3FC\u200D\u2642\uFE0F', 'man swimming: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_swimming_tone2', 'man_swimming_medium_light_skin_tone'), ('\U0001F3CA\U0001F3FC\u200D\u2642',)),
        ('\U0001F3CA\U0001F3FD\u200D\u2642\uFE0F', 'man swimming: medium skin tone', '4.0', 'MEDIUM', ('man_swimming_tone3', 'man_swimming_medium_skin_tone'), ('\U0001F3CA\U0001F3FD\u200D\u2642',)),
        ('\U0001F3CA\U0001F3FE\u200D\u2642\uFE0F', 'man swimming: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_swimming_tone4', 'man_swimming_medium_dark_skin_tone'), ('\U0001F3CA\U0001F3FE\u200D\u2642',)),
        ('\U0001F3CA\U0001F3FF\u200D\u2642\uFE0F', 'man swimming: dark skin tone', '4.0', 'DARK', ('man_swimming_tone5', 'man_swimming_dark_skin_tone'), ('\U0001F3CA\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F3CA\u200D\u2640\uFE0F', 'woman swimming', 'People & Body', 'person-sport', '4.0', ('woman_swimming',), ('\U0001F3CA\u200D\u2640',), (
        ('\U0001F3CA\U0001F3FB\u200D\u2640\uFE0F', 'woman swimming: light skin tone', '4.0', 'LIGHT', ('woman_swimming_tone1', 'woman_swimming_light_skin_tone'), ('\U0001F3CA\U0001F3FB\u200D\u2640',)),
        ('\U0001F3CA\U0001F3FC\u200D\u2640\uFE0F', 'woman swimming: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_swimming_tone2', 'woman_swimming_medium_light_skin_tone'), ('\U0001F3CA\U0001F3FC\u200D\u2640',)),
        ('\U0001F3CA\U0001F3FD\u200D\u2640\uFE0F', 'woman swimming: medium skin tone', '4.0', 'MEDIUM', ('woman_swimming_tone3', 'woman_swimming_medium_skin_tone'), ('\U0001F3CA\U0001F3FD\u200D\u2640',)),
        ('\U0001F3CA\U0001F3FE\u200D\u2640\uFE0F', 'woman swimming: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_swimming_tone4', 'woman_swimming_medium_dark_skin_tone'), ('\U0001F3CA\U0001F3FE\u200D\u2640',)),
        ('\U0001F3CA\U0001F3FF\u200D\u2640\uFE0F', 'woman swimming: dark skin tone', '4.0', 'DARK', ('woman_swimming_tone5', 'woman_swimming_dark_skin_tone'), ('\U0001F3CA\U0001F3FF\u200D\u2640',)),
    )),
    ('\u26F9\uFE0F', 'person bouncing ball', 'People & Body', 'person-sport', '0.7', ('person_bouncing_ball', 'basketball_player', 'person_with_ball'), ('\u26F9',), (
        ('\u26F9\U0001F3FB', 'person bouncing ball: light skin tone', '2.0', 'LIGHT', ('person_bouncing_ball_tone1', 'basketball_player_tone1', 'person_with_ball_tone1'), ()),
        ('\u26F9\U0001F3FC', 'person bouncing ball: medium-light skin tone', '2.0', 'MEDIUM_LIGHT', ('person_bouncing_ball_tone2', 'basketball_player_tone2', 'person_with_ball_tone2'), ()),
        ('\u26F9\U0001F3FD', 'person bouncing ball: medium skin tone', '2.0', 'MEDIUM', ('person_bouncing_ball_tone3', 'basketball_player_tone3', 'person_with_ball_tone3'), ()),
        ('\u26F9\U0001F3FE', 'person bouncing ball: medium-dark skin tone', '2.0', 'MEDIUM_DARK', ('person_bouncing_ball_tone4', 'basketball_player_tone4', 'person_with_ball_tone4'), ()),
        ('\u26F9\U0001F3FF', 'person bouncing ball: dark skin tone', '2.0', 'DARK', ('person_bouncing_ball_tone5', 'basketball_player_tone5', 'person_with_ball_tone5'), ()),
    )),
    ('\u26F9\uFE0F\u200D\u2642\uFE0F', 'man bouncing ball', 'People & Body', 'person-sport', '4.0', ('man_bouncing_ball',), ('\u26F9\u200D\u2642\uFE0F', '\u26F9\uFE0F\u200D\u2642', '\u26F9\u200D\u2642'), (
        ('\u26F9\U0001F3FB\u200D\u2642\uFE0F', 'man bouncing ball: light skin tone', '4.0', 'LIGHT', ('man_bouncing_ball_tone1', 'man_bouncing_ball_light_skin_tone'), ('\u26F9\U0001F3FB\u200D\u2642',)),
        ('\u26F9\U0001F3FC\u200D\u2642\uFE0F', 'man bouncing ball: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_bouncing_ball_tone2', 'man_bouncing_ball_medium_light_skin_tone'), ('\u26F9\U0001F3FC\u200D\u2642',)),
        ('\u26F9\U0001F3FD\u200D\u2642\uFE0F', 'man bouncing ball: medium skin tone', '4.0', 'MEDIUM', ('man_bouncing_ball_tone3', 'man_bouncing_ball_medium_skin_tone'), ('\u26F9\U0001F3FD\u200D\u2642',)),
        ('\u26F9\U0001F3FE\u200D\u2642\uFE0F', 'man bouncing ball: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_bouncing_ball_tone4', 'man_bouncing_ball_medium_dark_skin_tone'), ('\u26F9\U0001F3FE\u200D\u2642',)),
        ('\u26F9\U0001F3FF\u200D\u2642\uFE0F', 'man bouncing ball: dark skin tone', '4.0', 'DARK', ('man_bouncing_ball_tone5', 'man_bouncing_ball_dark_skin_tone'), ('\u26F9\U0001F3FF\u200D\u2642',)),
    )),
    ('\u26F9\uFE0F\u200D\u2640\uFE0F', 'woman bouncing ball', 'People & Body', 'person-sport', '4.0', ('woman_bouncing_ball',), ('\u26F9\u200D\u2640\uFE0F', '\u26F9\uFE0F\u200D\u2640', '\u26F9\u200D\u2640'), (
        ('\u26F9\U0001F3FB\u200D\u2640\uFE0F', 'woman bouncing ball: light skin tone', '4.0', 'LIGHT', ('woman_bouncing_ball_tone1', 'woman_bouncing_ball_light_skin_tone'), ('\u26F9\U0001F3FB\u200D\u2640',)),
        ('\u26F9\U0001F3FC\u200D\u2640\uFE0F', 'woman bouncing ball: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_bouncing_ball_tone2', 'woman_bouncing_ball_medium_light_skin_tone'), ('\u26F9\U0001F3FC\u200D\u2640',)),
        ('\u26F9\U0001F3FD\u200D\u2640\uFE0F', 'woman bouncing ball: medium skin tone', '4.0', 'MEDIUM', ('woman_bouncing_ball_tone3', 'woman_bouncing_ball_medium_skin_tone'), ('\u26F9\U0001F3FD\u200D\u2640',)),
        ('\u26F9\U0001F3FE\u200D\u2640\uFE0F', 'woman bouncing ball: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_bouncing_ball_tone4', 'woman_bouncing_ball_medium_dark_skin_tone'), ('\u26F9\U0001F3FE\u200D\u2640',)),
        ('\u26F9\U0001F3FF\u200D\u2640\uFE0F', 'woman bouncing ball: dark skin tone', '4.0', 'DARK', ('woman_bouncing_ball_tone5', 'woman_bouncing_ball_dark_skin_tone'), ('\u26F9\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F3CB\uFE0F', 'person lifting weights', 'People & Body', 'person-sport', '0.7', ('person_lifting_weights', 'lifter', 'weight_lifter'), ('\U0001F3CB',), (
        ('\U0001F3CB\U0001F3FB', 'person lifting weights: light skin tone', '2.0', 'LIGHT', ('person_lifting_weights_tone1', 'lifter_tone1', 'weight_lifter_tone1'), ()),
        ('\U0001F3CB\U0001F3FC', 'person lifting weights: medium-light skin tone', '2.0', 'MEDIUM_LIGHT', ('person_lifting_weights_tone2', 'lifter_tone2', 'weight_lifter_tone2'), ()),
        ('\U0001F3CB\U0001F3FD', 'person lifting weights: medium skin tone', '2.0', 'MEDIUM', ('person_lifting_weights_tone3', 'lifter_tone3', 'weight_lifter_tone3'), ()),
        ('\U0001F3CB\U0001F3FE', 'person lifting weights: medium-dark skin tone', '2.0', 'MEDIUM_DARK', ('person_lifting_weights_tone4', 'lifter_tone4', 'weight_lifter_tone4'), ()),
        ('\U0001F3CB\U0001F3FF', 'person lifting weights: dark skin tone', '2.0', 'DARK', ('person_lifting_weights_tone5', 'lifter_tone5', 'weight_lifter_tone5'), ()),
    )),
    ('\U0001F3CB\uFE0F\u200D\u2642\uFE0F', 'man lifting weights', 'People & Body', 'person-sport', '4.0', ('man_lifting_weights',), ('\U0001F3CB\u200D\u2642\uFE0F', '\U0001F3CB\uFE0F\u200D\u2642', '\U0001F3CB\u200D\u2642'), (
        ('\U0001F3CB\U0001F3FB\u200D\u2642\uFE0F', 'man lifting weights: light skin tone', '4.0', 'LIGHT', ('man_lifting_weights_tone1', 'man_lifting_weights_light_skin_tone'), ('\U0001F3CB\U0001F3FB\u200D\u2642',)),
        ('\U0001F3CB\U0001F3FC\u200D\u2642\uFE0F', 'man lifting weights: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_lifting_weights_tone2', 'man_lifting_weights_medium_light_skin_tone'), ('\U0001F3CB\U0001F3FC\u200D\u2642',)),
        ('\U0001F3CB\U0001F3FD\u200D\u2642\uFE0F', 'man lifting weights: medium skin tone', '4.0', 'MEDIUM', ('man_lifting_weights_tone3', 'man_lifting_weights_medium_skin_tone'), ('\U0001F3CB\U0001F3FD\u200D\u2642',)),
        ('\U0001F3CB\U0001F3FE\u200D\u2642\uFE0F', 'man lifting weights: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_lifting_weights_tone4', 'man_lifting_weights_medium_dark_skin_tone'), ('\U0001F3CB\U0001F3FE\u200D\u2642',)),
        ('\U0001F3CB\U0001F3FF\u200D\u2642\uFE0F', 'man lifting weights: dark skin tone', '4.0', 'DARK', ('man_lifting_weights_tone5', 'man_lifting_weights_dark_skin_tone'), ('\U0001F3CB\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F3CB\uFE0F\u200D\u2640\uFE0F', 'woman lifting weights', 'People & Body', 'person-sport', '4.0', ('woman_lifting_weights',), ('\U0001F3CB\u200D\u2640\uFE0F', '\U0001F3CB\uFE0F\u200D\u2640', '\U0001F3CB\u200D\u2640'), (
        ('\U0001F3CB\U0001F3FB\u200D\u2640\uFE0F', 'woman lifting weights: light skin tone', '4.0', 'LIGHT', ('woman_lifting_weights_tone1', 'woman_lifting_weights_light_skin_tone'), ('\U0001F3CB\U0001F3FB\u200D\u2640',)),
        ('\U0001F3CB\U0001F3FC\u200D\u2640\uFE0F', 'woman lifting weights: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_lifting_weights_tone2', 'woman_lifting_weights_medium_light_skin_tone'), ('\U0001F3CB\U0001F3FC\u200D\u2640',)),
        ('\U0001F3CB\U0001F3FD\u200D\u2640\uFE0F', 'woman lifting weights: medium skin tone', '4.0', 'MEDIUM', ('woman_lifting_weights_tone3', 'woman_lifting_weights_medium_skin_tone'), ('\U0001F3CB\U0001F3FD\u200D\u2640',)),
        ('\U0001F3CB\U0001F3FE\u200D\u2640\uFE0F', 'woman lifting weights: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_lifting_weights_tone4', 'woman_lifting_weights_medium_dark_skin_tone'), ('\U0001F3CB\U0001F3FE\u200D\u2640',)),
        ('\U0001F3CB\U0001F3FF\u200D\u2640\uFE0F', 'woman lifting weights: dark skin tone', '4.0', 'DARK', ('woman_lifting_weights_tone5', 'woman_lifting_weights_dark_skin_tone'), ('\U0001F3CB\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6B4', 'person biking', 'People & Body', 'person-sport', '1.0', ('person_biking', 'bicyclist'), (), (
        ('\U0001F6B4\U0001F3FB', 'person biking: light skin tone', '1.0', 'LIGHT', ('person_biking_tone1', 'bicyclist_tone1'), ()),
        ('\U0001F6B4\U0001F3FC', 'person biking: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_biking_tone2', 'bicyclist_tone2'), ()),
        ('\U0001F6B4\U0001F3FD', 'person biking: medium skin tone', '1.0', 'MEDIUM', ('person_biking_tone3', 'bicyclist_tone3'), ()),
        ('\U0001F6B4\U0001F3FE', 'person biking: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_biking_tone4', 'bicyclist_tone4'), ()),
        ('\U0001F6B4\U0001F3FF', 'person biking: dark skin tone', '1.0', 'DARK', ('person_biking_tone5', 'bicyclist_tone5'), ()),
    )),
    ('\U0001F6B4\u200D\u2642\uFE0F', 'man biking', 'People & Body', 'person-sport', '4.0', ('man_biking',), ('\U0001F6B4\u200D\u2642',), (
        ('\U0001F6B4\U0001F3FB\u200D\u2642\uFE0F', 'man biking: light skin tone', '4.0', 'LIGHT', ('man_biking_tone1', 'man_biking_light_skin_tone'), ('\U0001F6B4\U0001F3FB\u200D\u2642',)),
        ('\U0001F6B4\U0001F3FC\u200D\u2642\uFE0F', 'man biking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_biking_tone2', 'man_biking_medium_light_skin_tone'), ('\U0001F6B4\U0001F3FC\u200D\u2642',)),
        ('\U0001F6B4\U0001F3FD\u200D\u2642\uFE0F', 'man biking: medium skin tone', '4.0', 'MEDIUM', ('man_biking_tone3', 'man_biking_medium_skin_tone'), ('\U0001F6B4\U0001F3FD\u200D\u2642',)),
        ('\U0001F6B4\U0001F3FE\u200D\u2642\uFE0F', 'man biking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_biking_tone4', 'man_biking_medium_dark_skin_tone'), ('\U0001F6B4\U0001F3FE\u200D\u2642',)),
        ('\U0001F6B4\U0001F3FF\u200D\u2642\uFE0F', 'man biking: dark skin tone', '4.0', 'DARK', ('man_biking_tone5', 'man_biking_dark_skin_tone'), ('\U0001F6B4\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F6B4\u200D\u2640\uFE0F', 'woman biking', 'People & Body', 'person-sport', '4.0', ('woman_biking',), ('\U0001F6B4\u200D\u2640',), (
        ('\U0001F6B4\U0001F3FB\u200D\u2640\uFE0F', 'woman biking: light skin tone', '4.0', 'LIGHT', ('woman_biking_tone1', 'woman_biking_light_skin_tone'), ('\U0001F6B4\U0001F3FB\u200D\u2640',)),
        ('\U0001F6B4\U0001F3FC\u200D\u2640\uFE0F', 'woman biking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_biking_tone2', 'woman_biking_medium_light_skin_tone'), ('\U0001F6B4\U0001F3FC\u200D\u2640',)),
        ('\U0001F6B4\U0001F3FD\u200D\u2640\uFE0F', 'woman biking: medium skin tone', '4.0', 'MEDIUM', ('woman_biking_tone3', 'woman_biking_medium_skin_tone'), ('\U0001F6B4\U0001F3FD\u200D\u2640',)),
        ('\U0001F6B4\U0001F3FE\u200D\u2640\uFE0F', 'woman biking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_biking_tone4', 'woman_biking_medium_dark_skin_tone'), ('\U0001F6B4\U0001F3FE\u200D\u2640',)),
        ('\U0001F6B4\U0001F3FF\u200D\u2640\uFE0F', 'woman biking: dark skin tone', '4.0', 'DARK', ('woman_biking_tone5', 'woman_biking_dark_skin_tone'), ('\U0001F6B4\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6B5', 'person mountain biking', 'People & Body', 'person-sport', '1.0', ('person_mountain_biking', 'mountain_bicyclist'), (), (
        ('\U0001F6B5\U0001F3FB', 'person mountain biking: light skin tone', '1.0', 'LIGHT', ('person_mountain_biking_tone1', 'mountain_bicyclist_tone1'), ()),
        ('\U0001F6B5\U0001F3FC', 'person mountain biking: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('person_mountain_biking_tone2', 'mountain_bicyclist_tone2'), ()),
        ('\U0001F6B5\U0001F3FD', 'person mountain biking: medium skin tone', '1.0', 'MEDIUM', ('person_mountain_biking_tone3', 'mountain_bicyclist_tone3'), ()),
        ('\U0001F6B5\U0001F3FE', 'person mountain biking: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('person_mountain_biking_tone4', 'mountain_bicyclist_tone4'), ()),
        ('\U0001F6B5\U0001F3FF', 'person mountain biking: dark skin tone', '1.0', 'DARK', ('person_mountain_biking_tone5', 'mountain_bicyclist_tone5'), ()),
    )),
    ('\U0001F6B5\u200D\u2642\uFE0F', 'man mountain biking', 'People & Body', 'person-sport', '4.0', ('man_mountain_biking',), ('\U0001F6B5\u200D\u2642',), (
        ('\U0001F6B5\U0001F3FB\u200D\u2642\uFE0F', 'man mountain biking: light skin tone', '4.0', 'LIGHT', ('man_mountain_biking_tone1', 'man_mountain_biking_light_skin_tone'), ('\U0001F6B5\U0001F3FB\u200D\u2642',)),
        ('\U0001F6B5\U0001F3FC\u200D\u2642\uFE0F', 'man mountain biking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_mountain_biking_tone2', 'man_mountain_biking_medium_light_skin_tone'), ('\U0001F6B5\U0001F3FC\u200D\u2642',)),
        ('\U0001F6B5\U0001F3FD\u200D\u2642\uFE0F', 'man mountain biking: medium skin tone', '4.0', 'MEDIUM', ('man_mountain_biking_tone3', 'man_mountain_biking_medium_skin_tone'), ('\U0001F6B5\U0001F3FD\u200D\u2642',)),
        ('\U0001F6B5\U0001F3FE\u200D\u2642\uFE0F', 'man mountain biking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_mountain_biking_tone4', 'man_mountain_biking_medium_dark_skin_tone'), ('\U0001F6B5\U0001F3FE\u200D\u2642',)),
        ('\U0001F6B5\U0001F3FF\u200D\u2642\uFE0F', 'man mountain biking: dark skin tone', '4.0', 'DARK', ('man_mountain_biking_tone5', 'man_mountain_biking_dark_skin_tone'), ('\U0001F6B5\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F6B5\u200D\u2640\uFE0F', 'woman mountain biking', 'People & Body', 'person-sport', '4.0', ('woman_mountain_biking',), ('\U0001F6B5\u200D\u2640',), (
        ('\U0001F6B5\U0001F3FB\u200D\u2640\uFE0F', 'woman mountain biking: light skin tone', '4.0', 'LIGHT', ('woman_mountain_biking_tone1', 'woman_mountain_biking_light_skin_tone'), ('\U0001F6B5\U0001F3FB\u200D\u2640',)),
        ('\U0001F6B5\U0001F3FC\u200D\u2640\uFE0F', 'woman mountain biking: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_mountain_biking_tone2', 'woman_mountain_biking_medium_light_skin_tone'), ('\U0001F6B5\U0001F3FC\u200D\u2640',)),
        ('\U0001F6B5\U0001F3FD\u200D\u2640\uFE0F', 'woman mountain biking: medium skin tone', '4.0', 'MEDIUM', ('woman_mountain_biking_tone3', 'woman_mountain_biking_medium_skin_tone'), ('\U0001F6B5\U0001F3FD\u200D\u2640',)),
        ('\U0001F6B5\U0001F3FE\u200D\u2640\uFE0F', 'woman mountain biking: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_mountain_biking_tone4', 'woman_mountain_biking_medium_dark_skin_tone'), ('\U0001F6B5\U0001F3FE\u200D\u2640',)),
        ('\U0001F6B5\U0001F3FF\u200D\u2640\uFE0F', 'woman mountain biking: dark skin tone', '4.0', 'DARK', ('woman_mountain_biking_tone5', 'woman_mountain_biking_dark_skin_tone'), ('\U0001F6B5\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F938', 'person cartwheeling', 'People & Body', 'person-sport', '3.0', ('person_doing_cartwheel', 'cartwheel'), (), (
        ('\U0001F938\U0001F3FB', 'person cartwheeling: light skin tone', '3.0', 'LIGHT', ('person_doing_cartwheel_tone1', 'cartwheel_tone1'), ()),
        ('\U0001F938\U0001F3FC', 'person cartwheeling: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_doing_cartwheel_tone2', 'cartwheel_tone2'), ()),
        ('\U0001F938\U0001F3FD', 'person cartwheeling: medium skin tone', '3.0', 'MEDIUM', ('person_doing_cartwheel_tone3', 'cartwheel_tone3'), ()),
        ('\U0001F938\U0001F3FE', 'person cartwheeling: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_doing_cartwheel_tone4', 'cartwheel_tone4'), ()),
        ('\U0001F938\U0001F3FF', 'person cartwheeling: dark skin tone', '3.0', 'DARK', ('person_doing_cartwheel_tone5', 'cartwheel_tone5'), ()),
    )),
    ('\U0001F938\u200D\u2642\uFE0F', 'man cartwheeling', 'People & Body', 'person-sport', '4.0', ('man_cartwheeling',), ('\U0001F938\u200D\u2642',), (
        ('\U0001F938\U0001F3FB\u200D\u2642\uFE0F', 'man cartwheeling: light skin tone', '4.0', 'LIGHT', ('man_cartwheeling_tone1', 'man_cartwheeling_light_skin_tone'), ('\U0001F938\U0001F3FB\u200D\u2642',)),
        ('\U0001F938\U0001F3FC\u200D\u2642\uFE0F', 'man cartwheeling: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_cartwheeling_tone2', 'man_cartwheeling_medium_light_skin_tone'), ('\U0001F938\U0001F3FC\u200D\u2642',)),
        ('\U0001F938\U0001F3FD\u200D\u2642\uFE0F', 'man cartwheeling: medium skin tone', '4.0', 'MEDIUM', ('man_cartwheeling_tone3', 'man_cartwheeling_medium_skin_tone'), ('\U0001F938\U0001F3FD\u200D\u2642',)),
        ('\U0001F938\U0001F3FE\u200D\u2642\uFE0F', 'man cartwheeling: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_cartwheeling_tone4', 'man_cartwheeling_medium_dark_skin_tone'), ('\U0001F938\U0001F3FE\u200D\u2642',)),
        ('\U0001F938\U0001F3FF\u200D\u2642\uFE0F', 'man cartwheeling: dark skin tone', '4.0', 'DARK', ('man_cartwheeling_tone5', 'man_cartwheeling_dark_skin_tone'), ('\U0001F938\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F938\u200D\u2640\uFE0F', 'woman cartwheeling', 'People & Body', 'person-sport', '4.0', ('woman_cartwheeling',), ('\U0001F938\u200D\u2640',), (
        ('\U0001F938\U0001F3FB\u200D\u2640\uFE0F', 'woman cartwheeling: light skin tone', '4.0', 'LIGHT', ('woman_cartwheeling_tone1', 'woman_cartwheeling_light_skin_tone'), ('\U0001F938\U0001F3FB\u200D\u2640',)),
        ('\U0001F938\U0001F3FC\u200D\u2640\uFE0F', 'woman cartwheeling: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_cartwheeling_tone2', 'woman_cartwheeling_medium_light_skin_tone'), ('\U0001F938\U0001F3FC\u200D\u2640',)),
        ('\U0001F938\U0001F3FD\u200D\u2640\uFE0F', 'woman cartwheeling: medium skin tone', '4.0', 'MEDIUM', ('woman_cartwheeling_tone3', 'woman_cartwheeling_medium_skin_tone'), ('\U0001F938\U0001F3FD\u200D\u2640',)),
        ('\U0001F938\U0001F3FE\u200D\u2640\uFE0F', 'woman cartwheeling: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_cartwheeling_tone4', 'woman_cartwheeling_medium_dark_skin_tone'), ('\U0001F938\U0001F3FE\u200D\u2640',)),
        ('\U0001F938\U0001F3FF\u200D\u2640\uFE0F', 'woman cartwheeling: dark skin tone', '4.0', 'DARK', ('woman_cartwheeling_tone5', 'woman_cartwheeling_dark_skin_tone'), ('\U0001F938\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F93C', 'people wrestling', 'People & Body', 'person-sport', '3.0', ('people_wrestling', 'wrestlers', 'wrestling'), (), None),
    ('\U0001F93C\u200D\u2642\uFE0F', 'men wrestling', 'People & Body', 'person-sport', '4.0', ('men_wrestling',), ('\U0001F93C\u200D\u2642',), None),
    ('\U0001F93C\u200D\u2640\uFE0F', 'women wrestling', 'People & Body', 'person-sport', '4.0', ('women_wrestling',), ('\U0001F93C\u200D\u2640',), None),
    ('\U0001F93D', 'person playing water polo', 'People & Body', 'person-sport', '3.0', ('person_playing_water_polo', 'water_polo'), (), (
        ('\U0001F93D\U0001F3FB', 'person playing water polo: light skin tone', '3.0', 'LIGHT', ('person_playing_water_polo_tone1', 'water_polo_tone1'), ()),
        ('\U0001F93D\U0001F3FC', 'person playing water polo: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_playing_water_polo_tone2', 'water_polo_tone2'), ()),
        ('\U0001F93D\U0001F3FD', 'person playing water polo: medium skin tone', '3.0', 'MEDIUM', ('person_playing_water_polo_tone3', 'water_polo_tone3'), ()),
        ('\U0001F93D\U0001F3FE', 'person playing water polo: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_playing_water_polo_tone4', 'water_polo_tone4'), ()),
        ('\U0001F93D\U0001F3FF', 'person playing water polo: dark skin tone', '3.0', 'DARK', ('person_playing_water_polo_tone5', 'water_polo_tone5'), ()),
    )),
    ('\U0001F93D\u200D\u2642\uFE0F', 'man playing water polo', 'People & Body', 'person-sport', '4.0', ('man_playing_water_polo',), ('\U0001F93D\u200D\u2642',), (
        ('\U0001F93D\U0001F3FB\u200D\u2642\uFE0F', 'man playing water polo: light skin tone', '4.0', 'LIGHT', ('man_playing_water_polo_tone1', 'man_playing_water_polo_light_skin_tone'), ('\U0001F93D\U0001F3FB\u200D\u2642',)),
        ('\U0001F93D\U0001F3FC\u200D\u2642\uFE0F', 'man playing water polo: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_playing_water_polo_tone2', 'man_playing_water_polo_medium_light_skin_tone'), ('\U0001F93D\U0001F3FC\u200D\u2642',)),
        ('\U0001F93D\U0001F3FD\u200D\u2642\uFE0F', 'man playing water polo: medium skin tone', '4.0', 'MEDIUM', ('man_playing_water_polo_tone3', 'man_playing_water_polo_medium_skin_tone'), ('\U0001F93D\U0001F3FD\u200D\u2642',)),
        ('\U0001F93D\U0001F3FE\u200D\u2642\uFE0F', 'man playing water polo: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_playing_water_polo_tone4', 'man_playing_water_polo_medium_dark_skin_tone'), ('\U0001F93D\U0001F3FE\u200D\u2642',)),
        ('\U0001F93D\U0001F3FF\u200D\u2642\uFE0F', 'man playing water polo: dark skin tone', '4.0', 'DARK', ('man_playing_water_polo_tone5', 'man_playing_water_polo_dark_skin_tone'), ('\U0001F93D\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F93D\u200D\u2640\uFE0F', 'woman playing water polo', 'People & Body', 'person-sport', '4.0', ('woman_playing_water_polo',), ('\U0001F93D\u200D\u2640',), (
        ('\U0001F93D\U0001F3FB\u200D\u2640\uFE0F', 'woman playing water polo: light skin tone', '4.0', 'LIGHT', ('woman_playing_water_polo_tone1', 'woman_playing_water_polo_light_skin_tone'), ('\U0001F93D\U0001F3FB\u200D\u2640',)),
        ('\U0001F93D\U0001F3FC\u200D\u2640\uFE0F', 'woman playing water polo: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_playing_water_polo_tone2', 'woman_playing_water_polo_medium_light_skin_tone'), ('\U0001F93D\U0001F3FC\u200D\u2640',)),
        ('\U0001F93D\U0001F3FD\u200D\u2640\uFE0F', 'woman playing water polo: medium skin tone', '4.0', 'MEDIUM', ('woman_playing_water_polo_tone3', 'woman_playing_water_polo_medium_skin_tone'), ('\U0001F93D\U0001F3FD\u200D\u2640',)),
        ('\U0001F93D\U0001F3FE\u200D\u2640\uFE0F', 'woman playing water polo: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_playing_water_polo_tone4', 'woman_playing_water_polo_medium_dark_skin_tone'), ('\U0001F93D\U0001F3FE\u200D\u2640',)),
        ('\U0001F93D\U0001F3FF\u200D\u2640\uFE0F', 'woman playing water polo: dark skin tone', '4.0', 'DARK', ('woman_playing_water_polo_tone5', 'woman_playing_water_polo_dark_skin_tone'), ('\U0001F93D\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F93E', 'person playing handball', 'People & Body', 'person-sport', '3.0', ('person_playing_handball', 'handball'), (), (
        ('\U0001F93E\U0001F3FB', 'person playing handball: light skin tone', '3.0', 'LIGHT', ('person_playing_handball_tone1', 'handball_tone1'), ()),
        ('\U0001F93E\U0001F3FC', 'person playing handball: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_playing_handball_tone2', 'handball_tone2'), ()),
        ('\U0001F93E\U0001F3FD', 'person playing handball: medium skin tone', '3.0', 'MEDIUM', ('person_playing_handball_tone3', 'handball_tone3'), ()),
        ('\U0001F93E\U0001F3FE', 'person playing handball: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_playing_handball_tone4', 'handball_tone4'), ()),
        ('\U0001F93E\U0001F3FF', 'person playing handball: dark skin tone', '3.0', 'DARK', ('person_playing_handball_tone5', 'handball_tone5'), ()),
    )),
    ('\U0001F93E\u200D\u2642\uFE0F', 'man playing handball', 'People & Body', 'person-sport', '4.0', ('man_playing_handball',), ('\U0001F93E\u200D\u2642',), (
        ('\U0001F93E\U0001F3FB\u200D\u2642\uFE0F', 'man playing handball: light skin tone', '4.0', 'LIGHT', ('man_playing_handball_tone1', 'man_playing_handball_light_skin_tone'), ('\U0001F93E\U0001F3FB\u200D\u2642',)),
        ('\U0001F93E\U0001F3FC\u200D\u2642\uFE0F', 'man playing handball: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_playing_handball_tone2', 'man_playing_handball_medium_light_skin_tone'), ('\U0001F93E\U0001F3FC\u200D\u2642',)),
        ('\U0001F93E\U0001F3FD\u200D\u2642\uFE0F', 'man playing handball: medium skin tone', '4.0', 'MEDIUM', ('man_playing_handball_tone3', 'man_playing_handball_medium_skin_tone'), ('\U0001F93E\U0001F3FD\u200D\u2642',)),
        ('\U0001F93E\U0001F3FE\u200D\u2642\uFE0F', 'man playing handball: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_playing_handball_tone4', 'man_playing_handball_medium_dark_skin_tone'), ('\U0001F93E\U0001F3FE\u200D\u2642',)),
        ('\U0001F93E\U0001F3FF\u200D\u2642\uFE0F', 'man playing handball: dark skin tone', '4.0', 'DARK', ('man_playing_handball_tone5', 'man_playing_handball_dark_skin_tone'), ('\U0001F93E\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F93E\u200D\u2640\uFE0F', 'woman playing handball', 'People & Body', 'person-sport', '4.0', ('woman_playing_handball',), ('\U0001F93E\u200D\u2640',), (
        ('\U0001F93E\U0001F3FB\u200D\u2640\uFE0F', 'woman playing handball: light skin tone', '4.0', 'LIGHT', ('woman_playing_handball_tone1', 'woman_playing_handball_light_skin_tone'), ('\U0001F93E\U0001F3FB\u200D\u2640',)),
        ('\U0001F93E\U0001F3FC\u200D\u2640\uFE0F', 'woman playing handball: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_playing_handball_tone2', 'woman_playing_handball_medium_light_skin_tone'), ('\U0001F93E\U0001F3FC\u200D\u2640',)),
        ('\U0001F93E\U0001F3FD\u200D\u2640\uFE0F', 'woman playing handball: medium skin tone', '4.0', 'MEDIUM', ('woman_playing_handball_tone3', 'woman_playing_handball_medium_skin_tone'), ('\U0001F93E\U0001F3FD\u200D\u2640',)),
        ('\U0001F93E\U0001F3FE\u200D\u2640\uFE0F', 'woman playing handball: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_playing_handball_tone4', 'woman_playing_handball_medium_dark_skin_tone'), ('\U0001F93E\U0001F3FE\u200D\u2640',)),
        ('\U0001F93E\U0001F3FF\u200D\u2640\uFE0F', 'woman playing handball: dark skin tone', '4.0', 'DARK', ('woman_playing_handball_tone5', 'woman_playing_handball_dark_skin_tone'), ('\U0001F93E\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F939', 'person juggling', 'People & Body', 'person-sport', '3.0', ('person_juggling', 'juggler', 'juggling'), (), (
        ('\U0001F939\U0001F3FB', 'person juggling: light skin tone', '3.0', 'LIGHT', ('person_juggling_tone1', 'juggler_tone1', 'juggling_tone1'), ()),
        ('\U0001F939\U0001F3FC', 'person juggling: medium-light skin tone', '3.0', 'MEDIUM_LIGHT', ('person_juggling_tone2', 'juggler_tone2', 'juggling_tone2'), ()),
        ('\U0001F939\U0001F3FD', 'person juggling: medium skin tone', '3.0', 'MEDIUM', ('person_juggling_tone3', 'juggler_tone3', 'juggling_tone3'), ()),
        ('\U0001F939\U0001F3FE', 'person juggling: medium-dark skin tone', '3.0', 'MEDIUM_DARK', ('person_juggling_tone4', 'juggler_tone4', 'juggling_tone4'), ()),
        ('\U0001F939\U0001F3FF', 'person juggling: dark skin tone', '3.0', 'DARK', ('person_juggling_tone5', 'juggler_tone5', 'juggling_tone5'), ()),
    )),
    ('\U0001F939\u200D\u2642\uFE0F', 'man juggling', 'People & Body', 'person-sport', '4.0', ('man_juggling',), ('\U0001F939\u200D\u2642',), (
        ('\U0001F939\U0001F3FB\u200D\u2642\uFE0F', 'man juggling: light skin tone', '4.0', 'LIGHT', ('man_juggling_tone1', 'man_juggling_light_skin_tone'), ('\U0001F939\U0001F3FB\u200D\u2642',)),
        ('\U0001F939\U0001F3FC\u200D\u2642\uFE0F', 'man juggling: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('man_juggling_tone2', 'man_juggling_medium_light_skin_tone'), ('\U0001F939\U0001F3FC\u200D\u2642',)),
        ('\U0001F939\U0001F3FD\u200D\u2642\uFE0F', 'man juggling: medium skin tone', '4.0', 'MEDIUM', ('man_juggling_tone3', 'man_juggling_medium_skin_tone'), ('\U0001F939\U0001F3FD\u200D\u2642',)),
        ('\U0001F939\U0001F3FE\u200D\u2642\uFE0F', 'man juggling: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('man_juggling_tone4', 'man_juggling_medium_dark_skin_tone'), ('\U0001F939\U0001F3FE\u200D\u2642',)),
        ('\U0001F939\U0001F3FF\u200D\u2642\uFE0F', 'man juggling: dark skin tone', '4.0', 'DARK', ('man_juggling_tone5', 'man_juggling_dark_skin_tone'), ('\U0001F939\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F939\u200D\u2640\uFE0F', 'woman juggling', 'People & Body', 'person-sport', '4.0', ('woman_juggling',), ('\U0001F939\u200D\u2640',), (
        ('\U0001F939\U0001F3FB\u200D\u2640\uFE0F', 'woman juggling: light skin tone', '4.0', 'LIGHT', ('woman_juggling_tone1', 'woman_juggling_light_skin_tone'), ('\U0001F939\U0001F3FB\u200D\u2640',)),
        ('\U0001F939\U0001F3FC\u200D\u2640\uFE0F', 'woman juggling: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('woman_juggling_tone2', 'woman_juggling_medium_light_skin_tone'), ('\U0001F939\U0001F3FC\u200D\u2640',)),
        ('\U0001F939\U0001F3FD\u200D\u2640\uFE0F', 'woman juggling: medium skin tone', '4.0', 'MEDIUM', ('woman_juggling_tone3', 'woman_juggling_medium_skin_tone'), ('\U0001F939\U0001F3FD\u200D\u2640',)),
        ('\U0001F939\U0001F3FE\u200D\u2640\uFE0F', 'woman juggling: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('woman_juggling_tone4', 'woman_juggling_medium_dark_skin_tone'), ('\U0001F939\U0001F3FE\u200D\u2640',)),
        ('\U0001F939\U0001F3FF\u200D\u2640\uFE0F', 'woman juggling: dark skin tone', '4.0', 'DARK', ('woman_juggling_tone5', 'woman_juggling_dark_skin_tone'), ('\U0001F939\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F9D8', 'person in lotus position', 'People & Body', 'person-resting', '5.0', ('person_in_lotus_position',), (), (
        ('\U0001F9D8\U0001F3FB', 'person in lotus position: light skin tone', '5.0', 'LIGHT', ('person_in_lotus_position_tone1', 'person_in_lotus_position_light_skin_tone'), ()),
        ('\U0001F9D8\U0001F3FC', 'person in lotus position: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('person_in_lotus_position_tone2', 'person_in_lotus_position_medium_light_skin_tone'), ()),
        ('\U0001F9D8\U0001F3FD', 'person in lotus position: medium skin tone', '5.0', 'MEDIUM', ('person_in_lotus_position_tone3', 'person_in_lotus_position_medium_skin_tone'), ()),
        ('\U0001F9D8\U0001F3FE', 'person in lotus position: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('person_in_lotus_position_tone4', 'person_in_lotus_position_medium_dark_skin_tone'), ()),
        ('\U0001F9D8\U0001F3FF', 'person in lotus position: dark skin tone', '5.0', 'DARK', ('person_in_lotus_position_tone5', 'person_in_lotus_position_dark_skin_tone'), ()),
    )),
    ('\U0001F9D8\u200D\u2642\uFE0F', 'man in lotus position', 'People & Body', 'person-resting', '5.0', ('man_in_lotus_position',), ('\U0001F9D8\u200D\u2642',), (
        ('\U0001F9D8\U0001F3FB\u200D\u2642\uFE0F', 'man in lotus position: light skin tone', '5.0', 'LIGHT', ('man_in_lotus_position_tone1', 'man_in_lotus_position_light_skin_tone'), ('\U0001F9D8\U0001F3FB\u200D\u2642',)),
        ('\U0001F9D8\U0001F3FC\u200D\u2642\uFE0F', 'man in lotus position: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('man_in_lotus_position_tone2', 'man_in_lotus_position_medium_light_skin_tone'), ('\U0001F9D8\U0001F3FC\u200D\u2642',)),
        ('\U0001F9D8\U0001F3FD\u200D\u2642\uFE0F', 'man in lotus position: medium skin tone', '5.0', 'MEDIUM', ('man_in_lotus_position_tone3', 'man_in_lotus_position_medium_skin_tone'), ('\U0001F9D8\U0001F3FD\u200D\u2642',)),
        ('\U0001F9D8\U0001F3FE\u200D\u2642\uFE0F', 'man in lotus position: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('man_in_lotus_position_tone4', 'man_in_lotus_position_medium_dark_skin_tone'), ('\U0001F9D8\U0001F3FE\u200D\u2642',)),
        ('\U0001F9D8\U0001F3FF\u200D\u2642\uFE0F', 'man in lotus position: dark skin tone', '5.0', 'DARK', ('man_in_lotus_position_tone5', 'man_in_lotus_position_dark_skin_tone'), ('\U0001F9D8\U0001F3FF\u200D\u2642',)),
    )),
    ('\U0001F9D8\u200D\u2640\uFE0F', 'woman in lotus position', 'People & Body', 'person-resting', '5.0', ('woman_in_lotus_position',), ('\U0001F9D8\u200D\u2640',), (
        ('\U0001F9D8\U0001F3FB\u200D\u2640\uFE0F', 'woman in lotus position: light skin tone', '5.0', 'LIGHT', ('woman_in_lotus_position_tone1', 'woman_in_lotus_position_light_skin_tone'), ('\U0001F9D8\U0001F3FB\u200D\u2640',)),
        ('\U0001F9D8\U0001F3FC\u200D\u2640\uFE0F', 'woman in lotus position: medium-light skin tone', '5.0', 'MEDIUM_LIGHT', ('woman_in_lotus_position_tone2', 'woman_in_lotus_position_medium_light_skin_tone'), ('\U0001F9D8\U0001F3FC\u200D\u2640',)),
        ('\U0001F9D8\U0001F3FD\u200D\u2640\uFE0F', 'woman in lotus position: medium skin tone', '5.0', 'MEDIUM', ('woman_in_lotus_position_tone3', 'woman_in_lotus_position_medium_skin_tone'), ('\U0001F9D8\U0001F3FD\u200D\u2640',)),
        ('\U0001F9D8\U0001F3FE\u200D\u2640\uFE0F', 'woman in lotus position: medium-dark skin tone', '5.0', 'MEDIUM_DARK', ('woman_in_lotus_position_tone4', 'woman_in_lotus_position_medium_dark_skin_tone'), ('\U0001F9D8\U0001F3FE\u200D\u2640',)),
        ('\U0001F9D8\U0001F3FF\u200D\u2640\uFE0F', 'woman in lotus position: dark skin tone', '5.0', 'DARK', ('woman_in_lotus_position_tone5', 'woman_in_lotus_position_dark_skin_tone'), ('\U0001F9D8\U0001F3FF\u200D\u2640',)),
    )),
    ('\U0001F6C0', 'person taking bath', 'People & Body', 'person-resting', '0.6', ('bath',), (), (
        ('\U0001F6C0\U0001F3FB', 'person taking bath: light skin tone', '1.0', 'LIGHT', ('bath_tone1',), ()),
        ('\U0001F6C0\U0001F3FC', 'person taking bath: medium-light skin tone', '1.0', 'MEDIUM_LIGHT', ('bath_tone2',), ()),
        ('\U0001F6C0\U0001F3FD', 'person taking bath: medium skin tone', '1.0', 'MEDIUM', ('bath_tone3',), ()),
        ('\U0001F6C0\U0001F3FE', 'person taking bath: medium-dark skin tone', '1.0', 'MEDIUM_DARK', ('bath_tone4',), ()),
        ('\U0001F6C0\U0001F3FF', 'person taking bath: dark skin tone', '1.0', 'DARK', ('bath_tone5',), ()),
    )),
    ('\U0001F6CC', 'person in bed', 'People & Body', 'person-resting', '1.0', ('sleeping_accommodation',), (), (
        ('\U0001F6CC\U0001F3FB', 'person in bed: light skin tone', '4.0', 'LIGHT', ('person_in_bed_tone1', 'person_in_bed_light_skin_tone'), ()),
        ('\U0001F6CC\U0001F3FC', 'person in bed: medium-light skin tone', '4.0', 'MEDIUM_LIGHT', ('person_in_bed_tone2', 'person_in_bed_medium_light_skin_tone'), ()),
        ('\U0001F6CC\U0001F3FD', 'person in bed: medium skin tone', '4.0', 'MEDIUM', ('person_in_bed_tone3', 'person_in_bed_medium_skin_tone'), ()),
        ('\U0001F6CC\U0001F3FE', 'person in bed: medium-dark skin tone', '4.0', 'MEDIUM_DARK', ('person_in_bed_tone4', 'person_in_bed_medium_dark_skin_tone'), ()),
        ('\U0001F6CC\U0001F3FF', 'person in bed: dark skin tone', '4.0', 'DARK', ('person_in_bed_tone5', 'person_in_bed_dark_skin_tone'), ()),
    )),
    ('\U0001F9D1\u200D\U0001F91D\u200D\U0001F9D1', 'people holding hands', 'People & Body', 'family', '12.0', ('people_holding_hands',), (), (
        ('\U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB', 'people holding hands: light skin tone', '12.0', 'LIGHT', ('people_holding_hands_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FC', 'people holding hands: light skin tone, medium-light skin tone', '12.1', 'LIGHT_AND_MEDIUM_LIGHT', ('people_holding_hands_light_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FD', 'people holding hands: light skin tone, medium skin tone', '12.1', 'LIGHT_AND_MEDIUM', ('people_holding_hands_light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FE', 'people holding hands: light skin tone, medium-dark skin tone', '12.1', 'LIGHT_AND_MEDIUM_DARK', ('people_holding_hands_light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FF', 'people holding hands: light skin tone, dark skin tone', '12.1', 'LIGHT_AND_DARK', ('people_holding_hands_light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB', 'people holding hands: medium-light skin tone, light skin tone', '12.0', 'MEDIUM_LIGHT_AND_LIGHT', ('people_holding_hands_medium-light_skin_tone_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FC', 'people holding hands: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('people_holding_hands_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FD', 'people holding hands: medium-light skin tone, medium skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('people_holding_hands_medium-light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FE', 'people holding hands: medium-light skin tone, medium-dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('people_holding_hands_medium-light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FC\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FF', 'people holding hands: medium-light skin tone, dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_DARK', ('people_holding_hands_medium-light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB', 'people holding hands: medium skin tone, light skin tone', '12.0', 'MEDIUM_AND_LIGHT', ('people_holding_hands_medium_skin_tone_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FC', 'people holding hands: medium skin tone, medium-light skin tone', '12.0', 'MEDIUM_AND_MEDIUM_LIGHT', ('people_holding_hands_medium_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FD', 'people holding hands: medium skin tone', '12.0', 'MEDIUM', ('people_holding_hands_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FE', 'people holding hands: medium skin tone, medium-dark skin tone', '12.1', 'MEDIUM_AND_MEDIUM_DARK', ('people_holding_hands_medium_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FD\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FF', 'people holding hands: medium skin tone, dark skin tone', '12.1', 'MEDIUM_AND_DARK', ('people_holding_hands_medium_skin_tone_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB', 'people holding hands: medium-dark skin tone, light skin tone', '12.0', 'MEDIUM_DARK_AND_LIGHT', ('people_holding_hands_medium-dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FC', 'people holding hands: medium-dark skin tone, medium-light skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('people_holding_hands_medium-dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FD', 'people holding hands: medium-dark skin tone, medium skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM', ('people_holding_hands_medium-dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FE', 'people holding hands: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('people_holding_hands_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FE\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FF', 'people holding hands: medium-dark skin tone, dark skin tone', '12.1', 'MEDIUM_DARK_AND_DARK', ('people_holding_hands_medium-dark_skin_tone_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FB', 'people holding hands: dark skin tone, light skin tone', '12.0', 'DARK_AND_LIGHT', ('people_holding_hands_dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FC', 'people holding hands: dark skin tone, medium-light skin tone', '12.0', 'DARK_AND_MEDIUM_LIGHT', ('people_holding_hands_dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FD', 'people holding hands: dark skin tone, medium skin tone', '12.0', 'DARK_AND_MEDIUM', ('people_holding_hands_dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FE', 'people holding hands: dark skin tone, medium-dark skin tone', '12.0', 'DARK_AND_MEDIUM_DARK', ('people_holding_hands_dark_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FF\u200D\U0001F91D\u200D\U0001F9D1\U0001F3FF', 'people holding hands: dark skin tone', '12.0', 'DARK', ('people_holding_hands_dark_skin_tone',), ()),
    )),
    ('\U0001F46D', 'women holding hands', 'People & Body', 'family', '1.0', ('two_women_holding_hands',), (), (
        ('\U0001F46D\U0001F3FB', 'women holding hands: light skin tone', '12.0', 'LIGHT', ('women_holding_hands_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F469\U0001F3FC', 'women holding hands: light skin tone, medium-light skin tone', '12.1', 'LIGHT_AND_MEDIUM_LIGHT', ('women_holding_hands_light_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F469\U0001F3FD', 'women holding hands: light skin tone, medium skin tone', '12.1', 'LIGHT_AND_MEDIUM', ('women_holding_hands_light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F469\U0001F3FE', 'women holding hands: light skin tone, medium-dark skin tone', '12.1', 'LIGHT_AND_MEDIUM_DARK', ('women_holding_hands_light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F469\U0001F3FF', 'women holding hands: light skin tone, dark skin tone', '12.1', 'LIGHT_AND_DARK', ('women_holding_hands_light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F469\U0001F3FB', 'women holding hands: medium-light skin tone, light skin tone', '12.0', 'MEDIUM_LIGHT_AND_LIGHT', ('women_holding_hands_medium-light_skin_tone_light_skin_tone',), ()),
        ('\U0001F46D\U0001F3FC', 'women holding hands: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('women_holding_hands_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F469\U0001F3FD', 'women holding hands: medium-light skin tone, medium skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('women_holding_hands_medium-light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F469\U0001F3FE', 'women holding hands: medium-light skin tone, medium-dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('women_holding_hands_medium-light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F469\U0001F3FF', 'women holding hands: medium-light skin tone, dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_DARK', ('women_holding_hands_medium-light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F469\U0001F3FB', 'women holding hands: medium skin tone, light skin tone', '12.0', 'MEDIUM_AND_LIGHT', ('women_holding_hands_medium_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F469\U0001F3FC', 'women holding hands: medium skin tone, medium-light skin tone', '12.0', 'MEDIUM_AND_MEDIUM_LIGHT', ('women_holding_hands_medium_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F46D\U0001F3FD', 'women holding hands: medium skin tone', '12.0', 'MEDIUM', ('women_holding_hands_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F469\U0001F3FE', 'women holding hands: medium skin tone, medium-dark skin tone', '12.1', 'MEDIUM_AND_MEDIUM_DARK', ('women_holding_hands_medium_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F469\U0001F3FF', 'women holding hands: medium skin tone, dark skin tone', '12.1', 'MEDIUM_AND_DARK', ('women_holding_hands_medium_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F469\U0001F3FB', 'women holding hands: medium-dark skin tone, light skin tone', '12.0', 'MEDIUM_DARK_AND_LIGHT', ('women_holding_hands_medium-dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F469\U0001F3FC', 'women holding hands: medium-dark skin tone, medium-light skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('women_holding_hands_medium-dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F469\U0001F3FD', 'women holding hands: medium-dark skin tone, medium skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM', ('women_holding_hands_medium-dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F46D\U0001F3FE', 'women holding hands: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('women_holding_hands_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F469\U0001F3FF', 'women holding hands: medium-dark skin tone, dark skin tone', '12.1', 'MEDIUM_DARK_AND_DARK', ('women_holding_hands_medium-dark_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F469\U0001F3FB', 'women holding hands: dark skin tone, light skin tone', '12.0', 'DARK_AND_LIGHT', ('women_holding_hands_dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F469\U0001F3FC', 'women holding hands: dark skin tone, medium-light skin tone', '12.0', 'DARK_AND_MEDIUM_LIGHT', ('women_holding_hands_dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F469\U0001F3FD', 'women holding hands: dark skin tone, medium skin tone', '12.0', 'DARK_AND_MEDIUM', ('women_holding_hands_dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F469\U0001F3FE', 'women holding hands: dark skin tone, medium-dark skin tone', '12.0', 'DARK_AND_MEDIUM_DARK', ('women_holding_hands_dark_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F46D\U0001F3FF', 'women holding hands: dark skin tone', '12.0', 'DARK', ('women_holding_hands_dark_skin_tone',), ()),
    )),
    ('\U0001F46B', 'woman and man holding hands', 'People & Body', 'family', '0.6', ('couple',), (), (
        ('\U0001F46B\U0001F3FB', 'woman and man holding hands: light skin tone', '12.0', 'LIGHT', ('woman_and_man_holding_hands_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'woman and man holding hands: light skin tone, medium-light skin tone', '12.0', 'LIGHT_AND_MEDIUM_LIGHT', ('woman_and_man_holding_hands_light_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'woman and man holding hands: light skin tone, medium skin tone', '12.0', 'LIGHT_AND_MEDIUM', ('woman_and_man_holding_hands_light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'woman and man holding hands: light skin tone, medium-dark skin tone', '12.0', 'LIGHT_AND_MEDIUM_DARK', ('woman_and_man_holding_hands_light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'woman and man holding hands: light skin tone, dark skin tone', '12.0', 'LIGHT_AND_DARK', ('woman_and_man_holding_hands_light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'woman and man holding hands: medium-light skin tone, light skin tone', '12.0', 'MEDIUM_LIGHT_AND_LIGHT', ('woman_and_man_holding_hands_medium-light_skin_tone_light_skin_tone',), ()),
        ('\U0001F46B\U0001F3FC', 'woman and man holding hands: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('woman_and_man_holding_hands_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'woman and man holding hands: medium-light skin tone, medium skin tone', '12.0', 'MEDIUM_LIGHT_AND_MEDIUM', ('woman_and_man_holding_hands_medium-light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'woman and man holding hands: medium-light skin tone, medium-dark skin tone', '12.0', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('woman_and_man_holding_hands_medium-light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'woman and man holding hands: medium-light skin tone, dark skin tone', '12.0', 'MEDIUM_LIGHT_AND_DARK', ('woman_and_man_holding_hands_medium-light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'woman and man holding hands: medium skin tone, light skin tone', '12.0', 'MEDIUM_AND_LIGHT', ('woman_and_man_holding_hands_medium_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'woman and man holding hands: medium skin tone, medium-light skin tone', '12.0', 'MEDIUM_AND_MEDIUM_LIGHT', ('woman_and_man_holding_hands_medium_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F46B\U0001F3FD', 'woman and man holding hands: medium skin tone', '12.0', 'MEDIUM', ('woman_and_man_holding_hands_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'woman and man holding hands: medium skin tone, medium-dark skin tone', '12.0', 'MEDIUM_AND_MEDIUM_DARK', ('woman_and_man_holding_hands_medium_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'woman and man holding hands: medium skin tone, dark skin tone', '12.0', 'MEDIUM_AND_DARK', ('woman_and_man_holding_hands_medium_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'woman and man holding hands: medium-dark skin tone, light skin tone', '12.0', 'MEDIUM_DARK_AND_LIGHT', ('woman_and_man_holding_hands_medium-dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'woman and man holding hands: medium-dark skin tone, medium-light skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('woman_and_man_holding_hands_medium-dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'woman and man holding hands: medium-dark skin tone, medium skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM', ('woman_and_man_holding_hands_medium-dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F46B\U0001F3FE', 'woman and man holding hands: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('woman_and_man_holding_hands_medium-dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'woman and man holding hands: medium-dark skin tone, dark skin tone', '12.0', 'MEDIUM_DARK_AND_DARK', ('woman_and_man_holding_hands_medium-dark_skin_tone_dark_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'woman and man holding hands: dark skin tone, light skin tone', '12.0', 'DARK_AND_LIGHT', ('woman_and_man_holding_hands_dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'woman and man holding hands: dark skin tone, medium-light skin tone', '12.0', 'DARK_AND_MEDIUM_LIGHT', ('woman_and_man_holding_hands_dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'woman and man holding hands: dark skin tone, medium skin tone', '12.0', 'DARK_AND_MEDIUM', ('woman_and_man_holding_hands_dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F469\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'woman and man holding hands: dark skin tone, medium-dark skin tone', '12.0', 'DARK_AND_MEDIUM_DARK', ('woman_and_man_holding_hands_dark_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F46B\U0001F3FF', 'woman and man holding hands: dark skin tone', '12.0', 'DARK', ('woman_and_man_holding_hands_dark_skin_tone',), ()),
    )),
    ('\U0001F46C', 'men holding hands', 'People & Body', 'family', '1.0', ('two_men_holding_hands',), (), (
        ('\U0001F46C\U0001F3FB', 'men holding hands: light skin tone', '12.0', 'LIGHT', ('men_holding_hands_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'men holding hands: light skin tone, medium-light skin tone', '12.1', 'LIGHT_AND_MEDIUM_LIGHT', ('men_holding_hands_light_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'men holding hands: light skin tone, medium skin tone', '12.1', 'LIGHT_AND_MEDIUM', ('men_holding_hands_light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'men holding hands: light skin tone, medium-dark skin tone', '12.1', 'LIGHT_AND_MEDIUM_DARK', ('men_holding_hands_light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FB\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'men holding hands: light skin tone, dark skin tone', '12.1', 'LIGHT_AND_DARK', ('men_holding_hands_light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'men holding hands: medium-light skin tone, light skin tone', '12.0', 'MEDIUM_LIGHT_AND_LIGHT', ('men_holding_hands_medium-light_skin_tone_light_skin_tone',), ()),
        ('\U0001F46C\U0001F3FC', 'men holding hands: medium-light skin tone', '12.0', 'MEDIUM_LIGHT', ('men_holding_hands_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'men holding hands: medium-light skin tone, medium skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('men_holding_hands_medium-light_skin_tone_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'men holding hands: medium-light skin tone, medium-dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('men_holding_hands_medium-light_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FC\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'men holding hands: medium-light skin tone, dark skin tone', '12.1', 'MEDIUM_LIGHT_AND_DARK', ('men_holding_hands_medium-light_skin_tone_dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'men holding hands: medium skin tone, light skin tone', '12.0', 'MEDIUM_AND_LIGHT', ('men_holding_hands_medium_skin_tone_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'men holding hands: medium skin tone, medium-light skin tone', '12.0', 'MEDIUM_AND_MEDIUM_LIGHT', ('men_holding_hands_medium_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F46C\U0001F3FD', 'men holding hands: medium skin tone', '12.0', 'MEDIUM', ('men_holding_hands_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'men holding hands: medium skin tone, medium-dark skin tone', '12.1', 'MEDIUM_AND_MEDIUM_DARK', ('men_holding_hands_medium_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FD\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'men holding hands: medium skin tone, dark skin tone', '12.1', 'MEDIUM_AND_DARK', ('men_holding_hands_medium_skin_tone_dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'men holding hands: medium-dark skin tone, light skin tone', '12.0', 'MEDIUM_DARK_AND_LIGHT', ('men_holding_hands_medium-dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'men holding hands: medium-dark skin tone, medium-light skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('men_holding_hands_medium-dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'men holding hands: medium-dark skin tone, medium skin tone', '12.0', 'MEDIUM_DARK_AND_MEDIUM', ('men_holding_hands_medium-dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F46C\U0001F3FE', 'men holding hands: medium-dark skin tone', '12.0', 'MEDIUM_DARK', ('men_holding_hands_medium-dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FE\u200D\U0001F91D\u200D\U0001F468\U0001F3FF', 'men holding hands: medium-dark skin tone, dark skin tone', '12.1', 'MEDIUM_DARK_AND_DARK', ('men_holding_hands_medium-dark_skin_tone_dark_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FB', 'men holding hands: dark skin tone, light skin tone', '12.0', 'DARK_AND_LIGHT', ('men_holding_hands_dark_skin_tone_light_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FC', 'men holding hands: dark skin tone, medium-light skin tone', '12.0', 'DARK_AND_MEDIUM_LIGHT', ('men_holding_hands_dark_skin_tone_medium-light_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FD', 'men holding hands: dark skin tone, medium skin tone', '12.0', 'DARK_AND_MEDIUM', ('men_holding_hands_dark_skin_tone_medium_skin_tone',), ()),
        ('\U0001F468\U0001F3FF\u200D\U0001F91D\u200D\U0001F468\U0001F3FE', 'men holding hands: dark skin tone, medium-dark skin tone', '12.0', 'DARK_AND_MEDIUM_DARK', ('men_holding_hands_dark_skin_tone_medium-dark_skin_tone',), ()),
        ('\U0001F46C\U0001F3FF', 'men holding hands: dark skin tone', '12.0', 'DARK', ('men_holding_hands_dark_skin_tone',), ()),
    )),
    ('\U0001F48F', 'kiss', 'People & Body', 'family', '0.6', ('couplekiss',), (), (
        ('\U0001F48F\U0001F3FB', 'kiss: light skin tone', '13.1', 'LIGHT', ('kiss_light_skin_tone',), ()),
        ('\U0001F48F\U0001F3FC', 'kiss: medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('kiss_medium-light_skin_tone',), ()),
        ('\U0001F48F\U0001F3FD', 'kiss: medium skin tone', '13.1', 'MEDIUM', ('kiss_medium_skin_tone',), ()),
        ('\U0001F48F\U0001F3FE', 'kiss: medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('kiss_medium-dark_skin_tone',), ()),
        ('\U0001F48F\U0001F3FF', 'kiss: dark skin tone', '13.1', 'DARK', ('kiss_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC', 'kiss: person, person, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('kiss_person_person_light_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD', 'kiss: person, person, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('kiss_person_person_light_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE', 'kiss: person, person, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('kiss_person_person_light_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF', 'kiss: person, person, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('kiss_person_person_light_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB', 'kiss: person, person, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('kiss_person_person_medium-light_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD', 'kiss: person, person, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('kiss_person_person_medium-light_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE', 'kiss: person, person, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('kiss_person_person_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF', 'kiss: person, person, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('kiss_person_person_medium-light_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB', 'kiss: person, person, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('kiss_person_person_medium_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC', 'kiss: person, person, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('kiss_person_person_medium_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE', 'kiss: person, person, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('kiss_person_person_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF', 'kiss: person, person, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('kiss_person_person_medium_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB', 'kiss: person, person, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('kiss_person_person_medium-dark_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC', 'kiss: person, person, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('kiss_person_person_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD', 'kiss: person, person, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('kiss_person_person_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF', 'kiss: person, person, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('kiss_person_person_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB', 'kiss: person, person, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('kiss_person_person_dark_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC', 'kiss: person, person, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('kiss_person_person_dark_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD', 'kiss: person, person, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('kiss_person_person_dark_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE', 'kiss: person, person, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('kiss_person_person_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F9D1\U0001F3FE',)),
    )),
    ('\U0001F469\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468', 'kiss: woman, man', 'People & Body', 'family', '2.0', ('kiss_woman_man',), ('\U0001F469\u200D\u2764\u200D\U0001F48B\u200D\U0001F468',), (
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: woman, man, light skin tone', '13.1', 'LIGHT', ('kiss_woman_man_light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: woman, man, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('kiss_woman_man_light_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: woman, man, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('kiss_woman_man_light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: woman, man, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('kiss_woman_man_light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: woman, man, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('kiss_woman_man_light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: woman, man, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('kiss_woman_man_medium-light_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: woman, man, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('kiss_woman_man_medium-light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: woman, man, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('kiss_woman_man_medium-light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: woman, man, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('kiss_woman_man_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: woman, man, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('kiss_woman_man_medium-light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: woman, man, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('kiss_woman_man_medium_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: woman, man, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('kiss_woman_man_medium_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: woman, man, medium skin tone', '13.1', 'MEDIUM', ('kiss_woman_man_medium_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: woman, man, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('kiss_woman_man_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: woman, man, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('kiss_woman_man_medium_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: woman, man, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('kiss_woman_man_medium-dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: woman, man, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('kiss_woman_man_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: woman, man, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('kiss_woman_man_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: woman, man, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('kiss_woman_man_medium-dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: woman, man, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('kiss_woman_man_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: woman, man, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('kiss_woman_man_dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: woman, man, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('kiss_woman_man_dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: woman, man, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('kiss_woman_man_dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: woman, man, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('kiss_woman_man_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: woman, man, dark skin tone', '13.1', 'DARK', ('kiss_woman_man_dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
    )),
    ('\U0001F468\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468', 'kiss: man, man', 'People & Body', 'family', '2.0', ('kiss_mm', 'couplekiss_mm'), ('\U0001F468\u200D\u2764\u200D\U0001F48B\u200D\U0001F468',), (
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: man, man, light skin tone', '13.1', 'LIGHT', ('kiss_man_man_light_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: man, man, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('kiss_man_man_light_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: man, man, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('kiss_man_man_light_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: man, man, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('kiss_man_man_light_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: man, man, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('kiss_man_man_light_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: man, man, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('kiss_man_man_medium-light_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: man, man, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('kiss_man_man_medium-light_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: man, man, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('kiss_man_man_medium-light_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: man, man, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('kiss_man_man_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: man, man, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('kiss_man_man_medium-light_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: man, man, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('kiss_man_man_medium_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: man, man, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('kiss_man_man_medium_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: man, man, medium skin tone', '13.1', 'MEDIUM', ('kiss_man_man_medium_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: man, man, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('kiss_man_man_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: man, man, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('kiss_man_man_medium_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: man, man, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('kiss_man_man_medium-dark_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: man, man, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('kiss_man_man_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: man, man, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('kiss_man_man_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: man, man, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('kiss_man_man_medium-dark_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: man, man, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('kiss_man_man_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FB', 'kiss: man, man, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('kiss_man_man_dark_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FC', 'kiss: man, man, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('kiss_man_man_dark_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FD', 'kiss: man, man, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('kiss_man_man_dark_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FE', 'kiss: man, man, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('kiss_man_man_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468\U0001F3FF', 'kiss: man, man, dark skin tone', '13.1', 'DARK', ('kiss_man_man_dark_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F468\U0001F3FF',)),
    )),
    ('\U0001F469\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469', 'kiss: woman, woman', 'People & Body', 'family', '2.0', ('kiss_ww', 'couplekiss_ww'), ('\U0001F469\u200D\u2764\u200D\U0001F48B\u200D\U0001F469',), (
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FB', 'kiss: woman, woman, light skin tone', '13.1', 'LIGHT', ('kiss_woman_woman_light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FC', 'kiss: woman, woman, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('kiss_woman_woman_light_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FD', 'kiss: woman, woman, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('kiss_woman_woman_light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FE', 'kiss: woman, woman, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('kiss_woman_woman_light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FF', 'kiss: woman, woman, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('kiss_woman_woman_light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FB', 'kiss: woman, woman, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('kiss_woman_woman_medium-light_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FC', 'kiss: woman, woman, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('kiss_woman_woman_medium-light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FD', 'kiss: woman, woman, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('kiss_woman_woman_medium-light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FE', 'kiss: woman, woman, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('kiss_woman_woman_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FF', 'kiss: woman, woman, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('kiss_woman_woman_medium-light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FB', 'kiss: woman, woman, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('kiss_woman_woman_medium_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FC', 'kiss: woman, woman, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('kiss_woman_woman_medium_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FD', 'kiss: woman, woman, medium skin tone', '13.1', 'MEDIUM', ('kiss_woman_woman_medium_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FE', 'kiss: woman, woman, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('kiss_woman_woman_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FF', 'kiss: woman, woman, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('kiss_woman_woman_medium_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FB', 'kiss: woman, woman, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('kiss_woman_woman_medium-dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FC', 'kiss: woman, woman, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('kiss_woman_woman_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FD', 'kiss: woman, woman, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('kiss_woman_woman_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FE', 'kiss: woman, woman, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('kiss_woman_woman_medium-dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FF', 'kiss: woman, woman, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('kiss_woman_woman_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FB', 'kiss: woman, woman, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('kiss_woman_woman_dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FC', 'kiss: woman, woman, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('kiss_woman_woman_dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FD', 'kiss: woman, woman, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('kiss_woman_woman_dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FE', 'kiss: woman, woman, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('kiss_woman_woman_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F469\U0001F3FF', 'kiss: woman, woman, dark skin tone', '13.1', 'DARK', ('kiss_woman_woman_dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F48B\u200D\U0001F469\U0001F3FF',)),
    )),
    ('\U0001F491', 'couple with heart', 'People & Body', 'family', '0.6', ('couple_with_heart',), (), (
        ('\U0001F491\U0001F3FB', 'couple with heart: light skin tone', '13.1', 'LIGHT', ('couple_with_heart_light_skin_tone',), ()),
        ('\U0001F491\U0001F3FC', 'couple with heart: medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('couple_with_heart_medium-light_skin_tone',), ()),
        ('\U0001F491\U0001F3FD', 'couple with heart: medium skin tone', '13.1', 'MEDIUM', ('couple_with_heart_medium_skin_tone',), ()),
        ('\U0001F491\U0001F3FE', 'couple with heart: medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('couple_with_heart_medium-dark_skin_tone',), ()),
        ('\U0001F491\U0001F3FF', 'couple with heart: dark skin tone', '13.1', 'DARK', ('couple_with_heart_dark_skin_tone',), ()),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FC', 'couple with heart: person, person, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('couple_with_heart_person_person_light_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FD', 'couple with heart: person, person, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('couple_with_heart_person_person_light_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FE', 'couple with heart: person, person, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_person_person_light_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FF', 'couple with heart: person, person, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('couple_with_heart_person_person_light_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FB\u200D\u2764\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FB', 'couple with heart: person, person, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('couple_with_heart_person_person_medium-light_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FD', 'couple with heart: person, person, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('couple_with_heart_person_person_medium-light_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FE', 'couple with heart: person, person, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_person_person_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FF', 'couple with heart: person, person, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('couple_with_heart_person_person_medium-light_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FC\u200D\u2764\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FB', 'couple with heart: person, person, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('couple_with_heart_person_person_medium_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FC', 'couple with heart: person, person, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('couple_with_heart_person_person_medium_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FE', 'couple with heart: person, person, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('couple_with_heart_person_person_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F9D1\U0001F3FE',)),
        ('\U0001F9D1\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FF', 'couple with heart: person, person, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('couple_with_heart_person_person_medium_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FD\u200D\u2764\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FB', 'couple with heart: person, person, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('couple_with_heart_person_person_medium-dark_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FC', 'couple with heart: person, person, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_person_person_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FD', 'couple with heart: person, person, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('couple_with_heart_person_person_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FF', 'couple with heart: person, person, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('couple_with_heart_person_person_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F9D1\U0001F3FE\u200D\u2764\u200D\U0001F9D1\U0001F3FF',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FB', 'couple with heart: person, person, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('couple_with_heart_person_person_dark_skin_tone_light_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F9D1\U0001F3FB',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FC', 'couple with heart: person, person, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_person_person_dark_skin_tone_medium-light_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F9D1\U0001F3FC',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FD', 'couple with heart: person, person, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('couple_with_heart_person_person_dark_skin_tone_medium_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F9D1\U0001F3FD',)),
        ('\U0001F9D1\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F9D1\U0001F3FE', 'couple with heart: person, person, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('couple_with_heart_person_person_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F9D1\U0001F3FF\u200D\u2764\u200D\U0001F9D1\U0001F3FE',)),
    )),
    ('\U0001F469\u200D\u2764\uFE0F\u200D\U0001F468', 'couple with heart: woman, man', 'People & Body', 'family', '2.0', ('couple_with_heart_woman_man',), ('\U0001F469\u200D\u2764\u200D\U0001F468',), (
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: woman, man, light skin tone', '13.1', 'LIGHT', ('couple_with_heart_woman_man_light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: woman, man, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_man_light_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: woman, man, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('couple_with_heart_woman_man_light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: woman, man, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_woman_man_light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: woman, man, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('couple_with_heart_woman_man_light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: woman, man, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('couple_with_heart_woman_man_medium-light_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: woman, man, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('couple_with_heart_woman_man_medium-light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: woman, man, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('couple_with_heart_woman_man_medium-light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: woman, man, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_woman_man_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: woman, man, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('couple_with_heart_woman_man_medium-light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: woman, man, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('couple_with_heart_woman_man_medium_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: woman, man, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_man_medium_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: woman, man, medium skin tone', '13.1', 'MEDIUM', ('couple_with_heart_woman_man_medium_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: woman, man, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('couple_with_heart_woman_man_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: woman, man, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('couple_with_heart_woman_man_medium_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: woman, man, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('couple_with_heart_woman_man_medium-dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: woman, man, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_man_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: woman, man, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('couple_with_heart_woman_man_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: woman, man, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('couple_with_heart_woman_man_medium-dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: woman, man, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('couple_with_heart_woman_man_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: woman, man, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('couple_with_heart_woman_man_dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: woman, man, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_man_dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: woman, man, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('couple_with_heart_woman_man_dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: woman, man, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('couple_with_heart_woman_man_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: woman, man, dark skin tone', '13.1', 'DARK', ('couple_with_heart_woman_man_dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
    )),
    ('\U0001F468\u200D\u2764\uFE0F\u200D\U0001F468', 'couple with heart: man, man', 'People & Body', 'family', '2.0', ('couple_mm', 'couple_with_heart_mm'), ('\U0001F468\u200D\u2764\u200D\U0001F468',), (
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: man, man, light skin tone', '13.1', 'LIGHT', ('couple_with_heart_man_man_light_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: man, man, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('couple_with_heart_man_man_light_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: man, man, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('couple_with_heart_man_man_light_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: man, man, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_man_man_light_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: man, man, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('couple_with_heart_man_man_light_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FB\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: man, man, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('couple_with_heart_man_man_medium-light_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: man, man, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('couple_with_heart_man_man_medium-light_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: man, man, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('couple_with_heart_man_man_medium-light_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: man, man, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_man_man_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: man, man, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('couple_with_heart_man_man_medium-light_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FC\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: man, man, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('couple_with_heart_man_man_medium_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: man, man, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('couple_with_heart_man_man_medium_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: man, man, medium skin tone', '13.1', 'MEDIUM', ('couple_with_heart_man_man_medium_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: man, man, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('couple_with_heart_man_man_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: man, man, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('couple_with_heart_man_man_medium_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FD\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: man, man, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('couple_with_heart_man_man_medium-dark_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: man, man, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_man_man_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: man, man, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('couple_with_heart_man_man_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: man, man, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('couple_with_heart_man_man_medium-dark_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: man, man, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('couple_with_heart_man_man_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F468\U0001F3FE\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FB', 'couple with heart: man, man, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('couple_with_heart_man_man_dark_skin_tone_light_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FB',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FC', 'couple with heart: man, man, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_man_man_dark_skin_tone_medium-light_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FC',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FD', 'couple with heart: man, man, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('couple_with_heart_man_man_dark_skin_tone_medium_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FD',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FE', 'couple with heart: man, man, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('couple_with_heart_man_man_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FE',)),
        ('\U0001F468\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F468\U0001F3FF', 'couple with heart: man, man, dark skin tone', '13.1', 'DARK', ('couple_with_heart_man_man_dark_skin_tone',), ('\U0001F468\U0001F3FF\u200D\u2764\u200D\U0001F468\U0001F3FF',)),
    )),
    ('\U0001F469\u200D\u2764\uFE0F\u200D\U0001F469', 'couple with heart: woman, woman', 'People & Body', 'family', '2.0', ('couple_ww', 'couple_with_heart_ww'), ('\U0001F469\u200D\u2764\u200D\U0001F469',), (
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FB', 'couple with heart: woman, woman, light skin tone', '13.1', 'LIGHT', ('couple_with_heart_woman_woman_light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FC', 'couple with heart: woman, woman, light skin tone, medium-light skin tone', '13.1', 'LIGHT_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_woman_light_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FD', 'couple with heart: woman, woman, light skin tone, medium skin tone', '13.1', 'LIGHT_AND_MEDIUM', ('couple_with_heart_woman_woman_light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FE', 'couple with heart: woman, woman, light skin tone, medium-dark skin tone', '13.1', 'LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_woman_woman_light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FB\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FF', 'couple with heart: woman, woman, light skin tone, dark skin tone', '13.1', 'LIGHT_AND_DARK', ('couple_with_heart_woman_woman_light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FB\u200D\u2764\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FB', 'couple with heart: woman, woman, medium-light skin tone, light skin tone', '13.1', 'MEDIUM_LIGHT_AND_LIGHT', ('couple_with_heart_woman_woman_medium-light_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FC', 'couple with heart: woman, woman, medium-light skin tone', '13.1', 'MEDIUM_LIGHT', ('couple_with_heart_woman_woman_medium-light_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FD', 'couple with heart: woman, woman, medium-light skin tone, medium skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM', ('couple_with_heart_woman_woman_medium-light_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FE', 'couple with heart: woman, woman, medium-light skin tone, medium-dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_MEDIUM_DARK', ('couple_with_heart_woman_woman_medium-light_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FC\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FF', 'couple with heart: woman, woman, medium-light skin tone, dark skin tone', '13.1', 'MEDIUM_LIGHT_AND_DARK', ('couple_with_heart_woman_woman_medium-light_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FC\u200D\u2764\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FB', 'couple with heart: woman, woman, medium skin tone, light skin tone', '13.1', 'MEDIUM_AND_LIGHT', ('couple_with_heart_woman_woman_medium_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FC', 'couple with heart: woman, woman, medium skin tone, medium-light skin tone', '13.1', 'MEDIUM_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_woman_medium_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FD', 'couple with heart: woman, woman, medium skin tone', '13.1', 'MEDIUM', ('couple_with_heart_woman_woman_medium_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FE', 'couple with heart: woman, woman, medium skin tone, medium-dark skin tone', '13.1', 'MEDIUM_AND_MEDIUM_DARK', ('couple_with_heart_woman_woman_medium_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FD\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FF', 'couple with heart: woman, woman, medium skin tone, dark skin tone', '13.1', 'MEDIUM_AND_DARK', ('couple_with_heart_woman_woman_medium_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FD\u200D\u2764\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FB', 'couple with heart: woman, woman, medium-dark skin tone, light skin tone', '13.1', 'MEDIUM_DARK_AND_LIGHT', ('couple_with_heart_woman_woman_medium-dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FC', 'couple with heart: woman, woman, medium-dark skin tone, medium-light skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_woman_medium-dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FD', 'couple with heart: woman, woman, medium-dark skin tone, medium skin tone', '13.1', 'MEDIUM_DARK_AND_MEDIUM', ('couple_with_heart_woman_woman_medium-dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FE', 'couple with heart: woman, woman, medium-dark skin tone', '13.1', 'MEDIUM_DARK', ('couple_with_heart_woman_woman_medium-dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FE\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FF', 'couple with heart: woman, woman, medium-dark skin tone, dark skin tone', '13.1', 'MEDIUM_DARK_AND_DARK', ('couple_with_heart_woman_woman_medium-dark_skin_tone_dark_skin_tone',), ('\U0001F469\U0001F3FE\u200D\u2764\u200D\U0001F469\U0001F3FF',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FB', 'couple with heart: woman, woman, dark skin tone, light skin tone', '13.1', 'DARK_AND_LIGHT', ('couple_with_heart_woman_woman_dark_skin_tone_light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F469\U0001F3FB',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FC', 'couple with heart: woman, woman, dark skin tone, medium-light skin tone', '13.1', 'DARK_AND_MEDIUM_LIGHT', ('couple_with_heart_woman_woman_dark_skin_tone_medium-light_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F469\U0001F3FC',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FD', 'couple with heart: woman, woman, dark skin tone, medium skin tone', '13.1', 'DARK_AND_MEDIUM', ('couple_with_heart_woman_woman_dark_skin_tone_medium_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F469\U0001F3FD',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FE', 'couple with heart: woman, woman, dark skin tone, medium-dark skin tone', '13.1', 'DARK_AND_MEDIUM_DARK', ('couple_with_heart_woman_woman_dark_skin_tone_medium-dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F469\U0001F3FE',)),
        ('\U0001F469\U0001F3FF\u200D\u2764\uFE0F\u200D\U0001F469\U0001F3FF', 'couple with heart: woman, woman, dark skin tone', '13.1', 'DARK', ('couple_with_heart_woman_woman_dark_skin_tone',), ('\U0001F469\U0001F3FF\u200D\u2764\u200D\U0001F469\U0001F3FF',)),
    )),
    ('\U0001F468\u200D\U0001F469\u200D\U0001F466', 'family: man, woman, boy', 'People & Body', 'family', '2.0', ('family_man_woman_boy',), (), None),
    ('\U0001F468\u200D\U0001F469\u200D\U0001F467', 'family: man, woman, girl', 'People & Body', 'family', '2.0', ('family_mwg',), (), None),
    ('\U0001F468\u200D\U0001F469\u200D\U0001F467\u200D\U0001F466', 'family: man, woman, girl, boy', 'People & Body', 'family', '2.0', ('family_mwgb',), (), None),
    ('\U0001F468\u200D\U0001F469\u200D\U0001F466\u200D\U0001F466', 'family: man, woman, boy, boy', 'People & Body', 'family', '2.0', ('family_mwbb',), (), None),
    ('\U0001F468\u200D\U0001F469\u200D\U0001F467\u200D\U0001F467', 'family: man, woman, girl, girl', 'People & Body', 'family', '2.0', ('family_mwgg',), (), None),
    ('\U0001F468\u200D\U0001F468\u200D\U0001F466', 'family: man, man, boy', 'People & Body', 'family', '2.0', ('family_mmb',), (), None),
    ('\U0001F468\u200D\U0001F468\u200D\U0001F467', 'family: man, man, girl', 'People & Body', 'family', '2.0', ('family_mmg',), (), None),
    ('\U0001F468\u200D\U0001F468\u200D\U0001F467\u200D\U0001F466', 'family: man, man, girl, boy', 'People & Body', 'family', '2.0', ('family_mmgb',), (), None),
    ('\U0001F468\u200D\U0001F468\u200D\U0001F466\u200D\U0001F466', 'family: man, man, boy, boy', 'People & Body', 'family', '2.0', ('family_mmbb',), (), None),
    ('\U0001F468\u200D\U0001F468\u200D\U0001F467\u200D\U0001F467', 'family: man, man, girl, girl', 'People & Body', 'family', '2.0', ('family_mmgg',), (), None),
    ('\U0001F469\u200D\U0001F469\u200D\U0001F466', 'family: woman, woman, boy', 'People & Body', 'family', '2.0', ('family_wwb',), (), None),
    ('\U0001F469\u200D\U0001F469\u200D\U0001F467', 'family: woman, woman, girl', 'People & Body', 'family', '2.0', ('family_wwg',), (), None),
    ('\U0001F469\u200D\U0001F469\u200D\U0001F467\u200D\U0001F466', 'family: woman, woman, girl, boy', 'People & Body', 'family', '2.0', ('family_wwgb',), (), None),
    ('\U0001F469\u200D\U0001F469\u200D\U0001F466\u200D\U0001F466', 'family: woman, woman, boy, boy', 'People & Body', 'family', '2.0', ('family_wwbb',), (), None),
    ('\U0001F469\u200D\U0001F469\u200D\U0001F467\u200D\U0001F467', 'family: woman, woman, girl, girl', 'People & Body', 'family', '2.0', ('family_wwgg',), (), None),
    ('\U0001F468\u200D\U0001F466', 'family: man, boy', 'People & Body', 'family', '4.0', ('family_man_boy',), (), None),
    ('\U0001F468\u200D\U0001F466\u200D\U0001F466', 'family: man, boy, boy', 'People & Body', 'family', '4.0', ('family_man_boy_boy',), (), None),
    ('\U0001F468\u200D\U0001F467', 'family: man, girl', 'People & Body', 'family', '4.0', ('family_man_girl',), (), None),
    ('\U0001F468\u200D\U0001F467\u200D\U0001F466', 'family: man, girl, boy', 'People & Body', 'family', '4.0', ('family_man_girl_boy',), (), None),
    ('\U0001F468\u200D\U0001F467\u200D\U0001F467', 'family: man, girl, girl', 'People & Body', 'family', '4.0', ('family_man_girl_girl',), (), None),
    ('\U0001F469\u200D\U0001F466', 'family: woman, boy', 'People & Body', 'family', '4.0', ('family_woman_boy',), (), None),
    ('\U0001F469\u200D\U0001F466\u200D\U0001F466', 'family: woman, boy, boy', 'People & Body', 'family', '4.0', ('family_woman_boy_boy',), (), None),
    ('\U0001F469\u200D\U0001F467', 'family: woman, girl', 'People & Body', 'family', '4.0', ('family_woman_girl',), (), None),
    ('\U0001F469\u200D\U0001F467\u200D\U0001F466', 'family: woman, girl, boy', 'People & Body', 'family', '4.0', ('family_woman_girl_boy',), (), None),
    ('\U0001F469\u200D\U0001F467\u200D\U0001F467', 'family: woman, girl, girl', 'People & Body', 'family', '4.0', ('family_woman_girl_girl',), (), None),
    ('\U0001F5E3\uFE0F', 'speaking head', 'People & Body', 'person-symbol', '0.7', ('speaking_head', 'speaking_head_in_silhouette'), ('\U0001F5E3',), None),
    ('\U0001F464', 'bust in silhouette', 'People & Body', 'person-symbol', '0.6', ('bust_in_silhouette',), (), None),
    ('\U0001F465', 'busts in silhouette', 'People & Body', 'person-symbol', '1.0', ('busts_in_silhouette',), (), None),
    ('\U0001FAC2', 'people hugging', 'People & Body', 'person-symbol', '13.0', ('people_hugging',), (), None),
    ('\U0001F46A', 'family', 'People & Body', 'person-symbol', '0.6', ('family',), (), None),
    ('\U0001F9D1\u200D\U0001F9D1\u200D\U0001F9D2', 'family: adult, adult, child', 'People & Body', 'person-symbol', '15.1', (), (), None),
    ('\U0001F9D1\u200D\U0001F9D1\u200D\U0001F9D2\u200D\U0001F9D2', 'family: adult, adult, child, child', 'People & Body', 'person-symbol', '15.1', (), (), None),
    ('\U0001F9D1\u200D\U0001F9D2', 'family: adult, child', 'People & Body', 'person-symbol', '15.1', (), (), None),
    ('\U0001F9D1\u200D\U0001F9D2\u200D\U0001F9D2', 'family: adult, child, child', 'People & Body', 'person-symbol', '15.1', (), (), None),
    ('\U0001F463', 'footprints', 'People & Body', 'person-symbol', '0.6', ('footprints',), (), None),
    ('\U0001F435', 'monkey face', 'Animals & Nature', 'animal-mammal', '0.6', ('monkey_face',), (), None),
    ('\U0001F412', 'monkey', 'Animals & Nature', 'animal-mammal', '0.6', ('monkey',), (), None),
    ('\U0001F98D', 'gorilla', 'Animals & Nature', 'animal-mammal', '3.0', ('gorilla',), (), None),
    ('\U0001F9A7', 'orangutan', 'Animals & Nature', 'animal-mammal', '12.0', ('orangutan',), (), None),
    ('\U0001F436', 'dog face', 'Animals & Nature', 'animal-mammal', '0.6', ('dog',), (), None),
    ('\U0001F415', 'dog', 'Animals & Nature', 'animal-mammal', '0.7', ('dog2',), (), None),
    ('\U0001F9AE', 'guide dog', 'Animals & Nature', 'animal-mammal', '12.0', ('guide_dog',), (), None),
    ('\U0001F415\u200D\U0001F9BA', 'service dog', 'Animals & Nature', 'animal-mammal', '12.0', ('service_dog',), (), None),
    ('\U0001F429', 'poodle', 'Animals & Nature', 'animal-mammal', '0.6', ('poodle',), (), None),
    ('\U0001F43A', 'wolf', 'Animals & Nature', 'animal-mammal', '0.6', ('wolf',), (), None),
    ('\U0001F98A', 'fox', 'Animals & Nature', 'animal-mammal', '3.0', ('fox', 'fox_face'), (), None),
    ('\U0001F99D', 'raccoon', 'Animals & Nature', 'animal-mammal', '11.0', ('raccoon',), (), None),
    ('\U0001F431', 'cat face', 'Animals & Nature', 'animal-mammal', '0.6', ('cat',), (), None),
    ('\U0001F408', 'cat', 'Animals & Nature', 'animal-mammal', '0.7', ('cat2',), (), None),
    ('\U0001F408\u200D\u2B1B', 'black cat', 'Animals & Nature', 'animal-mammal', '13.0', ('black_cat',), (), None),
    ('\U0001F981', 'lion', 'Animals & Nature', 'animal-mammal', '1.0', ('lion_face', 'lion'), (), None),
    ('\U0001F42F', 'tiger face', 'Animals & Nature', 'animal-mammal', '0.6', ('tiger',), (), None),
    ('\U0001F405', 'tiger', 'Animals & Nature', 'animal-mammal', '1.0', ('tiger2',), (), None),
    ('\U0001F406', 'leopard', 'Animals & Nature', 'animal-mammal', '1.0', ('leopard',), (), None),
    ('\U0001F434', 'horse face', 'Animals & Nature', 'animal-mammal', '0.6', ('horse',), (), None),
    ('\U0001FACE', 'moose', 'Animals & Nature', 'animal-mammal', '15.0', ('moose',), (), None),
    ('\U0001FACF', 'donkey', 'Animals & Nature', 'animal-mammal', '15.0', ('donkey',), (), None),
    ('\U0001F40E', 'horse', 'Animals & Nature', 'animal-mammal', '0.6', ('racehorse',), (), None),
    ('\U0001F984', 'unicorn', 'Animals & Nature', 'animal-mammal', '1.0', ('unicorn', 'unicorn_face'), (), None),
    ('\U0001F993', 'zebra', 'Animals & Nature', 'animal-mammal', '5.0', ('zebra',), (), None),
    ('\U0001F98C', 'deer', 'Animals & Nature', 'animal-mammal', '3.0', ('deer',), (), None),
    ('\U0001F9AC', 'bison', 'Animals & Nature', 'animal-mammal', '13.0', ('bison',), (), None),
    ('\U0001F42E', 'cow face', 'Animals & Nature', 'animal-mammal', '0.6', ('cow',), (), None),
    ('\U0001F402', 'ox', 'Animals & Nature', 'animal-mammal', '1.0', ('ox',), (), None),
    ('\U0001F403', 'water buffalo', 'Animals & Nature', 'animal-mammal', '1.0', ('water_buffalo',), (), None),
    ('\U0001F404', 'cow', 'Animals & Nature', 'animal-mammal', '1.0', ('cow2',), (), None),
    ('\U0001F437', 'pig face', 'Animals & Nature', 'animal-mammal', '0.6', ('pig',), (), None),
    ('\U0001F416', 'pig', 'Animals & Nature', 'animal-mammal', '1.0', ('pig2',), (), None),
    ('\U0001F417', 'boar', 'Animals & Nature', 'animal-mammal', '0.6', ('boar',), (), None),
    ('\U0001F43D', 'pig nose', 'Animals & Nature', 'animal-mammal', '0.6', ('pig_nose',), (), None),
    ('\U0001F40F', 'ram', 'Animals & Nature', 'animal-mammal', '1.0', ('ram',), (), None),
    ('\U0001F411', 'ewe', 'Animals & Nature', 'animal-mammal', '0.6', ('sheep',), (), None),
    ('\U0001F410', 'goat', 'Animals & Nature', 'animal-mammal', '1.0', ('goat',), (), None),
    ('\U0001F42A', 'camel', 'Animals & Nature', 'animal-mammal', '1.0', ('dromedary_camel',), (), None),
    ('\U0001F42B', 'two-hump camel', 'Animals & Nature', 'animal-mammal', '0.6', ('camel',), (), None),
    ('\U0001F999', 'llama', 'Animals & Nature', 'animal-mammal', '11.0', ('llama',), (), None),
    ('\U0001F992', 'giraffe', 'Animals & Nature', 'animal-mammal', '5.0', ('giraffe',), (), None),
    ('\U0001F418', 'elephant', 'Animals & Nature', 'animal-mammal', '0.6', ('elephant',), (), None),
    ('\U0001F9A3', 'mammoth', 'Animals & Nature', 'animal-mammal', '13.0', ('mammoth',), (), None),
    ('\U0001F98F', 'rhinoceros', 'Animals & Nature', 'animal-mammal', '3.0', ('rhino', 'rhinoceros'), (), None),
    ('\U0001F99B', 'hippopotamus', 'Animals & Nature', 'animal-mammal', '11.0', ('hippopotamus',), (), None),
    ('\U0001F42D', 'mouse face', 'Animals & Nature', 'animal-mammal', '0.6', ('mouse',), (), None),
    ('\U0001F401', 'mouse', 'Animals & Nature', 'animal-mammal', '1.0', ('mouse2',), (), None),
    ('\U0001F400', 'rat', 'Animals & Nature', 'animal-mammal', '1.0', ('rat',), (), None),
    ('\U0001F439', 'hamster', 'Animals & Nature', 'animal-mammal', '0.6', ('hamster',), (), None),
    ('\U0001F430', 'rabbit face', 'Animals & Nature', 'animal-mammal', '0.6', ('rabbit',), (), None),
    ('\U0001F407', 'rabbit', 'Animals & Nature', 'animal-mammal', '1.0', ('rabbit2',), (), None),
    ('\U0001F43F\uFE0F', 'chipmunk', 'Animals & Nature', 'animal-mammal', '0.7', ('chipmunk',), ('\U0001F43F',), None),
    ('\U0001F9AB', 'beaver', 'Animals & Nature', 'animal-mammal', '13.0', ('beaver',), (), None),
    ('\U0001F994', 'hedgehog', 'Animals & Nature', 'animal-mammal', '5.0', ('hedgehog',), (), None),
    ('\U0001F987', 'bat', 'Animals & Nature', 'animal-mammal', '3.0', ('bat',), (), None),
    ('\U0001F43B', 'bear', 'Animals & Nature', 'animal-mammal', '0.6', ('bear',), (), None),
    ('\U0001F43B\u200D\u2744\uFE0F', 'polar bear', 'Animals & Nature', 'animal-mammal', '13.0', ('polar_bear',), ('\U0001F43B\u200D\u2744',), None),
    ('\U0001F428', 'koala', 'Animals & Nature', 'animal-mammal', '0.6', ('koala',), (), None),
    ('\U0001F43C', 'panda', 'Animals & Nature', 'animal-mammal', '0.6', ('panda_face',), (), None),
    ('\U0001F9A5', 'sloth', 'Animals & Nature', 'animal-mammal', '12.0', ('sloth',), (), None),
    ('\U0001F9A6', 'otter', 'Animals & Nature', 'animal-mammal', '12.0', ('otter',), (), None),
    ('\U0001F9A8', 'skunk', 'Animals & Nature', 'animal-mammal', '12.0', ('skunk',), (), None),
    ('\U0001F998', 'kangaroo', 'Animals & Nature', 'animal-mammal', '11.0', ('kangaroo',), (), None),
    ('\U0001F9A1', 'badger', 'Animals & Nature', 'animal-mammal', '11.0', ('badger',), (), None),
    ('\U0001F43E', 'paw prints', 'Animals & Nature', 'animal-mammal', '0.6', ('feet', 'paw_prints'), (), None),
    ('\U0001F983', 'turkey', 'Animals & Nature', 'animal-bird', '1.0', ('turkey',), (), None),
    ('\U0001F414', 'chicken', 'Animals & Nature', 'animal-bird', '0.6', ('chicken',), (), None),
    ('\U0001F413', 'rooster', 'Animals & Nature', 'animal-bird', '1.0', ('rooster',), (), None),
    ('\U0001F423', 'hatching chick', 'Animals & Nature', 'animal-bird', '0.6', ('hatching_chick',), (), None),
    ('\U0001F424', 'baby chick', 'Animals & Nature', 'animal-bird', '0.6', ('baby_chick',), (), None),
    ('\U0001F425', 'front-facing baby chick', 'Animals & Nature', 'animal-bird', '0.6', ('hatched_chick',), (), None),
    ('\U0001F426', 'bird', 'Animals & Nature', 'animal-bird', '0.6', ('bird',), (), None),
    ('\U0001F427', 'penguin', 'Animals & Nature', 'animal-bird', '0.6', ('penguin',), (), None),
    ('\U0001F54A\uFE0F', 'dove', 'Animals & Nature', 'animal-bird', '0.7', ('dove', 'dove_of_peace'), ('\U0001F54A',), None),
    ('\U0001F985', 'eagle', 'Animals & Nature', 'animal-bird', '3.0', ('eagle',), (), None),
    ('\U0001F986', 'duck', 'Animals & Nature', 'animal-bird', '3.0', ('duck',), (), None),
    ('\U0001F9A2', 'swan', 'Animals & Nature', 'animal-bird', '11.0', ('swan',), (), None),
    ('\U0001F989', 'owl', 'Animals & Nature', 'animal-bird', '3.0', ('owl',), (), None),
    ('\U0001F9A4', 'dodo', 'Animals & Nature', 'animal-bird', '13.0', ('dodo',), (), None),
    ('\U0001FAB6', 'feather', 'Animals & Nature', 'animal-bird', '13.0', ('feather',), (), None),
    ('\U0001F9A9', 'flamingo', 'Animals & Nature', 'animal-bird', '12.0', ('flamingo',), (), None),
    ('\U0001F99A', 'peacock', 'Animals & Nature', 'animal-bird', '11.0', ('peacock',), (), None),
    ('\U0001F99C', 'parrot', 'Animals & Nature', 'animal-bird', '11.0', ('parrot',), (), None),
    ('\U0001FABD', 'wing', 'Animals & Nature', 'animal-bird', '15.0', ('wing',), (), None),
    ('\U0001F426\u200D\u2B1B', 'black bird', 'Animals & Nature', 'animal-bird', '15.0', ('black_bird',), (), None),
    ('\U0001FABF', 'goose', 'Animals & Nature', 'animal-bird', '15.0', ('goose',), (), None),
    ('\U0001F426\u200D\U0001F525', 'phoenix', 'Animals & Nature', 'animal-bird', '15.1', (), (), None),
    ('\U0001F438', 'frog', 'Animals & Nature', 'animal-amphibian', '0.6', ('frog',), (), None),
    ('\U0001F40A', 'crocodile', 'Animals & Nature', 'animal-reptile', '1.0', ('crocodile',), (), None),
    ('\U0001F422', 'turtle', 'Animals & Nature', 'animal-reptile', '0.6', ('turtle',), (), None),
    ('\U0001F98E', 'lizard', 'Animals & Nature', 'animal-reptile', '3.0', ('lizard',), (), None),
    ('\U0001F40D', 'snake', 'Animals & Nature', 'animal-reptile', '0.6', ('snake',), (), None),
    ('\U0001F432', 'dragon face', 'Animals & Nature', 'animal-reptile', '0.6', ('dragon_face',), (), None),
    ('\U0001F409', 'dragon', 'Animals & Nature', 'animal-reptile', '1.0', ('dragon',), (), None),
    ('\U0001F995', 'sauropod', 'Animals & Nature', 'animal-reptile', '5.0', ('sauropod',), (), None),
    ('\U0001F996', 'T-Rex', 'Animals & Nature', 'animal-reptile', '5.0', ('t_rex',), (), None),
    ('\U0001F433', 'spouting whale', 'Animals & Nature', 'animal-marine', '0.6', ('whale',), (), None),
    ('\U0001F40B', 'whale', 'Animals & Nature', 'animal-marine', '1.0', ('whale2',), (), None),
    ('\U0001F42C', 'dolphin', 'Animals & Nature', 'animal-marine', '0.6', ('dolphin',), (), None),
    ('\U0001F9AD', 'seal', 'Animals & Nature', 'animal-marine', '13.0', ('seal',), (), None),
    ('\U0001F41F', 'fish', 'Animals & Nature', 'animal-marine', '0.6', ('fish',), (), None),
    ('\U0001F420', 'tropical fish', 'Animals & Nature', 'animal-marine', '0.6', ('tropical_fish',), (), None),
    ('\U0001F421', 'blowfish', 'Animals & Nature', 'animal-marine', '0.6', ('blowfish',), (), None),
    ('\U0001F988', 'shark', 'Animals & Nature', 'animal-marine', '3.0', ('shark',), (), None),
    ('\U0001F419', 'octopus', 'Animals & Nature', 'animal-marine', '0.6', ('octopus',), (), None),
    ('\U0001F41A', 'spiral shell', 'Animals & Nature', 'animal-marine', '0.6', ('shell',), (), None),
    ('\U0001FAB8', 'coral', 'Animals & Nature', 'animal-marine', '14.0', ('coral',), (), None),
    ('\U0001FABC', 'jellyfish', 'Animals & Nature', 'animal-marine', '15.0', ('jellyfish',), (), None),
    ('\U0001F40C', 'snail', 'Animals & Nature', 'animal-bug', '0.6', ('snail',), (), None),
    ('\U0001F98B', 'butterfly', 'Animals & Nature', 'animal-bug', '3.0', ('butterfly',), (), None),
    ('\U0001F41B', 'bug', 'Animals & Nature', 'animal-bug', '0.6', ('bug',), (), None),
    ('\U0001F41C', 'ant', 'Animals & Nature', 'animal-bug', '0.6', ('ant',), (), None),
    ('\U0001F41D', 'honeybee', 'Animals & Nature', 'animal-bug', '0.6', ('bee',), (), None),
    ('\U0001FAB2', 'beetle', 'Animals & Nature', 'animal-bug', '13.0', (), (), None),
    ('\U0001F41E', 'lady beetle', 'Animals & Nature', 'animal-bug', '0.6', ('beetle',), (), None),
    ('\U0001F997', 'cricket', 'Animals & Nature', 'animal-bug', '5.0', ('cricket',), (), None),
    ('\U0001FAB3', 'cockroach', 'Animals & Nature', 'animal-bug', '13.0', ('cockroach',), (), None),
    ('\U0001F577\uFE0F', 'spider', 'Animals & Nature', 'animal-bug', '0.7', ('spider',), ('\U0001F577',), None),
    ('\U0001F578\uFE0F', 'spider web', 'Animals & Nature', 'animal-bug', '0.7', ('spider_web',), ('\U0001F578',), None),
    ('\U0001F982', 'scorpion', 'Animals & Nature', 'animal-bug', '1.0', ('scorpion',), (), None),
    ('\U0001F99F', 'mosquito', 'Animals & Nature', 'animal-bug', '11.0', ('mosquito',), (), None),
    ('\U0001FAB0', 'fly', 'Animals & Nature', 'animal-bug', '13.0', ('fly',), (), None),
    ('\U0001FAB1', 'worm', 'Animals & Nature', 'animal-bug', '13.0', ('worm',), (), None),
    ('\U0001F9A0', 'microbe', 'Animals & Nature', 'animal-bug', '11.0', ('microbe',), (), None),
    ('\U0001F490', 'bouquet', 'Animals & Nature', 'plant-flower', '0.6', ('bouquet',), (), None),
    ('\U0001F338', 'cherry blossom', 'Animals & Nature', 'plant-flower', '0.6', ('cherry_blossom',), (), None),
    ('\U0001F4AE', 'white flower', 'Animals & Nature', 'plant-flower', '0.6', ('white_flower',), (), None),
    ('\U0001FAB7', 'lotus', 'Animals & Nature', 'plant-flower', '14.0', ('lotus',), (), None),
    ('\U0001F3F5\uFE0F', 'rosette', 'Animals & Nature', 'plant-flower', '0.7', ('rosette',), ('\U0001F3F5',), None),
    ('\U0001F339', 'rose', 'Animals & Nature', 'plant-flower', '0.6', ('rose',), (), None),
    ('\U0001F940', 'wilted flower', 'Animals & Nature', 'plant-flower', '3.0', ('wilted_rose', 'wilted_flower'), (), None),
    ('\U0001F33A', 'hibiscus', 'Animals & Nature', 'plant-flower', '0.6', ('hibiscus',), (), None),
    ('\U0001F33B', 'sunflower', 'Animals & Nature', 'plant-flower', '0.6', ('sunflower',), (), None),
    ('\U0001F33C', 'blossom', 'Animals & Nature', 'plant-flower', '0.6', ('blossom',), (), None),
    ('\U0001F337', 'tulip', 'Animals & Nature', 'plant-flower', '0.6', ('tulip',), (), None),
    ('\U0001FABB', 'hyacinth', 'Animals & Nature', 'plant-flower', '15.0', ('hyacinth',), (), None),
    ('\U0001F331', 'seedling', 'Animals & Nature', 'plant-other', '0.6', ('seedling',), (), None),
    ('\U0001FAB4', 'potted plant', 'Animals & Nature', 'plant-other', '13.0', ('potted_plant',), (), None),
    ('\U0001F332', 'evergreen tree', 'Animals & Nature', 'plant-other', '1.0', ('evergreen_tree',), (), None),
    ('\U0001F333', 'deciduous tree', 'Animals & Nature', 'plant-other', '1.0', ('deciduous_tree',), (), None),
    ('\U0001F334', 'palm tree', 'Animals & Nature', 'plant-other', '0.6', ('palm_tree',), (), None),
    ('\U0001F335', 'cactus', 'Animals & Nature', 'plant-other', '0.6', ('cactus',), (), None),
    ('\U0001F33E', 'sheaf of rice', 'Animals & Nature', 'plant-other', '0.6', ('ear_of_rice',), (), None),
    ('\U0001F33F', 'herb', 'Animals & Nature', 'plant-other', '0.6', ('herb',), (), None),
    ('\u2618\uFE0F', 'shamrock', 'Animals & Nature', 'plant-other', '1.0', ('shamrock',), ('\u2618',), None),
    ('\U0001F340', 'four leaf clover', 'Animals & Nature', 'plant-other', '0.6', ('four_leaf_clover',), (), None),
    ('\U0001F341', 'maple leaf', 'Animals & Nature', 'plant-other', '0.6', ('maple_leaf',), (), None),
    ('\U0001F342', 'fallen leaf', 'Animals & Nature', 'plant-other', '0.6', ('fallen_leaf',), (), None),
    ('\U0001F343', 'leaf fluttering in wind', 'Animals & Nature', 'plant-other', '0.6', ('leaves',), (), None),
    ('\U0001FAB9', 'empty nest', 'Animals & Nature', 'plant-other', '14.0', ('empty_nest',), (), None),
    ('\U0001FABA', 'nest with eggs', 'Animals & Nature', 'plant-other', '14.0', ('nest_with_eggs',), (), None),
    ('\U0001F344', 'mushroom', 'Animals & Nature', 'plant-other', '0.6', ('mushroom',), (), None),
    ('\U0001F347', 'grapes', 'Food & Drink', 'food-fruit', '0.6', ('grapes',), (), None),
    ('\U0001F348', 'melon', 'Food & Drink', 'food-fruit', '0.6', ('melon',), (), None),
    ('\U0001F349', 'watermelon', 'Food & Drink', 'food-fruit', '0.6', ('watermelon',), (), None),
    ('\U0001F34A', 'tangerine', 'Food & Drink', 'food-fruit', '0.6', ('tangerine',), (), None),
    ('\U0001F34B', 'lemon', 'Food & Drink', 'food-fruit', '1.0', ('lemon',), (), None),
    ('\U0001F34B\u200D\U0001F7E9', 'lime', 'Food & Drink', 'food-fruit', '15.1', (), (), None),
    ('\U0001F34C', 'banana', 'Food & Drink', 'food-fruit', '0.6', ('banana',), (), None),
    ('\U0001F34D', 'pineapple', 'Food & Drink', 'food-fruit', '0.6', ('pineapple',), (), None),
    ('\U0001F96D', 'mango', 'Food & Drink', 'food-fruit', '11.0', ('mango',), (), None),
    ('\U0001F34E', 'red apple', 'Food & Drink', 'food-fruit', '0.6', ('apple',), (), None),
    ('\U0001F34F', 'green apple', 'Food & Drink', 'food-fruit', '0.6', ('green_apple',), (), None),
    ('\U0001F350', 'pear', 'Food & Drink', 'food-fruit', '1.0', ('pear',), (), None),
    ('\U0001F351', 'peach', 'Food & Drink', 'food-fruit', '0.6', ('peach',), (), None),
    ('\U0001F352', 'cherries', 'Food & Drink', 'food-fruit', '0.6', ('cherries',), (), None),
    ('\U0001F353', 'strawberry', 'Food & Drink', 'food-fruit', '0.6', ('strawberry',), (), None),
    ('\U0001FAD0', 'blueberries', 'Food & Drink', 'food-fruit', '13.0', ('blueberries',), (), None),
    ('\U0001F95D', 'kiwi fruit', 'Food & Drink', 'food-fruit', '3.0', ('kiwi', 'kiwifruit'), (), None),
    ('\U0001F345', 'tomato', 'Food & Drink', 'food-fruit', '0.6', ('tomato',), (), None),
    ('\U0001FAD2', 'olive', 'Food & Drink', 'food-fruit', '13.0', ('olive',), (), None),
    ('\U0001F965', 'coconut', 'Food & Drink', 'food-fruit', '5.0', ('coconut',), (), None),
    ('\U0001F951', 'avocado', 'Food & Drink', 'food-vegetable', '3.0', ('avocado',), (), None),
    ('\U0001F346', 'eggplant', 'Food & Drink', 'food-vegetable', '0.6', ('eggplant',), (), None),
    ('\U0001F954', 'potato', 'Food & Drink', 'food-vegetable', '3.0', ('potato',), (), None),
    ('\U0001F955', 'carrot', 'Food & Drink', 'food-vegetable', '3.0', ('carrot',), (), None),
    ('\U0001F33D', 'ear of corn', 'Food & Drink', 'food-vegetable', '0.6', ('corn',), (), None),
    ('\U0001F336\uFE0F', 'hot pepper', 'Food & Drink', 'food-vegetable', '0.7', ('hot_pepper',), ('\U0001F336',), None),
    ('\U0001FAD1', 'bell pepper', 'Food & Drink', 'food-vegetable', '13.0', ('bell_pepper',), (), None),
    ('\U0001F952', 'cucumber', 'Food & Drink', 'food-vegetable', '3.0', ('cucumber',), (), None),
    ('\U0001F96C', 'leafy green', 'Food & Drink', 'food-vegetable', '11.0', ('leafy_green',), (), None),
    ('\U0001F966', 'broccoli', 'Food & Drink', 'food-vegetable', '5.0', ('broccoli',), (), None),
    ('\U0001F9C4', 'garlic', 'Food & Drink', 'food-vegetable', '12.0', ('garlic',), (), None),
    ('\U0001F9C5', 'onion', 'Food & Drink', 'food-vegetable', '12.0', ('onion',), (), None),
    ('\U0001F95C', 'peanuts', 'Food & Drink', 'food-vegetable', '3.0', ('peanuts', 'shelled_peanut'), (), None),
    ('\U0001FAD8', 'beans', 'Food & Drink', 'food-vegetable', '14.0', ('beans',), (), None),
    ('\U0001F330', 'chestnut', 'Food & Drink', 'food-vegetable', '0.6', ('chestnut',), (), None),
    ('\U0001FADA', 'ginger root', 'Food & Drink', 'food-vegetable', '15.0', ('ginger_root',), (), None),
    ('\U0001FADB', 'pea pod', 'Food & Drink', 'food-vegetable', '15.0', ('pea_pod',), (), None),
    ('\U0001F344\u200D\U0001F7EB', 'brown mushroom', 'Food & Drink', 'food-vegetable', '15.1', (), (), None),
    ('\U0001F35E', 'bread', 'Food & Drink', 'food-prepared', '0.6', ('bread',), (), None),
    ('\U0001F950', 'croissant', 'Food & Drink', 'food-prepared', '3.0', ('croissant',), (), None),
    ('\U0001F956', 'baguette bread', 'Food & Drink', 'food-prepared', '3.0', ('french_bread', 'baguette_bread'), (), None),
    ('\U0001FAD3', 'flatbread', 'Food & Drink', 'food-prepared', '13.0', ('flatbread',), (), None),
    ('\U0001F968', 'pretzel', 'Food & Drink', 'food-prepared', '5.0', ('pretzel',), (), None),
    ('\U0001F96F', 'bagel', 'Food & Drink', 'food-prepared', '11.0', ('bagel',), (), None),
    ('\U0001F95E', 'pancakes', 'Food & Drink', 'food-prepared', '3.0', ('pancakes',), (), None),
    ('\U0001F9C7', 'waffle', 'Food & Drink', 'food-prepared', '12.0', ('waffle',), (), None),
    ('\U0001F9C0', 'cheese wedge', 'Food & Drink', 'food-prepared', '1.0', ('cheese', 'cheese_wedge'), (), None),
    ('\U0001F356', 'meat on bone', 'Food & Drink', 'food-prepared', '0.6', ('meat_on_bone',), (), None),
    ('\U0001F357', 'poultry leg', 'Food & Drink', 'food-prepared', '0.6', ('poultry_leg',), (), None),
    ('\U0001F969', 'cut of meat', 'Food & Drink', 'food-prepared', '5.0', ('cut_of_meat',), (), None),
    ('\U0001F953', 'bacon', 'Food & Drink', 'food-prepared', '3.0', ('bacon',), (), None),
    ('\U0001F354', 'hamburger', 'Food & Drink', 'food-prepared', '0.6', ('hamburger',), (), None),
    ('\U0001F35F', 'french fries', 'Food & Drink', 'food-prepared', '0.6', ('fries',), (), None),
    ('\U0001F355', 'pizza', 'Food & Drink', 'food-prepared', '0.6', ('pizza',), (), None),
    ('\U0001F32D', 'hot dog', 'Food & Drink', 'food-prepared', '1.0', ('hotdog', 'hot_dog'), (), None),
    ('\U0001F96A', 'sandwich', 'Food & Drink', 'food-prepared', '5.0', ('sandwich',), (), None),
    ('\U0001F32E', 'taco', 'Food & Drink', 'food-prepared', '1.0', ('taco',), (), None),
    ('\U0001F32F', 'burrito', 'Food & Drink', 'food-prepared', '1.0', ('burrito',), (), None),
    ('\U0001FAD4', 'tamale', 'Food & Drink', 'food-prepared', '13.0', ('tamale',), (), None),
    ('\U0001F959', 'stuffed flatbread', 'Food & Drink', 'food-prepared', '3.0', ('stuffed_flatbread', 'stuffed_pita'), (), None),
    ('\U0001F9C6', 'falafel', 'Food & Drink', 'food-prepared', '12.0', ('falafel',), (), None),
    ('\U0001F95A', 'egg', 'Food & Drink', 'food-prepared', '3.0', ('egg',), (), None),
    ('\U0001F373', 'cooking', 'Food & Drink', 'food-prepared', '0.6', ('cooking',), (), None),
    ('\U0001F958', 'shallow pan of food', 'Food & Drink', 'food-prepared', '3.0', ('shallow_pan_of_food', 'paella'), (), None),
    ('\U0001F372', 'pot of food', 'Food & Drink', 'food-prepared', '0.6', ('stew',), (), None),
    ('\U0001FAD5', 'fondue', 'Food & Drink', 'food-prepared', '13.0', ('fondue',), (), None),
    ('\U0001F963', 'bowl with spoon', 'Food & Drink', 'food-prepared', '5.0', ('bowl_with_spoon',), (), None),
    ('\U0001F957', 'green salad', 'Food & Drink', 'food-prepared', '3.0', ('salad', 'green_salad'), (), None),
    ('\U0001F37F', 'popcorn', 'Food & Drink', 'food-prepared', '1.0', ('popcorn',), (), None),
    ('\U0001F9C8', 'butter', 'Food & Drink', 'food-prepared', '12.0', ('butter',), (), None),
    ('\U0001F9C2', 'salt', 'Food & Drink', 'food-prepared', '11.0', ('salt',), (), None),
    ('\U0001F96B', 'canned food', 'Food & Drink', 'food-prepared', '5.0', ('canned_food',), (), None),
    ('\U0001F371', 'bento box', 'Food & Drink', 'food-asian', '0.6', ('bento',), (), None),
    ('\U0001F358', 'rice cracker', 'Food & Drink', 'food-asian', '0.6', ('rice_cracker',), (), None),
    ('\U0001F359', 'rice ball', 'Food & Drink', 'food-asian', '0.6', ('rice_ball',), (), None),
    ('\U0001F35A', 'cooked rice', 'Food & Drink', 'food-asian', '0.6', ('rice',), (), None),
    ('\U0001F35B', 'curry rice', 'Food & Drink', 'food-asian', '0.6', ('curry',), (), None),
    ('\U0001F35C', 'steaming bowl', 'Food & Drink', 'food-asian', '0.6', ('ramen',), (), None),
    ('\U0001F35D', 'spaghetti', 'Food & Drink', 'food-asian', '0.6', ('spaghetti',), (), None),
    ('\U0001F360', 'roasted sweet potato', 'Food & Drink', 'food-asian', '0.6', ('sweet_potato',), (), None),
    ('\U0001F362', 'oden', 'Food & Drink', 'food-asian', '0.6', ('oden',), (), None),
    ('\U0001F363', 'sushi', 'Food & Drink', 'food-asian', '0.6', ('sushi',), (), None),
    ('\U0001F364', 'fried shrimp', 'Food & Drink', 'food-asian', '0.6', ('fried_shrimp',), (), None),
    ('\U0001F365', 'fish cake with swirl', 'Food & Drink', 'food-asian', '0.6', ('fish_cake',), (), None),
    ('\U0001F96E', 'moon cake', 'Food & Drink', 'food-asian', '11.0', ('moon_cake',), (), None),
    ('\U0001F361', 'dango', 'Food & Drink', 'food-asian', '0.6', ('dango',), (), None),
    ('\U0001F95F', 'dumpling', 'Food & Drink', 'food-asian', '5.0', ('dumpling',), (), None),
    ('\U0001F960', 'fortune cookie', 'Food & Drink', 'food-asian', '5.0', ('fortune_cookie',), (), None),
    ('\U0001F961', 'takeout box', 'Food & Drink', 'food-asian', '5.0', ('takeout_box',), (), None),
    ('\U0001F980', 'crab', 'Food & Drink', 'food-marine', '1.0', ('crab',), (), None),
    ('\U0001F99E', 'lobster', 'Food & Drink', 'food-marine', '11.0', ('lobster',), (), None),
    ('\U0001F990', 'shrimp', 'Food & Drink', 'food-marine', '3.0', ('shrimp',), (), None),
    ('\U0001F991', 'squid', 'Food & Drink', 'food-marine', '3.0', ('squid',), (), None),
    ('\U0001F9AA', 'oyster', 'Food & Drink', 'food-marine', '12.0', ('oyster',), (), None),
    ('\U0001F366', 'soft ice cream', 'Food & Drink', 'food-sweet', '0.6', ('icecream',), (), None),
    ('\U0001F367', 'shaved ice', 'Food & Drink', 'food-sweet', '0.6', ('shaved_ice',), (), None),
    ('\U0001F368', 'ice cream', 'Food & Drink', 'food-sweet', '0.6', ('ice_cream',), (), None),
    ('\U0001F369', 'doughnut', 'Food & Drink', 'food-sweet', '0.6', ('doughnut',), (), None),
    ('\U0001F36A', 'cookie', 'Food & Drink', 'food-sweet', '0.6', ('cookie',), (), None),
    ('\U0001F382', 'birthday cake', 'Food & Drink', 'food-sweet', '0.6', ('birthday',), (), None),
    ('\U0001F370', 'shortcake', 'Food & Drink', 'food-sweet', '0.6', ('cake',), (), None),
    ('\U0001F9C1', 'cupcake', 'Food & Drink', 'food-sweet', '11.0', ('cupcake',), (), None),
    ('\U0001F967', 'pie', 'Food & Drink', 'food-sweet', '5.0', ('pie',), (), None),
    ('\U0001F36B', 'chocolate bar', 'Food & Drink', 'food-sweet', '0.6', ('chocolate_bar',), (), None),
    ('\U0001F36C', 'candy', 'Food & Drink', 'food-sweet', '0.6', ('candy',), (), None),
    ('\U0001F36D', 'lollipop', 'Food & Drink', 'food-sweet', '0.6', ('lollipop',), (), None),
    ('\U0001F36E', 'custard', 'Food & Drink', 'food-sweet', '0.6', ('custard', 'flan', 'pudding'), (), None),
    ('\U0001F36F', 'honey pot', 'Food & Drink', 'food-sweet', '0.6', ('honey_pot',), (), None),
    ('\U0001F37C', 'baby bottle', 'Food & Drink', 'drink', '1.0', ('baby_bottle',), (), None),
    ('\U0001F95B', 'glass of milk', 'Food & Drink', 'drink', '3.0', ('milk', 'glass_of_milk'), (), None),
    ('\u2615', 'hot beverage', 'Food & Drink', 'drink', '0.6', ('coffee',), (), None),
    ('\U0001FAD6', 'teapot', 'Food & Drink', 'drink', '13.0', ('teapot',), (), None),
    ('\U0001F375', 'teacup without handle', 'Food & Drink', 'drink', '0.6', ('tea',), (), None),
    ('\U0001F376', 'sake', 'Food & Drink', 'drink', '0.6', ('sake',), (), None),
    ('\U0001F37E', 'bottle with popping cork', 'Food & Drink', 'drink', '1.0', ('champagne', 'bottle_with_popping_cork'), (), None),
    ('\U0001F377', 'wine glass', 'Food & Drink', 'drink', '0.6', ('wine_glass',), (), None),
    ('\U0001F378', 'cocktail glass', 'Food & Drink', 'drink', '0.6', ('cocktail',), (), None),
    ('\U0001F379', 'tropical drink', 'Food & Drink', 'drink', '0.6', ('tropical_drink',), (), None),
    ('\U0001F37A', 'beer mug', 'Food & Drink', 'drink', '0.6', ('beer',), (), None),
    ('\U0001F37B', 'clinking beer mugs', 'Food & Drink', 'drink', '0.6', ('beers',), (), None),
    ('\U0001F942', 'clinking glasses', 'Food & Drink', 'drink', '3.0', ('champagne_glass', 'clinking_glass'), (), None),
    ('\U0001F943', 'tumbler glass', 'Food & Drink', 'drink', '3.0', ('tumbler_glass', 'whisky'), (), None),
    ('\U0001FAD7', 'pouring liquid', 'Food & Drink', 'drink', '14.0', ('pouring_liquid',), (), None),
    ('\U0001F964', 'cup with straw', 'Food & Drink', 'drink', '5.0', ('cup_with_straw',), (), None),
    ('\U0001F9CB', 'bubble tea', 'Food & Drink', 'drink', '13.0', ('bubble_tea',), (), None),
    ('\U0001F9C3', 'beverage box', 'Food & Drink', 'drink', '12.0', ('beverage_box',), (), None),
    ('\U0001F9C9', 'mate', 'Food & Drink', 'drink', '12.0', ('mate',), (), None),
    ('\U0001F9CA', 'ice', 'Food & Drink', 'drink', '12.0', ('ice',), (), None),
    ('\U0001F962', 'chopsticks', 'Food & Drink', 'dishware', '5.0', ('chopsticks',), (), None),
    ('\U0001F37D\uFE0F', 'fork and knife with plate', 'Food & Drink', 'dishware', '0.7', ('fork_knife_plate', 'fork_and_knife_with_plate'), ('\U0001F37D',), None),
    ('\U0001F374', 'fork and knife', 'Food & Drink', 'dishware', '0.6', ('fork_and_knife',), (), None),
    ('\U0001F944', 'spoon', 'Food & Drink', 'dishware', '3.0', ('spoon',), (), None),
    ('\U0001F52A', 'kitchen knife', 'Food & Drink', 'dishware', '0.6', ('knife',), (), None),
    ('\U0001FAD9', 'jar', 'Food & Drink', 'dishware', '14.0', ('jar',), (), None),
    ('\U0001F3FA', 'amphora', 'Food & Drink', 'dishware', '1.0', ('amphora',), (), None),
    ('\U0001F30D', 'globe showing Europe-Africa', 'Travel & Places', 'place-map', '0.7', ('earth_africa',), (), None),
    ('\U0001F30E', 'globe showing Americas', 'Travel & Places', 'place-map', '0.7', ('earth_americas',), (), None),
    ('\U0001F30F', 'globe showing Asia-Australia', 'Travel & Places', 'place-map', '0.6', ('earth_asia',), (), None),
    ('\U0001F310', 'globe with meridians', 'Travel & Places', 'place-map', '1.0', ('globe_with_meridians',), (), None),
    ('\U0001F5FA\uFE0F', 'world map', 'Travel & Places', 'place-map', '0.7', ('map', 'world_map'), ('\U0001F5FA',), None),
    ('\U0001F5FE', 'map of Japan', 'Travel & Places', 'place-map', '0.6', ('japan',), (), None),
    ('\U0001F9ED', 'compass', 'Travel & Places', 'place-map', '11.0', ('compass',), (), None),
    ('\U0001F3D4\uFE0F', 'snow-capped mountain', 'Travel & Places', 'place-geographic', '0.7', ('mountain_snow', 'snow_capped_mountain'), ('\U0001F3D4',), None),
    ('\u26F0\uFE0F', 'mountain', 'Travel & Places', 'place-geographic', '0.7', ('mountain',), ('\u26F0',), None),
    ('\U0001F30B', 'volcano', 'Travel & Places', 'place-geographic', '0.6', ('volcano',), (), None),
    ('\U0001F5FB', 'mount fuji', 'Travel & Places', 'place-geographic', '0.6', ('mount_fuji',), (), None),
    ('\U0001F3D5\uFE0F', 'camping', 'Travel & Places', 'place-geographic', '0.7', ('camping',), ('\U0001F3D5',), None),
    ('\U0001F3D6\uFE0F', 'beach with umbrella', 'Travel & Places', 'place-geographic', '0.7', ('beach', 'beach_with_umbrella'), ('\U0001F3D6',), None),
    ('\U0001F3DC\uFE0F', 'desert', 'Travel & Places', 'place-geographic', '0.7', ('desert',), ('\U0001F3DC',), None),
    ('\U0001F3DD\uFE0F', 'desert island', 'Travel & Places', 'place-geographic', '0.7', ('island', 'desert_island'), ('\U0001F3DD',), None),
    ('\U0001F3DE\uFE0F', 'national park', 'Travel & Places', 'place-geographic', '0.7', ('park', 'national_park'), ('\U0001F3DE',), None),
    ('\U0001F3DF\uFE0F', 'stadium', 'Travel & Places', 'place-building', '0.7', ('stadium',), ('\U0001F3DF',), None),
    ('\U0001F3DB\uFE0F', 'classical building', 'Travel & Places', 'place-building', '0.7', ('classical_building',), ('\U0001F3DB',), None),
    ('\U0001F3D7\uFE0F', 'building construction', 'Travel & Places', 'place-building', '0.7', ('construction_site', 'building_construction'), ('\U0001F3D7',), None),
    ('\U0001F9F1', 'brick', 'Travel & Places', 'place-building', '11.0', ('bricks',), (), None),
    ('\U0001FAA8', 'rock', 'Travel & Places', 'place-building', '13.0', ('rock',), (), None),
    ('\U0001FAB5', 'wood', 'Travel & Places', 'place-building', '13.0', ('wood',), (), None),
    ('\U0001F6D6', 'hut', 'Travel & Places', 'place-building', '13.0', ('hut',), (), None),
    ('\U0001F3D8\uFE0F', 'houses', 'Travel & Places', 'place-building', '0.7', ('homes', 'house_buildings'), ('\U0001F3D8',), None),
    ('\U0001F3DA\uFE0F', 'derelict house', 'Travel & Places', 'place-building', '0.7', ('house_abandoned', 'derelict_house_building'), ('\U0001F3DA',), None),
    ('\U0001F3E0', 'house', 'Travel & Places', 'place-building', '0.6', ('house',), (), None),
    ('\U0001F3E1', 'house with garden', 'Travel & Places', 'place-building', '0.6', ('house_with_garden',), (), None),
    ('\U0001F3E2', 'office building', 'Travel & Places', 'place-building', '0.6', ('office',), (), None),
    ('\U0001F3E3', 'Japanese post office', 'Travel & Places', 'place-building', '0.6', ('post_office',), (), None),
    ('\U0001F3E4', 'post office', 'Travel & Places', 'place-building', '1.0', ('european_post_office',), (), None),
    ('\U0001F3E5', 'hospital', 'Travel & Places', 'place-building', '0.6', ('hospital',), (), None),
    ('\U0001F3E6', 'bank', 'Travel & Places', 'place-building', '0.6', ('bank',), (), None),
    ('\U0001F3E8', 'hotel', 'Travel & Places', 'place-building', '0.6', ('hotel',), (), None),
    ('\U0001F3E9', 'love hotel', 'Travel & Places', 'place-building', '0.6', ('love_hotel',), (), None),
    ('\U0001F3EA', 'convenience store', 'Travel & Places', 'place-building', '0.6', ('convenience_store',), (), None),
    ('\U0001F3EB', 'school', 'Travel & Places', 'place-building', '0.6', ('school',), (), None),
    ('\U0001F3EC', 'department store', 'Travel & Places', 'place-building', '0.6', ('department_store',), (), None),
    ('\U0001F3ED', 'factory', 'Travel & Places', 'place-building', '0.6', ('factory',), (), None),
    ('\U0001F3EF', 'Japanese castle', 'Travel & Places', 'place-building', '0.6', ('japanese_castle',), (), None),
    ('\U0001F3F0', 'castle', 'Travel & Places', 'place-building', '0.6', ('european_castle',), (), None),
    ('\U0001F492', 'wedding', 'Travel & Places', 'place-building', '0.6', ('wedding',), (), None),
    ('\U0001F5FC', 'Tokyo tower', 'Travel & Places', 'place-building', '0.6', ('tokyo_tower',), (), None),
    ('\U0001F5FD', 'Statue of Liberty', 'Travel & Places', 'place-building', '0.6', ('statue_of_liberty',), (), None),
    ('\u26EA', 'church', 'Travel & Places', 'place-religious', '0.6', ('church',), (), None),
    ('\U0001F54C', 'mosque', 'Travel & Places', 'place-religious', '1.0', ('mosque',), (), None),
    ('\U0001F6D5', 'hindu temple', 'Travel & Places', 'place-religious', '12.0', ('hindu_temple',), (), None),
    ('\U0001F54D', 'synagogue', 'Travel & Places', 'place-religious', '1.0', ('synagogue',), (), None),
    ('\u26E9\uFE0F', 'shinto shrine', 'Travel & Places', 'place-religious', '0.7', ('shinto_shrine',), ('\u26E9',), None),
    ('\U0001F54B', 'kaaba', 'Travel & Places', 'place-religious', '1.0', ('kaaba',), (), None),
    ('\u26F2', 'fountain', 'Travel & Places', 'place-other', '0.6', ('fountain',), (), None),
    ('\u26FA', 'tent', 'Travel & Places', 'place-other', '0.6', ('tent',), (), None),
    ('\U0001F301', 'foggy', 'Travel & Places', 'place-other', '0.6', ('foggy',), (), None),
    ('\U0001F303', 'night with stars', 'Travel & Places', 'place-other', '0.6', ('night_with_stars',), (), None),
    ('\U0001F3D9\uFE0F', 'cityscape', 'Travel & Places', 'place-other', '0.7', ('cityscape',), ('\U0001F3D9',), None),
    ('\U0001F304', 'sunrise over mountains', 'Travel & Places', 'place-other', '0.6', ('sunrise_over_mountains',), (), None),
    ('\U0001F305', 'sunrise', 'Travel & Places', 'place-other', '0.6', ('sunrise',), (), None),
    ('\U0001F306', 'cityscape at dusk', 'Travel & Places', 'place-other', '0.6', ('city_dusk',), (), None),
    ('\U0001F307', 'sunset', 'Travel & Places', 'place-other', '0.6', ('city_sunset', 'city_sunrise'), (), None),
    ('\U0001F309', 'bridge at night', 'Travel & Places', 'place-other', '0.6', ('bridge_at_night',), (), None),
    ('\u2668\uFE0F', 'hot springs', 'Travel & Places', 'place-other', '0.6', ('hotsprings',), ('\u2668',), None),
    ('\U0001F3A0', 'carousel horse', 'Travel & Places', 'place-other', '0.6', ('carousel_horse',), (), None),
    ('\U0001F6DD', 'playground slide', 'Travel & Places', 'place-other', '14.0', ('playground_slide',), (), None),
    ('\U0001F3A1', 'ferris wheel', 'Travel & Places', 'place-other', '0.6', ('ferris_wheel',), (), None),
    ('\U0001F3A2', 'roller coaster', 'Travel & Places', 'place-other', '0.6', ('roller_coaster',), (), None),
    ('\U0001F488', 'barber pole', 'Travel & Places', 'place-other', '0.6', ('barber',), (), None),
    ('\U0001F3AA', 'circus tent', 'Travel & Places', 'place-other', '0.6', ('circus_tent',), (), None),
    ('\U0001F682', 'locomotive', 'Travel & Places', 'transport-ground', '1.0', ('steam_locomotive',), (), None),
    ('\U0001F683', 'railway car', 'Travel & Places', 'transport-ground', '0.6', ('railway_car',), (), None),
    ('\U0001F684', 'high-speed train', 'Travel & Places', 'transport-ground', '0.6', ('bullettrain_side',), (), None),
    ('\U0001F685', 'bullet train', 'Travel & Places', 'transport-ground', '0.6', ('bullettrain_front',), (), None),
    ('\U0001F686', 'train', 'Travel & Places', 'transport-ground', '1.0', ('train2',), (), None),
    ('\U0001F687', 'metro', 'Travel & Places', 'transport-ground', '0.6', ('metro',), (), None),
    ('\U0001F688', 'light rail', 'Travel & Places', 'transport-ground', '1.0', ('light_rail',), (), None),
    ('\U0001F689', 'station', 'Travel & Places', 'transport-ground', '0.6', ('station',), (), None),
    ('\U0001F68A', 'tram', 'Travel & Places', 'transport-ground', '1.0', ('tram',), (), None),
    ('\U0001F69D', 'monorail', 'Travel & Places', 'transport-ground', '1.0', ('monorail',), (), None),
    ('\U0001F69E', 'mountain railway', 'Travel & Places', 'transport-ground', '1.0', ('mountain_railway',), (), None),
    ('\U0001F68B', 'tram car', 'Travel & Places', 'transport-ground', '1.0', ('train',), (), None),
    ('\U0001F68C', 'bus', 'Travel & Places', 'transport-ground', '0.6', ('bus',), (), None),
    ('\U0001F68D', 'oncoming bus', 'Travel & Places', 'transport-ground', '0.7', ('oncoming_bus',), (), None),
    ('\U0001F68E', 'trolleybus', 'Travel & Places', 'transport-ground', '1.0', ('trolleybus',), (), None),
    ('\U0001F690', 'minibus', 'Travel & Places', 'transport-ground', '1.0', ('minibus',), (), None),
    ('\U0001F691', 'ambulance', 'Travel & Places', 'transport-ground', '0.6', ('ambulance',), (), None),
    ('\U0001F692', 'fire engine', 'Travel & Places', 'transport-ground', '0.6', ('fire_engine',), (), None),
    ('\U0001F693', 'police car', 'Travel & Places', 'transport-ground', '0.6', ('police_car',), (), None),
    ('\U0001F694', 'oncoming police car', 'Travel & Places', 'transport-ground', '0.7', ('oncoming_police_car',), (), None),
    ('\U0001F695', 'taxi', 'Travel & Places', 'transport-ground', '0.6', ('taxi',), (), None),
    ('\U0001F696', 'oncoming taxi', 'Travel & Places', 'transport-ground', '1.0', ('oncoming_taxi',), (), None),
    ('\U0001F697', 'automobile', 'Travel & Places', 'transport-ground', '0.6', ('red_car',), (), None),
    ('\U0001F698', 'oncoming automobile', 'Travel & Places', 'transport-ground', '0.7', ('oncoming_automobile',), (), None),
    ('\U0001F699', 'sport utility vehicle', 'Travel & Places', 'transport-ground', '0.6', ('blue_car',), (), None),
    ('\U0001F6FB', 'pickup truck', 'Travel & Places', 'transport-ground', '13.0', ('pickup_truck',), (), None),
    ('\U0001F69A', 'delivery truck', 'Travel & Places', 'transport-ground', '0.6', ('truck',), (), None),
    ('\U0001F69B', 'articulated lorry', 'Travel & Places', 'transport-ground', '1.0', ('articulated_lorry',), (), None),
    ('\U0001F69C', 'tractor', 'Travel & Places', 'transport-ground', '1.0', ('tractor',), (), None),
    ('\U0001F3CE\uFE0F', 'racing car', 'Travel & Places', 'transport-ground', '0.7', ('race_car', 'racing_car'), ('\U0001F3CE',), None),
    ('\U0001F3CD\uFE0F', 'motorcycle', 'Travel & Places', 'transport-ground', '0.7', ('motorcycle', 'racing_motorcycle'), ('\U0001F3CD',), None),
    ('\U0001F6F5', 'motor scooter', 'Travel & Places', 'transport-ground', '3.0', ('motor_scooter', 'motorbike'), (), None),
    ('\U0001F9BD', 'manual wheelchair', 'Travel & Places', 'transport-ground', '12.0', ('manual_wheelchair',), (), None),
    ('\U0001F9BC', 'motorized wheelchair', 'Travel & Places', 'transport-ground', '12.0', ('motorized_wheelchair',), (), None),
    ('\U0001F6FA', 'auto rickshaw', 'Travel & Places', 'transport-ground', '12.0', ('auto_rickshaw',), (), None),
    ('\U0001F6B2', 'bicycle', 'Travel & Places', 'transport-ground', '0.6', ('bike',), (), None),
    ('\U0001F6F4', 'kick scooter', 'Travel & Places', 'transport-ground', '3.0', ('scooter',), (), None),
    ('\U0001F6F9', 'skateboard', 'Travel & Places', 'transport-ground', '11.0', ('skateboard',), (), None),
    ('\U0001F6FC', 'roller skate', 'Travel & Places', 'transport-ground', '13.0', ('roller_skate',), (), None),
    ('\U0001F68F', 'bus stop', 'Travel & Places', 'transport-ground', '0.6', ('busstop',), (), None),
    ('\U0001F6E3\uFE0F', 'motorway', 'Travel & Places', 'transport-ground', '0.7', ('motorway',), ('\U0001F6E3',), None),
    ('\U0001F6E4\uFE0F', 'railway track', 'Travel & Places', 'transport-ground', '0.7', ('railway_track', 'railroad_track'), ('\U0001F6E4',), None),
    ('\U0001F6E2\uFE0F', 'oil drum', 'Travel & Places', 'transport-ground', '0.7', ('oil', 'oil_drum'), ('\U0001F6E2',), None),
    ('\u26FD', 'fuel pump', 'Travel & Places', 'transport-ground', '0.6', ('fuelpump',), (), None),
    ('\U0001F6DE', 'wheel', 'Travel & Places', 'transport-ground', '14.0', ('wheel',), (), None),
    ('\U0001F6A8', 'police car light', 'Travel & Places', 'transport-ground', '0.6', ('rotating_light',), (), None),
    ('\U0001F6A5', 'horizontal traffic light', 'Travel & Places', 'transport-ground', '0.6', ('traffic_light',), (), None),
    ('\U0001F6A6', 'vertical traffic light', 'Travel & Places', 'transport-ground', '1.0', ('vertical_traffic_light',), (), None),
    ('\U0001F6D1', 'stop sign', 'Travel & Places', 'transport-ground', '3.0', ('octagonal_sign', 'stop_sign'), (), None),
    ('\U0001F6A7', 'construction', 'Travel & Places', 'transport-ground', '0.6', ('construction',), (), None),
    ('\u2693', 'anchor', 'Travel & Places', 'transport-water', '0.6', ('anchor',), (), None),
    ('\U0001F6DF', 'ring buoy', 'Travel & Places', 'transport-water', '14.0', ('ring_buoy',), (), None),
    ('\u26F5', 'sailboat', 'Travel & Places', 'transport-water', '0.6', ('sailboat',), (), None),
    ('\U0001F6F6', 'canoe', 'Travel & Places', 'transport-water', '3.0', ('canoe', 'kayak'), (), None),
    ('\U0001F6A4', 'speedboat', 'Travel & Places', 'transport-water', '0.6', ('speedboat',), (), None),
    ('\U0001F6F3\uFE0F', 'passenger ship', 'Travel & Places', 'transport-water', '0.7', ('cruise_ship', 'passenger_ship'), ('\U0001F6F3',), None),
    ('\u26F4\uFE0F', 'ferry', 'Travel & Places', 'transport-water', '0.7', ('ferry',), ('\u26F4',), None),
    ('\U0001F6E5\uFE0F', 'motor boat', 'Travel & Places', 'transport-water', '0.7', ('motorboat',), ('\U0001F6E5',), None),
    ('\U0001F6A2', 'ship', 'Travel & Places', 'transport-water', '0.6', ('ship',), (), None),
    ('\u2708\uFE0F', 'airplane', 'Travel & Places', 'transport-air', '0.6', ('airplane',), ('\u2708',), None),
    ('\U0001F6E9\uFE0F', 'small airplane', 'Travel & Places', 'transport-air', '0.7', ('airplane_small', 'small_airplane'), ('\U0001F6E9',), None),
    ('\U0001F6EB', 'airplane departure', 'Travel & Places', 'transport-air', '1.0', ('airplane_departure',), (), None),
    ('\U0001F6EC', 'airplane arrival', 'Travel & Places', 'transport-air', '1.0', ('airplane_arriving',), (), None),
    ('\U0001FA82', 'parachute', 'Travel & Places', 'transport-air', '12.0', ('parachute',), (), None),
    ('\U0001F4BA', 'seat', 'Travel & Places', 'transport-air', '0.6', ('seat',), (), None),
    ('\U0001F681', 'helicopter', 'Travel & Places', 'transport-air', '1.0', ('helicopter',), (), None),
    ('\U0001F69F', 'suspension railway', 'Travel & Places', 'transport-air', '1.0', ('suspension_railway',), (), None),
    ('\U0001F6A0', 'mountain cableway', 'Travel & Places', 'transport-air', '1.0', ('mountain_cableway',), (), None),
    ('\U0001F6A1', 'aerial tramway', 'Travel & Places', 'transport-air', '1.0', ('aerial_tramway',), (), None),
    ('\U0001F6F0\uFE0F', 'satellite', 'Travel & Places', 'transport-air', '0.7', ('satellite_orbital',), ('\U0001F6F0',), None),
    ('\U0001F680', 'rocket', 'Travel & Places', 'transport-air', '0.6', ('rocket',), (), None),
    ('\U0001F6F8', 'flying saucer', 'Travel & Places', 'transport-air', '5.0', ('flying_saucer',), (), None),
    ('\U0001F6CE\uFE0F', 'bellhop bell', 'Travel & Places', 'hotel', '0.7', ('bellhop', 'bellhop_bell'), ('\U0001F6CE',), None),
    ('\U0001F9F3', 'luggage', 'Travel & Places', 'hotel', '11.0', ('luggage',), (), None),
    ('\u231B', 'hourglass done', 'Travel & Places', 'time', '0.6', ('hourglass',), (), None),
    ('\u23F3', 'hourglass not done', 'Travel & Places', 'time', '0.6', ('hourglass_flowing_sand',), (), None),
    ('\u231A', 'watch', 'Travel & Places', 'time', '0.6', ('watch',), (), None),
    ('\u23F0', 'alarm clock', 'Travel & Places', 'time', '0.6', ('alarm_clock',), (), None),
    ('\u23F1\uFE0F', 'stopwatch', 'Travel & Places', 'time', '1.0', ('stopwatch',), ('\u23F1',), None),
    ('\u23F2\uFE0F', 'timer clock', 'Travel & Places', 'time', '1.0', ('timer', 'timer_clock'), ('\u23F2',), None),
    ('\U0001F570\uFE0F', 'mantelpiece clock', 'Travel & Places', 'time', '0.7', ('clock', 'mantlepiece_clock'), ('\U0001F570',), None),
    ('\U0001F55B', 'twelve o’clock', 'Travel & Places', 'time', '0.6', ('clock12',), (), None),
    ('\U0001F567', 'twelve-thirty', 'Travel & Places', 'time', '0.7', ('clock1230',), (), None),
    ('\U0001F550', 'one o’clock', 'Travel & Places', 'time', '0.6', ('clock1',), (), None),
    ('\U0001F55C', 'one-thirty', 'Travel & Places', 'time', '0.7', ('clock130',), (), None),
    ('\U0001F551', 'two o’clock', 'Travel & Places', 'time', '0.6', ('clock2',), (), None),
    ('\U0001F55D', 'two-thirty', 'Travel & Places', 'time', '0.7', ('clock230',), (), None),
    ('\U0001F552', 'three o’clock', 'Travel & Places', 'time', '0.6', ('clock3',), (), None),
    ('\U0001F55E', 'three-thirty', 'Travel & Places', 'time', '0.7', ('clock330',), (), None),
    ('\U0001F553', 'four o’clock', 'Travel & Places', 'time', '0.6', ('clock4',), (), None),
    ('\U0001F55F', 'four-thirty', 'Travel & Places', 'time', '0.7', ('clock430',), (), None),
    ('\U0001F554', 'five o’clock', 'Travel & Places', 'time', '0.6', ('clock5',), (), None),
    ('\U0001F560', 'five-thirty', 'Travel & Places', 'time', '0.7', ('clock530',), (), None),
    ('\U0001F555', 'six o’clock', 'Travel & Places', 'time', '0.6', ('clock6',), (), None),
    ('\U0001F561', 'six-thirty', 'Travel & Places', 'time', '0.7', ('clock630',), (), None),
    ('\U0001F556', 'seven o’clock', 'Travel & Places', 'time', '0.6', ('clock7',), (), None),
    ('\U0001F562', 'seven-thirty', 'Travel & Places', 'time', '0.7', ('clock730',), (), None),
    ('\U0001F557', 'eight o’clock', 'Travel & Places', 'time', '0.6', ('clock8',), (), None),
    ('\U0001F563', 'eight-thirty', 'Travel & Places', 'time', '0.7', ('clock830',), (), None),
    ('\U0001F558', 'nine o’clock', 'Travel & Places', 'time', '0.6', ('clock9',), (), None),
    ('\U0001F564', 'nine-thirty', 'Travel & Places', 'time', '0.7', ('clock930',), (), None),
    ('\U0001F559', 'ten o’clock', 'Travel & Places', 'time', '0.6', ('clock10',), (), None),
    ('\U0001F565', 'ten-thirty', 'Travel & Places', 'time', '0.7', ('clock1030',), (), None),
    ('\U0001F55A', 'eleven o’clock', 'Travel & Places', 'time', '0.6', ('clock11',), (), None),
    ('\U0001F566', 'eleven-thirty', 'Travel & Places', 'time', '0.7', ('clock1130',), (), None),
    ('\U0001F311', 'new moon', 'Travel & Places', 'sky & weather', '0.6', ('new_moon',), (), None),
    ('\U0001F312', 'waxing crescent moon', 'Travel & Places', 'sky & weather', '1.0', ('waxing_crescent_moon',), (), None),
    ('\U0001F313', 'first quarter moon', 'Travel & Places', 'sky & weather', '0.6', ('first_quarter_moon',), (), None),
    ('\U0001F314', 'waxing gibbous moon', 'Travel & Places', 'sky & weather', '0.6', ('waxing_gibbous_moon',), (), None),
    ('\U0001F315', 'full moon', 'Travel & Places', 'sky & weather', '0.6', ('full_moon',), (), None),
    ('\U0001F316', 'waning gibbous moon', 'Travel & Places', 'sky & weather', '1.0', ('waning_gibbous_moon',), (), None),
    ('\U0001F317', 'last quarter moon', 'Travel & Places', 'sky & weather', '1.0', ('last_quarter_moon',), (), None),
    ('\U0001F318', 'waning crescent moon', 'Travel & Places', 'sky & weather', '1.0', ('waning_crescent_moon',), (), None),
    ('\U0001F319', 'crescent moon', 'Travel & Places', 'sky & weather', '0.6', ('crescent_moon',), (), None),
    ('\U0001F31A', 'new moon face', 'Travel & Places', 'sky & weather', '1.0', ('new_moon_with_face',), (), None),
    ('\U0001F31B', 'first quarter moon face', 'Travel & Places', 'sky & weather', '0.6', ('first_quarter_moon_with_face',), (), None),
    ('\U0001F31C', 'last quarter moon face', 'Travel & Places', 'sky & weather', '0.7', ('last_quarter_moon_with_face',), (), None),
    ('\U0001F321\uFE0F', 'thermometer', 'Travel & Places', 'sky & weather', '0.7', ('thermometer',), ('\U0001F321',), None),
    ('\u2600\uFE0F', 'sun', 'Travel & Places', 'sky & weather', '0.6', ('sunny',), ('\u2600',), None),
    ('\U0001F31D', 'full moon face', 'Travel & Places', 'sky & weather', '1.0', ('full_moon_with_face',), (), None),
    ('\U0001F31E', 'sun with face', 'Travel & Places', 'sky & weather', '1.0', ('sun_with_face',), (), None),
    ('\U0001FA90', 'ringed planet', 'Travel & Places', 'sky & weather', '12.0', ('ringed_planet',), (), None),
    ('\u2B50', 'star', 'Travel & Places', 'sky & weather', '0.6', ('star',), (), None),
    ('\U0001F31F', 'glowing star', 'Travel & Places', 'sky & weather', '0.6', ('star2',), (), None),
    ('\U0001F320', 'shooting star', 'Travel & Places', 'sky & weather', '0.6', ('stars',), (), None),
    ('\U0001F30C', 'milky way', 'Travel & Places', 'sky & weather', '0.6', ('milky_way',), (), None),
    ('\u2601\uFE0F', 'cloud', 'Travel & Places', 'sky & weather', '0.6', ('cloud',), ('\u2601',), None),
    ('\u26C5', 'sun behind cloud', 'Travel & Places', 'sky & weather', '0.6', ('partly_sunny',), (), None),
    ('\u26C8\uFE0F', 'cloud with lightning and rain', 'Travel & Places', 'sky & weather', '0.7', ('thunder_cloud_rain', 'thunder_cloud_and_rain'), ('\u26C8',), None),
    ('\U0001F324\uFE0F', 'sun behind small cloud', 'Travel & Places', 'sky & weather', '0.7', ('white_sun_small_cloud', 'white_sun_with_small_cloud'), ('\U0001F324',), None),
    ('\U0001F325\uFE0F', 'sun behind large cloud', 'Travel & Places', 'sky & weather', '0.7', ('white_sun_cloud', 'white_sun_behind_cloud'), ('\U0001F325',), None),
    ('\U0001F326\uFE0F', 'sun behind rain cloud', 'Travel & Places', 'sky & weather', '0.7', ('white_sun_rain_cloud', 'white_sun_behind_cloud_with_rain'), ('\U0001F326',), None),
    ('\U0001F327\uFE0F', 'cloud with rain', 'Travel & Places', 'sky & weather', '0.7', ('cloud_rain', 'cloud_with_rain'), ('\U0001F327',), None),
    ('\U0001F328\uFE0F', 'cloud with snow', 'Travel & Places', 'sky & weather', '0.7', ('cloud_snow', 'cloud_with_snow'), ('\U0001F328',), None),
    ('\U0001F329\uFE0F', 'cloud with lightning', 'Travel & Places', 'sky & weather', '0.7', ('cloud_lightning', 'cloud_with_lightning'), ('\U0001F329',), None),
    ('\U0001F32A\uFE0F', 'tornado', 'Travel & Places', 'sky & weather', '0.7', ('cloud_tornado', 'cloud_with_tornado'), ('\U0001F32A',), None),
    ('\U0001F32B\uFE0F', 'fog', 'Travel & Places', 'sky & weather', '0.7', ('fog',), ('\U0001F32B',), None),
    ('\U0001F32C\uFE0F', 'wind face', 'Travel & Places', 'sky & weather', '0.7', ('wind_blowing_face',), ('\U0001F32C',), None),
    ('\U0001F300', 'cyclone', 'Travel & Places', 'sky & weather', '0.6', ('cyclone',), (), None),
    ('\U0001F308', 'rainbow', 'Travel & Places', 'sky & weather', '0.6', ('rainbow',), (), None),
    ('\U0001F302', 'closed umbrella', 'Travel & Places', 'sky & weather', '0.6', ('closed_umbrella',), (), None),
    ('\u2602\uFE0F', 'umbrella', 'Travel & Places', 'sky & weather', '0.7', ('umbrella2',), ('\u2602',), None),
    ('\u2614', 'umbrella with rain drops', 'Travel & Places', 'sky & weather', '0.6', ('umbrella',), (), None),
    ('\u26F1\uFE0F', 'umbrella on ground', 'Travel & Places', 'sky & weather', '0.7', ('beach_umbrella', 'umbrella_on_ground'), ('\u26F1',), None),
    ('\u26A1', 'high voltage', 'Travel & Places', 'sky & weather', '0.6', ('zap',), (), None),
    ('\u2744\uFE0F', 'snowflake', 'Travel & Places', 'sky & weather', '0.6', ('snowflake',), ('\u2744',), None),
    ('\u2603\uFE0F', 'snowman', 'Travel & Places', 'sky & weather', '0.7', ('snowman2',), ('\u2603',), None),
    ('\u26C4', 'snowman without snow', 'Travel & Places', 'sky & weather', '0.6', ('snowman',), (), None),
    ('\u2604\uFE0F', 'comet', 'Travel & Places', 'sky & weather', '1.0', ('comet',), ('\u2604',), None),
    ('\U0001F525', 'fire', 'Travel & Places', 'sky & weather', '0.6', ('fire', 'flame'), (), None),
    ('\U0001F4A7', 'droplet', 'Travel & Places', 'sky & weather', '0.6', ('droplet',), (), None),
    ('\U0001F30A', 'water wave', 'Travel & Places', 'sky & weather', '0.6', ('ocean',), (), None),
    ('\U0001F383', 'jack-o-lantern', 'Activities', 'event', '0.6', ('jack_o_lantern',), (), None),
    ('\U0001F384', 'Christmas tree', 'Activities', 'event', '0.6', ('christmas_tree',), (), None),
    ('\U0001F386', 'fireworks', 'Activities', 'event', '0.6', ('fireworks',), (), None),
    ('\U0001F387', 'sparkler', 'Activities', 'event', '0.6', ('sparkler',), (), None),
    ('\U0001F9E8', 'firecracker', 'Activities', 'event', '11.0', ('firecracker',), (), None),
    ('\u2728', 'sparkles', 'Activities', 'event', '0.6', ('sparkles',), (), None),
    ('\U0001F388', 'balloon', 'Activities', 'event', '0.6', ('balloon',), (), None),
    ('\U0001F389', 'party popper', 'Activities', 'event', '0.6', ('tada',), (), None),
    ('\U0001F38A', 'confetti ball', 'Activities', 'event', '0.6', ('confetti_ball',), (), None),
    ('\U0001F38B', 'tanabata tree', 'Activities', 'event', '0.6', ('tanabata_tree',), (), None),
    ('\U0001F38D', 'pine decoration', 'Activities', 'event', '0.6', ('bamboo',), (), None),
    ('\U0001F38E', 'Japanese dolls', 'Activities', 'event', '0.6', ('dolls',), (), None),
    ('\U0001F38F', 'carp streamer', 'Activities', 'event', '0.6', ('flags',), (), None),
    ('\U0001F390', 'wind chime', 'Activities', 'event', '0.6', ('wind_chime',), (), None),
    ('\U0001F391', 'moon viewing ceremony', 'Activities', 'event', '0.6', ('rice_scene',), (), None),
    ('\U0001F9E7', 'red envelope', 'Activities', 'event', '11.0', ('red_envelope',), (), None),
    ('\U0001F380', 'ribbon', 'Activities', 'event', '0.6', ('ribbon',), (), None),
    ('\U0001F381', 'wrapped gift', 'Activities', 'event', '0.6', ('gift',), (), None),
    ('\U0001F397\uFE0F', 'reminder ribbon', 'Activities', 'event', '0.7', ('reminder_ribbon',), ('\U0001F397',), None),
    ('\U0001F39F\uFE0F', 'admission tickets', 'Activities', 'event', '0.7', ('tickets', 'admission_tickets'), ('\U0001F39F',), None),
    ('\U0001F3AB', 'ticket', 'Activities', 'event', '0.6', ('ticket',), (), None),
    ('\U0001F396\uFE0F', 'military medal', 'Activities', 'award-medal', '0.7', ('military_medal',), ('\U0001F396',), None),
    ('\U0001F3C6', 'trophy', 'Activities', 'award-medal', '0.6', ('trophy',), (), None),
    ('\U0001F3C5', 'sports medal', 'Activities', 'award-medal', '1.0', ('medal', 'sports_medal'), (), None),
    ('\U0001F947', '1st place medal', 'Activities', 'award-medal', '3.0', ('first_place', 'first_place_medal'), (), None),
    ('\U0001F948', '2nd place medal', 'Activities', 'award-medal', '3.0', ('second_place', 'second_place_medal'), (), None),
    ('\U0001F949', '3rd place medal', 'Activities', 'award-medal', '3.0', ('third_place', 'third_place_medal'), (), None),
    ('\u26BD', 'soccer ball', 'Activities', 'sport', '0.6', ('soccer',), (), None),
    ('\u26BE', 'baseball', 'Activities', 'sport', '0.6', ('baseball',), (), None),
    ('\U0001F94E', 'softball', 'Activities', 'sport', '11.0', ('softball',), (), None),
    ('\U0001F3C0', 'basketball', 'Activities', 'sport', '0.6', ('basketball',), (), None),
    ('\U0001F3D0', 'volleyball', 'Activities', 'sport', '1.0', ('volleyball',), (), None),
    ('\U0001F3C8', 'american football', 'Activities', 'sport', '0.6', ('football',), (), None),
    ('\U0001F3C9', 'rugby football', 'Activities', 'sport', '1.0', ('rugby_football',), (), None),
    ('\U0001F3BE', 'tennis', 'Activities', 'sport', '0.6', ('tennis',), (), None),
    ('\U0001F94F', 'flying disc', 'Activities', 'sport', '11.0', ('flying_disc',), (), None),
    ('\U0001F3B3', 'bowling', 'Activities', 'sport', '0.6', ('bowling',), (), None),
    ('\U0001F3CF', 'cricket game', 'Activities', 'sport', '1.0', ('cricket_game', 'cricket_bat_ball'), (), None),
    ('\U0001F3D1', 'field hockey', 'Activities', 'sport', '1.0', ('field_hockey',), (), None),
    ('\U0001F3D2', 'ice hockey', 'Activities', 'sport', '1.0', ('hockey',), (), None),
    ('\U0001F94D', 'lacrosse', 'Activities', 'sport', '11.0', ('lacrosse',), (), None),
    ('\U0001F3D3', 'ping pong', 'Activities', 'sport', '1.0', ('ping_pong', 'table_tennis'), (), None),
    ('\U0001F3F8', 'badminton', 'Activities', 'sport', '1.0', ('badminton',), (), None),
    ('\U0001F94A', 'boxing glove', 'Activities', 'sport', '3.0', ('boxing_glove', 'boxing_gloves'), (), None),
    ('\U0001F94B', 'martial arts uniform', 'Activities', 'sport', '3.0', ('martial_arts_uniform', 'karate_uniform'), (), None),
    ('\U0001F945', 'goal net', 'Activities', 'sport', '3.0', ('goal', 'goal_net'), (), None),
    ('\u26F3', 'flag in hole', 'Activities', 'sport', '0.6', ('golf',), (), None),
    ('\u26F8\uFE0F', 'ice skate', 'Activities', 'sport', '0.7', ('ice_skate',), ('\u26F8',), None),
    ('\U0001F3A3', 'fishing pole', 'Activities', 'sport', '0.6', ('fishing_pole_and_fish',), (), None),
    ('\U0001F93F', 'diving mask', 'Activities', 'sport', '12.0', ('diving_mask',), (), None),
    ('\U0001F3BD', 'running shirt', 'Activities', 'sport', '0.6', ('running_shirt_with_sash',), (), None),
    ('\U0001F3BF', 'skis', 'Activities', 'sport', '0.6', ('ski',), (), None),
    ('\U0001F6F7', 'sled', 'Activities', 'sport', '5.0', ('sled',), (), None),
    ('\U0001F94C', 'curling stone', 'Activities', 'sport', '5.0', ('curling_stone',), (), None),
    ('\U0001F3AF', 'bullseye', 'Activities', 'game', '0.6', ('dart',), (), None),
    ('\U0001FA80', 'yo-yo', 'Activities', 'game', '12.0', ('yo-yo',), (), None),
    ('\U0001FA81', 'kite', 'Activities', 'game', '12.0', ('kite',), (), None),
    ('\U0001F52B', 'water pistol', 'Activities', 'game', '0.6', ('gun',), (), None),
    ('\U0001F3B1', 'pool 8 ball', 'Activities', 'game', '0.6', ('8ball',), (), None),
    ('\U0001F52E', 'crystal ball', 'Activities', 'game', '0.6', ('crystal_ball',), (), None),
    ('\U0001FA84', 'magic wand', 'Activities', 'game', '13.0', ('magic_wand',), (), None),
    ('\U0001F3AE', 'video game', 'Activities', 'game', '0.6', ('video_game',), (), None),
    ('\U0001F579\uFE0F', 'joystick', 'Activities', 'game', '0.7', ('joystick',), ('\U0001F579',), None),
    ('\U0001F3B0', 'slot machine', 'Activities', 'game', '0.6', ('slot_machine',), (), None),
    ('\U0001F3B2', 'game die', 'Activities', 'game', '0.6', ('game_die',), (), None),
    ('\U0001F9E9', 'puzzle piece', 'Activities', 'game', '11.0', ('jigsaw',), (), None),
    ('\U0001F9F8', 'teddy bear', 'Activities', 'game', '11.0', ('teddy_bear',), (), None),
    ('\U0001FA85', 'piñata', 'Activities', 'game', '13.0', ('piñata',), (), None),
    ('\U0001FAA9', 'mirror ball', 'Activities', 'game', '14.0', ('mirror_ball',), (), None),
    ('\U0001FA86', 'nesting dolls', 'Activities', 'game', '13.0', ('nesting_dolls',), (), None),
    ('\u2660\uFE0F', 'spade suit', 'Activities', 'game', '0.6', ('spades',), ('\u2660',), None),
    ('\u2665\uFE0F', 'heart suit', 'Activities', 'game', '0.6', ('hearts',), ('\u2665',), None),
    ('\u2666\uFE0F', 'diamond suit', 'Activities', 'game', '0.6', ('diamonds',), ('\u2666',), None),
    ('\u2663\uFE0F', 'club suit', 'Activities', 'game', '0.6', ('clubs',), ('\u2663',), None),
    ('\u265F\uFE0F', 'chess pawn', 'Activities', 'game', '11.0', ('chess_pawn',), ('\u265F',), None),
    ('\U0001F0CF', 'joker', 'Activities', 'game', '0.6', ('black_joker',), (), None),
    ('\U0001F004', 'mahjong red dragon', 'Activities', 'game', '0.6', ('mahjong',), (), None),
    ('\U0001F3B4', 'flower playing cards', 'Activities', 'game', '0.6', ('flower_playing_cards',), (), None),
    ('\U0001F3AD', 'performing arts', 'Activities', 'arts & crafts', '0.6', ('performing_arts',), (), None),
    ('\U0001F5BC\uFE0F', 'framed picture', 'Activities', 'arts & crafts', '0.7', ('frame_photo', 'frame_with_picture'), ('\U0001F5BC',), None),
    ('\U0001F3A8', 'artist palette', 'Activities', 'arts & crafts', '0.6', ('art',), (), None),
    ('\U0001F9F5', 'thread', 'Activities', 'arts & crafts', '11.0', ('thread',), (), None),
    ('\U0001FAA1', 'sewing needle', 'Activities', 'arts & crafts', '13.0', ('sewing_needle',), (), None),
    ('\U0001F9F6', 'yarn', 'Activities', 'arts & crafts', '11.0', ('yarn',), (), None),
    ('\U0001FAA2', 'knot', 'Activities', 'arts & crafts', '13.0', ('knot',), (), None),
    ('\U0001F453', 'glasses', 'Objects', 'clothing', '0.6', ('eyeglasses',), (), None),
    ('\U0001F576\uFE0F', 'sunglasses', 'Objects', 'clothing', '0.7', ('dark_sunglasses',), ('\U0001F576',), None),
    ('\U0001F97D', 'goggles', 'Objects', 'clothing', '11.0', ('goggles',), (), None),
    ('\U0001F97C', 'lab coat', 'Objects', 'clothing', '11.0', ('lab_coat',), (), None),
    ('\U0001F9BA', 'safety vest', 'Objects', 'clothing', '12.0', ('safety_vest',), (), None),
    ('\U0001F454', 'necktie', 'Objects', 'clothing', '0.6', ('necktie',), (), None),
    ('\U0001F455', 't-shirt', 'Objects', 'clothing', '0.6', ('shirt',), (), None),
    ('\U0001F456', 'jeans', 'Objects', 'clothing', '0.6', ('jeans',), (), None),
    ('\U0001F9E3', 'scarf', 'Objects', 'clothing', '5.0', ('scarf',), (), None),
    ('\U0001F9E4', 'gloves', 'Objects', 'clothing', '5.0', ('gloves',), (), None),
    ('\U0001F9E5', 'coat', 'Objects', 'clothing', '5.0', ('coat',), (), None),
    ('\U0001F9E6', 'socks', 'Objects', 'clothing', '5.0', ('socks',), (), None),
    ('\U0001F457', 'dress', 'Objects', 'clothing', '0.6', ('dress',), (), None),
    ('\U0001F458', 'kimono', 'Objects', 'clothing', '0.6', ('kimono',), (), None),
    ('\U0001F97B', 'sari', 'Objects', 'clothing', '12.0', ('sari',), (), None),
    ('\U0001FA71', 'one-piece swimsuit', 'Objects', 'clothing', '12.0', ('one-piece_swimsuit',), (), None),
    ('\U0001FA72', 'briefs', 'Objects', 'clothing', '12.0', ('briefs',), (), None),
    ('\U0001FA73', 'shorts', 'Objects', 'clothing', '12.0', ('shorts',), (), None),
    ('\U0001F459', 'bikini', 'Objects', 'clothing', '0.6', ('bikini',), (), None),
    ('\U0001F45A', 'woman’s clothes', 'Objects', 'clothing', '0.6', ('womans_clothes',), (), None),
    ('\U0001FAAD', 'folding hand fan', 'Objects', 'clothing', '15.0', ('folding_hand_fan',), (), None),
    ('\U0001F45B', 'purse', 'Objects', 'clothing', '0.6', ('purse',), (), None),
    ('\U0001F45C', 'handbag', 'Objects', 'clothing', '0.6', ('handbag',), (), None),
    ('\U0001F45D', 'clutch bag', 'Objects', 'clothing', '0.6', ('pouch',), (), None),
    ('\U0001F6CD\uFE0F', 'shopping bags', 'Objects', 'clothing', '0.7', ('shopping_bags',), ('\U0001F6CD',), None),
    ('\U0001F392', 'backpack', 'Objects', 'clothing', '0.6', ('school_satchel',), (), None),
    ('\U0001FA74', 'thong sandal', 'Objects', 'clothing', '13.0', ('thong_sandal',), (), None),
    ('\U0001F45E', 'man’s shoe', 'Objects', 'clothing', '0.6', ('mans_shoe',), (), None),
    ('\U0001F45F', 'running shoe', 'Objects', 'clothing', '0.6', ('athletic_shoe',), (), None),
    ('\U0001F97E', 'hiking boot', 'Objects', 'clothing', '11.0', ('hiking_boot',), (), None),
    ('\U0001F97F', 'flat shoe', 'Objects', 'clothing', '11.0', ('womans_flat_shoe',), (), None),
    ('\U0001F460', 'high-heeled shoe', 'Objects', 'clothing', '0.6', ('high_heel',), (), None),
    ('\U0001F461', 'woman’s sandal', 'Objects', 'clothing', '0.6', ('sandal',), (), None),
    ('\U0001FA70', 'ballet shoes', 'Objects', 'clothing', '12.0', ('ballet_shoes',), (), None),
    ('\U0001F462', 'woman’s boot', 'Objects', 'clothing', '0.6', ('boot',), (), None),
    ('\U0001FAAE', 'hair pick', 'Objects', 'clothing', '15.0', ('hair_pick',), (), None),
    ('\U0001F451', 'crown', 'Objects', 'clothing', '0.6', ('crown',), (), None),
    ('\U0001F452', 'woman’s hat', 'Objects', 'clothing', '0.6', ('womans_hat',), (), None),
    ('\U0001F3A9', 'top hat', 'Objects', 'clothing', '0.6', ('tophat',), (), None),
    ('\U0001F393', 'graduation cap', 'Objects', 'clothing', '0.6', ('mortar_board',), (), None),
    ('\U0001F9E2', 'billed cap', 'Objects', 'clothing', '5.0', ('billed_cap',), (), None),
    ('\U0001FA96', 'military helmet', 'Objects', 'clothing', '13.0', ('military_helmet',), (), None),
    ('\u26D1\uFE0F', 'rescue worker’s helmet', 'Objects', 'clothing', '0.7', ('helmet_with_cross', 'helmet_with_white_cross'), ('\u26D1',), None),
    ('\U0001F4FF', 'prayer beads', 'Objects', 'clothing', '1.0', ('prayer_beads',), (), None),
    ('\U0001F484', 'lipstick', 'Objects', 'clothing', '0.6', ('lipstick',), (), None),
    ('\U0001F48D', 'ring', 'Objects', 'clothing', '0.6', ('ring',), (), None),
    ('\U0001F48E', 'gem stone', 'Objects', 'clothing', '0.6', ('gem',), (), None),
    ('\U0001F507', 'muted speaker', 'Objects', 'sound', '1.0', ('mute',), (), None),
    ('\U0001F508', 'speaker low volume', 'Objects', 'sound', '0.7', ('speaker',), (), None),
    ('\U0001F509', 'speaker medium volume', 'Objects', 'sound', '1.0', ('sound',), (), None),
    ('\U0001F50A', 'speaker high volume', 'Objects', 'sound', '0.6', ('loud_sound',), (), None),
    ('\U0001F4E2', 'loudspeaker', 'Objects', 'sound', '0.6', ('loudspeaker',), (), None),
    ('\U0001F4E3', 'megaphone', 'Objects', 'sound', '0.6', ('mega',), (), None),
    ('\U0001F4EF', 'postal horn', 'Objects', 'sound', '1.0', ('postal_horn',), (), None),
    ('\U0001F514', 'bell', 'Objects', 'sound', '0.6', ('bell',), (), None),
    ('\U0001F515', 'bell with slash', 'Objects', 'sound', '1.0', ('no_bell',), (), None),
    ('\U0001F3BC', 'musical score', 'Objects', 'music', '0.6', ('musical_score',), (), None),
    ('\U0001F3B5', 'musical note', 'Objects', 'music', '0.6', ('musical_note',), (), None),
    ('\U0001F3B6', 'musical notes', 'Objects', 'music', '0.6', ('notes',), (), None),
    ('\U0001F399\uFE0F', 'studio microphone', 'Objects', 'music', '0.7', ('microphone2', 'studio_microphone'), ('\U0001F399',), None),
    ('\U0001F39A\uFE0F', 'level slider', 'Objects', 'music', '0.7', ('level_slider',), ('\U0001F39A',), None),
    ('\U0001F39B\uFE0F', 'control knobs', 'Objects', 'music', '0.7', ('control_knobs',), ('\U0001F39B',), None),
    ('\U0001F3A4', 'microphone', 'Objects', 'music', '0.6', ('microphone',), (), None),
    ('\U0001F3A7', 'headphone', 'Objects', 'music', '0.6', ('headphones',), (), None),
    ('\U0001F4FB', 'radio', 'Objects', 'music', '0.6', ('radio',), (), None),
    ('\U0001F3B7', 'saxophone', 'Objects', 'musical-instrument', '0.6', ('saxophone',), (), None),
    ('\U0001FA97', 'accordion', 'Objects', 'musical-instrument', '13.0', ('accordion',), (), None),
    ('\U0001F3B8', 'guitar', 'Objects', 'musical-instrument', '0.6', ('guitar',), (), None),
    ('\U0001F3B9', 'musical keyboard', 'Objects', 'musical-instrument', '0.6', ('musical_keyboard',), (), None),
    ('\U0001F3BA', 'trumpet', 'Objects', 'musical-instrument', '0.6', ('trumpet',), (), None),
    ('\U0001F3BB', 'violin', 'Objects', 'musical-instrument', '0.6', ('violin',), (), None),
    ('\U0001FA95', 'banjo', 'Objects', 'musical-instrument', '12.0', ('banjo',), (), None),
    ('\U0001F941', 'drum', 'Objects', 'musical-instrument', '3.0', ('drum', 'drum_with_drumsticks'), (), None),
    ('\U0001FA98', 'long drum', 'Objects', 'musical-instrument', '13.0', ('long_drum',), (), None),
    ('\U0001FA87', 'maracas', 'Objects', 'musical-instrument', '15.0', ('maracas',), (), None),
    ('\U0001FA88', 'flute', 'Objects', 'musical-instrument', '15.0', ('flute',), (), None),
    ('\U0001F4F1', 'mobile phone', 'Objects', 'phone', '0.6', ('iphone',), (), None),
    ('\U0001F4F2', 'mobile phone with arrow', 'Objects', 'phone', '0.6', ('calling',), (), None),
    ('\u260E\uFE0F', 'telephone', 'Objects', 'phone', '0.6', ('telephone',), ('\u260E',), None),
    ('\U0001F4DE', 'telephone receiver', 'Objects', 'phone', '0.6', ('telephone_receiver',), (), None),
    ('\U0001F4DF', 'pager', 'Objects', 'phone', '0.6', ('pager',), (), None),
    ('\U0001F4E0', 'fax machine', 'Objects', 'phone', '0.6', ('fax',), (), None),
    ('\U0001F50B', 'battery', 'Objects', 'computer', '0.6', ('battery',), (), None),
    ('\U0001FAAB', 'low battery', 'Objects', 'computer', '14.0', ('low_battery',), (), None),
    ('\U0001F50C', 'electric plug', 'Objects', 'computer', '0.6', ('electric_plug',), (), None),
    ('\U0001F4BB', 'laptop', 'Objects', 'computer', '0.6', ('computer',), (), None),
    ('\U0001F5A5\uFE0F', 'desktop computer', 'Objects', 'computer', '0.7', ('desktop', 'desktop_computer'), ('\U0001F5A5',), None),
    ('\U0001F5A8\uFE0F', 'printer', 'Objects', 'computer', '0.7', ('printer',), ('\U0001F5A8',), None),
    ('\u2328\uFE0F', 'keyboard', 'Objects', 'computer', '1.0', ('keyboard',), ('\u2328',), None),
    ('\U0001F5B1\uFE0F', 'computer mouse', 'Objects', 'computer', '0.7', ('mouse_three_button', 'three_button_mouse'), ('\U0001F5B1',), None),
    ('\U0001F5B2\uFE0F', 'trackball', 'Objects', 'computer', '0.7', ('trackball',), ('\U0001F5B2',), None),
    ('\U0001F4BD', 'computer disk', 'Objects', 'computer', '0.6', ('minidisc',), (), None),
    ('\U0001F4BE', 'floppy disk', 'Objects', 'computer', '0.6', ('floppy_disk',), (), None),
    ('\U0001F4BF', 'optical disk', 'Objects', 'computer', '0.6', ('cd',), (), None),
    ('\U0001F4C0', 'dvd', 'Objects', 'computer', '0.6', ('dvd',), (), None),
    ('\U0001F9EE', 'abacus', 'Objects', 'computer', '11.0', ('abacus',), (), None),
    ('\U0001F3A5', 'movie camera', 'Objects', 'light & video', '0.6', ('movie_camera',), (), None),
    ('\U0001F39E\uFE0F', 'film frames', 'Objects', 'light & video', '0.7', ('film_frames',), ('\U0001F39E',), None),
    ('\U0001F4FD\uFE0F', 'film projector', 'Objects', 'light & video', '0.7', ('projector', 'film_projector'), ('\U0001F4FD',), None),
    ('\U0001F3AC', 'clapper board', 'Objects', 'light & video', '0.6', ('clapper',), (), None),
    ('\U0001F4FA', 'television', 'Objects', 'light & video', '0.6', ('tv',), (), None),
    ('\U0001F4F7', 'camera', 'Objects', 'light & video', '0.6', ('camera',), (), None),
    ('\U0001F4F8', 'camera with flash', 'Objects', 'light & video', '1.0', ('camera_with_flash',), (), None),
    ('\U0001F4F9', 'video camera', 'Objects', 'light & video', '0.6', ('video_camera',), (), None),
    ('\U0001F4FC', 'videocassette', 'Objects', 'light & video', '0.6', ('vhs',), (), None),
    ('\U0001F50D', 'magnifying glass tilted left', 'Objects', 'light & video', '0.6', ('mag',), (), None),
    ('\U0001F50E', 'magnifying glass tilted right', 'Objects', 'light & video', '0.6', ('mag_right',), (), None),
    ('\U0001F56F\uFE0F', 'candle', 'Objects', 'light & video', '0.7', ('candle',), ('\U0001F56F',), None),
    ('\U0001F4A1', 'light bulb', 'Objects', 'light & video', '0.6', ('bulb',), (), None),
    ('\U0001F526', 'flashlight', 'Objects', 'light & video', '0.6', ('flashlight',), (), None),
    ('\U0001F3EE', 'red paper lantern', 'Objects', 'light & video', '0.6', ('izakaya_lantern',), (), None),
    ('\U0001FA94', 'diya lamp', 'Objects', 'light & video', '12.0', ('diya_lamp',), (), None),
    ('\U0001F4D4', 'notebook with decorative cover', 'Objects', 'book-paper', '0.6', ('notebook_with_decorative_cover',), (), None),
    ('\U0001F4D5', 'closed book', 'Objects', 'book-paper', '0.6', ('closed_book',), (), None),
    ('\U0001F4D6', 'open book', 'Objects', 'book-paper', '0.6', ('book',), (), None),
    ('\U0001F4D7', 'green book', 'Objects', 'book-paper', '0.6', ('green_book',), (), None),
    ('\U0001F4D8', 'blue book', 'Objects', 'book-paper', '0.6', ('blue_book',), (), None),
    ('\U0001F4D9', 'orange book', 'Objects', 'book-paper', '0.6', ('orange_book',), (), None),
    ('\U0001F4DA', 'books', 'Objects', 'book-paper', '0.6', ('books',), (), None),
    ('\U0001F4D3', 'notebook', 'Objects', 'book-paper', '0.6', ('notebook',), (), None),
    ('\U0001F4D2', 'ledger', 'Objects', 'book-paper', '0.6', ('ledger',), (), None),
    ('\U0001F4C3', 'page with curl', 'Objects', 'book-paper', '0.6', ('page_with_curl',), (), None),
    ('\U0001F4DC', 'scroll', 'Objects', 'book-paper', '0.6', ('scroll',), (), None),
    ('\U0001F4C4', 'page facing up', 'Objects', 'book-paper', '0.6', ('page_facing_up',), (), None),
    ('\U0001F4F0', 'newspaper', 'Objects', 'book-paper', '0.6', ('newspaper',), (), None),
    ('\U0001F5DE\uFE0F', 'rolled-up newspaper', 'Objects', 'book-paper', '0.7', ('newspaper2', 'rolled_up_newspaper'), ('\U0001F5DE',), None),
    ('\U0001F4D1', 'bookmark tabs', 'Objects', 'book-paper', '0.6', ('bookmark_tabs',), (), None),
    ('\U0001F516', 'bookmark', 'Objects', 'book-paper', '0.6', ('bookmark',), (), None),
    ('\U0001F3F7\uFE0F', 'label', 'Objects', 'book-paper', '0.7', ('label',), ('\U0001F3F7',), None),
    ('\U0001F4B0', 'money bag', 'Objects', 'money', '0.6', ('moneybag',), (), None),
    ('\U0001FA99', 'coin', 'Objects', 'money', '13.0', ('coin',), (), None),
    ('\U0001F4B4', 'yen banknote', 'Objects', 'money', '0.6', ('yen',), (), None),
    ('\U0001F4B5', 'dollar banknote', 'Objects', 'money', '0.6', ('dollar',), (), None),
    ('\U0001F4B6', 'euro banknote', 'Objects', 'money', '1.0', ('euro',), (), None),
    ('\U0001F4B7', 'pound banknote', 'Objects', 'money', '1.0', ('pound',), (), None),
    ('\U0001F4B8', 'money with wings', 'Objects', 'money', '0.6', ('money_with_wings',), (), None),
    ('\U0001F4B3', 'credit card', 'Objects', 'money', '0.6', ('credit_card',), (), None),
    ('\U0001F9FE', 'receipt', 'Objects', 'money', '11.0', ('receipt',), (), None),
    ('\U0001F4B9', 'chart increasing with yen', 'Objects', 'money', '0.6', ('chart',), (), None),
    ('\u2709\uFE0F', 'envelope', 'Objects', 'mail', '0.6', ('envelope',), ('\u2709',), None),
    ('\U0001F4E7', 'e-mail', 'Objects', 'mail', '0.6', ('e-mail', 'email'), (), None),
    ('\U0001F4E8', 'incoming envelope', 'Objects', 'mail', '0.6', ('incoming_envelope',), (), None),
    ('\U0001F4E9', 'envelope with arrow', 'Objects', 'mail', '0.6', ('envelope_with_arrow',), (), None),
    ('\U0001F4E4', 'outbox tray', 'Objects', 'mail', '0.6', ('outbox_tray',), (), None),
    ('\U0001F4E5', 'inbox tray', 'Objects', 'mail', '0.6', ('inbox_tray',), (), None),
    ('\U0001F4E6', 'package', 'Objects', 'mail', '0.6', ('package',), (), None),
    ('\U0001F4EB', 'closed mailbox with raised flag', 'Objects', 'mail', '0.6', ('mailbox',), (), None),
    ('\U0001F4EA', 'closed mailbox with lowered flag', 'Objects', 'mail', '0.6', ('mailbox_closed',), (), None),
    ('\U0001F4EC', 'open mailbox with raised flag', 'Objects', 'mail', '0.7', ('mailbox_with_mail',), (), None),
    ('\U0001F4ED', 'open mailbox with lowered flag', 'Objects', 'mail', '0.7', ('mailbox_with_no_mail',), (), None),
    ('\U0001F4EE', 'postbox', 'Objects', 'mail', '0.6', ('postbox',), (), None),
    ('\U0001F5F3\uFE0F', 'ballot box with ballot', 'Objects', 'mail', '0.7', ('ballot_box', 'ballot_box_with_ballot'), ('\U0001F5F3',), None),
    ('\u270F\uFE0F', 'pencil', 'Objects', 'writing', '0.6', ('pencil2',), ('\u270F',), None),
    ('\u2712\uFE0F', 'black nib', 'Objects', 'writing', '0.6', ('black_nib',), ('\u2712',), None),
    ('\U0001F58B\uFE0F', 'fountain pen', 'Objects', 'writing', '0.7', ('pen_fountain', 'lower_left_fountain_pen'), ('\U0001F58B',), None),
    ('\U0001F58A\uFE0F', 'pen', 'Objects', 'writing', '0.7', ('pen_ballpoint', 'lower_left_ballpoint_pen'), ('\U0001F58A',), None),
    ('\U0001F58C\uFE0F', 'paintbrush', 'Objects', 'writing', '0.7', ('paintbrush', 'lower_left_paintbrush'), ('\U0001F58C',), None),
    ('\U0001F58D\uFE0F', 'crayon', 'Objects', 'writing', '0.7', ('crayon', 'lower_left_crayon'), ('\U0001F58D',), None),
    ('\U0001F4DD', 'memo', 'Objects', 'writing', '0.6', ('pencil', 'memo'), (), None),
    ('\U0001F4BC', 'briefcase', 'Objects', 'office', '0.6', ('briefcase',), (), None),
    ('\U0001F4C1', 'file folder', 'Objects', 'office', '0.6', ('file_folder',), (), None),
    ('\U0001F4C2', 'open file folder', 'Objects', 'office', '0.6', ('open_file_folder',), (), None),
    ('\U0001F5C2\uFE0F', 'card index dividers', 'Objects', 'office', '0.7', ('dividers', 'card_index_dividers'), ('\U0001F5C2',), None),
    ('\U0001F4C5', 'calendar', 'Objects', 'office', '0.6', ('date',), (), None),
    ('\U0001F4C6', 'tear-off calendar', 'Objects', 'office', '0.6', ('calendar',), (), None),
    ('\U0001F5D2\uFE0F', 'spiral notepad', 'Objects', 'office', '0.7', ('notepad_spiral', 'spiral_note_pad'), ('\U0001F5D2',), None),
    ('\U0001F5D3\uFE0F', 'spiral calendar', 'Objects', 'office', '0.7', ('calendar_spiral', 'spiral_calendar_pad'), ('\U0001F5D3',), None),
    ('\U0001F4C7', 'card index', 'Objects', 'office', '0.6', ('card_index',), (), None),
    ('\U0001F4C8', 'chart increasing', 'Objects', 'office', '0.6', ('chart_with_upwards_trend',), (), None),
    ('\U0001F4C9', 'chart decreasing', 'Objects', 'office', '0.6', ('chart_with_downwards_trend',), (), None),
    ('\U0001F4CA', 'bar chart', 'Objects', 'office', '0.6', ('bar_chart',), (), None),
    ('\U0001F4CB', 'clipboard', 'Objects', 'office', '0.6', ('clipboard',), (), None),
    ('\U0001F4CC', 'pushpin', 'Objects', 'office', '0.6', ('pushpin',), (), None),
    ('\U0001F4CD', 'round pushpin', 'Objects', 'office', '0.6', ('round_pushpin',), (), None),
    ('\U0001F4CE', 'paperclip', 'Objects', 'office', '0.6', ('paperclip',), (), None),
    ('\U0001F587\uFE0F', 'linked paperclips', 'Objects', 'office', '0.7', ('paperclips', 'linked_paperclips'), ('\U0001F587',), None),
    ('\U0001F4CF', 'straight ruler', 'Objects', 'office', '0.6', ('straight_ruler',), (), None),
    ('\U0001F4D0', 'triangular ruler', 'Objects', 'office', '0.6', ('triangular_ruler',), (), None),
    ('\u2702\uFE0F', 'scissors', 'Objects', 'office', '0.6', ('scissors',), ('\u2702',), None),
    ('\U0001F5C3\uFE0F', 'card file box', 'Objects', 'office', '0.7', ('card_box', 'card_file_box'), ('\U0001F5C3',), None),
    ('\U0001F5C4\uFE0F', 'file cabinet', 'Objects', 'office', '0.7', ('file_cabinet',), ('\U0001F5C4',), None),
    ('\U0001F5D1\uFE0F', 'wastebasket', 'Objects', 'office', '0.7', ('wastebasket',), ('\U0001F5D1',), None),
    ('\U0001F512', 'locked', 'Objects', 'lock', '0.6', ('lock',), (), None),
    ('\U0001F513', 'unlocked', 'Objects', 'lock', '0.6', ('unlock',), (), None),
    ('\U0001F50F', 'locked with pen', 'Objects', 'lock', '0.6', ('lock_with_ink_pen',), (), None),
    ('\U0001F510', 'locked with key', 'Objects', 'lock', '0.6', ('closed_lock_with_key',), (), None),
    ('\U0001F511', 'key', 'Objects', 'lock', '0.6', ('key',), (), None),
    ('\U0001F5DD\uFE0F', 'old key', 'Objects', 'lock', '0.7', ('key2', 'old_key'), ('\U0001F5DD',), None),
    ('\U0001F528', 'hammer', 'Objects', 'tool', '0.6', ('hammer',), (), None),
    ('\U0001FA93', 'axe', 'Objects', 'tool', '12.0', ('axe',), (), None),
    ('\u26CF\uFE0F', 'pick', 'Objects', 'tool', '0.7', ('pick',), ('\u26CF',), None),
    ('\u2692\uFE0F', 'hammer and pick', 'Objects', 'tool', '1.0', ('hammer_pick', 'hammer_and_pick'), ('\u2692',), None),
    ('\U0001F6E0\uFE0F', 'hammer and wrench', 'Objects', 'tool', '0.7', ('tools', 'hammer_and_wrench'), ('\U0001F6E0',), None),
    ('\U0001F5E1\uFE0F', 'dagger', 'Objects', 'tool', '0.7', ('dagger', 'dagger_knife'), ('\U0001F5E1',), None),
    ('\u2694\uFE0F', 'crossed swords', 'Objects', 'tool', '1.0', ('crossed_swords',), ('\u2694',), None),
    ('\U0001F4A3', 'bomb', 'Objects', 'tool', '0.6', ('bomb',), (), None),
    ('\U0001FA83', 'boomerang', 'Objects', 'tool', '13.0', ('boomerang',), (), None),
    ('\U0001F3F9', 'bow and arrow', 'Objects', 'tool', '1.0', ('bow_and_arrow', 'archery'), (), None),
    ('\U0001F6E1\uFE0F', 'shield', 'Objects', 'tool', '0.7', ('shield',), ('\U0001F6E1',), None),
    ('\U0001FA9A', 'carpentry saw', 'Objects', 'tool', '13.0', ('carpentry_saw',), (), None),
    ('\U0001F527', 'wrench', 'Objects', 'tool', '0.6', ('wrench',), (), None),
    ('\U0001FA9B', 'screwdriver', 'Objects', 'tool', '13.0', ('screwdriver',), (), None),
    ('\U0001F529', 'nut and bolt', 'Objects', 'tool', '0.6', ('nut_and_bolt',), (), None),
    ('\u2699\uFE0F', 'gear', 'Objects', 'tool', '1.0', ('gear',), ('\u2699',), None),
    ('\U0001F5DC\uFE0F', 'clamp', 'Objects', 'tool', '0.7', ('compression',), ('\U0001F5DC',), None),
    ('\u2696\uFE0F', 'balance scale', 'Objects', 'tool', '1.0', ('scales',), ('\u2696',), None),
    ('\U0001F9AF', 'white cane', 'Objects', 'tool', '12.0', ('white_cane',), (), None),
    ('\U0001F517', 'link', 'Objects', 'tool', '0.6', ('link',), (), None),
    ('\u26D3\uFE0F\u200D\U0001F4A5', 'broken chain', 'Objects', 'tool', '15.1', (), ('\u26D3\u200D\U0001F4A5',), None),
    ('\u26D3\uFE0F', 'chains', 'Objects', 'tool', '0.7', ('chains',), ('\u26D3',), None),
    ('\U0001FA9D', 'hook', 'Objects', 'tool', '13.0', ('hook',), (), None),
    ('\U0001F9F0', 'toolbox', 'Objects', 'tool', '11.0', ('toolbox',), (), None),
    ('\U0001F9F2', 'magnet', 'Objects', 'tool', '11.0', ('magnet',), (), None),
    ('\U0001FA9C', 'ladder', 'Objects', 'tool', '13.0', ('ladder',), (), None),
    ('\u2697\uFE0F', 'alembic', 'Objects', 'science', '1.0', ('alembic',), ('\u2697',), None),
    ('\U0001F9EA', 'test tube', 'Objects', 'science', '11.0', ('test_tube',), (), None),
    ('\U0001F9EB', 'petri dish', 'Objects', 'science', '11.0', ('petri_dish',), (), None),
    ('\U0001F9EC', 'dna', 'Objects', 'science', '11.0', ('dna',), (), None),
    ('\U0001F52C', 'microscope', 'Objects', 'science', '1.0', ('microscope',), (), None),
    ('\U0001F52D', 'telescope', 'Objects', 'science', '1.0', ('telescope',), (), None),
    ('\U0001F4E1', 'satellite antenna', 'Objects', 'science', '0.6', ('satellite',), (), None),
    ('\U0001F489', 'syringe', 'Objects', 'medical', '0.6', ('syringe',), (), None),
    ('\U0001FA78', 'drop of blood', 'Objects', 'medical', '12.0', ('drop_of_blood',), (), None),
    ('\U0001F48A', 'pill', 'Objects', 'medical', '0.6', ('pill',), (), None),
    ('\U0001FA79', 'adhesive bandage', 'Objects', 'medical', '12.0', ('adhesive_bandage',), (), None),
    ('\U0001FA7C', 'crutch', 'Objects', 'medical', '14.0', ('crutch',), (), None),
    ('\U0001FA7A', 'stethoscope', 'Objects', 'medical', '12.0', ('stethoscope',), (), None),
    ('\U0001FA7B', 'x-ray', 'Objects', 'medical', '14.0', ('x-ray',), (), None),
    ('\U0001F6AA', 'door', 'Objects', 'household', '0.6', ('door',), (), None),
    ('\U0001F6D7', 'elevator', 'Objects', 'household', '13.0', ('elevator',), (), None),
    ('\U0001FA9E', 'mirror', 'Objects', 'household', '13.0', ('mirror',), (), None),
    ('\U0001FA9F', 'window', 'Objects', 'household', '13.0', ('window',), (), None),
    ('\U0001F6CF\uFE0F', 'bed', 'Objects', 'household', '0.7', ('bed',), ('\U0001F6CF',), None),
    ('\U0001F6CB\uFE0F', 'couch and lamp', 'Objects', 'household', '0.7', ('couch', 'couch_and_lamp'), ('\U0001F6CB',), None),
    ('\U0001FA91', 'chair', 'Objects', 'household', '12.0', ('chair',), (), None),
    ('\U0001F6BD', 'toilet', 'Objects', 'household', '0.6', ('toilet',), (), None),
    ('\U0001FAA0', 'plunger', 'Objects', 'household', '13.0', ('plunger',), (), None),
    ('\U0001F6BF', 'shower', 'Objects', 'household', '1.0', ('shower',), (), None),
    ('\U0001F6C1', 'bathtub', 'Objects', 'household', '1.0', ('bathtub',), (), None),
    ('\U0001FAA4', 'mouse trap', 'Objects', 'household', '13.0', ('mouse_trap',), (), None),
    ('\U0001FA92', 'razor', 'Objects', 'household', '12.0', ('razor',), (), None),
    ('\U0001F9F4', 'lotion bottle', 'Objects', 'household', '11.0', ('squeeze_bottle',), (), None),
    ('\U0001F9F7', 'safety pin', 'Objects', 'household', '11.0', ('safety_pin',), (), None),
    ('\U0001F9F9', 'broom', 'Objects', 'household', '11.0', ('broom',), (), None),
    ('\U0001F9FA', 'basket', 'Objects', 'household', '11.0', ('basket',), (), None),
    ('\U0001F9FB', 'roll of paper', 'Objects', 'household', '11.0', ('roll_of_paper',), (), None),
    ('\U0001FAA3', 'bucket', 'Objects', 'household', '13.0', ('bucket',), (), None),
    ('\U0001F9FC', 'soap', 'Objects', 'household', '11.0', ('soap',), (), None),
    ('\U0001FAE7', 'bubbles', 'Objects', 'household', '14.0', ('bubbles',), (), None),
    ('\U0001FAA5', 'toothbrush', 'Objects', 'household', '13.0', ('toothbrush',), (), None),
    ('\U0001F9FD', 'sponge', 'Objects', 'household', '11.0', ('sponge',), (), None),
    ('\U0001F9EF', 'fire extinguisher', 'Objects', 'household', '11.0', ('fire_extinguisher',), (), None),
    ('\U0001F6D2', 'shopping cart', 'Objects', 'household', '3.0', ('shopping_cart', 'shopping_trolley'), (), None),
    ('\U0001F6AC', 'cigarette', 'Objects', 'other-object', '0.6', ('smoking',), (), None),
    ('\u26B0\uFE0F', 'coffin', 'Objects', 'other-object', '1.0', ('coffin',), ('\u26B0',), None),
    ('\U0001FAA6', 'headstone', 'Objects', 'other-object', '13.0', ('headstone',), (), None),
    ('\u26B1\uFE0F', 'funeral urn', 'Objects', 'other-object', '1.0', ('urn', 'funeral_urn'), ('\u26B1',), None),
    ('\U0001F9FF', 'nazar amulet', 'Objects', 'other-object', '11.0', ('nazar_amulet',), (), None),
    ('\U0001FAAC', 'hamsa', 'Objects', 'other-object', '14.0', ('hamsa',), (), None),
    ('\U0001F5FF', 'moai', 'Objects', 'other-object', '0.6', ('moyai',), (), None),
    ('\U0001FAA7', 'placard', 'Objects', 'other-object', '13.0', ('placard',), (), None),
    ('\U0001FAAA', 'identification card', 'Objects', 'other-object', '14.0', ('identification_card',), (), None),
    ('\U0001F3E7', 'ATM sign', 'Symbols', 'transport-sign', '0.6', ('atm',), (), None),
    ('\U0001F6AE', 'litter in bin sign', 'Symbols', 'transport-sign', '1.0', ('put_litter_in_its_place',), (), None),
    ('\U0001F6B0', 'potable water', 'Symbols', 'transport-sign', '1.0', ('potable_water',), (), None),
    ('\u267F', 'wheelchair symbol', 'Symbols', 'transport-sign', '0.6', ('wheelchair',), (), None),
    ('\U0001F6B9', 'men’s room', 'Symbols', 'transport-sign', '0.6', ('mens',), (), None),
    ('\U0001F6BA', 'women’s room', 'Symbols', 'transport-sign', '0.6', ('womens',), (), None),
    ('\U0001F6BB', 'restroom', 'Symbols', 'transport-sign', '0.6', ('restroom',), (), None),
    ('\U0001F6BC', 'baby symbol', 'Symbols', 'transport-sign', '0.6', ('baby_symbol',), (), None),
    ('\U0001F6BE', 'water closet', 'Symbols', 'transport-sign', '0.6', ('wc',), (), None),
    ('\U0001F6C2', 'passport control', 'Symbols', 'transport-sign', '1.0', ('passport_control',), (), None),
    ('\U0001F6C3', 'customs', 'Symbols', 'transport-sign', '1.0', ('customs',), (), None),
    ('\U0001F6C4', 'baggage claim', 'Symbols', 'transport-sign', '1.0', ('baggage_claim',), (), None),
    ('\U0001F6C5', 'left luggage', 'Symbols', 'transport-sign', '1.0', ('left_luggage',), (), None),
    ('\u26A0\uFE0F', 'warning', 'Symbols', 'warning', '0.6', ('warning',), ('\u26A0',), None),
    ('\U0001F6B8', 'children crossing', 'Symbols', 'warning', '1.0', ('children_crossing',), (), None),
    ('\u26D4', 'no entry', 'Symbols', 'warning', '0.6', ('no_entry',), (), None),
    ('\U0001F6AB', 'prohibited', 'Symbols', 'warning', '0.6', ('no_entry_sign',), (), None),
    ('\U0001F6B3', 'no bicycles', 'Symbols', 'warning', '1.0', ('no_bicycles',), (), None),
    ('\U0001F6AD', 'no smoking', 'Symbols', 'warning', '0.6', ('no_smoking',), (), None),
    ('\U0001F6AF', 'no littering', 'Symbols', 'warning', '1.0', ('do_not_litter',), (), None),
    ('\U0001F6B1', 'non-potable water', 'Symbols', 'warning', '1.0', ('non-potable_water',), (), None),
    ('\U0001F6B7', 'no pedestrians', 'Symbols', 'warning', '1.0', ('no_pedestrians',), (), None),
    ('\U0001F4F5', 'no mobile phones', 'Symbols', 'warning', '1.0', ('no_mobile_phones',), (), None),
    ('\U0001F51E', 'no one under eighteen', 'Symbols', 'warning', '0.6', ('underage',), (), None),
    ('\u2622\uFE0F', 'radioactive', 'Symbols', 'warning', '1.0', ('radioactive', 'radioactive_sign'), ('\u2622',), None),
    ('\u2623\uFE0F', 'biohazard', 'Symbols', 'warning', '1.0', ('biohazard', 'biohazard_sign'), ('\u2623',), None),
    ('\u2B06\uFE0F', 'up arrow', 'Symbols', 'arrow', '0.6', ('arrow_up',), ('\u2B06',), None),
    ('\u2197\uFE0F', 'up-right arrow', 'Symbols', 'arrow', '0.6', ('arrow_upper_right',), ('\u2197',), None),
    ('\u27A1\uFE0F', 'right arrow', 'Symbols', 'arrow', '0.6', ('arrow_right',), ('\u27A1',), None),
    ('\u2198\uFE0F', 'down-right arrow', 'Symbols', 'arrow', '0.6', ('arrow_lower_right',), ('\u2198',), None),
    ('\u2B07\uFE0F', 'down arrow', 'Symbols', 'arrow', '0.6', ('arrow_down',), ('\u2B07',), None),
    ('\u2199\uFE0F', 'down-left arrow', 'Symbols', 'arrow', '0.6', ('arrow_lower_left',), ('\u2199',), None),
    ('\u2B05\uFE0F', 'left arrow', 'Symbols', 'arrow', '0.6', ('arrow_left',), ('\u2B05',), None),
    ('\u2196\uFE0F', 'up-left arrow', 'Symbols', 'arrow', '0.6', ('arrow_upper_left',), ('\u2196',), None),
    ('\u2195\uFE0F', 'up-down arrow', 'Symbols', 'arrow', '0.6', ('arrow_up_down',), ('\u2195',), None),
    ('\u2194\uFE0F', 'left-right arrow', 'Symbols', 'arrow', '0.6', ('left_right_arrow',), ('\u2194',), None),
    ('\u21A9\uFE0F', 'right arrow curving left', 'Symbols', 'arrow', '0.6', ('leftwards_arrow_with_hook',), ('\u21A9',), None),
    ('\u21AA\uFE0F', 'left arrow curving right', 'Symbols', 'arrow', '0.6', ('arrow_right_hook',), ('\u21AA',), None),
    ('\u2934\uFE0F', 'right arrow curving up', 'Symbols', 'arrow', '0.6', ('arrow_heading_up',), ('\u2934',), None),
    ('\u2935\uFE0F', 'right arrow curving down', 'Symbols', 'arrow', '0.6', ('arrow_heading_down',), ('\u2935',), None),
    ('\U0001F503', 'clockwise vertical arrows', 'Symbols', 'arrow', '0.6', ('arrows_clockwise',), (), None),
    ('\U0001F504', 'counterclockwise arrows button', 'Symbols', 'arrow', '1.0', ('arrows_counterclockwise',), (), None),
    ('\U0001F519', 'BACK arrow', 'Symbols', 'arrow', '0.6', ('back',), (), None),
    ('\U0001F51A', 'END arrow', 'Symbols', 'arrow', '0.6', ('end',), (), None),
    ('\U0001F51B', 'ON! arrow', 'Symbols', 'arrow', '0.6', ('on',), (), None),
    ('\U0001F51C', 'SOON arrow', 'Symbols', 'arrow', '0.6', ('soon',), (), None),
    ('\U0001F51D', 'TOP arrow', 'Symbols', 'arrow', '0.6', ('top',), (), None),
    ('\U0001F6D0', 'place of worship', 'Symbols', 'religion', '1.0', ('place_of_worship', 'worship_symbol'), (), None),
    ('\u269B\uFE0F', 'atom symbol', 'Symbols', 'religion', '1.0', ('atom', 'atom_symbol'), ('\u269B',), None),
    ('\U0001F549\uFE0F', 'om', 'Symbols', 'religion', '0.7', ('om_symbol',), ('\U0001F549',), None),
    ('\u2721\uFE0F', 'star of David', 'Symbols', 'religion', '0.7', ('star_of_david',), ('\u2721',), None),
    ('\u2638\uFE0F', 'wheel of dharma', 'Symbols', 'religion', '0.7', ('wheel_of_dharma',), ('\u2638',), None),
    ('\u262F\uFE0F', 'yin yang', 'Symbols', 'religion', '0.7', ('yin_yang',), ('\u262F',), None),
    ('\u271D\uFE0F', 'latin cross', 'Symbols', 'religion', '0.7', ('cross', 'latin_cross'), ('\u271D',), None),
    ('\u2626\uFE0F', 'orthodox cross', 'Symbols', 'religion', '1.0', ('orthodox_cross',), ('\u2626',), None),
    ('\u262A\uFE0F', 'star and crescent', 'Symbols', 'religion', '0.7', ('star_and_crescent',), ('\u262A',), None),
    ('\u262E\uFE0F', 'peace symbol', 'Symbols', 'religion', '1.0', ('peace', 'peace_symbol'), ('\u262E',), None),
    ('\U0001F54E', 'menorah', 'Symbols', 'religion', '1.0', ('menorah',), (), None),
    ('\U0001F52F', 'dotted six-pointed star', 'Symbols', 'religion', '0.6', ('six_pointed_star',), (), None),
    ('\U0001FAAF', 'khanda', 'Symbols', 'religion', '15.0', ('khanda',), (), None),
    ('\u2648', 'Aries', 'Symbols', 'zodiac', '0.6', ('aries',), (), None),
    ('\u2649', 'Taurus', 'Symbols', 'zodiac', '0.6', ('taurus',), (), None),
    ('\u264A', 'Gemini', 'Symbols', 'zodiac', '0.6', ('gemini',), (), None),
    ('\u264B', 'Cancer', 'Symbols', 'zodiac', '0.6', ('cancer',), (), None),
    ('\u264C', 'Leo', 'Symbols', 'zodiac', '0.6', ('leo',), (), None),
    ('\u264D', 'Virgo', 'Symbols', 'zodiac', '0.6', ('virgo',), (), None),
    ('\u264E', 'Libra', 'Symbols', 'zodiac', '0.6', ('libra',), (), None),
    ('\u264F', 'Scorpio', 'Symbols', 'zodiac', '0.6', ('scorpius',), (), None),
    ('\u2650', 'Sagittarius', 'Symbols', 'zodiac', '0.6', ('sagittarius',), (), None),
    ('\u2651', 'Capricorn', 'Symbols', 'zodiac', '0.6', ('capricorn',), (), None),
    ('\u2652', 'Aquarius', 'Symbols', 'zodiac', '0.6', ('aquarius',), (), None),
    ('\u2653', 'Pisces', 'Symbols', 'zodiac', '0.6', ('pisces',), (), None),
    ('\u26CE', 'Ophiuchus', 'Symbols', 'zodiac', '0.6', ('ophiuchus',), (), None),
    ('\U0001F500', 'shuffle tracks button', 'Symbols', 'av-symbol', '1.0', ('twisted_rightwards_arrows',), (), None),
    ('\U0001F501', 'repeat button', 'Symbols', 'av-symbol', '1.0', ('repeat',), (), None),
    ('\U0001F502', 'repeat single button', 'Symbols', 'av-symbol', '1.0', ('repeat_one',), (), None),
    ('\u25B6\uFE0F', 'play button', 'Symbols', 'av-symbol', '0.6', ('arrow_forward',), ('\u25B6',), None),
    ('\u23E9', 'fast-forward button', 'Symbols', 'av-symbol', '0.6', ('fast_forward',), (), None),
    ('\u23ED\uFE0F', 'next track button', 'Symbols', 'av-symbol', '0.7', ('track_next', 'next_track'), ('\u23ED',), None),
    ('\u23EF\uFE0F', 'play or pause button', 'Symbols', 'av-symbol', '1.0', ('play_pause',), ('\u23EF',), None),
    ('\u25C0\uFE0F', 'reverse button', 'Symbols', 'av-symbol', '0.6', ('arrow_backward',), ('\u25C0',), None),
    ('\u23EA', 'fast reverse button', 'Symbols', 'av-symbol', '0.6', ('rewind',), (), None),
    ('\u23EE\uFE0F', 'last track button', 'Symbols', 'av-symbol', '0.7', ('track_previous', 'previous_track'), ('\u23EE',), None),
    ('\U0001F53C', 'upwards button', 'Symbols', 'av-symbol', '0.6', ('arrow_up_small',), (), None),
    ('\u23EB', 'fast up button', 'Symbols', 'av-symbol', '0.6', ('arrow_double_up',), (), None),
    ('\U0001F53D', 'downwards button', 'Symbols', 'av-symbol', '0.6', ('arrow_down_small',), (), None),
    ('\u23EC', 'fast down button', 'Symbols', 'av-symbol', '0.6', ('arrow_double_down',), (), None),
    ('\u23F8\uFE0F', 'pause button', 'Symbols', 'av-symbol', '0.7', ('pause_button', 'double_vertical_bar'), ('\u23F8',), None),
    ('\u23F9\uFE0F', 'stop button', 'Symbols', 'av-symbol', '0.7', ('stop_button',), ('\u23F9',), None),
    ('\u23FA\uFE0F', 'record button', 'Symbols', 'av-symbol', '0.7', ('record_button',), ('\u23FA',), None),
    ('\u23CF\uFE0F', 'eject button', 'Symbols', 'av-symbol', '1.0', ('eject', 'eject_symbol'), ('\u23CF',), None),
    ('\U0001F3A6', 'cinema', 'Symbols', 'av-symbol', '0.6', ('cinema',), (), None),
    ('\U0001F505', 'dim button', 'Symbols', 'av-symbol', '1.0', ('low_brightness',), (), None),
    ('\U0001F506', 'bright button', 'Symbols', 'av-symbol', '1.0', ('high_brightness',), (), None),
    ('\U0001F4F6', 'antenna bars', 'Symbols', 'av-symbol', '0.6', ('signal_strength',), (), None),
    ('\U0001F6DC', 'wireless', 'Symbols', 'av-symbol', '15.0', ('wireless',), (), None),
    ('\U0001F4F3', 'vibration mode', 'Symbols', 'av-symbol', '0.6', ('vibration_mode',), (), None),
    ('\U0001F4F4', 'mobile phone off', 'Symbols', 'av-symbol', '0.6', ('mobile_phone_off',), (), None),
    ('\u2640\uFE0F', 'female sign', 'Symbols', 'gender', '4.0', ('female_sign',), ('\u2640',), None),
    ('\u2642\uFE0F', 'male sign', 'Symbols', 'gender', '4.0', ('male_sign',), ('\u2642',), None),
    ('\u26A7\uFE0F', 'transgender symbol', 'Symbols', 'gender', '13.0', ('transgender_symbol',), ('\u26A7',), None),
    ('\u2716\uFE0F', 'multiply', 'Symbols', 'math', '0.6', ('heavy_multiplication_x',), ('\u2716',), None),
    ('\u2795', 'plus', 'Symbols', 'math', '0.6', ('heavy_plus_sign',), (), None),
    ('\u2796', 'minus', 'Symbols', 'math', '0.6', ('heavy_minus_sign',), (), None),
    ('\u2797', 'divide', 'Symbols', 'math', '0.6', ('heavy_division_sign',), (), None),
    ('\U0001F7F0', 'heavy equals sign', 'Symbols', 'math', '14.0', ('heavy_equals_sign',), (), None),
    ('\u267E\uFE0F', 'infinity', 'Symbols', 'math', '11.0', ('infinity',), ('\u267E',), None),
    ('\u203C\uFE0F', 'double exclamation mark', 'Symbols', 'punctuation', '0.6', ('bangbang',), ('\u203C',), None),
    ('\u2049\uFE0F', 'exclamation question mark', 'Symbols', 'punctuation', '0.6', ('interrobang',), ('\u2049',), None),
    ('\u2753', 'red question mark', 'Symbols', 'punctuation', '0.6', ('question',), (), None),
    ('\u2754', 'white question mark', 'Symbols', 'punctuation', '0.6', ('grey_question',), (), None),
    ('\u2755', 'white exclamation mark', 'Symbols', 'punctuation', '0.6', ('grey_exclamation',), (), None),
    ('\u2757', 'red exclamation mark', 'Symbols', 'punctuation', '0.6', ('exclamation',), (), None),
    ('\u3030\uFE0F', 'wavy dash', 'Symbols', 'punctuation', '0.6', ('wavy_dash',), ('\u3030',), None),
    ('\U0001F4B1', 'currency exchange', 'Symbols', 'currency', '0.6', ('currency_exchange',), (), None),
    ('\U0001F4B2', 'heavy dollar sign', 'Symbols', 'currency', '0.6', ('heavy_dollar_sign',), (), None),
    ('\u2695\uFE0F', 'medical symbol', 'Symbols', 'other-symbol', '4.0', ('medical_symbol',), ('\u2695',), None),
    ('\u267B\uFE0F', 'recycling symbol', 'Symbols', 'other-symbol', '0.6', ('recycle',), ('\u267B',), None),
    ('\u269C\uFE0F', 'fleur-de-lis', 'Symbols', 'other-symbol', '1.0', ('fleur-de-lis',), ('\u269C',), None),
    ('\U0001F531', 'trident emblem', 'Symbols', 'other-symbol', '0.6', ('trident',), (), None),
    ('\U0001F4DB', 'name badge', 'Symbols', 'other-symbol', '0.6', ('name_badge',), (), None),
    ('\U0001F530', 'Japanese symbol for beginner', 'Symbols', 'other-symbol', '0.6', ('beginner',), (), None),
    ('\u2B55', 'hollow red circle', 'Symbols', 'other-symbol', '0.6', ('o',), (), None),
    ('\u2705', 'check mark button', 'Symbols', 'other-symbol', '0.6', ('white_check_mark',), (), None),
    ('\u2611\uFE0F', 'check box with check', 'Symbols', 'other-symbol', '0.6', ('ballot_box_with_check',), ('\u2611',), None),
    ('\u2714\uFE0F', 'check mark', 'Symbols', 'other-symbol', '0.6', ('heavy_check_mark',), ('\u2714',), None),
    ('\u274C', 'cross mark', 'Symbols', 'other-symbol', '0.6', ('x',), (), None),
    ('\u274E', 'cross mark button', 'Symbols', 'other-symbol', '0.6', ('negative_squared_cross_mark',), (), None),
    ('\u27B0', 'curly loop', 'Symbols', 'other-symbol', '0.6', ('curly_loop',), (), None),
    ('\u27BF', 'double curly loop', 'Symbols', 'other-symbol', '1.0', ('loop',), (), None),
    ('\u303D\uFE0F', 'part alternation mark', 'Symbols', 'other-symbol', '0.6', ('part_alternation_mark',), ('\u303D',), None),
    ('\u2733\uFE0F', 'eight-spoked asterisk', 'Symbols', 'other-symbol', '0.6', ('eight_spoked_asterisk',), ('\u2733',), None),
    ('\u2734\uFE0F', 'eight-pointed star', 'Symbols', 'other-symbol', '0.6', ('eight_pointed_black_star',), ('\u2734',), None),
    ('\u2747\uFE0F', 'sparkle', 'Symbols', 'other-symbol', '0.6', ('sparkle',), ('\u2747',), None),
    ('\u00A9\uFE0F', 'copyright', 'Symbols', 'other-symbol', '0.6', ('copyright',), ('\u00A9',), None),
    ('\u00AE\uFE0F', 'registered', 'Symbols', 'other-symbol', '0.6', ('registered',), ('\u00AE',), None),
    ('\u2122\uFE0F', 'trade mark', 'Symbols', 'other-symbol', '0.6', ('tm',), ('\u2122',), None),
    ('\u0023\uFE0F\u20E3', 'keycap: #', 'Symbols', 'keycap', '0.6', ('hash',), ('\u0023\u20E3',), None),
    ('\u002A\uFE0F\u20E3', 'keycap: *', 'Symbols', 'keycap', '2.0', ('asterisk', 'keycap_asterisk'), ('\u002A\u20E3',), None),
    ('\u0030\uFE0F\u20E3', 'keycap: 0', 'Symbols', 'keycap', '0.6', ('zero',), ('\u0030\u20E3',), None),
    ('\u0031\uFE0F\u20E3', 'keycap: 1', 'Symbols', 'keycap', '0.6', ('one',), ('\u0031\u20E3',), None),
    ('\u0032\uFE0F\u20E3', 'keycap: 2', 'Symbols', 'keycap', '0.6', ('two',), ('\u0032\u20E3',), None),
    ('\u0033\uFE0F\u20E3', 'keycap: 3', 'Symbols', 'keycap', '0.6', ('three',), ('\u0033\u20E3',), None),
    ('\u0034\uFE0F\u20E3', 'keycap: 4', 'Symbols', 'keycap', '0.6', ('four',), ('\u0034\u20E3',), None),
    ('\u0035\uFE0F\u20E3', 'keycap: 5', 'Symbols', 'keycap', '0.6', ('five',), ('\u0035\u20E3',), None),
    ('\u0036\uFE0F\u20E3', 'keycap: 6', 'Symbols', 'keycap', '0.6', ('six',), ('\u0036\u20E3',), None),
    ('\u0037\uFE0F\u20E3', 'keycap: 7', 'Symbols', 'keycap', '0.6', ('seven',), ('\u0037\u20E3',), None),
    ('\u0038\uFE0F\u20E3', 'keycap: 8', 'Symbols', 'keycap', '0.6', ('eight',), ('\u0038\u20E3',), None),
    ('\u0039\uFE0F\u20E3', 'keycap: 9', 'Symbols', 'keycap', '0.6', ('nine',), ('\u0039\u20E3',), None),
    ('\U0001F51F', 'keycap: 10', 'Symbols', 'keycap', '0.6', ('keycap_ten',), (), None),
    ('\U0001F520', 'input latin uppercase', 'Symbols', 'alphanum', '0.6', ('capital_abcd',), (), None),
    ('\U0001F521', 'input latin lowercase', 'Symbols', 'alphanum', '0.6', ('abcd',), (), None),
    ('\U0001F522', 'input numbers', 'Symbols', 'alphanum', '0.6', ('1234',), (), None),
    ('\U0001F523', 'input symbols', 'Symbols', 'alphanum', '0.6', ('symbols',), (), None),
    ('\U0001F524', 'input latin letters', 'Symbols', 'alphanum', '0.6', ('abc',), (), None),
    ('\U0001F170\uFE0F', 'A button (blood type)', 'Symbols', 'alphanum', '0.6', ('a',), ('\U0001F170',), None),
    ('\U0001F18E', 'AB button (blood type)', 'Symbols', 'alphanum', '0.6', ('ab',), (), None),
    ('\U0001F171\uFE0F', 'B button (blood type)', 'Symbols', 'alphanum', '0.6', ('b',), ('\U0001F171',), None),
    ('\U0001F191', 'CL button', 'Symbols', 'alphanum', '0.6', ('cl',), (), None),
    ('\U0001F192', 'COOL button', 'Symbols', 'alphanum', '0.6', ('cool',), (), None),
    ('\U0001F193', 'FREE button', 'Symbols', 'alphanum', '0.6', ('free',), (), None),
    ('\u2139\uFE0F', 'information', 'Symbols', 'alphanum', '0.6', ('information_source',), ('\u2139',), None),
    ('\U0001F194', 'ID button', 'Symbols', 'alphanum', '0.6', ('id',), (), None),
    ('\u24C2\uFE0F', 'circled M', 'Symbols', 'alphanum', '0.6', ('m',), ('\u24C2',), None),
    ('\U0001F195', 'NEW button', 'Symbols', 'alphanum', '0.6', ('new',), (), None),
    ('\U0001F196', 'NG button', 'Symbols', 'alphanum', '0.6', ('ng',), (), None),
    ('\U0001F17E\uFE0F', 'O button (blood type)', 'Symbols', 'alphanum', '0.6', ('o2',), ('\U0001F17E',), None),
    ('\U0001F197', 'OK button', 'Symbols', 'alphanum', '0.6', ('ok',), (), None),
    ('\U0001F17F\uFE0F', 'P button', 'Symbols', 'alphanum', '0.6', ('parking',), ('\U0001F17F',), None),
    ('\U0001F198', 'SOS button', 'Symbols', 'alphanum', '0.6', ('sos',), (), None),
    ('\U0001F199', 'UP! button', 'Symbols', 'alphanum', '0.6', ('up',), (), None),
    ('\U0001F19A', 'VS button', 'Symbols', 'alphanum', '0.6', ('vs',), (), None),
    ('\U0001F201', 'Japanese “here” button', 'Symbols', 'alphanum', '0.6', ('koko',), (), None),
    ('\U0001F202\uFE0F', 'Japanese “service charge” button', 'Symbols', 'alphanum', '0.6', ('sa',), ('\U0001F202',), None),
    ('\U0001F237\uFE0F', 'Japanese “monthly amount” button', 'Symbols', 'alphanum', '0.6', ('u6708',), ('\U0001F237',), None),
    ('\U0001F236', 'Japanese “not free of charge” button', 'Symbols', 'alphanum', '0.6', ('u6709',), (), None),
    ('\U0001F22F', 'Japanese “reserved” button', 'Symbols', 'alphanum', '0.6', ('u6307',), (), None),
    ('\U0001F250', 'Japanese “bargain” button', 'Symbols', 'alphanum', '0.6', ('ideograph_advantage',), (), None),
    ('\U0001F239', 'Japanese “discount” button', 'Symbols', 'alphanum', '0.6', ('u5272',), (), None),
    ('\U0001F21A', 'Japanese “free of charge” button', 'Symbols', 'alphanum', '0.6', ('u7121',), (), None),
    ('\U0001F232', 'Japanese “prohibited” button', 'Symbols', 'alphanum', '0.6', ('u7981',), (), None),
    ('\U0001F251', 'Japanese “acceptable” button', 'Symbols', 'alphanum', '0.6', ('accept',), (), None),
    ('\U0001F238', 'Japanese “application” button', 'Symbols', 'alphanum', '0.6', ('u7533',), (), None),
    ('\U0001F234', 'Japanese “passing grade” button', 'Symbols', 'alphanum', '0.6', ('u5408',), (), None),
    ('\U0001F233', 'Japanese “vacancy” button', 'Symbols', 'alphanum', '0.6', ('u7a7a',), (), None),
    ('\u3297\uFE0F', 'Japanese “congratulations” button', 'Symbols', 'alphanum', '0.6', ('congratulations',), ('\u3297',), None),
    ('\u3299\uFE0F', 'Japanese “secret” button', 'Symbols', 'alphanum', '0.6', ('secret',), ('\u3299',), None),
    ('\U0001F23A', 'Japanese “open for business” button', 'Symbols', 'alphanum', '0.6', ('u55b6',), (), None),
    ('\U0001F235', 'Japanese “no vacancy” button', 'Symbols', 'alphanum', '0.6', ('u6e80',), (), None),
    ('\U0001F534', 'red circle', 'Symbols', 'geometric', '0.6', ('red_circle',), (), None),
    ('\U0001F7E0', 'orange circle', 'Symbols', 'geometric', '12.0', ('orange_circle',), (), None),
    ('\U0001F7E1', 'yellow circle', 'Symbols', 'geometric', '12.0', ('yellow_circle',), (), None),
    ('\U0001F7E2', 'green circle', 'Symbols', 'geometric', '12.0', ('green_circle',), (), None),
    ('\U0001F535', 'blue circle', 'Symbols', 'geometric', '0.6', ('blue_circle',), (), None),
    ('\U0001F7E3', 'purple circle', 'Symbols', 'geometric', '12.0', ('purple_circle',), (), None),
    ('\U0001F7E4', 'brown circle', 'Symbols', 'geometric', '12.0', ('brown_circle',), (), None),
    ('\u26AB', 'black circle', 'Symbols', 'geometric', '0.6', ('black_circle',), (), None),
    ('\u26AA', 'white circle', 'Symbols', 'geometric', '0.6', ('white_circle',), (), None),
    ('\U0001F7E5', 'red square', 'Symbols', 'geometric', '12.0', ('red_square',), (), None),
    ('\U0001F7E7', 'orange square', 'Symbols', 'geometric', '12.0', ('orange_square',), (), None),
    ('\U0001F7E8', 'yellow square', 'Symbols', 'geometric', '12.0', ('yellow_square',), (), None),
    ('\U0001F7E9', 'green square', 'Symbols', 'geometric', '12.0', ('green_square',), (), None),
    ('\U0001F7E6', 'blue square', 'Symbols', 'geometric', '12.0', ('blue_square',), (), None),
    ('\U0001F7EA', 'purple square', 'Symbols', 'geometric', '12.0', ('purple_square',), (), None),
    ('\U0001F7EB', 'brown square', 'Symbols', 'geometric', '12.0', ('brown_square',), (), None),
    ('\u2B1B', 'black large square', 'Symbols', 'geometric', '0.6', ('black_large_square',), (), None),
    ('\u2B1C', 'white large square', 'Symbols', 'geometric', '0.6', ('white_large_square',), (), None),
    ('\u25FC\uFE0F', 'black medium square', 'Symbols', 'geometric', '0.6', ('black_medium_square',), ('\u25FC',), None),
    ('\u25FB\uFE0F', 'white medium square', 'Symbols', 'geometric', '0.6', ('white_medium_square',), ('\u25FB',), None),
    ('\u25FE', 'black medium-small square', 'Symbols', 'geometric', '0.6', ('black_medium_small_square',), (), None),
    ('\u25FD', 'white medium-small square', 'Symbols', 'geometric', '0.6', ('white_medium_small_square',), (), None),
    ('\u25AA\uFE0F', 'black small square', 'Symbols', 'geometric', '0.6', ('black_small_square',), ('\u25AA',), None),
    ('\u25AB\uFE0F', 'white small square', 'Symbols', 'geometric', '0.6', ('white_small_square',), ('\u25AB',), None),
    ('\U0001F536', 'large orange diamond', 'Symbols', 'geometric', '0.6', ('large_orange_diamond',), (), None),
    ('\U0001F537', 'large blue diamond', 'Symbols', 'geometric', '0.6', ('large_blue_diamond',), (), None),
    ('\U0001F538', 'small orange diamond', 'Symbols', 'geometric', '0.6', ('small_orange_diamond',), (), None),
    ('\U0001F539', 'small blue diamond', 'Symbols', 'geometric', '0.6', ('small_blue_diamond',), (), None),
    ('\U0001F53A', 'red triangle pointed up', 'Symbols', 'geometric', '0.6', ('small_red_triangle',), (), None),
    ('\U0001F53B', 'red triangle pointed down', 'Symbols', 'geometric', '0.6', ('small_red_triangle_down',), (), None),
    ('\U0001F4A0', 'diamond with a dot', 'Symbols', 'geometric', '0.6', ('diamond_shape_with_a_dot_inside',), (), None),
    ('\U0001F518', 'radio button', 'Symbols', 'geometric', '0.6', ('radio_button',), (), None),
    ('\U0001F533', 'white square button', 'Symbols', 'geometric', '0.6', ('white_square_button',), (), None),
    ('\U0001F532', 'black square button', 'Symbols', 'geometric', '0.6', ('black_square_button',), (), None),
    ('\U0001F3C1', 'chequered flag', 'Flags', 'flag', '0.6', ('checkered_flag',), (), None),
    ('\U0001F6A9', 'triangular flag', 'Flags', 'flag', '0.6', ('triangular_flag_on_post',), (), None),
    ('\U0001F38C', 'crossed flags', 'Flags', 'flag', '0.6', ('crossed_flags',), (), None),
    ('\U0001F3F4', 'black flag', 'Flags', 'flag', '1.0', ('flag_black', 'waving_black_flag'), (), None),
    ('\U0001F3F3\uFE0F', 'white flag', 'Flags', 'flag', '0.7', ('flag_white', 'waving_white_flag'), ('\U0001F3F3',), None),
    ('\U0001F3F3\uFE0F\u200D\U0001F308', 'rainbow flag', 'Flags', 'flag', '4.0', ('rainbow_flag', 'gay_pride_flag'), ('\U0001F3F3\u200D\U0001F308',), None),
    ('\U0001F3F3\uFE0F\u200D\u26A7\uFE0F', 'transgender flag', 'Flags', 'flag', '13.0', ('transgender_flag',), ('\U0001F3F3\u200D\u26A7\uFE0F', '\U0001F3F3\uFE0F\u200D\u26A7', '\U0001F3F3\u200D\u26A7'), None),
    ('\U0001F3F4\u200D\u2620\uFE0F', 'pirate flag', 'Flags', 'flag', '11.0', ('pirate_flag',), ('\U0001F3F4\u200D\u2620',), None),
    ('\U0001F1E6\U0001F1E8', 'flag: Ascension Island', 'Flags', 'country-flag', '2.0', ('flag_ac', 'ac'), (), None),
    ('\U0001F1E6\U0001F1E9', 'flag: Andorra', 'Flags', 'country-flag', '2.0', ('flag_ad', 'ad'), (), None),
    ('\U0001F1E6\U0001F1EA', 'flag: United Arab Emirates', 'Flags', 'country-flag', '2.0', ('flag_ae', 'ae'), (), None),
    ('\U0001F1E6\U0001F1EB', 'flag: Afghanistan', 'Flags', 'country-flag', '2.0', ('flag_af', 'af'), (), None),
    ('\U0001F1E6\U0001F1EC', 'flag: Antigua & Barbuda', 'Flags', 'country-flag', '2.0', ('flag_ag', 'ag'), (), None),
    ('\U0001F1E6\U0001F1EE', 'flag: Anguilla', 'Flags', 'country-flag', '2.0', ('flag_ai', 'ai'), (), None),
    ('\U0001F1E6\U0001F1F1', 'flag: Albania', 'Flags', 'country-flag', '2.0', ('flag_al', 'al'), (), None),
    ('\U0001F1E6\U0001F1F2', 'flag: Armenia', 'Flags', 'country-flag', '2.0', ('flag_am', 'am'), (), None),
    ('\U0001F1E6\U0001F1F4', 'flag: Angola', 'Flags', 'country-flag', '2.0', ('flag_ao', 'ao'), (), None),
    ('\U0001F1E6\U0001F1F6', 'flag: Antarctica', 'Flags', 'country-flag', '2.0', ('flag_aq', 'aq'), (), None),
    ('\U0001F1E6\U0001F1F7', 'flag: Argentina', 'Flags', 'country-flag', '2.0', ('flag_ar', 'ar'), (), None),
    ('\U0001F1E6\U0001F1F8', 'flag: American Samoa', 'Flags', 'country-flag', '2.0', ('flag_as', 'as'), (), None),
    ('\U0001F1E6\U0001F1F9', 'flag: Austria', 'Flags', 'country-flag', '2.0', ('flag_at', 'at'), (), None),
    ('\U0001F1E6\U0001F1FA', 'flag: Australia', 'Flags', 'country-flag', '2.0', ('flag_au', 'au'), (), None),
    ('\U0001F1E6\U0001F1FC', 'flag: Aruba', 'Flags', 'country-flag', '2.0', ('flag_aw', 'aw'), (), None),
    ('\U0001F1E6\U0001F1FD', 'flag: Åland Islands', 'Flags', 'country-flag', '2.0', ('flag_ax', 'ax'), (), None),
    ('\U0001F1E6\U0001F1FF', 'flag: Azerbaijan', 'Flags', 'country-flag', '2.0', ('flag_az', 'az'), (), None),
    ('\U0001F1E7\U0001F1E6', 'flag: Bosnia & Herzegovina', 'Flags', 'country-flag', '2.0', ('flag_ba', 'ba'), (), None),
    ('\U0001F1E7\U0001F1E7', 'flag: Barbados', 'Flags', 'country-flag', '2.0', ('flag_bb', 'bb'), (), None),
    ('\U0001F1E7\U0001F1E9', 'flag: Bangladesh', 'Flags', 'country-flag', '2.0', ('flag_bd', 'bd'), (), None),
    ('\U0001F1E7\U0001F1EA', 'flag: Belgium', 'Flags', 'country-flag', '2.0', ('flag_be', 'be'), (), None),
    ('\U0001F1E7\U0001F1EB', 'flag: Burkina Faso', 'Flags', 'country-flag', '2.0', ('flag_bf', 'bf'), (), None),
    ('\U0001F1E7\U0001F1EC', 'flag: Bulgaria', 'Flags', 'country-flag', '2.0', ('flag_bg', 'bg'), (), None),
    ('\U0001F1E7\U0001F1ED', 'flag: Bahrain', 'Flags', 'country-flag', '2.0', ('flag_bh', 'bh'), (), None),
    ('\U0001F1E7\U0001F1EE', 'flag: Burundi', 'Flags', 'country-flag', '2.0', ('flag_bi', 'bi'), (), None),
    ('\U0001F1E7\U0001F1EF', 'flag: Benin', 'Flags', 'country-flag', '2.0', ('flag_bj', 'bj'), (), None),
    ('\U0001F1E7\U0001F1F1', 'flag: St. Barthélemy', 'Flags', 'country-flag', '2.0', ('flag_bl', 'bl'), (), None),
    ('\U0001F1E7\U0001F1F2', 'flag: Bermuda', 'Flags', 'country-flag', '2.0', ('flag_bm', 'bm'), (), None),
    ('\U0001F1E7\U0001F1F3', 'flag: Brunei', 'Flags', 'country-flag', '2.0', ('flag_bn', 'bn'), (), None),
    ('\U0001F1E7\U0001F1F4', 'flag: Bolivia', 'Flags', 'country-flag', '2.0', ('flag_bo', 'bo'), (), None),
    ('\U0001F1E7\U0001F1F6', 'flag: Caribbean Netherlands', 'Flags', 'country-flag', '2.0', ('flag_bq', 'bq'), (), None),
    ('\U0001F1E7\U0001F1F7', 'flag: Brazil', 'Flags', 'country-flag', '2.0', ('flag_br', 'br'), (), None),
    ('\U0001F1E7\U0001F1F8', 'flag: Bahamas', 'Flags', 'country-flag', '2.0', ('flag_bs', 'bs'), (), None),
    ('\U0001F1E7\U0001F1F9', 'flag: Bhutan', 'Flags', 'country-flag', '2.0', ('flag_bt', 'bt'), (), None),
    ('\U0001F1E7\U0001F1FB', 'flag: Bouvet Island', 'Flags', 'country-flag', '2.0', ('flag_bv', 'bv'), (), None),
    ('\U0001F1E7\U0001F1FC', 'flag: Botswana', 'Flags', 'country-flag', '2.0', ('flag_bw', 'bw'), (), None),
    ('\U0001F1E7\U0001F1FE', 'flag: Belarus', 'Flags', 'country-flag', '2.0', ('flag_by', 'by'), (), None),
    ('\U0001F1E7\U0001F1FF', 'flag: Belize', 'Flags', 'country-flag', '2.0', ('flag_bz', 'bz'), (), None),
    ('\U0001F1E8\U0001F1E6', 'flag: Canada', 'Flags', 'country-flag', '2.0', ('flag_ca', 'ca'), (), None),
    ('\U0001F1E8\U0001F1E8', 'flag: Cocos (Keeling) Islands', 'Flags', 'country-flag', '2.0', ('flag_cc', 'cc'), (), None),
    ('\U0001F1E8\U0001F1E9', 'flag: Congo - Kinshasa', 'Flags', 'country-flag', '2.0', ('flag_cd', 'congo'), (), None),
    ('\U0001F1E8\U0001F1EB', 'flag: Central African Republic', 'Flags', 'country-flag', '2.0', ('flag_cf', 'cf'), (), None),
    ('\U0001F1E8\U0001F1EC', 'flag: Congo - Brazzaville', 'Flags', 'country-flag', '2.0', ('flag_cg', 'cg'), (), None),
    ('\U0001F1E8\U0001F1ED', 'flag: Switzerland', 'Flags', 'country-flag', '2.0', ('flag_ch', 'ch'), (), None),
    ('\U0001F1E8\U0001F1EE', 'flag: Côte d’Ivoire', 'Flags', 'country-flag', '2.0', ('flag_ci', 'ci'), (), None),
    ('\U0001F1E8\U0001F1F0', 'flag: Cook Islands', 'Flags', 'country-flag', '2.0', ('flag_ck', 'ck'), (), None),
    ('\U0001F1E8\U0001F1F1', 'flag: Chile', 'Flags', 'country-flag', '2.0', ('flag_cl', 'chile'), (), None),
    ('\U0001F1E8\U0001F1F2', 'flag: Cameroon', 'Flags', 'country-flag', '2.0', ('flag_cm', 'cm'), (), None),
    ('\U0001F1E8\U0001F1F3', 'flag: China', 'Flags', 'country-flag', '0.6', ('flag_cn', 'cn'), (), None),
    ('\U0001F1E8\U0001F1F4', 'flag: Colombia', 'Flags', 'country-flag', '2.0', ('flag_co', 'co'), (), None),
    ('\U0001F1E8\U0001F1F5', 'flag: Clipperton Island', 'Flags', 'country-flag', '2.0', ('flag_cp', 'cp'), (), None),
    ('\U0001F1E8\U0001F1F7', 'flag: Costa Rica', 'Flags', 'country-flag', '2.0', ('flag_cr', 'cr'), (), None),
    ('\U0001F1E8\U0001F1FA', 'flag: Cuba', 'Flags', 'country-flag', '2.0', ('flag_cu', 'cu'), (), None),
    ('\U0001F1E8\U0001F1FB', 'flag: Cape Verde', 'Flags', 'country-flag', '2.0', ('flag_cv', 'cv'), (), None),
    ('\U0001F1E8\U0001F1FC', 'flag: Curaçao', 'Flags', 'country-flag', '2.0', ('flag_cw', 'cw'), (), None),
    ('\U0001F1E8\U0001F1FD', 'flag: Christmas Island', 'Flags', 'country-flag', '2.0', ('flag_cx', 'cx'), (), None),
    ('\U0001F1E8\U0001F1FE', 'flag: Cyprus', 'Flags', 'country-flag', '2.0', ('flag_cy', 'cy'), (), None),
    ('\U0001F1E8\U0001F1FF', 'flag: Czechia', 'Flags', 'country-flag', '2.0', ('flag_cz', 'cz'), (), None),
    ('\U0001F1E9\U0001F1EA', 'flag: Germany', 'Flags', 'country-flag', '0.6', ('flag_de', 'de'), (), None),
    ('\U0001F1E9\U0001F1EC', 'flag: Diego Garcia', 'Flags', 'country-flag', '2.0', ('flag_dg', 'dg'), (), None),
    ('\U0001F1E9\U0001F1EF', 'flag: Djibouti', 'Flags', 'country-flag', '2.0', ('flag_dj', 'dj'), (), None),
    ('\U0001F1E9\U0001F1F0', 'flag: Denmark', 'Flags', 'country-flag', '2.0', ('flag_dk', 'dk'), (), None),
    ('\U0001F1E9\U0001F1F2', 'flag: Dominica', 'Flags', 'country-flag', '2.0', ('flag_dm', 'dm'), (), None),
    ('\U0001F1E9\U0001F1F4', 'flag: Dominican Republic', 'Flags', 'country-flag', '2.0', ('flag_do', 'do'), (), None),
    ('\U0001F1E9\U0001F1FF', 'flag: Algeria', 'Flags', 'country-flag', '2.0', ('flag_dz', 'dz'), (), None),
    ('\U0001F1EA\U0001F1E6', 'flag: Ceuta & Melilla', 'Flags', 'country-flag', '2.0', ('flag_ea', 'ea'), (), None),
    ('\U0001F1EA\U0001F1E8', 'flag: Ecuador', 'Flags', 'country-flag', '2.0', ('flag_ec', 'ec'), (), None),
    ('\U0001F1EA\U0001F1EA', 'flag: Estonia', 'Flags', 'country-flag', '2.0', ('flag_ee', 'ee'), (), None),
    ('\U0001F1EA\U0001F1EC', 'flag: Egypt', 'Flags', 'country-flag', '2.0', ('flag_eg', 'eg'), (), None),
    ('\U0001F1EA\U0001F1ED', 'flag: Western Sahara', 'Flags', 'country-flag', '2.0', ('flag_eh', 'eh'), (), None),
    ('\U0001F1EA\U0001F1F7', 'flag: Eritrea', 'Flags', 'country-flag', '2.0', ('flag_er', 'er'), (), None),
    ('\U0001F1EA\U0001F1F8', 'flag: Spain', 'Flags', 'country-flag', '0.6', ('flag_es', 'es'), (), None),
    ('\U0001F1EA\U0001F1F9', 'flag: Ethiopia', 'Flags', 'country-flag', '2.0', ('flag_et', 'et'), (), None),
    ('\U0001F1EA\U0001F1FA', 'flag: European Union', 'Flags', 'country-flag', '2.0', ('flag_eu', 'eu'), (), None),
    ('\U0001F1EB\U0001F1EE', 'flag: Finland', 'Flags', 'country-flag', '2.0', ('flag_fi', 'fi'), (), None),
    ('\U0001F1EB\U0001F1EF', 'flag: Fiji', 'Flags', 'country-flag', '2.0', ('flag_fj', 'fj'), (), None),
    ('\U0001F1EB\U0001F1F0', 'flag: Falkland Islands', 'Flags', 'country-flag', '2.0', ('flag_fk', 'fk'), (), None),
    ('\U0001F1EB\U0001F1F2', 'flag: Micronesia', 'Flags', 'country-flag', '2.0', ('flag_fm', 'fm'), (), None),
    ('\U0001F1EB\U0001F1F4', 'flag: Faroe Islands', 'Flags', 'country-flag', '2.0', ('flag_fo', 'fo'), (), None),
    ('\U0001F1EB\U0001F1F7', 'flag: France', 'Flags', 'country-flag', '0.6', ('flag_fr', 'fr'), (), None),
    ('\U0001F1EC\U0001F1E6', 'flag: Gabon', 'Flags', 'country-flag', '2.0', ('flag_ga', 'ga'), (), None),
    ('\U0001F1EC\U0001F1E7', 'flag: United Kingdom', 'Flags', 'country-flag', '0.6', ('flag_gb', 'gb'), (), None),
    ('\U0001F1EC\U0001F1E9', 'flag: Grenada', 'Flags', 'country-flag', '2.0', ('flag_gd', 'gd'), (), None),
    ('\U0001F1EC\U0001F1EA', 'flag: Georgia', 'Flags', 'country-flag', '2.0', ('flag_ge', 'ge'), (), None),
    ('\U0001F1EC\U0001F1EB', 'flag: French Guiana', 'Flags', 'country-flag', '2.0', ('flag_gf', 'gf'), (), None),
    ('\U0001F1EC\U0001F1EC', 'flag: Guernsey', 'Flags', 'country-flag', '2.0', ('flag_gg', 'gg'), (), None),
    ('\U0001F1EC\U0001F1ED', 'flag: Ghana', 'Flags', 'country-flag', '2.0', ('flag_gh', 'gh'), (), None),
    ('\U0001F1EC\U0001F1EE', 'flag: Gibraltar', 'Flags', 'country-flag', '2.0', ('flag_gi', 'gi'), (), None),
    ('\U0001F1EC\U0001F1F1', 'flag: Greenland', 'Flags', 'country-flag', '2.0', ('flag_gl', 'gl'), (), None),
    ('\U0001F1EC\U0001F1F2', 'flag: Gambia', 'Flags', 'country-flag', '2.0', ('flag_gm', 'gm'), (), None),
    ('\U0001F1EC\U0001F1F3', 'flag: Guinea', 'Flags', 'country-flag', '2.0', ('flag_gn', 'gn'), (), None),
    ('\U0001F1EC\U0001F1F5', 'flag: Guadeloupe', 'Flags', 'country-flag', '2.0', ('flag_gp', 'gp'), (), None),
    ('\U0001F1EC\U0001F1F6', 'flag: Equatorial Guinea', 'Flags', 'country-flag', '2.0', ('flag_gq', 'gq'), (), None),
    ('\U0001F1EC\U0001F1F7', 'flag: Greece', 'Flags', 'country-flag', '2.0', ('flag_gr', 'gr'), (), None),
    ('\U0001F1EC\U0001F1F8', 'flag: South Georgia & South Sandwich Islands', 'Flags', 'country-flag', '2.0', ('flag_gs', 'gs'), (), None),
    ('\U0001F1EC\U0001F1F9', 'flag: Guatemala', 'Flags', 'country-flag', '2.0', ('flag_gt', 'gt'), (), None),
    ('\U0001F1EC\U0001F1FA', 'flag: Guam', 'Flags', 'country-flag', '2.0', ('flag_gu', 'gu'), (), None),
    ('\U0001F1EC\U0001F1FC', 'flag: Guinea-Bissau', 'Flags', 'country-flag', '2.0', ('flag_gw', 'gw'), (), None),
    ('\U0001F1EC\U0001F1FE', 'flag: Guyana', 'Flags', 'country-flag', '2.0', ('flag_gy', 'gy'), (), None),
    ('\U0001F1ED\U0001F1F0', 'flag: Hong Kong SAR China', 'Flags', 'country-flag', '2.0', ('flag_hk', 'hk'), (), None),
    ('\U0001F1ED\U0001F1F2', 'flag: Heard & McDonald Islands', 'Flags', 'country-flag', '2.0', ('flag_hm', 'hm'), (), None),
    ('\U0001F1ED\U0001F1F3', 'flag: Honduras', 'Flags', 'country-flag', '2.0', ('flag_hn', 'hn'), (), None),
    ('\U0001F1ED\U0001F1F7', 'flag: Croatia', 'Flags', 'country-flag', '2.0', ('flag_hr', 'hr'), (), None),
    ('\U0001F1ED\U0001F1F9', 'flag: Haiti', 'Flags', 'country-flag', '2.0', ('flag_ht', 'ht'), (), None),
    ('\U0001F1ED\U0001F1FA', 'flag: Hungary', 'Flags', 'country-flag', '2.0', ('flag_hu', 'hu'), (), None),
    ('\U0001F1EE\U0001F1E8', 'flag: Canary Islands', 'Flags', 'country-flag', '2.0', ('flag_ic', 'ic'), (), None),
    ('\U0001F1EE\U0001F1E9', 'flag: Indonesia', 'Flags', 'country-flag', '2.0', ('flag_id', 'indonesia'), (), None),
    ('\U0001F1EE\U0001F1EA', 'flag: Ireland', 'Flags', 'country-flag', '2.0', ('flag_ie', 'ie'), (), None),
    ('\U0001F1EE\U0001F1F1', 'flag: Israel', 'Flags', 'country-flag', '2.0', ('flag_il', 'il'), (), None),
    ('\U0001F1EE\U0001F1F2', 'flag: Isle of Man', 'Flags', 'country-flag', '2.0', ('flag_im', 'im'), (), None),
    ('\U0001F1EE\U0001F1F3', 'flag: India', 'Flags', 'country-flag', '2.0', ('flag_in', 'in'), (), None),
    ('\U0001F1EE\U0001F1F4', 'flag: British Indian Ocean Territory', 'Flags', 'country-flag', '2.0', ('flag_io', 'io'), (), None),
    ('\U0001F1EE\U0001F1F6', 'flag: Iraq', 'Flags', 'country-flag', '2.0', ('flag_iq', 'iq'), (), None),
    ('\U0001F1EE\U0001F1F7', 'flag: Iran', 'Flags', 'country-flag', '2.0', ('flag_ir', 'ir'), (), None),
    ('\U0001F1EE\U0001F1F8', 'flag: Iceland', 'Flags', 'country-flag', '2.0', ('flag_is', 'is'), (), None),
    ('\U0001F1EE\U0001F1F9', 'flag: Italy', 'Flags', 'country-flag', '0.6', ('flag_it', 'it'), (), None),
    ('\U0001F1EF\U0001F1EA', 'flag: Jersey', 'Flags', 'country-flag', '2.0', ('flag_je', 'je'), (), None),
    ('\U0001F1EF\U0001F1F2', 'flag: Jamaica', 'Flags', 'country-flag', '2.0', ('flag_jm', 'jm'), (), None),
    ('\U0001F1EF\U0001F1F4', 'flag: Jordan', 'Flags', 'country-flag', '2.0', ('flag_jo', 'jo'), (), None),
    ('\U0001F1EF\U0001F1F5', 'flag: Japan', 'Flags', 'country-flag', '0.6', ('flag_jp', 'jp'), (), None),
    ('\U0001F1F0\U0001F1EA', 'flag: Kenya', 'Flags', 'country-flag', '2.0', ('flag_ke', 'ke'), (), None),
    ('\U0001F1F0\U0001F1EC', 'flag: Kyrgyzstan', 'Flags', 'country-flag', '2.0', ('flag_kg', 'kg'), (), None),
    ('\U0001F1F0\U0001F1ED', 'flag: Cambodia', 'Flags', 'country-flag', '2.0', ('flag_kh', 'kh'), (), None),
    ('\U0001F1F0\U0001F1EE', 'flag: Kiribati', 'Flags', 'country-flag', '2.0', ('flag_ki', 'ki'), (), None),
    ('\U0001F1F0\U0001F1F2', 'flag: Comoros', 'Flags', 'country-flag', '2.0', ('flag_km', 'km'), (), None),
    ('\U0001F1F0\U0001F1F3', 'flag: St. Kitts & Nevis', 'Flags', 'country-flag', '2.0', ('flag_kn', 'kn'), (), None),
    ('\U0001F1F0\U0001F1F5', 'flag: North Korea', 'Flags', 'country-flag', '2.0', ('flag_kp', 'kp'), (), None),
    ('\U0001F1F0\U0001F1F7', 'flag: South Korea', 'Flags', 'country-flag', '0.6', ('flag_kr', 'kr'), (), None),
    ('\U0001F1F0\U0001F1FC', 'flag: Kuwait', 'Flags', 'country-flag', '2.0', ('flag_kw', 'kw'), (), None),
    ('\U0001F1F0\U0001F1FE', 'flag: Cayman Islands', 'Flags', 'country-flag', '2.0', ('flag_ky', 'ky'), (), None),
    ('\U0001F1F0\U0001F1FF', 'flag: Kazakhstan', 'Flags', 'country-flag', '2.0', ('flag_kz', 'kz'), (), None),
    ('\U0001F1F1\U0001F1E6', 'flag: Laos', 'Flags', 'country-flag', '2.0', ('flag_la', 'la'), (), None),
    ('\U0001F1F1\U0001F1E7', 'flag: Lebanon', 'Flags', 'country-flag', '2.0', ('flag_lb', 'lb'), (), None),
    ('\U0001F1F1\U0001F1E8', 'flag: St. Lucia', 'Flags', 'country-flag', '2.0', ('flag_lc', 'lc'), (), None),
    ('\U0001F1F1\U0001F1EE', 'flag: Liechtenstein', 'Flags', 'country-flag', '2.0', ('flag_li', 'li'), (), None),
    ('\U0001F1F1\U0001F1F0', 'flag: Sri Lanka', 'Flags', 'country-flag', '2.0', ('flag_lk', 'lk'), (), None),
    ('\U0001F1F1\U0001F1F7', 'flag: Liberia', 'Flags', 'country-flag', '2.0', ('flag_lr', 'lr'), (), None),
    ('\U0001F1F1\U0001F1F8', 'flag: Lesotho', 'Flags', 'country-flag', '2.0', ('flag_ls', 'ls'), (), None),
    ('\U0001F1F1\U0001F1F9', 'flag: Lithuania', 'Flags', 'country-flag', '2.0', ('flag_lt', 'lt'), (), None),
    ('\U0001F1F1\U0001F1FA', 'flag: Luxembourg', 'Flags', 'country-flag', '2.0', ('flag_lu', 'lu'), (), None),
    ('\U0001F1F1\U0001F1FB', 'flag: Latvia', 'Flags', 'country-flag', '2.0', ('flag_lv', 'lv'), (), None),
    ('\U0001F1F1\U0001F1FE', 'flag: Libya', 'Flags', 'country-flag', '2.0', ('flag_ly', 'ly'), (), None),
    ('\U0001F1F2\U0001F1E6', 'flag: Morocco', 'Flags', 'country-flag', '2.0', ('flag_ma', 'ma'), (), None),
    ('\U0001F1F2\U0001F1E8', 'flag: Monaco', 'Flags', 'country-flag', '2.0', ('flag_mc', 'mc'), (), None),
    ('\U0001F1F2\U0001F1E9', 'flag: Moldova', 'Flags', 'country-flag', '2.0', ('flag_md', 'md'), (), None),
    ('\U0001F1F2\U0001F1EA', 'flag: Montenegro', 'Flags', 'country-flag', '2.0', ('flag_me', 'me'), (), None),
    ('\U0001F1F2\U0001F1EB', 'flag: St. Martin', 'Flags', 'country-flag', '2.0', ('flag_mf', 'mf'), (), None),
    ('\U0001F1F2\U0001F1EC', 'flag: Madagascar', 'Flags', 'country-flag', '2.0', ('flag_mg', 'mg'), (), None),
    ('\U0001F1F2\U0001F1ED', 'flag: Marshall Islands', 'Flags', 'country-flag', '2.0', ('flag_mh', 'mh'), (), None),
    ('\U0001F1F2\U0001F1F0', 'flag: North Macedonia', 'Flags', 'country-flag', '2.0', ('flag_mk', 'mk'), (), None),
    ('\U0001F1F2\U0001F1F1', 'flag: Mali', 'Flags', 'country-flag', '2.0', ('flag_ml', 'ml'), (), None),
    ('\U0001F1F2\U0001F1F2', 'flag: Myanmar (Burma)', 'Flags', 'country-flag', '2.0', ('flag_mm', 'mm'), (), None),
    ('\U0001F1F2\U0001F1F3', 'flag: Mongolia', 'Flags', 'country-flag', '2.0', ('flag_mn', 'mn'), (), None),
    ('\U0001F1F2\U0001F1F4', 'flag: Macao SAR China', 'Flags', 'country-flag', '2.0', ('flag_mo', 'mo'), (), None),
    ('\U0001F1F2\U0001F1F5', 'flag: Northern Mariana Islands', 'Flags', 'country-flag', '2.0', ('flag_mp', 'mp'), (), None),
    ('\U0001F1F2\U0001F1F6', 'flag: Martinique', 'Flags', 'country-flag', '2.0', ('flag_mq', 'mq'), (), None),
    ('\U0001F1F2\U0001F1F7', 'flag: Mauritania', 'Flags', 'country-flag', '2.0', ('flag_mr', 'mr'), (), None),
    ('\U0001F1F2\U0001F1F8', 'flag: Montserrat', 'Flags', 'country-flag', '2.0', ('flag_ms', 'ms'), (), None),
    ('\U0001F1F2\U0001F1F9', 'flag: Malta', 'Flags', 'country-flag', '2.0', ('flag_mt', 'mt'), (), None),
    ('\U0001F1F2\U0001F1FA', 'flag: Mauritius', 'Flags', 'country-flag', '2.0', ('flag_mu', 'mu'), (), None),
    ('\U0001F1F2\U0001F1FB', 'flag: Maldives', 'Flags', 'country-flag', '2.0', ('flag_mv', 'mv'), (), None),
    ('\U0001F1F2\U0001F1FC', 'flag: Malawi', 'Flags', 'country-flag', '2.0', ('flag_mw', 'mw'), (), None),
    ('\U0001F1F2\U0001F1FD', 'flag: Mexico', 'Flags', 'country-flag', '2.0', ('flag_mx', 'mx'), (), None),
    ('\U0001F1F2\U0001F1FE', 'flag: Malaysia', 'Flags', 'country-flag', '2.0', ('flag_my', 'my'), (), None),
    ('\U0001F1F2\U0001F1FF', 'flag: Mozambique', 'Flags', 'country-flag', '2.0', ('flag_mz', 'mz'), (), None),
    ('\U0001F1F3\U0001F1E6', 'flag: Namibia', 'Flags', 'country-flag', '2.0', ('flag_na', 'na'), (), None),
    ('\U0001F1F3\U0001F1E8', 'flag: New Caledonia', 'Flags', 'country-flag', '2.0', ('flag_nc', 'nc'), (), None),
    ('\U0001F1F3\U0001F1EA', 'flag: Niger', 'Flags', 'country-flag', '2.0', ('flag_ne', 'ne'), (), None),
    ('\U0001F1F3\U0001F1EB', 'flag: Norfolk Island', 'Flags', 'country-flag', '2.0', ('flag_nf', 'nf'), (), None),
    ('\U0001F1F3\U0001F1EC', 'flag: Nigeria', 'Flags', 'country-flag', '2.0', ('flag_ng', 'nigeria'), (), None),
    ('\U0001F1F3\U0001F1EE', 'flag: Nicaragua', 'Flags', 'country-flag', '2.0', ('flag_ni', 'ni'), (), None),
    ('\U0001F1F3\U0001F1F1', 'flag: Netherlands', 'Flags', 'country-flag', '2.0', ('flag_nl', 'nl'), (), None),
    ('\U0001F1F3\U0001F1F4', 'flag: Norway', 'Flags', 'country-flag', '2.0', ('flag_no', 'no'), (), None),
    ('\U0001F1F3\U0001F1F5', 'flag: Nepal', 'Flags', 'country-flag', '2.0', ('flag_np', 'np'), (), None),
    ('\U0001F1F3\U0001F1F7', 'flag: Nauru', 'Flags', 'country-flag', '2.0', ('flag_nr', 'nr'), (), None),
    ('\U0001F1F3\U0001F1FA', 'flag: Niue', 'Flags', 'country-flag', '2.0', ('flag_nu', 'nu'), (), None),
    ('\U0001F1F3\U0001F1FF', 'flag: New Zealand', 'Flags', 'country-flag', '2.0', ('flag_nz', 'nz'), (), None),
    ('\U0001F1F4\U0001F1F2', 'flag: Oman', 'Flags', 'country-flag', '2.0', ('flag_om', 'om'), (), None),
    ('\U0001F1F5\U0001F1E6', 'flag: Panama', 'Flags', 'country-flag', '2.0', ('flag_pa', 'pa'), (), None),
    ('\U0001F1F5\U0001F1EA', 'flag: Peru', 'Flags', 'country-flag', '2.0', ('flag_pe', 'pe'), (), None),
    ('\U0001F1F5\U0001F1EB', 'flag: French Polynesia', 'Flags', 'country-flag', '2.0', ('flag_pf', 'pf'), (), None),
    ('\U0001F1F5\U0001F1EC', 'flag: Papua New Guinea', 'Flags', 'country-flag', '2.0', ('flag_pg', 'pg'), (), None),
    ('\U0001F1F5\U0001F1ED', 'flag: Philippines', 'Flags', 'country-flag', '2.0', ('flag_ph', 'ph'), (), None),
    ('\U0001F1F5\U0001F1F0', 'flag: Pakistan', 'Flags', 'country-flag', '2.0', ('flag_pk', 'pk'), (), None),
    ('\U0001F1F5\U0001F1F1', 'flag: Poland', 'Flags', 'country-flag', '2.0', ('flag_pl', 'pl'), (), None),
    ('\U0001F1F5\U0001F1F2', 'flag: St. Pierre & Miquelon', 'Flags', 'country-flag', '2.0', ('flag_pm', 'pm'), (), None),
    ('\U0001F1F5\U0001F1F3', 'flag: Pitcairn Islands', 'Flags', 'country-flag', '2.0', ('flag_pn', 'pn'), (), None),
    ('\U0001F1F5\U0001F1F7', 'flag: Puerto Rico', 'Flags', 'country-flag', '2.0', ('flag_pr', 'pr'), (), None),
    ('\U0001F1F5\U0001F1F8', 'flag: Palestinian Territories', 'Flags', 'country-flag', '2.0', ('flag_ps', 'ps'), (), None),
    ('\U0001F1F5\U0001F1F9', 'flag: Portugal', 'Flags', 'country-flag', '2.0', ('flag_pt', 'pt'), (), None),
    ('\U0001F1F5\U0001F1FC', 'flag: Palau', 'Flags', 'country-flag', '2.0', ('flag_pw', 'pw'), (), None),
    ('\U0001F1F5\U0001F1FE', 'flag: Paraguay', 'Flags', 'country-flag', '2.0', ('flag_py', 'py'), (), None),
    ('\U0001F1F6\U0001F1E6', 'flag: Qatar', 'Flags', 'country-flag', '2.0', ('flag_qa', 'qa'), (), None),
    ('\U0001F1F7\U0001F1EA', 'flag: Réunion', 'Flags', 'country-flag', '2.0', ('flag_re', 're'), (), None),
    ('\U0001F1F7\U0001F1F4', 'flag: Romania', 'Flags', 'country-flag', '2.0', ('flag_ro', 'ro'), (), None),
    ('\U0001F1F7\U0001F1F8', 'flag: Serbia', 'Flags', 'country-flag', '2.0', ('flag_rs', 'rs'), (), None),
    ('\U0001F1F7\U0001F1FA', 'flag: Russia', 'Flags', 'country-flag', '0.6', ('flag_ru', 'ru'), (), None),
    ('\U0001F1F7\U0001F1FC', 'flag: Rwanda', 'Flags', 'country-flag', '2.0', ('flag_rw', 'rw'), (), None),
    ('\U0001F1F8\U0001F1E6', 'flag: Saudi Arabia', 'Flags', 'country-flag', '2.0', ('flag_sa', 'saudi', 'saudiarabia'), (), None),
    ('\U0001F1F8\U0001F1E7', 'flag: Solomon Islands', 'Flags', 'country-flag', '2.0', ('flag_sb', 'sb'), (), None),
    ('\U0001F1F8\U0001F1E8', 'flag: Seychelles', 'Flags', 'country-flag', '2.0', ('flag_sc', 'sc'), (), None),
    ('\U0001F1F8\U0001F1E9', 'flag: Sudan', 'Flags', 'country-flag', '2.0', ('flag_sd', 'sd'), (), None),
    ('\U0001F1F8\U0001F1EA', 'flag: Sweden', 'Flags', 'country-flag', '2.0', ('flag_se', 'se'), (), None),
    ('\U0001F1F8\U0001F1EC', 'flag: Singapore', 'Flags', 'country-flag', '2.0', ('flag_sg', 'sg'), (), None),
    ('\U0001F1F8\U0001F1ED', 'flag: St. Helena', 'Flags', 'country-flag', '2.0', ('flag_sh', 'sh'), (), None),
    ('\U0001F1F8\U0001F1EE', 'flag: Slovenia', 'Flags', 'country-flag', '2.0', ('flag_si', 'si'), (), None),
    ('\U0001F1F8\U0001F1EF', 'flag: Svalbard & Jan Mayen', 'Flags', 'country-flag', '2.0', ('flag_sj', 'sj'), (), None),
    ('\U0001F1F8\U0001F1F0', 'flag: Slovakia', 'Flags', 'country-flag', '2.0', ('flag_sk', 'sk'), (), None),
    ('\U0001F1F8\U0001F1F1', 'flag: Sierra Leone', 'Flags', 'country-flag', '2.0', ('flag_sl', 'sl'), (), None),
    ('\U0001F1F8\U0001F1F2', 'flag: San Marino', 'Flags', 'country-flag', '2.0', ('flag_sm', 'sm'), (), None),
    ('\U0001F1F8\U0001F1F3', 'flag: Senegal', 'Flags', 'country-flag', '2.0', ('flag_sn', 'sn'), (), None),
    ('\U0001F1F8\U0001F1F4', 'flag: Somalia', 'Flags', 'country-flag', '2.0', ('flag_so', 'so'), (), None),
    ('\U0001F1F8\U0001F1F7', 'flag: Suriname', 'Flags', 'country-flag', '2.0', ('flag_sr', 'sr'), (), None),
    ('\U0001F1F8\U0001F1F8', 'flag: South Sudan', 'Flags', 'country-flag', '2.0', ('flag_ss', 'ss'), (), None),
    ('\U0001F1F8\U0001F1F9', 'flag: São Tomé & Príncipe', 'Flags', 'country-flag', '2.0', ('flag_st', 'st'), (), None),
    ('\U0001F1F8\U0001F1FB', 'flag: El Salvador', 'Flags', 'country-flag', '2.0', ('flag_sv', 'sv'), (), None),
    ('\U0001F1F8\U0001F1FD', 'flag: Sint Maarten', 'Flags', 'country-flag', '2.0', ('flag_sx', 'sx'), (), None),
    ('\U0001F1F8\U0001F1FE', 'flag: Syria', 'Flags', 'country-flag', '2.0', ('flag_sy', 'sy'), (), None),
    ('\U0001F1F8\U0001F1FF', 'flag: Eswatini', 'Flags', 'country-flag', '2.0', ('flag_sz', 'sz'), (), None),
    ('\U0001F1F9\U0001F1E6', 'flag: Tristan da Cunha', 'Flags', 'country-flag', '2.0', ('flag_ta', 'ta'), (), None),
    ('\U0001F1F9\U0001F1E8', 'flag: Turks & Caicos Islands', 'Flags', 'country-flag', '2.0', ('flag_tc', 'tc'), (), None),
    ('\U0001F1F9\U0001F1E9', 'flag: Chad', 'Flags', 'country-flag', '2.0', ('flag_td', 'td'), (), None),
    ('\U0001F1F9\U0001F1EB', 'flag: French Southern Territories', 'Flags', 'country-flag', '2.0', ('flag_tf', 'tf'), (), None),
    ('\U0001F1F9\U0001F1EC', 'flag: Togo', 'Flags', 'country-flag', '2.0', ('flag_tg', 'tg'), (), None),
    ('\U0001F1F9\U0001F1ED', 'flag: Thailand', 'Flags', 'country-flag', '2.0', ('flag_th', 'th'), (), None),
    ('\U0001F1F9\U0001F1EF', 'flag: Tajikistan', 'Flags', 'country-flag', '2.0', ('flag_tj', 'tj'), (), None),
    ('\U0001F1F9\U0001F1F0', 'flag: Tokelau', 'Flags', 'country-flag', '2.0', ('flag_tk', 'tk'), (), None),
    ('\U0001F1F9\U0001F1F1', 'flag: Timor-Leste', 'Flags', 'country-flag', '2.0', ('flag_tl', 'tl'), (), None),
    ('\U0001F1F9\U0001F1F2', 'flag: Turkmenistan', 'Flags', 'country-flag', '2.0', ('flag_tm', 'turkmenistan'), (), None),
    ('\U0001F1F9\U0001F1F3', 'flag: Tunisia', 'Flags', 'country-flag', '2.0', ('flag_tn', 'tn'), (), None),
    ('\U0001F1F9\U0001F1F4', 'flag: Tonga', 'Flags', 'country-flag', '2.0', ('flag_to', 'to'), (), None),
    ('\U0001F1F9\U0001F1F7', 'flag: Türkiye', 'Flags', 'country-flag', '2.0', ('flag_tr', 'tr'), (), None),
    ('\U0001F1F9\U0001F1F9', 'flag: Trinidad & Tobago', 'Flags', 'country-flag', '2.0', ('flag_tt', 'tt'), (), None),
    ('\U0001F1F9\U0001F1FB', 'flag: Tuvalu', 'Flags', 'country-flag', '2.0', ('flag_tv', 'tuvalu'), (), None),
    ('\U0001F1F9\U0001F1FC', 'flag: Taiwan', 'Flags', 'country-flag', '2.0', ('flag_tw', 'tw'), (), None),
    ('\U0001F1F9\U0001F1FF', 'flag: Tanzania', 'Flags', 'country-flag', '2.0', ('flag_tz', 'tz'), (), None),
    ('\U0001F1FA\U0001F1E6', 'flag: Ukraine', 'Flags', 'country-flag', '2.0', ('flag_ua', 'ua'), (), None),
    ('\U0001F1FA\U0001F1EC', 'flag: Uganda', 'Flags', 'country-flag', '2.0', ('flag_ug', 'ug'), (), None),
    ('\U0001F1FA\U0001F1F2', 'flag: U.S. Outlying Islands', 'Flags', 'country-flag', '2.0', ('flag_um', 'um'), (), None),
    ('\U0001F1FA\U0001F1F3', 'flag: United Nations', 'Flags', 'country-flag', '4.0', ('united_nations',), (), None),
    ('\U0001F1FA\U0001F1F8', 'flag: United States', 'Flags', 'country-flag', '0.6', ('flag_us', 'us'), (), None),
    ('\U0001F1FA\U0001F1FE', 'flag: Uruguay', 'Flags', 'country-flag', '2.0', ('flag_uy', 'uy'), (), None),
    ('\U0001F1FA\U0001F1FF', 'flag: Uzbekistan', 'Flags', 'country-flag', '2.0', ('flag_uz', 'uz'), (), None),
    ('\U0001F1FB\U0001F1E6', 'flag: Vatican City', 'Flags', 'country-flag', '2.0', ('flag_va', 'va'), (), None),
    ('\U0001F1FB\U0001F1E8', 'flag: St. Vincent & Grenadines', 'Flags', 'country-flag', '2.0', ('flag_vc', 'vc'), (), None),
    ('\U0001F1FB\U0001F1EA', 'flag: Venezuela', 'Flags', 'country-flag', '2.0', ('flag_ve', 've'), (), None),
    ('\U0001F1FB\U0001F1EC', 'flag: British Virgin Islands', 'Flags', 'country-flag', '2.0', ('flag_vg', 'vg'), (), None),
    ('\U0001F1FB\U0001F1EE', 'flag: U.S. Virgin Islands', 'Flags', 'country-flag', '2.0', ('flag_vi', 'vi'), (), None),
    ('\U0001F1FB\U0001F1F3', 'flag: Vietnam', 'Flags', 'country-flag', '2.0', ('flag_vn', 'vn'), (), None),
    ('\U0001F1FB\U0001F1FA', 'flag: Vanuatu', 'Flags', 'country-flag', '2.0', ('flag_vu', 'vu'), (), None),
    ('\U0001F1FC\U0001F1EB', 'flag: Wallis & Futuna', 'Flags', 'country-flag', '2.0', ('flag_wf', 'wf'), (), None),
    ('\U0001F1FC\U0001F1F8', 'flag: Samoa', 'Flags', 'country-flag', '2.0', ('flag_ws', 'ws'), (), None),
    ('\U0001F1FD\U0001F1F0', 'flag: Kosovo', 'Flags', 'country-flag', '2.0', ('flag_xk', 'xk'), (), None),
    ('\U0001F1FE\U0001F1EA', 'flag: Yemen', 'Flags', 'country-flag', '2.0', ('flag_ye', 'ye'), (), None),
    ('\U0001F1FE\U0001F1F9', 'flag: Mayotte', 'Flags', 'country-flag', '2.0', ('flag_yt', 'yt'), (), None),
    ('\U0001F1FF\U0001F1E6', 'flag: South Africa', 'Flags', 'country-flag', '2.0', ('flag_za', 'za'), (), None),
    ('\U0001F1FF\U0001F1F2', 'flag: Zambia', 'Flags', 'country-flag', '2.0', ('flag_zm', 'zm'), (), None),
    ('\U0001F1FF\U0001F1FC', 'flag: Zimbabwe', 'Flags', 'country-flag', '2.0', ('flag_zw', 'zw'), (), None),
    ('\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F', 'flag: England', 'Flags', 'subdivision-flag', '5.0', ('england',), (), None),
    ('\U0001F3F4\U000E0067\U000E0062\U000E0073\U000E0063\U000E0074\U000E007F', 'flag: Scotland', 'Flags', 'subdivision-flag', '5.0', ('scotland',), (), None),
    ('\U0001F3F4\U000E0067\U000E0062\U000E0077\U000E006C\U000E0073\U000E007F', 'flag: Wales', 'Flags', 'subdivision-flag', '5.0', ('wales',), (), None),
]
