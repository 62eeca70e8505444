"""Lexical vocabulary of the vex grammar.

vex has no separate tokenizer: grammar rules match these character classes
directly against the source text.
"""

from __future__ import annotations

import string

# Horizontal whitespace.  Linebreaks are significant and matched separately.
WHITESPACE = frozenset(" \t")
LINEBREAK = frozenset("\n\r")
BLANK = WHITESPACE | LINEBREAK

DIGITS = frozenset(string.digits)

# Identifiers are plain ASCII alphanumerics; there is no separator character.
IDENT_CHARS = frozenset(string.ascii_letters + string.digits)

SIGNS = frozenset("+-")
ADD_OPS = frozenset("+-")
MULT_OPS = frozenset("*/")

# Rule display names reported in "Expected ..." messages.
LABEL_WHITESPACE = "whitespace"
LABEL_LINEBREAK = "linebreak"
LABEL_NUMBER = "number"
LABEL_IDENT = "identifier"
LABEL_TYPE = "type"
LABEL_END = "end of input"
