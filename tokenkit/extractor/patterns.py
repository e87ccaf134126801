# Default patterns for the pattern-based strategies. Compiled with the
# ``regex`` module, which supports \p{..} classes and variable-width
# lookbehind.

# Separator for whitespace splitting
WHITESPACE = r"\s+"

# Separator for line splitting; "\r\n" counts as one line break
LINE_BREAK = r"\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]"

# Separator for paragraph splitting: one or more blank lines
PARAGRAPH_BREAK = r"(?:\r?\n[^\S\r\n]*){2,}"

# Separator for sentence splitting: whitespace after a terminator and any
# closing quotes or brackets
SENTENCE_BREAK = r"(?<=[.!?…][\"'’”)\]]*)\s+"

# Inclusion predicate for extract mode: letters, optionally joined by
# interior hyphens or apostrophes
HYPHENATED_WORD = r"\p{L}+(?:[-'’]\p{L}+)*"
