"""Lex a text stream lazily, line by line, with strict error handling."""

import io

from calclex import LexConfig, LexError, lex_config_context, tokenize

source = io.StringIO("a := 1\nb := a * 2\nc := b ! 3\n")

with lex_config_context(LexConfig(strict=True)):
    try:
        for token in tokenize(source, source_file="<memory>"):
            print(token)
    except LexError as e:
        print(f"Stopped: {e}")
