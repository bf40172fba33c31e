"""Lex an expression and print its tokens."""

from calclex import tokenize

for token in tokenize("area := 3.14159 * (r - -0.5E1) / 2"):
    print(token)
