"""Save a token stream as JSON and restore it."""

from calclex import tokenize
from calclex.serialization import from_json, to_json

tokens = list(tokenize("x := (y + 1) * -2e3"))

json_str = to_json(tokens)
restored = from_json(json_str)

print("Original == restored:", tokens == restored)
print("JSON length:", len(json_str), "chars")
