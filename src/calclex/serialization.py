"""Token serialization: JSON round-trip for calclex token streams.

Converts tokens to/from JSON-compatible dicts. Useful for piping lexer
output to other tools and for golden-file tests.

All output is deterministic (sorted keys).

Example:
    from calclex import tokenize
    from calclex.serialization import to_json, from_json

    tokens = list(tokenize("a := 1"))
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from calclex.errors import CalclexError, ErrorKind
from calclex.tokens import Op, Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``type`` discriminator; ``op`` and ``error`` appear only on
    the token types that carry them.

    """
    result: dict[str, Any] = {
        "type": token.type.name,
        "value": token.value,
        "start": token.pos,
        "end": token.end,
        "lineno": token.lineno,
        "col": token.col,
    }
    if token.op is not None:
        result["op"] = token.op.name
    if token.error is not None:
        result["error"] = token.error.name
        result["message"] = token.error.message
    if token.location.source_file is not None:
        result["source_file"] = token.location.source_file
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        CalclexError: If a field is missing or the type, op or error name is unknown.
    """
    try:
        return Token(
            type=TokenType[data["type"]],
            value=data["value"],
            _lineno=data["lineno"],
            _col=data["col"],
            _start_offset=data["start"],
            _end_offset=data["end"],
            op=Op[data["op"]] if "op" in data else None,
            error=ErrorKind[data["error"]] if "error" in data else None,
            _source_file=data.get("source_file"),
        )
    except KeyError as e:
        raise CalclexError(f"Missing or unknown token field: {e}") from e


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string."""
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string to a list of tokens."""
    return [from_dict(item) for item in json.loads(json_str)]
