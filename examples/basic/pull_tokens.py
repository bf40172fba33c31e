"""Pull tokens one at a time and stop on the first lexical error."""

from calclex import Lexer, TokenType

lexer = Lexer("total := price * qty ; tax")

while (token := lexer.next_token()) is not None:
    if token.type is TokenType.ERROR:
        print(f"Error {token.message} at position {token.pos}")
        break
    print(token)
