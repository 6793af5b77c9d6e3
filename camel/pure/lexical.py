"""Pure lambda calculus lexical analysis: turns a source string into a lazy stream of tokens.

Tokens are dispatched on their first non-whitespace character:

```
"("           ; LEFT_PAREN
")"           ; RIGHT_PAREN
"λ" | "\\"    ; LAMBDA
"."           ; DOT
[a-z][a-zA-Z0-9]*   ; LOWERCASE_ID, consumed greedily
<anything else>     ; UNKNOWN, always a single character
```

The lexer never fails: characters that cannot start a token surface as UNKNOWN tokens, which the parser rejects.
"""

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(Enum):
    LEFT_PAREN = "left parenthesis"
    RIGHT_PAREN = "right parenthesis"
    LAMBDA = "lambda"
    DOT = "dot"
    LOWERCASE_ID = "identifier"
    UNKNOWN = "character"


@dataclass(frozen=True)
class Token:
    """A kind and the exact source text of the token. start is the offset of text in the source and is only used for
    error messages, so it is ignored when comparing tokens.
    """
    kind: TokenKind
    text: str
    start: int = field(default=0, compare=False)


class Lexer:
    """Single forward pass over source. Also an iterator over the remaining tokens."""
    SINGLE_CHARS = {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "λ": TokenKind.LAMBDA,
        "\\": TokenKind.LAMBDA,
        ".": TokenKind.DOT,
    }

    def __init__(self, source):
        self.source = source
        self.pos = 0    # offset of the next unread character
        self.start = 0  # offset where the current token began

    @staticmethod
    def is_lowercase(char):
        return "a" <= char <= "z"

    @staticmethod
    def is_alphanumeric(char):
        return char.isascii() and char.isalnum()

    def peek(self):
        """Returns the next unread character, or None at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    @staticmethod
    def is_whitespace(char):
        """Unicode White_Space. str.isspace also accepts the separators U+001C..U+001F, which are not whitespace."""
        return char.isspace() and not "\x1c" <= char <= "\x1f"

    def skip_whitespace(self):
        while self.pos < len(self.source) and Lexer.is_whitespace(self.source[self.pos]):
            self.pos += 1

    def next_token(self):
        """Returns the next Token, or None once source is exhausted (and on every call after that)."""
        self.skip_whitespace()
        self.start = self.pos

        char = self.peek()
        if char is None:
            return None

        self.pos += 1
        if char in Lexer.SINGLE_CHARS:
            kind = Lexer.SINGLE_CHARS[char]
        elif Lexer.is_lowercase(char):
            kind = TokenKind.LOWERCASE_ID
            while self.peek() is not None and Lexer.is_alphanumeric(self.peek()):
                self.pos += 1
        else:
            kind = TokenKind.UNKNOWN

        return Token(kind, self.source[self.start:self.pos], self.start)

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def tokenize(source):
    """Returns a lazy iterator over the tokens of source."""
    return iter(Lexer(source))
