"""Recursive descent parser for pure lambda calculus, with a single token of lookahead.

```
term         ::= LAMBDA LCID DOT term    ; abstraction bodies are greedy: λx.x y = λx.(x y) != (λx.x) y
               | application
application  ::= atom application'      ; associating by left: a b c d = (((a b) c) d)
application' ::= atom application'
               | ε
atom         ::= LPAREN term RPAREN
               | LCID
```

The grammar is the left-recursive `application ::= application atom` with the left recursion removed. Parentheses only
group: they are not kept in the resulting LambdaTerm.
"""

from camel.lang.error import UnexpectedEndOfInput, UnexpectedToken
from camel.pure.lexical import Lexer, TokenKind
from camel.pure.term import Abstraction, Application, Identifier


class Parser:
    """Produces LambdaTerms from a source string. Tokens are pulled from the lexer as they are needed."""
    ATOM_START = (TokenKind.LEFT_PAREN, TokenKind.LOWERCASE_ID)

    def __init__(self, source):
        self.source = source
        self.lexer = Lexer(source)
        self.current_token = self.lexer.next_token()

    def parse_term(self):
        """Parses a single term starting at the current token. Trailing tokens are left unconsumed."""
        if self.current_kind() is TokenKind.LAMBDA:
            return self.parse_abstraction()
        return self.parse_application()

    def parse_abstraction(self):
        self.expect(TokenKind.LAMBDA)
        param = self.expect(TokenKind.LOWERCASE_ID).text
        self.expect(TokenKind.DOT)
        return Abstraction(param, self.parse_term())

    def parse_application(self):
        lhs = self.parse_atom()
        while self.current_kind() in Parser.ATOM_START:
            lhs = Application(lhs, self.parse_atom())
        return lhs

    def parse_atom(self):
        if self.current_kind() is TokenKind.LEFT_PAREN:
            return self.parse_parenthesized()
        return self.parse_identifier()

    def parse_parenthesized(self):
        self.expect(TokenKind.LEFT_PAREN)
        term = self.parse_term()
        self.expect(TokenKind.RIGHT_PAREN)
        return term

    def parse_identifier(self):
        return Identifier(self.expect(TokenKind.LOWERCASE_ID).text)

    def parse_end(self):
        """Raises UnexpectedToken if any token is left."""
        if self.current_token is not None:
            raise UnexpectedToken(self.current_token, self.source)

    def advance(self):
        self.current_token = self.lexer.next_token()

    def expect(self, kind):
        """Consumes and returns the current token if it is of the given kind, raises a ParseError otherwise."""
        token = self.current_token
        if token is None:
            raise UnexpectedEndOfInput(self.source)
        elif token.kind is not kind:
            raise UnexpectedToken(token, self.source)

        self.advance()
        return token

    def current_kind(self):
        """Kind of the lookahead token, or None at end of input."""
        return self.current_token.kind if self.current_token is not None else None


def parse(source):
    """Parses source, which must consist of exactly one term."""
    parser = Parser(source)
    term = parser.parse_term()
    parser.parse_end()
    return term
