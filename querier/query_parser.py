"""
Query Parser

Turns a raw query line into a validated list of lowercase tokens. A query is
made of words joined by the operators 'and' and 'or':

    query       ::= andsequence ( 'or' andsequence )*
    andsequence ::= word ( ['and'] word )*

Only ASCII letters and whitespace may appear in a query. Operators may not
start or end a query, and two operators may not be adjacent.
"""
import string

from nltk.tokenize import RegexpTokenizer

from .constants import OPERATORS

LETTERS = frozenset(string.ascii_letters)
WHITESPACE = frozenset(string.whitespace)


class QuerySyntaxError(ValueError):
    """Raised when a query line does not follow the query grammar."""


class BadCharacterError(QuerySyntaxError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"Error: bad character '{char}' in query")


class LeadingOperatorError(QuerySyntaxError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Error: '{token}' cannot be first")


class TrailingOperatorError(QuerySyntaxError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Error: '{token}' cannot be last")


class AdjacentOperatorsError(QuerySyntaxError):
    def __init__(self, first, second):
        self.tokens = (first, second)
        super().__init__(f"Error: '{first}' and '{second}' cannot be adjacent")


def is_operator(token):
    """Check if a token is exactly 'and' or 'or'."""
    return token in OPERATORS


class QueryParser:
    """Tokenizes and validates boolean query lines."""
    def __init__(self):
        self.tokenizer = RegexpTokenizer(r'[a-z]+')

    def parse(self, line):
        """Clean, tokenize and validate a query line.

        Args:
            line (str): One raw line of user input.

        Returns:
            list: Lowercase tokens; empty for a blank line.

        Raises:
            QuerySyntaxError: If the line has a bad character or misplaced operator.
        """
        tokens = self.tokenize(line)
        self.validate(tokens)
        return tokens

    def tokenize(self, line):
        """Lowercase the line and split it into words, rejecting bad characters."""
        for char in line:
            if char not in LETTERS and char not in WHITESPACE:
                raise BadCharacterError(char)
        return self.tokenizer.tokenize(line.lower())

    def validate(self, tokens):
        """Check operator placement, stopping at the first violation."""
        if not tokens:
            return
        if is_operator(tokens[0]):
            raise LeadingOperatorError(tokens[0])
        if is_operator(tokens[-1]):
            raise TrailingOperatorError(tokens[-1])
        for previous, current in zip(tokens, tokens[1:]):
            if is_operator(previous) and is_operator(current):
                raise AdjacentOperatorsError(previous, current)
