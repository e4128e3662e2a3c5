from collections import namedtuple
from enum import Enum
from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor
from parsimonious import exceptions
import logging

logger = logging.getLogger(__name__)

# FORALL, EXISTS, NOT, IFF and COL are lexed but no grammar rule consumes them
TokenType = Enum('TokenType', ['FORALL', 'EXISTS', 'AND', 'OR', 'NOT', \
                 'IMPLIES', 'IFF', 'LP', 'RP', 'COL', 'ID', 'CONST'])

Token = namedtuple('Token', ['kind', 'payload'], defaults=[None])

lexicon = Grammar(
    r"""
    tokens = token*
    token = space / implies / lparen / rparen / colon / word / numeral
    implies = "->"
    lparen = "("
    rparen = ")"
    colon = ":"
    word = ~"[A-Za-z][A-Za-z0-9]*"
    numeral = ~"[0-9]+"
    space = ~" +"
    """)

# "iff" is not a keyword, it lexes as an identifier
keyword_dict = {
    "and" : TokenType.AND,
    "or" : TokenType.OR,
    "not" : TokenType.NOT,
    "forall" : TokenType.FORALL,
    "exists" : TokenType.EXISTS
}

class FormulaError(Exception):
    """Raised when a formula cannot be read. The position pos is a column for
       lexical errors and a token index for parse errors.
    """
    def __init__(self, message, pos=-1):
        super().__init__(message)
        self.message = message
        self.pos = pos

class LexError(FormulaError):
    pass

class TokenVisitor(NodeVisitor):
    def generic_visit(self, node, visited_children):
        """ Generic visit method. """
        return visited_children or node
    def visit_tokens(self, node, visited_children):
        return [t for t in visited_children if t is not None]
    def visit_token(self, node, visited_children):
        return visited_children[0]
    def visit_space(self, node, visited_children):
        return None
    def visit_implies(self, node, visited_children):
        return Token(TokenType.IMPLIES)
    def visit_lparen(self, node, visited_children):
        return Token(TokenType.LP)
    def visit_rparen(self, node, visited_children):
        return Token(TokenType.RP)
    def visit_colon(self, node, visited_children):
        return Token(TokenType.COL)
    def visit_word(self, node, visited_children):
        if node.text in keyword_dict:
            return Token(keyword_dict[node.text])
        return Token(TokenType.ID, node.text)
    def visit_numeral(self, node, visited_children):
        return Token(TokenType.CONST, int(node.text))

def tokenize(string):
    """Convert the given string into a list of tokens in the order they
       appear. Raises LexError at the first character that does not start a
       token, including a '-' that is not followed by '>'.
    """
    try:
        ast = lexicon.parse(string)
    except exceptions.ParseError as inst: # includes IncompleteParseError
        index = inst.pos if inst.pos >= 0 else 0
        logger.debug("lexing failed at column %d of %r", index, string)
        raise LexError("Unexpected character at column "+str(index + 1), index) from inst
    return TokenVisitor().visit(ast)
