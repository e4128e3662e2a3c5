import logging
from lexer import TokenType, FormulaError, tokenize
from nodes import AndNode, OrNode, ImpliesNode, VarNode, ConstNode

logger = logging.getLogger(__name__)

class ParseError(FormulaError):
    pass

# (left binding power, right binding power, node) for each binary operator.
# Implication binds its right operand more loosely than its left, so it is
# the only right associative operator.
binding_dict = {
    TokenType.AND : (10, 11, AndNode),
    TokenType.OR : (10, 11, OrNode),
    TokenType.IMPLIES : (5, 4, ImpliesNode)
}

class TokenStream:
    """Read only cursor over a list of tokens.
    """
    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0 # index of the next unread token

    def peek(self):
        """Return the next token without consuming it, or None at the end.
        """
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self):
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self):
        return self.pos == len(self.tokens)

def describe(token):
    if token.payload is not None:
        return str(token.payload)
    return token.kind.name

def parse_atom(stream):
    token = stream.next()
    if token is None:
        raise ParseError("Formula expected at end of input", stream.pos)
    if token.kind == TokenType.ID:
        return VarNode(token.payload)
    elif token.kind == TokenType.CONST:
        return ConstNode(token.payload)
    raise ParseError("Unexpected "+describe(token)+" at token "+str(stream.pos), \
                     stream.pos - 1)

def parse_binary(stream, power, left):
    """Precedence climbing. Extend the tree left with operators whose left
       binding power is at least the given power. The right operand of each
       operator is parsed at that operator's right binding power.
    """
    while True:
        token = stream.peek()
        if token is None or token.kind not in binding_dict:
            return left
        lp, rp, Node = binding_dict[token.kind]
        if lp < power:
            return left
        stream.next()
        right = parse_binary(stream, rp, parse_atom(stream))
        left = Node(left, right)

def parse(tokens):
    """Turn a list of tokens into a formula tree, raising ParseError if the
       tokens do not form exactly one formula.
    """
    stream = TokenStream(tokens)
    tree = parse_binary(stream, 0, parse_atom(stream))
    if not stream.at_end():
        token = stream.peek()
        raise ParseError("Extra "+describe(token)+" after formula at token "+ \
                         str(stream.pos + 1), stream.pos)
    return tree

def parse_formula(string):
    return parse(tokenize(string))

def to_ast(string):
    """Parse the given string for display. Returns (tree, "") on success and
       (None, message) if the string is not a formula.
    """
    try:
        tree = parse_formula(string)
        text = str(tree) # trees too deep to render are rejected too
    except FormulaError as inst:
        logger.debug("unable to parse %r: %s", string, inst.message)
        return None, inst.message
    except RecursionError:
        logger.debug("formula too deeply nested: %.40r...", string)
        return None, "Formula too deeply nested"
    logger.debug("parsed %s", text)
    return tree, ""
