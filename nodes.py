def same_tree(tree1, tree2):
    """Structural equality of formula trees. Connectives must match and have
       structurally equal children, atoms must have the same name or value.
    """
    if type(tree1) != type(tree2):
        return False
    if isinstance(tree1, LRNode):
        return same_tree(tree1.left, tree2.left) and \
               same_tree(tree1.right, tree2.right)
    elif isinstance(tree1, VarNode):
        return tree1.name() == tree2.name()
    elif isinstance(tree1, ConstNode):
        return tree1.value == tree2.value
    return False

# Common class for all leaf nodes, i.e. nodes containing no formula children

class LeafNode:
    def __eq__(self, other):
        return same_tree(self, other)

    def __hash__(self):
        return hash(repr(self))

# Common class for all nodes with a left and right child. Nodes are never
# modified once built, so subtrees may be shared between proof states.

class LRNode:
    connective = None # surface syntax of the operator

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def __str__(self):
        return str(self.left)+" "+self.connective+" "+str(self.right)

    def __repr__(self):
        return repr(self.left)+" "+self.connective+" "+repr(self.right)

    def __eq__(self, other):
        return same_tree(self, other)

    def __hash__(self):
        return hash((type(self).__name__, hash(self.left), hash(self.right)))

# AST Nodes

class VarNode(LeafNode):
    def __init__(self, name):
        self._name = name

    def name(self):
        return self._name

    def __str__(self):
        return self._name

    def __repr__(self):
        return self._name

class ConstNode(LeafNode):
    def __init__(self, value):
        self.value = int(value)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return str(self.value)

class AndNode(LRNode):
    connective = "and"

class OrNode(LRNode):
    connective = "or"

class ImpliesNode(LRNode):
    connective = "->"
