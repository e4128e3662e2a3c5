from moves import apply_rule, initial_state, ClosedState

class ProofNode:
    """Used for building the tree of proof states. Each node holds a state and
       the nodes for the states produced by the last rule accepted at it, all
       of which must be proved for the node to be proved.
    """
    def __init__(self, state):
        self.state = state
        self.children = [] # nodes for the states the last rule produced
        self.rule = None # the rule that produced the children

    @classmethod
    def from_goal(cls, goal):
        return cls(initial_state(goal))

    def is_closed(self):
        return isinstance(self.state, ClosedState)

    def apply(self, rule):
        """Apply the given rule at this node, replacing any existing children.
           Returns False and leaves the node as it was if the rule does not
           apply. Closed nodes accept no rules.
        """
        if self.is_closed():
            return False
        states = apply_rule(self.state, rule)
        if not states:
            return False
        self.children = [ProofNode(s) for s in states]
        self.rule = rule
        return True

    def undo(self):
        """Discard the children of this node. Returns whether there were any.
        """
        if not self.children:
            return False
        self.children = []
        self.rule = None
        return True

    def proved(self):
        if self.is_closed():
            return True
        if not self.children:
            return False
        return all(child.proved() for child in self.children)

    def walk(self, depth=0, path=()):
        """Generate (depth, path, node) for this node and its descendants in
           pre-order, where path is the tuple of child indices from the root.
        """
        yield depth, path, self
        for i, child in enumerate(self.children):
            yield from child.walk(depth + 1, path + (i,))

    def find(self, path):
        node = self
        for i in path:
            if not isinstance(i, int) or isinstance(i, bool) or \
               i < 0 or i >= len(node.children):
                raise KeyError(tuple(path))
            node = node.children[i]
        return node

    def open_goals(self):
        return [node for _, _, node in self.walk() \
                     if not node.children and not node.is_closed()]

    def hypothesis_count(self):
        if self.is_closed():
            return 0
        return len(self.state.context)

    def __str__(self):
        if self.rule is None:
            return str(self.state)
        return str(self.state)+" ["+str(self.rule)+"]"

def proof_lines(root, indent=2):
    """Return a list of (path, text) pairs, one per node of the proof tree in
       pre-order, with the text indented by depth.
    """
    return [(path, ' '*(indent*depth)+str(node)) for depth, path, node in root.walk()]
