import logging
from nodes import AndNode, OrNode, ImpliesNode, same_tree

logger = logging.getLogger(__name__)

# Rules

class Rule:
    """A natural deduction rule. Introduction rules act on the connective at
       the top of the goal. Hypothesis rules carry the index of the hypothesis
       they act on, which is only checked when the rule is applied.
    """
    needs_index = False

    def name(self):
        return type(self).__name__

    def __str__(self):
        return self.name()

    def __repr__(self):
        return self.name()+"()"

    def __eq__(self, other):
        return type(self) == type(other)

    def __hash__(self):
        return hash(self.name())

class HypothesisRule(Rule):
    needs_index = True

    def __init__(self, index):
        self.index = index

    def __str__(self):
        return self.name()+"("+str(self.index)+")"

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        return type(self) == type(other) and self.index == other.index

    def __hash__(self):
        return hash((self.name(), self.index))

class ImplIntro(Rule):
    pass

class OrIntro1(Rule):
    pass

class OrIntro2(Rule):
    pass

class AndIntro(Rule):
    pass

class AndElim(HypothesisRule):
    pass

class OrElim(HypothesisRule):
    pass

class Assumption(HypothesisRule):
    pass

rule_dict = {
    "ImplIntro" : ImplIntro,
    "AndIntro" : AndIntro,
    "OrIntro1" : OrIntro1,
    "OrIntro2" : OrIntro2,
    "Assumption" : Assumption,
    "AndElim" : AndElim,
    "OrElim" : OrElim
}

def make_rule(name, index=0):
    """Build the rule with the given name. The index is only used by rules
       that act on a hypothesis. Raises KeyError for an unknown name.
    """
    Move = rule_dict[name]
    if Move.needs_index:
        return Move(index)
    return Move()

# Proof states

class TableState:
    """A hypothesis context, numbered from zero, together with a goal that is
       to be proved from it.
    """
    def __init__(self, context, goal):
        self.context = tuple(context)
        self.goal = goal

    def hypothesis(self, i):
        """Return hypothesis i or None if there is no such hypothesis.
        """
        if isinstance(i, int) and not isinstance(i, bool) and \
           0 <= i < len(self.context):
            return self.context[i]
        return None

    def __str__(self):
        hyps = ', '.join("H"+str(i)+": "+str(h) for i, h in enumerate(self.context))
        return (hyps+" " if hyps else "")+"|- "+str(self.goal)

    def __repr__(self):
        return "TableState(["+', '.join(repr(h) for h in self.context)+"], "+repr(self.goal)+")"

    def __eq__(self, other):
        return isinstance(other, TableState) and \
               len(self.context) == len(other.context) and \
               all(same_tree(h1, h2) for h1, h2 in zip(self.context, other.context)) and \
               same_tree(self.goal, other.goal)

    def __hash__(self):
        return hash((self.context, self.goal))

class ClosedState:
    """End marker for a branch of the proof which has been discharged.
    """
    def __str__(self):
        return "----"

    def __repr__(self):
        return "ClosedState()"

    def __eq__(self, other):
        return isinstance(other, ClosedState)

    def __hash__(self):
        return hash("----")

def initial_state(goal):
    return TableState([], goal)

def apply_rule(state, rule):
    """Apply the given rule to the given proof state. The result is the list
       of states that remain to be proved: one or two tables, or a single
       closed state. An empty list means the rule does not apply. A closed
       state is returned unchanged whatever the rule.
    """
    if isinstance(state, ClosedState):
        return [state]
    if not isinstance(rule, Rule):
        raise TypeError("not a rule: "+repr(rule))

    context = state.context
    goal = state.goal
    if isinstance(rule, ImplIntro):
        if isinstance(goal, ImpliesNode):
            return [TableState(context + (goal.left,), goal.right)]
    elif isinstance(rule, OrIntro1):
        if isinstance(goal, OrNode):
            return [TableState(context, goal.left)]
    elif isinstance(rule, OrIntro2):
        if isinstance(goal, OrNode):
            return [TableState(context, goal.right)]
    elif isinstance(rule, AndIntro):
        if isinstance(goal, AndNode):
            return [TableState(context, goal.left), TableState(context, goal.right)]
    elif isinstance(rule, AndElim):
        hyp = state.hypothesis(rule.index)
        if isinstance(hyp, AndNode):
            return [TableState(context + (hyp.left, hyp.right), goal)]
    elif isinstance(rule, OrElim):
        hyp = state.hypothesis(rule.index)
        if isinstance(hyp, OrNode):
            return [TableState(context + (hyp.left,), goal), \
                    TableState(context + (hyp.right,), goal)]
    elif isinstance(rule, Assumption):
        hyp = state.hypothesis(rule.index)
        if hyp is not None and same_tree(hyp, goal):
            return [ClosedState()]

    logger.debug("%s does not apply to %s", rule, state)
    return []
