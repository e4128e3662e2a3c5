from tree import ProofNode, proof_lines
from moves import ImplIntro, OrIntro1, OrIntro2, AndIntro, AndElim, OrElim, \
     Assumption, TableState
from parser import parse_formula

def test_prove_or_commutes():
    root = ProofNode.from_goal(parse_formula("A or B -> B or A"))
    assert root.apply(ImplIntro())
    (node,) = root.children
    assert node.apply(OrElim(0))
    left, right = node.children
    assert not root.proved()
    assert left.apply(OrIntro2())
    assert left.children[0].apply(Assumption(1))
    assert right.apply(OrIntro1())
    assert right.children[0].apply(Assumption(1))
    assert root.proved()
    assert root.open_goals() == []

def test_and_elim_then_and_intro():
    root = ProofNode.from_goal(parse_formula("A and B -> B and A"))
    root.apply(ImplIntro())
    node = root.children[0]
    node.apply(AndElim(0))
    node = node.children[0]
    assert node.hypothesis_count() == 3
    node.apply(AndIntro())
    assert len(root.open_goals()) == 2
    node.children[0].apply(Assumption(2))
    assert not root.proved()
    node.children[1].apply(Assumption(1))
    assert root.proved()

def test_rejected_rule_leaves_node_alone():
    root = ProofNode.from_goal(parse_formula("A -> A"))
    assert not root.apply(AndIntro())
    assert root.children == [] and root.rule is None
    assert root.open_goals() == [root]

def test_apply_replaces_children_and_undo():
    root = ProofNode.from_goal(parse_formula("A or A"))
    root.apply(OrIntro1())
    first = root.children
    root.apply(OrIntro2())
    assert root.children is not first
    assert root.rule == OrIntro2()
    assert root.undo()
    assert root.children == [] and root.rule is None
    assert not root.undo()

def test_closed_node():
    root = ProofNode.from_goal(parse_formula("A -> A"))
    root.apply(ImplIntro())
    root.children[0].apply(Assumption(0))
    closed = root.children[0].children[0]
    assert closed.is_closed()
    assert not closed.apply(ImplIntro())
    assert closed.hypothesis_count() == 0

def test_walk_and_find():
    root = ProofNode.from_goal(parse_formula("A and B"))
    root.apply(AndIntro())
    paths = [path for _, path, _ in root.walk()]
    assert paths == [(), (0,), (1,)]
    assert root.find((1,)).state == TableState([], parse_formula("B"))
    assert root.find([]) is root
    for path in [(2,), (0, 0), (-1,), (True,), ("0",)]:
        try:
            root.find(path)
        except KeyError:
            pass
        else:
            assert False, path

def test_proof_lines():
    root = ProofNode.from_goal(parse_formula("A -> A"))
    root.apply(ImplIntro())
    root.children[0].apply(Assumption(0))
    assert proof_lines(root) == [
        ((), "|- A -> A [ImplIntro]"),
        ((0,), "  H0: A |- A [Assumption(0)]"),
        ((0, 0), "    ----")]
