import pytest
from moves import apply_rule, make_rule, initial_state, rule_dict, TableState, \
     ClosedState, ImplIntro, OrIntro1, OrIntro2, AndIntro, AndElim, OrElim, Assumption
from nodes import VarNode
from parser import parse_formula

A = VarNode("A")
B = VarNode("B")
G = VarNode("G")

def f(text):
    return parse_formula(text)

def test_impl_intro():
    assert apply_rule(TableState([], f("A -> B")), ImplIntro()) == [TableState([A], B)]
    assert apply_rule(TableState([B], f("A -> B -> A")), ImplIntro()) == \
           [TableState([B, A], f("B -> A"))]
    assert apply_rule(TableState([], f("A or B")), ImplIntro()) == []

def test_or_intro():
    state = TableState([G], f("A or B"))
    assert apply_rule(state, OrIntro1()) == [TableState([G], A)]
    assert apply_rule(state, OrIntro2()) == [TableState([G], B)]
    assert apply_rule(TableState([], f("A and B")), OrIntro1()) == []
    assert apply_rule(TableState([], f("A and B")), OrIntro2()) == []

def test_and_intro_branches():
    state = TableState([G], f("A and B"))
    assert apply_rule(state, AndIntro()) == [TableState([G], A), TableState([G], B)]
    assert apply_rule(TableState([], f("A -> B")), AndIntro()) == []

def test_and_elim():
    state = TableState([f("A and B")], G)
    assert apply_rule(state, AndElim(0)) == [TableState([f("A and B"), A, B], G)]
    assert apply_rule(state, AndElim(5)) == []
    assert apply_rule(state, AndElim(-1)) == []
    assert apply_rule(TableState([f("A or B")], G), AndElim(0)) == []

def test_bool_index_rejected():
    assert apply_rule(TableState([A, f("A and B")], G), AndElim(True)) == []
    assert apply_rule(TableState([G, A], A), Assumption(True)) == []
    assert apply_rule(TableState([G, f("A or B")], G), OrElim(True)) == []

def test_or_elim_branches():
    state = TableState([f("A or B")], G)
    assert apply_rule(state, OrElim(0)) == \
           [TableState([f("A or B"), A], G), TableState([f("A or B"), B], G)]
    assert apply_rule(state, OrElim(1)) == []
    assert apply_rule(TableState([f("A and B")], G), OrElim(0)) == []

def test_assumption():
    assert apply_rule(TableState([A], A), Assumption(0)) == [ClosedState()]
    assert apply_rule(TableState([A], B), Assumption(0)) == []
    assert apply_rule(TableState([], A), Assumption(0)) == []
    assert apply_rule(TableState([B, f("A or B")], f("A or B")), Assumption(1)) == [ClosedState()]

def test_closed_state_is_unchanged():
    closed = ClosedState()
    for rule in [ImplIntro(), AndIntro(), AndElim(3), Assumption(0)]:
        assert apply_rule(closed, rule) == [closed]

def test_apply_does_not_modify_state():
    hyp = f("A and B")
    state = TableState([hyp], G)
    apply_rule(state, AndElim(0))
    assert state.context == (hyp,)

def test_non_rule():
    with pytest.raises(TypeError):
        apply_rule(TableState([], A), "ImplIntro")

def test_initial_state():
    assert initial_state(A) == TableState([], A)
    assert str(initial_state(f("A -> A"))) == "|- A -> A"
    assert str(TableState([A, f("A or B")], B)) == "H0: A, H1: A or B |- B"

def test_make_rule():
    assert make_rule("ImplIntro") == ImplIntro()
    assert make_rule("OrElim", 2) == OrElim(2)
    assert make_rule("AndElim", 2) != make_rule("AndElim", 1)
    assert str(make_rule("Assumption", 1)) == "Assumption(1)"
    assert str(make_rule("OrIntro2")) == "OrIntro2"
    assert sorted(rule_dict) == sorted(["ImplIntro", "AndIntro", "OrIntro1", "OrIntro2",
                                        "Assumption", "AndElim", "OrElim"])
    with pytest.raises(KeyError):
        make_rule("Cut")
