import pytest

from nlgrammar.ccg.category import (
    Atomic,
    Backward,
    Forward,
    backward,
    forward,
    n,
    n_with_number,
    np,
    s,
)
from nlgrammar.ccg.node import CCGNode
from nlgrammar.ccg.rules import (
    BackwardApplication,
    BackwardComposition,
    BackwardTypeRaising,
    ForwardApplication,
    ForwardComposition,
    ForwardTypeRaising,
    extract_category_chain,
)


def test_forward_application():
    det_node = CCGNode.leaf("the", forward(np(), n()))
    noun_node = CCGNode.leaf("cat", n())

    result = ForwardApplication().apply(det_node, noun_node, False)

    assert result is not None
    assert result.category == np()
    assert result.rule == ">"
    assert result.children == [det_node, noun_node]


def test_forward_application_mismatch():
    det_node = CCGNode.leaf("the", forward(np(), n()))
    other = CCGNode.leaf("John", np())
    assert ForwardApplication().apply(det_node, other, False) is None


def test_backward_application():
    subj_node = CCGNode.leaf("John", np())
    verb_node = CCGNode.leaf("sleeps", backward(s(), np()))

    result = BackwardApplication().apply(subj_node, verb_node, False)

    assert result is not None
    assert result.category == s()
    assert result.rule == "<"


def test_backward_application_requires_backward_functor():
    subj_node = CCGNode.leaf("John", np())
    verb_node = CCGNode.leaf("sleeps", forward(s(), np()))
    assert BackwardApplication().apply(subj_node, verb_node, False) is None


def test_forward_composition():
    vp = backward(s(), np())
    modal_node = CCGNode.leaf("will", forward(s(), vp))
    tv_node = CCGNode.leaf("chase", forward(vp, np()))

    result = ForwardComposition().apply(modal_node, tv_node, False)

    assert result is not None
    assert result.rule == ">B"
    assert result.category == forward(s(), np())


def test_forward_composition_argument_must_match_result():
    vp = backward(s(), np())
    modal_node = CCGNode.leaf("will", forward(forward(s(), vp), np()))
    tv_node = CCGNode.leaf("chase", forward(vp, np()))
    assert ForwardComposition().apply(modal_node, tv_node, False) is None


def test_backward_composition():
    left = CCGNode.leaf("a", backward(np(), n()))
    right = CCGNode.leaf("b", backward(s(), np()))

    result = BackwardComposition().apply(left, right, False)

    assert result is not None
    assert result.rule == "<B"
    assert result.category == backward(s(), n())


def test_forward_type_raising():
    np_node = CCGNode.leaf("John", np())

    result = ForwardTypeRaising([s()]).apply(np_node, np_node, False)

    assert result is not None
    assert result.rule == ">T"
    assert result.children == [np_node]
    category = result.category
    assert isinstance(category, Forward)
    assert category.result == s()
    assert isinstance(category.argument, Backward)
    assert category.argument.result == s()
    assert category.argument.argument == np()


def test_backward_type_raising():
    np_node = CCGNode.leaf("John", np())

    result = BackwardTypeRaising([s()]).apply(np_node, np_node, False)

    assert result is not None
    assert result.rule == "<T"
    assert result.category == backward(s(), forward(s(), np()))
    assert str(result.category) == "S\\S/NP"


def test_type_raising_uses_first_target_only():
    np_node = CCGNode.leaf("John", np())
    result = ForwardTypeRaising([np(), s()]).apply(np_node, np_node, False)
    assert result.category == forward(np(), backward(np(), np()))


@pytest.mark.parametrize("rule_class", [ForwardTypeRaising, BackwardTypeRaising])
def test_type_raising_without_targets(rule_class):
    np_node = CCGNode.leaf("John", np())
    assert rule_class([]).apply(np_node, np_node, False) is None


def test_application_with_features_unifies():
    det_node = CCGNode.leaf("a", forward(np(), n_with_number("sg")))
    plain = CCGNode.leaf("cat", n())

    assert ForwardApplication().apply(det_node, plain, False) is None
    result = ForwardApplication().apply(det_node, plain, True)
    assert result is not None
    assert result.category == np()


def test_application_with_features_rejects_clash():
    det_node = CCGNode.leaf("a", forward(np(), n_with_number("sg")))
    plural = CCGNode.leaf("cats", n_with_number("pl"))
    assert ForwardApplication().apply(det_node, plural, True) is None


def test_rule_names():
    assert ForwardApplication.name == "Forward Application"
    assert BackwardComposition().name == "Backward Composition"
    assert ForwardTypeRaising([s()]).name == "Forward Type Raising"


def test_extract_chain_first_level():
    category = forward(backward(s(), np()), np())
    base, arguments = extract_category_chain(category, 0, 2)
    assert base == backward(s(), np())
    assert arguments == [(True, np())]


def test_extract_chain_backward_slash():
    base, arguments = extract_category_chain(backward(s(), n()), 0, 3)
    assert base == s()
    assert arguments == [(False, n())]


def test_extract_chain_atomic_and_depth_limit():
    assert extract_category_chain(Atomic("S"), 0, 2) is None
    assert extract_category_chain(forward(s(), np()), 2, 2) is None
    assert extract_category_chain(forward(backward(s(), np()), n()), 1, 2) is None