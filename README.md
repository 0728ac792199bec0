# nlgrammar

Building blocks for Combinatory Categorial Grammar (CCG). The package has
categories with morphosyntactic feature structures, feature unification, a
lexicon, type registries, parse-tree nodes, and the combinatory rules. These
rules are forward and backward application, composition and type-raising.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Categories

`nlgrammar.ccg.category` defines `Atomic`, `Forward` (`X/Y`) and `Backward`
(`X\Y`), all subclasses of `CCGCategory`. It also provides these constructors:
`atomic`, `forward`, `backward`, `s`, `np`, `n`, `n_with_number`,
`np_with_features` and `s_with_agreement`.

```python
from nlgrammar.ccg.category import s, np, backward

iv = backward(s(), np())
tv = backward(iv, np())
print(iv, tv)          # S\NP (S\NP)\NP
```

`CCGCategory.unify` returns the unified category, or `None` if the two
categories clash. Two atomic categories unify when their names are equal and
their feature structures unify. Two slashed categories unify when they have
the same slash and both of their parts unify.

## Combining nodes with rules

`nlgrammar.ccg.node.CCGNode` is a derivation node. It is either a leaf that
holds a word, or an internal node that records the rule which produced it.
The rule classes in `nlgrammar.ccg.rules` each have an
`apply(left, right, use_features)` method. It returns a new node, or `None`
when the rule does not apply. When `use_features` is true, categories are
matched by unification; otherwise they must be equal.

```python
from nlgrammar.ccg.category import s, np, n, forward, backward
from nlgrammar.ccg.node import CCGNode
from nlgrammar.ccg.rules import ForwardApplication, BackwardApplication

the = CCGNode.leaf("the", forward(np(), n()))
cat = CCGNode.leaf("cat", n())
sleeps = CCGNode.leaf("sleeps", backward(s(), np()))

subject = ForwardApplication().apply(the, cat, False)
sentence = BackwardApplication().apply(subject, sleeps, False)
print(sentence)
```

prints

```
<[S]
  >[NP]
    the[NP/N]
    cat[N]
  sleeps[S\NP]
```

The available rules are:

- `ForwardApplication` (`>`)
- `BackwardApplication` (`<`)
- `ForwardComposition` (`>B`)
- `BackwardComposition` (`<B`)
- `ForwardTypeRaising` (`>T`)
- `BackwardTypeRaising` (`<T`)

The two type-raising rules raise the left node over the first category in
their `targets` list, and they ignore the right node.
`extract_category_chain` splits a functor category into its result and its
list of slashed arguments.

## Features

`nlgrammar.features` provides `FeatureValue`, which can be unspecified,
atomic, a set, complex or a variable. It also provides `FeatureStructure`, the
module-level `values_unify` and `unify_values`, and a `FeatureRegistry` of
permitted feature values.

```python
from nlgrammar.features import FeatureStructure, FeatureValue

sg = FeatureStructure.with_feature("num", FeatureValue.atomic("sg"))
either = FeatureStructure.with_feature("num", FeatureValue.set_of(["sg", "pl"]))
print(either.unify(sg))   # [num=sg]
print(sg.unify(FeatureStructure.with_feature("num", "pl")))   # None
```

## Lexicon and registries

- `nlgrammar.lexicon.Lexicon` maps each word to a set of categories. Its
  methods are `add`, `get_categories`, `has_category`, `remove`,
  `remove_category`, `clear` and `words`. It also supports `in`, `len()`, and
  iteration over `(word, categories)` pairs.
- `nlgrammar.registry.AtomicTypeRegistry` records atomic type names such as
  `S` and `NP`. `Registry` is a generic registry for any hashable element.
- `nlgrammar.base` holds the abstract interfaces `Category`,
  `GrammarFeature`, `ParseNode` and `Parser`.

## What this package does not do

There is no sentence parser. Nothing here takes a whole sentence, looks its
words up in a lexicon and searches for a derivation. Applying the rules to
adjacent nodes is up to the caller. The package defines no exception types of
its own, and it has no command-line program.