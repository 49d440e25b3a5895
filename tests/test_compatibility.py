import pytest

from memberkit.compatibility import (
    accepts_argument_types,
    compatible,
    exactly_equivalent,
    has_more_specific_types,
    matches_parameter_types,
)
from memberkit.kinds import (
    PRIMITIVE_TO_BOXED,
    BooleanKind,
    Integer,
    IntKind,
    Long,
    LongKind,
    Primitive,
    wrapped_if_primitive,
)


class Animal:
    pass


class Dog(Animal):
    pass


@pytest.mark.parametrize("primitive,boxed", PRIMITIVE_TO_BOXED.items())
def test_primitive_and_boxed_are_exactly_equivalent_both_ways(primitive, boxed):
    assert exactly_equivalent(primitive, boxed)
    assert exactly_equivalent(boxed, primitive)


def test_distinct_primitive_kinds_are_never_equivalent():
    kinds = list(PRIMITIVE_TO_BOXED)
    for first in kinds:
        for second in kinds:
            if first is not second:
                assert not exactly_equivalent(first, second)


def test_primitive_is_not_equivalent_to_another_kinds_boxed_type():
    assert not exactly_equivalent(IntKind, Long)
    assert not exactly_equivalent(LongKind, Integer)


def test_primitive_kinds_cannot_be_instantiated():
    with pytest.raises(TypeError):
        IntKind()
    assert issubclass(BooleanKind, Primitive)


def test_compatible_accepts_subclasses():
    assert compatible(Animal, Dog)
    assert compatible(object, Dog)
    assert not compatible(Dog, Animal)


def test_compatible_treats_primitive_kinds_as_their_boxed_type_only():
    assert compatible(IntKind, Integer)
    assert compatible(Integer, IntKind)
    assert not compatible(IntKind, int)
    assert not compatible(object, IntKind)


def test_matching_starts_at_first_real_parameter():
    declared = (str, IntKind)

    assert matches_parameter_types(declared, (Integer,), 1)
    assert not matches_parameter_types(declared, (int,), 1)
    assert accepts_argument_types((str, Animal), (Dog,), 1)
    assert not matches_parameter_types((str, Animal), (Dog,), 1)


def test_more_specific_when_every_difference_narrows():
    assert has_more_specific_types((Dog, str), (Animal, str))
    assert not has_more_specific_types((Animal, str), (Dog, str))


def test_not_more_specific_when_differences_pull_both_ways():
    assert not has_more_specific_types((Dog, object), (Animal, str))
    assert not has_more_specific_types((Animal, str), (Dog, object))


def test_identical_or_boxed_vectors_are_not_more_specific():
    assert not has_more_specific_types((Dog,), (Dog,))
    assert not has_more_specific_types((IntKind,), (Integer,))
    assert not has_more_specific_types((Integer,), (IntKind,))
    assert wrapped_if_primitive(IntKind) is Integer


def test_vectors_of_different_arity_are_incomparable():
    assert not has_more_specific_types((Dog,), (Animal, Animal))
