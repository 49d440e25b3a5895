import pytest

from memberkit.errors import AmbiguousHandlerError, NoHandlerFoundError
from memberkit.handlers import find_non_private_handler_member, invoke_delegate
from memberkit.invocation import Delegate, Invocation


class TwoHandlers:
    def first(self, value: str) -> str:
        return value

    def second(self, value: str) -> str:
        return value


class TwoDelegates(Delegate):
    def first(self) -> None:
        pass

    def second(self) -> None:
        pass


class OneEligible:
    def handle(self, value: str) -> str:
        return value.upper()

    def _helper(self):
        pass

    @staticmethod
    def build():
        pass

    @classmethod
    def create(cls):
        pass


class InheritsHandler(OneEligible):
    def _other_helper(self):
        pass


class OverridesLevel(TwoHandlers):
    def only(self, value: str) -> str:
        return value


class NoHandlers:
    def _private(self):
        pass

    @staticmethod
    def build():
        pass


class Greeting(Delegate):
    def greet(self, invocation: Invocation, name: str) -> str:
        return f"{invocation.member_name}: Hello {name}"


class PlainGreeting(Delegate):
    def greet(self, name: str) -> str:
        return f"Hello {name}"


def test_two_public_members_at_one_level_are_ambiguous():
    with pytest.raises(
        AmbiguousHandlerError,
        match=r"More than one candidate invocation handler method found: "
        r"first\(str\) -> str, second\(str\) -> str",
    ):
        find_non_private_handler_member(TwoHandlers())


def test_ambiguity_message_names_delegates():
    with pytest.raises(
        AmbiguousHandlerError,
        match=r"candidate delegate method found: first\(\), second\(\)$",
    ):
        find_non_private_handler_member(TwoDelegates())


def test_private_and_static_members_are_not_eligible():
    found = find_non_private_handler_member(OneEligible())

    assert found.name == "handle"


def test_search_continues_to_ancestors():
    found = find_non_private_handler_member(InheritsHandler())

    assert found.declaring_type is OneEligible


def test_most_derived_level_decides():
    found = find_non_private_handler_member(OverridesLevel())

    assert found.name == "only"


def test_no_eligible_member_anywhere():
    with pytest.raises(NoHandlerFoundError, match="No non-private instance method found"):
        find_non_private_handler_member(NoHandlers())


def test_lookup_is_deterministic():
    handler = OneEligible()

    assert find_non_private_handler_member(handler) == find_non_private_handler_member(handler)


def test_delegate_receives_invocation_context():
    invocation = Invocation(member_name="welcome")

    assert invoke_delegate(Greeting(), invocation, "Ada") == "welcome: Hello Ada"


def test_delegate_without_context_parameter_gets_arguments_only():
    assert invoke_delegate(PlainGreeting(), Invocation(), "Ada") == "Hello Ada"
