"""
Property-based tests for the calculator engine.

Random key sequences drive the pure engine through reachable states; a
Hypothesis state machine checks the state invariants after every step.
"""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from pocketcalc import (
    DEFAULT_STATE,
    DIVIDE_BY_ZERO_MESSAGE,
    Calculator,
    CalculatorState,
    Event,
    EventKind,
    Operator,
    append_digit,
    apply_keys,
    choose_operator,
    compute_result,
    delete_digit,
    dispatch,
)

digits = st.sampled_from(list("0123456789."))
operators = st.sampled_from(list(Operator))
keys = st.sampled_from(list("0123456789.+-*/=") + ["Backspace"])

# Key sequences without "Escape" so the error state stays reachable
reachable_states = st.lists(keys, max_size=30).map(lambda ks: apply_keys(DEFAULT_STATE, ks))

# Any prefix followed by "1 / 0 =" ends in the error state
error_states = st.lists(keys, max_size=20).map(
    lambda ks: apply_keys(DEFAULT_STATE, [*ks, "1", "/", "0", "="])
)

# Enough deletes to erase any operand reachable from 30 keys
placeholder_states = st.lists(keys, max_size=30).map(
    lambda ks: apply_keys(DEFAULT_STATE, [*ks, *["Backspace"] * 40])
)


def check_invariants(state: CalculatorState) -> None:
    current = state.current_value
    assert current != ""
    assert current.count(".") <= 1
    if current.startswith("0") and current != "0":
        assert current.startswith("0.")
    assert (state.operator is None) == (state.previous_value == "")
    if state.is_error:
        assert state.error == DIVIDE_BY_ZERO_MESSAGE
        assert current == "0"


@pytest.mark.property
class TestEngineProperties:
    """Property-based tests over reachable states."""

    @given(state=reachable_states)
    def test_reachable_states_hold_invariants(self, state: CalculatorState):
        check_invariants(state)

    @given(state=reachable_states)
    def test_clear_restores_defaults(self, state: CalculatorState):
        """Clearing from any reachable state gives exactly the default state"""
        assert dispatch(state, Event(EventKind.CLEAR)) == DEFAULT_STATE
        assert apply_keys(state, ["Escape"]) == DEFAULT_STATE
        assert Calculator(state).clear().state == DEFAULT_STATE

    @given(state=reachable_states)
    def test_single_decimal_point(self, state: CalculatorState):
        """Two decimal points in a row leave exactly one"""
        assume(not state.is_error)
        state = append_digit(append_digit(state, "."), ".")
        assert state.current_value.count(".") == 1

    @given(state=placeholder_states)
    def test_zero_on_placeholder_is_noop(self, state: CalculatorState):
        """Typing 0 on a fresh placeholder changes nothing"""
        assert state.current_value == "0"
        assert not state.overwrite
        assert append_digit(state, "0") == state

    @given(state=reachable_states)
    def test_equals_is_idempotent(self, state: CalculatorState):
        """A second "=" right after the first changes nothing"""
        once = compute_result(state)
        assert compute_result(once) == once

    @given(state=error_states, digit=digits, op=operators)
    def test_error_state_ignores_entry(self, state: CalculatorState, digit: str, op: Operator):
        """In the error state only clear and delete act"""
        assert state.is_error
        assert append_digit(state, digit) == state
        assert choose_operator(state, op) == state
        assert compute_result(state) == state
        assert delete_digit(state) == DEFAULT_STATE

    @given(left=st.integers(min_value=1, max_value=99999), op=operators)
    def test_division_by_zero_only_for_division(self, left: int, op: Operator):
        """Evaluating against a zero right operand fails only for '/'"""
        state = choose_operator(apply_keys(DEFAULT_STATE, list(str(left))), op)
        result = compute_result(state)
        assert result.is_error == (op is Operator.DIVIDE)

    @given(a=st.integers(min_value=1, max_value=9999), b=st.integers(min_value=1, max_value=9999))
    def test_integer_addition(self, a: int, b: int):
        """Typed integer sums come out exact"""
        state = apply_keys(DEFAULT_STATE, [*str(a), "+", *str(b), "="])
        assert state.current_value == str(a + b)
        assert state.history == f"{a} + {b} ="


@pytest.mark.property
@pytest.mark.slow
class CalculatorStateMachine(RuleBasedStateMachine):
    """
    Stateful testing of the engine using Hypothesis state machines.

    Random sequences of all six operations are applied to a state held by
    the machine; invariants are checked after each step.
    """

    def __init__(self) -> None:
        super().__init__()
        self.state = DEFAULT_STATE

    @invariant()
    def state_is_well_formed(self) -> None:
        check_invariants(self.state)

    @rule(digit=digits)
    def type_digit(self, digit: str) -> None:
        before = self.state
        self.state = append_digit(before, digit)
        if before.is_error:
            assert self.state == before

    @rule(op=operators)
    def pick_operator(self, op: Operator) -> None:
        before = self.state
        self.state = choose_operator(before, op)
        if before.is_error:
            assert self.state == before
        elif not self.state.is_error and self.state != before:
            assert self.state.operator is op
            assert self.state.history == f"{self.state.previous_value} {op.value}"

    @rule()
    def equals(self) -> None:
        before = self.state
        self.state = compute_result(before)
        if self.state.overwrite and not before.is_error:
            assert compute_result(self.state) == self.state

    @rule()
    def delete(self) -> None:
        before = self.state
        self.state = delete_digit(before)
        if before.is_error:
            assert self.state == DEFAULT_STATE

    @precondition(lambda self: self.state != DEFAULT_STATE)
    @rule()
    def reset(self) -> None:
        self.state = dispatch(self.state, Event(EventKind.CLEAR))
        assert self.state == DEFAULT_STATE


# Run the state machine as a pytest test
TestStateMachine = CalculatorStateMachine.TestCase
