# tests/property/test_directive_lifecycle_state_machine.py
"""Property-based stateful tests for the directive lifecycle.

States:
- UNINITIALIZED: constructed, not yet configured
- READY: configured, accepts batches
- DESTROYED: released, terminal

Key Invariants:
1. execute() is only accepted in READY
2. initialize() is only accepted once, from UNINITIALIZED
3. destroy() is accepted from every state and is final
4. A directive never rests in EXECUTING between calls
"""

import hypothesis.strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from tests.property.settings import STATE_MACHINE_SETTINGS
from wrangler.contracts import DirectiveLifecycleError, DirectiveState, ExecutorContext, Row
from wrangler.core.invocation import parse_invocation
from wrangler.directives.extract_xpath import XPathExtractor

CTX = ExecutorContext(run_id="state-machine", environment="testing")
ARGUMENTS = parse_invocation("extract-xpath '/a/b/text()' :payload :b", XPathExtractor.define())


class DirectiveLifecycleStateMachine(RuleBasedStateMachine):
    """Drive a real directive with arbitrary call sequences and track the expected state."""

    def __init__(self) -> None:
        super().__init__()
        self.directive = XPathExtractor()
        self.expected = DirectiveState.UNINITIALIZED

    @rule()
    def initialize(self) -> None:
        if self.expected is DirectiveState.UNINITIALIZED:
            self.directive.initialize(ARGUMENTS)
            self.expected = DirectiveState.READY
        else:
            try:
                self.directive.initialize(ARGUMENTS)
            except DirectiveLifecycleError:
                pass
            else:
                raise AssertionError(f"initialize() accepted in state {self.expected}")

    @rule(text=st.sampled_from(["x", "y", ""]))
    def execute(self, text: str) -> None:
        rows = [Row({"payload": f"<a><b>{text}</b></a>"})]
        if self.expected is DirectiveState.READY:
            self.directive.execute(rows, CTX)
            if text:
                assert rows[0]["b"] == text
            else:
                assert "b" not in rows[0]
        else:
            try:
                self.directive.execute(rows, CTX)
            except DirectiveLifecycleError:
                pass
            else:
                raise AssertionError(f"execute() accepted in state {self.expected}")

    @rule()
    def destroy(self) -> None:
        self.directive.destroy()
        self.expected = DirectiveState.DESTROYED

    @invariant()
    def state_matches_model(self) -> None:
        assert self.directive.state is self.expected

    @invariant()
    def never_rests_in_executing(self) -> None:
        assert self.directive.state is not DirectiveState.EXECUTING


TestDirectiveLifecycleStateMachine = DirectiveLifecycleStateMachine.TestCase
TestDirectiveLifecycleStateMachine.settings = STATE_MACHINE_SETTINGS
