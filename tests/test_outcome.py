from arcane_mcp.client import ArcaneAPIError
from arcane_mcp.core.outcome import ToolOutcome, error_outcome, success_outcome
from arcane_mcp.resolve import AmbiguousResolutionError, MissingIdentifierError


def test_api_error_renders_detail_message():
    outcome = error_outcome(ArcaneAPIError(404, "Environment not found"))
    assert outcome == ToolOutcome(text="Error: Environment not found", is_error=True)


def test_resolution_error_renders_the_same_way():
    outcome = error_outcome(
        AmbiguousResolutionError(
            "Multiple environments found with name 'app'.", query="app", candidates=["a"]
        )
    )
    assert outcome.is_error is True
    assert outcome.text == "Error: Multiple environments found with name 'app'."


def test_generic_error_with_empty_message_uses_type_name():
    assert error_outcome(RuntimeError()).text == "Error: RuntimeError"


def test_error_outcome_to_call_tool_result():
    result = error_outcome(
        MissingIdentifierError("Either stack_id or stack_name must be provided")
    ).to_call_tool_result()
    assert result.isError is True
    assert result.content[0].type == "text"
    assert result.content[0].text == (
        "Error: Either stack_id or stack_name must be provided"
    )


def test_success_outcome_to_call_tool_result():
    result = success_outcome("Arcane version: 1.0").to_call_tool_result()
    assert result.isError is False
    assert result.content[0].text == "Arcane version: 1.0"
