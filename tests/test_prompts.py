"""Unit tests for the choice providers (express_scaffold.prompts)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from express_scaffold.errors import InvalidParameterError
from express_scaffold.prompts import (
    Question,
    QuestionKind,
    RichChoiceProvider,
    StaticChoiceProvider,
    non_empty,
)


DB = Question(
    key="db_type",
    prompt="Choose a database type",
    kind=QuestionKind.SINGLE_CHOICE,
    options=("MongoDB", "MySQL"),
)
NAME = Question(
    key="model_name",
    prompt="Enter the model name",
    validator=non_empty("Model name cannot be empty."),
)


class TestNonEmpty:
    @pytest.mark.unit
    def test_accepts_text(self):
        assert non_empty("nope")("User") is True

    @pytest.mark.unit
    def test_rejects_blank(self):
        assert non_empty("nope")("   ") == "nope"


class TestStaticChoiceProvider:
    @pytest.mark.unit
    def test_answers_in_order(self):
        answers = StaticChoiceProvider({"db_type": "MySQL", "model_name": "User"}).ask([DB, NAME])
        assert answers == {"db_type": "MySQL", "model_name": "User"}

    @pytest.mark.unit
    def test_choice_normalised(self):
        answers = StaticChoiceProvider({"db_type": "mongodb"}).ask([DB])
        assert answers["db_type"] == "MongoDB"

    @pytest.mark.unit
    def test_invalid_choice(self):
        with pytest.raises(InvalidParameterError, match="choose one of MongoDB, MySQL"):
            StaticChoiceProvider({"db_type": "Redis"}).ask([DB])

    @pytest.mark.unit
    def test_validator_failure(self):
        with pytest.raises(InvalidParameterError, match="Model name cannot be empty."):
            StaticChoiceProvider({"model_name": ""}).ask([NAME])

    @pytest.mark.unit
    def test_missing_answer(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            StaticChoiceProvider({}).ask([NAME])
        assert exc_info.value.parameter == "model_name"

    @pytest.mark.unit
    def test_none_values_ignored(self):
        provider = StaticChoiceProvider({"db_type": None, "model_name": "User"})
        assert "db_type" not in provider.answers

    @pytest.mark.unit
    def test_free_text_is_stripped(self):
        assert StaticChoiceProvider({"model_name": " User "}).ask([NAME]) == {"model_name": "User"}


class TestRichChoiceProvider:
    @pytest.mark.unit
    def test_prompts_for_everything(self):
        with patch("express_scaffold.prompts.Prompt.ask", side_effect=["MySQL", "Order"]) as ask:
            answers = RichChoiceProvider().ask([DB, NAME])

        assert answers == {"db_type": "MySQL", "model_name": "Order"}
        first_call = ask.call_args_list[0]
        assert first_call.args == ("Choose a database type",)
        assert first_call.kwargs["choices"] == ["MongoDB", "MySQL"]

    @pytest.mark.unit
    def test_reprompts_until_valid(self):
        with patch("express_scaffold.prompts.Prompt.ask", side_effect=["", "  ", "User"]) as ask, \
                patch("express_scaffold.prompts.print_error") as print_error:
            answers = RichChoiceProvider().ask([NAME])

        assert answers == {"model_name": "User"}
        assert ask.call_count == 3
        assert print_error.call_count == 2
        print_error.assert_called_with("Model name cannot be empty.")

    @pytest.mark.unit
    def test_preset_skips_prompt(self):
        with patch("express_scaffold.prompts.Prompt.ask", side_effect=["Order"]) as ask:
            answers = RichChoiceProvider({"db_type": "mysql"}).ask([DB, NAME])

        assert answers == {"db_type": "MySQL", "model_name": "Order"}
        assert ask.call_count == 1

    @pytest.mark.unit
    def test_invalid_preset_raises(self):
        with patch("express_scaffold.prompts.Prompt.ask") as ask:
            with pytest.raises(InvalidParameterError):
                RichChoiceProvider({"model_name": ""}).ask([NAME])
        ask.assert_not_called()
