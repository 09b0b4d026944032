"""Unit tests for the line-based prompter."""

import pytest


class TestAsk:
    def test_returns_answer(self, scripted):
        p = scripted(["  hello  "])
        assert p.ask("Greeting") == "hello"
        assert "Greeting" in p.output

    def test_blank_uses_default(self, scripted):
        p = scripted([""])
        assert p.ask("Dest", default="./tmp/project.yaml") == "./tmp/project.yaml"
        assert "[./tmp/project.yaml]" in p.output

    def test_required_reasks(self, scripted):
        p = scripted(["", "value"])
        assert p.ask("Path to credential.json") == "value"
        assert "Path to credential.json is required." in p.output

    def test_optional_blank(self, scripted):
        p = scripted([""])
        assert p.ask("Triggering job", required=False) == ""

    def test_choices_reask_with_message(self, scripted):
        p = scripted(["both", "uri"])
        value = p.ask("Mode", choices=["monolith", "uri"], message='please enter "monolith" or "uri"')
        assert value == "uri"
        assert 'please enter "monolith" or "uri"' in p.output
        assert "(monolith | uri)" in p.output

    def test_end_of_input(self, scripted):
        p = scripted([])
        with pytest.raises(EOFError):
            p.ask("Anything")


class TestConfirm:
    @pytest.mark.parametrize("answer, expected", [("y", True), ("Y", True), ("n", False), ("N", False)])
    def test_yes_no(self, scripted, answer, expected):
        assert scripted([answer]).confirm("Another? (y/n)") is expected

    def test_reasks_on_other_input(self, scripted):
        p = scripted(["yes", "", "n"])
        assert p.confirm("Another? (y/n)") is False
        assert p.output.count('please enter "y" or "n"') == 2
