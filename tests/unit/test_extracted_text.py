from doctext.session.extracted_text import ExtractedText


class TestExtractedText:
    def test_starts_empty(self) -> None:
        text = ExtractedText()
        assert text.value == ""
        assert not text

    def test_transforms_mutate_in_place(self) -> None:
        text = ExtractedText("hello   big\nworld")

        text.collapse_whitespace()
        text.apply_power_case()

        assert text.value == "Hello Big World"

    def test_uppercase_returns_new_value(self) -> None:
        text = ExtractedText("abc")
        assert text.apply_uppercase() == "ABC"
        assert str(text) == "ABC"

    def test_clear_and_replace(self) -> None:
        text = ExtractedText("old")
        text.clear()
        assert text.value == ""
        text.replace("new")
        assert text.value == "new"

    def test_transforms_on_empty_text_are_noops(self) -> None:
        text = ExtractedText()
        text.apply_uppercase()
        text.apply_power_case()
        text.collapse_whitespace()
        assert text.value == ""
