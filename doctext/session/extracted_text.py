from doctext.postprocess.transforms import collapse_whitespace, to_power_case, to_uppercase


class ExtractedText:
    """The mutable working text shown to the user after an extraction."""

    def __init__(self, value: str = "") -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def replace(self, value: str) -> None:
        self._value = value

    def clear(self) -> None:
        self._value = ""

    def apply_uppercase(self) -> str:
        self._value = to_uppercase(self._value)
        return self._value

    def apply_power_case(self) -> str:
        self._value = to_power_case(self._value)
        return self._value

    def collapse_whitespace(self) -> str:
        self._value = collapse_whitespace(self._value)
        return self._value

    def __str__(self) -> str:
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)
