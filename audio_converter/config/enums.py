"""Configuration enums for Audio Converter."""

from enum import Enum


class OutputFormat(str, Enum):
    """Numeric representation of the emitted sample array."""

    NARROW_FLOAT = "f32"
    WIDE_FLOAT = "f64"
    INT16 = "i16"
    INT32 = "i32"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value

    @property
    def is_integer(self) -> bool:
        """Return True for the fixed-point formats."""
        return self in (OutputFormat.INT16, OutputFormat.INT32)

    @classmethod
    def parse(cls, value: "str | OutputFormat") -> "OutputFormat":
        """Resolve a format from its value ("i16") or member name ("INT16"), any case."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Invalid output format: {value} (expected one of {choices})") from None
