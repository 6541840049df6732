"""Recognition options passed to tesseract."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecognitionOptions:
    """Options for a single recognition call.

    ``config_variables`` accepts a mapping or an iterable of ``(key, value)``
    pairs and is stored as an ordered tuple of string pairs. Each pair becomes
    one ``-c key=value`` argument, in the order given.
    """

    language: str = "eng"
    dpi: int | None = None
    psm: int | None = None  # page segmentation mode
    oem: int | None = None  # OCR engine mode
    config_variables: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.language:
            raise ValueError("language must be a non-empty string")

        items = self.config_variables
        if isinstance(items, Mapping):
            items = items.items()
        pairs = tuple((str(key), str(value)) for key, value in items)
        object.__setattr__(self, "config_variables", pairs)

    def get_config_variable_args(self) -> list[str]:
        """Render config variables as ``key=value`` strings."""
        return [f"{key}={value}" for key, value in self.config_variables]

    def with_config(self, pairs: Iterable[tuple[str, str]]) -> "RecognitionOptions":
        """Return a copy with extra config variables appended."""
        return RecognitionOptions(
            language=self.language,
            dpi=self.dpi,
            psm=self.psm,
            oem=self.oem,
            config_variables=self.config_variables + tuple(pairs),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecognitionOptions":
        """Build options from a plain dict (e.g. a YAML section)."""
        return cls(
            language=data.get("language", "eng"),
            dpi=data.get("dpi"),
            psm=data.get("psm"),
            oem=data.get("oem"),
            config_variables=data.get("config_variables") or (),
        )
