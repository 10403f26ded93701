import os
from dataclasses import dataclass, field
from pathlib import Path

from letterboxed.letter_graph import parse_box


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    BOX_LAYOUT: str = "era lch yik tnp"

    MIN_WORD_LENGTH: int = 3
    MAX_CHAIN_LENGTH: int = 25
    TOP_SOLUTIONS: int = 3

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))

        # Follow an overridden BASE_DIR unless the dictionary was set directly
        if "DICTIONARY_PATH" not in os.environ:
            self.DICTIONARY_PATH = self.BASE_DIR / "words.txt"

    def box_sides(self) -> list[list[str]]:
        return parse_box(self.BOX_LAYOUT)


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through the settings API
EDITABLE_FIELDS: dict[str, type] = {
    "BOX_LAYOUT": str,
    "MIN_WORD_LENGTH": int,
    "MAX_CHAIN_LENGTH": int,
    "TOP_SOLUTIONS": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **changes) -> dict[str, str]:
    """Apply editable changes to ``cfg``; returns per-field error messages.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, value in changes.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError):
            errors[name] = f"expected {EDITABLE_FIELDS[name].__name__}, got {value!r}"
            continue
        if EDITABLE_FIELDS[name] is int and coerced < 1:
            errors[name] = "must be >= 1"
            continue
        if name == "BOX_LAYOUT" and not parse_box(coerced):
            errors[name] = "box must have at least one side"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
