import re
from typing import Any
from pydantic import model_validator

from shared.core.schemas import ApiModel

INVISIBLE_CHARS_PATTERN = re.compile(
    r"[\u200b-\u200f\u202a-\u202e\u2066-\u2069\ufeff]")


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blank strings into None."""

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    return value


class EmptyStringModel(ApiModel):
    """Request body whose text fields arrive trimmed, with blanks as None."""

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values)
        return values
