"""NormalizationOptions for line comparison.

NormalizationOptions is a frozen (immutable) dataclass holding the three
independent switches that decide how a raw line is turned into its
normalized key.  Every combination of the three is valid.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

__all__ = ["NormalizationOptions"]


@dataclass(frozen=True, slots=True)
class NormalizationOptions:
    """Immutable normalization settings for a comparison.

    Attributes:
        case_sensitive: When False, lines are lowercased before comparing.
            Default False.
        ignore_begin_end_spaces: When True, leading and trailing whitespace
            is stripped before comparing.  Default True.
        ignore_extra_spaces: When True, every run of whitespace inside a line
            is collapsed to a single space before comparing.  Default False.
    """

    case_sensitive: bool = False
    ignore_begin_end_spaces: bool = True
    ignore_extra_spaces: bool = False

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                msg = f"{field.name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)
