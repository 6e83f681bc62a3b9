"""Validation options."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Union

from iscron.errors import CronOptionsError
from iscron.fields import CronField, field_order


@dataclass(frozen=True)
class CronOptions:
    """Options controlling cron validation.

    Attributes:
        seconds: Require the 6-field format with a leading seconds field.
            When False exactly 5 fields are required.
        alias: Accept JAN-DEC and SUN-SAT name aliases in the month and
            day-of-week fields.
    """

    seconds: bool = False
    alias: bool = True

    @property
    def field_count(self) -> int:
        return 6 if self.seconds else 5

    @property
    def field_order(self) -> tuple[CronField, ...]:
        return field_order(self.seconds)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CronOptions":
        """Build options from a mapping.

        Args:
            data: Mapping with optional ``seconds`` and ``alias`` keys.

        Returns:
            CronOptions instance.

        Raises:
            CronOptionsError: On unknown keys or non-boolean values.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in data.items():
            if key not in known:
                raise CronOptionsError(f"Unknown option: {key!r}", key=key)
            values[key] = _require_bool(key, value)
        return cls(**values)

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


OptionsInput = Union[CronOptions, Mapping[str, Any], None]


def _require_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise CronOptionsError(
            f"Option {key!r} must be a bool, got {type(value).__name__}",
            key=key,
        )
    return value


def resolve_options(
    options: OptionsInput = None,
    *,
    seconds: bool | None = None,
    alias: bool | None = None,
) -> CronOptions:
    """Merge an options object or mapping with keyword overrides.

    Keyword arguments that are not None take precedence over ``options``.
    """
    if options is None:
        resolved = CronOptions()
    elif isinstance(options, CronOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = CronOptions.from_dict(options)
    else:
        raise CronOptionsError(
            f"Options must be CronOptions or a mapping, got {type(options).__name__}"
        )

    overrides: dict[str, bool] = {}
    if seconds is not None:
        overrides["seconds"] = _require_bool("seconds", seconds)
    if alias is not None:
        overrides["alias"] = _require_bool("alias", alias)
    return replace(resolved, **overrides) if overrides else resolved
