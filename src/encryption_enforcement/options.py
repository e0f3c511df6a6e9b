"""Rule configuration shared by every encryption enforcement rule."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .errors import OptionsError

_OPTION_ALIASES = {
    "excludeResources": "exclude_resources",
    "exclude_resources": "exclude_resources",
}


@dataclass(frozen=True)
class EnforcementOptions:
    """Options accepted by rule constructors.

    ``exclude_resources`` lists node ids to skip. An id matches either the
    node itself or its immediate parent, so both a raw resource and the
    wrapper construct around it can be excluded by name.
    """

    exclude_resources: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "exclude_resources", _normalize_exclusions(self.exclude_resources)
        )

    @classmethod
    def coerce(
        cls,
        options: Union["EnforcementOptions", Mapping[str, Any], None],
    ) -> "EnforcementOptions":
        """Return ``options`` as an :class:`EnforcementOptions` instance."""

        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise OptionsError(
                f"Options must be a mapping or EnforcementOptions, got {type(options).__name__}"
            )

        resolved = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None:
                raise OptionsError(f"Unknown option {key!r}; only 'excludeResources' is supported")
            if field_name in resolved:
                raise OptionsError(f"Option {field_name!r} supplied more than once")
            resolved[field_name] = value if value is not None else ()
        return cls(**resolved)


def _normalize_exclusions(value: Optional[Sequence[Any]]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise OptionsError("'excludeResources' must be a list or tuple of resource ids")
    items = tuple(value)
    for item in items:
        if not isinstance(item, str):
            raise OptionsError(
                f"'excludeResources' entries must be strings, got {type(item).__name__}"
            )
    return items
