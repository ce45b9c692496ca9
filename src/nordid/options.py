"""
Parser options: which numbering schemes may be accepted.

Options accept snake_case names or the camelCase names used by other
personnummer libraries (allowCoordinationNumber and so on). Unknown keys
produce a warning and are ignored.
"""

import warnings
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from nordid.config import Settings, settings as default_settings
from nordid.errors import TypeMismatchError
from nordid.models import Scheme

SCHEME_OPTIONS = {
    Scheme.PERSONAL_IDENTITY_NUMBER: "allow_personal_identity_number",
    Scheme.INTERIM_NUMBER: "allow_interim_number",
    Scheme.T_NUMBER: "allow_t_number",
    Scheme.VGR_RESERVE_NUMBER: "allow_vgr_reserve_number",
    Scheme.SLL_RESERVE_NUMBER: "allow_sll_reserve_number",
    Scheme.RVB_RESERVE_NUMBER: "allow_rvb_reserve_number",
    Scheme.NORWEGIAN_BIRTH_NUMBER: "allow_norwegian_birth_number",
    Scheme.DANISH_CPR_NUMBER: "allow_danish_cpr_number",
}


def _warn_unknown(keys: list[str]) -> None:
    # stacklevel 3 points past the Options method to its caller
    if keys:
        warnings.warn(
            f"Unknown option(s) ignored: {', '.join(keys)}",
            UserWarning,
            stacklevel=3,
        )


class Options(BaseModel):
    """Scheme toggles. Immutable once built."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    allow_personal_identity_number: bool = Field(default=True)
    allow_coordination_number: bool = Field(default=True)
    allow_t_number: bool = Field(default=True)
    allow_vgr_reserve_number: bool = Field(default=True)
    allow_sll_reserve_number: bool = Field(default=True)
    allow_rvb_reserve_number: bool = Field(default=True)
    allow_norwegian_birth_number: bool = Field(default=True)
    allow_danish_cpr_number: bool = Field(default=True)
    allow_interim_number: bool = Field(default=False)

    def __init__(self, **data: Any) -> None:
        _warn_unknown(type(self).unknown_keys(data))
        super().__init__(**data)

    @classmethod
    def unknown_keys(cls, data: Mapping[str, Any]) -> list[str]:
        """Keys of data that name no option, in either spelling."""
        known = set(cls.model_fields) | {to_camel(name) for name in cls.model_fields}
        return sorted(str(key) for key in data if key not in known)

    @model_validator(mode="before")
    @classmethod
    def drop_unknown_keys(cls, data: Any) -> Any:
        """Discard keys that name no option. Callers warn about them."""
        if not isinstance(data, Mapping):
            return data
        unknown = set(cls.unknown_keys(data))
        return {key: value for key, value in data.items() if str(key) not in unknown}

    @classmethod
    def coerce(cls, value: Union["Options", Mapping[str, Any], None]) -> "Options":
        """Build Options from None, a mapping, or an existing instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            _warn_unknown(cls.unknown_keys(value))
            try:
                return cls.model_validate(dict(value))
            except ValidationError as e:
                raise TypeMismatchError(f"Invalid option value: {e}") from e
        raise TypeMismatchError(
            f"Options must be a mapping or Options, got {type(value).__name__}"
        )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Options":
        """Options with the defaults configured in the environment."""
        config = config or default_settings
        return cls.model_validate(config.scheme_toggles)

    def allows(self, scheme: Scheme, coordination: bool = False) -> bool:
        """
        Check whether a number of the given scheme may be accepted.

        Coordination numbers are governed by allow_coordination_number alone
        when they are plain numbers, and need both toggles for interim numbers.
        """
        if scheme is Scheme.PERSONAL_IDENTITY_NUMBER and coordination:
            return self.allow_coordination_number
        allowed = getattr(self, SCHEME_OPTIONS[scheme])
        if coordination:
            return allowed and self.allow_coordination_number
        return allowed
