"""Server settings record.

Settings arrive from collaborators as loose mappings (a stored guild config,
a form mid-edit) using the game's camelCase option names. Missing or null
options fall back to their defaults instead of failing, and unknown options
are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ServerSettings(BaseModel):
    """Server-wide speed and spoilage options that shape every calculation."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    consumption_speed: float = Field(1.0, alias="consumptionSpeed")
    maturation_speed: float = Field(1.0, alias="maturationSpeed")
    hatch_speed: float = Field(1.0, alias="hatchSpeed")
    loss_factor: float = Field(0.0, alias="lossFactor")  # Percent surcharge on food totals
    gen2_hatch_effect: bool = Field(False, alias="gen2HatchEffect")
    gen2_growth_effect: bool = Field(False, alias="gen2GrowthEffect")
    consumables_spoil_time: float = Field(1.0, alias="consumablesSpoilTime")
    stack_multiplier: float = Field(1.0, alias="stackMultiplier")
    nursing_multiplier: float = Field(1.0, alias="nursingMultiplier")
    use_stasis_mode: bool = Field(False, alias="useStasisMode")

    @model_validator(mode="before")
    @classmethod
    def _drop_null_options(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("nursing_multiplier")
    @classmethod
    def _nursing_defaults_to_one(cls, value: float) -> float:
        # An unset or zeroed nursing bonus means "no bonus", never "no food value".
        return value if value > 0 else 1.0

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "ServerSettings":
        """Build settings from a camelCase or snake_case mapping."""
        return cls.model_validate(dict(raw or {}))

    def with_overrides(self, **changes: Any) -> "ServerSettings":
        """Return a validated copy with some options replaced."""
        return self.model_validate({**self.model_dump(), **changes})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the game's camelCase option names."""
        return self.model_dump(by_alias=True)


DEFAULT_SETTINGS = ServerSettings()

SettingsLike = Union[ServerSettings, Mapping[str, Any], None]


def resolve_settings(settings: SettingsLike) -> ServerSettings:
    """Accept a settings record, a raw mapping or None (defaults)."""
    if settings is None:
        return DEFAULT_SETTINGS
    if isinstance(settings, ServerSettings):
        return settings
    return ServerSettings.from_mapping(settings)
