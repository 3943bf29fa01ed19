"""
Base Pydantic model for cryptohash configuration sections.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CryptoHashBaseModel(BaseModel):
    """Base model for config sections loaded from TOML and the environment.

    Configuration:
        - strict off: TOML and env strings are coerced to field types
        - validate_assignment: Validate on attribute assignment
        - extra: Ignore unknown keys so newer config files still load
        - use_enum_values off: Algorithm fields keep their enum members
    """

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=False,
        revalidate_instances="never",
    )
