"""Request model for the at-birth trait entry point."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from heritage.exceptions import BreedingValidationError


class BreedingRequest(BaseModel):
    """Breeding data for one foal.

    Accepts the workflow's camelCase keys (``sireId``, ``damId``,
    ``mareStress``, ``feedQuality``) as well as the field names. Both ids
    are optional here so that their absence is reported by the engine with
    its own message; stress and feed fall back to the mare's record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    sire_id: Optional[int] = Field(default=None, alias="sireId")
    dam_id: Optional[int] = Field(default=None, alias="damId")
    mare_stress: Optional[float] = Field(default=None, alias="mareStress", allow_inf_nan=False)
    feed_quality: Optional[float] = Field(default=None, alias="feedQuality", allow_inf_nan=False)

    @property
    def has_parents(self) -> bool:
        return self.sire_id is not None and self.dam_id is not None


def coerce_breeding_request(
    breeding_data: Union[BreedingRequest, Mapping[str, Any], None],
) -> BreedingRequest:
    """Validate raw breeding data into a BreedingRequest.

    Raises:
        BreedingValidationError: If the data is not a mapping or has
            malformed values
    """
    if isinstance(breeding_data, BreedingRequest):
        return breeding_data
    if breeding_data is None:
        return BreedingRequest()
    if not isinstance(breeding_data, Mapping):
        raise BreedingValidationError(
            f"Breeding data must be a mapping, got {type(breeding_data).__name__}"
        )
    try:
        return BreedingRequest.model_validate(dict(breeding_data))
    except PydanticValidationError as e:
        raise BreedingValidationError(f"Invalid breeding data: {e}") from e
