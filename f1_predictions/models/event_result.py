from typing import Annotated, Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field

from f1_predictions.models.enums import ScoringType, parse_scoring_type


class PodiumResult(BaseModel):
    """Official top three of a completed event"""

    scoring_type: Literal["LEGACY_TOP3"] = "LEGACY_TOP3"

    first_place_id: Optional[str] = Field(None, alias="firstPlaceId")
    second_place_id: Optional[str] = Field(None, alias="secondPlaceId")
    third_place_id: Optional[str] = Field(None, alias="thirdPlaceId")

    class Config:
        populate_by_name = True


class GridResult(BaseModel):
    """Official full classification of a completed event"""

    scoring_type: Literal["FULL_GRID_DIFF"] = "FULL_GRID_DIFF"

    # Ordered driver ids, winner first
    results: Optional[List[str]] = None

    class Config:
        populate_by_name = True


EventResult = Annotated[
    Union[PodiumResult, GridResult],
    Field(discriminator="scoring_type"),
]


def parse_event_result(
    data: Mapping[str, Any],
    scoring_type: Union[ScoringType, str]
) -> Union[PodiumResult, GridResult]:
    """Build the result shape that matches the season's scoring mode."""
    mode = parse_scoring_type(scoring_type)
    fields = {k: v for k, v in data.items() if k != "scoring_type"}

    if mode is ScoringType.FULL_GRID_DIFF:
        return GridResult(**fields)
    return PodiumResult(**fields)
