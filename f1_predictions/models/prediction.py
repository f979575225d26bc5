from typing import Annotated, Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field

from f1_predictions.models.enums import ScoringType, parse_scoring_type


class PodiumPrediction(BaseModel):
    """A user's top three for one event (LEGACY_TOP3 seasons)"""

    scoring_type: Literal["LEGACY_TOP3"] = "LEGACY_TOP3"

    # Driver ids, may be missing before validation
    first_place_id: Optional[str] = Field(None, alias="firstPlaceId")
    second_place_id: Optional[str] = Field(None, alias="secondPlaceId")
    third_place_id: Optional[str] = Field(None, alias="thirdPlaceId")

    class Config:
        populate_by_name = True


class GridPrediction(BaseModel):
    """A user's ordered full grid for one event (FULL_GRID_DIFF seasons)"""

    scoring_type: Literal["FULL_GRID_DIFF"] = "FULL_GRID_DIFF"

    # Front of the list is the predicted winner
    rankings: Optional[List[str]] = None

    class Config:
        populate_by_name = True


Prediction = Annotated[
    Union[PodiumPrediction, GridPrediction],
    Field(discriminator="scoring_type"),
]


def parse_prediction(
    data: Mapping[str, Any],
    scoring_type: Union[ScoringType, str]
) -> Union[PodiumPrediction, GridPrediction]:
    """
    Build the prediction shape that matches the season's scoring mode.

    The season decides the shape, so a stored "scoring_type" key is ignored.
    Fields that belong to the other mode are dropped.
    """
    mode = parse_scoring_type(scoring_type)
    fields = {k: v for k, v in data.items() if k != "scoring_type"}

    if mode is ScoringType.FULL_GRID_DIFF:
        return GridPrediction(**fields)
    return PodiumPrediction(**fields)
