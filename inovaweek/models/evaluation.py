from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Evaluation(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: Optional[Union[int, float]] = Field(default=None, alias="Nota")
