from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # consecutive bad moves before the round is abandoned
    max_attempts: int = Field(default=4, ge=1)
    seed: Optional[int] = None
    verbose: bool = False
