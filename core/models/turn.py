from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "assistant"]


class Turn(BaseModel):
    role: Role
    content: str

    model_config = ConfigDict(frozen=True)
