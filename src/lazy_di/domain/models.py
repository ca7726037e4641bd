from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class Registration(BaseModel):
    """Value object representing one entry of the resolver table.

    Attributes:
        name: The dependency name.
        factory: Function that receives the resolution context and returns the value.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="The name the dependency is registered under.")
    factory: Callable[..., Any] = Field(..., description="The factory producing the dependency value.")
