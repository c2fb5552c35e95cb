"""Configuration schema using Pydantic for validation."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class ConstantColorizerModel(BaseModel):
    """Fixed color."""

    type: Literal["constant"] = "constant"
    color: int = Field(ge=0)


class BinaryColorizerModel(BaseModel):
    """Null/active color keyed on the displayed value."""

    type: Literal["binary"] = "binary"
    null_color: int = Field(ge=0)
    active_color: int = Field(ge=0)
    null_value: str


class TrinaryColorizerModel(BaseModel):
    """Low/mid/high colors split by two thresholds."""

    type: Literal["trinary"] = "trinary"
    low_color: int = Field(ge=0)
    mid_color: int = Field(ge=0)
    high_color: int = Field(ge=0)
    low_threshold: int
    mid_threshold: int


ColorizerConfig = Annotated[
    Union[ConstantColorizerModel, BinaryColorizerModel, TrinaryColorizerModel],
    Field(discriminator="type"),
]


class WidgetConfigModel(BaseModel):
    """Configuration for a single widget instance.

    ``target`` is the command line for extern sources and the path for
    file sources.
    """

    id: str
    source: Literal["extern", "file"]
    target: str
    numeric: bool = False
    timeout: Optional[float] = Field(default=None, gt=0)
    colorizer: ColorizerConfig = Field(
        default_factory=lambda: ConstantColorizerModel(color=1)
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _timeout_only_for_commands(self) -> "WidgetConfigModel":
        if self.timeout is not None and self.source != "extern":
            raise ValueError("timeout is only supported for extern sources")
        return self


class BarConfig(BaseModel):
    """Complete bar configuration."""

    separator: str = " | "
    markup: Literal["spectrwm", "ansi", "plain"] = "spectrwm"
    widgets: list[WidgetConfigModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
