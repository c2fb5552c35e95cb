"""Sample configuration for a Linux laptop."""

from .schema import (
    BarConfig,
    BinaryColorizerModel,
    ConstantColorizerModel,
    TrinaryColorizerModel,
    WidgetConfigModel,
)


def get_default_config() -> BarConfig:
    """Generate a starter bar: clock, load and battery."""
    return BarConfig(
        widgets=[
            WidgetConfigModel(
                id="time",
                source="extern",
                target="date +%H:%M",
                colorizer=ConstantColorizerModel(color=7),
            ),
            WidgetConfigModel(
                id="load",
                source="file",
                target="/proc/loadavg",
                colorizer=BinaryColorizerModel(
                    null_color=8, active_color=7, null_value="0.00"
                ),
            ),
            WidgetConfigModel(
                id="bat",
                source="file",
                target="/sys/class/power_supply/BAT0/capacity",
                numeric=True,
                colorizer=TrinaryColorizerModel(
                    low_color=1,
                    mid_color=3,
                    high_color=2,
                    low_threshold=15,
                    mid_threshold=40,
                ),
            ),
        ]
    )
