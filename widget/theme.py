from dataclasses import dataclass, field

from schemas.config import Position, WidgetConfig

PRIMARY_COLOR_VARIABLE = "--agentic-primary-color"
EDGE_OFFSET = "20px"


@dataclass(frozen=True)
class Theme:
    css_variables: dict[str, str]
    # Inline style overrides, applied to both the toggle button and the panel
    placement: dict[str, str] = field(default_factory=dict)


def build_theme(config: WidgetConfig) -> Theme:
    placement = {}
    if config.position == Position.BOTTOM_LEFT:
        placement = {"left": EDGE_OFFSET, "right": "auto"}
    return Theme(
        css_variables={PRIMARY_COLOR_VARIABLE: config.primaryColor},
        placement=placement,
    )
