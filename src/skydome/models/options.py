from dataclasses import dataclass
from typing import Literal

ColorScheme = Literal["light", "dark"]


@dataclass(frozen=True)
class RenderOptions:
    width: int = 800
    height: int = 800
    zoom: float = 1.0
    color_scheme: ColorScheme = "dark"

    @property
    def dark(self) -> bool:
        return self.color_scheme == "dark"
