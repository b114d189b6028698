from dataclasses import dataclass, field
from typing import Dict, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Données
    DATA_DIR: str = "Data"

    # Pipeline
    BOUNDS_DEBOUNCE_MS: int = Field(default=750, gt=0)
    DEBOUNCE_POLL_SECONDS: float = Field(default=0.25, gt=0)
    OUTLIER_IQR_MULTIPLIER: float = Field(default=1.5, ge=0)

    # Carte
    RESET_ZOOM: int = Field(default=11, ge=0, le=20)
    MAP_HEIGHT: int = Field(default=400, gt=0)
    MARKER_RADIUS: int = Field(default=5, gt=0)

    # App
    LOG_LEVEL: str = Field(default="INFO", pattern=r"(?i)^(debug|info|warning|error|critical)$")
    SOURCE_URL: str = "https://github.com/tmasjc/Airbnb_Market_Data"

    # AIRBNB_DATA_DIR, AIRBNB_BOUNDS_DEBOUNCE_MS, ... ; une variable vide garde la valeur par défaut
    model_config = SettingsConfigDict(
        env_prefix="AIRBNB_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def bounds_debounce_seconds(self) -> float:
        return self.BOUNDS_DEBOUNCE_MS / 1000.0


# ColorBrewer Set1
SET1 = ("#E41A1C", "#377EB8", "#4DAF4A", "#984EA3")


@dataclass(frozen=True)
class Theme:
    ROOM_COLORS: Dict[str, str] = field(default_factory=lambda: {
        "Entire home/apt": SET1[0],
        "Private room": SET1[1],
        "Shared room": SET1[2],
        "Hotel room": SET1[3],
    })
    FALLBACK_COLOR: str = "#999999"
    TILES: str = "cartodbpositron"
    HOST_BAR_COLOR: str = "skyblue"
    HOST_POINT_COLOR: str = "royalblue"
    FONT_FAMILY: str = "Menlo, monospace"
    AXIS_COLOR: str = "navy"
    MAP_CENTER: Tuple[float, float] = (20.0, 0.0)

    def room_color(self, room_type) -> str:
        return self.ROOM_COLORS.get(room_type, self.FALLBACK_COLOR)


SETTINGS = Settings()
THEME = Theme()
