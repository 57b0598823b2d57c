"""Achievement model and the raw Steam Web API payload shapes.

Only the parts of each payload the service reads are modelled. Missing or null
values default to empty, so a game without stats parses to zero
achievements instead of failing.
"""

from pydantic import BaseModel, ConfigDict, Field


class Achievement(BaseModel):
    """Canonical achievement, serialized with the camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True)

    api_name: str = Field(alias="apiName")
    name: str = ""
    description: str = ""
    icon: str = ""
    icon_gray: str = Field("", alias="iconGray")
    hidden: bool = False
    global_pct: float = Field(0.0, alias="globalPct")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# GetSchemaForGame/v2
# ---------------------------------------------------------------------------

class SchemaAchievement(BaseModel):
    name: str | None = ""
    display_name: str | None = Field("", alias="displayName")
    description: str | None = ""
    icon: str | None = ""
    icon_gray: str | None = Field("", alias="icongray")
    hidden: int | None = 0


class AvailableGameStats(BaseModel):
    achievements: list[SchemaAchievement] = Field(default_factory=list)


class SchemaGame(BaseModel):
    available_game_stats: AvailableGameStats = Field(
        default_factory=AvailableGameStats, alias="availableGameStats"
    )


class SchemaResponse(BaseModel):
    game: SchemaGame = Field(default_factory=SchemaGame)


# ---------------------------------------------------------------------------
# GetGlobalAchievementPercentagesForApp/v0002
# ---------------------------------------------------------------------------

class GlobalPercentage(BaseModel):
    name: str | None = ""
    # Steam has been seen sending this as a numeric string; lax mode coerces it
    percent: float | None = 0.0


class GlobalPercentages(BaseModel):
    achievements: list[GlobalPercentage] = Field(default_factory=list)


class GlobalPercentagesResponse(BaseModel):
    achievement_percentages: GlobalPercentages = Field(
        default_factory=GlobalPercentages, alias="achievementpercentages"
    )
