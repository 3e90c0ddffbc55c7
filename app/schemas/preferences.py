"""Pydantic schemas for display preferences."""

from pydantic import BaseModel, Field, field_validator

SIDEBAR_COLORS: dict[str, str] = {
    "purple": "from-purple-600 to-pink-600",
    "blue": "from-blue-600 to-cyan-600",
    "green": "from-green-600 to-emerald-600",
    "orange": "from-orange-600 to-red-600",
    "pink": "from-pink-600 to-rose-600",
    "indigo": "from-indigo-600 to-purple-600",
    "teal": "from-teal-600 to-blue-600",
    "emerald": "from-emerald-600 to-green-600",
}


class PreferencesResponse(BaseModel):
    dark_mode: bool
    sidebar_color: str
    sidebar_gradient: str = Field(..., description="Gradient classes for the sidebar colour")
    available_colors: list[str] = Field(default_factory=lambda: list(SIDEBAR_COLORS))


class PreferencesUpdate(BaseModel):
    dark_mode: bool | None = None
    sidebar_color: str | None = None

    @field_validator("sidebar_color")
    @classmethod
    def known_color(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip().lower()
        if v not in SIDEBAR_COLORS:
            raise ValueError(f"sidebar_color must be one of {sorted(SIDEBAR_COLORS)}")
        return v
