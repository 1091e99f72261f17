"""
Settings model — scaffold configuration loaded from goman.yml.

Everything here is optional: a project without goman.yml scaffolds
with an Apache 2.0 header and no author.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Values that end up in the header of every generated file."""

    author: str = ""
    year: str = ""
    license: str = ""
    license_header: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_string(cls, value: object) -> object:
        # YAML reads `year: 2024` as an int
        if isinstance(value, int):
            return str(value)
        return value
