"""Storefront record models shared with the storage layer."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Category = Literal["games", "social", "media", "productivity", "tools"]
CATEGORIES: tuple[Category, ...] = ("games", "social", "media", "productivity", "tools")


class InsertApp(BaseModel):
    """One storefront listing, ready to be handed to storage.

    Storage assigns the id and timestamps; everything else is produced here.
    Serialized with the camelCase keys the storage schema uses.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    developer: str
    description: str
    category: Category
    download_url: str
    icon_url: Optional[str] = None
    rating: int = Field(default=0, ge=0, le=50)  # tenths of a star: 45 means 4.5
    downloads: str = "0"
    size: str
    version: str
    requirements: str = "Android 5.0+"
    languages: str = "Español, Inglés"
    features: list[str] = Field(default_factory=list)
    is_featured: bool = False

    @property
    def stars(self) -> float:
        return self.rating / 10

    def to_storage(self) -> dict:
        return self.model_dump(by_alias=True)
