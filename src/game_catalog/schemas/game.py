"""Game request and response schemas.

Python attribute names are English; the wire names (nome, produtora, preco)
are validation aliases on input and plain aliases on the view object.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from game_catalog.models import NAME_MAX_LENGTH, NAME_MIN_LENGTH, PRICE_MAX, PRICE_MIN
from game_catalog.services.game import GameData


class GameInput(BaseModel):
    """Body of POST and PUT /jogos."""

    name: str = Field(
        validation_alias="nome", min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    producer: str = Field(
        validation_alias="produtora", min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    price: float = Field(validation_alias="preco", ge=PRICE_MIN, le=PRICE_MAX, strict=True)

    def to_data(self) -> GameData:
        return GameData(name=self.name, producer=self.producer, price=self.price)


class GameResponse(BaseModel):
    """Game view object.

    Built from the ORM model by attribute name; FastAPI dumps it by alias.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str = Field(alias="nome")
    producer: str = Field(alias="produtora")
    price: float = Field(alias="preco")
