# app/models/base.py
from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Registro em memória; campos em snake_case, JSON em camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
