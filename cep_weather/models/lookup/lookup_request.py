from pydantic import BaseModel, Field


class LookupRequest(BaseModel):
    cep: str = Field(..., max_length=9, description="CEP as typed, e.g. 01001-000 or 01001000")
