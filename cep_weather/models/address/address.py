from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AddressRecord(BaseModel):
    """Address resolved for a CEP by the address lookup service."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    code: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("code", "cep"),
        description="CEP as returned by the service",
    )
    address: Optional[str] = Field(None, description="Street address")
    district: Optional[str] = Field(None, description="District (bairro)")
    city: Optional[str] = Field(None, description="City name")
    state: Optional[str] = Field(None, description="State abbreviation (e.g., SP)")
    lat: Optional[Union[float, str]] = Field(None, description="Latitude, string or numeric")
    lng: Optional[Union[float, str]] = Field(None, description="Longitude, string or numeric")

    address_type: Optional[str] = Field(None, description="Street type (e.g., Rua, Avenida)")
    address_name: Optional[str] = Field(None, description="Street name without its type")
    city_ibge: Optional[str] = Field(None, description="IBGE municipality code")
    ddd: Optional[str] = Field(None, description="Telephone area code")

    def has_coordinates(self) -> bool:
        """Both coordinates must be present and non-empty."""
        return bool(self.lat) and bool(self.lng)
