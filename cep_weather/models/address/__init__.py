from cep_weather.models.address.address import AddressRecord

__all__ = ["AddressRecord"]
