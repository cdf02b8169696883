from cep_weather.utils.cep import format_code, is_well_formed, normalize_code

__all__ = ["format_code", "is_well_formed", "normalize_code"]
