from .property_validator import check_properties, normalize_properties, validate_properties

__all__ = ["check_properties", "normalize_properties", "validate_properties"]
