from .sysprop import (
    PLATFORM_MODULE_NAME,
    Access,
    Owner,
    Property,
    PropertySet,
    PropType,
    Scope,
    property_key,
)

__all__ = [
    "PLATFORM_MODULE_NAME",
    "Access",
    "Owner",
    "Property",
    "PropertySet",
    "PropType",
    "Scope",
    "property_key",
]
