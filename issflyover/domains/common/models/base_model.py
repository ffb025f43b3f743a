from pydantic import BaseModel, ConfigDict


class DomainBaseModel(BaseModel):
    """Base class of all domain models"""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
    )


class ValueObject(DomainBaseModel):
    """Immutable value object, equality is defined by its attribute values"""

    model_config = ConfigDict(frozen=True)
