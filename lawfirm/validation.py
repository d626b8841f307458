from datetime import datetime, timezone
from typing import Annotated, Any, Mapping, Optional, Type, TypeVar, Union

import pydantic
from pydantic import AfterValidator, BaseModel, BeforeValidator, EmailStr, StrictInt, StringConstraints

from lawfirm.errors import InvalidValueError, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Error types pydantic reports for gt/ge bounds
POSITIVITY_ERRORS = {"greater_than", "greater_than_equal"}


def to_utc_naive(value: datetime) -> datetime:
    """Normalize an instant to naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def blank_to_none(value: Any) -> Any:
    # An empty string clears a nullable field the same way an explicit null does
    if isinstance(value, str) and not value.strip():
        return None
    return value


Instant = Annotated[datetime, AfterValidator(to_utc_naive)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
# Surrounding whitespace is stripped before the non-empty check
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Addresses are compared and stored lower-cased
Email = Annotated[EmailStr, AfterValidator(str.lower)]
# Rejects bools and numeric strings standing in for a row id
RecordId = StrictInt


def shape(schema: Type[SchemaT], payload: Union[SchemaT, Mapping[str, Any]]) -> SchemaT:
    """Validate a raw payload against ``schema``.

    Schema instances pass through untouched. Failures are re-raised as
    ``InvalidValueError`` when any of them is a positivity bound, otherwise as
    ``ValidationError``, both carrying one ``{field, message}`` entry per problem.
    """
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        fields = ", ".join(error["field"] for error in errors)
        if any(err["type"] in POSITIVITY_ERRORS for err in e.errors()):
            raise InvalidValueError(f"Value must be positive: {fields}", errors) from None
        raise ValidationError(f"Invalid input: {fields}", errors) from None


def changes(payload: BaseModel, *exclude: str) -> dict:
    """Fields the caller actually sent, minus ``exclude``."""
    return payload.model_dump(exclude_unset=True, exclude=set(exclude))


def require_not_null(values: Mapping[str, Any], *fields: str) -> None:
    """Reject an explicit null for fields that can be omitted but never cleared."""
    nulls = [field for field in fields if field in values and values[field] is None]
    if nulls:
        raise ValidationError(
            f"Fields may not be null: {', '.join(nulls)}",
            [{"field": field, "message": "may not be null"} for field in nulls],
        )
