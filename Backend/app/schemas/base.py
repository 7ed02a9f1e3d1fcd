# Backend/app/schemas/base.py
"""
Shared machinery for HTML form schemas.

Browsers post every field as a string, empty inputs included. FormModel
drops blank values before validation so that "not filled in" and "absent"
mean the same thing, and turns pydantic's ValidationError into a
{field: message} mapping the templates can show next to each input.
"""

import math
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Annotated, ClassVar, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

from Backend.app.exceptions import FormValidationError


def _parse_datetime(value):
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise PydanticCustomError('datetime_parsing', 'invalid date-time') from None
    if isinstance(value, datetime) and value.tzinfo is not None:
        # stored dates are naive UTC
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _number_check(integer, fraction, minimum, exclusive):
    def check(value):
        if value is None:
            return value
        if isinstance(value, float) and not math.isfinite(value):
            raise PydanticCustomError('float_parsing', 'not a number')
        if minimum is not None:
            if exclusive and value <= minimum:
                raise PydanticCustomError('greater_than', 'too small', {'gt': minimum})
            if not exclusive and value < minimum:
                raise PydanticCustomError('greater_than_equal', 'too small', {'ge': minimum})
        if fraction is not None:
            try:
                _, digits, exponent = Decimal(str(value)).as_tuple()
            except InvalidOperation:
                raise PydanticCustomError('float_parsing', 'not a number') from None
            int_digits = max(len(digits) + exponent, 0)
            frac_digits = max(-exponent, 0)
            if int_digits > integer or frac_digits > fraction:
                raise PydanticCustomError(
                    'decimal_places',
                    'too many digits',
                    {'integer': integer, 'fraction': fraction},
                )
        return value
    return check


def decimal_field(integer=10, fraction=2, minimum=None, exclusive=False):
    """Optional float limited to `integer`.`fraction` digits and a lower bound."""
    return Annotated[
        Optional[float],
        AfterValidator(_number_check(integer, fraction, minimum, exclusive)),
    ]


def whole_field(minimum=None):
    """Optional int with a lower bound."""
    return Annotated[
        Optional[int],
        AfterValidator(_number_check(None, None, minimum, False)),
    ]


FormDateTime = Annotated[Optional[datetime], BeforeValidator(_parse_datetime)]


def _label(model_cls, field):
    info = model_cls.model_fields.get(field)
    if info is None:
        # error locations use the alias when one is declared
        info = next((f for f in model_cls.model_fields.values() if f.alias == field), None)
    if info is not None and info.title:
        return info.title
    return field.replace('_', ' ').capitalize()


def _message(model_cls, field, err):
    label = _label(model_cls, field)
    kind = err['type']
    ctx = err.get('ctx') or {}

    if kind == 'missing':
        return model_cls.required_messages.get(field, f"{label} is mandatory")
    if kind == 'string_too_long':
        return f"{label} must be less than {ctx['max_length']} characters"
    if kind == 'string_too_short':
        return f"{label} must be at least {ctx['min_length']} characters"
    if kind == 'string_pattern_mismatch':
        return model_cls.pattern_messages.get(field, f"{label} has an invalid format")
    if kind == 'greater_than_equal':
        if ctx.get('ge') == 0:
            return f"{label} must be positive or zero"
        if ctx.get('ge') == 1:
            return f"{label} must be positive"
        return f"{label} must be at least {ctx['ge']}"
    if kind == 'greater_than':
        return f"{label} must be positive"
    if kind in ('int_parsing', 'int_type', 'int_from_float'):
        return f"{label} must be a whole number"
    if kind in ('float_parsing', 'float_type'):
        return f"{label} must be a valid number"
    if kind == 'decimal_places':
        return f"{label} must be a valid number with max {ctx['fraction']} decimal places"
    if kind in ('datetime_parsing', 'datetime_type', 'datetime_from_date_parsing'):
        return f"{label} must be a valid date and time"
    if kind == 'literal_error':
        return f"{label} must be one of {ctx.get('expected', '')}"
    if kind == 'value_error':
        return str(ctx.get('error', err['msg']))
    return err['msg']


class FormModel(BaseModel):
    """Base for every submitted form."""
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    required_messages: ClassVar[dict] = {}
    pattern_messages: ClassVar[dict] = {}

    @model_validator(mode='before')
    @classmethod
    def _drop_blank_inputs(cls, data):
        if isinstance(data, dict):
            return {
                key: value for key, value in data.items()
                if not (isinstance(value, str) and value.strip() == '')
            }
        return data

    @classmethod
    def from_form(cls, form):
        """
        Validate raw form data (a dict or a werkzeug MultiDict).
        Raises FormValidationError carrying one message per bad field.
        """
        data = form.to_dict() if hasattr(form, 'to_dict') else dict(form)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = {}
            for err in e.errors():
                field = str(err['loc'][0]) if err['loc'] else '__all__'
                # first message per field is enough for the form
                errors.setdefault(field, _message(cls, field, err))
            raise FormValidationError(errors) from e
