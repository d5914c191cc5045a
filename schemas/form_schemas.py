from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional


class VerseForm(BaseModel):
    name: Optional[str] = None
    number: Optional[str] = None  # phone number, not validated


class PrayerForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = ''
    number: str = ''
    prayer: str = ''

    @field_validator('name', 'number', 'prayer', mode='before')
    @classmethod
    def none_to_empty(cls, value):
        return '' if value is None else value
