# This file makes the models directory a Python package 
from .prayer_request import PrayerRequest
from .dispense import Dispensed, Denied

__all__ = [
    'PrayerRequest',
    'Dispensed',
    'Denied',
]
