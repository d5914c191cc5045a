from .form_schemas import VerseForm, PrayerForm

__all__ = ['VerseForm', 'PrayerForm']
