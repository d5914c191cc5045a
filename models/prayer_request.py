from dataclasses import dataclass, fields


@dataclass
class PrayerRequest:
    name: str
    phone: str
    prayer: str
    submitted_at: str

    @classmethod
    def from_json(cls, data):
        # Older entries may lack a field or carry null; both render as empty
        return cls(**{f.name: '' if data.get(f.name) is None else data.get(f.name) for f in fields(cls)})

    def to_json(self):
        return {
            "name": self.name,
            "phone": self.phone,
            "prayer": self.prayer,
            "submitted_at": self.submitted_at
        }

    def to_row(self):
        return [self.name, self.phone, self.prayer, self.submitted_at]

    def __repr__(self):
        return f'<PrayerRequest {self.name!r} at {self.submitted_at}>'
