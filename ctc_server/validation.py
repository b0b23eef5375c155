from dataclasses import dataclass

from .errors import ValidationError

# Checked in this order; the first failure is reported
REQUIRED_FIELDS = [
    ("company", "Company name is required"),
    ("position", "Job role/position is required"),
    ("ctc", "Annual CTC is required"),
    ("location", "Work location is required"),
]


@dataclass(frozen=True)
class SalaryRequest:
    company: str
    position: str
    ctc: str
    location: str

    def as_dict(self):
        return {
            "company": self.company,
            "position": self.position,
            "ctc": self.ctc,
            "location": self.location,
        }


def validate_salary_request(data):
    """Check the raw request body and return a SalaryRequest with trimmed values.

    Raises ValidationError naming the first missing, blank or non-string field.
    """
    if not isinstance(data, dict):
        data = {}
    values = {}
    for field, message in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(field, message)
        values[field] = value.strip()
    return SalaryRequest(**values)
