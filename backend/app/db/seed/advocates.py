"""
Built-in advocate dataset.

Used to seed the store, and served in-process whenever the store cannot
be reached.  Treat it as read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

SPECIALTIES: tuple[str, ...] = (
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
)


def _pick(*indexes: int) -> list[str]:
    return [SPECIALTIES[i] for i in indexes]


_ADVOCATES: list[dict[str, Any]] = [
    {"firstName": "John", "lastName": "Doe", "city": "New York", "degree": "MD",
     "specialties": _pick(0, 1, 2), "yearsOfExperience": 10, "phoneNumber": 5551234567},
    {"firstName": "Jane", "lastName": "Smith", "city": "Los Angeles", "degree": "PhD",
     "specialties": _pick(4, 7), "yearsOfExperience": 8, "phoneNumber": 5559876543},
    {"firstName": "Alice", "lastName": "Johnson", "city": "Chicago", "degree": "MSW",
     "specialties": _pick(6, 9, 10), "yearsOfExperience": 5, "phoneNumber": 5554567890},
    {"firstName": "Michael", "lastName": "Brown", "city": "Houston", "degree": "MD",
     "specialties": _pick(2, 3), "yearsOfExperience": 12, "phoneNumber": 5556543210},
    {"firstName": "Emily", "lastName": "Davis", "city": "Phoenix", "degree": "PhD",
     "specialties": _pick(11, 20, 21), "yearsOfExperience": 7, "phoneNumber": 5553210987},
    {"firstName": "Chris", "lastName": "Martinez", "city": "Philadelphia", "degree": "MSW",
     "specialties": _pick(5, 6), "yearsOfExperience": 9, "phoneNumber": 5557890123},
    {"firstName": "Jessica", "lastName": "Taylor", "city": "San Antonio", "degree": "MD",
     "specialties": _pick(12, 13), "yearsOfExperience": 11, "phoneNumber": 5554561234},
    {"firstName": "David", "lastName": "Harris", "city": "San Diego", "degree": "PhD",
     "specialties": _pick(14, 15, 16), "yearsOfExperience": 6, "phoneNumber": 5557896543},
    {"firstName": "Laura", "lastName": "Clark", "city": "Dallas", "degree": "MSW",
     "specialties": _pick(17, 18), "yearsOfExperience": 4, "phoneNumber": 5550123456},
    {"firstName": "Daniel", "lastName": "Lewis", "city": "San Jose", "degree": "MD",
     "specialties": _pick(19, 7), "yearsOfExperience": 13, "phoneNumber": 5553217654},
    {"firstName": "Sarah", "lastName": "Lee", "city": "Austin", "degree": "PhD",
     "specialties": _pick(22, 4), "yearsOfExperience": 10, "phoneNumber": 5551238765},
    {"firstName": "James", "lastName": "King", "city": "Jacksonville", "degree": "MSW",
     "specialties": _pick(23, 24), "yearsOfExperience": 5, "phoneNumber": 5556540987},
    {"firstName": "Megan", "lastName": "Green", "city": "San Francisco", "degree": "MD",
     "specialties": _pick(25, 8), "yearsOfExperience": 15, "phoneNumber": 5559873456},
    {"firstName": "Joshua", "lastName": "Walker", "city": "Columbus", "degree": "PhD",
     "specialties": _pick(1, 9), "yearsOfExperience": 9, "phoneNumber": 5556781234},
    {"firstName": "Amanda", "lastName": "Hall", "city": "Fort Worth", "degree": "MSW",
     "specialties": _pick(0, 10, 3), "yearsOfExperience": 3, "phoneNumber": 5559872345},
]

ADVOCATE_DATA: tuple[Mapping[str, Any], ...] = tuple(
    MappingProxyType(entry) for entry in _ADVOCATES
)
