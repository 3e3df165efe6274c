"""
Static directory of court names offered to clients.
"""

from __future__ import annotations

HIGH_COURTS: tuple[str, ...] = (
    "Allahabad High Court",
    "Andhra Pradesh High Court",
    "Bombay High Court",
    "Calcutta High Court",
    "Chhattisgarh High Court",
    "Delhi High Court",
    "Gauhati High Court",
    "Gujarat High Court",
    "Himachal Pradesh High Court",
    "Jammu and Kashmir High Court",
    "Jharkhand High Court",
    "Karnataka High Court",
    "Kerala High Court",
    "Madhya Pradesh High Court",
    "Madras High Court",
    "Manipur High Court",
    "Meghalaya High Court",
    "Orissa High Court",
    "Patna High Court",
    "Punjab and Haryana High Court",
    "Rajasthan High Court",
    "Sikkim High Court",
    "Supreme Court of India",
    "Telangana High Court",
    "Tripura High Court",
    "Uttarakhand High Court",
)

DISTRICT_COURTS: tuple[str, ...] = (
    "New Delhi District Court",
    "Mumbai District Court",
    "Kolkata District Court",
    "Chennai District Court",
    "Bangalore District Court",
    "Hyderabad District Court",
    "Pune District Court",
    "Ahmedabad District Court",
    "Jaipur District Court",
    "Lucknow District Court",
)


def list_courts() -> dict[str, list[str]]:
    return {
        "high_courts": list(HIGH_COURTS),
        "district_courts": list(DISTRICT_COURTS),
    }


def is_known_court(name: str) -> bool:
    return name in HIGH_COURTS or name in DISTRICT_COURTS
