"""
Dosage form classification from product names
"""
from typing import Optional

from models import MedicineType


# Checked in order; the first category with a keyword in the name wins
MEDICINE_TYPE_KEYWORDS = {
    MedicineType.TABLET: ["TAB", "TABLET"],
    MedicineType.CAPSULE: ["CAP", "CAPSULE"],
    MedicineType.INJECTION: ["INJ", "INJECTION"],
    MedicineType.SYRUP: ["SYR", "SYRUP", "SUSP", "SUSPENSION"],
    MedicineType.TOPICAL: ["CREAM", "OINTMENT", "GEL"],
    MedicineType.DROPS: ["DROP", "DROPS"],
    MedicineType.POWDER: ["POWDER", "SACHET"],
    MedicineType.INHALER: ["INHALER", "ROTACAP", "RESPULE"],
}


def detect_type(product_name: Optional[str]) -> Optional[MedicineType]:
    """
    Classify a medicine's dosage form using keyword matching

    Args:
        product_name: Product name as written in the catalog

    Returns:
        Matching MedicineType, OTHER if no keyword matches, None for an empty name
    """
    if not product_name:
        return None

    name = product_name.upper()
    for medicine_type, keywords in MEDICINE_TYPE_KEYWORDS.items():
        if any(keyword in name for keyword in keywords):
            return medicine_type

    return MedicineType.OTHER
