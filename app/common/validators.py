"""
Validadores de documentos peruanos
"""
import re
from typing import Optional

# Prefijos de RUC: 10 persona natural, 15/16/17 no domiciliados y entidades, 20 persona jurídica
RUC_PREFIXES = ("10", "15", "16", "17", "20")


def clean_document(value: Optional[str]) -> Optional[str]:
    """Quita espacios, puntos y guiones; cadena vacía se trata como ausente"""
    if value is None:
        return None
    cleaned = re.sub(r'[\.\s\-]', '', value)
    return cleaned or None


def validate_peru_ruc(ruc: str) -> bool:
    """
    Valida RUC peruano.
    - 11 dígitos
    - Prefijo 10, 15, 16, 17 o 20
    """
    cleaned = clean_document(ruc)
    if not cleaned or not cleaned.isdigit() or len(cleaned) != 11:
        return False
    return cleaned[:2] in RUC_PREFIXES


def validate_peru_dni(dni: str) -> bool:
    """Valida DNI peruano: exactamente 8 dígitos"""
    cleaned = clean_document(dni)
    return bool(cleaned) and cleaned.isdigit() and len(cleaned) == 8


def ruc_field(value: Optional[str]) -> Optional[str]:
    """Normaliza un RUC opcional para validadores de Pydantic"""
    cleaned = clean_document(value)
    if cleaned is None:
        return None
    if not validate_peru_ruc(cleaned):
        raise ValueError('El RUC debe tener 11 dígitos y empezar con 10, 15, 16, 17 o 20')
    return cleaned


def dni_field(value: Optional[str]) -> Optional[str]:
    cleaned = clean_document(value)
    if cleaned is None:
        return None
    if not validate_peru_dni(cleaned):
        raise ValueError('El DNI debe tener 8 dígitos')
    return cleaned
