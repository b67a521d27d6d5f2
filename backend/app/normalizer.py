"""Answer normalization shared by user answers and reference answers."""

# Arabic-Indic digits ٠..٩ (U+0660..U+0669) to ASCII 0..9
ARABIC_INDIC_DIGITS = str.maketrans("٠١٢٣٤٥٦٧٨٩", "0123456789")


def normalize_answer(text: str) -> str:
    """Canonical form used to compare answers.

    - lowercase
    - trim leading/trailing whitespace
    - Arabic-Indic digits to Latin digits

    Arabic words are left as they are; only digits are mapped.
    """
    return text.lower().strip().translate(ARABIC_INDIC_DIGITS)
