"""Static puzzle pools, keyed by category, locale and difficulty tier.

The tables are built once at import time and never mutated: pools are
tuples and every level of the index is a read-only mapping.
"""
from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple

from .difficulty import DifficultyTier
from .schemas import Locale, PuzzleCategory


class BankEntry(NamedTuple):
    question: str
    answer: str
    options: Tuple[str, ...] = ()
    hint: Optional[str] = None


def _math(question: str, answer: str) -> BankEntry:
    return BankEntry(question, answer)


def _science(question: str, options: Tuple[str, str, str, str], answer: str) -> BankEntry:
    return BankEntry(question, answer, options=tuple(options))


def _wordplay(question: str, answer: str, hint: Optional[str] = None) -> BankEntry:
    return BankEntry(question, answer, hint=hint)


B, E, M, H, X = (
    DifficultyTier.BEGINNER,
    DifficultyTier.EASY,
    DifficultyTier.MEDIUM,
    DifficultyTier.HARD,
    DifficultyTier.EXPERT,
)


MATH_EN = {
    B: (
        _math("What is 1 + 1?", "2"),
        _math("What is 3 + 2?", "5"),
        _math("What is 5 - 1?", "4"),
        _math("What is 2 × 2?", "4"),
        _math("What is 6 ÷ 2?", "3"),
        _math("What is 4 + 1?", "5"),
    ),
    E: (
        _math("What is 5 + 3?", "8"),
        _math("What is 10 - 4?", "6"),
        _math("What is 6 × 2?", "12"),
        _math("What is 15 ÷ 3?", "5"),
        _math("What is 7 + 8?", "15"),
        _math("What is 20 - 9?", "11"),
        _math("What is 4 × 5?", "20"),
        _math("What is 28 ÷ 4?", "7"),
    ),
    M: (
        _math("What is 47 + 35?", "82"),
        _math("What is 93 - 28?", "65"),
        _math("What is 12 × 9?", "108"),
        _math("What is 144 ÷ 12?", "12"),
        _math("What is 68 + 47?", "115"),
        _math("What is 125 - 39?", "86"),
        _math("What is 15 × 7?", "105"),
        _math("What is 180 ÷ 15?", "12"),
    ),
    H: (
        _math("What is 147 + 258?", "405"),
        _math("What is 352 - 167?", "185"),
        _math("What is 17 × 13?", "221"),
        _math("What is 360 ÷ 15?", "24"),
        _math("What is 289 + 365?", "654"),
        _math("What is 480 - 235?", "245"),
        _math("What is 19 × 16?", "304"),
        _math("What is 420 ÷ 20?", "21"),
    ),
    X: (
        _math("What is 789 + 456 + 234?", "1479"),
        _math("What is 1567 - 894?", "673"),
        _math("What is 47 × 29?", "1363"),
        _math("What is 984 ÷ 24?", "41"),
        _math("What is 2³ × 5?", "40"),
        _math("What is √144?", "12"),
        _math("What is 34 × 27?", "918"),
        _math("What is 1260 ÷ 36?", "35"),
    ),
}

MATH_AR = {
    B: (
        _math("ما هو ١ + ١؟", "٢"),
        _math("ما هو ٣ + ٢؟", "٥"),
        _math("ما هو ٥ - ١؟", "٤"),
        _math("ما هو ٢ × ٢؟", "٤"),
        _math("ما هو ٦ ÷ ٢؟", "٣"),
        _math("ما هو ٤ + ١؟", "٥"),
    ),
    E: (
        _math("ما هو ٥ + ٣؟", "٨"),
        _math("ما هو ١٠ - ٤؟", "٦"),
        _math("ما هو ٦ × ٢؟", "١٢"),
        _math("ما هو ١٥ ÷ ٣؟", "٥"),
        _math("ما هو ٧ + ٨؟", "١٥"),
        _math("ما هو ٢٠ - ٩؟", "١١"),
        _math("ما هو ٤ × ٥؟", "٢٠"),
        _math("ما هو ٢٨ ÷ ٤؟", "٧"),
    ),
    M: (
        _math("ما هو ٤٧ + ٣٥؟", "٨٢"),
        _math("ما هو ٩٣ - ٢٨؟", "٦٥"),
        _math("ما هو ١٢ × ٩؟", "١٠٨"),
        _math("ما هو ١٤٤ ÷ ١٢؟", "١٢"),
        _math("ما هو ٦٨ + ٤٧؟", "١١٥"),
        _math("ما هو ١٢٥ - ٣٩؟", "٨٦"),
        _math("ما هو ١٥ × ٧؟", "١٠٥"),
        _math("ما هو ١٨٠ ÷ ١٥؟", "١٢"),
    ),
    H: (
        _math("ما هو ١٤٧ + ٢٥٨؟", "٤٠٥"),
        _math("ما هو ٣٥٢ - ١٦٧؟", "١٨٥"),
        _math("ما هو ١٧ × ١٣؟", "٢٢١"),
        _math("ما هو ٣٦٠ ÷ ١٥؟", "٢٤"),
        _math("ما هو ٢٨٩ + ٣٦٥؟", "٦٥٤"),
        _math("ما هو ٤٨٠ - ٢٣٥؟", "٢٤٥"),
        _math("ما هو ١٩ × ١٦؟", "٣٠٤"),
        _math("ما هو ٤٢٠ ÷ ٢٠؟", "٢١"),
    ),
    X: (
        _math("ما هو ٧٨٩ + ٤٥٦ + ٢٣٤؟", "١٤٧٩"),
        _math("ما هو ١٥٦٧ - ٨٩٤؟", "٦٧٣"),
        _math("ما هو ٤٧ × ٢٩؟", "١٣٦٣"),
        _math("ما هو ٩٨٤ ÷ ٢٤؟", "٤١"),
        _math("ما هو ٢³ × ٥؟", "٤٠"),
        _math("ما هو جذر ١٤٤؟", "١٢"),
        _math("ما هو ٣٤ × ٢٧؟", "٩١٨"),
        _math("ما هو ١٢٦٠ ÷ ٣٦؟", "٣٥"),
    ),
}

SCIENCE_EN = {
    B: (
        _science("What color is the sun?", ("Yellow", "Red", "Blue", "Green"), "Yellow"),
        _science("How many legs does a cat have?", ("2", "4", "6", "8"), "4"),
        _science("What shape is the Earth?", ("Round", "Square", "Triangle", "Rectangle"), "Round"),
    ),
    E: (
        _science("What is the closest planet to the Sun?", ("Mercury", "Venus", "Earth", "Mars"), "Mercury"),
        _science("How many planets are in our solar system?", ("7", "8", "9", "10"), "8"),
        _science("What gas do we breathe in?", ("Oxygen", "Nitrogen", "Carbon Dioxide", "Hydrogen"), "Oxygen"),
        _science("What is the largest organ in the human body?", ("Skin", "Liver", "Heart", "Brain"), "Skin"),
        _science(
            "What is the process of water turning into vapor called?",
            ("Evaporation", "Condensation", "Freezing", "Melting"),
            "Evaporation",
        ),
    ),
    M: (
        _science(
            "What is the smallest bone in the human body?",
            ("Stapes in ear", "Wrist bone", "Rib bone", "Finger bone"),
            "Stapes in ear",
        ),
        _science(
            "In which layer of the atmosphere is the ozone layer?",
            ("Stratosphere", "Troposphere", "Mesosphere", "Thermosphere"),
            "Stratosphere",
        ),
        _science(
            "What acid is found in the stomach?",
            ("Hydrochloric acid", "Sulfuric acid", "Nitric acid", "Phosphoric acid"),
            "Hydrochloric acid",
        ),
    ),
    H: (
        _science(
            "What is the most abundant element in the universe?",
            ("Hydrogen", "Helium", "Oxygen", "Carbon"),
            "Hydrogen",
        ),
        _science("How many chromosomes are in a human cell?", ("23", "46", "48", "52"), "46"),
        _science(
            "What is the approximate speed of light in a vacuum?",
            ("300,000 km/s", "150,000 km/s", "450,000 km/s", "600,000 km/s"),
            "300,000 km/s",
        ),
        _science("What is the chemical symbol for gold?", ("Au", "Ag", "Go", "Gd"), "Au"),
        _science(
            "What is the outermost layer of Earth's atmosphere?",
            ("Exosphere", "Stratosphere", "Troposphere", "Mesosphere"),
            "Exosphere",
        ),
    ),
    X: (
        _science(
            "What is Avogadro's number approximately?",
            ("6.02 × 10²³", "3.14 × 10²³", "9.11 × 10²³", "1.66 × 10²³"),
            "6.02 × 10²³",
        ),
        _science(
            "Which particle carries the electromagnetic force?",
            ("Photon", "Proton", "Neutron", "Electron"),
            "Photon",
        ),
        _science(
            "In which organelle does photosynthesis occur?",
            ("Chloroplast", "Mitochondria", "Nucleus", "Endoplasmic reticulum"),
            "Chloroplast",
        ),
    ),
}

SCIENCE_AR = {
    B: (
        _science("ما لون الشمس؟", ("أصفر", "أحمر", "أزرق", "أخضر"), "أصفر"),
        _science("كم عدد أرجل القطة؟", ("٢", "٤", "٦", "٨"), "٤"),
        _science("ما هو شكل الأرض؟", ("دائري", "مربع", "مثلث", "مستطيل"), "دائري"),
    ),
    E: (
        _science("ما هو الكوكب الأقرب إلى الشمس؟", ("عطارد", "الزهرة", "الأرض", "المريخ"), "عطارد"),
        _science("كم عدد الكواكب في المجموعة الشمسية؟", ("٧", "٨", "٩", "١٠"), "٨"),
        _science(
            "ما هو الغاز الذي نتنفسه؟",
            ("الأكسجين", "النيتروجين", "ثاني أكسيد الكربون", "الهيدروجين"),
            "الأكسجين",
        ),
        _science("ما هو أكبر عضو في جسم الإنسان؟", ("الجلد", "الكبد", "القلب", "الدماغ"), "الجلد"),
        _science(
            "ماذا تسمى عملية تحول الماء إلى بخار؟",
            ("التبخر", "التكثف", "التجمد", "الانصهار"),
            "التبخر",
        ),
    ),
    M: (
        _science(
            "ما هو أصغر عظم في جسم الإنسان؟",
            ("الركاب في الأذن", "عظم الرسغ", "عظم الضلع", "عظم الإصبع"),
            "الركاب في الأذن",
        ),
        _science(
            "في أي طبقة من الغلاف الجوي توجد طبقة الأوزون؟",
            ("الستراتوسفير", "التروبوسفير", "الميزوسفير", "الثيرموسفير"),
            "الستراتوسفير",
        ),
        _science(
            "ما هو الحمض الموجود في المعدة؟",
            ("حمض الهيدروكلوريك", "حمض الكبريتيك", "حمض النيتريك", "حمض الفوسفوريك"),
            "حمض الهيدروكلوريك",
        ),
    ),
    H: (
        _science(
            "ما هو العنصر الأكثر وفرة في الكون؟",
            ("الهيدروجين", "الهيليوم", "الأكسجين", "الكربون"),
            "الهيدروجين",
        ),
        _science("كم عدد الكروموسومات في الخلية البشرية؟", ("٢٣", "٤٦", "٤٨", "٥٢"), "٤٦"),
        _science(
            "ما هي سرعة الضوء في الفراغ تقريباً؟",
            ("٣٠٠،٠٠٠ كم/ثانية", "١٥٠،٠٠٠ كم/ثانية", "٤٥٠،٠٠٠ كم/ثانية", "٦٠٠،٠٠٠ كم/ثانية"),
            "٣٠٠،٠٠٠ كم/ثانية",
        ),
        _science("ما هو الرمز الكيميائي للذهب؟", ("Au", "Ag", "Go", "Gd"), "Au"),
        _science(
            "ما هي الطبقة الخارجية من الغلاف الجوي للأرض؟",
            ("الإكسوسفير", "الستراتوسفير", "التروبوسفير", "الميزوسفير"),
            "الإكسوسفير",
        ),
    ),
    X: (
        _science(
            "ما هو عدد أفوجادرو تقريباً؟",
            ("٦.٠٢ × ١٠²³", "٣.١٤ × ١٠²³", "٩.١١ × ١٠²³", "١.٦٦ × ١٠²³"),
            "٦.٠٢ × ١٠²³",
        ),
        _science(
            "ما هو الجسيم المسؤول عن نقل القوة الكهرومغناطيسية؟",
            ("الفوتون", "البروتون", "النيوترون", "الإلكترون"),
            "الفوتون",
        ),
        _science(
            "في أي عضية تحدث عملية البناء الضوئي؟",
            ("البلاستيدات الخضراء", "الميتوكوندريا", "النواة", "الشبكة الإندوبلازمية"),
            "البلاستيدات الخضراء",
        ),
    ),
}

WORDPLAY_EN = {
    B: (
        _wordplay("Unscramble: TAC", "CAT", "Pet animal"),
        _wordplay("What comes next: 1, 2, 3, ?", "4", "Next number"),
        _wordplay("Complete: Red, Blue, ?", "GREEN", "Another color"),
    ),
    E: (
        _wordplay("Unscramble: TUNES", "UNSET", "To undo a setting"),
        _wordplay("What comes next: 2, 4, 6, 8, ?", "10", "Even numbers"),
        _wordplay("Riddle: What has hands but cannot clap?", "CLOCK", "Tells time"),
        _wordplay("Unscramble: EARTH", "HEART", "Organ that pumps blood"),
        _wordplay("What comes next: 1, 3, 5, 7, ?", "9", "Odd numbers"),
    ),
    M: (
        _wordplay("Unscramble: TEACHER", "CHEATER", "Someone who breaks rules"),
        _wordplay("What comes next: 1, 4, 9, 16, ?", "25", "Perfect squares"),
        _wordplay("Riddle: What gets wetter as it dries?", "TOWEL", "Used after shower"),
    ),
    H: (
        _wordplay("Unscramble: LISTEN", "SILENT", "Without sound"),
        _wordplay("What comes next: 1, 1, 2, 3, 5, 8, ?", "13", "Fibonacci sequence"),
        _wordplay("Riddle: What has cities but no houses, forests but no trees?", "MAP", "Shows geography"),
        _wordplay("Unscramble: DORMITORY", "DIRTY ROOM", "Not clean space"),
        _wordplay("What comes next: 2, 6, 12, 20, 30, ?", "42", "Difference increases"),
    ),
    X: (
        _wordplay("Unscramble: THE MORSE CODE", "HERE COME DOTS", "Communication system"),
        _wordplay("What comes next: 1, 8, 27, 64, ?", "125", "Perfect cubes"),
        _wordplay(
            "Riddle: I am the first to be made and the last to be broken. What am I?",
            "PROMISE",
            "A commitment",
        ),
    ),
}

WORDPLAY_AR = {
    B: (
        _wordplay("أعيد ترتيب الحروف: ر م ق", "قمر", "في السماء ليلاً"),
        _wordplay("ما يأتي بعد: ١، ٢، ٣، ؟", "٤", "الرقم التالي"),
        _wordplay("أكمل: أحمر، أزرق، ؟", "أخضر", "لون آخر"),
    ),
    E: (
        _wordplay("أعيد ترتيب الحروف: س م ش", "شمس", "نجم في السماء"),
        _wordplay("ما يأتي بعد: ٢، ٤، ٦، ٨، ؟", "١٠", "أرقام زوجية"),
        _wordplay("حزر اللغز: أبيض من الثلج وأسود من الليل، يكتب ولا يقرأ", "القلم", "أداة للكتابة"),
        _wordplay("أعيد ترتيب الحروف: ل م ق", "قلم", "للكتابة"),
        _wordplay("ما يأتي بعد: ١، ٣، ٥، ٧، ؟", "٩", "أرقام فردية"),
    ),
    M: (
        _wordplay("أعيد ترتيب الحروف: ك ت ا ب", "كتاب", "للقراءة"),
        _wordplay("ما يأتي بعد: ١، ٤، ٩، ١٦، ؟", "٢٥", "مربعات الأرقام"),
        _wordplay(
            "حزر اللغز: أكون في البحر ولكنني لست ماءً، أكون في السماء ولكنني لست هواءً",
            "السحاب",
            "يحمل المطر",
        ),
    ),
    H: (
        _wordplay("أعيد ترتيب الحروف: م ل ع ل م", "معلم", "مهنة التدريس"),
        _wordplay("ما يأتي بعد: ١، ١، ٢، ٣، ٥، ٨، ؟", "١٣", "متتالية فيبوناتشي"),
        _wordplay("حزر اللغز: له رأس ولا عين له، ولها عين ولا رأس لها", "الدبوس والإبرة", "أدوات خياطة"),
        _wordplay("أعيد ترتيب الحروف: ت و ق ل", "وقت", "الزمن"),
        _wordplay("ما يأتي بعد: ٢، ٦، ١٢، ٢٠، ٣٠، ؟", "٤٢", "الفرق يزداد"),
    ),
    X: (
        _wordplay("أعيد ترتيب الحروف: ح ا س ب و ت م ر ا ك", "حاسوب متراكم", "جهاز إلكتروني متقدم"),
        _wordplay("ما يأتي بعد: ١، ٨، ٢٧، ٦٤، ؟", "١٢٥", "مكعبات الأرقام"),
        _wordplay(
            "حزر اللغز: أنا أول من خلق ولكنني آخر من يموت، أحضر في كل مكان ولكنني لا أُرى",
            "الصمت",
            "غياب الصوت",
        ),
    ),
}


def _freeze(pools_by_locale):
    return MappingProxyType({
        locale: MappingProxyType(dict(pools))
        for locale, pools in pools_by_locale.items()
    })


PUZZLE_BANK = MappingProxyType({
    PuzzleCategory.MATH: _freeze({Locale.EN: MATH_EN, Locale.AR: MATH_AR}),
    PuzzleCategory.SCIENCE: _freeze({Locale.EN: SCIENCE_EN, Locale.AR: SCIENCE_AR}),
    PuzzleCategory.WORDPLAY: _freeze({Locale.EN: WORDPLAY_EN, Locale.AR: WORDPLAY_AR}),
})

del B, E, M, H, X


def get_pool(category: PuzzleCategory, locale: Locale, tier: DifficultyTier) -> Tuple[BankEntry, ...]:
    """Return the candidate puzzles for one category/locale/tier cell.

    Raises KeyError if the cell does not exist.
    """
    return PUZZLE_BANK[category][locale][tier]
