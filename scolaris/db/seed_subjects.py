"""
Default subjects for a fresh document.

Seed subjects carry no owner: like any legacy record they stay hidden from
tenant-scoped reads until a principal claims them.
"""
from typing import Dict, List, Tuple

# (subject_id, subject_name)
DEFAULT_SUBJECTS: List[Tuple[str, str]] = [
    ("sub_math", "Mathématiques"),
    ("sub_fr", "Français"),
    ("sub_ar", "Arabe"),
    ("sub_en", "Anglais"),
    ("sub_pc", "Physique-Chimie"),
    ("sub_svt", "SVT"),
    ("sub_hg", "Histoire-Géographie"),
    ("sub_info", "Informatique"),
]


def seed_subjects() -> List[Dict[str, str]]:
    return [{"id": subject_id, "name": name} for subject_id, name in DEFAULT_SUBJECTS]
