from scolaris.core.models.record import Record
from scolaris.core.models.principal import Principal
from scolaris.core.models.student import Student
from scolaris.core.models.staff import ClassAssignment, StaffMember
from scolaris.core.models.subject import Subject
from scolaris.core.models.grade_entry import GradeEntry
from scolaris.core.models.absence import Absence
from scolaris.core.models.fee import Fee
from scolaris.core.models.document import OWNED_COLLECTIONS, Document

__all__ = [
    "Absence",
    "ClassAssignment",
    "Document",
    "Fee",
    "GradeEntry",
    "OWNED_COLLECTIONS",
    "Principal",
    "Record",
    "StaffMember",
    "Student",
    "Subject",
]
