from enum import Enum


class Term(str, Enum):
    TERM_1 = "Trimestre 1"
    TERM_2 = "Trimestre 2"
    TERM_3 = "Trimestre 3"


class StaffRole(str, Enum):
    TEACHER = "teacher"
    SUPERVISOR = "supervisor"


class ActorRole(str, Enum):
    SUPERADMIN = "superadmin"
    PRINCIPAL = "principal"
    TEACHER = "teacher"
    SUPERVISOR = "supervisor"


class Month(str, Enum):
    JANUARY = "Janvier"
    FEBRUARY = "Février"
    MARCH = "Mars"
    APRIL = "Avril"
    MAY = "Mai"
    JUNE = "Juin"
    JULY = "Juillet"
    AUGUST = "Août"
    SEPTEMBER = "Septembre"
    OCTOBER = "Octobre"
    NOVEMBER = "Novembre"
    DECEMBER = "Décembre"


# Calendar order, used to sort revenue per month.
MONTH_ORDER = list(Month)
