from scolaris.core.models.record import Record


class Subject(Record):
    name: str
