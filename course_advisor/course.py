# === course.py ===
from typing import List, Optional

from pydantic import BaseModel, Field

from course_advisor.errors import EmptyTitle, MalformedCourseNumber

COURSE_NUMBER_LENGTH = 7
LINE_ENDINGS = "\r\n"


class Course(BaseModel):
    """One row of the course data file."""

    number: str = Field(
        ...,
        min_length=COURSE_NUMBER_LENGTH,
        max_length=COURSE_NUMBER_LENGTH,
        description="Course number (e.g., 'CSCI200')",
    )
    title: str = Field(..., min_length=1, description="Course title")
    prerequisites: List[str] = Field(
        default_factory=list,
        description="Prerequisite course numbers in file order",
    )

    def summary(self) -> str:
        return f"{self.number}, {self.title}"

    def details(self) -> str:
        lines = [self.summary()]
        if self.prerequisites:
            lines.append("Prerequisites: " + ", ".join(self.prerequisites))
        return "\n".join(lines)


def parse_course_line(line: str, line_number: int = 1, delimiter: str = ",") -> Optional[Course]:
    """
    Parse one line of the data file into a Course.

    Returns None for a blank line. Raises MalformedCourseNumber or EmptyTitle
    for a line that cannot be a course.
    """
    line = line.rstrip(LINE_ENDINGS)
    if not line.strip():
        return None

    parts = line.split(delimiter)
    number = parts[0]
    if len(number) != COURSE_NUMBER_LENGTH:
        raise MalformedCourseNumber(line_number, number)

    title = parts[1] if len(parts) > 1 else ""
    if not title:
        raise EmptyTitle(line_number, number)

    prerequisites = []
    for field in parts[2:]:
        # a CRLF file read as bytes leaves a lone "\r" as the last field
        field = field.rstrip(LINE_ENDINGS)
        if not field:
            continue
        prerequisites.append(field)

    return Course(number=number, title=title, prerequisites=prerequisites)
