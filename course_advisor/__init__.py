from course_advisor.catalog import CourseCatalog
from course_advisor.course import Course, parse_course_line
from course_advisor.prerequisites import PrerequisiteSet
from course_advisor.tree import CourseTree

__all__ = ["Course", "CourseCatalog", "CourseTree", "PrerequisiteSet", "parse_course_line"]
