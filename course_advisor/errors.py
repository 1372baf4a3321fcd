# === errors.py ===
class AdvisorError(Exception):
    """Base class for everything the advisor raises on purpose."""


class LoadError(AdvisorError):
    """A load was rejected. The catalog is left empty."""


class MalformedCourseNumber(LoadError):
    def __init__(self, line_number, value):
        self.line_number = line_number
        self.value = value
        super().__init__(f"line {line_number}: invalid course number {value!r}")


class EmptyTitle(LoadError):
    def __init__(self, line_number, number):
        self.line_number = line_number
        self.number = number
        super().__init__(f"line {line_number}: empty course title for {number}")


class DuplicateCourseNumber(LoadError):
    def __init__(self, number):
        self.number = number
        super().__init__(f"course {number} is listed more than once")


class UnknownPrerequisite(LoadError):
    def __init__(self, number):
        self.number = number
        super().__init__(f"prerequisite course {number} does not exist")


class FileInaccessible(LoadError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f"file {path} could not be opened"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InputError(AdvisorError):
    """Bad interactive input. Recovered by prompting again."""


class InvalidMenuChoice(InputError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"{value} is not a valid option.")


class InvalidSearchInput(InputError):
    def __init__(self, value):
        self.value = value
        super().__init__("Invalid course number")
