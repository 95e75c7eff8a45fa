# === course.py ===
WHITESPACE = " \t\r\n"
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def normalize_code(code):
    """Trim surrounding whitespace and uppercase ASCII letters (e.g. ' csci300 ' -> 'CSCI300')."""
    return code.strip(WHITESPACE).translate(_ASCII_UPPER)


class Course:
    def __init__(self, id, name, prerequisites=None):
        self.id = id
        self.name = name
        self.prerequisites = list(prerequisites) if prerequisites else []  # list of course ids

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (self.id, self.name, self.prerequisites) == (other.id, other.name, other.prerequisites)

    def copy(self):
        return Course(self.id, self.name, self.prerequisites)
