# === course_parser.py ===
from course_planner.course import Course, WHITESPACE, normalize_code


def split_fields(line):
    # "A,B," has two fields, not three: a trailing comma closes the last field
    parts = line.split(",")
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def parse_course_line(line):
    """
    Parse one catalog line of the form

        CSCI300,Introduction to Algorithms,CSCI200,MATH201

    into a Course. Returns None for blank lines and for lines with fewer
    than two fields (id and name are both required).
    """
    line = line.strip(WHITESPACE)
    if not line:
        return None

    parts = split_fields(line)
    if len(parts) < 2:
        return None

    code, name = parts[0], parts[1]
    prerequisites = []
    for token in parts[2:]:
        prereq = normalize_code(token)
        if prereq:
            prerequisites.append(prereq)

    return Course(normalize_code(code), name.strip(WHITESPACE), prerequisites)
