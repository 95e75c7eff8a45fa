# === catalog.py ===
import requests

from course_planner.course import WHITESPACE, normalize_code
from course_planner.course_parser import parse_course_line
from course_planner.hash_table import DEFAULT_BUCKET_COUNT, HashTable

HEADERS = {'User-Agent': 'Mozilla/5.0'}
URL_TIMEOUT = 10


def format_prerequisites(course):
    if not course.prerequisites:
        return "None"
    return ", ".join(course.prerequisites)


def is_url(source):
    scheme = source[:8].lower()
    return scheme.startswith("http://") or scheme.startswith("https://")


class CourseCatalog:
    def __init__(self, bucket_count=DEFAULT_BUCKET_COUNT, warn_on_skipped=False):
        self.table = HashTable(bucket_count)
        self.warn_on_skipped = warn_on_skipped
        self.courses_loaded = 0

    def __len__(self):
        return len(self.table)

    def load_lines(self, lines):
        """
        Parse and insert every course line. Returns False if reading the
        line source fails part way; courses inserted before that stay.
        """
        self.courses_loaded = 0
        try:
            for line_no, line in enumerate(lines, 1):
                if not line.strip(WHITESPACE):
                    continue

                course = parse_course_line(line)
                if course is None:
                    if self.warn_on_skipped:
                        print(f"⚠️ Skipping line {line_no}: expected '<id>,<name>[,<prereq>...]' got {line.strip()!r}")
                    continue

                if self.warn_on_skipped and course.id in self.table:
                    print(f"⚠️ Duplicate course {course.id} on line {line_no} is shadowed by an earlier entry")

                self.table.insert(course)
                self.courses_loaded += 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"[ERROR] Failed reading course data: {e}")
            return False
        return True

    def load_file(self, path):
        try:
            f = open(path, encoding="utf-8", errors="surrogateescape", newline="\n")
        except OSError:
            print(f'[ERROR] Unable to open file "{path}".')
            return False
        with f:
            return self.load_lines(f)

    def load_url(self, url):
        try:
            resp = requests.get(url, headers=HEADERS, timeout=URL_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            print(f"[ERROR] {url}: {e}")
            return False
        return self.load_lines(resp.text.split("\n"))

    def load(self, source):
        if is_url(source):
            return self.load_url(source)
        return self.load_file(source)

    def list_sorted(self):
        # sorted() is stable, so equal ids keep their bucket order
        return sorted(self.table.all_entries(), key=lambda course: course.id)

    def describe(self, raw_id):
        course = self.table.find(normalize_code(raw_id))
        if course is None:
            return None
        return {
            "id": course.id,
            "name": course.name,
            "prerequisites": format_prerequisites(course),
        }
