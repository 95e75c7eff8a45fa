# === main.py ===
import sys

from course_planner.catalog import CourseCatalog
from course_planner.config import DEFAULT_CONFIG_FILE, load_planner_config

MENU = """
  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  9. Exit.
"""
EXIT_CHOICE = 9
NOT_LOADED = "Please load the data structure first (option 1)."


def read_choice(text):
    try:
        return int(text.strip())
    except ValueError:
        return None


def print_course_list(catalog, output_fn=print):
    for course in catalog.list_sorted():
        output_fn(f"{course.id}, {course.name}")


def print_course(catalog, raw_id, output_fn=print):
    details = catalog.describe(raw_id)
    if details is None:
        output_fn("Course not found.")
        return
    output_fn(f"{details['id']}, {details['name']}")
    output_fn(f"Prerequisites: {details['prerequisites']}")


def run(catalog, input_fn=input, output_fn=print, default_source=None):
    """Menu loop. Returns when the user picks 9 or input runs out."""
    loaded = False
    output_fn("Welcome to the course planner.")

    while True:
        output_fn(MENU)
        try:
            choice = read_choice(input_fn("What would you like to do? "))
        except EOFError:
            break

        if choice is None:
            output_fn("That is not a valid option.")
            continue

        output_fn("")
        if choice == 1:
            prompt = "Enter the file name to load: "
            if default_source:
                prompt = f"Enter the file name to load [{default_source}]: "
            try:
                source = input_fn(prompt).strip()
            except EOFError:
                break
            source = source or default_source or ""
            loaded = catalog.load(source)
            if loaded:
                output_fn("Data structure loaded.")
                output_fn(f"✅ {catalog.courses_loaded} courses read from {source}")

        elif choice == 2:
            if not loaded:
                output_fn(NOT_LOADED)
            else:
                output_fn("Here is a sample schedule:")
                print_course_list(catalog, output_fn)

        elif choice == 3:
            if not loaded:
                output_fn(NOT_LOADED)
                continue
            try:
                raw_id = input_fn("What course do you want to know about? ")
            except EOFError:
                break
            print_course(catalog, raw_id, output_fn)

        elif choice == EXIT_CHOICE:
            output_fn("Thank you for using the course planner!")
            break

        else:
            output_fn(f"{choice} is not a valid option.")

    return loaded


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else DEFAULT_CONFIG_FILE
    config = load_planner_config(config_path)

    catalog = CourseCatalog(
        bucket_count=config["bucket_count"],
        warn_on_skipped=config["warn_on_skipped"],
    )
    run(catalog, default_source=config["data_file"])


if __name__ == "__main__":
    main()
