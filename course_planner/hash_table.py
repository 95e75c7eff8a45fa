# === hash_table.py ===
DEFAULT_BUCKET_COUNT = 20


class HashTable:
    """
    Chained hash table keyed by course id.

    Each bucket is a list of Course copies kept in insertion order. The
    bucket count is fixed when the table is built; ``resize`` is the only
    way to change it and it returns a new table.
    """

    def __init__(self, bucket_count=DEFAULT_BUCKET_COUNT):
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
            raise ValueError(f"bucket_count must be an int, got {bucket_count!r}")
        if bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self.buckets = [[] for _ in range(bucket_count)]  # List[List[Course]]
        self.size = 0

    def __len__(self):
        return self.size

    def __contains__(self, course_id):
        return self.find(course_id) is not None

    def hash_key(self, key):
        # Byte sum, so anagrams like "AB" and "BA" land in the same bucket
        return sum(key.encode("utf-8", "surrogateescape")) % self.bucket_count

    def bucket_of(self, course_id):
        return self.hash_key(course_id)

    def insert(self, course):
        self.buckets[self.hash_key(course.id)].append(course.copy())
        self.size += 1

    def find(self, course_id):
        """Return a copy of the first course stored under ``course_id``, or None."""
        for course in self.buckets[self.hash_key(course_id)]:
            if course.id == course_id:
                return course.copy()
        return None

    def all_entries(self):
        """Every stored course, bucket by bucket, insertion order within a bucket."""
        return [course.copy() for bucket in self.buckets for course in bucket]

    def bucket_sizes(self):
        return [len(bucket) for bucket in self.buckets]

    def resize(self, bucket_count):
        table = HashTable(bucket_count)
        for bucket in self.buckets:
            for course in bucket:
                table.insert(course)
        return table
