"""
Cache key management.

Centralized cache key definitions to:
- Prevent key collisions between entity types sharing one Redis keyspace
- Document cache structure
"""


class CacheKeys:
    """
    Centralized cache key definitions.

    Naming convention: {entity}:{student_id}

    Examples:
        - result:S101 -> Serialized result record for student S101
        - student:S101 -> Reserved for student profiles
    """

    PREFIX_RESULT = "result"
    PREFIX_STUDENT = "student"

    # TTLs (in seconds)
    TTL_RESULT = 60 * 10      # 10 minutes, overridden by CACHE_TTL

    @staticmethod
    def result(student_id: str) -> str:
        """Cache key for a student's result record."""
        return f"{CacheKeys.PREFIX_RESULT}:{student_id}"

    @staticmethod
    def student(student_id: str) -> str:
        """Cache key for a student's profile."""
        return f"{CacheKeys.PREFIX_STUDENT}:{student_id}"
