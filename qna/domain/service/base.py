"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities, such as keeping an
    answer's like_count in step with its likes.
    """
