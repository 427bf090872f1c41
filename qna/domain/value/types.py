"""Domain value objects for the Q&A board.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from qna.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Display name chosen at registration."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v


class TopicName(RootValueObject[str]):
    """Topic name used to tag questions.

    Names keep their display casing, e.g. 'Node.js', 'Web Development'.
    """

    @field_validator("root")
    @classmethod
    def validate_topic_name(cls, v: str) -> str:
        """Validate topic name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Topic name must be 1-50 characters")
        return v
