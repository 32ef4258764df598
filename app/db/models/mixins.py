import uuid


def generate_id() -> str:
    """Primary key for string-keyed tables."""
    return uuid.uuid4().hex
