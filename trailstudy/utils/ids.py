from uuid import uuid4


def generate_id(prefix: str) -> str:
    """Return a collision-resistant entity id such as ``topic-3f2a...``."""
    return f"{prefix}-{uuid4().hex}"
