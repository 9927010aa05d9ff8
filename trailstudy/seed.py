from trailstudy.store import Store


def seed_store(store: Store, admin_id: str) -> None:
    """Populate a fresh store with the admin account and a sample topic."""
    store.create_user(admin_id, is_admin=True)

    topic = store.create_topic(
        title="Introduction to JavaScript",
        description="Learn the basics of JavaScript programming language",
        is_public=True,
        created_by=admin_id,
        topic_id="topic-1"
    )
    store.create_flashcard(
        topic_id=topic.id,
        question="What is JavaScript?",
        answer="JavaScript is a high-level, interpreted programming language that conforms to the ECMAScript specification.",
        created_by=admin_id,
        card_id="card-1"
    )
    store.create_flashcard(
        topic_id=topic.id,
        question="What is a variable?",
        answer="A variable is a container for a value, like a number or a string.",
        created_by=admin_id,
        card_id="card-2"
    )
