"""
Sample data seeding.

WHAT: Fills an empty database with 5 users, 8 posts and 12 comments so the
API has something to show straight after startup.

HOW: Entities are built with EntityFactory and written through the DAOs,
the same path API requests take. Seeding is skipped when any user exists,
so restarting against a persistent database doesn't duplicate data (and
doesn't trip the unique email index).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.dao.comment import CommentDAO
from blog_api.dao.post import PostDAO
from blog_api.dao.user import UserDAO
from blog_api.models.factory import EntityFactory


logger = logging.getLogger(__name__)


SAMPLE_USERS = [
    ("john.doe@example.com", "John Doe", 28),
    ("jane.smith@example.com", "Jane Smith", 32),
    ("bob.johnson@example.com", "Bob Johnson", 45),
    ("alice.brown@example.com", "Alice Brown", 24),
    ("charlie.wilson@example.com", "Charlie Wilson", 36),
]

# (title, content, index of owning user)
SAMPLE_POSTS = [
    (
        "Getting Started with Spring Boot",
        "Spring Boot makes it easy to create stand-alone, production-grade Spring applications...",
        0,
    ),
    (
        "Introduction to Karate Framework",
        "Karate is an open-source tool to combine API test-automation, mocks, and "
        "performance-testing...",
        0,
    ),
    (
        "Microservices Architecture Patterns",
        "Microservices architecture is a method of developing software applications as "
        "independently deployable services...",
        1,
    ),
    (
        "Docker Best Practices",
        "Docker has revolutionized how we build, ship, and run applications...",
        1,
    ),
    (
        "REST API Design Principles",
        "RESTful APIs are everywhere, and understanding how to design them properly is crucial...",
        2,
    ),
    (
        "CI/CD Pipeline Setup",
        "Continuous Integration and Continuous Deployment are essential practices in modern "
        "software development...",
        3,
    ),
    (
        "Database Optimization Techniques",
        "Database performance is critical for application speed and user experience...",
        3,
    ),
    (
        "Security Best Practices for Web Applications",
        "Security should be a top priority when developing web applications...",
        4,
    ),
]

# (content, index of post, index of author)
SAMPLE_COMMENTS = [
    ("Great introduction! Very helpful for beginners.", 0, 1),
    ("Thanks for sharing this. I learned a lot.", 0, 2),
    ("Can you provide more examples?", 1, 3),
    ("This is exactly what I was looking for!", 1, 4),
    ("Excellent explanation of microservices.", 2, 0),
    ("How does this scale in production?", 2, 4),
    ("Docker has indeed changed everything!", 3, 2),
    ("Very comprehensive guide on REST APIs.", 4, 1),
    ("CI/CD is a game changer for our team.", 5, 0),
    ("These optimization tips are gold!", 6, 2),
    ("Security should always come first.", 7, 1),
    ("Looking forward to more content like this!", 7, 3),
]


@dataclass
class SeedResult:
    """Counts of seeded entities (all zero when seeding was skipped)."""

    users: int = 0
    posts: int = 0
    comments: int = 0


async def seed_sample_data(
    session: AsyncSession,
    factory: Optional[EntityFactory] = None,
) -> SeedResult:
    """
    Seed sample users, posts and comments if the database has no users.

    The caller owns the transaction and commits it.

    Args:
        session: Async database session
        factory: Entity factory (defaults to uuid4 ids and UTC now)

    Returns:
        SeedResult with the number of entities created
    """
    factory = factory or EntityFactory()
    user_dao = UserDAO(session)
    post_dao = PostDAO(session)
    comment_dao = CommentDAO(session)

    if await user_dao.count() > 0:
        logger.info("Database already has users, skipping sample data")
        return SeedResult()

    logger.info("Initializing database with sample data...")

    users = []
    for email, name, age in SAMPLE_USERS:
        users.append(await user_dao.save(factory.new_user(email=email, name=name, age=age)))
    logger.info(f"Created {len(users)} users")

    posts = []
    for title, content, owner in SAMPLE_POSTS:
        post = factory.new_post(title=title, content=content, user_id=users[owner].id)
        posts.append(await post_dao.save(post))
    logger.info(f"Created {len(posts)} posts")

    comments = []
    for content, post_index, author in SAMPLE_COMMENTS:
        comment = factory.new_comment(
            content=content,
            post_id=posts[post_index].id,
            user_id=users[author].id,
        )
        comments.append(await comment_dao.save(comment))
    logger.info(f"Created {len(comments)} comments")

    logger.info(
        f"Database initialized with {len(users)} users, {len(posts)} posts, "
        f"{len(comments)} comments"
    )
    return SeedResult(users=len(users), posts=len(posts), comments=len(comments))
