"""Database seeder for local testing of the anonymous board."""
import asyncio
import argparse
import random
import time

from app.database import engine, async_session, Base
from app.models import Post
from app.services.encrypt_service import encrypt_service

TOPICS = ["lunch", "weather", "homework", "music", "games", "movies",
          "books", "travel", "pets", "coffee", "sports", "jobs"]

# Every seeded post shares this password so edits can be tried by hand.
SEED_PASSWORD = "board1234"


async def seed(num_posts: int, deleted_ratio: float):
    print(f"Seeding: {num_posts} posts (~{deleted_ratio:.0%} soft-deleted)")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    # Hashing is the slow part; one hash is reused for every row.
    hashed_password = await encrypt_service.hash(SEED_PASSWORD)

    deleted = 0
    async with async_session() as session:
        batch_size = 500
        for batch_start in range(0, num_posts, batch_size):
            batch_end = min(batch_start + batch_size, num_posts)
            for i in range(batch_start, batch_end):
                topic = random.choice(TOPICS)
                is_deleted = random.random() < deleted_ratio
                deleted += is_deleted
                session.add(Post(
                    title=f"Post {i}: anyone else thinking about {topic}?",
                    content=f"Just wanted to talk about {topic}. " * random.randint(1, 10),
                    password=hashed_password,
                    is_deleted=is_deleted,
                ))
            await session.flush()
            print(f"  Batch {batch_start}-{batch_end}: posts created")

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Posts: {num_posts}")
    print(f"  Soft-deleted: {deleted}")
    print(f"  Password: {SEED_PASSWORD}")


def main():
    parser = argparse.ArgumentParser(description="Seed the board database")
    parser.add_argument("--posts", type=int, default=100, help="Number of posts to create")
    parser.add_argument("--deleted-ratio", type=float, default=0.1,
                        help="Fraction of posts created already soft-deleted")
    args = parser.parse_args()
    asyncio.run(seed(args.posts, args.deleted_ratio))


if __name__ == "__main__":
    main()
