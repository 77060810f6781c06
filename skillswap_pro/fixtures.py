# skillswap_pro/fixtures.py
"""Static demo data used in offline mode and by the seed script."""

from typing import List

from skillswap_pro.schemas import Session, Skill, Snapshot, User


def avatar_for(seed: str) -> str:
    return f"https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def demo_skills() -> List[Skill]:
    return [
        Skill(id="s1", name="React Development", category="Programming"),
        Skill(id="s2", name="Python Basics", category="Programming"),
        Skill(id="s3", name="UI Design", category="Design"),
        Skill(id="s4", name="Acoustic Guitar", category="Music"),
        Skill(id="s5", name="Digital Marketing", category="Marketing"),
        Skill(id="s6", name="French Level B2", category="Languages"),
        Skill(id="s7", name="Sushi Making", category="Cooking"),
        Skill(id="s8", name="Project Management", category="Business"),
        Skill(id="s9", name="TypeScript", category="Programming"),
        Skill(id="s10", name="Logo Design", category="Design"),
    ]


def demo_users(skills: List[Skill]) -> List[User]:
    by_id = {s.id: s for s in skills}

    def pick(*ids):
        return [by_id[i] for i in ids]

    return [
        User(
            id="u1",
            name="Alex Johnson",
            email="alex@example.com",
            password="password123",
            location="San Francisco, CA",
            bio=(
                "Full-stack developer looking to pick up some acoustic guitar skills "
                "and improve my conversational French for my next trip to Paris."
            ),
            avatar=avatar_for("Alex"),
            skills_offered=pick("s1", "s2", "s9"),
            skills_requested=pick("s4", "s6"),
            rating=4.8,
            review_count=12,
        ),
        User(
            id="u2",
            name="Sarah Chen",
            email="sarah@example.com",
            password="password123",
            location="Vancouver, BC",
            bio=(
                "Passionate UI designer and hobbyist sushi chef. I want to learn React "
                "to bring my design visions to life independently."
            ),
            avatar=avatar_for("Sarah"),
            skills_offered=pick("s3", "s7", "s10"),
            skills_requested=pick("s1"),
            rating=4.9,
            review_count=8,
        ),
        User(
            id="u3",
            name="Marc Dubois",
            email="marc@example.com",
            password="password123",
            location="Paris, FR",
            bio=(
                "Native French speaker and digital marketing expert. Looking to pick up "
                "some sushi making tips and basic coding skills."
            ),
            avatar=avatar_for("Marc"),
            skills_offered=pick("s6", "s5"),
            skills_requested=pick("s7", "s2"),
            rating=4.5,
            review_count=5,
        ),
        User(
            id="admin1",
            name="Platform Admin",
            email="admin@skillswap.com",
            password="admin",
            location="Remote",
            bio="Official SkillSwap Pro Administrator. Monitoring the platform for quality and safety.",
            role="admin",
            avatar=avatar_for("Admin"),
            rating=5.0,
            review_count=0,
        ),
    ]


def demo_sessions() -> List[Session]:
    return [
        Session(
            id="sess1",
            requester_id="u2",
            provider_id="u1",
            skill_id="s1",
            date="2023-12-01",
            time="14:00",
            end_time="15:20",
            status="Completed",
            notes="Great introduction to React functional components and hooks.",
        ),
        Session(
            id="sess2",
            requester_id="u1",
            provider_id="u3",
            skill_id="s5",
            date="2023-12-15",
            time="10:00",
            end_time="11:20",
            status="Approved",
        ),
    ]


def demo_snapshot() -> Snapshot:
    """Fresh copy of the demo data set (callers may mutate it freely)."""
    skills = demo_skills()
    return Snapshot(
        users=demo_users(skills),
        skills=skills,
        sessions=demo_sessions(),
    )
