"""
Seed the catalog: interviewers, popular topics, behavioral themes and the
role question bank.
Run: python -m scripts.seed

Safe to re-run: rows are keyed on id (interviewers) or title (catalog
entries) and existing rows are left alone.
"""
import logging

from app.db.session import SessionLocal
from app.db.init_db import init_db
from app.db.models.interviewer import Interviewer
from app.db.models.popular_interview import PopularInterview
from app.db.models.behavioral_interview import BehavioralInterview
from app.db.models.question import Question
from app.db.models.enums import JobRole
from app.core.result import Err
from app.schemas.catalog import InterviewerCreate
from app.services.interviewer_service import create_interviewer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


INTERVIEWERS = [
    {
        "id": "interviewer_lisa_001",
        "name": "Explorer Lisa",
        "agent_id": "agent_lisa_placeholder",
        "rapport": 7, "exploration": 10, "empathy": 7, "speed": 5,
        "image": "/interviewers/Lisa.png",
        "description": (
            "Hi! I'm Lisa, an enthusiastic and empathetic interviewer who loves to explore. "
            "I delve deep into conversations while maintaining a steady pace."
        ),
        "audio": "Lisa.wav",
        "specialties": ["Technical Interviews", "Problem Solving", "Exploration"],
    },
    {
        "id": "interviewer_bob_001",
        "name": "Empathetic Bob",
        "agent_id": "agent_bob_placeholder",
        "rapport": 7, "exploration": 7, "empathy": 10, "speed": 5,
        "image": "/interviewers/Bob.png",
        "description": (
            "Hi! I'm Bob, your go-to empathetic interviewer. I focus on understanding and "
            "connecting with people so every conversation is insightful."
        ),
        "audio": "Bob.wav",
        "specialties": ["Behavioral Interviews", "Empathy", "Communication"],
    },
    {
        "id": "interviewer_sarah_001",
        "name": "Technical Sarah",
        "agent_id": "agent_sarah_placeholder",
        "rapport": 8, "exploration": 8, "empathy": 6, "speed": 7,
        "image": "/interviewers/Sarah.png",
        "description": (
            "Hello! I'm Sarah, a technical interviewer specializing in system design, "
            "algorithms and technical architecture discussions."
        ),
        "audio": "Sarah.wav",
        "specialties": ["System Design", "Algorithms", "Technical Architecture"],
    },
    {
        "id": "interviewer_mike_001",
        "name": "Analytical Mike",
        "agent_id": "agent_mike_placeholder",
        "rapport": 6, "exploration": 9, "empathy": 5, "speed": 8,
        "image": "/interviewers/Mike.png",
        "description": (
            "I'm Mike, an analytical interviewer who focuses on problem-solving methodologies "
            "and logical thinking."
        ),
        "audio": "Mike.wav",
        "specialties": ["Problem Solving", "Analytical Thinking", "Logic"],
    },
    {
        "id": "interviewer_emma_001",
        "name": "Behavioral Emma",
        "agent_id": "agent_emma_placeholder",
        "rapport": 10, "exploration": 6, "empathy": 9, "speed": 4,
        "image": "/interviewers/Emma.png",
        "description": (
            "Hi there! I'm Emma, specializing in behavioral and cultural fit interviews. "
            "Let's talk about your experiences, motivations and career aspirations."
        ),
        "audio": "Emma.wav",
        "specialties": ["Behavioral Questions", "Cultural Fit", "Career Development"],
    },
]

# (title, difficulty, duration, category, description)
POPULAR_INTERVIEWS = [
    ("Stacks vs Queues", "Beginner", 20, "Data Structures",
     "Learn the FIFO and LIFO flow concepts and when to use each."),
    ("Hash Tables", "Intermediate", 25, "Data Structures",
     "Hash functions, collision resolution, load factors and real-world uses."),
    ("REST API 101", "Beginner", 30, "Web Development",
     "HTTP methods, status codes and RESTful API design."),
    ("Processes vs Threads", "Intermediate", 25, "Operating Systems",
     "Memory models, synchronization and concurrency patterns."),
    ("Low-Level Design", "Advanced", 45, "System Design",
     "Object-oriented design principles and design patterns."),
    ("DevOps Fundamentals", "Intermediate", 35, "DevOps",
     "CI/CD pipelines, containerization and cloud tooling."),
    ("Binary Trees", "Intermediate", 30, "Data Structures",
     "Tree operations, traversal methods and tree-based algorithms."),
    ("Database Indexing", "Advanced", 40, "Databases",
     "B-trees, hash indexes and query optimization."),
    ("Microservices Architecture", "Advanced", 50, "System Design",
     "Service decomposition and inter-service communication."),
    ("Authentication & Authorization", "Intermediate", 35, "Security",
     "JWT, OAuth, session management and access control."),
    ("Caching Strategies", "Intermediate", 30, "System Design",
     "Cache levels, invalidation strategies and distributed caches."),
    ("Graph Algorithms", "Advanced", 45, "Algorithms",
     "Graph traversal, shortest paths and graph-based problem solving."),
    ("Load Balancing", "Advanced", 40, "System Design",
     "Balancing algorithms, health checks and high availability."),
    ("Message Queues", "Intermediate", 35, "System Design",
     "Message brokers, pub/sub and event-driven architectures."),
    ("SQL vs NoSQL", "Intermediate", 30, "Databases",
     "Relational vs non-relational stores, ACID and the CAP theorem."),
    ("Software Testing", "Beginner", 25, "Software Engineering",
     "Unit and integration testing, TDD and testing practice."),
]

# (title, category, company, description)
BEHAVIORAL_INTERVIEWS = [
    ("Teamwork", "Common Themes", None,
     "Collaboration, working with others and team dynamics."),
    ("Leadership", "Common Themes", None,
     "Taking initiative, leading projects and influencing others."),
    ("Conflict Resolution", "Common Themes", None,
     "Handling disagreements and difficult situations at work."),
    ("Time Management", "Common Themes", None,
     "Prioritizing tasks, meeting deadlines and juggling responsibilities."),
    ("Problem Solving", "Common Themes", None,
     "Analytical thinking, creative solutions and overcoming challenges."),
    ("Adaptability", "Common Themes", None,
     "Handling change and learning new skills."),
    ("Communication", "Common Themes", None,
     "Presenting ideas and explaining complex concepts."),
    ("Google Behavioral", "Company Specific", "Google",
     "Googleyness, leadership and role-related experience."),
    ("Microsoft Behavioral", "Company Specific", "Microsoft",
     "Collaboration, growth mindset and customer focus."),
    ("Amazon Behavioral", "Company Specific", "Amazon",
     "STAR examples for Amazon's Leadership Principles."),
    ("Meta Behavioral", "Company Specific", "Meta",
     "Impact, iteration and building connections."),
    ("Apple Behavioral", "Company Specific", "Apple",
     "Innovation, attention to detail and user focus."),
    ("Netflix Behavioral", "Company Specific", "Netflix",
     "Freedom, responsibility and high performance."),
]

ROLE_QUESTIONS = {
    JobRole.FRONTEND_DEVELOPER: [
        "Explain how the browser renders a page from HTML, CSS and JavaScript.",
        "How do you manage state in a large single-page application?",
        "Describe how you would improve the performance of a slow-loading page.",
    ],
    JobRole.BACKEND_DEVELOPER: [
        "How would you design a rate limiter for a public API?",
        "Explain the trade-offs between SQL and NoSQL databases.",
        "How do you make a background job safe to retry?",
    ],
    JobRole.DATA_SCIENTIST: [
        "How do you detect and handle overfitting?",
        "Explain the bias-variance trade-off with an example.",
        "How would you evaluate a model on a heavily imbalanced dataset?",
    ],
    JobRole.PRODUCT_MANAGER: [
        "How do you prioritize features with limited engineering capacity?",
        "Describe how you would define success metrics for a new feature.",
        "Tell me about a product decision you made with incomplete data.",
    ],
    JobRole.UX_DESIGNER: [
        "Walk me through your design process for a new feature.",
        "How do you validate a design with users?",
        "How do you balance accessibility against visual design goals?",
    ],
}


def seed_interviewers(db) -> int:
    created = 0
    for data in INTERVIEWERS:
        if db.query(Interviewer).filter(Interviewer.id == data["id"]).first():
            logger.info(f"Interviewer already exists: {data['name']}")
            continue
        result = create_interviewer(db, InterviewerCreate(**data))
        if isinstance(result, Err):
            raise RuntimeError(f"Could not seed interviewer {data['name']}: {result.error}")
        created += 1
    return created


def seed_popular_interviews(db) -> int:
    created = 0
    for title, difficulty, duration, category, description in POPULAR_INTERVIEWS:
        if db.query(PopularInterview).filter(PopularInterview.title == title).first():
            continue
        db.add(PopularInterview(
            title=title,
            difficulty=difficulty,
            duration=duration,
            category=category,
            description=description,
            is_active=True,
        ))
        created += 1
    return created


def seed_behavioral_interviews(db) -> int:
    created = 0
    for title, category, company, description in BEHAVIORAL_INTERVIEWS:
        if db.query(BehavioralInterview).filter(BehavioralInterview.title == title).first():
            continue
        db.add(BehavioralInterview(
            title=title,
            category=category,
            company=company,
            description=description,
            is_active=True,
        ))
        created += 1
    return created


def seed_questions(db) -> int:
    created = 0
    for role, questions in ROLE_QUESTIONS.items():
        if db.query(Question).filter(Question.role == role).first():
            continue
        for text in questions:
            db.add(Question(role=role, question=text))
            created += 1
    return created


def main():
    init_db()
    db = SessionLocal()
    try:
        counts = {
            "interviewers": seed_interviewers(db),
            "popular_interviews": seed_popular_interviews(db),
            "behavioral_interviews": seed_behavioral_interviews(db),
            "questions": seed_questions(db),
        }
        db.commit()
        logger.info(f"Seed completed: {counts}")
    except Exception:
        db.rollback()
        logger.exception("Seed failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
