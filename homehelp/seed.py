"""
Initial catalog data.

Services are inserted first so providers can be linked to them by name.
Nothing is written when the services table already has rows.
"""

import logging
import secrets

from sqlalchemy.orm import Session

from .auth import hash_password
from .domain.catalog.repository import CatalogRepository
from .models import Service, User

logger = logging.getLogger(__name__)

SERVICES = [
    {
        "name": "House Cleaning",
        "short_description": "Get help with cleaning your home, including dusting, vacuuming, and more.",
        "description": (
            "Professional cleaning services for your home, including dusting, vacuuming, "
            "mopping, bathroom and kitchen cleaning."
        ),
        "icon": "cleaning_services",
        "inclusions": [
            "Dusting of all surfaces and furniture",
            "Vacuuming carpets and rugs",
            "Mopping hard floors",
            "Bathroom cleaning (toilet, shower, sink)",
            "Kitchen cleaning (counters, sink, outside of appliances)",
        ],
    },
    {
        "name": "Yard Work",
        "short_description": "Assistance with lawn mowing, gardening, and outdoor maintenance tasks.",
        "description": (
            "Complete yard maintenance services including lawn mowing, garden care, "
            "leaf removal, and seasonal outdoor maintenance."
        ),
        "icon": "yard",
        "inclusions": [
            "Lawn mowing and edging",
            "Garden weeding and maintenance",
            "Leaf and debris removal",
            "Shrub and hedge trimming",
            "Basic outdoor cleaning",
        ],
    },
    {
        "name": "Grocery Shopping",
        "short_description": "Someone to help you shop for groceries or deliver them to your home.",
        "description": (
            "Assistance with grocery shopping, including creating shopping lists, "
            "picking up items, and delivering them to your home."
        ),
        "icon": "shopping_basket",
        "inclusions": [
            "Creating grocery lists",
            "Shopping at your preferred stores",
            "Picking fresh produce and quality items",
            "Delivery to your home",
            "Assistance with putting groceries away",
        ],
    },
    {
        "name": "Caregiver Services",
        "short_description": "Professional caregivers offering personal care, companionship, and support.",
        "description": (
            "Professional caregiving services providing personal assistance, medication "
            "reminders, meal preparation, and companionship."
        ),
        "icon": "health_and_safety",
        "inclusions": [
            "Personal care assistance",
            "Medication reminders",
            "Meal preparation",
            "Light housekeeping",
            "Companionship and emotional support",
        ],
    },
    {
        "name": "Home Repairs",
        "short_description": "Small fixes around the house, from leaky faucets to loose handrails.",
        "description": (
            "Handyman help for minor home repairs, including plumbing fixes, furniture "
            "assembly, safety rails and light fixture replacement."
        ),
        "icon": "handyman",
        "inclusions": [
            "Minor plumbing repairs",
            "Furniture assembly",
            "Grab bar and handrail installation",
            "Light fixture and bulb replacement",
            "Door and cabinet adjustments",
        ],
    },
]

PROVIDERS = [
    {
        "name": "Sarah Johnson",
        "experience": "5 years experience, background checked, certified in home cleaning",
        "rating": 4.5,
        "reviews": 129,
        "tags": ["Available Weekdays", "Pet Friendly", "Eco Products"],
        "services": ["House Cleaning"],
    },
    {
        "name": "Michael Chen",
        "experience": "8 years experience, background checked, deep cleaning specialist",
        "rating": 5.0,
        "reviews": 87,
        "tags": ["Weekend Availability", "Deep Cleaning", "Senior Specialist"],
        "services": ["House Cleaning"],
    },
    {
        "name": "Robert Garcia",
        "experience": "10 years experience, licensed landscaper, organic gardening specialist",
        "rating": 4.8,
        "reviews": 95,
        "tags": ["Organic Methods", "Equipment Provided", "7-Day Availability"],
        "services": ["Yard Work"],
    },
    {
        "name": "Jennifer Williams",
        "experience": "6 years experience, trained personal shopper, dietary needs specialist",
        "rating": 4.7,
        "reviews": 112,
        "tags": ["Dietary Restrictions", "Same-Day Delivery", "Comparative Shopping"],
        "services": ["Grocery Shopping"],
    },
    {
        "name": "David Thompson",
        "experience": "12 years experience, certified caregiver, specialized in elder care",
        "rating": 4.9,
        "reviews": 156,
        "tags": ["Elder Care", "Medical Background", "Overnight Available"],
        "services": ["Caregiver Services"],
    },
    {
        "name": "Thomas Brown",
        "experience": "15 years experience, licensed handyman, home safety modifications",
        "rating": 4.6,
        "reviews": 74,
        "tags": ["Senior Safety", "Tools Provided", "Same-Week Visits"],
        "services": ["Home Repairs"],
    },
]


def seed_catalog(db: Session) -> bool:
    """Insert the default services and providers. Returns False if the catalog already exists."""
    if db.query(Service).first():
        return False

    for service_data in SERVICES:
        CatalogRepository.create_service(db, **service_data)

    for provider_data in PROVIDERS:
        data = dict(provider_data)
        service_names = data.pop("services")
        CatalogRepository.create_provider(db, service_names, **data)

    logger.info(f"🌱 Seeded catalog: {len(SERVICES)} services, {len(PROVIDERS)} providers")
    return True


def seed_demo_user(db: Session, user_id: int) -> None:
    """Make sure the fixed identity used with AUTH_MODE=none has a user row"""
    if db.query(User).filter(User.id == user_id).first():
        return

    # Nobody signs in as this user, so the password is random and discarded
    db.add(User(id=user_id, username=f"demo{user_id}", password=hash_password(secrets.token_urlsafe(16))))
    db.commit()
    logger.info(f"🌱 Created demo user {user_id}")
