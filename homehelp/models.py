from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base

# Which providers perform which services (id-based, replaces matching on service names)
provider_services = Table(
    "provider_services",
    Base.metadata,
    Column("provider_id", Integer, ForeignKey("providers.id", ondelete="CASCADE"), primary_key=True),
    Column("service_id", Integer, ForeignKey("services.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    full_name = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)  # E.164
    address = Column(Text, nullable=True)
    emergency_contact = Column(String(255), nullable=True)
    emergency_phone = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Service(Base):
    """Catalog entry for a category of home help (read-only at runtime)"""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    short_description = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(100), nullable=False)
    inclusions = Column(JSON, default=list, nullable=False)  # Ordered list of strings

    providers = relationship("Provider", secondary=provider_services, back_populates="services")


class Provider(Base):
    """
    Catalog entry for a worker who performs one or more services.

    Per-user state such as "is this a favorite" is never stored here; it is
    computed into ProviderResponse for the caller.
    """

    __tablename__ = "providers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    experience = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)
    reviews = Column(Integer, default=0, nullable=False)
    tags = Column(JSON, default=list, nullable=False)

    services = relationship(
        "Service",
        secondary=provider_services,
        back_populates="providers",
        order_by="Service.id",
        lazy="selectin",
    )

    @property
    def service_names(self) -> list[str]:
        return [s.name for s in self.services]


class Booking(Base):
    __tablename__ = "bookings"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted booking
    __table_args__ = (
        Index("ix_bookings_provider_date", "provider_id", "appointment_date"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)

    # Plain integer references: the store does not enforce referential integrity
    user_id = Column(Integer, nullable=False, index=True)
    service_id = Column(Integer, nullable=False)
    provider_id = Column(Integer, nullable=False, index=True)

    appointment_date = Column(DateTime, nullable=False)  # Naive UTC
    notes = Column(Text, nullable=True)

    # scheduled | completed | cancelled
    status = Column(String(20), default="scheduled", nullable=False)

    created_at = Column(DateTime, server_default=func.now())


class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "provider_id", name="uq_favorites_user_provider"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    provider_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Message(Base):
    """Append-only message between a user and a provider"""

    __tablename__ = "messages"
    __table_args__ = (Index("ix_messages_user_provider", "user_id", "provider_id"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    provider_id = Column(Integer, nullable=False)
    content = Column(Text, nullable=False)
    from_user = Column(Boolean, nullable=False)
    timestamp = Column(DateTime, nullable=False)
