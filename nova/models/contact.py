from sqlalchemy import Column, DateTime, Integer, Text, func

from nova.models.base import Base


class Contact(Base):
    """Model for contact form submissions."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    __table_args__ = (
        # AUTOINCREMENT keeps ids strictly increasing, even after deletes
        {"sqlite_autoincrement": True},
    )
