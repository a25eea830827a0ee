# Contact form submissions: validation, persistence and listing
import logging
from typing import List
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import String, select, type_coerce
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from nova.core.exceptions import StorageError, ValidationError
from nova.models.contact import Contact
from nova.schemas.contactSchema import ContactRecord

logger = logging.getLogger(__name__)


class ContactService:
    """Writes and reads contact submissions through a caller-owned session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit(self, name: str, email: str, subject: str, message: str) -> int:
        """
        Persist a new contact submission.

        Args:
            name: Sender name
            email: Sender email, accepted as given
            subject: Message subject
            message: Message body

        Returns:
            The identifier assigned by the store

        Raises:
            ValidationError: if any field is empty or not encodable; nothing is written
            StorageError: if the insert or commit fails
        """
        if not name or not email or not subject or not message:
            raise ValidationError("All fields are required")

        contact = Contact(
            name=name,
            email=email,
            subject=subject,
            message=message,
        )
        self.db.add(contact)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"❌ Error inserting contact from {name} <{email}>: {e}")
            raise StorageError("Failed to save contact information") from e
        except UnicodeError as e:
            await self.db.rollback()
            logger.warning(f"Rejected contact from {name!r} <{email!r}>: {e}")
            raise ValidationError("Invalid request body") from e

        logger.info(f"✉️  New contact saved (ID: {contact.id}) from {name} <{email}>")
        return contact.id

    async def list(self) -> List[ContactRecord]:
        """
        Return every stored submission, newest first.
        Rows that fail to decode are logged and skipped.
        """
        # created_at is decoded by the schema so one bad value only drops its own row
        query = select(
            Contact.id,
            Contact.name,
            Contact.email,
            Contact.subject,
            Contact.message,
            type_coerce(Contact.created_at, String).label("created_at"),
        ).order_by(Contact.created_at.desc(), Contact.id.desc())

        try:
            result = await self.db.execute(query)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Error fetching contacts: {e}")
            raise StorageError("Failed to fetch contacts") from e

        contacts = []
        for row in rows:
            try:
                contacts.append(ContactRecord.model_validate(dict(row)))
            except SchemaValidationError as e:
                logger.warning(f"Error decoding contact row {row.get('id')}: {e}")
                continue
        return contacts
