from sqlalchemy.orm import Session
from shortlink.db.models import Link
from shortlink.db import repository
from shortlink.core.exceptions import AliasTaken, AllocationExhausted
from shortlink.utils import aliases
from typing import Optional
import logging


logger = logging.getLogger(__name__)

MAX_ALLOCATION_ATTEMPTS = 10


class LinkService:

    @staticmethod
    def create_link(db: Session, target: str, custom_alias: Optional[str] = None) -> Link:
        target = aliases.validate_target(target)
        if custom_alias:
            return LinkService._create_with_custom_alias(db, target, custom_alias)
        return LinkService._create_with_generated_alias(db, target)

    @staticmethod
    def _create_with_custom_alias(db: Session, target: str, custom_alias: str) -> Link:
        alias = aliases.validate_custom_alias(custom_alias)
        # The probe only saves a doomed insert; the unique constraint decides
        if repository.alias_exists(db, alias):
            logger.warning(f"Custom alias collision: '{alias}'")
            raise AliasTaken()
        try:
            return repository.insert_link(db, alias, target)
        except repository.AliasConflict as e:
            logger.warning(f"Custom alias lost insert race: '{e.alias}'")
            raise AliasTaken()

    @staticmethod
    def _create_with_generated_alias(db: Session, target: str) -> Link:
        for attempt in range(1, MAX_ALLOCATION_ATTEMPTS + 1):
            alias = aliases.generate_alias()
            if repository.alias_exists(db, alias):
                logger.info(f"Alias collision on attempt {attempt}/{MAX_ALLOCATION_ATTEMPTS}")
                continue
            try:
                return repository.insert_link(db, alias, target)
            except repository.AliasConflict as e:
                logger.info(f"Alias '{e.alias}' insert conflict on attempt {attempt}/{MAX_ALLOCATION_ATTEMPTS}")

        logger.error(
            "Alias space saturated: no free %d-character alias after %d attempts",
            aliases.ALIAS_LENGTH, MAX_ALLOCATION_ATTEMPTS,
        )
        raise AllocationExhausted()
