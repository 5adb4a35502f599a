"""
Implementation MongoDB du repository User.

Implemente l'interface IUserRepository sur la collection "users".

Format des documents (compatible avec la base existante du front-end) :
    {
        "_id": ObjectId,
        "username": str,          # unique
        "password": str | absent, # hash bcrypt, absent pour un compte Google
        "googleId": str | absent, # unique si present
        "email": str | absent,    # unique si present
        "favorites": [int],       # IDs TMDB, ordre d'ajout
        "createdAt": datetime,
        "updatedAt": datetime,
    }
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from loguru import logger
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from src.core.entities.user import User
from src.core.exceptions import EmailAlreadyExistsError, UserAlreadyExistsError
from src.core.ports.repositories import IUserRepository
from src.infrastructure.persistence.database import USERS_COLLECTION


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _object_id(user_id: str) -> Optional[ObjectId]:
    """Convertit un ID chaine en ObjectId (None si le format est invalide)."""
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


def _duplicate_error(error: DuplicateKeyError) -> UserAlreadyExistsError:
    """Exception domaine correspondant a l'index unique viole."""
    key_pattern = (error.details or {}).get("keyPattern") or {}
    if "email" in key_pattern:
        return EmailAlreadyExistsError()
    if "googleId" in key_pattern:
        return UserAlreadyExistsError("Google account already linked")
    return UserAlreadyExistsError()


class MongoUserRepository(IUserRepository):
    """
    Repository MongoDB pour les utilisateurs.

    Les mutations de favoris sont des mises a jour atomiques d'un seul document
    ($addToSet, $pull, $set) suivies du retour du document modifie.
    """

    def __init__(self, database: Any) -> None:
        """
        Initialise le repository.

        Args :
            database : Base MongoDB asynchrone (AsyncDatabase ou equivalent)
        """
        self._collection = database[USERS_COLLECTION]

    def _to_entity(self, doc: dict[str, Any]) -> User:
        """Convertit un document MongoDB en entite domaine."""
        return User(
            id=str(doc["_id"]),
            username=doc["username"],
            email=doc.get("email"),
            password_hash=doc.get("password"),
            google_id=doc.get("googleId"),
            favorites=[int(movie_id) for movie_id in doc.get("favorites", [])],
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )

    def _to_document(self, entity: User) -> dict[str, Any]:
        """
        Convertit une entite domaine en document MongoDB.

        Les champs optionnels absents ne sont pas ecrits : les index
        partiels d'unicite ne portent que sur les valeurs presentes.
        """
        now = _now()
        doc: dict[str, Any] = {
            "username": entity.username,
            "favorites": list(entity.favorites),
            "createdAt": entity.created_at or now,
            "updatedAt": entity.updated_at or now,
        }
        if entity.password_hash:
            doc["password"] = entity.password_hash
        if entity.email:
            doc["email"] = entity.email
        if entity.google_id:
            doc["googleId"] = entity.google_id
        return doc

    async def ensure_indexes(self) -> None:
        await self._collection.create_index(
            [("username", ASCENDING)], unique=True, name="username_unique"
        )
        for field_name in ("email", "googleId"):
            await self._collection.create_index(
                [(field_name, ASCENDING)],
                unique=True,
                name=f"{field_name}_unique",
                partialFilterExpression={field_name: {"$type": "string"}},
            )
        logger.debug("Index MongoDB de la collection users verifies")

    async def _find_one(self, query: dict[str, Any]) -> Optional[User]:
        doc = await self._collection.find_one(query)
        return self._to_entity(doc) if doc else None

    async def get_by_id(self, user_id: str) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        return await self._find_one({"_id": oid})

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._find_one({"username": username})

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._find_one({"email": email})

    async def get_by_google_id(self, google_id: str) -> Optional[User]:
        return await self._find_one({"googleId": google_id})

    async def create(self, user: User) -> User:
        doc = self._to_document(user)
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise _duplicate_error(e) from None
        doc["_id"] = result.inserted_id
        return self._to_entity(doc)

    async def _update(self, user_id: str, update: dict[str, Any]) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        update.setdefault("$set", {})["updatedAt"] = _now()
        doc = await self._collection.find_one_and_update(
            {"_id": oid},
            update,
            return_document=ReturnDocument.AFTER,
        )
        return self._to_entity(doc) if doc else None

    async def link_google_account(self, user_id: str, google_id: str) -> Optional[User]:
        try:
            return await self._update(user_id, {"$set": {"googleId": google_id}})
        except DuplicateKeyError:
            raise UserAlreadyExistsError("Google account already linked") from None

    async def add_favorite(self, user_id: str, movie_id: int) -> Optional[User]:
        return await self._update(user_id, {"$addToSet": {"favorites": movie_id}})

    async def remove_favorite(self, user_id: str, movie_id: int) -> Optional[User]:
        return await self._update(user_id, {"$pull": {"favorites": movie_id}})

    async def clear_favorites(self, user_id: str) -> Optional[User]:
        return await self._update(user_id, {"$set": {"favorites": []}})
