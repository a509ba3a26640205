"""
Cache-or-fetch resolution of PokéAPI entities.
"""

import re
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from core.logging_config import setup_logger

from .api_client import PokeAPIClient
from .cache_manager import CacheManager
from .errors import CacheError, EntityLookupError, FetchError, InvalidInputError
from .models import ENTITY_MODELS, CacheKey, Entity, EntityKind, NamedResource

logger = setup_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_WHITESPACE = re.compile(r"\s+")


def normalize_name(text: str) -> str:
    """
    Turn user input into the API's naming convention.

    ``"  Mr Mime "`` becomes ``"mr-mime"``.

    Raises:
        InvalidInputError: If nothing is left after trimming
    """
    name = _WHITESPACE.sub("-", text.strip()).lower()
    if not name:
        raise InvalidInputError("a name is required")
    return name


class LookupResolver:
    """Serves lookups from the cache, fetching and storing on a miss."""

    def __init__(self, client: PokeAPIClient, cache: CacheManager):
        self.client = client
        self.cache = cache

    def _load(self, key: CacheKey, model: Type[ModelT]) -> Optional[ModelT]:
        raw = self.cache.get(key)
        if raw is None:
            return None
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable cache entry {key}: {e.error_count()} validation error(s)")
            return None

    def _fetch(self, endpoint: Union[EntityKind, str], name: str, key: CacheKey, model: Type[ModelT]) -> ModelT:
        raw = self.client.fetch(endpoint, name)
        try:
            value = model.model_validate_json(raw)
        except ValidationError as e:
            raise FetchError(f"unexpected response format ({e.error_count()} validation error(s))") from e

        try:
            self.cache.put(key, raw)
        except CacheError as e:
            logger.warning(f"{e}; continuing without caching")
        return value

    def resolve(self, kind: EntityKind, text: str) -> Entity:
        """
        Resolve an entity by user-supplied name.

        Args:
            kind: Entity kind
            text: Name as typed by the user

        Returns:
            The parsed entity model

        Raises:
            InvalidInputError: If the name is empty
            EntityLookupError: If the entity is not cached and cannot be fetched
        """
        name = normalize_name(text)
        key = CacheKey.for_entity(kind, name)
        model = ENTITY_MODELS[kind]

        cached = self._load(key, model)
        if cached is not None:
            logger.debug(f"Resolved {kind.value} '{name}' from cache")
            return cached

        logger.info(f"Cache miss for {kind.value} '{name}', fetching from API")
        try:
            return self._fetch(kind, name, key, model)
        except FetchError as e:
            raise EntityLookupError(kind.value, text, e) from e

    def follow(self, reference: NamedResource, model: Type[ModelT]) -> ModelT:
        """
        Resolve a linked resource through the same cache.

        Args:
            reference: Reference found in another entity
            model: Model to parse the resource into

        Raises:
            EntityLookupError: If the resource is not cached and cannot be fetched
        """
        endpoint = reference.endpoint
        key = CacheKey.for_entity(endpoint, reference.name)

        cached = self._load(key, model)
        if cached is not None:
            return cached

        try:
            return self._fetch(endpoint, reference.name, key, model)
        except FetchError as e:
            raise EntityLookupError(endpoint, reference.name, e) from e
