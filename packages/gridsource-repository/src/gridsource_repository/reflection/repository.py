from __future__ import annotations

import importlib
import typing
from typing import Any, Callable, Dict, Optional, Tuple, get_args, get_type_hints

from gridsource_sdk import ErrorCode, RepositoryConfigurationError

from gridsource_repository.common.logger import get_logger

logger = get_logger(__name__)


def _item_type(result_hint: Any) -> Optional[type]:
    """Returns the record type of a paged result annotation such as SearchResults[Product]."""
    generic_metadata = getattr(result_hint, "__pydantic_generic_metadata__", None)
    if generic_metadata and generic_metadata.get("args"):
        candidate = generic_metadata["args"][0]
    elif get_args(result_hint):
        candidate = get_args(result_hint)[0]
    else:
        fields = getattr(result_hint, "model_fields", {})
        items = fields.get("items")
        args = get_args(items.annotation) if items is not None else ()
        candidate = args[0] if args else None
    if isinstance(candidate, typing.TypeVar):
        return None
    return candidate


class RepositorySourceFactory:
    """
    Resolves ``repositoryListMethod`` values into record types and list callables.

    Two forms are accepted:

    - ``"package.module:ClassName.method"``: the class is imported and instantiated
      once through ``instantiate`` (default: calling it without arguments).
    - ``"name.method"``: a repository previously registered under ``name``.
    """

    def __init__(self, instantiate: Optional[Callable[[type], Any]] = None):
        self._instantiate = instantiate or (lambda cls: cls())
        self._repositories: Dict[str, Any] = {}
        self._entity_types: Dict[str, type] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, name: str, repository: Any, entity_type: Optional[type] = None) -> None:
        """Registers a repository object, optionally pinning the type of its records."""
        self._repositories[name] = repository
        if entity_type is not None:
            self._entity_types[name] = entity_type

    def entity_type(self, list_method: str) -> type:
        owner_name, owner, method_name = self._resolve_owner(list_method)
        if owner_name in self._entity_types:
            return self._entity_types[owner_name]

        method = self._method(owner, method_name, list_method)
        try:
            result_hint = get_type_hints(method).get("return")
        except (NameError, TypeError) as exc:
            raise RepositoryConfigurationError(
                f"Cannot read the return type of '{list_method}': {exc}",
                error_code=ErrorCode.RECORD_TYPE_UNRESOLVED,
                details=list_method,
            ) from exc

        record_type = _item_type(result_hint) if result_hint is not None else None
        if record_type is None:
            raise RepositoryConfigurationError(
                f"Cannot determine the record type returned by '{list_method}'",
                error_code=ErrorCode.RECORD_TYPE_UNRESOLVED,
                details=list_method,
            )
        return record_type

    def create(self, list_method: str) -> Callable[[Any], Any]:
        owner_name, owner, method_name = self._resolve_owner(list_method)
        if isinstance(owner, type):
            if owner_name not in self._instances:
                logger.info("Instantiating repository %s", owner_name)
                self._instances[owner_name] = self._instantiate(owner)
            owner = self._instances[owner_name]
        return self._method(owner, method_name, list_method)

    def _resolve_owner(self, list_method: str) -> Tuple[str, Any, str]:
        if not list_method:
            raise RepositoryConfigurationError(
                "No repository list method configured",
                error_code=ErrorCode.REPOSITORY_NOT_CONFIGURED,
                details=list_method,
            )

        module_name, separator, attribute_path = list_method.partition(":")
        owner_name, _, method_name = (attribute_path if separator else list_method).rpartition(".")
        if not owner_name or not method_name:
            raise RepositoryConfigurationError(
                f"Repository list method '{list_method}' must name a repository and a method",
                error_code=ErrorCode.REPOSITORY_METHOD_NOT_FOUND,
                details=list_method,
            )

        if not separator:
            if owner_name not in self._repositories:
                raise RepositoryConfigurationError(
                    f"Unknown repository '{owner_name}'. Available: {list(self._repositories)}",
                    error_code=ErrorCode.REPOSITORY_NOT_FOUND,
                    details=list_method,
                )
            return owner_name, self._repositories[owner_name], method_name

        try:
            owner = importlib.import_module(module_name)
            for part in owner_name.split("."):
                owner = getattr(owner, part)
        except (ImportError, AttributeError) as exc:
            raise RepositoryConfigurationError(
                f"Repository '{module_name}:{owner_name}' cannot be imported: {exc}",
                error_code=ErrorCode.REPOSITORY_NOT_FOUND,
                details=list_method,
            ) from exc
        return f"{module_name}:{owner_name}", owner, method_name

    def _method(self, owner: Any, method_name: str, list_method: str) -> Callable[[Any], Any]:
        method = getattr(owner, method_name, None)
        if not callable(method):
            raise RepositoryConfigurationError(
                f"Repository list method '{list_method}' does not exist",
                error_code=ErrorCode.REPOSITORY_METHOD_NOT_FOUND,
                details=list_method,
            )
        return method
