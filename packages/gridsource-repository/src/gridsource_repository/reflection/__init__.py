from .accessors import ModelAccessorReflector, declared_type
from .attributes import AttributeMetadata, InMemoryAttributeStore
from .extension import ExtensionAttributesReflector
from .guesser import DefaultDataTypeGuesser
from .repository import RepositorySourceFactory

__all__ = [
    "ModelAccessorReflector",
    "declared_type",
    "AttributeMetadata",
    "InMemoryAttributeStore",
    "ExtensionAttributesReflector",
    "DefaultDataTypeGuesser",
    "RepositorySourceFactory",
]
