"""Exception types shared across SkillScout modules."""


class SkillScoutError(Exception):
    """Base class for SkillScout errors."""


class UnknownModelError(SkillScoutError, ValueError):
    """Model identifier is not in the registry (raised at construction)."""


class ModelLoadError(SkillScoutError, RuntimeError):
    """Embedding model weights failed to load. Terminal for that model instance."""


class EmbeddingError(SkillScoutError, RuntimeError):
    """Encoding a single text failed."""


class VectorLengthMismatchError(SkillScoutError, ValueError):
    """Vectors passed to a similarity function differ in length."""


__all__ = [
    "SkillScoutError",
    "UnknownModelError",
    "ModelLoadError",
    "EmbeddingError",
    "VectorLengthMismatchError",
]
