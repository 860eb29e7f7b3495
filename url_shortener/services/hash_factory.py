"""
Factory for creating alias generation strategies.
"""

from enum import Enum
from typing import Any

from url_shortener.exceptions import ConfigurationError
from url_shortener.services.hash_strategies import (
    CallableHashGenerator,
    HashGenerator,
    RandomHashGenerator,
    Sha512HashGenerator,
)


class HashGeneratorType(Enum):
    """Available built-in alias generation strategies"""
    SHA512 = "sha512"
    RANDOM = "random"


class HashGeneratorFactory:
    """Factory turning a configured hash generator into a strategy instance"""

    @classmethod
    def create(cls, generator: Any = None, length: int = 6) -> HashGenerator:
        """
        Create a hash generator.

        Args:
            generator: None (default strategy), a HashGeneratorType or its
                       value, a HashGenerator instance, or any callable
                       taking the long URL and returning a string
            length: Alias length the strategy should at least produce

        Returns:
            A HashGenerator

        Raises:
            ConfigurationError: If the generator is unknown
        """
        if generator is None:
            return Sha512HashGenerator(min_length=length)

        if isinstance(generator, HashGenerator):
            return generator

        if isinstance(generator, (str, HashGeneratorType)):
            try:
                strategy_type = HashGeneratorType(generator)
            except ValueError:
                raise ConfigurationError(f"Unknown hash generator: {generator!r}") from None

            if strategy_type == HashGeneratorType.SHA512:
                return Sha512HashGenerator(min_length=length)
            return RandomHashGenerator(length=length)

        if callable(generator):
            return CallableHashGenerator(generator)

        raise ConfigurationError(
            f"Hash generator must be callable, got {type(generator).__name__}"
        )
