"""
Tests for alias generation strategies.
"""
import pytest

from url_shortener.exceptions import ConfigurationError
from url_shortener.services.hash_strategies import (
    CallableHashGenerator,
    RandomHashGenerator,
    Sha512HashGenerator,
)
from url_shortener.services.hash_factory import (
    HashGeneratorFactory,
    HashGeneratorType,
)


class TestSha512Strategy:
    """Test the default strategy"""

    def test_output_is_alphabetic(self):
        """Test every non-letter is stripped"""
        strategy = Sha512HashGenerator(min_length=6)

        candidate = strategy.generate("http://example.com/page")

        assert candidate.isalpha()
        assert candidate.isascii()

    def test_output_long_enough(self):
        """Test output covers the requested length even for long aliases"""
        strategy = Sha512HashGenerator(min_length=300)

        candidate = strategy.generate("http://example.com/page")

        assert len(candidate) >= 300

    def test_same_url_different_candidates(self):
        """Test the nonce makes repeated calls differ"""
        strategy = Sha512HashGenerator(min_length=6)

        candidates = {strategy.generate("http://example.com")[:6] for _ in range(100)}

        assert len(candidates) > 90

    def test_callable(self):
        strategy = Sha512HashGenerator()
        assert strategy("http://example.com").isalpha()


class TestRandomStrategy:
    """Test the random letters strategy"""

    def test_generates_correct_length(self):
        strategy = RandomHashGenerator(length=8)

        code = strategy.generate("ignored")

        assert len(code) == 8
        assert code.isalpha()


class TestCallableStrategy:

    def test_wraps_function(self):
        strategy = CallableHashGenerator(lambda url: url.upper())
        assert strategy.generate("abc") == "ABC"


class TestHashGeneratorFactory:
    """Test strategy factory"""

    def test_default_is_sha512(self):
        strategy = HashGeneratorFactory.create(length=8)
        assert isinstance(strategy, Sha512HashGenerator)
        assert strategy.min_length == 8

    @pytest.mark.parametrize("generator", [HashGeneratorType.RANDOM, "random"])
    def test_creates_random_strategy(self, generator):
        strategy = HashGeneratorFactory.create(generator, length=4)
        assert isinstance(strategy, RandomHashGenerator)
        assert strategy.length == 4

    def test_creates_sha512_from_name(self):
        strategy = HashGeneratorFactory.create("sha512")
        assert isinstance(strategy, Sha512HashGenerator)

    def test_strategy_instance_used_as_is(self):
        strategy = RandomHashGenerator()
        assert HashGeneratorFactory.create(strategy) is strategy

    def test_wraps_callable(self):
        strategy = HashGeneratorFactory.create(lambda url: "abcdef")
        assert isinstance(strategy, CallableHashGenerator)
        assert strategy.generate("x") == "abcdef"

    @pytest.mark.parametrize("generator", ["md5", 42])
    def test_unknown_generator(self, generator):
        with pytest.raises(ConfigurationError):
            HashGeneratorFactory.create(generator)
