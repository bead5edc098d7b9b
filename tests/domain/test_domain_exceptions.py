#!/usr/bin/env python3

"""Tests for domain exceptions."""

from splitkit.chunking.domain.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    StrategyNotFoundError,
)


class TestDomainExceptions:
    """Test suite for domain exceptions."""

    def test_chunking_domain_error_base(self) -> None:
        error = ChunkingDomainError("Base domain error")

        assert str(error) == "Base domain error"
        assert error.message == "Base domain error"
        assert error.details == {}

    def test_invalid_configuration_error_details(self) -> None:
        error = InvalidConfigurationError("chunk_size must be an integer", {"chunk_size": "x"})

        assert isinstance(error, ChunkingDomainError)
        assert error.details == {"chunk_size": "x"}

    def test_strategy_not_found_error(self) -> None:
        """Test StrategyNotFoundError carries the strategy name."""
        error = StrategyNotFoundError("semantic")

        assert isinstance(error, ChunkingDomainError)
        assert isinstance(error, LookupError)
        assert error.strategy_name == "semantic"
        assert "'semantic'" in str(error)
        assert error.details == {"strategy_name": "semantic"}
