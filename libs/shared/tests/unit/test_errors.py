"""Domain Error Unit Tests"""

from libs.shared.src.errors.cache_error import CacheError
from libs.shared.src.errors.compute_error import ComputeError
from libs.shared.src.errors.domain_error import DomainError
from libs.shared.src.errors.invalid_input_error import InvalidInputError
from libs.shared.src.errors.provider_error import ProviderError


class TestDomainErrors:
    """Test error taxonomy"""

    def test_all_derive_from_domain_error(self) -> None:
        for error in (
            InvalidInputError("bad"),
            ProviderError("AAPL"),
            CacheError("k"),
            ComputeError("nan"),
        ):
            assert isinstance(error, DomainError)

    def test_codes(self) -> None:
        assert InvalidInputError("bad").code == "INVALID_INPUT"
        assert ProviderError("AAPL").code == "PROVIDER_ERROR"
        assert CacheError("k").code == "CACHE_ERROR"
        assert ComputeError("nan").code == "COMPUTE_ERROR"

    def test_default_code_is_class_name(self) -> None:
        assert DomainError("oops").code == "DomainError"

    def test_provider_error_message(self) -> None:
        error = ProviderError("AAPL", "timeout")
        assert error.message == "Unable to fetch price history for AAPL: timeout"
        assert error.ticker == "AAPL"
        assert error.reason == "timeout"

    def test_cache_error_keeps_key(self) -> None:
        error = CacheError("correlations/AAPL,MSFT", "denied")
        assert error.key == "correlations/AAPL,MSFT"
        assert "denied" in str(error)

    def test_to_dict(self) -> None:
        assert InvalidInputError("need 2").to_dict() == {
            "code": "INVALID_INPUT",
            "message": "need 2",
        }
