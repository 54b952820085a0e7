import logging
import random
import re

import pytest

import ticketgen.generators.secure as secure_module
from ticketgen.core.charsets import CHARSETS, HEX
from ticketgen.core.errors import (
    EntropyUnavailable,
    InvalidCharset,
    InvalidLength,
)
from ticketgen.generators import (
    generate_crypto,
    generate_rand_ascii,
    generate_rand_string,
    generate_random_string,
)

ALL_GENERATORS = [
    generate_random_string,
    generate_crypto,
    generate_rand_string,
    generate_rand_ascii,
]


class TestLengthContract:
    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    def test_default_length_in_range(self, generator) -> None:
        rng = random.Random(42)
        for _ in range(50):
            result = generator(rng=rng)
            assert isinstance(result, str)
            assert 8 <= len(result) <= 32

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    def test_default_length_without_rng(self, generator) -> None:
        assert 8 <= len(generator()) <= 32

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    @pytest.mark.parametrize("length", [0, 1, 7, 8, 13, 32, 33, 100])
    def test_explicit_length_is_exact(self, generator, length: int) -> None:
        assert len(generator(length=length)) == length

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    def test_negative_length_rejected(self, generator) -> None:
        with pytest.raises(InvalidLength):
            generator(length=-1)


class TestGenerateRandomString:
    @pytest.mark.parametrize("name", sorted(CHARSETS))
    def test_named_charsets(self, name: str) -> None:
        rng = random.Random(1)
        result = generate_random_string(name, 64, rng)
        assert set(result) <= set(CHARSETS[name])

    def test_default_is_alphanumeric(self) -> None:
        result = generate_random_string(length=200, rng=random.Random(2))
        assert re.fullmatch(r"[A-Za-z0-9]{200}", result)

    def test_hex(self) -> None:
        result = generate_random_string("hex", 40, random.Random(3))
        assert re.fullmatch(r"[0-9a-f]{40}", result)

    def test_literal_charset(self) -> None:
        result = generate_random_string("XY7", 50, random.Random(4))
        assert set(result) <= {"X", "Y", "7"}

    def test_single_character_charset(self) -> None:
        assert generate_random_string("Q", 5) == "QQQQQ"

    def test_same_seed_same_output(self) -> None:
        a = generate_random_string("numeric", 20, random.Random(99))
        b = generate_random_string("numeric", 20, random.Random(99))
        assert a == b

    def test_empty_charset_rejected(self) -> None:
        with pytest.raises(InvalidCharset):
            generate_random_string("", 10)

    def test_non_string_charset_rejected(self) -> None:
        with pytest.raises(InvalidCharset):
            generate_random_string(None, 10)  # type: ignore[arg-type]


class TestGenerateCrypto:
    def test_hex_domain(self) -> None:
        for length in (1, 8, 15, 32, 33):
            result = generate_crypto(length)
            assert re.fullmatch(rf"[0-9a-f]{{{length}}}", result)

    def test_default_is_hex(self) -> None:
        result = generate_crypto()
        assert set(result) <= set(HEX)

    def test_rng_only_picks_length(self) -> None:
        a = generate_crypto(rng=random.Random(5))
        b = generate_crypto(rng=random.Random(5))
        assert len(a) == len(b)

    @pytest.mark.parametrize("error", [OSError, NotImplementedError])
    def test_source_failure_raises_entropy_unavailable(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
        error: type[Exception],
    ) -> None:
        def _failing_token_bytes(n: int) -> bytes:
            raise error("no entropy")

        monkeypatch.setattr(
            secure_module, "token_bytes", _failing_token_bytes
        )
        with caplog.at_level(
            logging.WARNING, logger=secure_module.__name__
        ):
            with pytest.raises(EntropyUnavailable) as exc_info:
                generate_crypto(16)
        assert isinstance(exc_info.value.__cause__, error)
        warnings = [
            r for r in caplog.records if r.levelno == logging.WARNING
        ]
        assert len(warnings) == 1
        message = warnings[0].getMessage()
        assert message == "Secure random source failed: no entropy"

    def test_output_is_not_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            result = generate_crypto(32)
        assert result not in caplog.text

    def test_source_failure_does_not_fall_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _failing_token_bytes(n: int) -> bytes:
            raise OSError("no entropy")

        def _unexpected(*args: object, **kwargs: object) -> None:
            raise AssertionError("fell back to the non-secure source")

        rng = random.Random(0)
        monkeypatch.setattr(
            secure_module, "token_bytes", _failing_token_bytes
        )
        monkeypatch.setattr(rng, "choices", _unexpected)
        monkeypatch.setattr(rng, "getrandbits", _unexpected)
        with pytest.raises(EntropyUnavailable):
            generate_crypto(8, rng)


class TestGenerateRandString:
    def test_numeric_scenario(self) -> None:
        result = generate_rand_string("0123456789", 12)
        assert re.fullmatch(r"[0-9]{12}", result)

    @pytest.mark.parametrize("name", sorted(CHARSETS))
    def test_table_entries(self, name: str) -> None:
        result = generate_rand_string(CHARSETS[name], 64, random.Random(6))
        assert set(result) <= set(CHARSETS[name])

    def test_default_is_alphanumeric(self) -> None:
        result = generate_rand_string(length=200, rng=random.Random(7))
        assert re.fullmatch(r"[A-Za-z0-9]{200}", result)

    def test_charset_is_taken_literally(self) -> None:
        result = generate_rand_string("numeric", 30, random.Random(8))
        assert set(result) <= set("numeric")

    def test_zero_length_is_empty(self) -> None:
        assert generate_rand_string(length=0) == ""

    def test_empty_charset_rejected(self) -> None:
        with pytest.raises(InvalidCharset):
            generate_rand_string("")

    def test_empty_charset_rejected_even_for_zero_length(self) -> None:
        with pytest.raises(InvalidCharset):
            generate_rand_string("", 0)

    def test_index_uses_truncated_draw(self) -> None:
        class _Sequence(random.Random):
            def __init__(self, values: list[float]) -> None:
                super().__init__(0)
                self._values = iter(values)

            def random(self) -> float:
                return next(self._values)

        rng = _Sequence([0.0, 0.24, 0.25, 0.99])
        assert generate_rand_string("abcd", 4, rng) == "aabd"


class TestGenerateRandAscii:
    def test_eight_character_scenario(self) -> None:
        result = generate_rand_ascii(8)
        assert len(result) == 8
        assert all(40 <= ord(ch) <= 126 for ch in result)

    @pytest.mark.slow
    def test_codes_stay_in_range(self) -> None:
        rng = random.Random(9)
        result = generate_rand_ascii(10_000, rng)
        codes = {ord(ch) for ch in result}
        assert min(codes) >= 40
        assert max(codes) <= 126
        assert codes == set(range(40, 127))

    def test_default_codes_in_range(self) -> None:
        result = generate_rand_ascii(rng=random.Random(10))
        assert all(40 <= ord(ch) <= 126 for ch in result)
