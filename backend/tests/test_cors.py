"""Tests for origin allow-list resolution."""

from starlette.applications import Starlette

from warranty_intake.api.cors import EchoCORSMiddleware


def make_middleware(dev_fallback_star: bool = False) -> EchoCORSMiddleware:
    return EchoCORSMiddleware(
        Starlette(),
        allowed_origins=["https://boatmateparts.com", "http://127.0.0.1:5500"],
        dev_fallback_star=dev_fallback_star,
    )


class TestAllowOrigin:
    def test_exact_match(self) -> None:
        assert make_middleware().allow_origin("http://127.0.0.1:5500") == "http://127.0.0.1:5500"

    def test_unlisted_origin_is_omitted(self) -> None:
        assert make_middleware().allow_origin("https://boatmateparts.com.evil.example") == ""

    def test_missing_origin(self) -> None:
        assert make_middleware().allow_origin("") == ""

    def test_dev_fallback_star(self) -> None:
        middleware = make_middleware(dev_fallback_star=True)

        assert middleware.allow_origin("https://evil.example") == "*"
        assert middleware.allow_origin("https://boatmateparts.com") == "https://boatmateparts.com"
