import pytest

from shortlink.core.exceptions import InvalidLength, InvalidTarget, ReservedAlias
from shortlink.utils.aliases import (
    ALIAS_LENGTH,
    ALPHABET,
    generate_alias,
    validate_custom_alias,
    validate_target,
)


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62


def test_generate_alias_shape():
    for _ in range(200):
        alias = generate_alias()
        assert len(alias) == ALIAS_LENGTH
        assert set(alias) <= set(ALPHABET)


@pytest.mark.parametrize("alias", ["abc", "a" * 20, "with space", "ünïcode", "API", "apis"])
def test_validate_custom_alias_accepts(alias):
    assert validate_custom_alias(alias) == alias


@pytest.mark.parametrize("alias", ["", "ab", "a" * 21])
def test_validate_custom_alias_length(alias):
    with pytest.raises(InvalidLength):
        validate_custom_alias(alias)


def test_validate_custom_alias_reserved():
    with pytest.raises(ReservedAlias):
        validate_custom_alias("api")


@pytest.mark.parametrize("target", [
    "https://a.com",
    "http://example.com/path?q=1#frag",
    "HTTPS://EXAMPLE.COM",
])
def test_validate_target_accepts(target):
    assert validate_target(target) == target


@pytest.mark.parametrize("target", [
    None,
    "",
    "not a url",
    "example.com",
    "ftp://example.com",
    "javascript:alert(1)",
    "http://",
    "http://exa mple.com",
    "http://a.com:notaport",
    "http://a.com:99999",
])
def test_validate_target_rejects(target):
    with pytest.raises(InvalidTarget):
        validate_target(target)
